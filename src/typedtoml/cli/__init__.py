# topmark:header:start
#
#   project      : TypedToml
#   file         : __init__.py
#   file_relpath : src/typedtoml/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypedToml CLI package.

This package groups the Click command definitions and supporting utilities
for the ``typedtoml`` command-line interface, a thin shell over the library's
loading and typed-access operations.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        typedtoml = "typedtoml.cli.main:cli"

All subcommands live in [`typedtoml.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
