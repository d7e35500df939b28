# topmark:header:start
#
#   project      : TypedToml
#   file         : __main__.py
#   file_relpath : src/typedtoml/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running TypedToml via ``python -m typedtoml``.

Equivalent to running the ``typedtoml`` console script; it delegates directly
to :func:`typedtoml.cli.main.cli`.

Examples:
    Read a value from a TOML file::

        python -m typedtoml get config.toml server.port --type i32
"""

from __future__ import annotations

from typedtoml.cli.main import cli

if __name__ == "__main__":
    cli()
