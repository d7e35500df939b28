# topmark:header:start
#
#   project      : TypedToml
#   file         : __init__.py
#   file_relpath : src/typedtoml/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core primitives shared across TypedToml.

The ``typedtoml.core`` package provides small building blocks that are safe to
import from anywhere in the codebase (document model, accessors, loader, CLI,
tests) without pulling in CLI concerns.

Included modules:

- ``errors``
  The exception hierarchy raised by checked accessors and the path parser.

- ``logging``
  The TypedToml logger class with a TRACE level, a colored formatter, and an
  opt-in ``setup_logging()`` honoring ``TYPEDTOML_LOG_LEVEL``.
"""

from __future__ import annotations
