# topmark:header:start
#
#   project      : TypedToml
#   file         : __init__.py
#   file_relpath : src/typedtoml/accessor/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typed accessors over the document model.

- ``kinds``: the six caller scalar kinds (``BOOL``, ``I32``, ``I64``, ``F32``,
  ``F64``, ``TEXT``) and their strict matching/conversion rules.
- ``path``: dotted-path parsing (``a.b[0].c``) and resolution.
- ``getters``: checked and defaulted getters on a ``TableNode``.
"""

from __future__ import annotations

from .getters import (
    get_array_at_path_checked,
    get_array_checked,
    get_path_value,
    get_path_value_checked,
    get_table_at_path_checked,
    get_table_checked,
    get_value,
    get_value_checked,
)
from .kinds import BOOL, F32, F64, I32, I64, SCALAR_KINDS, TEXT, ScalarKind, kind_from_name
from .path import PathSegment, parse_path, resolve_path

__all__: list[str] = [
    "BOOL",
    "F32",
    "F64",
    "I32",
    "I64",
    "SCALAR_KINDS",
    "TEXT",
    "PathSegment",
    "ScalarKind",
    "get_array_at_path_checked",
    "get_array_checked",
    "get_path_value",
    "get_path_value_checked",
    "get_table_at_path_checked",
    "get_table_checked",
    "get_value",
    "get_value_checked",
    "kind_from_name",
    "parse_path",
    "resolve_path",
]
