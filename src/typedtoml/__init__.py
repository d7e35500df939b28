# topmark:header:start
#
#   project      : TypedToml
#   file         : __init__.py
#   file_relpath : src/typedtoml/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypedToml package.

TypedToml is a typed, read-only accessor facade over parsed TOML documents.
It loads TOML from a file or string into an immutable document and exposes
checked and defaulted getters for scalars, homogeneous arrays, dotted paths
and nested tables, with strict (non-coercing) type matching.

Example:
    ```python
    from typedtoml import I32, TEXT, load_string

    doc = load_string('[[servers]]\\nname = "primary"\\nport = 8080\\n')
    doc.at_path("servers[0].port", I32)          # 8080
    doc.at_path("servers[1].name", TEXT, "none")  # "none"
    ```
"""

from __future__ import annotations

from typedtoml.accessor.kinds import BOOL, F32, F64, I32, I64, SCALAR_KINDS, TEXT, ScalarKind
from typedtoml.core.errors import (
    InvalidHandleError,
    InvalidPathError,
    TomlAccessError,
    TomlKeyError,
    TomlTypeMismatchError,
    TypedTomlError,
)
from typedtoml.document.model import NodeKind
from typedtoml.handle import TomlHandle
from typedtoml.io.parser import ParseFailure
from typedtoml.loader import load_file, load_string

__all__: list[str] = [
    "BOOL",
    "F32",
    "F64",
    "I32",
    "I64",
    "SCALAR_KINDS",
    "TEXT",
    "InvalidHandleError",
    "InvalidPathError",
    "NodeKind",
    "ParseFailure",
    "ScalarKind",
    "TomlAccessError",
    "TomlHandle",
    "TomlKeyError",
    "TomlTypeMismatchError",
    "TypedTomlError",
    "load_file",
    "load_string",
]
