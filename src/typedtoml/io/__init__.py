# topmark:header:start
#
#   project      : TypedToml
#   file         : __init__.py
#   file_relpath : src/typedtoml/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for TypedToml.

This package centralizes the helpers that sit between raw TOML sources and the
document model:

- ``readers``: read a TOML file as UTF-8 text, returning ``(text, error)``.
- ``guards``: ``TypeGuard`` predicates for values coming out of tomlkit.
- ``parser``: the tomlkit adapter producing a root table or a single
  ``ParseFailure`` line.
- ``types``: plain-Python TOML shape aliases.

TOML parsing:
    TypedToml uses `tomlkit` for parsing. Documents are unwrapped into plain
    Python values and converted once into immutable nodes; nothing keeps a
    reference to tomlkit objects after loading.

Notes:
    ``parser`` is imported explicitly (``typedtoml.io.parser``) rather than
    re-exported here, because it depends on ``typedtoml.document`` which in
    turn depends on ``guards``.
"""

from __future__ import annotations

from .guards import (
    is_any_list,
    is_int64,
    is_toml_integer,
    is_toml_table,
    is_toml_temporal,
    is_tomlkit_document,
    is_utf8_text,
)
from .readers import decode_toml_bytes, read_toml_text
from .types import TomlTable, TomlTemporal

# --- Exported symbols ---

__all__: list[str] = [
    "TomlTable",
    "TomlTemporal",
    "decode_toml_bytes",
    "is_any_list",
    "is_int64",
    "is_toml_integer",
    "is_toml_table",
    "is_toml_temporal",
    "is_tomlkit_document",
    "is_utf8_text",
    "read_toml_text",
]
