# topmark:header:start
#
#   project      : TypedToml
#   file         : __init__.py
#   file_relpath : src/typedtoml/document/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable document model for parsed TOML."""

from __future__ import annotations

from .model import (
    ArrayNode,
    NodeKind,
    ScalarNode,
    TableNode,
    TomlNode,
    build_document,
    build_node,
)

__all__: list[str] = [
    "ArrayNode",
    "NodeKind",
    "ScalarNode",
    "TableNode",
    "TomlNode",
    "build_document",
    "build_node",
]
