# topmark:header:start
#
#   project      : TypedToml
#   file         : model.py
#   file_relpath : src/typedtoml/document/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable document model for parsed TOML.

A document is a tree with exactly one root, always a
[`TableNode`][typedtoml.document.model.TableNode].
Every node is one of:

- ``TableNode``: ordered ``(key, node)`` members with unique keys,
- ``ArrayNode``: an ordered tuple of child nodes,
- ``ScalarNode``: a tagged ``(kind, value)`` leaf.

All node classes are frozen dataclasses holding tuples, so a tree is never
mutated after [`build_document`][typedtoml.document.model.build_document]
returns and may be shared across threads for reading.

The ``as_*`` narrowers return ``None`` on a kind mismatch instead of raising;
strict kind checks are the accessor layer's job.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from typedtoml.core.errors import DocumentBuildError
from typedtoml.core.logging import get_logger
from typedtoml.io.guards import (
    is_any_list,
    is_int64,
    is_toml_integer,
    is_toml_table,
    is_toml_temporal,
    is_utf8_text,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from typedtoml.core.logging import TypedTomlLogger
    from typedtoml.io.types import TomlTemporal

logger: TypedTomlLogger = get_logger(__name__)


class NodeKind(str, Enum):
    """The TOML value category of a node."""

    TABLE = "table"
    ARRAY = "array"
    BOOL = "bool"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    OTHER = "other"  # date-time, local date, local time

    @property
    def is_scalar(self) -> bool:
        """Return True for leaf kinds (everything except tables and arrays)."""
        return self not in (NodeKind.TABLE, NodeKind.ARRAY)


class TomlNode:
    """Base class of all document nodes.

    Subclasses override the narrower matching their own kind.
    """

    __slots__ = ()

    @property
    def kind(self) -> NodeKind:
        """The node's kind."""
        raise NotImplementedError

    def as_bool(self) -> bool | None:
        """Return the boolean payload, or ``None`` if this is not a BOOL scalar."""
        return None

    def as_int(self) -> int | None:
        """Return the integer payload, or ``None`` if this is not an INTEGER scalar."""
        return None

    def as_float(self) -> float | None:
        """Return the float payload, or ``None`` if this is not a FLOAT scalar."""
        return None

    def as_string(self) -> str | None:
        """Return the string payload, or ``None`` if this is not a STRING scalar."""
        return None

    def as_array(self) -> ArrayNode | None:
        """Return this node as an array, or ``None``."""
        return None

    def as_table(self) -> TableNode | None:
        """Return this node as a table, or ``None``."""
        return None

    def clone(self) -> TomlNode:
        """Return an independent deep copy of this node."""
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class ScalarNode(TomlNode):
    """A leaf value tagged with its kind."""

    node_kind: NodeKind
    value: bool | int | float | str | TomlTemporal

    @property
    def kind(self) -> NodeKind:
        """The node's kind."""
        return self.node_kind

    def as_bool(self) -> bool | None:
        """Return the boolean payload, or ``None`` if this is not a BOOL scalar."""
        if self.node_kind is NodeKind.BOOL and isinstance(self.value, bool):
            return self.value
        return None

    def as_int(self) -> int | None:
        """Return the integer payload, or ``None`` if this is not an INTEGER scalar."""
        if self.node_kind is NodeKind.INTEGER and is_toml_integer(self.value):
            return self.value
        return None

    def as_float(self) -> float | None:
        """Return the float payload, or ``None`` if this is not a FLOAT scalar."""
        if self.node_kind is NodeKind.FLOAT and isinstance(self.value, float):
            return self.value
        return None

    def as_string(self) -> str | None:
        """Return the string payload, or ``None`` if this is not a STRING scalar."""
        if self.node_kind is NodeKind.STRING and isinstance(self.value, str):
            return self.value
        return None

    def clone(self) -> ScalarNode:
        """Return a copy of this scalar (payloads are immutable)."""
        return ScalarNode(self.node_kind, self.value)


@dataclass(frozen=True, slots=True)
class ArrayNode(TomlNode):
    """An ordered sequence of child nodes."""

    items: tuple[TomlNode, ...] = ()

    @property
    def kind(self) -> NodeKind:
        """The node's kind."""
        return NodeKind.ARRAY

    def as_array(self) -> ArrayNode:
        """Return this node as an array."""
        return self

    def len(self) -> int:
        """Return the number of elements."""
        return len(self.items)

    def at(self, index: int) -> TomlNode | None:
        """Return the element at ``index``, or ``None`` when out of bounds.

        Negative indices are out of bounds; they do not count from the end.
        """
        if 0 <= index < len(self.items):
            return self.items[index]
        return None

    def is_homogeneous(self, kind: NodeKind) -> bool:
        """Return True if every element is a scalar of ``kind``.

        An empty array is homogeneous in every kind.
        """
        return all(isinstance(item, ScalarNode) and item.kind is kind for item in self.items)

    def clone(self) -> ArrayNode:
        """Return an independent deep copy of this array."""
        return ArrayNode(tuple(item.clone() for item in self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[TomlNode]:
        return iter(self.items)


@dataclass(frozen=True, slots=True)
class TableNode(TomlNode):
    """An ordered mapping from keys to child nodes.

    ``members`` preserves source order for enumeration; lookups go through a
    read-only index built once at construction.
    """

    members: tuple[tuple[str, TomlNode], ...] = ()
    _index: Mapping[str, TomlNode] = field(
        init=False, repr=False, compare=False, hash=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        index: dict[str, TomlNode] = {}
        for key, node in self.members:
            if key in index:
                raise DocumentBuildError(f"Duplicate key '{key}' in table")
            index[key] = node
        object.__setattr__(self, "_index", index)

    @property
    def kind(self) -> NodeKind:
        """The node's kind."""
        return NodeKind.TABLE

    def as_table(self) -> TableNode:
        """Return this node as a table."""
        return self

    def contains(self, key: str) -> bool:
        """Return True if ``key`` is a direct member of this table."""
        return key in self._index

    def child(self, key: str) -> TomlNode | None:
        """Return the member stored under ``key``, or ``None``."""
        return self._index.get(key)

    def entries(self) -> tuple[tuple[str, TomlNode], ...]:
        """Return ``(key, node)`` members in source order."""
        return self.members

    def keys(self) -> list[str]:
        """Return member keys in source order."""
        return [key for key, _ in self.members]

    def clone(self) -> TableNode:
        """Return an independent deep copy of this table."""
        return TableNode(tuple((key, node.clone()) for key, node in self.members))

    def __len__(self) -> int:
        return len(self.members)


# --- Construction from tomlkit's unwrapped values ---


def build_node(value: object, *, where: str = "") -> TomlNode:
    """Convert one unwrapped TOML value into a document node.

    Args:
        value (object): A value produced by ``tomlkit.TOMLDocument.unwrap()``.
        where (str): Dotted location of ``value``, used in error messages.

    Returns:
        TomlNode: The corresponding node.

    Raises:
        DocumentBuildError: If the value cannot be represented (integer outside the
            signed 64-bit range, text that is not valid UTF-8, unknown type).
    """
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return ScalarNode(NodeKind.BOOL, value)
    if is_toml_integer(value):
        if not is_int64(value):
            raise DocumentBuildError(f"Integer out of 64-bit range at '{where}': {value}")
        return ScalarNode(NodeKind.INTEGER, value)
    if isinstance(value, float):
        return ScalarNode(NodeKind.FLOAT, value)
    if isinstance(value, str):
        if not is_utf8_text(value):
            raise DocumentBuildError(f"String at '{where}' is not valid UTF-8")
        return ScalarNode(NodeKind.STRING, value)
    if is_toml_temporal(value):
        return ScalarNode(NodeKind.OTHER, value)
    if is_toml_table(value):
        return build_table(value, where=where)
    if is_any_list(value):
        return ArrayNode(
            tuple(build_node(item, where=f"{where}[{i}]") for i, item in enumerate(value))
        )
    raise DocumentBuildError(f"Unsupported TOML value at '{where}': {type(value).__name__}")


def build_table(raw: Mapping[str, Any], *, where: str = "") -> TableNode:
    """Convert an unwrapped TOML table into a `TableNode`, preserving key order."""
    members: list[tuple[str, TomlNode]] = []
    for key, value in raw.items():
        if not is_utf8_text(key):
            raise DocumentBuildError(f"Key in '{where}' is not valid UTF-8")
        child_where: str = f"{where}.{key}" if where else key
        members.append((key, build_node(value, where=child_where)))
    return TableNode(tuple(members))


def build_document(raw: Mapping[str, Any]) -> TableNode:
    """Build the root table of a document from unwrapped TOML data.

    Args:
        raw (Mapping[str, Any]): The top-level table as plain Python values.

    Returns:
        TableNode: The immutable root table.

    Raises:
        DocumentBuildError: If any value cannot be represented in the model.
    """
    root: TableNode = build_table(raw)
    logger.trace("Built document with %d root key(s)", len(root))
    return root
