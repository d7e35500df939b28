# topmark:header:start
#
#   project      : TypedToml
#   file         : getters.py
#   file_relpath : src/typedtoml/accessor/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typed value getters for document tables.

Two families of getters exist:
- *Defaulted* getters: return the caller's default on any failure (missing key,
  kind mismatch, malformed path) and only emit **debug** logs.
- *Checked* getters: raise a
  [`TomlAccessError`][typedtoml.core.errors.TomlAccessError] subclass naming the
  key or path and the expected kind. Failures are never downgraded to a default.

Every getter applies the strict matching rule of
[`ScalarKind.matches`][typedtoml.accessor.kinds.ScalarKind.matches].
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar, cast

from typedtoml.core.errors import InvalidPathError, TomlKeyError, TomlTypeMismatchError
from typedtoml.core.logging import get_logger
from typedtoml.document.model import ScalarNode

from .path import parse_path, resolve_path, walk_segments

if TYPE_CHECKING:
    from typedtoml.core.logging import TypedTomlLogger
    from typedtoml.document.model import ArrayNode, TableNode, TomlNode

    from .kinds import ScalarKind

logger: TypedTomlLogger = get_logger(__name__)

T = TypeVar("T")


def _describe(node: TomlNode) -> str:
    return node.kind.value


# --- Defaulted getters ---


def get_value(table: TableNode, key: str, kind: ScalarKind[T], default: T) -> T:
    """Return the value stored under ``key``, or ``default``.

    Args:
        table (TableNode): Table to query (shallow lookup).
        key (str): Key to extract.
        kind (ScalarKind[T]): Expected caller kind.
        default (T): Returned when the key is absent or the value is of another kind.

    Returns:
        T: The converted value or ``default``.
    """
    node: TomlNode | None = table.child(key)
    if isinstance(node, ScalarNode) and kind.matches(node):
        return kind.convert(node)
    logger.debug(
        "Key %r is %s, not %s; returning default (%r)",
        key,
        "missing" if node is None else _describe(node),
        kind.type_name,
        default,
    )
    return default


def get_path_value(table: TableNode, path: str, kind: ScalarKind[T], default: T) -> T:
    """Return the value at dotted ``path``, or ``default``.

    Malformed paths, missing keys, out-of-bounds indices and kind mismatches all
    yield ``default``; they cannot be told apart.
    """
    node: TomlNode | None = resolve_path(table, path)
    if isinstance(node, ScalarNode) and kind.matches(node):
        return kind.convert(node)
    logger.debug(
        "Path %r is %s, not %s; returning default (%r)",
        path,
        "unresolved" if node is None else _describe(node),
        kind.type_name,
        default,
    )
    return default


# --- Checked getters: scalar values ---


def get_value_checked(table: TableNode, key: str, kind: ScalarKind[T]) -> T:
    """Return the value stored under ``key``.

    Raises:
        TomlKeyError: If ``key`` is not in ``table``.
        TomlTypeMismatchError: If the value is not of ``kind``.
    """
    node: TomlNode | None = table.child(key)
    if node is None:
        raise TomlKeyError(f"Key '{key}' not found in TOML document")
    if not (isinstance(node, ScalarNode) and kind.matches(node)):
        raise TomlTypeMismatchError(
            f"Key '{key}' is not of type {kind.type_name} "
            f"(expected {kind.name}, got {_describe(node)})"
        )
    return kind.convert(node)


def _resolve_checked(table: TableNode, path: str) -> TomlNode:
    try:
        segments = parse_path(path)
    except InvalidPathError as exc:
        raise TomlKeyError(f"Path '{path}' not found in TOML document ({exc.message})") from exc
    node: TomlNode | None = walk_segments(table, segments)
    if node is None:
        raise TomlKeyError(f"Path '{path}' not found in TOML document")
    return node


def get_path_value_checked(table: TableNode, path: str, kind: ScalarKind[T]) -> T:
    """Return the value at dotted ``path``.

    Raises:
        TomlKeyError: If ``path`` is malformed or does not resolve.
        TomlTypeMismatchError: If the value is not of ``kind``.
    """
    node: TomlNode = _resolve_checked(table, path)
    if not (isinstance(node, ScalarNode) and kind.matches(node)):
        raise TomlTypeMismatchError(
            f"Path '{path}' is not of type {kind.type_name} "
            f"(expected {kind.name}, got {_describe(node)})"
        )
    return kind.convert(node)


# --- Checked getters: arrays and tables ---


def _homogeneous_items(node: TomlNode, what: str, kind: ScalarKind[T]) -> list[T]:
    array: ArrayNode | None = node.as_array()
    if array is None:
        raise TomlTypeMismatchError(f"{what} is not an array (got {_describe(node)})")
    if not array.is_homogeneous(kind.node_kind):
        raise TomlTypeMismatchError(
            f"{what} is not a homogeneous {kind.type_name} array (expected {kind.name})"
        )
    # is_homogeneous() guarantees scalars of the right kind
    return [kind.convert(cast("ScalarNode", item)) for item in array]


def get_array_checked(table: TableNode, key: str, kind: ScalarKind[T]) -> list[T]:
    """Return the homogeneous array stored under ``key`` as a list.

    Elements keep their array order. An empty array is valid for every kind.

    Raises:
        TomlKeyError: If ``key`` is not in ``table``.
        TomlTypeMismatchError: If the value is not an array, or not every element
            is a scalar of ``kind``.
    """
    node: TomlNode | None = table.child(key)
    if node is None:
        raise TomlKeyError(f"Key '{key}' not found in TOML document")
    return _homogeneous_items(node, f"Key '{key}'", kind)


def get_array_at_path_checked(table: TableNode, path: str, kind: ScalarKind[T]) -> list[T]:
    """Return the homogeneous array at dotted ``path`` as a list.

    The last segment may carry indices, e.g. ``matrix[1]`` for a nested array.

    Raises:
        TomlKeyError: If ``path`` is malformed or does not resolve.
        TomlTypeMismatchError: If the node is not a homogeneous ``kind`` array.
    """
    return _homogeneous_items(_resolve_checked(table, path), f"Path '{path}'", kind)


def get_table_checked(table: TableNode, key: str) -> TableNode:
    """Return the sub-table stored under ``key``.

    Raises:
        TomlKeyError: If ``key`` is not in ``table``.
        TomlTypeMismatchError: If the value is not a table.
    """
    node: TomlNode | None = table.child(key)
    if node is None:
        raise TomlKeyError(f"Key '{key}' not found in TOML document")
    sub: TableNode | None = node.as_table()
    if sub is None:
        raise TomlTypeMismatchError(f"Key '{key}' is not a table (got {_describe(node)})")
    return sub


def get_table_at_path_checked(table: TableNode, path: str) -> TableNode:
    """Return the table at dotted ``path``.

    Raises:
        TomlKeyError: If ``path`` is malformed or does not resolve.
        TomlTypeMismatchError: If the node at ``path`` is not a table.
    """
    node: TomlNode = _resolve_checked(table, path)
    sub: TableNode | None = node.as_table()
    if sub is None:
        raise TomlTypeMismatchError(f"Path '{path}' is not a table (got {_describe(node)})")
    return sub
