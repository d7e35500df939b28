# topmark:header:start
#
#   project      : TypedToml
#   file         : path.py
#   file_relpath : src/typedtoml/accessor/path.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dotted-path parsing and resolution.

Grammar:

```text
path       := segment ('.' segment)*
segment    := identifier index*
identifier := non-empty run of characters other than '.' and '['
index      := '[' ASCII-digit+ ']'
```

Examples: ``server.port``, ``servers[1].ip``, ``matrix[0][2]``.

Resolution starts at the root table. For each segment the identifier is looked
up in the current table, then each index is applied to the array found there;
if more segments follow, the node reached must be a table. Resolution either
reaches a node or fails as a whole; malformed paths fail the same way as
missing ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from typedtoml.core.errors import InvalidPathError
from typedtoml.core.logging import get_logger

if TYPE_CHECKING:
    from typedtoml.core.logging import TypedTomlLogger
    from typedtoml.document.model import TableNode, TomlNode

logger: TypedTomlLogger = get_logger(__name__)

PATH_SEPARATOR: Final[str] = "."
INDEX_OPEN: Final[str] = "["
INDEX_CLOSE: Final[str] = "]"


@dataclass(frozen=True, slots=True)
class PathSegment:
    """One ``identifier[i][j]...`` step of a dotted path."""

    key: str
    indices: tuple[int, ...] = ()

    def __str__(self) -> str:
        return self.key + "".join(f"[{i}]" for i in self.indices)


def _parse_indices(text: str, *, path: str) -> tuple[int, ...]:
    """Parse a run of ``[n]`` suffixes; ``text`` must start with ``[`` or be empty."""
    indices: list[int] = []
    pos: int = 0
    while pos < len(text):
        if text[pos] != INDEX_OPEN:
            raise InvalidPathError(f"Unexpected text after index in path '{path}'")
        close: int = text.find(INDEX_CLOSE, pos + 1)
        if close < 0:
            raise InvalidPathError(f"Missing '{INDEX_CLOSE}' in path '{path}'")
        digits: str = text[pos + 1 : close]
        # str.isdigit() also accepts non-ASCII digits such as '²'
        if not digits or not (digits.isascii() and digits.isdigit()):
            raise InvalidPathError(f"Invalid array index '{digits}' in path '{path}'")
        indices.append(int(digits))
        pos = close + 1
    return tuple(indices)


def _parse_segment(raw: str, *, path: str) -> PathSegment:
    open_at: int = raw.find(INDEX_OPEN)
    key: str = raw if open_at < 0 else raw[:open_at]
    if not key:
        raise InvalidPathError(f"Empty key in path '{path}'")
    if open_at < 0:
        return PathSegment(key)
    return PathSegment(key, _parse_indices(raw[open_at:], path=path))


def parse_path(path: str) -> tuple[PathSegment, ...]:
    """Split a dotted path into segments.

    Args:
        path (str): A path such as ``"servers[0].name"``.

    Returns:
        tuple[PathSegment, ...]: The parsed segments, in order.

    Raises:
        InvalidPathError: On an empty path, an empty segment (including a leading
            or trailing ``.``), a missing ``]``, a non-digit or negative index, or
            text following an index inside a segment.
    """
    if not path:
        raise InvalidPathError("Empty path")
    return tuple(_parse_segment(raw, path=path) for raw in path.split(PATH_SEPARATOR))


def walk_segments(root: TableNode, segments: tuple[PathSegment, ...]) -> TomlNode | None:
    """Walk parsed ``segments`` from ``root``; return the node reached or ``None``."""
    node: TomlNode = root
    for segment in segments:
        table: TableNode | None = node.as_table()
        if table is None:
            logger.trace("Cannot descend into non-table before '%s'", segment)
            return None
        child: TomlNode | None = table.child(segment.key)
        if child is None:
            logger.trace("Key '%s' not found", segment.key)
            return None
        for index in segment.indices:
            array = child.as_array()
            if array is None:
                logger.trace("Cannot index non-array '%s' with [%d]", segment.key, index)
                return None
            child = array.at(index)
            if child is None:
                logger.trace("Index [%d] out of bounds in '%s'", index, segment)
                return None
        node = child
    return node


def resolve_path(root: TableNode, path: str) -> TomlNode | None:
    """Resolve a dotted path against a root table.

    Args:
        root (TableNode): Table to start from.
        path (str): Dotted path with optional ``[n]`` indices.

    Returns:
        TomlNode | None: The node at ``path`` (of any kind), or ``None`` when the path
        is malformed or does not resolve.
    """
    try:
        segments: tuple[PathSegment, ...] = parse_path(path)
    except InvalidPathError as exc:
        logger.debug("Malformed path %r: %s", path, exc)
        return None
    return walk_segments(root, segments)
