# topmark:header:start
#
#   project      : TypedToml
#   file         : handle.py
#   file_relpath : src/typedtoml/handle.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The caller-visible facade over a parsed TOML document.

A [`TomlHandle`][typedtoml.handle.TomlHandle] owns an immutable root table, or
nothing when loading failed (an *invalid* handle). Handles are created by
[`load_string`][typedtoml.loader.load_string] and
[`load_file`][typedtoml.loader.load_file].

Read operations come in two forms, selected by whether a default is passed:

```python
handle = load_string('port = 8080\\nhost = "example.com"')
handle.get("port", I32)            # checked: 8080, raises on failure
handle.get("port", TEXT, "none")   # defaulted: "none" (kind mismatch)
handle.at_path("servers[0].ip", TEXT, "")
```

Invalid handles behave as empty for defaulted operations, ``has_key()`` and
``keys()``. Checked operations on an invalid handle raise
[`InvalidHandleError`][typedtoml.core.errors.InvalidHandleError].
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, TypeVar, overload

from typedtoml.accessor import getters
from typedtoml.accessor.kinds import BOOL, F32, F64, I32, TEXT
from typedtoml.core.errors import InvalidHandleError
from typedtoml.core.logging import get_logger

if TYPE_CHECKING:
    from typedtoml.accessor.kinds import ScalarKind
    from typedtoml.core.logging import TypedTomlLogger
    from typedtoml.document.model import TableNode

logger: TypedTomlLogger = get_logger(__name__)

T = TypeVar("T")


class _Missing:
    """Marker type for "no default given" (selects the checked form)."""

    def __repr__(self) -> str:
        return "<missing>"


MISSING: Final[_Missing] = _Missing()


class TomlHandle:
    """Typed, read-only access to a TOML document.

    Attributes are private; the document is never mutated after construction.
    Sub-handles returned by [`get_table`][typedtoml.handle.TomlHandle.get_table] and
    [`get_table_at_path`][typedtoml.handle.TomlHandle.get_table_at_path] own an
    independent copy of their table and outlive the parent.
    """

    __slots__ = ("_root",)

    def __init__(self, root: TableNode | None = None) -> None:
        self._root: TableNode | None = root

    @classmethod
    def invalid(cls) -> TomlHandle:
        """Return a handle representing a failed load."""
        return cls(None)

    # --- State ---

    def is_valid(self) -> bool:
        """Return True if the document was loaded successfully."""
        return self._root is not None

    def is_empty(self) -> bool:
        """Return True if the handle is valid and its root table has no keys."""
        return self._root is not None and len(self._root) == 0

    def _require_root(self, what: str) -> TableNode:
        if self._root is None:
            raise InvalidHandleError(f"Cannot read {what}: invalid TOML handle")
        return self._root

    # --- Table operations ---

    def has_key(self, key: str) -> bool:
        """Return True if the root table contains ``key`` (shallow)."""
        return self._root is not None and self._root.contains(key)

    def keys(self) -> list[str]:
        """Return the root table's keys in source order."""
        return self._root.keys() if self._root is not None else []

    def get_table(self, key: str) -> TomlHandle:
        """Return an independent handle on the sub-table stored under ``key``.

        Raises:
            InvalidHandleError: If this handle is invalid.
            TomlKeyError: If ``key`` is absent.
            TomlTypeMismatchError: If the value is not a table.
        """
        root: TableNode = self._require_root(f"table '{key}'")
        return TomlHandle(getters.get_table_checked(root, key).clone())

    def get_table_at_path(self, path: str) -> TomlHandle:
        """Return an independent handle on the table at dotted ``path``.

        Raises:
            InvalidHandleError: If this handle is invalid.
            TomlKeyError: If ``path`` is malformed or does not resolve.
            TomlTypeMismatchError: If the node at ``path`` is not a table.
        """
        root: TableNode = self._require_root(f"table at path '{path}'")
        return TomlHandle(getters.get_table_at_path_checked(root, path).clone())

    # --- Generic typed getters ---

    @overload
    def get(self, key: str, kind: ScalarKind[T]) -> T: ...

    @overload
    def get(self, key: str, kind: ScalarKind[T], default: T) -> T: ...

    def get(self, key: str, kind: ScalarKind[T], default: T | _Missing = MISSING) -> T:
        """Return the value stored under ``key`` as ``kind``.

        Without ``default`` this is the checked form: it raises
        ``InvalidHandleError``, ``TomlKeyError`` or ``TomlTypeMismatchError``.
        With ``default`` it never raises and returns ``default`` on any failure.
        """
        if isinstance(default, _Missing):
            return getters.get_value_checked(self._require_root(f"key '{key}'"), key, kind)
        if self._root is None:
            return default
        return getters.get_value(self._root, key, kind, default)

    def get_array(self, key: str, kind: ScalarKind[T]) -> list[T]:
        """Return the homogeneous array stored under ``key``.

        Raises:
            InvalidHandleError: If this handle is invalid.
            TomlKeyError: If ``key`` is absent.
            TomlTypeMismatchError: If the value is not an array of ``kind`` scalars.
        """
        return getters.get_array_checked(self._require_root(f"array '{key}'"), key, kind)

    def get_array_at_path(self, path: str, kind: ScalarKind[T]) -> list[T]:
        """Return the homogeneous array at dotted ``path``; the last segment may be indexed.

        Raises:
            InvalidHandleError: If this handle is invalid.
            TomlKeyError: If ``path`` is malformed or does not resolve.
            TomlTypeMismatchError: If the value is not an array of ``kind`` scalars.
        """
        root: TableNode = self._require_root(f"array at path '{path}'")
        return getters.get_array_at_path_checked(root, path, kind)

    @overload
    def at_path(self, path: str, kind: ScalarKind[T]) -> T: ...

    @overload
    def at_path(self, path: str, kind: ScalarKind[T], default: T) -> T: ...

    def at_path(self, path: str, kind: ScalarKind[T], default: T | _Missing = MISSING) -> T:
        """Return the value at dotted ``path`` as ``kind``.

        Without ``default`` this is the checked form. With ``default`` any failure
        (including a malformed path) yields ``default``.
        """
        if isinstance(default, _Missing):
            root: TableNode = self._require_root(f"path '{path}'")
            return getters.get_path_value_checked(root, path, kind)
        if self._root is None:
            return default
        return getters.get_path_value(self._root, path, kind, default)

    # --- Convenience aliases ---

    def get_bool(self, key: str, default: bool | _Missing = MISSING) -> bool:
        """Shorthand for ``get(key, BOOL[, default])``."""
        return self.get(key, BOOL, default)  # type: ignore[arg-type]

    def get_int(self, key: str, default: int | _Missing = MISSING) -> int:
        """Shorthand for ``get(key, I32[, default])``."""
        return self.get(key, I32, default)  # type: ignore[arg-type]

    def get_float(self, key: str, default: float | _Missing = MISSING) -> float:
        """Checked reads use F32; a ``default`` switches to F64."""
        kind = F32 if isinstance(default, _Missing) else F64
        return self.get(key, kind, default)  # type: ignore[arg-type]

    def get_string(self, key: str, default: str | _Missing = MISSING) -> str:
        """Shorthand for ``get(key, TEXT[, default])``."""
        return self.get(key, TEXT, default)  # type: ignore[arg-type]

    def at_path_bool(self, path: str, default: bool | _Missing = MISSING) -> bool:
        """Shorthand for ``at_path(path, BOOL[, default])``."""
        return self.at_path(path, BOOL, default)  # type: ignore[arg-type]

    def at_path_int(self, path: str, default: int | _Missing = MISSING) -> int:
        """Shorthand for ``at_path(path, I32[, default])``."""
        return self.at_path(path, I32, default)  # type: ignore[arg-type]

    def at_path_float(self, path: str, default: float | _Missing = MISSING) -> float:
        """Checked reads use F32; a ``default`` switches to F64."""
        kind = F32 if isinstance(default, _Missing) else F64
        return self.at_path(path, kind, default)  # type: ignore[arg-type]

    def at_path_string(self, path: str, default: str | _Missing = MISSING) -> str:
        """Shorthand for ``at_path(path, TEXT[, default])``."""
        return self.at_path(path, TEXT, default)  # type: ignore[arg-type]

    # --- Python protocol ---

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has_key(key)

    def __copy__(self) -> TomlHandle:
        return TomlHandle(self._root.clone() if self._root is not None else None)

    def __deepcopy__(self, memo: dict[int, Any]) -> TomlHandle:
        return self.__copy__()

    def __repr__(self) -> str:
        if self._root is None:
            return "TomlHandle(<invalid>)"
        return f"TomlHandle(keys={self._root.keys()!r})"
