# topmark:header:start
#
#   project      : TypedToml
#   file         : errors.py
#   file_relpath : src/typedtoml/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the TypedToml library.

Usage:
    *Checked* accessors raise a [`TomlAccessError`][typedtoml.core.errors.TomlAccessError]
    subclass when their precondition does not hold (missing key, wrong kind, non-table
    node, invalid handle). These are programmer errors and are never downgraded to a
    default value.

    *Defaulted* accessors never raise; they return the caller's fallback instead.

Hierarchy:
    ```text
    TypedTomlError
    ├── TomlAccessError
    │   ├── TomlKeyError           (also a KeyError)
    │   ├── TomlTypeMismatchError  (also a TypeError)
    │   └── InvalidHandleError
    ├── InvalidPathError           (also a ValueError)
    └── DocumentBuildError         (also a ValueError)
    ```
"""

from __future__ import annotations


class TypedTomlError(Exception):
    """Base class for all TypedToml errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return self.message


class TomlAccessError(TypedTomlError):
    """A checked accessor was called with an unmet precondition."""


class TomlKeyError(TomlAccessError, KeyError):
    """The requested key or path does not resolve to a node."""


class TomlTypeMismatchError(TomlAccessError, TypeError):
    """The resolved node is not of the requested kind."""


class InvalidHandleError(TomlAccessError):
    """A checked accessor was called on a handle whose load failed."""


class InvalidPathError(TypedTomlError, ValueError):
    """A dotted path does not follow the ``key[index].key`` grammar."""


class DocumentBuildError(TypedTomlError, ValueError):
    """Parsed TOML data cannot be represented in the document model."""
