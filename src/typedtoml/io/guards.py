# topmark:header:start
#
#   project      : TypedToml
#   file         : guards.py
#   file_relpath : src/typedtoml/io/guards.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type guards for values coming out of TOML parsing.

This module provides `TypeGuard`-based predicates that help Pyright narrow runtime
values produced by `tomlkit` (both its ``unwrap()``-ed plain Python values and
its own document type) before they are converted into the document model.
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING, Any, Final, TypeGuard

from tomlkit import TOMLDocument

if TYPE_CHECKING:
    from .types import TomlTable, TomlTemporal

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# --- Type guards / narrowers: pure Python ---


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a ``dict[str, Any]``.
    """
    return isinstance(obj, dict)


def is_any_list(obj: object) -> TypeGuard[list[Any]]:
    """Type guard for a generic list value.

    Checks only that the value is a ``list``; does not validate item types.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[list[Any]]: True if obj is a list.
    """
    return isinstance(obj, list)


def is_toml_integer(obj: object) -> TypeGuard[int]:
    """Type guard for a TOML integer.

    ``bool`` is rejected (it is a subclass of ``int``).
    """
    return isinstance(obj, int) and not isinstance(obj, bool)


def is_int64(value: int) -> bool:
    """Return True if ``value`` fits a signed 64-bit integer."""
    return INT64_MIN <= value <= INT64_MAX


def is_toml_temporal(obj: object) -> TypeGuard[TomlTemporal]:
    """Type guard for the TOML date/time kinds.

    ``datetime.datetime`` is a subclass of ``datetime.date``, so both
    offset and local date-times are covered.
    """
    return isinstance(obj, (datetime.date, datetime.time))


def is_utf8_text(text: str) -> bool:
    """Return True if ``text`` encodes to well-formed UTF-8 (no lone surrogates)."""
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


# --- Type guards / narrowers: tomlkit-specific ---


def is_tomlkit_document(obj: object) -> TypeGuard[TOMLDocument]:
    """Type guard for a `tomlkit.TOMLDocument`.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TOMLDocument]: ``True`` if ``obj`` is a ``tomlkit.TOMLDocument``.
    """
    return isinstance(obj, TOMLDocument)
