# topmark:header:start
#
#   project      : TypedToml
#   file         : test_kinds.py
#   file_relpath : tests/accessor/test_kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for scalar kinds and their conversions in `typedtoml.accessor.kinds`."""

from __future__ import annotations

import math
import struct

from tests.conftest import parametrize
from typedtoml.accessor.kinds import (
    BOOL,
    F32,
    F64,
    I32,
    I64,
    SCALAR_KINDS,
    TEXT,
    kind_from_name,
    narrow_f32,
    truncate_i32,
)
from typedtoml.document.model import NodeKind, ScalarNode


def test_kind_table() -> None:
    """Every caller kind maps to exactly one node kind."""
    assert [k.name for k in SCALAR_KINDS] == ["BOOL", "I32", "I64", "F32", "F64", "TEXT"]
    assert BOOL.node_kind is NodeKind.BOOL
    assert I32.node_kind is I64.node_kind is NodeKind.INTEGER
    assert F32.node_kind is F64.node_kind is NodeKind.FLOAT
    assert TEXT.node_kind is NodeKind.STRING


@parametrize(
    ("kind_name", "node", "expected"),
    [
        ("BOOL", ScalarNode(NodeKind.BOOL, True), True),
        ("BOOL", ScalarNode(NodeKind.INTEGER, 1), False),
        ("I32", ScalarNode(NodeKind.INTEGER, 1), True),
        ("I32", ScalarNode(NodeKind.BOOL, True), False),
        ("I64", ScalarNode(NodeKind.FLOAT, 1.0), False),
        ("F64", ScalarNode(NodeKind.FLOAT, 1.0), True),
        ("F64", ScalarNode(NodeKind.INTEGER, 1), False),
        ("TEXT", ScalarNode(NodeKind.STRING, "1"), True),
        ("TEXT", ScalarNode(NodeKind.INTEGER, 1), False),
        ("TEXT", ScalarNode(NodeKind.OTHER, "1979-05-27"), False),
    ],
)
def test_matching_is_strict(kind_name: str, node: ScalarNode, expected: bool) -> None:
    """A node matches a kind only if its node kind is exactly the mapped one."""
    kind = kind_from_name(kind_name)
    assert kind is not None
    assert kind.matches(node) is expected


def test_matches_rejects_containers_and_none() -> None:
    """Containers and absent nodes never match a scalar kind."""
    assert not TEXT.matches(None)


@parametrize(
    ("value", "expected"),
    [
        (0, 0),
        (2**31 - 1, 2**31 - 1),
        (-(2**31), -(2**31)),
        (2**31, -(2**31)),
        (2**32 + 5, 5),
        (-(2**31) - 1, 2**31 - 1),
    ],
)
def test_truncate_i32_wraps_twos_complement(value: int, expected: int) -> None:
    """I32 conversion keeps the low 32 bits as a signed value."""
    assert truncate_i32(value) == expected
    assert I32.convert(ScalarNode(NodeKind.INTEGER, value)) == expected


def test_i64_is_identity() -> None:
    """I64 conversion does not truncate."""
    assert I64.convert(ScalarNode(NodeKind.INTEGER, 2**40)) == 2**40


def test_narrow_f32_rounds_to_binary32() -> None:
    """F32 conversion matches a round trip through a 4-byte float."""
    expected: float = struct.unpack("<f", struct.pack("<f", 3.14))[0]
    assert narrow_f32(3.14) == expected
    assert narrow_f32(3.14) != 3.14
    assert F32.convert(ScalarNode(NodeKind.FLOAT, 3.14)) == expected
    assert F64.convert(ScalarNode(NodeKind.FLOAT, 3.14)) == 3.14


def test_narrow_f32_overflow_and_specials() -> None:
    """Values beyond the binary32 range become infinities; nan stays nan."""
    assert narrow_f32(1e300) == math.inf
    assert narrow_f32(-1e300) == -math.inf
    assert narrow_f32(math.inf) == math.inf
    assert math.isnan(narrow_f32(math.nan))


def test_kind_from_name_is_case_insensitive() -> None:
    """Kind names resolve regardless of case; unknown names yield None."""
    assert kind_from_name("i32") is I32
    assert kind_from_name(" Text ") is TEXT
    assert kind_from_name("int") is None


def test_type_names() -> None:
    """Human-readable names used in error messages."""
    assert BOOL.type_name == "bool"
    assert I32.type_name == "integer"
    assert F32.type_name == "floating-point"
    assert TEXT.type_name == "string"
    assert repr(I64) == "ScalarKind(I64)"
