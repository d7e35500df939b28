# topmark:header:start
#
#   project      : TypedToml
#   file         : test_cli_utils.py
#   file_relpath : tests/cli/test_cli_utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for CLI value formatting and default parsing."""

from __future__ import annotations

import math
from typing import Any

import pytest

from tests.conftest import parametrize
from typedtoml.accessor.kinds import BOOL, F32, I32, I64, TEXT
from typedtoml.cli.errors import CliUsageError
from typedtoml.cli.options import resolve_verbosity
from typedtoml.cli.utils import format_value, parse_default


@parametrize(
    ("value", "expected"),
    [
        (True, "true"),
        (False, "false"),
        (42, "42"),
        (0.5, "0.5"),
        (1e20, "1e+20"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
        (math.nan, "nan"),
        ("raw text", "raw text"),
    ],
)
def test_format_value(value: Any, expected: str) -> None:
    """Values print the way TOML spells them."""
    assert format_value(value) == expected


def test_parse_default() -> None:
    """Defaults convert to the kind's Python type."""
    assert parse_default(TEXT, "x y") == "x y"
    assert parse_default(BOOL, " True ") is True
    assert parse_default(I32, "-3") == -3
    assert parse_default(I64, "10") == 10
    assert parse_default(F32, "2.5") == 2.5


@parametrize(
    ("kind_name", "raw"),
    [("BOOL", "yes"), ("I32", "1.5"), ("I64", ""), ("F32", "pi")],
)
def test_parse_default_rejects_bad_text(kind_name: str, raw: str) -> None:
    """Text that cannot represent the kind is a usage error."""
    kind = {"BOOL": BOOL, "I32": I32, "I64": I64, "F32": F32}[kind_name]
    with pytest.raises(CliUsageError):
        parse_default(kind, raw)


def test_resolve_verbosity() -> None:
    """Verbose counts pass through; quiet maps to -1; both together is an error."""
    assert resolve_verbosity(0, 0) == 0
    assert resolve_verbosity(2, 0) == 2
    assert resolve_verbosity(0, 1) == -1
    with pytest.raises(CliUsageError):
        resolve_verbosity(1, 1)
