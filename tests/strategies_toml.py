# topmark:header:start
#
#   project      : TypedToml
#   file         : strategies_toml.py
#   file_relpath : tests/strategies_toml.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating TOML documents.

Documents are generated as plain Python data and rendered with tomlkit, so each
sample carries both the source text and the values the accessor should return.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import tomlkit
from hypothesis import strategies as st

from typedtoml.accessor.kinds import BOOL, F64, I64, TEXT, ScalarKind
from typedtoml.io.guards import INT64_MAX, INT64_MIN

Draw = Callable[[st.SearchStrategy[Any]], Any]

# Surrogates cannot be encoded; control and unassigned characters are left out to keep tomlkit's
# escaping out of the picture.
EXCLUDED_CATEGORIES: tuple[str, ...] = ("Cs", "Cc", "Cn")

# Alphabet of TOML punctuation without digits, so integers never overflow.
TOML_NOISE_ALPHABET: str = 'ab =[]."{},\n#'

# A distinct default per kind, never produced by the value strategies below.
DEFAULTS: dict[str, Any] = {
    "BOOL": True,
    "I32": -7,
    "I64": -7,
    "F32": -7.5,
    "F64": -7.5,
    "TEXT": "<default>",
}


def s_keys() -> st.SearchStrategy[str]:
    """Bare TOML keys."""
    return st.from_regex(r"[A-Za-z][A-Za-z0-9_-]{0,8}", fullmatch=True)


def s_text() -> st.SearchStrategy[str]:
    """Short strings of printable Unicode, including multi-byte characters."""
    return st.text(
        alphabet=st.characters(exclude_categories=EXCLUDED_CATEGORIES),
        max_size=12,
    )


def s_scalar_values() -> st.SearchStrategy[bool | int | float | str]:
    """Scalars of the four accessible kinds."""
    return st.one_of(
        st.booleans(),
        st.integers(min_value=INT64_MIN, max_value=INT64_MAX).filter(lambda v: v != -7),
        st.floats(allow_nan=False, allow_infinity=False).filter(lambda v: v != -7.5),
        s_text().filter(lambda v: v != DEFAULTS["TEXT"]),
    )


def s_homogeneous_arrays() -> st.SearchStrategy[list[Any]]:
    """Arrays whose elements all share one scalar kind."""
    return st.one_of(
        st.lists(st.booleans(), max_size=6),
        st.lists(st.integers(min_value=INT64_MIN, max_value=INT64_MAX), max_size=6),
        st.lists(st.floats(allow_nan=False, allow_infinity=False), max_size=6),
        st.lists(s_text(), max_size=6),
    )


def s_flat_documents() -> st.SearchStrategy[dict[str, Any]]:
    """Root tables of scalars and homogeneous arrays."""
    return st.dictionaries(
        keys=s_keys(),
        values=st.one_of(s_scalar_values(), s_homogeneous_arrays()),
        max_size=8,
    )


@st.composite
def s_nested_documents(draw: Draw) -> tuple[dict[str, Any], str]:
    """Documents with an optional ``a.b.<leaf>`` chain and some noise around it.

    Returns:
        tuple[dict[str, Any], str]: The document data and the leaf key probed by
        path tests.
    """
    leaf: str = draw(s_keys())
    doc: dict[str, Any] = draw(s_flat_documents())
    shape: str = draw(st.sampled_from(["full", "no_leaf", "no_b", "b_scalar", "none"]))
    if shape == "full":
        doc["a"] = {"b": {leaf: draw(s_scalar_values())}}
    elif shape == "no_leaf":
        doc["a"] = {"b": {}}
    elif shape == "no_b":
        doc["a"] = {}
    elif shape == "b_scalar":
        doc["a"] = {"b": draw(s_scalar_values())}
    else:
        doc.pop("a", None)
    return doc, leaf


def render(doc: dict[str, Any]) -> str:
    """Render plain data as TOML text."""
    return tomlkit.dumps(doc)


def kind_of(value: Any) -> ScalarKind[Any]:
    """Return the 64-bit caller kind that reads ``value`` exactly."""
    if isinstance(value, bool):
        return BOOL
    if isinstance(value, int):
        return I64
    if isinstance(value, float):
        return F64
    return TEXT
