# topmark:header:start
#
#   project      : TypedToml
#   file         : test_properties.py
#   file_relpath : tests/test_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the accessor invariants.

Documents are generated as Python data, rendered with tomlkit and loaded back;
the assertions relate the handle's answers to the generating data.
"""

from __future__ import annotations

from typing import Any

import tomlkit
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st
from tomlkit.exceptions import TOMLKitError

from tests.conftest import mark_hypothesis_slow
from tests.strategies_toml import (
    DEFAULTS,
    TOML_NOISE_ALPHABET,
    kind_of,
    render,
    s_flat_documents,
    s_homogeneous_arrays,
    s_keys,
    s_nested_documents,
)
from typedtoml import SCALAR_KINDS, TomlHandle, load_string

PROPERTY_SETTINGS = settings(
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.filter_too_much],
    deadline=None,
    max_examples=30,
)

# Parser fuzzing runs only in the `property_test` session.
FUZZ_SETTINGS = settings(PROPERTY_SETTINGS, max_examples=200)


def _tomlkit_accepts(text: str) -> bool:
    try:
        tomlkit.parse(text).unwrap()
    except (TOMLKitError, TypeError, ValueError):
        return False
    return True


@mark_hypothesis_slow
@FUZZ_SETTINGS
@given(text=st.text(alphabet=TOML_NOISE_ALPHABET, max_size=40))
def test_valid_iff_parser_accepts(text: str) -> None:
    """A handle is valid exactly when the parser accepts the text."""
    assert load_string(text).is_valid() == _tomlkit_accepts(text)


@PROPERTY_SETTINGS
@given(doc=s_flat_documents())
def test_generated_documents_load_in_source_order(doc: dict[str, Any]) -> None:
    """Rendered documents load, and keys come back in source order."""
    handle: TomlHandle = load_string(render(doc))
    assert handle.is_valid()
    assert handle.keys() == list(doc)


@PROPERTY_SETTINGS
@given(doc=s_flat_documents())
def test_checked_equals_defaulted_on_match(doc: dict[str, Any]) -> None:
    """For a present key of the matching kind, both forms agree."""
    handle: TomlHandle = load_string(render(doc))
    for key, value in doc.items():
        if isinstance(value, list):
            continue
        kind = kind_of(value)
        assert handle.has_key(key)
        assert handle.get(key, kind) == handle.get(key, kind, DEFAULTS[kind.name]) == value


@PROPERTY_SETTINGS
@given(doc=s_flat_documents(), key=s_keys())
def test_absent_key_yields_default(doc: dict[str, Any], key: str) -> None:
    """Absent keys return the default for every kind."""
    doc.pop(key, None)
    handle: TomlHandle = load_string(render(doc))
    for kind in SCALAR_KINDS:
        assert handle.get(key, kind, DEFAULTS[kind.name]) == DEFAULTS[kind.name]


@PROPERTY_SETTINGS
@given(doc=s_flat_documents())
def test_mismatched_kind_yields_default(doc: dict[str, Any]) -> None:
    """Present keys of another kind return the default."""
    handle: TomlHandle = load_string(render(doc))
    for key, value in doc.items():
        actual = None if isinstance(value, list) else kind_of(value).node_kind
        for kind in SCALAR_KINDS:
            if kind.node_kind is actual:
                continue
            assert handle.get(key, kind, DEFAULTS[kind.name]) == DEFAULTS[kind.name]


@PROPERTY_SETTINGS
@given(values=s_homogeneous_arrays())
def test_get_array_preserves_order_and_length(values: list[Any]) -> None:
    """Arrays come back element for element."""
    handle: TomlHandle = load_string(render({"arr": values}))
    kind = kind_of(values[0]) if values else SCALAR_KINDS[0]
    assert handle.get_array("arr", kind) == values


@PROPERTY_SETTINGS
@given(sample=s_nested_documents())
def test_path_equals_chained_tables(sample: tuple[dict[str, Any], str]) -> None:
    """``at_path("a.b.leaf", d)`` agrees with chained table lookups, or is ``d``."""
    doc, leaf = sample
    handle: TomlHandle = load_string(render(doc))
    for kind in SCALAR_KINDS:
        default = DEFAULTS[kind.name]
        via_path = handle.at_path(f"a.b.{leaf}", kind, default)
        try:
            chained = handle.get_table("a").get_table("b").get(leaf, kind, default)
        except (KeyError, TypeError):
            assert via_path == default
        else:
            assert via_path == chained


@PROPERTY_SETTINGS
@given(doc=s_flat_documents(), key=s_keys())
def test_sub_table_handles_are_independent(doc: dict[str, Any], key: str) -> None:
    """Dropping a sub-table handle leaves the parent untouched."""
    doc[key] = {"inner": 1}
    handle: TomlHandle = load_string(render(doc))
    before = handle.keys()
    sub = handle.get_table(key)
    assert sub.keys() == ["inner"]
    del sub
    assert handle.keys() == before
    assert handle.get_table(key).keys() == ["inner"]
