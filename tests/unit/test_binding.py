"""Tests for binding resolution."""

import pytest
from hypothesis import given, strategies as st

from uiengine.runtime import ABSENT, Store, resolve
from uiengine.schema import Binding


@pytest.fixture
def store():
    return Store(
        {
            "name": {"value": "Ada"},
            "profile": {"address": {"city": "London"}, "tags": ["a", "b"], "empty": None},
            "nothing": None,
        }
    )


@pytest.mark.unit
def test_resolve_path(store):
    """Test dotted path resolution."""
    assert resolve(Binding(component="name", path="value"), store) == "Ada"
    assert resolve(Binding(component="profile", path="address.city"), store) == "London"


@pytest.mark.unit
def test_resolve_empty_path_returns_whole_state(store):
    """Test empty path yields the component's full state."""
    assert resolve(Binding(component="name"), store) == {"value": "Ada"}


@pytest.mark.unit
def test_resolve_sequence_index(store):
    """Test numeric segments index into lists."""
    assert resolve(Binding(component="profile", path="tags.1"), store) == "b"
    assert resolve(Binding(component="profile", path="tags.5"), store) is ABSENT


@pytest.mark.unit
@pytest.mark.parametrize(
    "component,path",
    [
        ("missing", "value"),
        ("missing", ""),
        ("nothing", "value"),
        ("name", "value.length"),
        ("profile", "address.zip"),
        ("profile", "empty.x"),
    ],
)
def test_resolve_unreachable_is_absent(store, component, path):
    """Test unreachable paths short-circuit to ABSENT."""
    assert resolve(Binding(component=component, path=path), store) is ABSENT


@pytest.mark.unit
def test_resolve_raw_mapping(store):
    """Test raw binding mappings resolve the same way."""
    assert resolve({"component": "name", "path": "value"}, store) == "Ada"
    assert resolve({"component": 3}, store) is ABSENT


@pytest.mark.unit
def test_resolve_does_not_mutate(store):
    """Test resolution leaves the store untouched."""
    before = dict(store)
    resolve(Binding(component="profile", path="address.city"), store)
    assert dict(store) == before


@pytest.mark.unit
def test_absent_marker():
    """Test ABSENT is a falsy singleton."""
    assert not ABSENT
    assert repr(ABSENT) == "ABSENT"
    assert type(ABSENT)() is ABSENT


json_values = st.recursive(
    st.one_of(st.none(), st.booleans(), st.integers(), st.text(max_size=5)),
    lambda inner: st.one_of(st.lists(inner, max_size=3), st.dictionaries(st.text(max_size=3), inner, max_size=3)),
    max_leaves=10,
)


@given(
    st.dictionaries(st.text(max_size=4), json_values, max_size=4),
    st.text(max_size=4),
    st.text(max_size=12),
)
def test_resolve_is_total(entries, component, path):
    """Property test: resolution never raises."""
    resolve(Binding(component=component, path=path), Store(entries))
