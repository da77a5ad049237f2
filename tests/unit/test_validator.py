"""Tests for document validation."""

import pytest
from hypothesis import given, settings, strategies as st
from returns.result import Failure, Success

from uiengine.core import SchemaInvalid
from uiengine.schema import (
    BoundValue,
    ButtonComponent,
    ContainerComponent,
    Document,
    LiteralValue,
    TextComponent,
    validate,
    validate_or_raise,
)
from uiengine.templates import TEMPLATES


def errors_of(data):
    result = validate(data)
    assert isinstance(result, Failure)
    return result.failure()


@pytest.mark.unit
def test_validate_text_root(text_document):
    """Test minimal valid document."""
    result = validate(text_document)

    assert isinstance(result, Success)
    document = result.unwrap()
    assert isinstance(document, Document)
    assert isinstance(document.root, TextComponent)
    assert document.root.text == "Hi"


@pytest.mark.unit
@pytest.mark.parametrize("key", sorted(TEMPLATES))
def test_validate_bundled_templates(key):
    """Test every bundled document is accepted."""
    assert isinstance(validate(TEMPLATES[key]), Success)


@pytest.mark.unit
@pytest.mark.parametrize("data", [[], "text", 3, None])
def test_validate_non_object(data):
    """Test non-object input is rejected."""
    assert errors_of(data) == ["document must be an object"]


@pytest.mark.unit
def test_validate_missing_root():
    """Test root is mandatory."""
    assert errors_of({"name": "x"}) == ["root is required"]
    assert errors_of({"root": None}) == ["root is required"]


@pytest.mark.unit
def test_validate_accumulates_all_errors():
    """Test every defect is reported in one pass with its path."""
    data = {
        "root": {
            "id": "root",
            "type": "container",
            "children": [
                {"id": "a", "type": "text"},
                {"id": "", "type": "slider"},
                {"id": "c", "type": "text", "text": 5},
                "not a node",
            ],
        }
    }

    assert errors_of(data) == [
        "root.children[0].text must be string",
        "root.children[1].id must be non-empty string",
        "root.children[1].type invalid",
        "root.children[2].text must be string",
        "root.children[3] should be an object",
    ]


@pytest.mark.unit
def test_validate_field_types():
    """Test type-specific field checks."""
    data = {
        "root": {
            "id": "root",
            "type": "container",
            "direction": "diagonal",
            "gap": -1,
            "align": "middle",
            "style": "red",
            "children": [
                {"id": "i", "type": "input", "placeholder": 1, "value": False},
                {"id": "b", "type": "button"},
            ],
        }
    }

    assert errors_of(data) == [
        "root.style must be object",
        "root.direction must be one of row, column",
        "root.gap must be a non-negative number",
        "root.align must be one of start, center, end, between",
        "root.children[0].placeholder must be string",
        "root.children[0].value must be string",
        "root.children[1].text must be string",
    ]


@pytest.mark.unit
def test_validate_children_must_be_array():
    """Test container children shape."""
    data = {"root": {"id": "root", "type": "container", "children": {"id": "x"}}}
    assert errors_of(data) == ["root.children must be array"]


@pytest.mark.unit
def test_validate_action_fields():
    """Test button action checks."""
    data = {
        "root": {
            "id": "b",
            "type": "button",
            "text": "Go",
            "action": {
                "type": "email",
                "method": "FETCH",
                "headers": {"X-Count": 3},
                "payload": {"items": [1, 2], "obj": {"nested": True}, "ok": 1},
            },
        }
    }

    assert errors_of(data) == [
        "root.action.type invalid",
        "root.action.method must be one of GET, POST, PUT, PATCH, DELETE",
        "root.action.headers.X-Count must be string",
        "root.action.payload.items must be a scalar or binding",
        "root.action.payload.obj must be a scalar or binding",
    ]


@pytest.mark.unit
def test_validate_components_registry_and_config():
    """Test registry and config checks use their own path roots."""
    data = {
        "root": {"id": "r", "type": "text", "text": "x"},
        "components": [{"id": "c", "type": "text"}],
        "config": {"authToken": 1, "endpoints": {"a": None}},
    }

    assert errors_of(data) == [
        "components[0].text must be string",
        "config.authToken must be string",
        "config.endpoints.a must be string",
    ]


@pytest.mark.unit
def test_validate_ignores_unknown_fields():
    """Test extra fields are accepted, not rejected."""
    data = {
        "future": True,
        "root": {"id": "r", "type": "text", "text": "x", "tooltip": "later"},
    }
    assert isinstance(validate(data), Success)


@pytest.mark.unit
def test_validate_does_not_apply_defaults():
    """Test optional container fields stay unset after validation."""
    document = validate({"root": {"id": "r", "type": "container"}}).unwrap()

    assert isinstance(document.root, ContainerComponent)
    assert document.root.gap is None
    assert document.root.direction is None
    assert document.to_data() == {"root": {"id": "r", "type": "container"}}


@pytest.mark.unit
def test_payload_values_are_tagged():
    """Test literal vs binding is decided at validation time."""
    data = {
        "root": {
            "id": "b",
            "type": "button",
            "text": "Go",
            "action": {
                "type": "log",
                "payload": {"who": {"component": "name"}, "n": 3, "none": None},
            },
        }
    }
    root = validate(data).unwrap().root

    assert isinstance(root, ButtonComponent)
    payload = root.action.payload
    assert isinstance(payload["who"], BoundValue)
    assert payload["who"].binding.component == "name"
    assert payload["who"].binding.path == ""
    assert payload["n"] == LiteralValue(value=3)
    assert payload["none"] == LiteralValue(value=None)


@pytest.mark.unit
def test_validate_idempotent_on_templates():
    """Test re-validating an accepted document yields the same document."""
    for data in TEMPLATES.values():
        first = validate(data).unwrap()
        assert validate(first).unwrap() == first
        assert validate(first.to_data()).unwrap() == first


@pytest.mark.unit
def test_validate_depth_limit():
    """Test runaway nesting is rejected with a single message."""
    node = {"id": "leaf", "type": "text", "text": "x"}
    for i in range(60):
        node = {"id": f"c{i}", "type": "container", "children": [node]}

    errors = errors_of({"root": node})
    assert len(errors) == 1
    assert "nesting depth" in errors[0]


@pytest.mark.unit
def test_validate_or_raise():
    """Test raising variant carries the full error list."""
    with pytest.raises(SchemaInvalid) as exc_info:
        validate_or_raise({"root": {"id": "", "type": "x"}})

    assert exc_info.value.errors == ["root.id must be non-empty string", "root.type invalid"]


# ============================================================================
# Property tests
# ============================================================================

ids = st.text(alphabet="abcdefghij", min_size=1, max_size=6)
scalars = st.one_of(st.none(), st.booleans(), st.integers(-100, 100), st.text(max_size=8))
bindings = st.fixed_dictionaries({"component": ids}, optional={"path": st.sampled_from(["", "value", "a.b"])})

texts = st.fixed_dictionaries({"id": ids, "type": st.just("text"), "text": st.text(max_size=10)})
inputs = st.fixed_dictionaries(
    {"id": ids, "type": st.just("input")},
    optional={"value": st.text(max_size=5), "placeholder": st.text(max_size=5)},
)
buttons = st.fixed_dictionaries(
    {"id": ids, "type": st.just("button"), "text": st.text(max_size=5)},
    optional={
        "action": st.fixed_dictionaries(
            {"type": st.sampled_from(["log", "api_call"])},
            optional={
                "payload": st.dictionaries(ids, st.one_of(scalars, bindings), max_size=3),
                "method": st.sampled_from(["GET", "POST", "DELETE"]),
            },
        )
    },
)
trees = st.recursive(
    st.one_of(texts, inputs, buttons),
    lambda children: st.fixed_dictionaries(
        {"id": ids, "type": st.just("container"), "children": st.lists(children, max_size=3)},
        optional={"gap": st.integers(0, 20), "align": st.sampled_from(["start", "center", "end", "between"])},
    ),
    max_leaves=8,
)


@given(trees)
@settings(max_examples=50)
def test_validation_idempotent_property(tree):
    """Property test: accepted documents re-validate to an equal document."""
    first = validate({"root": tree})
    assert isinstance(first, Success)

    document = first.unwrap()
    assert validate(document).unwrap() == document
