"""Document validation with accumulated, path-prefixed errors.

The walk never stops at the first defect: every problem in the tree is
reported in one pass as ``"<path>.<field> <problem>"``.
"""

from typing import Any, Mapping

from pydantic import ValidationError as PydanticValidationError
from returns.result import Failure, Result, Success

from uiengine.core import get_logger
from uiengine.core.errors import SchemaInvalid
from uiengine.core.json import JSONParseError, validate_json_depth
from uiengine.schema.models import (
    ACTION_TYPES,
    ALIGNMENTS,
    COMPONENT_TYPES,
    DIRECTIONS,
    HTTP_METHODS,
    Document,
)

logger = get_logger(__name__)

MAX_DOCUMENT_DEPTH = 100


def _is_object(value: Any) -> bool:
    return isinstance(value, dict)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_scalar(value: Any) -> bool:
    return value is None or isinstance(value, (str, int, float, bool))


def _present(node: Mapping[str, Any], key: str) -> bool:
    return node.get(key) is not None


class DocumentValidator:
    """Collects every structural defect of a candidate document."""

    def __init__(self) -> None:
        self.errors: list[str] = []

    def check(self, data: Any) -> list[str]:
        """Walk data and return the accumulated error list (empty when valid)."""
        self.errors = []

        if not _is_object(data):
            return ["document must be an object"]

        if data.get("root") is None:
            self.errors.append("root is required")
        else:
            self._component(data["root"], "root")

        if _present(data, "components"):
            comps = data["components"]
            if not isinstance(comps, list):
                self.errors.append("components must be array")
            else:
                for i, comp in enumerate(comps):
                    self._component(comp, f"components[{i}]")

        if _present(data, "config"):
            self._config(data["config"])

        for key in ("name", "version"):
            if _present(data, key) and not isinstance(data[key], str):
                self.errors.append(f"{key} must be string")

        return self.errors

    def _string_field(self, node: Mapping[str, Any], key: str, path: str) -> None:
        if _present(node, key) and not isinstance(node[key], str):
            self.errors.append(f"{path}.{key} must be string")

    def _string_map(self, node: Mapping[str, Any], key: str, path: str) -> None:
        if not _present(node, key):
            return
        value = node[key]
        if not _is_object(value):
            self.errors.append(f"{path}{key} must be object")
            return
        for name, item in value.items():
            if not isinstance(item, str):
                self.errors.append(f"{path}{key}.{name} must be string")

    def _component(self, node: Any, path: str) -> None:
        if not _is_object(node):
            self.errors.append(f"{path} should be an object")
            return

        node_id = node.get("id")
        if not isinstance(node_id, str) or not node_id:
            self.errors.append(f"{path}.id must be non-empty string")

        node_type = node.get("type")
        if node_type not in COMPONENT_TYPES:
            self.errors.append(f"{path}.type invalid")

        if _present(node, "style"):
            style = node["style"]
            if not _is_object(style):
                self.errors.append(f"{path}.style must be object")
            else:
                for prop, value in style.items():
                    if not (isinstance(value, str) or _is_number(value)):
                        self.errors.append(f"{path}.style.{prop} must be string or number")

        self._string_field(node, "className", path)

        match node_type:
            case "text":
                if not isinstance(node.get("text"), str):
                    self.errors.append(f"{path}.text must be string")
            case "input":
                for key in ("placeholder", "value", "name"):
                    self._string_field(node, key, path)
            case "button":
                if not isinstance(node.get("text"), str):
                    self.errors.append(f"{path}.text must be string")
                if _present(node, "action"):
                    self._action(node["action"], f"{path}.action")
            case "container":
                self._container(node, path)

    def _container(self, node: Mapping[str, Any], path: str) -> None:
        if _present(node, "direction") and node["direction"] not in DIRECTIONS:
            self.errors.append(f"{path}.direction must be one of {', '.join(DIRECTIONS)}")
        if _present(node, "gap") and not (_is_number(node["gap"]) and node["gap"] >= 0):
            self.errors.append(f"{path}.gap must be a non-negative number")
        if _present(node, "align") and node["align"] not in ALIGNMENTS:
            self.errors.append(f"{path}.align must be one of {', '.join(ALIGNMENTS)}")

        if _present(node, "children"):
            children = node["children"]
            if not isinstance(children, list):
                self.errors.append(f"{path}.children must be array")
            else:
                for i, child in enumerate(children):
                    self._component(child, f"{path}.children[{i}]")

    def _action(self, action: Any, path: str) -> None:
        if not _is_object(action):
            self.errors.append(f"{path} should be an object")
            return

        if action.get("type") not in ACTION_TYPES:
            self.errors.append(f"{path}.type invalid")

        self._string_field(action, "endpoint", path)
        if _present(action, "method") and action["method"] not in HTTP_METHODS:
            self.errors.append(f"{path}.method must be one of {', '.join(HTTP_METHODS)}")
        self._string_map(action, "headers", f"{path}.")
        for key in ("successMessage", "errorMessage"):
            self._string_field(action, key, path)

        if _present(action, "payload"):
            payload = action["payload"]
            if not _is_object(payload):
                self.errors.append(f"{path}.payload must be object")
                return
            for key, value in payload.items():
                self._payload_value(value, f"{path}.payload.{key}")

    def _payload_value(self, value: Any, path: str) -> None:
        if _is_scalar(value):
            return
        if not _is_object(value) or not isinstance(value.get("component"), str):
            self.errors.append(f"{path} must be a scalar or binding")
            return
        if _present(value, "path") and not isinstance(value["path"], str):
            self.errors.append(f"{path}.path must be string")

    def _config(self, config: Any) -> None:
        if not _is_object(config):
            self.errors.append("config must be object")
            return
        self._string_field(config, "authToken", "config")
        self._string_map(config, "endpoints", "config.")
        self._string_map(config, "headers", "config.")


def _format_pydantic_error(error: Mapping[str, Any]) -> str:
    path = ""
    previous: Any = None
    for part in error["loc"]:
        # Union members add a tag entry after the node position
        is_tag = (part in COMPONENT_TYPES and (previous == "root" or isinstance(previous, int))) or part in (
            "BoundValue",
            "LiteralValue",
        )
        if isinstance(part, int):
            path += f"[{part}]"
        elif not is_tag:
            path += f".{part}" if path else str(part)
        previous = None if is_tag else part
    return f"{path} {error['msg']}".strip()


def validate(data: Any, max_depth: int = MAX_DOCUMENT_DEPTH) -> Result[Document, list[str]]:
    """
    Validate a decoded JSON value (or an already validated Document).

    Args:
        data: Candidate document
        max_depth: Maximum container nesting accepted

    Returns:
        Success(Document) when valid, Failure(list of error messages) otherwise
    """
    if isinstance(data, Document):
        data = data.to_data()

    try:
        validate_json_depth(data, max_depth)
    except JSONParseError as e:
        return Failure([str(e)])

    errors = DocumentValidator().check(data)
    if errors:
        logger.info("document_rejected", errors=len(errors))
        return Failure(errors)

    try:
        document = Document.model_validate(data)
    except PydanticValidationError as e:
        errors = [_format_pydantic_error(err) for err in e.errors()]
        logger.warning("document_model_rejected", errors=errors)
        return Failure(errors)

    return Success(document)


def validate_or_raise(data: Any, max_depth: int = MAX_DOCUMENT_DEPTH) -> Document:
    """Validate and return the Document, raising SchemaInvalid on defects."""
    result = validate(data, max_depth)
    if isinstance(result, Failure):
        raise SchemaInvalid(result.failure())
    return result.unwrap()
