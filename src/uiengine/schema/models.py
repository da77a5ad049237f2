"""Typed document model.

Components form a closed tagged union discriminated on ``type``. Optional
fields stay ``None`` when the document omits them; defaults (container gap,
input value, request method) are applied by the store and renderer, not here.
"""

from typing import Annotated, Any, Iterator, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer


COMPONENT_TYPES = ("container", "text", "input", "button")
ACTION_TYPES = ("log", "api_call")
HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")
DIRECTIONS = ("row", "column")
ALIGNMENTS = ("start", "center", "end", "between")

Scalar = Union[str, int, float, bool, None]
StyleValue = Union[str, int, float]


class SchemaModel(BaseModel):
    """Base for document models: immutable, unknown fields ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class Binding(SchemaModel):
    """Reference to a component's state: ``{component, path}``."""

    component: str
    path: str = ""

    @field_validator("path", mode="before")
    @classmethod
    def _none_path(cls, v: Any) -> Any:
        return "" if v is None else v


class LiteralValue(SchemaModel):
    """Payload entry passed through unchanged."""

    value: Scalar = None

    @model_serializer
    def _dump(self) -> Scalar:
        return self.value


class BoundValue(SchemaModel):
    """Payload entry resolved from the store at dispatch time."""

    binding: Binding

    @model_serializer
    def _dump(self) -> dict[str, str]:
        return {"component": self.binding.component, "path": self.binding.path}


PayloadValue = Union[BoundValue, LiteralValue]


def tag_payload_value(value: Any) -> Any:
    """Decide literal vs binding once, from the raw JSON value."""
    if isinstance(value, (BoundValue, LiteralValue)):
        return value
    if isinstance(value, dict):
        return BoundValue(binding=Binding.model_validate(value))
    return LiteralValue(value=value)


class Action(SchemaModel):
    """Side effect attached to a button."""

    type: Literal["log", "api_call"]
    endpoint: str | None = None
    method: Literal["GET", "POST", "PUT", "PATCH", "DELETE"] | None = None
    headers: dict[str, str] | None = None
    payload: dict[str, PayloadValue] | None = None
    success_message: str | None = Field(default=None, alias="successMessage")
    error_message: str | None = Field(default=None, alias="errorMessage")

    @field_validator("payload", mode="before")
    @classmethod
    def _tag_payload(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return {key: tag_payload_value(value) for key, value in v.items()}
        return v


class BaseComponent(SchemaModel):
    """Attributes shared by every component."""

    id: str
    style: dict[str, StyleValue] | None = None
    class_name: str | None = Field(default=None, alias="className")


class ContainerComponent(BaseComponent):
    type: Literal["container"]
    direction: Literal["row", "column"] | None = None
    gap: float | None = None
    align: Literal["start", "center", "end", "between"] | None = None
    children: list["Component"] | None = None


class TextComponent(BaseComponent):
    type: Literal["text"]
    text: str


class InputComponent(BaseComponent):
    type: Literal["input"]
    placeholder: str | None = None
    value: str | None = None
    name: str | None = None


class ButtonComponent(BaseComponent):
    type: Literal["button"]
    text: str
    action: Action | None = None


Component = Annotated[
    Union[ContainerComponent, TextComponent, InputComponent, ButtonComponent],
    Field(discriminator="type"),
]


class GlobalConfig(SchemaModel):
    """Document-wide request configuration."""

    auth_token: str | None = Field(default=None, alias="authToken")
    endpoints: dict[str, str] | None = None
    headers: dict[str, str] | None = None


class Document(SchemaModel):
    """Validated UI document."""

    name: str | None = None
    version: str | None = None
    config: GlobalConfig | None = None
    root: Component
    # Registry is validated but never resolved by id during rendering
    components: list[Component] | None = None

    def to_data(self) -> dict[str, Any]:
        """Plain JSON-compatible form, field names as written in documents."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


ContainerComponent.model_rebuild()
Document.model_rebuild()


def iter_nodes(node: BaseComponent) -> Iterator[BaseComponent]:
    """Depth-first, pre-order walk over a component and its descendants."""
    yield node
    if isinstance(node, ContainerComponent):
        for child in node.children or ():
            yield from iter_nodes(child)
