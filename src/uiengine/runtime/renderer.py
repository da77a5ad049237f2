"""Tree renderer: schema nodes to UINode trees with wired event handlers."""

from collections.abc import Awaitable, Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from uiengine.schema.models import (
    Action,
    BaseComponent,
    ButtonComponent,
    ContainerComponent,
    InputComponent,
    TextComponent,
)

DEFAULT_GAP = 8
DEFAULT_INPUT_CLASS = "border rounded px-3 py-2"
DEFAULT_BUTTON_CLASS = "bg-foreground text-background rounded px-4 py-2"

ALIGN_CLASSES = {
    "center": "items-center",
    "end": "items-end",
    "between": "justify-between",
}


class RenderEvents(Protocol):
    """Callbacks the renderer wires into input and button nodes."""

    def write(self, component_id: str, partial: Mapping[str, Any]) -> None:
        ...

    def dispatch(self, action: Action) -> Awaitable[None]:
        ...


@dataclass
class UINode:
    """One rendered element."""

    tag: str
    id: str
    props: dict[str, Any] = field(default_factory=dict)
    children: list["UINode"] = field(default_factory=list)
    handlers: dict[str, Callable[..., Any]] = field(default_factory=dict)
    text: str | None = None

    def walk(self) -> Iterator["UINode"]:
        """Depth-first, pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, component_id: str) -> "UINode | None":
        return next((n for n in self.walk() if n.id == component_id), None)

    def fire(self, event: str, *args: Any) -> Any:
        """Invoke the handler bound to event (KeyError when none)."""
        return self.handlers[event](*args)


async def _nothing() -> None:
    return None


def _class_names(*names: str | None) -> str:
    return " ".join(n for n in names if n)


def _container(node: ContainerComponent, store: Mapping[str, Any], events: RenderEvents) -> UINode:
    direction = "flex-row" if node.direction == "row" else "flex-col"
    align = ALIGN_CLASSES.get(node.align or "start", "items-start")
    gap = node.gap if node.gap is not None else DEFAULT_GAP

    children = []
    for child in node.children or ():
        rendered = render(child, store, events)
        if rendered is not None:
            children.append(rendered)

    return UINode(
        tag="div",
        id=node.id,
        props={
            "class": _class_names("flex", direction, align, node.class_name),
            "style": {**(node.style or {}), "gap": gap},
        },
        children=children,
    )


def _text(node: TextComponent) -> UINode:
    return UINode(
        tag="span",
        id=node.id,
        props={"class": node.class_name, "style": node.style},
        text=node.text,
    )


def _input(node: InputComponent, store: Mapping[str, Any], events: RenderEvents) -> UINode:
    state = store.get(node.id)
    value = state.get("value") if isinstance(state, Mapping) else None
    if value is None:
        value = node.value if node.value is not None else ""

    def on_change(new_value: str) -> None:
        events.write(node.id, {"value": new_value})

    return UINode(
        tag="input",
        id=node.id,
        props={
            "name": node.name,
            "placeholder": node.placeholder,
            "value": value,
            "class": node.class_name or DEFAULT_INPUT_CLASS,
            "style": node.style,
        },
        handlers={"change": on_change},
    )


def _button(node: ButtonComponent, events: RenderEvents) -> UINode:
    action = node.action

    def on_click() -> Awaitable[None]:
        # Called eagerly: the store snapshot is taken at click time
        if action is None:
            return _nothing()
        return events.dispatch(action)

    return UINode(
        tag="button",
        id=node.id,
        props={"class": node.class_name or DEFAULT_BUTTON_CLASS, "style": node.style},
        handlers={"click": on_click},
        text=node.text,
    )


def render(node: BaseComponent, store: Mapping[str, Any], events: RenderEvents) -> UINode | None:
    """
    Render a component subtree.

    Args:
        node: Component to render
        store: Current state store
        events: Store writer and action dispatcher wired into handlers

    Returns:
        UINode tree (one node per component, child order kept), or None for
        a node type outside the known set
    """
    match node:
        case ContainerComponent():
            return _container(node, store, events)
        case TextComponent():
            return _text(node)
        case InputComponent():
            return _input(node, store, events)
        case ButtonComponent():
            return _button(node, events)
        case _:
            return None
