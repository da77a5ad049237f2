"""Serialize UINode trees to static HTML."""

import html
import re
from typing import Any

from uiengine.runtime.renderer import UINode

VOID_TAGS = {"input"}

# Numeric style values without an implied px unit
UNITLESS = {"opacity", "zIndex", "flex", "flexGrow", "flexShrink", "fontWeight", "lineHeight", "order"}

_CAMEL = re.compile(r"(?=[A-Z])")


def _css_name(name: str) -> str:
    # WebkitTransition -> -webkit-transition; msTransition -> -ms-transition
    if name.startswith("ms") and name[2:3].isupper():
        name = "M" + name[1:]
    return _CAMEL.sub("-", name).lower()


def _css_value(name: str, value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, (int, float)) and name not in UNITLESS:
        return f"{value}px"
    return str(value)


def style_to_css(style: dict[str, Any] | None) -> str:
    """``{"fontSize": 14}`` -> ``"font-size: 14px"``."""
    if not style:
        return ""
    return "; ".join(f"{_css_name(name)}: {_css_value(name, value)}" for name, value in style.items())


def _attributes(node: UINode) -> str:
    attrs = [("data-id", node.id)]
    for name, value in node.props.items():
        if value is None:
            continue
        if name == "style":
            value = style_to_css(value)
            if not value:
                continue
        attrs.append((name, str(value)))
    return "".join(f' {name}="{html.escape(value, quote=True)}"' for name, value in attrs)


def to_html(node: UINode | None) -> str:
    """Render a UINode tree as an HTML fragment."""
    if node is None:
        return ""
    opening = f"<{node.tag}{_attributes(node)}>"
    if node.tag in VOID_TAGS:
        return opening
    inner = html.escape(node.text) if node.text is not None else ""
    inner += "".join(to_html(child) for child in node.children)
    return f"{opening}{inner}</{node.tag}>"
