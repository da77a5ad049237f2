"""Binding resolution against the state store."""

from collections.abc import Mapping, Sequence
from typing import Any

from uiengine.schema.models import Binding


class _Absent:
    """Marker for a value a binding could not reach."""

    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()


def _step(current: Any, segment: str) -> Any:
    if isinstance(current, Mapping):
        return current.get(segment, ABSENT)
    if isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
        if segment.isdecimal() and int(segment) < len(current):
            return current[int(segment)]
    return ABSENT


def resolve(binding: Binding | Mapping[str, Any], store: Mapping[str, Any]) -> Any:
    """
    Resolve a binding to the referenced state value.

    Args:
        binding: Binding model or raw ``{"component", "path"}`` mapping
        store: Component id -> state mapping

    Returns:
        The value at ``store[component]`` walked along the dotted path, or
        ABSENT when the component or any path segment is unreachable.
    """
    if isinstance(binding, Binding):
        component, path = binding.component, binding.path
    else:
        component, path = binding.get("component"), binding.get("path") or ""

    if not isinstance(component, str) or not isinstance(path, str):
        return ABSENT

    current = store.get(component, ABSENT)
    if current is None or current is ABSENT:
        return ABSENT
    if not path:
        return current

    for segment in path.split("."):
        if current is None:
            return ABSENT
        current = _step(current, segment)
        if current is ABSENT:
            return ABSENT
    return current
