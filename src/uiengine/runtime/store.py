"""Component state store.

Immutable mapping of component id to interactive state. Writes return a new
Store; other ids' entries are carried over unchanged.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from uiengine.core import get_logger
from uiengine.runtime.binding import ABSENT
from uiengine.schema.models import Document, InputComponent, iter_nodes

logger = get_logger(__name__)


class Store(Mapping[str, Any]):
    """Read-only id -> state mapping with copy-on-write updates."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, Any] | None = None) -> None:
        self._entries = MappingProxyType(dict(entries or {}))

    def __getitem__(self, component_id: str) -> Any:
        return self._entries[component_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Store({dict(self._entries)!r})"

    def read(self, component_id: str) -> Any:
        """State for component_id, or ABSENT."""
        return self._entries.get(component_id, ABSENT)

    def write(self, component_id: str, state: Any) -> "Store":
        """New store with store[component_id] replaced by state."""
        entries = dict(self._entries)
        entries[component_id] = state
        return Store(entries)

    def merge(self, component_id: str, partial: Mapping[str, Any]) -> "Store":
        """New store with partial shallow-merged into the existing entry."""
        previous = self._entries.get(component_id)
        state = dict(previous) if isinstance(previous, Mapping) else {}
        state.update(partial)
        return self.write(component_id, state)


def initialize(document: Document) -> Store:
    """
    Seed a store with one ``{"value": ...}`` entry per input node.

    Walks the whole tree under ``document.root``. Inputs without a declared
    value start as the empty string.
    """
    entries: dict[str, Any] = {}
    for node in iter_nodes(document.root):
        if not isinstance(node, InputComponent):
            continue
        if node.id in entries:
            logger.warning("duplicate_input_id", component=node.id)
        entries[node.id] = {"value": node.value if node.value is not None else ""}
    return Store(entries)


def write(store: Store, component_id: str, state: Any) -> Store:
    return store.write(component_id, state)


def merge(store: Store, component_id: str, partial: Mapping[str, Any]) -> Store:
    return store.merge(component_id, partial)


def read(store: Store, component_id: str) -> Any:
    return store.read(component_id)
