"""Mounted document session.

Owns the store for one document instance. Input edits write the store,
button clicks dispatch actions; each event re-renders the tree.
"""

import asyncio
from collections.abc import Awaitable, Mapping
from typing import Any

from uiengine.core import LogContext, get_logger, new_session_id
from uiengine.runtime.dispatcher import ActionDispatcher
from uiengine.runtime.html import to_html
from uiengine.runtime.renderer import UINode, render
from uiengine.runtime.reporting import ReportSink
from uiengine.runtime.store import Store, initialize
from uiengine.schema.models import Action, Document

logger = get_logger(__name__)


class Session:
    """One mounted document: store, rendered tree, and event entry points."""

    def __init__(self, document: Document, dispatcher: ActionDispatcher, report: ReportSink) -> None:
        self.session_id = new_session_id()
        self.document = document
        self.report = report
        self._dispatcher = dispatcher
        self._pending: set[asyncio.Task[None]] = set()

        # Defaults are seeded before the first render ever sees the store
        self.store: Store = initialize(document)
        self.tree: UINode | None = self.render()
        logger.info("session_mounted", session_id=self.session_id, inputs=len(self.store))

    def render(self) -> UINode | None:
        """Render the document root against the current store."""
        self.tree = render(self.document.root, self.store, self)
        return self.tree

    def html(self) -> str:
        return to_html(self.tree)

    def write(self, component_id: str, partial: Mapping[str, Any]) -> None:
        self.store = self.store.merge(component_id, partial)

    def dispatch(self, action: Action) -> Awaitable[None]:
        """Dispatch with the store as it is at the moment of the call."""
        return self._dispatcher.dispatch(action, self.store, self.document, self.report)

    def _node(self, component_id: str, tag: str) -> UINode:
        node = self.tree.find(component_id) if self.tree else None
        if node is None or node.tag != tag:
            raise LookupError(f"No {tag} component with id {component_id!r}")
        return node

    def change(self, component_id: str, value: str) -> UINode | None:
        """Apply an input edit and re-render."""
        self._node(component_id, "input").fire("change", value)
        return self.render()

    async def click(self, component_id: str) -> UINode | None:
        """Activate a button, wait for its action, and re-render."""
        node = self._node(component_id, "button")
        with LogContext(session_id=self.session_id, component=component_id):
            await node.fire("click")
        return self.render()

    def press(self, component_id: str) -> asyncio.Task[None]:
        """
        Activate a button without waiting for its action.

        Must be called from a running event loop. Each press starts an
        independent dispatch; outstanding ones are awaited by drain().
        """
        loop = asyncio.get_running_loop()
        outcome = self._node(component_id, "button").fire("click")

        async def run() -> None:
            with LogContext(session_id=self.session_id, component=component_id):
                await outcome
            self.render()

        task = loop.create_task(run())
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    @property
    def pending(self) -> int:
        return len(self._pending)

    async def drain(self) -> None:
        """Wait for every outstanding pressed action."""
        while self._pending:
            await asyncio.gather(*list(self._pending))
