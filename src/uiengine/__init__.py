"""
uiengine
Declarative UI interpreter: validates JSON documents describing component
trees, renders them, tracks component state, and dispatches actions.
"""

from .core import (
    ActionError,
    RequestFailed,
    SchemaInvalid,
    Settings,
    UnknownEndpoint,
    configure_logging,
    create_container,
    shutdown_container,
    get_settings,
)
from .schema import Document, DocumentLoader, load_document, validate, validate_or_raise
from .runtime import (
    ABSENT,
    ActionDispatcher,
    ReportChannel,
    ReportKind,
    ReportLog,
    Session,
    Store,
    UINode,
    initialize,
    render,
    resolve,
    to_html,
)
from .clients import ActionClient
from .handlers import PlaygroundHandler

__version__ = "1.0.0"

__all__ = [
    "ActionError",
    "RequestFailed",
    "SchemaInvalid",
    "Settings",
    "UnknownEndpoint",
    "configure_logging",
    "create_container",
    "shutdown_container",
    "get_settings",
    "Document",
    "DocumentLoader",
    "load_document",
    "validate",
    "validate_or_raise",
    "ABSENT",
    "ActionDispatcher",
    "ReportChannel",
    "ReportKind",
    "ReportLog",
    "Session",
    "Store",
    "UINode",
    "initialize",
    "render",
    "resolve",
    "to_html",
    "ActionClient",
    "PlaygroundHandler",
]
