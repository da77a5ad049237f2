"""
Runtime
Store, bindings, action dispatch, rendering, and mounted sessions
"""

from .binding import ABSENT, resolve
from .store import Store, initialize, merge, read, write
from .reporting import Report, ReportChannel, ReportKind, ReportLog, ReportSink
from .dispatcher import ActionDispatcher, build_headers, evaluate_payload, resolve_endpoint
from .renderer import UINode, render
from .html import to_html
from .session import Session

__all__ = [
    "ABSENT",
    "resolve",
    "Store",
    "initialize",
    "merge",
    "read",
    "write",
    "Report",
    "ReportChannel",
    "ReportKind",
    "ReportLog",
    "ReportSink",
    "ActionDispatcher",
    "build_headers",
    "evaluate_payload",
    "resolve_endpoint",
    "UINode",
    "render",
    "to_html",
    "Session",
]
