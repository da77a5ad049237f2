"""Action dispatch: payload evaluation, request building, outcome reporting."""

from collections.abc import Mapping
from typing import Any

from uiengine.clients.http import JSON_CONTENT_TYPE, ActionClient, ApiRequest
from uiengine.core import LogContext, UnknownEndpoint, get_logger, new_dispatch_id
from uiengine.runtime.binding import ABSENT, resolve
from uiengine.runtime.reporting import ReportKind, ReportSink
from uiengine.schema.models import Action, BoundValue, Document, GlobalConfig, LiteralValue

logger = get_logger(__name__)

DEFAULT_METHOD = "POST"


def evaluate_payload(payload: Mapping[str, Any] | None, store: Mapping[str, Any]) -> dict[str, Any]:
    """
    Evaluate an action payload against the store.

    Bound entries are resolved; literal entries pass through. Entries whose
    binding is unreachable are left out.
    """
    evaluated: dict[str, Any] = {}
    for key, entry in (payload or {}).items():
        match entry:
            case BoundValue(binding=binding):
                value = resolve(binding, store)
            case LiteralValue(value=literal):
                value = literal
            case _:
                value = entry
        if value is not ABSENT:
            evaluated[key] = value
    return evaluated


def _layer(headers: dict[str, str], overrides: Mapping[str, str] | None) -> None:
    """Apply overrides, replacing existing names case-insensitively."""
    for name, value in (overrides or {}).items():
        for existing in [k for k in headers if k.lower() == name.lower()]:
            del headers[existing]
        headers[name] = value


def build_headers(config: GlobalConfig | None, action_headers: Mapping[str, str] | None) -> dict[str, str]:
    """
    Merge request headers, lowest to highest precedence.

    JSON content type, then document headers, then action headers. A bearer
    Authorization header from ``authToken`` is added only when none of the
    earlier layers set Authorization.
    """
    config = config or GlobalConfig()
    headers = {"Content-Type": JSON_CONTENT_TYPE}
    _layer(headers, config.headers)
    _layer(headers, action_headers)

    if config.auth_token and not any(name.lower() == "authorization" for name in headers):
        headers["Authorization"] = f"Bearer {config.auth_token}"
    return headers


def resolve_endpoint(document: Document, endpoint: str | None) -> str:
    """
    Look up an endpoint key in the document's endpoint table.

    Raises:
        UnknownEndpoint: When the key is missing or maps to an empty URL
    """
    endpoints = (document.config.endpoints if document.config else None) or {}
    url = endpoints.get(endpoint) if endpoint else None
    if not url:
        raise UnknownEndpoint(endpoint)
    return url


def build_request(action: Action, store: Mapping[str, Any], document: Document) -> ApiRequest:
    """Resolve everything an api_call needs before touching the network."""
    payload = evaluate_payload(action.payload, store)
    url = resolve_endpoint(document, action.endpoint)
    return ApiRequest(
        method=action.method or DEFAULT_METHOD,
        url=url,
        headers=build_headers(document.config, action.headers),
        payload=payload,
    )


class ActionDispatcher:
    """Executes button actions and reports their outcome."""

    def __init__(self, client: ActionClient) -> None:
        self.client = client

    async def dispatch(
        self,
        action: Action | None,
        store: Mapping[str, Any],
        document: Document,
        report: ReportSink,
    ) -> None:
        """
        Run one action. Never raises: failures become a single error report.

        Args:
            action: Action to run (None is a no-op)
            store: Store snapshot taken when the action was triggered
            document: Owning document (read-only)
            report: Sink receiving ``(message, kind)``
        """
        if action is None:
            return

        with LogContext(dispatch_id=new_dispatch_id(), action=action.type):
            outcome: list[tuple[Any, ReportKind]] = []
            try:
                match action.type:
                    case "log":
                        evaluated = evaluate_payload(action.payload, store)
                        logger.debug("log_action", keys=list(evaluated))
                        outcome.append((evaluated, ReportKind.INFO))
                    case "api_call":
                        request = build_request(action, store, document)
                        data = await self.client.execute(request)
                        outcome.append(({"ok": True, "data": data}, ReportKind.INFO))
                        if action.success_message:
                            outcome.append((action.success_message, ReportKind.INFO))
            except Exception as e:
                logger.warning("dispatch_failed", error=str(e), error_type=type(e).__name__)
                outcome = [(str(e) or type(e).__name__, ReportKind.ERROR)]

            for message, kind in outcome:
                _deliver(report, message, kind)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.aclose()


def _deliver(report: ReportSink, message: Any, kind: ReportKind) -> None:
    # Sink failures are logged only; the action outcome is already decided
    try:
        report(message, kind)
    except Exception:
        logger.exception("report_failed", kind=kind.value)
