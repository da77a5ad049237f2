"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .errors import (
    EngineError,
    SchemaInvalid,
    ActionError,
    UnknownEndpoint,
    RequestFailed,
)
from .logging_config import configure_logging, get_logger, LogContext
from .json import (
    decode_json,
    dumps_compact,
    dumps_pretty,
    JSONParseError,
    validate_json_size,
    validate_json_depth,
)
from .id import new_session_id, new_dispatch_id
from .cache import LRUCache, Stats


def create_container(settings: Settings | None = None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings)


async def shutdown_container(injector) -> None:
    """Close resources held by a container (lazy import to avoid circular deps)."""
    from .container import shutdown_container as _shutdown_container

    await _shutdown_container(injector)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "EngineError",
    "SchemaInvalid",
    "ActionError",
    "UnknownEndpoint",
    "RequestFailed",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # JSON
    "decode_json",
    "dumps_compact",
    "dumps_pretty",
    "JSONParseError",
    "validate_json_size",
    "validate_json_depth",
    # IDs
    "new_session_id",
    "new_dispatch_id",
    # DI
    "create_container",
    "shutdown_container",
    # Caching
    "LRUCache",
    "Stats",
]
