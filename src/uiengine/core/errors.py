"""Error taxonomy for document loading and action dispatch."""

from typing import Any


class EngineError(Exception):
    """Base class for interpreter errors."""

    pass


class SchemaInvalid(EngineError):
    """Document failed validation. Carries every defect found."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("\n".join(errors))
        self.errors = list(errors)


class ActionError(EngineError):
    """An action could not be carried out."""

    pass


class UnknownEndpoint(ActionError):
    """Action references an endpoint key missing from config.endpoints."""

    def __init__(self, endpoint: str | None) -> None:
        super().__init__(f"Unknown endpoint key: {endpoint}")
        self.endpoint = endpoint


class RequestFailed(ActionError):
    """Endpoint answered with a non-success status."""

    def __init__(self, status: int, message: str, body: Any = None) -> None:
        super().__init__(message)
        self.status = status
        self.body = body
