"""External service clients."""

from .http import ActionClient, ApiRequest, decode_response

__all__ = ["ActionClient", "ApiRequest", "decode_response"]
