"""HTTP client for api_call actions"""

from dataclasses import dataclass, field
from typing import Any

import httpx

from uiengine.core import RequestFailed, decode_json, dumps_compact, get_logger

logger = get_logger(__name__)

JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class ApiRequest:
    """Fully resolved outbound request."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    payload: dict[str, Any] | None = None

    @property
    def body(self) -> bytes | None:
        """JSON body; GET requests carry none."""
        if self.method == "GET":
            return None
        return dumps_compact(self.payload if self.payload is not None else {}).encode("utf-8")


def decode_response(response: httpx.Response) -> Any:
    """JSON when the content type says so, raw text otherwise."""
    content_type = response.headers.get("content-type", "")
    if JSON_CONTENT_TYPE in content_type:
        return decode_json(response.content)
    return response.text


class ActionClient:
    """
    Issues one HTTP request per api_call action.

    No retries or circuit breaking: every triggered action results in exactly
    one request attempt and one outcome.
    """

    def __init__(self, timeout: float = 10.0, client: httpx.AsyncClient | None = None) -> None:
        """
        Args:
            timeout: Request timeout in seconds
            client: Preconfigured client (tests, shared pools)
        """
        self.timeout = timeout
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def execute(self, request: ApiRequest) -> Any:
        """
        Send the request and return the decoded response body.

        Raises:
            RequestFailed: On a non-2xx status
            httpx.HTTPError: On transport failures
            JSONParseError: When a JSON response body does not decode
        """
        logger.info("request_sent", method=request.method, url=request.url)
        response = await self._client.request(
            request.method,
            request.url,
            headers=request.headers,
            content=request.body,
        )
        data = decode_response(response)

        if not response.is_success:
            message = data if isinstance(data, str) else dumps_compact(data)
            logger.warning("request_failed", status=response.status_code, url=request.url)
            raise RequestFailed(
                response.status_code,
                message or f"Request failed with {response.status_code}",
                body=data,
            )

        logger.info("request_succeeded", status=response.status_code, url=request.url)
        return data

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ActionClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
