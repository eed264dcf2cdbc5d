"""
HTTP client for the OpenAI Responses API.

Provides:
- ResponsesClient: Async client that sends one extraction payload and returns
  the decoded response body

A fresh httpx.AsyncClient is opened per call and closed when the call
resolves, so no connection state is shared between requests. Calls are made
once: there is no retry and no timeout beyond the configured one.
"""

from typing import Any

import httpx
import structlog

from calendar_parser.extraction.errors import UpstreamAPIError

logger = structlog.get_logger(__name__)

DEFAULT_BASE_URL = "https://api.openai.com/v1"


class ResponsesClient:
    """
    Async client for ``POST /responses``.

    Example:
        client = ResponsesClient(api_key="sk-...")
        data = await client.create_response(payload)
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: Bearer credential.
            base_url: API base URL (without trailing /responses).
            timeout: Request timeout in seconds. None waits indefinitely.
            transport: Optional httpx transport (tests inject a mock transport).
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def url(self) -> str:
        return f"{self.base_url}/responses"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def create_response(self, payload: dict[str, Any]) -> Any:
        """
        Send one extraction request.

        Args:
            payload: Request body built by the request builder.

        Returns:
            The decoded JSON response body.

        Raises:
            UpstreamAPIError: Non-success status from the API.
            httpx.HTTPError: Transport-level failure (connection, timeout).
        """
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            transport=self._transport,
        ) as client:
            response = await client.post(self.url, headers=self._headers(), json=payload)

        if not response.is_success:
            body = response.text
            logger.error(
                "OpenAI API error",
                status_code=response.status_code,
                body_preview=body[:500],
            )
            raise UpstreamAPIError(response.status_code, body)

        return response.json()
