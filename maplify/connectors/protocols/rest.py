"""
REST/JSON and HTML GET Protocol Handler.

Provides plain GET communication with:
- Async HTTP requests via httpx
- Free-text query appended to the base URL
- JSON or text response decoding
"""

import json
from typing import Any
from urllib.parse import quote

import httpx
from loguru import logger

from maplify.errors import TransportError

# Characters encodeURIComponent leaves untouched besides alphanumerics and "-_."
URI_COMPONENT_SAFE = "!~*'()"


class RestProtocol:
    """
    GET protocol handler.

    Provides consistent HTTP communication with:
    - GET requests against a base URL
    - JSON parsing or raw text
    """

    def __init__(
        self,
        base_url: str,
        headers: dict[str, str] | None = None,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize REST protocol handler.

        Args:
            base_url: Base URL; a search query is appended verbatim after it
            headers: Default headers to include
            timeout: Request timeout in seconds
            http_client: Optional shared HTTP client
        """
        self.base_url = base_url
        self.default_headers = dict(headers or {})
        self.timeout = timeout

        self._http_client = http_client
        self._owns_client = http_client is None

    async def __aenter__(self):
        """Async context manager entry."""
        if self._owns_client and self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
            )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._owns_client and self._http_client:
            await self._http_client.aclose()
            self._http_client = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
            )
            self._owns_client = True
        return self._http_client

    def build_url(self, query: str | None = None) -> str:
        """
        Build the request URL for a free-text query.

        The query is percent-encoded like JavaScript's encodeURIComponent and
        appended to the base URL without a separator, so base URLs are
        expected to end in something like "?search=".

        Args:
            query: Free-text search query

        Returns:
            Full URL string
        """
        if not query:
            return self.base_url
        return f"{self.base_url}{quote(query, safe=URI_COMPONENT_SAFE)}"

    async def get_raw(
        self,
        query: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """
        Make GET request and return raw response.

        Raises:
            httpx.HTTPStatusError: For 4xx/5xx responses
            httpx.TimeoutException: For timeouts
        """
        url = self.build_url(query)
        request_headers = {**self.default_headers, **(headers or {})}

        logger.debug(f"GET {url}")

        response = await self.client.get(url, headers=request_headers)
        response.raise_for_status()

        return response

    async def get_json(
        self,
        query: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """
        Make GET request and return the decoded JSON body.

        Raises:
            TransportError: If the body is not valid JSON
        """
        response = await self.get_raw(query, headers=headers)
        return decode_json(response)

    async def get_text(
        self,
        query: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> str:
        """Make GET request and return the response text (HTML pages)."""
        response = await self.get_raw(query, headers=headers)
        return response.text


def decode_json(response: httpx.Response) -> Any:
    """Decode a JSON body, reporting failures against the request URL."""
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        url = str(response.request.url)
        raise TransportError(
            f"Response from {url} was not valid JSON",
            url=url,
            status_code=response.status_code,
        ) from e
