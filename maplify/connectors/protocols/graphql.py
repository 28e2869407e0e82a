"""
GraphQL Protocol Handler.

Posts {query, variables} documents to a GraphQL endpoint such as AniList.
The endpoint URL is used unchanged; the search term is expected to be part
of the configured variables.
"""

from typing import Any

import httpx
from loguru import logger

from maplify.connectors.protocols.rest import decode_json


class GraphQLProtocol:
    """GraphQL endpoint query handler."""

    def __init__(
        self,
        endpoint: str,
        headers: dict[str, str] | None = None,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize GraphQL protocol handler.

        Args:
            endpoint: GraphQL endpoint URL
            headers: Default headers to include
            timeout: Query timeout in seconds
            http_client: Optional shared HTTP client
        """
        self.endpoint = endpoint
        self.default_headers = {"Content-Type": "application/json", **(headers or {})}
        self.timeout = timeout

        self._http_client = http_client
        self._owns_client = http_client is None

    async def __aenter__(self):
        if self._owns_client and self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
            )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._owns_client and self._http_client:
            await self._http_client.aclose()
            self._http_client = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
            )
            self._owns_client = True
        return self._http_client

    async def execute(
        self,
        query: str,
        variables: dict[str, Any] | str,
    ) -> Any:
        """
        Execute a GraphQL document and return the decoded response.

        Args:
            query: GraphQL document
            variables: Variables object, or a pre-serialized JSON string sent as-is

        Returns:
            Decoded JSON response (including the top-level "data" key)
        """
        logger.debug(f"POST {self.endpoint}")

        response = await self.client.post(
            self.endpoint,
            json={"query": query, "variables": variables},
            headers=self.default_headers,
        )
        response.raise_for_status()

        return decode_json(response)
