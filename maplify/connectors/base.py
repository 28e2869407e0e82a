"""
Source connector: validates one source configuration and fetches its payload.

GraphQL sources are POSTed their {query, variables} document; every other
source is fetched with GET, the free-text query appended to the URL. API
sources (REST-flagged or GraphQL) yield decoded JSON, HTML sources yield text.
"""

from typing import Any

import httpx
from loguru import logger

from maplify.config import MaplifySettings, get_settings
from maplify.connectors.protocols import GraphQLProtocol, RestProtocol
from maplify.errors import ConfigurationError, TransportError
from maplify.sources import SourceConfig


class SourceConnector:
    """
    Fetches the raw payload of a single configured source.

    No retries are performed; any transport failure is logged with the
    offending URL and raised as TransportError.
    """

    def __init__(
        self,
        config: SourceConfig,
        settings: MaplifySettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the connector.

        Args:
            config: Source configuration
            settings: Runtime settings (defaults to get_settings())
            http_client: Optional shared HTTP client, left open on exit
        """
        self.config = config
        self.settings = settings or get_settings()
        self._http_client = http_client

    def validate(self) -> None:
        """
        Check that GraphQL query and variables are either both set or both absent.

        Raises:
            ConfigurationError: Naming the missing half of the pair
        """
        if self.config.has_query and not self.config.has_variables:
            raise ConfigurationError("GraphQL needs variables.")
        if self.config.has_variables and not self.config.has_query:
            raise ConfigurationError("GraphQL needs a query.")

    def request_url(self, query: str | None = None) -> str:
        """URL that fetch() will request for this query."""
        if self.config.has_query or self.config.has_variables:
            return self.config.url
        return self._rest_protocol().build_url(query)

    async def fetch(self, query: str | None = None) -> Any:
        """
        Fetch the source's raw payload.

        Args:
            query: Free-text search query, ignored for GraphQL sources

        Returns:
            Decoded JSON for API sources, HTML text otherwise

        Raises:
            ConfigurationError: Inconsistent GraphQL configuration
            TransportError: Any HTTP failure or undecodable JSON body
        """
        self.validate()
        url = self.request_url(query)

        try:
            if self.config.has_query:
                async with self._graphql_protocol() as graphql:
                    return await graphql.execute(self.config.query, self.config.variables)

            async with self._rest_protocol() as rest:
                if self.config.is_api:
                    return await rest.get_json(query)
                return await rest.get_text(query)

        except TransportError as e:
            logger.error(f"Error fetching data from {url}: {e}")
            raise
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            status_code = None
            if isinstance(e, httpx.HTTPStatusError):
                status_code = e.response.status_code
            logger.error(f"Error fetching data from {url}: {e!r}")
            raise TransportError(
                f"Error fetching data from {url}: {e}",
                url=url,
                status_code=status_code,
            ) from e

    def _rest_protocol(self) -> RestProtocol:
        return RestProtocol(
            base_url=self.config.url,
            headers=self.settings.default_headers,
            timeout=self.settings.http_timeout,
            http_client=self._http_client,
        )

    def _graphql_protocol(self) -> GraphQLProtocol:
        return GraphQLProtocol(
            endpoint=self.config.url,
            headers=self.settings.default_headers,
            timeout=self.settings.http_timeout,
            http_client=self._http_client,
        )
