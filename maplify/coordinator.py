"""
Maplify: fetch, extract and map titles across multiple sources.

Sources are fetched concurrently, extracted in configuration order, and the
entries of the first (base) source are matched against every other source.
"""

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from maplify.config import MaplifySettings, get_settings
from maplify.connectors import SourceConnector
from maplify.errors import ConfigurationError
from maplify.extractors import Entry, extract_entries
from maplify.matching import MatchGroup, map_titles
from maplify.sources import SourceConfig


@dataclass
class SearchResult:
    """Entries extracted per source and the match groups built from them."""

    extracted_data: list[list[Entry]] = field(default_factory=list)
    mapped_titles: list[MatchGroup] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "extractedData": self.extracted_data,
            "mappedTitles": [group.to_dict() for group in self.mapped_titles],
        }


class Maplify:
    """
    Fetches, extracts and maps titles across REST, GraphQL and HTML sources.

    Usage:
        maplify = Maplify(
            {"url": "https://graphql.anilist.co", "query": QUERY, "variables": {"search": "naruto"}},
            {"url": "https://example.org/search?q=", "selectors": {"mainSelector": ".item", "title": "h3"}},
        )
        result = await maplify.search("naruto")
    """

    def __init__(
        self,
        *sources: SourceConfig | Mapping[str, Any],
        settings: MaplifySettings | None = None,
        http_client: httpx.AsyncClient | None = None,
        min_score: float | None = None,
    ):
        """
        Args:
            *sources: Source configurations; the first is the base source
            settings: Runtime settings (defaults to get_settings())
            http_client: Optional shared HTTP client for all fetches
            min_score: Minimum similarity for a match (defaults to settings.min_score)

        Raises:
            ConfigurationError: If fewer than two sources are given, a source
                is invalid, or two sources share a name
        """
        if len(sources) < 2:
            raise ConfigurationError("At least two sources are required to map")

        self.sources = [self._validate_source(position, source) for position, source in enumerate(sources, start=1)]
        self.source_ids = [source.identifier(index) for index, source in enumerate(self.sources)]
        if len(set(self.source_ids)) != len(self.source_ids):
            raise ConfigurationError(f"Source names must be unique: {self.source_ids}")

        self.settings = settings or get_settings()
        self.min_score = self.settings.min_score if min_score is None else min_score
        self._http_client = http_client

    async def search(self, query: str | None = None) -> SearchResult:
        """
        Search every source and map the base source's titles onto the others.

        Args:
            query: Free-text query appended to GET source URLs; GraphQL
                sources take their search term from their variables

        Returns:
            SearchResult with per-source entries and match groups

        Raises:
            ConfigurationError: A GraphQL source with only a query or only variables
            TransportError: Any source failed to fetch
            ExtractionError: Any API payload had no array of titled items, or
                an HTML source has a malformed selector
        """
        if self._http_client is not None:
            payloads = await self._fetch_all(query, self._http_client)
        else:
            async with httpx.AsyncClient(timeout=self.settings.http_timeout, follow_redirects=True) as client:
                payloads = await self._fetch_all(query, client)

        extracted_data = []
        for source_id, source, payload in zip(self.source_ids, self.sources, payloads):
            entries = extract_entries(payload, source, max_depth=self.settings.max_search_depth)
            logger.debug(f"Extracted {len(entries)} entries from {source_id}")
            extracted_data.append(entries)

        mapped_titles = map_titles(extracted_data, self.source_ids, min_score=self.min_score)

        logger.info(
            f"Search for {query!r} mapped {len(mapped_titles)} titles across {len(self.sources)} sources"
        )
        return SearchResult(extracted_data=extracted_data, mapped_titles=mapped_titles)

    def search_sync(self, query: str | None = None) -> SearchResult:
        """Blocking wrapper around search() for synchronous callers."""
        return asyncio.run(self.search(query))

    @staticmethod
    def _validate_source(position: int, source: SourceConfig | Mapping[str, Any]) -> SourceConfig:
        if isinstance(source, SourceConfig):
            return source
        try:
            return SourceConfig.model_validate(source)
        except ValidationError as e:
            raise ConfigurationError(f"Source #{position} is invalid: {e}") from e

    async def _fetch_all(self, query: str | None, client: httpx.AsyncClient) -> list[Any]:
        """Fetch every source concurrently; results keep source order."""
        connectors = [
            SourceConnector(source, settings=self.settings, http_client=client)
            for source in self.sources
        ]

        try:
            async with asyncio.TaskGroup() as group:
                tasks = [group.create_task(connector.fetch(query)) for connector in connectors]
        except ExceptionGroup as eg:
            # Siblings are already cancelled; surface the first failure itself
            raise eg.exceptions[0]

        return [task.result() for task in tasks]
