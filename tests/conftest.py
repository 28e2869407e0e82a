# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for Maplify tests."""

import os
from collections.abc import Callable

import httpx
import pytest
from loguru import logger

# Keep a developer's .env from changing test behaviour
os.environ.setdefault("MAPLIFY_LOG_LEVEL", "DEBUG")
os.environ.setdefault("MAPLIFY_MIN_SCORE", "0.0")


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Use asyncio for async tests."""
    return "asyncio"


@pytest.fixture
def log_records():
    """Capture loguru records emitted during a test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def mock_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """Build an AsyncClient whose requests are answered by a handler function."""

    def build(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return build


@pytest.fixture
def anilist_query() -> str:
    return """
    query ($search: String) {
      Page(perPage: 10) {
        media(search: $search, type: ANIME) { id title { english romaji native } }
      }
    }
    """


@pytest.fixture
def anilist_payload() -> dict:
    """GraphQL response with multi-representation titles."""
    return {
        "data": {
            "Page": {
                "pageInfo": {"total": 2},
                "media": [
                    {
                        "id": 140960,
                        "title": {"english": "Spy x Family", "romaji": "Spy x Family", "native": "SPY×FAMILY"},
                    },
                    {
                        "id": 16498,
                        "title": {"english": "Attack on Titan", "romaji": "Shingeki no Kyojin", "native": None},
                    },
                ],
            }
        }
    }


@pytest.fixture
def rest_payload() -> dict:
    """REST search response with plain string titles."""
    return {
        "meta": {"page": 1},
        "results": [
            {"id": "aot", "title": "Attack on Titan (Dub)", "url": "/anime/aot"},
            {"id": "spy", "title": "SPY x FAMILY", "url": "/anime/spy"},
            {"id": "nrt", "title": "Naruto", "url": "/anime/nrt"},
        ],
    }


@pytest.fixture
def search_page() -> str:
    """HTML search results page."""
    return """
    <html><body>
      <div class="item">
        <a class="title" href="/watch/spy-family">Spy x Family (Sub)</a>
        <img src="/img/spy.jpg">
      </div>
      <div class="item">
        <a class="title" href="/watch/naruto">  Naruto  </a>
      </div>
      <div class="item">
        <span class="title">Attack on Titan BD</span>
      </div>
    </body></html>
    """
