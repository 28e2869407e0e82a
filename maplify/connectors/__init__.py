"""
Connectors Module - fetching raw payloads from configured sources.

Architecture:
- SourceConnector: validates one SourceConfig and performs one fetch
- Protocols: REST (GET, JSON or HTML) and GraphQL (POST) handlers
"""

from maplify.connectors.base import SourceConnector

__all__ = [
    "SourceConnector",
]
