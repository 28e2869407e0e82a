"""
Protocol handlers for different source types.

Protocols:
- REST: GET requests returning JSON or HTML text
- GraphQL: POST of {query, variables} documents
"""

from maplify.connectors.protocols.graphql import GraphQLProtocol
from maplify.connectors.protocols.rest import RestProtocol, decode_json

__all__ = [
    "GraphQLProtocol",
    "RestProtocol",
    "decode_json",
]
