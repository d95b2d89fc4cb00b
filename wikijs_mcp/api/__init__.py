"""
API Module - Wiki.js GraphQL Access

Client, operation documents and error types for the Wiki.js GraphQL API.
"""

from wikijs_mcp.api.client import WikiJSClient
from wikijs_mcp.api.errors import (
    WikiJSError,
    ConfigurationError,
    TransportError,
    GraphQLError,
    ResponseError,
    PreconditionError,
    PageNotFoundError,
    InvalidResourceURIError,
)

__all__ = [
    "WikiJSClient",
    "WikiJSError",
    "ConfigurationError",
    "TransportError",
    "GraphQLError",
    "ResponseError",
    "PreconditionError",
    "PageNotFoundError",
    "InvalidResourceURIError",
]
