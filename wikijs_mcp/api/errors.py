"""
API - Errors

Exception hierarchy for Wiki.js calls and the checks made before them.
"""

import json
from typing import Any, Dict, List, Optional


class WikiJSError(Exception):
    """Base class for every failure raised by this package."""


class ConfigurationError(WikiJSError):
    """Invalid client configuration detected at startup."""


class TransportError(WikiJSError):
    """Network, TLS or HTTP status failure talking to Wiki.js."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        if status_code is not None:
            message = f"{message} (Status: {status_code})"
        super().__init__(f"HTTP Error: {message}")


class GraphQLError(WikiJSError):
    """Wiki.js answered, but reported errors for the operation."""

    def __init__(self, errors: List[Dict[str, Any]]):
        self.errors = errors
        super().__init__(f"GraphQL Error: {json.dumps(errors)}")


class PreconditionError(WikiJSError):
    """A request was rejected before any call to Wiki.js was made."""


class PageNotFoundError(PreconditionError):
    """The referenced page does not exist."""

    def __init__(self, page_ref: Any):
        self.page_ref = page_ref
        if isinstance(page_ref, int):
            message = f"Page not found with ID: {page_ref}"
        else:
            message = f"Page not found: {page_ref}"
        super().__init__(message)


class InvalidResourceURIError(PreconditionError):
    """Resource URI does not have the wikijs://page/<path> form."""

    def __init__(self, uri: str):
        self.uri = uri
        super().__init__(f"Invalid Wiki.js resource URI: {uri}")


class ResponseError(WikiJSError):
    """Wiki.js answered with a body that does not have the expected shape."""

    def __init__(self, message: str):
        super().__init__(f"Unexpected response: {message}")
