"""
Services - Resource Service

Exposes Wiki.js pages as MCP resources addressed by wikijs://page/<path>.
"""

import re
from typing import Dict, List

from wikijs_mcp.api import InvalidResourceURIError, PageNotFoundError
from wikijs_mcp.services.base import DEFAULT_LOCALE, WikiService


URI_SCHEME = "wikijs"
RESOURCE_MIME_TYPE = "text/plain"
_PAGE_URI = re.compile(rf"{URI_SCHEME}://page/(.+)")


def page_uri(path: str) -> str:
    return f"{URI_SCHEME}://page/{path}"


def parse_page_uri(uri: str) -> str:
    """
    Extract the page path from a resource URI.

    Raises:
        InvalidResourceURIError: URI is not wikijs://page/<path>
    """
    match = _PAGE_URI.fullmatch(uri)
    if not match:
        raise InvalidResourceURIError(uri)
    return match.group(1)


class ResourceService(WikiService):
    """Lists and reads page resources."""

    async def list_resources(self) -> List[Dict[str, str]]:
        pages = await self.fetch_page_list()
        return [
            {
                "uri": page_uri(page.path),
                "name": page.title,
                "mimeType": RESOURCE_MIME_TYPE,
                "description": page.description or f"Wiki.js page: {page.title}",
            }
            for page in pages
        ]

    async def read_resource(self, uri: str) -> str:
        """
        Raw markdown content of the page behind ``uri``.

        The URI is validated before Wiki.js is queried.

        Raises:
            InvalidResourceURIError: malformed URI
            PageNotFoundError: no page at that path
        """
        path = parse_page_uri(uri)
        page = await self.fetch_page_by_path(path, DEFAULT_LOCALE)
        if page is None:
            raise PageNotFoundError(path)
        return page.content or ""
