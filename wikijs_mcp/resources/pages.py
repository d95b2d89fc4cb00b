"""
MCP Resources - Wiki.js Pages

Pages exposed as read-only resources at wikijs://page/<path>.
"""

import logging
from typing import Dict, List, Sequence

from fastmcp import FastMCP
from fastmcp.exceptions import ResourceError
from fastmcp.resources import FunctionResource, Resource
from fastmcp.server.middleware import CallNext, Middleware, MiddlewareContext
from pydantic import AnyUrl

from wikijs_mcp.api import WikiJSError
from wikijs_mcp.services import ResourceService
from wikijs_mcp.services.resource_service import RESOURCE_MIME_TYPE, page_uri

logger = logging.getLogger(__name__)

router = FastMCP("pages")


async def _read(uri: str) -> str:
    service = ResourceService()
    try:
        return await service.read_resource(uri)
    except WikiJSError as e:
        logger.warning("Failed to read resource %s: %s", uri, e)
        raise ResourceError(f"Failed to read resource {uri}: {e}") from e


class PageResourceListing(Middleware):
    """Adds one resource per Wiki.js page to every resources/list answer.

    Pages change without the server knowing, so they are fetched on each
    listing rather than registered up front. Reads of the listed URIs are
    served by the ``wikijs://page/{path*}`` template.
    """

    async def on_list_resources(
        self,
        context: MiddlewareContext,
        call_next: CallNext,
    ) -> Sequence[Resource]:
        resources = list(await call_next(context))

        try:
            listed = await ResourceService().list_resources()
        except WikiJSError as e:
            logger.warning("Failed to list resources: %s", e)
            raise ResourceError(f"Failed to list resources: {e}") from e

        for entry in listed:
            uri = entry["uri"]
            resources.append(
                FunctionResource(
                    uri=AnyUrl(uri),
                    name=entry["name"],
                    description=entry["description"],
                    mime_type=entry["mimeType"],
                    fn=lambda _uri=uri: _read(_uri),
                )
            )
        return resources


@router.resource(
    "wikijs://pages",
    name="pages",
    description="Index of every Wiki.js page resource",
    mime_type="application/json",
)
async def list_page_resources() -> List[Dict[str, str]]:
    """List all Wiki.js pages as resources."""
    service = ResourceService()
    try:
        return await service.list_resources()
    except WikiJSError as e:
        logger.warning("Failed to list resources: %s", e)
        raise ResourceError(f"Failed to list resources: {e}") from e


@router.resource(
    "wikijs://page/{path*}",
    name="page",
    description="Raw markdown content of a Wiki.js page",
    mime_type=RESOURCE_MIME_TYPE,
)
async def read_page_resource(path: str) -> str:
    """Read a Wiki.js page by path."""
    return await _read(page_uri(path))
