"""
MCP Tool - get_page

Retrieve full page content by path.
"""

from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from wikijs_mcp.services import PageService

router = FastMCP("get_page")


@router.tool()
async def get_page(
    path: Annotated[
        str, Field(description='The path of the page (e.g., "home" or "docs/api")')
    ],
    locale: Annotated[str, Field(description="The locale of the page")] = "en",
) -> str:
    """
    Get the full content of a Wiki.js page by its path.

    Returns the page metadata followed by its markdown content.
    """
    service = PageService()
    return await service.get_page(path=path, locale=locale)
