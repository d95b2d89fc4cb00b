"""
MCP Tool - search_pages

Keyword search across Wiki.js pages.
"""

from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from wikijs_mcp.services import PageService

router = FastMCP("search_pages")


@router.tool()
async def search_pages(
    query: Annotated[str, Field(description="The search query text")],
) -> str:
    """Search for pages in Wiki.js by keyword or phrase."""
    service = PageService()
    return await service.search_pages(query=query)
