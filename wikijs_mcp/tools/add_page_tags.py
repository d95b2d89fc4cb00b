"""
MCP Tool - add_page_tags

Add tags to a page.
"""

from typing import Annotated, List

from fastmcp import FastMCP
from pydantic import Field

from wikijs_mcp.services import TagService

router = FastMCP("add_page_tags")


@router.tool()
async def add_page_tags(
    page_id: Annotated[int, Field(description="The ID of the page")],
    tags: Annotated[List[str], Field(description="Array of tag names to add")],
) -> str:
    """Add tags to a Wiki.js page."""
    service = TagService()
    return await service.add_page_tags(page_id=page_id, tags=tags)
