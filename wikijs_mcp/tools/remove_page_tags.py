"""
MCP Tool - remove_page_tags

Remove tags from a page.
"""

from typing import Annotated, List

from fastmcp import FastMCP
from pydantic import Field

from wikijs_mcp.services import TagService

router = FastMCP("remove_page_tags")


@router.tool()
async def remove_page_tags(
    page_id: Annotated[int, Field(description="The ID of the page")],
    tags: Annotated[List[str], Field(description="Array of tag names to remove")],
) -> str:
    """Remove tags from a Wiki.js page."""
    service = TagService()
    return await service.remove_page_tags(page_id=page_id, tags=tags)
