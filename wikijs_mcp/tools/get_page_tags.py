"""
MCP Tool - get_page_tags

Tags of a single page.
"""

from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from wikijs_mcp.services import TagService

router = FastMCP("get_page_tags")


@router.tool()
async def get_page_tags(
    page_id: Annotated[int, Field(description="The ID of the page")],
) -> str:
    """Get all tags associated with a specific page."""
    service = TagService()
    return await service.get_page_tags(page_id=page_id)
