"""
MCP Tool - delete_page

Delete a page by ID.
"""

from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from wikijs_mcp.services import PageService

router = FastMCP("delete_page")


@router.tool()
async def delete_page(
    page_id: Annotated[int, Field(description="The ID of the page to delete")],
) -> str:
    """Delete a page from Wiki.js."""
    service = PageService()
    return await service.delete_page(page_id=page_id)
