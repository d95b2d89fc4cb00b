"""
MCP Tool - update_page

Partial update of an existing page.
"""

from typing import Annotated, Optional

from fastmcp import FastMCP
from pydantic import Field

from wikijs_mcp.services import PageService

router = FastMCP("update_page")


@router.tool()
async def update_page(
    page_id: Annotated[int, Field(description="The ID of the page to update")],
    title: Annotated[
        Optional[str], Field(description="New title for the page")
    ] = None,
    content: Annotated[
        Optional[str], Field(description="New content for the page")
    ] = None,
    description: Annotated[
        Optional[str], Field(description="New description for the page")
    ] = None,
    is_published: Annotated[
        Optional[bool], Field(description="New publication status")
    ] = None,
) -> str:
    """
    Update an existing Wiki.js page.

    Only the given fields change; everything else, tags included, is kept.
    """
    service = PageService()
    return await service.update_page(
        page_id=page_id,
        title=title,
        content=content,
        description=description,
        is_published=is_published,
    )
