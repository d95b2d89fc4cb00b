"""
MCP Tool - create_page

Create a new Wiki.js page.
"""

from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from wikijs_mcp.services import PageService

router = FastMCP("create_page")


@router.tool()
async def create_page(
    path: Annotated[str, Field(description="The path for the new page")],
    title: Annotated[str, Field(description="The title of the page")],
    content: Annotated[str, Field(description="The markdown content of the page")],
    description: Annotated[str, Field(description="Optional page description")] = "",
    locale: Annotated[str, Field(description="The locale of the page")] = "en",
    is_published: Annotated[
        bool, Field(description="Whether to publish the page")
    ] = True,
) -> str:
    """Create a new page in Wiki.js."""
    service = PageService()
    return await service.create_page(
        path=path,
        title=title,
        content=content,
        description=description,
        locale=locale,
        is_published=is_published,
    )
