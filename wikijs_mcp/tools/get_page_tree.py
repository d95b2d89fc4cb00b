"""
MCP Tool - get_page_tree

Get page hierarchy tree.
"""

from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from wikijs_mcp.services import PageService

router = FastMCP("get_page_tree")


@router.tool()
async def get_page_tree(
    parent: Annotated[
        str, Field(description="Optional parent path to filter by")
    ] = "",
    locale: Annotated[str, Field(description="The locale to filter by")] = "en",
) -> str:
    """
    Get a hierarchical tree view of all pages in Wiki.js.

    Intermediate path segments without a page of their own are shown
    as folders.

    Args:
        parent: Only include paths starting with this string
        locale: Locale to include ("en" includes every page)

    Returns:
        Indented outline of the page hierarchy
    """
    service = PageService()
    return await service.get_page_tree(parent=parent, locale=locale)
