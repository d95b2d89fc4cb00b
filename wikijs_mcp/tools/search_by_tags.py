"""
MCP Tool - search_by_tags

Find pages carrying any of the given tags.
"""

from typing import Annotated, List

from fastmcp import FastMCP
from pydantic import Field

from wikijs_mcp.services import TagService

router = FastMCP("search_by_tags")


@router.tool()
async def search_by_tags(
    tags: Annotated[
        List[str], Field(description="Array of tag names to search for")
    ],
    locale: Annotated[str, Field(description="The locale to filter by")] = "en",
) -> str:
    """
    Find pages that have specific tags.

    A page matches if it has at least one of the tags. Every page is
    looked up individually, so this is slow on large wikis.
    """
    service = TagService()
    return await service.search_by_tags(tags=tags, locale=locale)
