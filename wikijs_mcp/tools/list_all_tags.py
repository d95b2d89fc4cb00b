"""
MCP Tool - list_all_tags

List every tag in the wiki.
"""

from fastmcp import FastMCP

from wikijs_mcp.services import TagService

router = FastMCP("list_all_tags")


@router.tool()
async def list_all_tags() -> str:
    """List all tags used across the Wiki.js instance."""
    service = TagService()
    return await service.list_all_tags()
