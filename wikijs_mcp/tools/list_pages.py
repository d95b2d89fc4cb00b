"""
MCP Tool - list_pages

List every page with its metadata.
"""

from fastmcp import FastMCP

from wikijs_mcp.services import PageService

router = FastMCP("list_pages")


@router.tool()
async def list_pages() -> str:
    """List all pages in the Wiki.js instance with metadata."""
    service = PageService()
    return await service.list_pages()
