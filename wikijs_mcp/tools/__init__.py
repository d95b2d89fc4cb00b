"""
Tools Module - MCP Tool Implementations

All 12 MCP tools for Wiki.js interaction.
"""

from wikijs_mcp.tools import search_pages
from wikijs_mcp.tools import list_pages
from wikijs_mcp.tools import get_page
from wikijs_mcp.tools import create_page
from wikijs_mcp.tools import update_page
from wikijs_mcp.tools import delete_page
from wikijs_mcp.tools import get_page_tree
from wikijs_mcp.tools import get_page_tags
from wikijs_mcp.tools import add_page_tags
from wikijs_mcp.tools import remove_page_tags
from wikijs_mcp.tools import search_by_tags
from wikijs_mcp.tools import list_all_tags

__all__ = [
    "search_pages",
    "list_pages",
    "get_page",
    "create_page",
    "update_page",
    "delete_page",
    "get_page_tree",
    "get_page_tags",
    "add_page_tags",
    "remove_page_tags",
    "search_by_tags",
    "list_all_tags",
]
