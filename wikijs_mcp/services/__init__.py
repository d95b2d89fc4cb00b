"""
Services Module - Business Logic Layer

Provides services for pages, tags and page resources.
"""

from wikijs_mcp.services.base import WikiService
from wikijs_mcp.services.page_service import PageService
from wikijs_mcp.services.tag_service import TagService
from wikijs_mcp.services.resource_service import ResourceService

__all__ = [
    "WikiService",
    "PageService",
    "TagService",
    "ResourceService",
]
