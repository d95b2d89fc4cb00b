"""
Schemas Module - Pydantic Models

Data models for pages, tags, mutation results and the page tree.
"""

from wikijs_mcp.schemas.page import (
    WikiTag,
    WikiPage,
    ResponseResult,
    PageUpdate,
    PageTreeNode,
)

__all__ = [
    "WikiTag",
    "WikiPage",
    "ResponseResult",
    "PageUpdate",
    "PageTreeNode",
]
