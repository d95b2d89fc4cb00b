"""
Core Module - Pure Page Logic

Page tree construction, update reconciliation and result formatting.
"""

from wikijs_mcp.core.tree_builder import build_page_tree
from wikijs_mcp.core.reconciler import (
    merge_tags,
    remove_tags,
    build_page_update,
    add_tags_update,
    remove_tags_update,
)

__all__ = [
    "build_page_tree",
    "merge_tags",
    "remove_tags",
    "build_page_update",
    "add_tags_update",
    "remove_tags_update",
]
