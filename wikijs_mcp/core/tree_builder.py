"""
Core - Page Tree Builder

Turns the flat Wiki.js page list into a hierarchy keyed by path prefix.
"""

from typing import Dict, Iterable, List

from wikijs_mcp.schemas.page import PageTreeNode, WikiPage


def split_path(path: str) -> List[str]:
    """Split a page path on ``/``, dropping empty segments."""
    return [segment for segment in path.split("/") if segment]


def build_page_tree(
    pages: Iterable[WikiPage],
    parent_path: str = "",
) -> List[PageTreeNode]:
    """
    Build a forest of PageTreeNode from a flat page list.

    Every path prefix (``a``, ``a/b``, ``a/b/c``) maps to exactly one node.
    Prefixes that only appear as intermediate segments become directory nodes
    titled with the raw segment; a prefix that is the full path of a page is
    a page node titled with the page title.

    ``parent_path`` is a plain string-prefix filter: prefixes that do not
    start with it get no node. A node whose parent prefix was filtered out
    is not linked into the forest.

    Args:
        pages: Pages in any order (only ``path`` and ``title`` are used)
        parent_path: Optional prefix filter

    Returns:
        Root nodes in first-encountered order
    """
    roots: List[PageTreeNode] = []
    nodes: Dict[str, PageTreeNode] = {}

    # Codepoint order keeps the output independent of input order
    for page in sorted(pages, key=lambda p: p.path):
        segments = split_path(page.path)
        current = ""

        for index, segment in enumerate(segments):
            previous = current
            current = f"{current}/{segment}" if current else segment

            if parent_path and not current.startswith(parent_path):
                continue

            is_page = index == len(segments) - 1
            node = nodes.get(current)

            if node is not None:
                # Directory created from a deeper page, now matched by a page
                if is_page and not node.is_page:
                    node.is_page = True
                    node.title = page.title
                continue

            node = PageTreeNode(
                path=current,
                title=page.title if is_page else segment,
                is_page=is_page,
            )
            nodes[current] = node

            if not previous:
                roots.append(node)
            elif previous in nodes:
                nodes[previous].children.append(node)

    return roots
