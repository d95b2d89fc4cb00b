"""
Core - Result Formatters

Markdown-ish text rendering of Wiki.js data for tool results.
"""

from typing import List, Optional, Sequence

from wikijs_mcp.schemas.page import PageTreeNode, WikiPage, WikiTag


def _yes_no(value: bool) -> str:
    return "Yes" if value else "No"


def format_page(page: WikiPage) -> str:
    """Format a single page, content included when present."""
    lines = [
        f"# {page.title}",
        "",
        f"**Path:** {page.path}",
        f"**ID:** {page.id}",
    ]

    if page.description:
        lines.append(f"**Description:** {page.description}")
    if page.locale:
        lines.append(f"**Locale:** {page.locale}")
    if page.is_published is not None:
        lines.append(f"**Published:** {_yes_no(page.is_published)}")
    if page.created_at:
        lines.append(f"**Created:** {page.created_at}")
    if page.updated_at:
        lines.append(f"**Updated:** {page.updated_at}")
    if page.content:
        lines.extend(["", "## Content", "", page.content])

    return "\n".join(lines)


def _page_entry(page: WikiPage, with_status: bool = False, with_tags: bool = False) -> List[str]:
    lines = [
        f"### {page.title}",
        f"- **Path:** {page.path}",
        f"- **ID:** {page.id}",
    ]
    if page.description:
        lines.append(f"- **Description:** {page.description}")
    if with_status:
        if page.is_published is not None:
            lines.append(f"- **Published:** {_yes_no(page.is_published)}")
        if page.updated_at:
            lines.append(f"- **Updated:** {page.updated_at}")
    if with_tags and page.tags:
        lines.append(f"- **Tags:** {', '.join(page.tag_tokens)}")
    lines.append("")
    return lines


def format_page_list(pages: Sequence[WikiPage]) -> str:
    if not pages:
        return "No pages found."

    lines = [f"Found {len(pages)} page(s):", ""]
    for page in pages:
        lines.extend(_page_entry(page, with_status=True))
    return "\n".join(lines)


def format_search_results(results: Sequence[WikiPage], total_hits: int) -> str:
    if not results:
        return "No results found."

    lines = [f"Found {total_hits} result(s):", ""]
    for page in results:
        lines.extend(_page_entry(page))
    return "\n".join(lines)


def format_tagged_pages(pages: Sequence[WikiPage], tags: Sequence[str]) -> str:
    """Result of a search by tags."""
    tag_list = ", ".join(tags)
    if not pages:
        return f"No pages found with tags: {tag_list}"

    lines = [f"Found {len(pages)} page(s) with tags [{tag_list}]:", ""]
    for page in pages:
        lines.extend(_page_entry(page, with_tags=True))
    return "\n".join(lines)


def format_tags(tags: Sequence[WikiTag]) -> str:
    if not tags:
        return "No tags found."

    lines = [f"Found {len(tags)} tag(s):", ""]
    for tag in tags:
        lines.append(f"- **{tag.title or tag.tag}** (ID: {tag.id})")
        if tag.created_at:
            lines.append(f"  - Created: {tag.created_at}")
        if tag.updated_at:
            lines.append(f"  - Updated: {tag.updated_at}")
    return "\n".join(lines)


def format_page_tree(tree: Sequence[PageTreeNode], indent: int = 0) -> str:
    """
    Render a page forest as an indented outline.

    One line per node, two spaces per depth level, pages and directories
    marked with different icons.
    """
    lines: List[str] = []
    prefix = "  " * indent

    for node in tree:
        icon = "📄" if node.is_page else "📁"
        title = node.title or node.path.split("/")[-1] or node.path
        lines.append(f"{prefix}{icon} {title}")
        if node.children:
            lines.append(format_page_tree(node.children, indent + 1))

    return "\n".join(lines)


def format_response_result(
    succeeded: bool,
    message: Optional[str] = None,
    error_code: Optional[int] = None,
) -> str:
    """Format a mutation outcome."""
    if succeeded:
        return f"✓ Success: {message}" if message else "✓ Success"

    result = "✗ Failed"
    if error_code:
        result += f" (Error {error_code})"
    if message:
        result += f": {message}"
    return result
