"""
Core - Page Update Reconciler

Builds the full ``update`` payload from a current page and a partial change.
Wiki.js replaces the whole record on update, so every field not being
changed is copied from the current page.
"""

from typing import Iterable, List, Optional

from wikijs_mcp.schemas.page import PageUpdate, WikiPage


EDITOR = "markdown"
DEFAULT_LOCALE = "en"


def merge_tags(existing: Iterable[str], requested: Iterable[str]) -> List[str]:
    """
    Union of tag tokens, first appearance wins.

    Existing tags keep their order; requested tags follow in request order.
    """
    merged: List[str] = []
    seen = set()
    for tag in list(existing) + list(requested):
        if tag not in seen:
            seen.add(tag)
            merged.append(tag)
    return merged


def remove_tags(existing: Iterable[str], removed: Iterable[str]) -> List[str]:
    """Existing tag tokens minus ``removed``, survivors keep their order."""
    removed = set(removed)
    return [tag for tag in existing if tag not in removed]


def build_page_update(
    page: WikiPage,
    *,
    title: Optional[str] = None,
    content: Optional[str] = None,
    description: Optional[str] = None,
    is_published: Optional[bool] = None,
    tags: Optional[List[str]] = None,
) -> PageUpdate:
    """
    Full update payload: supplied values override, the rest is echoed back.

    Args:
        page: Current page, fetched with its tags
        title, content, description, is_published: Optional replacements
        tags: Replacement tag tokens (default: the page's current tags)

    Returns:
        PageUpdate ready for UPDATE_PAGE
    """
    return PageUpdate(
        id=page.id,
        title=title if title is not None else page.title,
        content=_first(content, page.content, ""),
        description=_first(description, page.description, ""),
        locale=_first(page.locale, DEFAULT_LOCALE),
        path=page.path,
        is_published=_first(is_published, page.is_published, True),
        is_private=_first(page.is_private, False),
        editor=EDITOR,
        tags=list(tags) if tags is not None else page.tag_tokens,
    )


def add_tags_update(page: WikiPage, tags: Iterable[str]) -> PageUpdate:
    return build_page_update(page, tags=merge_tags(page.tag_tokens, tags))


def remove_tags_update(page: WikiPage, tags: Iterable[str]) -> PageUpdate:
    return build_page_update(page, tags=remove_tags(page.tag_tokens, tags))


def _first(*values):
    for value in values:
        if value is not None:
            return value
    return None
