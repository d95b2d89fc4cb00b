"""
Services - Tag Service

Tag reads, tag add/remove through the page reconciler, and search by tags.
"""

import asyncio
import logging
from typing import List, Optional

from wikijs_mcp.api import WikiJSError, PageNotFoundError
from wikijs_mcp.api import queries
from wikijs_mcp.core.formatters import (
    format_response_result,
    format_tagged_pages,
    format_tags,
)
from wikijs_mcp.core.reconciler import add_tags_update, remove_tags_update
from wikijs_mcp.schemas.page import WikiPage, WikiTag
from wikijs_mcp.services.base import (
    DEFAULT_LOCALE,
    WikiService,
    filter_by_locale,
    parse_models,
    pluck,
)

logger = logging.getLogger(__name__)


class TagService(WikiService):
    """Tag operations, each returning text for a tool result."""

    async def get_page_tags(self, page_id: int) -> str:
        try:
            page = await self.fetch_page_by_id(page_id)
        except WikiJSError as e:
            return f"Error getting page tags: {e}"

        if page is None:
            return str(PageNotFoundError(page_id))

        return (
            f'Tags for page "{page.title}" ({page.path}):\n\n'
            f"{format_tags(page.tags or [])}"
        )

    async def add_page_tags(self, page_id: int, tags: List[str]) -> str:
        """
        Add tags to a page.

        Existing tags keep their order, new ones are appended, duplicates
        are dropped. All other page fields are written back unchanged.
        """
        try:
            outcome = await self.reconcile(
                page_id, lambda page: add_tags_update(page, tags)
            )
        except PageNotFoundError as e:
            return str(e)
        except WikiJSError as e:
            return f"Error adding tags: {e}"

        result = format_response_result(
            outcome.response.succeeded,
            f"Added {len(tags)} tag(s)",
            outcome.response.error_code,
        )
        return f"{result}\n\nNew tags: {', '.join(outcome.update.tags)}"

    async def remove_page_tags(self, page_id: int, tags: List[str]) -> str:
        try:
            outcome = await self.reconcile(
                page_id, lambda page: remove_tags_update(page, tags)
            )
        except PageNotFoundError as e:
            return str(e)
        except WikiJSError as e:
            return f"Error removing tags: {e}"

        result = format_response_result(
            outcome.response.succeeded,
            f"Removed {len(tags)} tag(s)",
            outcome.response.error_code,
        )
        remaining = ", ".join(outcome.update.tags) or "None"
        return f"{result}\n\nRemaining tags: {remaining}"

    async def find_pages_by_tags(
        self,
        tags: List[str],
        locale: str = DEFAULT_LOCALE,
    ) -> List[WikiPage]:
        """
        Pages carrying at least one of ``tags``, in page-list order.

        Tags are not part of the list projection, so every page is fetched
        individually. At most ``WIKIJS_TAG_SEARCH_CONCURRENCY`` lookups are
        in flight; a failing lookup fails the whole search.
        """
        pages = filter_by_locale(await self.fetch_page_list(), locale)
        semaphore = asyncio.Semaphore(self.settings.wikijs.tag_search_concurrency)
        wanted = set(tags)

        async def lookup(page: WikiPage) -> Optional[WikiPage]:
            async with semaphore:
                return await self.fetch_page_by_id(page.id)

        tasks = [asyncio.ensure_future(lookup(page)) for page in pages]
        try:
            full_pages = await asyncio.gather(*tasks)
        finally:
            # No-op after success; after a failure, stops and reaps the rest
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)

        logger.debug("Checked %d page(s) for tags %s", len(full_pages), tags)

        # Pages deleted between the list and the lookup come back as None
        return [
            page for page in full_pages
            if page is not None and wanted.intersection(page.tag_tokens)
        ]

    async def search_by_tags(
        self,
        tags: List[str],
        locale: str = DEFAULT_LOCALE,
    ) -> str:
        try:
            matching = await self.find_pages_by_tags(tags, locale)
        except WikiJSError as e:
            return f"Error searching by tags: {e}"
        return format_tagged_pages(matching, tags)

    async def list_all_tags(self) -> str:
        try:
            data = await self.client.execute(queries.LIST_TAGS)
            tags = parse_models(WikiTag, pluck(data, "pages", "tags"))
        except WikiJSError as e:
            return f"Error listing tags: {e}"

        return format_tags(tags)
