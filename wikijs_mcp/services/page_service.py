"""
Services - Page Service

Page reads, writes and the page tree view.
"""

import logging
from typing import Optional

from wikijs_mcp.api import WikiJSError, PageNotFoundError
from wikijs_mcp.api import queries, mutations
from wikijs_mcp.core.formatters import (
    format_page,
    format_page_list,
    format_page_tree,
    format_response_result,
    format_search_results,
)
from wikijs_mcp.core.reconciler import EDITOR, build_page_update
from wikijs_mcp.core.tree_builder import build_page_tree
from wikijs_mcp.schemas.page import ResponseResult, WikiPage
from wikijs_mcp.services.base import (
    DEFAULT_LOCALE,
    WikiService,
    filter_by_locale,
    parse_model,
    parse_models,
    pluck,
)

logger = logging.getLogger(__name__)


class PageService(WikiService):
    """Page operations, each returning text for a tool result."""

    async def search_pages(self, query: str) -> str:
        try:
            data = await self.client.execute(queries.SEARCH_PAGES, {"query": query})
            search = pluck(data, "pages", "search")
            results = parse_models(WikiPage, pluck(search, "results"))
            total = pluck(search, "totalHits")
        except WikiJSError as e:
            return f"Error searching pages: {e}"

        return format_search_results(results, total)

    async def list_pages(self) -> str:
        try:
            pages = await self.fetch_page_list()
        except WikiJSError as e:
            return f"Error listing pages: {e}"
        return format_page_list(pages)

    async def get_page(self, path: str, locale: str = DEFAULT_LOCALE) -> str:
        try:
            page = await self.fetch_page_by_path(path, locale)
        except WikiJSError as e:
            return f"Error getting page: {e}"

        if page is None:
            return f"Page not found: {path}"
        return format_page(page)

    async def create_page(
        self,
        path: str,
        title: str,
        content: str,
        description: str = "",
        locale: str = DEFAULT_LOCALE,
        is_published: bool = True,
    ) -> str:
        variables = {
            "path": path,
            "title": title,
            "content": content,
            "description": description,
            "locale": locale,
            "isPublished": is_published,
            "isPrivate": False,
            "editor": EDITOR,
            "tags": [],
        }

        logger.info("Creating page %s", path)
        try:
            data = await self.client.execute(mutations.CREATE_PAGE, variables)
            created = pluck(data, "pages", "create")
            response = parse_model(ResponseResult, pluck(created, "responseResult"))
            page = created.get("page")
            page = parse_model(WikiPage, page) if page else None
        except WikiJSError as e:
            return f"Error creating page: {e}"

        result = format_response_result(
            response.succeeded, response.message, response.error_code
        )
        if page:
            result += f"\n\nCreated page:\n{format_page(page)}"
        return result

    async def update_page(
        self,
        page_id: int,
        title: Optional[str] = None,
        content: Optional[str] = None,
        description: Optional[str] = None,
        is_published: Optional[bool] = None,
    ) -> str:
        """
        Update some fields of a page, keeping everything else as it is.

        Omitted fields and the page's tags are re-submitted unchanged.
        """
        def change(page):
            return build_page_update(
                page,
                title=title,
                content=content,
                description=description,
                is_published=is_published,
            )

        try:
            outcome = await self.reconcile(page_id, change)
        except PageNotFoundError as e:
            return str(e)
        except WikiJSError as e:
            return f"Error updating page: {e}"

        response = outcome.response
        result = format_response_result(
            response.succeeded, response.message, response.error_code
        )
        if outcome.page:
            result += f"\n\nUpdated page:\n{format_page(outcome.page)}"
        return result

    async def delete_page(self, page_id: int) -> str:
        logger.info("Deleting page %s", page_id)
        try:
            data = await self.client.execute(mutations.DELETE_PAGE, {"id": page_id})
            response = parse_model(
                ResponseResult, pluck(data, "pages", "delete", "responseResult")
            )
        except WikiJSError as e:
            return f"Error deleting page: {e}"

        return format_response_result(
            response.succeeded, response.message, response.error_code
        )

    async def get_page_tree(
        self,
        parent: str = "",
        locale: str = DEFAULT_LOCALE,
    ) -> str:
        try:
            pages = await self.fetch_page_list()
        except WikiJSError as e:
            return f"Error getting page tree: {e}"

        tree = build_page_tree(filter_by_locale(pages, locale), parent)
        return f"Page Tree:\n\n{format_page_tree(tree)}"
