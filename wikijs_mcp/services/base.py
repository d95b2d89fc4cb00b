"""
Services - Base Wiki Service

Shared reads, the single-write update path, and the read-modify-write
reconciliation used by every page update.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from wikijs_mcp.api import WikiJSClient, PageNotFoundError, ResponseError
from wikijs_mcp.api import queries, mutations
from wikijs_mcp.config import get_settings
from wikijs_mcp.schemas.page import PageUpdate, ResponseResult, WikiPage

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass
class UpdateOutcome:
    """Result of a single UPDATE_PAGE call."""
    response: ResponseResult
    page: Optional[WikiPage]


@dataclass
class ReconcileOutcome:
    """Result of a read-modify-write on one page."""
    current: WikiPage
    update: PageUpdate
    response: ResponseResult
    page: Optional[WikiPage]


def pluck(data: Any, *keys: str) -> Any:
    """
    Walk nested response objects by key.

    Raises:
        ResponseError: a level is missing or is not an object
    """
    for depth, key in enumerate(keys):
        if not isinstance(data, dict) or key not in data:
            raise ResponseError(f"missing {'.'.join(keys[:depth + 1])}")
        data = data[key]
    return data


def parse_model(model: Type[ModelT], raw: Any) -> ModelT:
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise ResponseError(f"invalid {model.__name__}: {e}") from e


def parse_models(model: Type[ModelT], raw: Any) -> List[ModelT]:
    if not isinstance(raw, list):
        raise ResponseError(f"expected a list of {model.__name__}")
    return [parse_model(model, item) for item in raw]


def filter_by_locale(pages: Iterable[WikiPage], locale: str) -> List[WikiPage]:
    """Keep pages in ``locale``; the default locale means no filtering."""
    if locale == DEFAULT_LOCALE:
        return list(pages)
    return [p for p in pages if p.locale == locale]


class WikiService:
    """Base class for services that talk to Wiki.js."""

    def __init__(self, settings=None, client=None):
        self.settings = settings or get_settings()
        self.client = client or WikiJSClient(self.settings)

    async def fetch_page_list(self) -> List[WikiPage]:
        data = await self.client.execute(queries.LIST_PAGES)
        return parse_models(WikiPage, pluck(data, "pages", "list"))

    async def fetch_page_by_id(self, page_id: int) -> Optional[WikiPage]:
        """Fetch a full page record, tags included, or None if missing."""
        data = await self.client.execute(queries.GET_PAGE_BY_ID, {"id": page_id})
        page = pluck(data, "pages", "single")
        return parse_model(WikiPage, page) if page else None

    async def fetch_page_by_path(
        self,
        path: str,
        locale: str = DEFAULT_LOCALE,
    ) -> Optional[WikiPage]:
        data = await self.client.execute(
            queries.GET_PAGE, {"path": path, "locale": locale}
        )
        page = pluck(data, "pages", "singleByPath")
        return parse_model(WikiPage, page) if page else None

    async def submit_update(self, update: PageUpdate) -> UpdateOutcome:
        """Send one full-record update; the response is returned untouched."""
        logger.info("Updating page %s (%s)", update.id, update.path)
        data = await self.client.execute(
            mutations.UPDATE_PAGE, update.to_variables()
        )
        result = pluck(data, "pages", "update")
        page = result.get("page") if isinstance(result, dict) else None
        return UpdateOutcome(
            response=parse_model(ResponseResult, pluck(result, "responseResult")),
            page=parse_model(WikiPage, page) if page else None,
        )

    async def reconcile(
        self,
        page_id: int,
        change: Callable[[WikiPage], PageUpdate],
    ) -> ReconcileOutcome:
        """
        Read a page, derive its full update payload, write it once.

        Args:
            page_id: Page to update
            change: Builds the full payload from the current page

        Returns:
            ReconcileOutcome with the payload that was written

        Raises:
            PageNotFoundError: page does not exist; nothing was written
        """
        current = await self.fetch_page_by_id(page_id)
        if current is None:
            raise PageNotFoundError(page_id)

        update = change(current)
        outcome = await self.submit_update(update)
        return ReconcileOutcome(
            current=current,
            update=update,
            response=outcome.response,
            page=outcome.page,
        )
