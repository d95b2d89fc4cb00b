"""
Shared fixtures: environment, settings and a fake Wiki.js client.
"""

import copy
import os

import pytest

from wikijs_mcp.api import GraphQLError, queries, mutations

os.environ.setdefault("WIKIJS_API_URL", "http://localhost:3000/graphql")
os.environ.setdefault("WIKIJS_API_TOKEN", "test-token")


@pytest.fixture
def settings():
    from wikijs_mcp.config import Settings
    return Settings()


class FakeWikiClient:
    """In-memory stand-in implementing ``execute(query, variables)``."""

    def __init__(self, pages=None, tags=None, update_succeeds=True):
        self.pages = {p["id"]: copy.deepcopy(p) for p in pages or []}
        self.tags = tags or []
        self.update_succeeds = update_succeeds
        self.failing_ids = set()
        self.calls = []

    @property
    def writes(self):
        return [v for q, v in self.calls if q == mutations.UPDATE_PAGE]

    def lookups(self):
        return [v["id"] for q, v in self.calls if q == queries.GET_PAGE_BY_ID]

    async def execute(self, query, variables=None):
        self.calls.append((query, variables))

        if query == queries.LIST_PAGES:
            summary = ("id", "path", "title", "description", "isPublished", "locale")
            return {"pages": {"list": [
                {k: p[k] for k in summary if k in p} for p in self.pages.values()
            ]}}

        if query == queries.GET_PAGE_BY_ID:
            if variables["id"] in self.failing_ids:
                raise GraphQLError([{"message": "lookup failed"}])
            return {"pages": {"single": copy.deepcopy(self.pages.get(variables["id"]))}}

        if query == queries.GET_PAGE:
            found = next(
                (p for p in self.pages.values() if p["path"] == variables["path"]),
                None,
            )
            return {"pages": {"singleByPath": copy.deepcopy(found)}}

        if query == queries.LIST_TAGS:
            return {"pages": {"tags": self.tags}}

        if query == mutations.UPDATE_PAGE:
            page = self.pages[variables["id"]]
            if self.update_succeeds:
                page.update({k: v for k, v in variables.items() if k != "tags"})
                page["tags"] = [
                    {"id": i + 1, "tag": t} for i, t in enumerate(variables["tags"])
                ]
            return {"pages": {"update": {
                "responseResult": {
                    "succeeded": self.update_succeeds,
                    "errorCode": None if self.update_succeeds else 6001,
                    "message": None if self.update_succeeds else "Update rejected",
                },
                "page": None,
            }}}

        raise AssertionError(f"Unexpected query: {query}")


def make_page(page_id, path, title=None, tags=(), **extra):
    page = {
        "id": page_id,
        "path": path,
        "title": title or path.split("/")[-1].title(),
        "description": f"About {path}",
        "content": f"# {path}",
        "isPublished": True,
        "isPrivate": False,
        "locale": "en",
        "tags": [{"id": i + 1, "tag": t, "title": t.upper()} for i, t in enumerate(tags)],
    }
    page.update(extra)
    return page


@pytest.fixture
def wiki_pages():
    return [
        make_page(1, "home", "Home", tags=["start"]),
        make_page(2, "docs", "Docs", tags=["docs", "guide"]),
        make_page(3, "docs/api/auth", "Auth API", tags=["api"]),
        make_page(4, "blog/2024/launch", "Launch", tags=["news", "guide"]),
        make_page(5, "de/start", "Start", tags=["guide"], locale="de"),
    ]


@pytest.fixture
def fake_client(wiki_pages):
    return FakeWikiClient(
        pages=wiki_pages,
        tags=[
            {"id": 1, "tag": "api", "title": "API"},
            {"id": 2, "tag": "guide", "title": None, "createdAt": "2024-01-01"},
        ],
    )
