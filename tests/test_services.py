"""
Integration Tests for Services (fake Wiki.js client)
"""

import asyncio

import pytest
from unittest.mock import AsyncMock

from wikijs_mcp.api import (
    GraphQLError,
    InvalidResourceURIError,
    PageNotFoundError,
    ResponseError,
    TransportError,
    mutations,
    queries,
)
from wikijs_mcp.config import Settings
from wikijs_mcp.services import PageService, ResourceService, TagService


class TestPageService:
    """Tests for PageService."""

    @pytest.mark.asyncio
    async def test_get_page_tree(self, settings, fake_client):
        service = PageService(settings, client=fake_client)

        result = await service.get_page_tree()

        assert result.startswith("Page Tree:\n\n")
        assert "📁 blog" in result
        assert "    📄 Auth API" in result

    @pytest.mark.asyncio
    async def test_get_page_tree_with_parent(self, settings, fake_client):
        service = PageService(settings, client=fake_client)

        result = await service.get_page_tree(parent="docs")

        assert "Docs" in result
        assert "Home" not in result
        assert "blog" not in result

    @pytest.mark.asyncio
    async def test_get_page_tree_filters_locale(self, settings, fake_client):
        service = PageService(settings, client=fake_client)

        result = await service.get_page_tree(locale="de")

        assert result == "Page Tree:\n\n📁 de\n  📄 Start"

    @pytest.mark.asyncio
    async def test_get_page_not_found(self, settings, fake_client):
        service = PageService(settings, client=fake_client)

        result = await service.get_page(path="nope")

        assert result == "Page not found: nope"

    @pytest.mark.asyncio
    async def test_update_page_keeps_other_fields_and_tags(self, settings, fake_client):
        service = PageService(settings, client=fake_client)

        result = await service.update_page(page_id=2, title="Documentation")

        assert result.startswith("✓ Success")
        [write] = fake_client.writes
        assert write["title"] == "Documentation"
        assert write["content"] == "# docs"
        assert write["description"] == "About docs"
        assert write["tags"] == ["docs", "guide"]
        assert write["editor"] == "markdown"

    @pytest.mark.asyncio
    async def test_update_missing_page_never_writes(self, settings, fake_client):
        service = PageService(settings, client=fake_client)

        result = await service.update_page(page_id=99, title="X")

        assert result == "Page not found with ID: 99"
        assert fake_client.writes == []

    @pytest.mark.asyncio
    async def test_create_page_variables(self, settings):
        client = AsyncMock()
        client.execute.return_value = {"pages": {"create": {
            "responseResult": {"succeeded": True, "message": "Page created"},
            "page": {"id": 10, "path": "new", "title": "New"},
        }}}
        service = PageService(settings, client=client)

        result = await service.create_page(path="new", title="New", content="Hi")

        query, variables = client.execute.call_args.args
        assert query == mutations.CREATE_PAGE
        assert variables["isPrivate"] is False
        assert variables["isPublished"] is True
        assert variables["tags"] == []
        assert result.startswith("✓ Success: Page created\n\nCreated page:\n# New")

    @pytest.mark.asyncio
    async def test_delete_page_failure_result(self, settings):
        client = AsyncMock()
        client.execute.return_value = {"pages": {"delete": {"responseResult": {
            "succeeded": False, "errorCode": 6003, "message": "Page not found.",
        }}}}
        service = PageService(settings, client=client)

        result = await service.delete_page(page_id=5)

        assert result == "✗ Failed (Error 6003): Page not found."

    @pytest.mark.asyncio
    async def test_errors_become_text(self, settings):
        client = AsyncMock()
        client.execute.side_effect = TransportError("connection refused")
        service = PageService(settings, client=client)

        assert (await service.list_pages()).startswith("Error listing pages: HTTP Error")
        assert (await service.search_pages("q")).startswith("Error searching pages:")
        assert (await service.get_page_tree()).startswith("Error getting page tree:")

    @pytest.mark.asyncio
    async def test_invalid_record_becomes_text(self, settings):
        client = AsyncMock()
        client.execute.return_value = {"pages": {"list": [{"id": "not-a-number"}]}}
        service = PageService(settings, client=client)

        result = await service.list_pages()

        assert result.startswith("Error listing pages: Unexpected response: invalid WikiPage")


class TestTagService:
    """Tests for TagService."""

    @pytest.mark.asyncio
    async def test_add_page_tags(self, settings, fake_client):
        service = TagService(settings, client=fake_client)

        result = await service.add_page_tags(page_id=2, tags=["guide", "howto"])

        assert result == "✓ Success: Added 2 tag(s)\n\nNew tags: docs, guide, howto"
        [write] = fake_client.writes
        assert write["tags"] == ["docs", "guide", "howto"]
        assert write["path"] == "docs"
        assert write["isPublished"] is True

    @pytest.mark.asyncio
    async def test_remove_page_tags(self, settings, fake_client):
        service = TagService(settings, client=fake_client)

        result = await service.remove_page_tags(page_id=2, tags=["docs", "guide"])

        assert result.endswith("Remaining tags: None")
        assert fake_client.writes[0]["tags"] == []

    @pytest.mark.asyncio
    async def test_add_then_remove_round_trip(self, settings, fake_client):
        service = TagService(settings, client=fake_client)

        await service.add_page_tags(page_id=4, tags=["temp"])
        await service.remove_page_tags(page_id=4, tags=["temp"])

        page = await service.fetch_page_by_id(4)
        assert page.tag_tokens == ["news", "guide"]

    @pytest.mark.asyncio
    async def test_one_read_one_write(self, settings, fake_client):
        service = TagService(settings, client=fake_client)

        await service.add_page_tags(page_id=1, tags=["x"])

        assert fake_client.lookups() == [1]
        assert len(fake_client.writes) == 1

    @pytest.mark.asyncio
    async def test_missing_page_no_write(self, settings, fake_client):
        service = TagService(settings, client=fake_client)

        result = await service.add_page_tags(page_id=404, tags=["x"])

        assert result == "Page not found with ID: 404"
        assert fake_client.writes == []

    @pytest.mark.asyncio
    async def test_rejected_write_is_reported(self, settings, fake_client):
        fake_client.update_succeeds = False
        service = TagService(settings, client=fake_client)

        result = await service.add_page_tags(page_id=1, tags=["x"])

        assert result.startswith("✗ Failed (Error 6001): Added 1 tag(s)")
        assert len(fake_client.writes) == 1

    @pytest.mark.asyncio
    async def test_reconcile_raises_not_found(self, settings, fake_client):
        service = TagService(settings, client=fake_client)

        with pytest.raises(PageNotFoundError):
            await service.reconcile(123, lambda page: pytest.fail("no change expected"))

    @pytest.mark.asyncio
    async def test_search_by_tags_or_semantics_in_list_order(self, settings, fake_client):
        service = TagService(settings, client=fake_client)

        pages = await service.find_pages_by_tags(["guide", "api"])

        assert [p.id for p in pages] == [2, 3, 4, 5]
        assert fake_client.lookups() == [1, 2, 3, 4, 5]

    @pytest.mark.asyncio
    async def test_search_by_tags_locale(self, settings, fake_client):
        service = TagService(settings, client=fake_client)

        pages = await service.find_pages_by_tags(["guide"], locale="de")

        assert [p.id for p in pages] == [5]

    @pytest.mark.asyncio
    async def test_search_by_tags_no_match(self, settings, fake_client):
        service = TagService(settings, client=fake_client)

        result = await service.search_by_tags(tags=["missing"])

        assert result == "No pages found with tags: missing"

    @pytest.mark.asyncio
    async def test_search_by_tags_formats_matches(self, settings, fake_client):
        service = TagService(settings, client=fake_client)

        result = await service.search_by_tags(tags=["api"])

        assert result.startswith("Found 1 page(s) with tags [api]:")
        assert "- **Tags:** api" in result

    @pytest.mark.asyncio
    async def test_search_by_tags_failed_lookup_is_reported(self, settings, fake_client):
        fake_client.failing_ids.add(3)
        service = TagService(settings, client=fake_client)

        result = await service.search_by_tags(tags=["guide"])

        assert result.startswith("Error searching by tags: GraphQL Error")

    @pytest.mark.asyncio
    async def test_search_by_tags_several_failed_lookups(self, monkeypatch, fake_client):
        monkeypatch.setenv("WIKIJS_TAG_SEARCH_CONCURRENCY", "5")
        fake_client.failing_ids.update({2, 3, 4})
        service = TagService(Settings(), client=fake_client)

        result = await service.search_by_tags(tags=["guide"])

        assert result.startswith("Error searching by tags: GraphQL Error")

    @pytest.mark.asyncio
    async def test_failed_lookup_cancels_pending_lookups(self, monkeypatch, fake_client):
        monkeypatch.setenv("WIKIJS_TAG_SEARCH_CONCURRENCY", "5")
        cancelled = []
        execute = fake_client.execute

        async def slow_execute(query, variables=None):
            if query == queries.GET_PAGE_BY_ID and variables["id"] == 2:
                raise RuntimeError("connection reset")
            if query == queries.GET_PAGE_BY_ID and variables["id"] > 2:
                try:
                    await asyncio.sleep(10)
                except asyncio.CancelledError:
                    cancelled.append(variables["id"])
                    raise
            return await execute(query, variables)

        fake_client.execute = slow_execute
        service = TagService(Settings(), client=fake_client)

        with pytest.raises(RuntimeError):
            await service.find_pages_by_tags(["guide"])

        assert sorted(cancelled) == [3, 4, 5]

    @pytest.mark.asyncio
    async def test_search_by_tags_with_concurrency(self, monkeypatch, fake_client):
        monkeypatch.setenv("WIKIJS_TAG_SEARCH_CONCURRENCY", "4")
        service = TagService(Settings(), client=fake_client)

        pages = await service.find_pages_by_tags(["guide"])

        assert [p.id for p in pages] == [2, 4, 5]

    @pytest.mark.asyncio
    async def test_get_page_tags(self, settings, fake_client):
        service = TagService(settings, client=fake_client)

        result = await service.get_page_tags(page_id=2)

        assert result.startswith('Tags for page "Docs" (docs):')
        assert "- **DOCS** (ID: 1)" in result
        assert "- **GUIDE** (ID: 2)" in result

    @pytest.mark.asyncio
    async def test_list_all_tags(self, settings, fake_client):
        service = TagService(settings, client=fake_client)

        result = await service.list_all_tags()

        assert result.startswith("Found 2 tag(s):")
        assert "- **guide** (ID: 2)" in result
        assert "  - Created: 2024-01-01" in result


class TestResourceService:
    """Tests for ResourceService."""

    @pytest.mark.asyncio
    async def test_list_resources(self, settings, fake_client):
        service = ResourceService(settings, client=fake_client)

        resources = await service.list_resources()

        assert resources[2] == {
            "uri": "wikijs://page/docs/api/auth",
            "name": "Auth API",
            "mimeType": "text/plain",
            "description": "About docs/api/auth",
        }

    @pytest.mark.asyncio
    async def test_read_resource(self, settings, fake_client):
        service = ResourceService(settings, client=fake_client)

        content = await service.read_resource("wikijs://page/docs/api/auth")

        assert content == "# docs/api/auth"

    @pytest.mark.asyncio
    async def test_malformed_uri_rejected_before_any_call(self, settings, fake_client):
        service = ResourceService(settings, client=fake_client)

        for uri in ("wikijs://page/", "http://page/home", "wikijs://pages/home"):
            with pytest.raises(InvalidResourceURIError):
                await service.read_resource(uri)

        assert fake_client.calls == []

    @pytest.mark.asyncio
    async def test_missing_page(self, settings, fake_client):
        service = ResourceService(settings, client=fake_client)

        with pytest.raises(PageNotFoundError):
            await service.read_resource("wikijs://page/ghost")

    @pytest.mark.asyncio
    async def test_list_resources_propagates_api_errors(self, settings):
        client = AsyncMock()
        client.execute.side_effect = GraphQLError([{"message": "forbidden"}])
        service = ResourceService(settings, client=client)

        with pytest.raises(GraphQLError):
            await service.list_resources()


EMPTY_RESPONSE_CALLS = [
    (PageService, lambda s: s.search_pages("q"), "Error searching pages"),
    (PageService, lambda s: s.list_pages(), "Error listing pages"),
    (PageService, lambda s: s.get_page("home"), "Error getting page"),
    (PageService, lambda s: s.create_page("new", "New", "Hi"), "Error creating page"),
    (PageService, lambda s: s.update_page(1, title="X"), "Error updating page"),
    (PageService, lambda s: s.delete_page(1), "Error deleting page"),
    (PageService, lambda s: s.get_page_tree(), "Error getting page tree"),
    (TagService, lambda s: s.get_page_tags(1), "Error getting page tags"),
    (TagService, lambda s: s.add_page_tags(1, ["x"]), "Error adding tags"),
    (TagService, lambda s: s.remove_page_tags(1, ["x"]), "Error removing tags"),
    (TagService, lambda s: s.search_by_tags(["x"]), "Error searching by tags"),
    (TagService, lambda s: s.list_all_tags(), "Error listing tags"),
]


class TestMalformedResponses:
    """Responses without the expected shape are reported as text."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("service_cls, call, prefix", EMPTY_RESPONSE_CALLS)
    async def test_empty_data(self, settings, service_cls, call, prefix):
        client = AsyncMock()
        client.execute.return_value = {}
        service = service_cls(settings, client=client)

        result = await call(service)

        assert result == f"{prefix}: Unexpected response: missing pages"

    @pytest.mark.asyncio
    async def test_null_section(self, settings):
        client = AsyncMock()
        client.execute.return_value = {"pages": {"delete": None}}
        service = PageService(settings, client=client)

        result = await service.delete_page(page_id=1)

        assert result == (
            "Error deleting page: Unexpected response: missing pages.delete.responseResult"
        )

    @pytest.mark.asyncio
    async def test_resource_listing_raises_response_error(self, settings):
        client = AsyncMock()
        client.execute.return_value = {}
        service = ResourceService(settings, client=client)

        with pytest.raises(ResponseError):
            await service.list_resources()
