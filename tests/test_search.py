"""
Unit tests for web search

Tests:
- SearchService session gate, missing config, provider errors
- WebSearchClient request shapes and response parsing per provider
"""

import json
from unittest.mock import AsyncMock, patch

import httpx
import pytest
from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError

from conftest import OWNER_ID
from hivechat.external_services.web_search import WebSearchClient, WebSearchError
from hivechat.models import SearchEngineConfig
from hivechat.search.schema import (
    SearchEngineSettings,
    WebSearchResponse,
    WebSearchResult,
)
from hivechat.search.service import SEARCH_NOT_CONFIGURED_MESSAGE, SearchService


async def add_engine(db_session, engine_id="tavily", is_active=True, **kwargs):
    config = SearchEngineConfig(
        id=engine_id,
        name=engine_id.capitalize(),
        api_key="secret",
        is_active=is_active,
        **kwargs,
    )
    db_session.add(config)
    await db_session.commit()
    return config


@pytest.mark.unit
@pytest.mark.asyncio
class TestSearchService:
    async def test_anonymous_caller_is_rejected(self, db_session):
        service = SearchService(client=AsyncMock())

        with pytest.raises(HTTPException) as exc_info:
            await service.get_search_result(None, "python", db_session)

        assert exc_info.value.status_code == 401
        service.client.search.assert_not_called()

    async def test_no_active_config(self, db_session):
        await add_engine(db_session, is_active=False)
        service = SearchService(client=AsyncMock())

        result = await service.get_search_result(OWNER_ID, "python", db_session)

        assert result.status == "error"
        assert result.data is None
        assert result.message == SEARCH_NOT_CONFIGURED_MESSAGE
        service.client.search.assert_not_called()

    async def test_success_uses_active_engine(self, db_session):
        await add_engine(db_session, "jina", is_active=False)
        await add_engine(db_session, "bocha", max_results=3)
        client = AsyncMock()
        client.search.return_value = WebSearchResponse(
            query="python",
            results=[WebSearchResult(title="Python", url="https://python.org")],
        )

        result = await SearchService(client=client).get_search_result(
            OWNER_ID, "python", db_session
        )

        assert result.status == "success"
        assert result.message == "success"
        assert result.data.results[0].url == "https://python.org"

        engine, keyword = client.search.call_args.args
        assert engine == SearchEngineSettings(
            id="bocha", name="Bocha", api_key="secret", max_results=3
        )
        assert keyword == "python"

    async def test_provider_error_is_reported(self, db_session):
        await add_engine(db_session)
        client = AsyncMock()
        client.search.side_effect = WebSearchError("Tavily search error (HTTP 401)")

        result = await SearchService(client=client).get_search_result(
            OWNER_ID, "python", db_session
        )

        assert result.status == "error"
        assert result.data is None
        assert result.message == "Tavily search error (HTTP 401)"

    async def test_config_lookup_error(self, db_session):
        client = AsyncMock()
        service = SearchService(client=client)

        with patch.object(
            service,
            "get_active_engine",
            side_effect=SQLAlchemyError("select failed"),
        ):
            result = await service.get_search_result(OWNER_ID, "python", db_session)

        assert result.status == "error"
        assert result.data is None
        client.search.assert_not_called()

    async def test_non_positive_limit_falls_back_to_default(self, db_session):
        await add_engine(db_session, max_results=0)
        client = AsyncMock()
        client.search.return_value = WebSearchResponse(query="python")

        result = await SearchService(client=client).get_search_result(
            OWNER_ID, "python", db_session
        )

        assert result.status == "success"
        engine, _ = client.search.call_args.args
        assert engine.max_results == 5


def engine(engine_id: str, max_results: int = 5) -> SearchEngineSettings:
    return SearchEngineSettings(
        id=engine_id, name=engine_id, api_key="secret", max_results=max_results
    )


@pytest.mark.unit
@pytest.mark.asyncio
class TestWebSearchClient:
    async def test_tavily(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(
                200,
                json={
                    "answer": "A language.",
                    "results": [
                        {
                            "title": "Python",
                            "url": "https://python.org",
                            "content": "Welcome",
                            "score": 0.9,
                        }
                    ],
                },
            )

        client = WebSearchClient(transport=httpx.MockTransport(handler))
        result = await client.search(engine("tavily", 3), "python")

        assert seen["url"] == "https://api.tavily.com/search"
        assert seen["body"] == {"api_key": "secret", "query": "python", "max_results": 3}
        assert result.answer == "A language."
        assert result.results == [
            WebSearchResult(
                title="Python", url="https://python.org", content="Welcome", score=0.9
            )
        ]

    async def test_jina(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["request"] = request
            return httpx.Response(
                200,
                json={
                    "data": [
                        {"title": "A", "url": "https://a.example", "description": "about a"},
                        {"title": "B", "url": "https://b.example", "content": "b body"},
                    ]
                },
            )

        client = WebSearchClient(transport=httpx.MockTransport(handler))
        result = await client.search(engine("jina"), "fastapi")

        request = seen["request"]
        assert request.method == "GET"
        assert request.url.params["q"] == "fastapi"
        assert request.headers["Authorization"] == "Bearer secret"
        assert [r.content for r in result.results] == ["about a", "b body"]

    async def test_bocha(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert json.loads(request.content)["count"] == 5
            return httpx.Response(
                200,
                json={
                    "data": {
                        "webPages": {
                            "value": [
                                {
                                    "name": "Page",
                                    "url": "https://page.example",
                                    "snippet": "short",
                                    "summary": "long summary",
                                }
                            ]
                        }
                    }
                },
            )

        client = WebSearchClient(transport=httpx.MockTransport(handler))
        result = await client.search(engine("bocha"), "news")

        assert result.results[0].title == "Page"
        assert result.results[0].content == "long summary"

    async def test_results_are_truncated_to_max_results(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={
                    "results": [
                        {"title": str(i), "url": f"https://{i}.example", "content": ""}
                        for i in range(10)
                    ]
                },
            )

        client = WebSearchClient(transport=httpx.MockTransport(handler))
        result = await client.search(engine("tavily", 2), "many")

        assert [r.title for r in result.results] == ["0", "1"]

    async def test_http_error_status(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, text="invalid api key")

        client = WebSearchClient(transport=httpx.MockTransport(handler))

        with pytest.raises(WebSearchError) as exc_info:
            await client.search(engine("tavily"), "python")

        assert "HTTP 401" in str(exc_info.value)
        assert "invalid api key" in str(exc_info.value)

    async def test_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("too slow", request=request)

        client = WebSearchClient(transport=httpx.MockTransport(handler))

        with pytest.raises(WebSearchError, match="timed out"):
            await client.search(engine("jina"), "python")

    async def test_unsupported_engine(self):
        client = WebSearchClient(transport=httpx.MockTransport(lambda r: httpx.Response(200)))

        with pytest.raises(WebSearchError, match="unsupported search engine: bing"):
            await client.search(engine("bing"), "python")

    async def test_missing_api_key(self):
        client = WebSearchClient(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        settings = SearchEngineSettings(id="tavily", name="Tavily", api_key=None)

        with pytest.raises(WebSearchError, match="api key"):
            await client.search(settings, "python")
