import logging
from typing import Any, Dict, List, Optional

import httpx

from hivechat.core.config import settings
from hivechat.search.schema import (
    SearchEngineSettings,
    WebSearchResponse,
    WebSearchResult,
)

logger = logging.getLogger(__name__)


class WebSearchError(Exception):
    """Search provider failure; the message is shown to the user"""


class WebSearchClient:
    """HTTP client for the supported web search providers"""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = settings.SEARCH_TIMEOUT
        # injectable for tests
        self.transport = transport

    async def search(
        self, engine: SearchEngineSettings, keyword: str
    ) -> WebSearchResponse:
        """
        Run a search with the given engine

        Args:
            engine: active engine settings
            keyword: search keyword

        Returns:
            normalised search response
        """
        handlers = {
            "tavily": self._search_tavily,
            "jina": self._search_jina,
            "bocha": self._search_bocha,
        }
        handler = handlers.get(engine.id)
        if handler is None:
            raise WebSearchError(f"unsupported search engine: {engine.id}")
        if not engine.api_key:
            raise WebSearchError(f"{engine.name} api key is not configured")

        logger.info(f"🔍 {engine.name} search: {keyword}")
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await handler(client, engine, keyword)
        except httpx.TimeoutException:
            error_msg = f"{engine.name} search timed out ({self.timeout}s)"
            logger.error(error_msg)
            raise WebSearchError(error_msg)
        except httpx.HTTPError as e:
            error_msg = f"{engine.name} search request failed: {e}"
            logger.error(error_msg)
            raise WebSearchError(error_msg)

        response.results = response.results[: engine.max_results]
        logger.info(f"✅ {engine.name} returned {len(response.results)} results")
        return response

    def _check_response(self, engine: SearchEngineSettings, response: httpx.Response):
        if response.status_code != 200:
            error_msg = f"{engine.name} search error (HTTP {response.status_code})"
            logger.error(f"{error_msg}: {response.text[:200]}")
            raise WebSearchError(f"{error_msg}: {response.text[:200]}")

    async def _search_tavily(
        self, client: httpx.AsyncClient, engine: SearchEngineSettings, keyword: str
    ) -> WebSearchResponse:
        response = await client.post(
            f"{settings.TAVILY_API_URL}/search",
            json={
                "api_key": engine.api_key,
                "query": keyword,
                "max_results": engine.max_results,
            },
        )
        self._check_response(engine, response)
        body: Dict[str, Any] = response.json()

        return WebSearchResponse(
            query=keyword,
            answer=body.get("answer"),
            results=[
                WebSearchResult(
                    title=item.get("title") or "",
                    url=item.get("url") or "",
                    content=item.get("content") or "",
                    score=item.get("score"),
                )
                for item in body.get("results") or []
            ],
        )

    async def _search_jina(
        self, client: httpx.AsyncClient, engine: SearchEngineSettings, keyword: str
    ) -> WebSearchResponse:
        response = await client.get(
            f"{settings.JINA_SEARCH_URL}/",
            params={"q": keyword},
            headers={
                "Authorization": f"Bearer {engine.api_key}",
                "Accept": "application/json",
                "X-Respond-With": "no-content",
            },
        )
        self._check_response(engine, response)
        items: List[Dict[str, Any]] = response.json().get("data") or []

        return WebSearchResponse(
            query=keyword,
            results=[
                WebSearchResult(
                    title=item.get("title") or "",
                    url=item.get("url") or "",
                    content=item.get("content") or item.get("description") or "",
                )
                for item in items
            ],
        )

    async def _search_bocha(
        self, client: httpx.AsyncClient, engine: SearchEngineSettings, keyword: str
    ) -> WebSearchResponse:
        response = await client.post(
            f"{settings.BOCHA_API_URL}/v1/web-search",
            headers={"Authorization": f"Bearer {engine.api_key}"},
            json={"query": keyword, "count": engine.max_results, "summary": True},
        )
        self._check_response(engine, response)
        body: Dict[str, Any] = response.json()
        pages = ((body.get("data") or {}).get("webPages") or {}).get("value") or []

        return WebSearchResponse(
            query=keyword,
            results=[
                WebSearchResult(
                    title=page.get("name") or "",
                    url=page.get("url") or "",
                    content=page.get("summary") or page.get("snippet") or "",
                )
                for page in pages
            ],
        )


# singleton
web_search_client = WebSearchClient()
