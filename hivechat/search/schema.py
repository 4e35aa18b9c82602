"""
🔍 Web search schemas
"""

from typing import List, Optional

from pydantic import Field

from hivechat.core.schema import SchemaBase


class WebSearchRequest(SchemaBase):
    keyword: str = Field(..., min_length=1, description="search keyword")


class SearchEngineSettings(SchemaBase):
    """Provider credentials taken from the active search_engine_config row"""

    id: str = Field(..., description="engine id: tavily / jina / bocha")
    name: str = Field(..., description="display name")
    api_key: Optional[str] = Field(None, description="provider api key")
    max_results: int = Field(5, ge=1, description="result limit")


class WebSearchResult(SchemaBase):
    title: str = Field(..., description="page title")
    url: str = Field(..., description="page url")
    content: str = Field("", description="snippet or summary")
    score: Optional[float] = Field(None, description="provider relevance score")


class WebSearchResponse(SchemaBase):
    query: str = Field(..., description="searched keyword")
    answer: Optional[str] = Field(None, description="provider generated answer")
    results: List[WebSearchResult] = Field(default_factory=list)
