from .client import WebSearchClient, WebSearchError, web_search_client

__all__ = ["WebSearchClient", "WebSearchError", "web_search_client"]
