"""
Documentation search via the AWS docs search API. Endpoint order is the
ranking; failures degrade to a single synthetic result so the tool always
returns a list.
"""
import logging
from typing import Any, Optional

import httpx

from agent_tools.base import SearchResult
from agent_tools.http_client import build_http_client
from app.config import Settings, get_settings

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10


def build_search_request(search_phrase: str, settings: Settings) -> dict[str, Any]:
    return {
        "textQuery": {"input": search_phrase},
        "contextAttributes": [{"key": "domain", "value": settings.docs_domain}],
        "acceptSuggestionBody": "RawText",
        "locales": [settings.search_locale],
    }


def parse_search_results(data: dict[str, Any], limit: int) -> list[SearchResult]:
    """
    Take the first `limit` suggestions; those with a text excerpt are numbered
    1..n in endpoint order. Context is the summary, else the raw suggestion body.
    """
    results: list[SearchResult] = []
    for suggestion in (data.get("suggestions") or [])[:limit]:
        excerpt = suggestion.get("textExcerptSuggestion") if isinstance(suggestion, dict) else None
        if not isinstance(excerpt, dict):
            continue
        results.append(
            SearchResult(
                rank_order=len(results) + 1,
                url=excerpt.get("link") or "",
                title=excerpt.get("title") or "",
                context=excerpt.get("summary") or excerpt.get("suggestionBody") or None,
            )
        )
    return results


def search_documentation_impl(
    search_phrase: str,
    limit: int = DEFAULT_LIMIT,
    *,
    client: Optional[httpx.Client] = None,
    settings: Optional[Settings] = None,
) -> list[SearchResult]:
    """Run one search request. Used by the tool; client/settings can be injected for tests."""
    settings = settings or get_settings()
    owns_client = client is None
    client = client or build_http_client(settings)
    try:
        r = client.post(settings.search_api_url, json=build_search_request(search_phrase, settings))
        if not r.is_success:
            logger.warning("Search API error for %r: status %s", search_phrase, r.status_code)
            return [SearchResult(rank_order=1, url="", title=f"Error searching AWS docs - status code {r.status_code}")]
        data = r.json()
        results = parse_search_results(data, limit) if isinstance(data, dict) else []
    except (httpx.HTTPError, ValueError, TypeError, AttributeError) as e:
        logger.warning("Search API request failed for %r: %s", search_phrase, e)
        return [SearchResult(rank_order=1, url="", title=f"Error searching AWS docs: {e}")]
    finally:
        if owns_client:
            client.close()

    logger.info("Search %r returned %d result(s)", search_phrase, len(results))
    return results
