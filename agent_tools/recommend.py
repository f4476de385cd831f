"""
Related-page recommendations for a documentation URL. Four categories are
flattened into one list: highly rated, journey, new, similar.
"""
import logging
from typing import Any, Optional

import httpx

from agent_tools.base import RecommendationResult
from agent_tools.http_client import build_http_client
from app.config import Settings, get_settings

logger = logging.getLogger(__name__)


def _items(data: dict[str, Any], category: str) -> list[dict[str, Any]]:
    section = data.get(category)
    if not isinstance(section, dict):
        return []
    return [item for item in section.get("items") or [] if isinstance(item, dict)]


def parse_recommendation_results(data: dict[str, Any]) -> list[RecommendationResult]:
    results: list[RecommendationResult] = []

    for item in _items(data, "highlyRated"):
        results.append(
            RecommendationResult(url=item.get("url") or "", title=item.get("assetTitle") or "", context=item.get("abstract") or None)
        )

    # Journey items are grouped by intent
    for group in _items(data, "journey"):
        intent = group.get("intent") or ""
        for url_item in group.get("urls") or []:
            if not isinstance(url_item, dict):
                continue
            results.append(
                RecommendationResult(
                    url=url_item.get("url") or "",
                    title=url_item.get("assetTitle") or "",
                    context=f"Intent: {intent}" if intent else None,
                )
            )

    for item in _items(data, "new"):
        date_created = item.get("dateCreated") or ""
        results.append(
            RecommendationResult(
                url=item.get("url") or "",
                title=item.get("assetTitle") or "",
                context=f"New content added on {date_created}" if date_created else "New content",
            )
        )

    for item in _items(data, "similar"):
        results.append(
            RecommendationResult(
                url=item.get("url") or "",
                title=item.get("assetTitle") or "",
                context=item.get("abstract") or "Similar content",
            )
        )

    return results


def recommend_impl(
    url: str,
    *,
    client: Optional[httpx.Client] = None,
    settings: Optional[Settings] = None,
) -> list[RecommendationResult]:
    """Fetch recommendations for url. Used by the tool; client/settings can be injected for tests."""
    settings = settings or get_settings()
    owns_client = client is None
    client = client or build_http_client(settings)
    try:
        r = client.get(settings.recommendations_api_url, params={"path": url})
        if not r.is_success:
            logger.warning("Recommendations API error for %s: status %s", url, r.status_code)
            return [RecommendationResult(url="", title=f"Error getting recommendations - status code {r.status_code}")]
        data = r.json()
        return parse_recommendation_results(data) if isinstance(data, dict) else []
    except (httpx.HTTPError, ValueError, TypeError, AttributeError) as e:
        logger.warning("Recommendations API request failed for %s: %s", url, e)
        return [RecommendationResult(url="", title=f"Error getting recommendations: {e}")]
    finally:
        if owns_client:
            client.close()
