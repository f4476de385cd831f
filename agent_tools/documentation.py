"""
Read-documentation pipeline: URL policy check, single GET, HTML -> markdown,
pagination. Every failure is returned as descriptive text, never raised,
because the agent treats tool output uniformly as content.
"""
import logging
import re
from typing import Optional

import httpx

from agent_tools.base import PreconditionError, RawContent, TransportError
from agent_tools.content import normalize
from agent_tools.http_client import build_http_client
from agent_tools.pagination import format_documentation_result
from app.config import Settings, get_settings

logger = logging.getLogger(__name__)

DEFAULT_MAX_LENGTH = 5000


def is_trusted_url(url: str, settings: Settings) -> bool:
    return re.match(rf"^https?://{re.escape(settings.docs_domain)}/", url) is not None


def validate_documentation_url(url: Optional[str], settings: Settings) -> None:
    """Raise PreconditionError unless url is on the trusted domain and ends with the required suffix."""
    if not url:
        raise PreconditionError("URL parameter is required but was not provided")
    if not is_trusted_url(url, settings):
        raise PreconditionError(f"URL must be from the {settings.docs_domain} domain")
    if not url.endswith(settings.docs_required_suffix):
        raise PreconditionError(f"URL must end with {settings.docs_required_suffix}")


def fetch_documentation(url: str, client: httpx.Client, settings: Settings) -> RawContent:
    """
    One GET, no retries. Raises PreconditionError before any network call when
    the URL is not allowed, TransportError on network faults or non-2xx status.
    """
    validate_documentation_url(url, settings)
    try:
        r = client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise TransportError(f"Failed to fetch {url}: {e}") from e
    # Redirects are followed, so the final location must still be on the trusted domain.
    if not is_trusted_url(str(r.url), settings):
        raise TransportError(f"Failed to fetch {url} - redirected outside {settings.docs_domain}: {r.url}")
    if not r.is_success:
        raise TransportError(f"Failed to fetch {url} - status code {r.status_code}", status_code=r.status_code)
    return RawContent(text=r.text, content_type=r.headers.get("content-type", ""))


def read_documentation_impl(
    url: str,
    max_length: int = DEFAULT_MAX_LENGTH,
    start_index: int = 0,
    *,
    client: Optional[httpx.Client] = None,
    settings: Optional[Settings] = None,
) -> str:
    """
    Fetch, normalize and paginate one documentation page. Used by the tool;
    client/settings can be injected for tests.
    """
    settings = settings or get_settings()
    owns_client = client is None
    client = client or build_http_client(settings)
    try:
        raw = fetch_documentation(url, client, settings)
    except PreconditionError as e:
        logger.warning("read_documentation rejected url %s: %s", url, e)
        return f"Invalid URL {url}: {e}"
    except TransportError as e:
        logger.warning("read_documentation fetch failed: %s", e)
        return str(e)
    finally:
        if owns_client:
            client.close()

    content = normalize(raw.text, raw.content_type)
    logger.info(
        "read_documentation fetched %s (raw=%d, normalized=%d, start_index=%d, max_length=%d)",
        url, len(raw.text), len(content), start_index, max_length,
    )
    return format_documentation_result(url, content, start_index, max_length)
