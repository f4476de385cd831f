"""HTTP client shared by the documentation tools. Read-only after construction."""
import httpx

from app.config import Settings


def build_http_client(settings: Settings, transport: httpx.BaseTransport | None = None) -> httpx.Client:
    """Keep-alive client carrying the identifying User-Agent. No retries are configured."""
    return httpx.Client(
        headers={"User-Agent": settings.user_agent},
        timeout=settings.http_timeout_sec,
        follow_redirects=True,
        transport=transport,
    )
