"""Pytest config: PYTHONPATH, env and mocked-HTTP fixtures for tests."""
import os
import sys
from pathlib import Path

import httpx
import pytest

root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(root))
os.environ.setdefault("LOG_LEVEL", "WARNING")

from agent_tools.http_client import build_http_client  # noqa: E402
from app.config import Settings  # noqa: E402


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def make_client(settings):
    """Build the real tool HTTP client with its network replaced by `handler(request) -> Response`."""
    def factory(handler):
        return build_http_client(settings, transport=httpx.MockTransport(handler))
    return factory


@pytest.fixture
def no_network(make_client):
    """Client that records requests and fails if any is attempted."""
    calls = []

    def handler(request):
        calls.append(request)
        raise AssertionError(f"unexpected request to {request.url}")

    client = make_client(handler)
    client.calls = calls
    return client
