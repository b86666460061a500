import os
import sys

import httpx
import pytest

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from core.config import ENV_KEYS, ConfigLoader, Settings
from core.tiers import AccessTier


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep the developer's environment and config.yaml out of every test."""
    for env_name in ENV_KEYS.values():
        monkeypatch.delenv(env_name, raising=False)
    monkeypatch.setenv("CMC_MCP_CONFIG", str(tmp_path / "missing.yaml"))
    ConfigLoader.reload()
    yield
    ConfigLoader.reload()


class UpstreamStub:
    """Records requests and answers them like the CoinMarketCap API would."""

    def __init__(self, status=200, body=None, content=None, exc=None):
        self.status = status
        self.body = body if body is not None else {"data": {"id": 1}}
        self.content = content
        self.exc = exc
        self.requests = []

    def handler(self, request):
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.content is not None:
            return httpx.Response(self.status, content=self.content)
        return httpx.Response(self.status, json=self.body)

    @property
    def transport(self):
        return httpx.MockTransport(self.handler)


@pytest.fixture
def upstream():
    return UpstreamStub()


@pytest.fixture
def settings():
    return Settings(api_key="test-key", subscription_level=AccessTier.BASIC)
