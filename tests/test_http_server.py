import pytest
from starlette.routing import Mount

from core.registry import register_all
from core.tiers import AccessTier
from http_server import create_http_app, create_tier_servers


@pytest.mark.asyncio
async def test_one_server_per_tier(settings):
    servers = create_tier_servers(settings)

    assert set(servers) == set(AccessTier)
    for tier, server in servers.items():
        names = {tool.name for tool in await server.list_tools()}
        assert names == {d.name for d in register_all(tier)}


def test_tier_mounts(settings):
    app = create_http_app(settings)
    paths = [route.path for route in app.routes if isinstance(route, Mount)]

    for tier in AccessTier:
        assert f"/{tier.name.lower()}" in paths
    # configured level is mounted last, at the root
    assert paths[-1] in ("", "/")
