"""Served binding: streamable-HTTP MCP endpoints, one per subscription level.

    /mcp               tools for the configured subscription level
    /<level>/mcp       tools for that level, e.g. /hobbyist/mcp

Callers pass their own API key per request in the X-CMC_PRO_API_KEY header
or the COINMARKETCAP_API_KEY query parameter; the process key is the fallback.
"""
from contextlib import AsyncExitStack, asynccontextmanager
from dataclasses import replace
import logging

import httpx
import uvicorn
from mcp.server.fastmcp import FastMCP
from starlette.applications import Starlette
from starlette.routing import Mount

from core.config import Settings
from core.tiers import AccessTier
from server import create_server

logger = logging.getLogger(__name__)


def create_tier_servers(settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> dict[AccessTier, FastMCP]:
    servers = {}
    for tier in AccessTier:
        servers[tier] = create_server(
            replace(settings, subscription_level=tier),
            transport=transport,
            per_request_credentials=True,
            stateless_http=True,
            json_response=True,
            host=settings.host,
        )
    return servers


def create_http_app(settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> Starlette:
    servers = create_tier_servers(settings, transport=transport)

    @asynccontextmanager
    async def lifespan(app):
        async with AsyncExitStack() as stack:
            for server in servers.values():
                await stack.enter_async_context(server.session_manager.run())
            logger.info(f"HTTP binding ready on {settings.host}:{settings.port} for tiers {[t.label for t in servers]}")
            yield

    routes = [Mount(f"/{tier.name.lower()}", app=server.streamable_http_app()) for tier, server in servers.items()]
    # Configured level is also served at the root
    routes.append(Mount("/", app=servers[settings.subscription_level].streamable_http_app()))
    return Starlette(routes=routes, lifespan=lifespan)


async def serve_http(settings: Settings) -> None:
    app = create_http_app(settings)
    config = uvicorn.Config(app, host=settings.host, port=settings.port, log_config=None, access_log=False)
    logger.info(f"Listening on http://{settings.host}:{settings.port}/mcp")
    await uvicorn.Server(config).serve()
