from core.config import ConfigLoader, Settings, TRANSPORTS, load_settings
from core.dispatcher import API_KEY_HEADER, Dispatcher
from core.errors import ConfigError
from core.logging_config import setup_logging
from core.registry import ToolDefinition, register_all
from mcp.server.fastmcp import Context, FastMCP
from typing import Any, Mapping
import argparse
import inspect
import logging
import os
import sys

import anyio
import httpx

logger = logging.getLogger(__name__)

SERVER_NAME = "CoinMarketCap-MCP"
SERVER_VERSION = "1.3.7"
QUERY_API_KEY = "COINMARKETCAP_API_KEY"


def _request_credential(ctx: Context | None) -> str | None:
    """API key sent with the current HTTP request, if any (served binding only)."""
    if ctx is None:
        return None
    try:
        request = ctx.request_context.request
    except (AttributeError, ValueError):
        return None
    if request is None:
        return None
    return request.headers.get(API_KEY_HEADER) or request.query_params.get(QUERY_API_KEY)


def make_wrapper(tool: ToolDefinition, dispatcher: Dispatcher, per_request_credentials: bool = False):
    """Build the callable FastMCP registers for `tool`.

    The wrapper advertises the tool's parameters through `__signature__` so
    FastMCP derives the input schema from the definition, then hands whatever
    it receives to the dispatcher and returns the envelope text.
    """
    params = [
        inspect.Parameter(
            name,
            inspect.Parameter.KEYWORD_ONLY,
            default=inspect.Parameter.empty if default is ... else default,
            annotation=annotation,
        )
        for name, (annotation, default) in tool.fields().items()
    ]
    if per_request_credentials:
        params.append(inspect.Parameter("ctx", inspect.Parameter.KEYWORD_ONLY, default=None, annotation=Context))

    async def _wrapped(ctx: Context | None = None, **call_kwargs: Any) -> str:
        credential = _request_credential(ctx) if per_request_credentials else None
        envelope = await dispatcher.dispatch(tool, call_kwargs, credential=credential)
        return envelope.to_text()

    _wrapped.__name__ = tool.name
    _wrapped.__doc__ = tool.description
    _wrapped.__signature__ = inspect.Signature(parameters=params, return_annotation=str)
    _wrapped.__annotations__ = {p.name: p.annotation for p in params} | {"return": str}
    return _wrapped


def create_server(
    config: Settings | Mapping[str, Any] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    per_request_credentials: bool = False,
    **fastmcp_settings: Any,
) -> FastMCP:
    """Create a FastMCP server exposing every tool the configured plan allows.

    `config` is either ready Settings or a mapping of the same keys as the
    environment (COINMARKETCAP_API_KEY, SUBSCRIPTION_LEVEL, ...) which then
    takes precedence over the environment and config.yaml.
    """
    settings = config if isinstance(config, Settings) else load_settings(config)
    tier = settings.subscription_level
    dispatcher = Dispatcher(settings, transport=transport)

    mcp = FastMCP(
        SERVER_NAME,
        instructions=f"CoinMarketCap market data tools for the {tier.label} plan.",
        **fastmcp_settings,
    )
    if not settings.has_api_key and not per_request_credentials:
        logger.warning("COINMARKETCAP_API_KEY is not set; every tool call will fail with status 403.")

    ###################################################### MCP Tools ######################################################

    registered_tool_names: list[str] = []
    for tool in register_all(tier):
        mcp.add_tool(
            make_wrapper(tool, dispatcher, per_request_credentials),
            name=tool.name,
            title=tool.title,
            description=tool.description,
        )
        registered_tool_names.append(tool.name)
    logger.info(f"{SERVER_NAME} {SERVER_VERSION} ({tier.label}): registered {len(registered_tool_names)} tools: {registered_tool_names}")
    return mcp


###################################################### Startup ######################################################

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="CoinMarketCap MCP server")
    p.add_argument("--transport", choices=TRANSPORTS, help="stdio, http or both (default from config)")
    p.add_argument("--tier", help="Subscription level, e.g. Basic, Hobbyist, Startup, Standard, Professional, Enterprise")
    p.add_argument("--host", help="Host for the HTTP binding")
    p.add_argument("--port", type=int, help="Port for the HTTP binding")
    p.add_argument("--config", help="Path to a config.yaml")
    return p.parse_args(argv)


async def _run_both(settings: Settings) -> None:
    from http_server import serve_http

    mcp = create_server(settings)
    async with anyio.create_task_group() as tg:
        tg.start_soon(mcp.run_stdio_async)
        tg.start_soon(serve_http, settings)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if args.config:
        os.environ["CMC_MCP_CONFIG"] = args.config
        ConfigLoader.reload()

    overrides = {
        "MCP_TRANSPORT": args.transport,
        "SUBSCRIPTION_LEVEL": args.tier,
        "HOST": args.host,
        "PORT": args.port,
    }
    try:
        settings = load_settings({k: v for k, v in overrides.items() if v is not None})
    except ConfigError as e:
        print(f"Invalid configuration: {e.message}", file=sys.stderr)
        return 2

    setup_logging(settings.log_dir, level=settings.log_level)
    logger.info(f"Starting MCP server ({settings.transport}, {settings.subscription_level.label})...")
    try:
        if settings.transport == "stdio":
            create_server(settings).run(transport="stdio")
        elif settings.transport == "http":
            from http_server import serve_http

            anyio.run(serve_http, settings)
        else:
            anyio.run(_run_both, settings)
        logger.info("MCP server shut down.")
    except KeyboardInterrupt:
        logger.info("MCP server interrupted.")
    except Exception:
        logger.exception("Unhandled exception running MCP server")
        print("Unhandled exception occurred. See logs/server.log for details.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
