import inspect
import json
from types import SimpleNamespace

import pytest
from mcp.server.fastmcp.exceptions import ToolError

from core.config import Settings
from core.dispatcher import Dispatcher
from core.registry import get_definition, register_all
from core.tiers import AccessTier
from server import _request_credential, create_server, make_wrapper, parse_args


def _text(result):
    # FastMCP returns either a content list or (content, structured) depending on version
    content = result[0] if isinstance(result, tuple) else result
    return content[0].text


@pytest.mark.asyncio
async def test_basic_server_lists_basic_tools(settings):
    mcp = create_server(settings)
    names = {tool.name for tool in await mcp.list_tools()}

    assert names == {d.name for d in register_all(AccessTier.BASIC)}
    assert "priceConversion" in names
    assert "blockchainStatisticsLatest" not in names


@pytest.mark.asyncio
async def test_config_mapping_sets_tier():
    mcp = create_server({"COINMARKETCAP_API_KEY": "k", "SUBSCRIPTION_LEVEL": "Enterprise"})
    names = {tool.name for tool in await mcp.list_tools()}

    assert "blockchainStatisticsLatest" in names
    assert len(names) == len(register_all(AccessTier.ENTERPRISE))


@pytest.mark.asyncio
async def test_config_mapping_beats_environment(monkeypatch):
    monkeypatch.setenv("SUBSCRIPTION_LEVEL", "Enterprise")
    mcp = create_server({"COINMARKETCAP_API_KEY": "k", "SUBSCRIPTION_LEVEL": "Hobbyist"})
    names = {tool.name for tool in await mcp.list_tools()}

    assert "cryptoAirdrop" in names
    assert "blockchainStatisticsLatest" not in names


@pytest.mark.asyncio
async def test_input_schema_follows_definition(settings):
    tools = {tool.name: tool for tool in await create_server(settings).list_tools()}

    conversion = tools["priceConversion"].inputSchema
    assert conversion["required"] == ["amount"]
    assert set(conversion["properties"]) == {"amount", "id", "symbol", "time", "convert", "convert_id"}

    listings = json.dumps(tools["allCryptocurrencyListings"].inputSchema["properties"]["sort_dir"])
    assert '"asc"' in listings and '"desc"' in listings


@pytest.mark.asyncio
async def test_call_tool_end_to_end(settings, upstream):
    mcp = create_server(settings, transport=upstream.transport)
    result = await mcp.call_tool("priceConversion", {"amount": 100, "symbol": "BTC", "convert": "USD"})

    assert json.loads(_text(result)) == {"data": {"id": 1}}
    assert dict(upstream.requests[0].url.params) == {"amount": "100", "symbol": "BTC", "convert": "USD"}


@pytest.mark.asyncio
async def test_call_tool_failure_envelope(upstream):
    mcp = create_server(Settings(subscription_level=AccessTier.BASIC), transport=upstream.transport)
    result = await mcp.call_tool("keyInfo", {})

    assert json.loads(_text(result))["status"] == 403
    assert upstream.requests == []


@pytest.mark.asyncio
async def test_tool_above_tier_is_unknown(settings):
    mcp = create_server(settings)

    with pytest.raises(ToolError):
        await mcp.call_tool("blockchainStatisticsLatest", {})


@pytest.mark.asyncio
async def test_per_request_server_falls_back_to_process_key(settings, upstream):
    mcp = create_server(settings, transport=upstream.transport, per_request_credentials=True)
    await mcp.call_tool("keyInfo", {})

    assert upstream.requests[0].headers["X-CMC_PRO_API_KEY"] == "test-key"


def test_wrapper_signature(settings):
    wrapper = make_wrapper(get_definition("priceConversion"), Dispatcher(settings))
    params = inspect.signature(wrapper).parameters

    assert list(params) == ["amount", "id", "symbol", "time", "convert", "convert_id"]
    assert params["amount"].default is inspect.Parameter.empty
    assert params["symbol"].default is None
    assert all(p.kind is inspect.Parameter.KEYWORD_ONLY for p in params.values())
    assert wrapper.__name__ == "priceConversion"


def test_wrapper_signature_with_context(settings):
    wrapper = make_wrapper(get_definition("keyInfo"), Dispatcher(settings), per_request_credentials=True)

    assert list(inspect.signature(wrapper).parameters) == ["ctx"]


def _ctx(headers=None, query=None):
    request = SimpleNamespace(headers=headers or {}, query_params=query or {})
    return SimpleNamespace(request_context=SimpleNamespace(request=request))


def test_request_credential_from_header():
    assert _request_credential(_ctx(headers={"X-CMC_PRO_API_KEY": "from-header"})) == "from-header"


def test_request_credential_from_query():
    assert _request_credential(_ctx(query={"COINMARKETCAP_API_KEY": "from-query"})) == "from-query"


def test_request_credential_absent():
    assert _request_credential(None) is None
    assert _request_credential(_ctx()) is None
    assert _request_credential(SimpleNamespace(request_context=SimpleNamespace(request=None))) is None


def test_parse_args():
    args = parse_args(["--transport", "http", "--tier", "Startup", "--port", "8080"])

    assert args.transport == "http"
    assert args.tier == "Startup"
    assert args.port == 8080
    assert args.config is None
