from typing import Any, Mapping
import logging

import httpx

from core.config import Settings
from core.errors import CallerError, UpstreamError
from core.registry import ToolDefinition
from utils import Failure, ResponseEnvelope, Success, get_endpoint  # type: ignore

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-CMC_PRO_API_KEY"
UPSTREAM_ERROR_PREFIX = "Error fetching data from CoinMarketCap"


class Dispatcher:
    """Turns one tool invocation into one CoinMarketCap GET request."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self._transport = transport

    async def dispatch(
        self,
        tool: ToolDefinition,
        params: Mapping[str, Any] | None = None,
        credential: str | None = None,
    ) -> ResponseEnvelope:
        """Validate `params`, call the upstream endpoint and wrap the outcome.

        Never raises for a failed invocation: caller mistakes, upstream errors
        and anything unexpected all come back as a Failure.
        """
        try:
            query = tool.validate(params)
            api_key = credential or self.settings.api_key
            if not api_key:
                raise CallerError("Missing CoinMarketCap API key. Set COINMARKETCAP_API_KEY.")
            data = await self._fetch(tool, query, api_key)
        except (CallerError, UpstreamError) as e:
            logger.warning(f"{tool.name} failed with status {e.status}: {e.message}")
            return Failure(e.message, e.status)
        except Exception as e:
            logger.exception(f"Unexpected error while calling {tool.name}")
            return Failure(str(e), getattr(e, "status", None) or 403)
        return Success(data)

    async def _fetch(self, tool: ToolDefinition, query: dict[str, str], api_key: str) -> Any:
        url = get_endpoint(tool.path, self.settings.base_url)
        headers = {"Accept": "application/json", API_KEY_HEADER: api_key}
        logger.info(f"{tool.name} -> GET {tool.path} params={sorted(query)}")
        async with httpx.AsyncClient(transport=self._transport, timeout=self.settings.request_timeout) as client:
            try:
                resp = await client.get(url, params=query, headers=headers)
            except httpx.HTTPError as e:
                raise UpstreamError(f"{UPSTREAM_ERROR_PREFIX}: {e}")
            if not resp.is_success:
                raise UpstreamError(f"{UPSTREAM_ERROR_PREFIX}: {resp.reason_phrase}", status=resp.status_code)
            try:
                return resp.json()
            except ValueError as e:
                raise UpstreamError(f"{UPSTREAM_ERROR_PREFIX}: invalid JSON in response ({e})")
