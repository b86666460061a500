"""Error types surfaced to MCP callers as Failure envelopes."""


class CmcMcpError(Exception):
    """Base error carrying the status reported back to the caller."""

    default_status = 403

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.message = message
        self.status = status if status is not None else self.default_status


class CallerError(CmcMcpError):
    """Bad or missing parameters, missing credential."""


class UpstreamError(CmcMcpError):
    """Non-2xx response, network failure or an unreadable body from CoinMarketCap."""

    default_status = 500


class ConfigError(CmcMcpError):
    """Invalid process configuration; raised at startup only."""
