from core.config import DEFAULT_BASE_URL  # type: ignore


def get_endpoint(path: str, base_url: str | None = None) -> str:
    """Join the CoinMarketCap base URL and a versioned endpoint path."""
    base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
    if not path.startswith("/"):
        path = f"/{path}"
    return f"{base_url}{path}"
