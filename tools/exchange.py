from typing import Any

from core.registry import Param  # type: ignore
from core.tiers import AccessTier  # type: ignore
from tools.cryptocurrency import QUOTE_INTERVALS  # type: ignore


def get_tools() -> dict[str, Any]:
    return {
        "exchangeAssets": {
            "path": "/v1/exchange/assets",
            "title": "Exchange assets",
            "description": "Returns the assets/token holdings of an exchange.",
            "tier": AccessTier.BASIC,
            "params": {
                "id": Param("string"),
                "slug": Param("string"),
            },
        },
        "exchangeInfo": {
            "path": "/v1/exchange/info",
            "title": "Exchange metadata",
            "description": "Returns metadata for one or more exchanges.",
            "tier": AccessTier.BASIC,
            "params": {
                "id": Param("string"),
                "slug": Param("string"),
                "aux": Param("string"),
            },
        },
        "exchangeMap": {
            "path": "/v1/exchange/map",
            "title": "Exchange ID map",
            "description": "Returns a mapping of all exchanges to unique CoinMarketCap IDs.",
            "tier": AccessTier.BASIC,
            "params": {
                "listing_status": Param("string"),
                "slug": Param("string"),
                "start": Param("number"),
                "limit": Param("number"),
                "sort": Param("string"),
            },
        },
        "exchangeQuotesHistorical": {
            "path": "/v1/exchange/quotes/historical",
            "title": "Historical exchange quotes",
            "description": "Returns an interval of historic quotes for any exchange based on time and interval parameters.",
            "tier": AccessTier.HOBBYIST,
            "params": {
                "id": Param("string"),
                "slug": Param("string"),
                "time_start": Param("string"),
                "time_end": Param("string"),
                "count": Param("number", ge=1, le=10000),
                "interval": Param("string", choices=QUOTE_INTERVALS),
                "convert": Param("string"),
                "convert_id": Param("string"),
            },
        },
        "exchangeListingsLatest": {
            "path": "/v1/exchange/listings/latest",
            "title": "Exchange listings",
            "description": "Returns a paginated list of all exchanges with latest market data.",
            "tier": AccessTier.STANDARD,
            "params": {
                "start": Param("number"),
                "limit": Param("number"),
                "sort": Param("string"),
                "sort_dir": Param("string"),
                "convert": Param("string"),
                "convert_id": Param("string"),
                "aux": Param("string"),
            },
        },
        "exchangeMarketPairsLatest": {
            "path": "/v1/exchange/market-pairs/latest",
            "title": "Exchange market pairs",
            "description": "Returns all market pairs for the specified exchange with associated stats.",
            "tier": AccessTier.STANDARD,
            "params": {
                "id": Param("string"),
                "slug": Param("string"),
                "start": Param("number"),
                "limit": Param("number"),
                "convert": Param("string"),
                "convert_id": Param("string"),
                "aux": Param("string"),
            },
        },
        "exchangeQuotesLatest": {
            "path": "/v1/exchange/quotes/latest",
            "title": "Latest exchange quotes",
            "description": "Returns the latest market quotes for one or more exchanges.",
            "tier": AccessTier.STANDARD,
            "params": {
                "id": Param("string"),
                "slug": Param("string"),
                "convert": Param("string"),
                "convert_id": Param("string"),
                "aux": Param("string"),
            },
        },
    }
