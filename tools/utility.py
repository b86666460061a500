from typing import Any

from core.registry import Param  # type: ignore
from core.tiers import AccessTier  # type: ignore


def get_tools() -> dict[str, Any]:
    return {
        "fiatMap": {
            "path": "/v1/fiat/map",
            "title": "Fiat ID map",
            "description": "Returns a mapping of all supported fiat currencies to unique CoinMarketCap IDs.",
            "tier": AccessTier.BASIC,
            "params": {
                "start": Param("number"),
                "limit": Param("number"),
                "sort": Param("string"),
                "include_metals": Param("boolean"),
            },
        },
        "getPostmanCollection": {
            "path": "/v1/tools/postman",
            "title": "Postman collection",
            "description": "Returns a Postman collection for the CoinMarketCap API.",
            "tier": AccessTier.BASIC,
        },
        "priceConversion": {
            "path": "/v2/tools/price-conversion",
            "title": "Price conversion",
            "description": "Convert an amount of one cryptocurrency or fiat currency into one or more different currencies.",
            "tier": AccessTier.BASIC,
            "params": {
                "amount": Param("number", required=True, description="Amount to convert"),
                "id": Param("string"),
                "symbol": Param("string"),
                "time": Param("string"),
                "convert": Param("string"),
                "convert_id": Param("string"),
            },
        },
        "keyInfo": {
            "path": "/v1/key/info",
            "title": "API key info",
            "description": "Returns API key details and usage stats.",
            "tier": AccessTier.BASIC,
        },
    }
