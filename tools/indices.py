from typing import Any

from core.registry import Param  # type: ignore
from core.tiers import AccessTier  # type: ignore


def get_tools() -> dict[str, Any]:
    """CMC100 index and the Fear and Greed index."""
    return {
        "cmc100IndexHistorical": {
            "path": "/v3/index/cmc100-historical",
            "title": "CMC100 index history",
            "description": "Returns an interval of historic CoinMarketCap 100 Index values based on the interval parameter.",
            "tier": AccessTier.BASIC,
            "params": {
                "time_start": Param("string"),
                "time_end": Param("string"),
                "count": Param("string"),
                "interval": Param("string", choices=("5m", "15m", "daily")),
            },
        },
        "cmc100IndexLatest": {
            "path": "/v3/index/cmc100-latest",
            "title": "CMC100 index",
            "description": "Returns the latest CoinMarketCap 100 Index value, constituents, and constituent weights.",
            "tier": AccessTier.BASIC,
        },
        "fearAndGreedLatest": {
            "path": "/v3/fear-and-greed/latest",
            "title": "Fear and Greed index",
            "description": "Returns the latest CMC Crypto Fear and Greed Index value.",
            "tier": AccessTier.BASIC,
        },
        "fearAndGreedHistorical": {
            "path": "/v3/fear-and-greed/historical",
            "title": "Fear and Greed history",
            "description": "Returns historical CMC Crypto Fear and Greed Index values.",
            "tier": AccessTier.BASIC,
            "params": {
                "start": Param("number", ge=1),
                "limit": Param("number", ge=1, le=500),
            },
        },
    }
