from typing import Any

from core.registry import Param  # type: ignore
from core.tiers import AccessTier  # type: ignore


def get_tools() -> dict[str, Any]:
    return {
        "blockchainStatisticsLatest": {
            "path": "/v1/blockchain/statistics/latest",
            "title": "Blockchain statistics",
            "description": "Returns the latest statistics for one or more blockchains.",
            "tier": AccessTier.ENTERPRISE,
            "params": {
                "id": Param("string"),
                "slug": Param("string"),
                "symbol": Param("string"),
            },
        },
    }
