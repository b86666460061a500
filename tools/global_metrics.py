from typing import Any

from core.registry import Param  # type: ignore
from core.tiers import AccessTier  # type: ignore


def get_tools() -> dict[str, Any]:
    return {
        "globalMetricsLatest": {
            "path": "/v1/global-metrics/quotes/latest",
            "title": "Global metrics",
            "description": "Returns the latest global cryptocurrency market metrics.",
            "tier": AccessTier.BASIC,
            "params": {
                "convert": Param("string"),
                "convert_id": Param("string"),
            },
        },
        "globalMetricsHistorical": {
            "path": "/v1/global-metrics/quotes/historical",
            "title": "Historical global metrics",
            "description": "Returns historical global cryptocurrency market metrics.",
            "tier": AccessTier.HOBBYIST,
            "params": {
                "time_start": Param("string"),
                "time_end": Param("string"),
                "count": Param("number"),
                "interval": Param("string"),
                "convert": Param("string"),
                "convert_id": Param("string"),
                "aux": Param("string"),
            },
        },
    }
