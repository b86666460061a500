from typing import Any

from core.registry import Param  # type: ignore
from core.tiers import AccessTier  # type: ignore

SORT_DIRS = ("desc", "asc")


def _pair_params() -> dict[str, Param]:
    # Shared by the quotes, OHLCV and trades endpoints for spot pairs
    return {
        "contract_address": Param("string"),
        "network_id": Param("string"),
        "network_slug": Param("string"),
        "aux": Param("string"),
        "convert_id": Param("string"),
        "skip_invalid": Param("string"),
        "reverse_order": Param("string"),
    }


def get_tools() -> dict[str, Any]:
    pair = _pair_params()
    ohlcv_historical = {
        "contract_address": pair["contract_address"],
        "network_id": pair["network_id"],
        "network_slug": pair["network_slug"],
        "time_period": Param(
            "string",
            choices=("daily", "hourly", "1m", "5m", "15m", "30m", "4h", "8h", "12h", "weekly", "monthly"),
        ),
        "time_start": Param("string"),
        "time_end": Param("string"),
        "count": Param("string"),
        "interval": Param(
            "string",
            choices=("1m", "5m", "15m", "30m", "1h", "4h", "8h", "12h", "daily", "weekly", "monthly"),
        ),
        "aux": pair["aux"],
        "convert_id": pair["convert_id"],
        "skip_invalid": pair["skip_invalid"],
        "reverse_order": pair["reverse_order"],
    }

    return {
        "dexInfo": {
            "path": "/v4/dex/listings/info",
            "title": "DEX metadata",
            "description": "Returns all static metadata for one or more decentralised exchanges.",
            "tier": AccessTier.BASIC,
            "params": {
                "id": Param("string"),
                "aux": Param("string"),
            },
        },
        "dexListingsLatest": {
            "path": "/v4/dex/listings/quotes",
            "title": "DEX listings",
            "description": "Returns a paginated list of all decentralised cryptocurrency exchanges including the latest aggregate market data.",
            "tier": AccessTier.BASIC,
            "params": {
                "start": Param("string"),
                "limit": Param("string"),
                "sort": Param("string", choices=("name", "volume_24h", "market_share", "num_markets")),
                "sort_dir": Param("string", choices=SORT_DIRS),
                "type": Param("string", choices=("all", "orderbook", "swap", "aggregator")),
                "aux": Param("string"),
                "convert_id": Param("string"),
            },
        },
        "dexNetworksList": {
            "path": "/v4/dex/networks/list",
            "title": "DEX networks",
            "description": "Returns a list of all networks to unique CoinMarketCap ids.",
            "tier": AccessTier.BASIC,
            "params": {
                "start": Param("string"),
                "limit": Param("string"),
                "sort": Param("string", choices=("id", "name")),
                "sort_dir": Param("string", choices=SORT_DIRS),
                "aux": Param("string"),
            },
        },
        "dexSpotPairsLatest": {
            "path": "/v4/dex/spot-pairs/latest",
            "title": "DEX spot pairs",
            "description": "Returns a paginated list of all active dex spot pairs with latest market data.",
            "tier": AccessTier.BASIC,
            "params": {
                "network_id": Param("string"),
                "network_slug": Param("string"),
                "dex_id": Param("string"),
                "dex_slug": Param("string"),
                "base_asset_id": Param("string"),
                "base_asset_symbol": Param("string"),
                "base_asset_contract_address": Param("string"),
                "base_asset_ucid": Param("string"),
                "quote_asset_id": Param("string"),
                "quote_asset_symbol": Param("string"),
                "quote_asset_contract_address": Param("string"),
                "quote_asset_ucid": Param("string"),
                "scroll_id": Param("string"),
                "limit": Param("string"),
                "liquidity_min": Param("string"),
                "liquidity_max": Param("string"),
                "volume_24h_min": Param("string"),
                "volume_24h_max": Param("string"),
                "no_of_transactions_24h_min": Param("string"),
                "no_of_transactions_24h_max": Param("string"),
                "percent_change_24h_min": Param("string"),
                "percent_change_24h_max": Param("string"),
                "sort": Param(
                    "string",
                    choices=(
                        "name", "date_added", "price", "volume_24h", "percent_change_1h",
                        "percent_change_24h", "liquidity", "fully_diluted_value", "no_of_transactions_24h",
                    ),
                ),
                "sort_dir": Param("string", choices=SORT_DIRS),
                "aux": Param("string"),
                "reverse_order": Param("string"),
                "convert_id": Param("string"),
            },
        },
        "dexPairsQuotesLatest": {
            "path": "/v4/dex/pairs/quotes/latest",
            "title": "DEX pair quotes",
            "description": "Returns the latest market quote for 1 or more spot pairs.",
            "tier": AccessTier.BASIC,
            "params": _pair_params(),
        },
        "dexPairsOhlcvLatest": {
            "path": "/v4/dex/pairs/ohlcv/latest",
            "title": "DEX pair OHLCV",
            "description": "Returns the latest OHLCV market values for one or more spot pairs for the current UTC day.",
            "tier": AccessTier.BASIC,
            "params": _pair_params(),
        },
        "dexPairsOhlcvHistorical": {
            "path": "/v4/dex/pairs/ohlcv/historical",
            "title": "DEX pair historical OHLCV",
            "description": "Returns historical OHLCV data along with market cap for any spot pairs using time interval parameters.",
            "tier": AccessTier.BASIC,
            "params": ohlcv_historical,
        },
        "dexPairsTradeLatest": {
            "path": "/v4/dex/pairs/trade/latest",
            "title": "DEX pair trades",
            "description": "Returns up to the latest 100 trades for 1 spot pair.",
            "tier": AccessTier.BASIC,
            "params": _pair_params(),
        },
    }
