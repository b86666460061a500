from typing import Any

from core.registry import Param  # type: ignore
from core.tiers import AccessTier  # type: ignore

LISTING_SORTS = (
    "market_cap", "name", "symbol", "date_added", "price", "circulating_supply", "total_supply",
    "max_supply", "num_market_pairs", "volume_24h", "percent_change_1h", "percent_change_24h",
    "percent_change_7d",
)
SORT_DIRS = ("asc", "desc")
QUOTE_INTERVALS = (
    "5m", "10m", "15m", "30m", "45m",
    "1h", "2h", "3h", "4h", "6h", "12h", "24h",
    "1d", "2d", "3d", "7d", "14d", "15d", "30d", "60d", "90d", "365d",
    "hourly", "daily", "weekly", "monthly", "yearly",
)


def get_tools() -> dict[str, Any]:
    return {
        # Basic
        "cryptoCategories": {
            "path": "/v1/cryptocurrency/categories",
            "title": "Coin categories",
            "description": "Returns information about all coin categories available on CoinMarketCap.",
            "tier": AccessTier.BASIC,
            "params": {
                "start": Param("number"),
                "limit": Param("number"),
                "id": Param("string"),
                "slug": Param("string"),
                "symbol": Param("string"),
            },
        },
        "cryptoCategory": {
            "path": "/v1/cryptocurrency/category",
            "title": "Coin category",
            "description": "Returns information about a single coin category on CoinMarketCap.",
            "tier": AccessTier.BASIC,
            "params": {
                "id": Param("string", required=True, description="Category id"),
                "start": Param("number"),
                "limit": Param("number"),
                "convert": Param("string"),
                "convert_id": Param("string"),
            },
        },
        "cryptoCurrencyMap": {
            "path": "/v1/cryptocurrency/map",
            "title": "Cryptocurrency ID map",
            "description": "Returns a mapping of all cryptocurrencies to unique CoinMarketCap IDs.",
            "tier": AccessTier.BASIC,
            "params": {
                "listing_status": Param("string", default="active"),
                "start": Param("number", default=1),
                "limit": Param("number", default=100),
                "sort": Param("string", default="id"),
                "symbol": Param("string"),
                "aux": Param("string"),
            },
        },
        "getCryptoMetadata": {
            "path": "/v2/cryptocurrency/info",
            "title": "Cryptocurrency metadata",
            "description": "Returns all static metadata for one or more cryptocurrencies including logo, description, and website URLs.",
            "tier": AccessTier.BASIC,
            "params": {
                "symbol": Param("string"),
                "id": Param("string"),
                "slug": Param("string"),
                "address": Param("string"),
                "aux": Param("string"),
                "skip_invalid": Param("boolean"),
            },
        },
        "allCryptocurrencyListings": {
            "path": "/v1/cryptocurrency/listings/latest",
            "title": "Latest listings",
            "description": "Returns a paginated list of all active cryptocurrencies with latest market data.",
            "tier": AccessTier.BASIC,
            "params": {
                "start": Param("number"),
                "limit": Param("number", ge=1, le=5000),
                "price_min": Param("number"),
                "price_max": Param("number"),
                "market_cap_min": Param("number"),
                "market_cap_max": Param("number"),
                "volume_24h_min": Param("number"),
                "volume_24h_max": Param("number"),
                "circulating_supply_min": Param("number"),
                "circulating_supply_max": Param("number"),
                "percent_change_24h_min": Param("number"),
                "percent_change_24h_max": Param("number"),
                "convert": Param("string"),
                "convert_id": Param("string"),
                "sort": Param("string", choices=LISTING_SORTS),
                "sort_dir": Param("string", choices=SORT_DIRS),
                "cryptocurrency_type": Param("string"),
                "tag": Param("string"),
                "aux": Param("string"),
            },
        },
        "cryptoQuotesLatest": {
            "path": "/v2/cryptocurrency/quotes/latest",
            "title": "Latest quotes",
            "description": "Returns the latest market quote for one or more cryptocurrencies.",
            "tier": AccessTier.BASIC,
            "params": {
                "id": Param("string"),
                "slug": Param("string"),
                "symbol": Param("string"),
                "convert": Param("string"),
                "convert_id": Param("string"),
                "aux": Param("string"),
                "skip_invalid": Param("boolean"),
            },
        },
        # Hobbyist
        "cryptoAirdrop": {
            "path": "/v1/cryptocurrency/airdrop",
            "title": "Airdrop",
            "description": "Returns information about a single airdrop on CoinMarketCap.",
            "tier": AccessTier.HOBBYIST,
            "params": {
                "id": Param("string", required=True, description="Airdrop id"),
            },
        },
        "cryptoAirdrops": {
            "path": "/v1/cryptocurrency/airdrops",
            "title": "Airdrops",
            "description": "Returns a list of past, present, or future airdrops on CoinMarketCap.",
            "tier": AccessTier.HOBBYIST,
            "params": {
                "start": Param("number"),
                "limit": Param("number"),
                "status": Param("string"),
                "id": Param("string"),
                "slug": Param("string"),
                "symbol": Param("string"),
            },
        },
        "historicalCryptocurrencyListings": {
            "path": "/v1/cryptocurrency/listings/historical",
            "title": "Historical listings",
            "description": "Returns a ranked and sorted list of all cryptocurrencies for a historical point in time.",
            "tier": AccessTier.HOBBYIST,
            "params": {
                "timestamp": Param("string_or_number"),
                "start": Param("number"),
                "limit": Param("number"),
                "convert": Param("string"),
                "convert_id": Param("string"),
                "sort": Param("string"),
                "sort_dir": Param("string"),
                "cryptocurrency_type": Param("string"),
                "aux": Param("string"),
            },
        },
        "cryptoQuotesHistorical": {
            "path": "/v2/cryptocurrency/quotes/historical",
            "title": "Historical quotes",
            "description": "Returns an interval of historical market quotes for any cryptocurrency.",
            "tier": AccessTier.HOBBYIST,
            "params": {
                "id": Param("string"),
                "slug": Param("string"),
                "symbol": Param("string"),
                "time_start": Param("string"),
                "time_end": Param("string"),
                "count": Param("number"),
                "interval": Param("string"),
                "convert": Param("string"),
                "convert_id": Param("string"),
                "aux": Param("string"),
                "skip_invalid": Param("boolean"),
            },
        },
        "cryptoQuotesHistoricalV3": {
            "path": "/v3/cryptocurrency/quotes/historical",
            "title": "Historical quotes (v3)",
            "description": "Returns an interval of historic market quotes for any cryptocurrency based on time and interval parameters.",
            "tier": AccessTier.HOBBYIST,
            "params": {
                "id": Param("string"),
                "symbol": Param("string"),
                "time_start": Param("string"),
                "time_end": Param("string"),
                "count": Param("number", ge=1, le=10000),
                "interval": Param("string", choices=QUOTE_INTERVALS),
                "convert": Param("string"),
                "convert_id": Param("string"),
                "aux": Param("string"),
                "skip_invalid": Param("boolean"),
            },
        },
        # Startup
        "newCryptocurrencyListings": {
            "path": "/v1/cryptocurrency/listings/new",
            "title": "New listings",
            "description": "Returns a paginated list of most recently added cryptocurrencies.",
            "tier": AccessTier.STARTUP,
            "params": {
                "start": Param("number", ge=1),
                "limit": Param("number", ge=1, le=5000),
                "convert": Param("string"),
                "convert_id": Param("string"),
                "sort_dir": Param("string", choices=SORT_DIRS),
            },
        },
        "cryptoTrendingGainersLosers": {
            "path": "/v1/cryptocurrency/trending/gainers-losers",
            "title": "Trending gainers and losers",
            "description": "Returns the biggest gainers and losers in a given time period.",
            "tier": AccessTier.STARTUP,
            "params": {"time_period": Param("string")},
        },
        "cryptoTrendingLatest": {
            "path": "/v1/cryptocurrency/trending/latest",
            "title": "Trending latest",
            "description": "Returns the top cryptocurrencies by search volume in a given time period.",
            "tier": AccessTier.STARTUP,
            "params": {"time_period": Param("string")},
        },
        "cryptoTrendingMostVisited": {
            "path": "/v1/cryptocurrency/trending/most-visited",
            "title": "Trending most visited",
            "description": "Returns the most visited cryptocurrencies on CoinMarketCap in a given time period.",
            "tier": AccessTier.STARTUP,
            "params": {"time_period": Param("string")},
        },
        "cryptoOhlcvHistorical": {
            "path": "/v2/cryptocurrency/ohlcv/historical",
            "title": "Historical OHLCV",
            "description": "Returns historical OHLCV market values for one or more cryptocurrencies.",
            "tier": AccessTier.STARTUP,
            "params": {
                "id": Param("string"),
                "slug": Param("string"),
                "symbol": Param("string"),
                "time_period": Param("string"),
                "time_start": Param("string"),
                "time_end": Param("string"),
                "count": Param("number"),
                "interval": Param("string"),
                "convert": Param("string"),
                "convert_id": Param("string"),
                "skip_invalid": Param("boolean"),
            },
        },
        "cryptoOhlcvLatest": {
            "path": "/v2/cryptocurrency/ohlcv/latest",
            "title": "Latest OHLCV",
            "description": "Returns the latest OHLCV (Open, High, Low, Close, Volume) market values for one or more cryptocurrencies.",
            "tier": AccessTier.STARTUP,
            "params": {
                "id": Param("string"),
                "slug": Param("string"),
                "symbol": Param("string"),
                "convert": Param("string"),
                "convert_id": Param("string"),
                "skip_invalid": Param("boolean"),
            },
        },
        "cryptoPricePerformanceStatsLatest": {
            "path": "/v2/cryptocurrency/price-performance-stats/latest",
            "title": "Price performance stats",
            "description": "Returns price performance statistics for one or more cryptocurrencies including ROI and ATH stats.",
            "tier": AccessTier.STARTUP,
            "params": {
                "id": Param("string"),
                "slug": Param("string"),
                "symbol": Param("string"),
                "time_period": Param("string"),
                "convert": Param("string"),
                "convert_id": Param("string"),
            },
        },
        # Standard
        "cryptoMarketPairsLatest": {
            "path": "/v2/cryptocurrency/market-pairs/latest",
            "title": "Cryptocurrency market pairs",
            "description": "Returns all market pairs for the specified cryptocurrency with associated stats.",
            "tier": AccessTier.STANDARD,
            "params": {
                "id": Param("string"),
                "slug": Param("string"),
                "symbol": Param("string"),
                "start": Param("number"),
                "limit": Param("number"),
                "convert": Param("string"),
                "convert_id": Param("string"),
                "matched_id": Param("string"),
                "matched_symbol": Param("string"),
                "category": Param("string"),
                "fee_type": Param("string"),
                "aux": Param("string"),
            },
        },
    }
