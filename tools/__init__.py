# tools package: declarative CoinMarketCap endpoint tables
# Modules in this package expose `get_tools() -> dict[str, dict]` mapping a tool name to
# its path, title, description, tier and params. core.registry discovers them with pkgutil.
__all__ = []
