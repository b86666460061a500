"""CoinMarketCap subscription plans, ordered by increasing access."""
from enum import IntEnum
import logging

logger = logging.getLogger(__name__)


class AccessTier(IntEnum):
    BASIC = 0
    HOBBYIST = 1
    STARTUP = 2
    STANDARD = 3
    PROFESSIONAL = 4
    ENTERPRISE = 5

    @property
    def label(self) -> str:
        """Plan name as CoinMarketCap spells it, e.g. ``Hobbyist``."""
        return self.name.capitalize()

    @classmethod
    def parse(cls, value) -> "AccessTier":
        """Resolve a plan name, integer or AccessTier to a tier.

        Unknown values fall back to BASIC so a typo never unlocks more tools.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass
        elif isinstance(value, str) and value.strip():
            key = value.strip().upper()
            if key in cls.__members__:
                return cls[key]
            if key.isdigit():
                return cls.parse(int(key))
        logger.warning("Unrecognized subscription level %r; falling back to %s", value, cls.BASIC.label)
        return cls.BASIC
