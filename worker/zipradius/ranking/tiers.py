"""Fixed ordering of partner clinic tiers."""

from typing import Dict, Tuple

# Highest priority first.
TIER_VALUES: Tuple[str, ...] = ("A", "B", "C")

_TIER_RANKS: Dict[str, int] = {tier: index for index, tier in enumerate(TIER_VALUES)}


class InvalidTierError(ValueError):
    """Raised when a clinic carries a tier outside of TIER_VALUES."""


def tier_rank(tier: str) -> int:
    """Return the sort position of ``tier``; lower means higher priority."""
    try:
        return _TIER_RANKS[tier]
    except (KeyError, TypeError):
        raise InvalidTierError(f"unknown tier {tier!r}; expected one of {', '.join(TIER_VALUES)}") from None
