"""Player context for the strategy analysis mode."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from comp_analyzer.models.roster import Role, Side


class Tier(str, Enum):
    """Ranked tiers in ascending order."""

    IRON = "Iron"
    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"
    PLATINUM = "Platinum"
    EMERALD = "Emerald"
    DIAMOND = "Diamond"
    MASTER = "Master"
    GRANDMASTER = "Grandmaster"
    CHALLENGER = "Challenger"

    @property
    def is_apex(self) -> bool:
        """Apex tiers rank by league points instead of a subdivision."""
        return self in APEX_TIERS


APEX_TIERS = frozenset({Tier.MASTER, Tier.GRANDMASTER, Tier.CHALLENGER})

# Subdivisions from lowest to highest (4 is the bottom of a tier)
SUBDIVISIONS = (4, 3, 2, 1)

MIN_POINTS = 0
MAX_POINTS = 3000


@dataclass(frozen=True)
class PlayerContext:
    """Requester's rank, role and side.

    ``tier`` is None while nothing has been selected. Non-apex tiers carry a
    ``subdivision``; apex tiers carry ``points``.
    """

    tier: Optional[Tier] = None
    subdivision: Optional[int] = None
    points: Optional[int] = None
    role: Role = Role.TOP
    side: Side = Side.BLUE
