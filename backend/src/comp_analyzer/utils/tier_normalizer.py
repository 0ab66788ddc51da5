"""Tier normalization for ranked descriptors typed by users."""

from typing import Optional

from comp_analyzer.models.player import Tier

TIER_ALIASES: dict[str, Tier] = {
    "iron": Tier.IRON,
    "아이언": Tier.IRON,
    "bronze": Tier.BRONZE,
    "브론즈": Tier.BRONZE,
    "silver": Tier.SILVER,
    "실버": Tier.SILVER,
    "gold": Tier.GOLD,
    "골드": Tier.GOLD,
    "platinum": Tier.PLATINUM,
    "plat": Tier.PLATINUM,
    "플래티넘": Tier.PLATINUM,
    "emerald": Tier.EMERALD,
    "에메랄드": Tier.EMERALD,
    "diamond": Tier.DIAMOND,
    "dia": Tier.DIAMOND,
    "다이아몬드": Tier.DIAMOND,
    "다이아": Tier.DIAMOND,
    "master": Tier.MASTER,
    "마스터": Tier.MASTER,
    "grandmaster": Tier.GRANDMASTER,
    "grand master": Tier.GRANDMASTER,
    "gm": Tier.GRANDMASTER,
    "그랜드마스터": Tier.GRANDMASTER,
    "challenger": Tier.CHALLENGER,
    "챌린저": Tier.CHALLENGER,
}


def normalize_tier(tier: Optional[str]) -> Optional[Tier]:
    """Normalize a tier string to a Tier.

    Blank strings mean "not selected" and normalize to None, same as
    unknown spellings.
    """
    if tier is None:
        return None
    return TIER_ALIASES.get(tier.strip().lower())


def normalize_tier_strict(tier: str) -> Tier:
    """Normalize a tier string, raising ValueError if unknown."""
    normalized = normalize_tier(tier)
    if normalized is None:
        raise ValueError(f"Unknown tier: {tier}")
    return normalized
