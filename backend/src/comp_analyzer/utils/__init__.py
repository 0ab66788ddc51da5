"""Utility modules for comp_analyzer."""

from comp_analyzer.utils.role_normalizer import (
    ROLE_ALIASES,
    ROLE_LABELS,
    normalize_role,
    normalize_role_strict,
)
from comp_analyzer.utils.tier_normalizer import (
    TIER_ALIASES,
    normalize_tier,
    normalize_tier_strict,
)

__all__ = [
    "ROLE_ALIASES",
    "ROLE_LABELS",
    "normalize_role",
    "normalize_role_strict",
    "TIER_ALIASES",
    "normalize_tier",
    "normalize_tier_strict",
]
