"""Validation of the requester's rank for player strategy analysis."""

from comp_analyzer.errors import AnalysisValidationError, ValidationIssue
from comp_analyzer.models.player import PlayerContext

# Korean step suffix the analysis workflow parses, e.g. "Gold 2단계"
SUBDIVISION_SUFFIX = "단계"


def validate_player_context(context: PlayerContext) -> str:
    """Check the player context and return its full tier label.

    Checks run in order and stop at the first failure: tier selected, then
    subdivision for non-apex tiers, then points for apex tiers.

    Raises:
        AnalysisValidationError: MISSING_TIER, MISSING_SUBDIVISION or MISSING_POINTS
    """
    if context.tier is None:
        raise AnalysisValidationError(
            ValidationIssue.MISSING_TIER, "Select a tier for player strategy analysis"
        )
    if not context.tier.is_apex and context.subdivision is None:
        raise AnalysisValidationError(
            ValidationIssue.MISSING_SUBDIVISION, "Select a tier subdivision"
        )
    if context.tier.is_apex and context.points is None:
        raise AnalysisValidationError(
            ValidationIssue.MISSING_POINTS, "Enter your LP"
        )
    return full_tier_label(context)


def full_tier_label(context: PlayerContext) -> str:
    """Human-readable rank, e.g. "Master 250LP" or "Gold 2단계"."""
    if context.tier is None:
        raise ValueError("Cannot label a player context without a tier")
    if context.tier.is_apex:
        return f"{context.tier.value} {context.points}LP"
    return f"{context.tier.value} {context.subdivision}{SUBDIVISION_SUFFIX}"
