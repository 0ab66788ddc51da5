"""Data models for the composition analyzer."""

from comp_analyzer.models.roster import ROLE_ORDER, ROSTER_SIZE, Role, Roster, RosterEntry, Side
from comp_analyzer.models.player import APEX_TIERS, PlayerContext, Tier
from comp_analyzer.models.analysis import (
    Analysis,
    AnalysisMode,
    AnalysisOutcome,
    MatchRequest,
    Narrative,
    Opaque,
    RemoteReply,
    Structured,
)

__all__ = [
    "ROLE_ORDER",
    "ROSTER_SIZE",
    "Role",
    "Roster",
    "RosterEntry",
    "Side",
    "APEX_TIERS",
    "PlayerContext",
    "Tier",
    "Analysis",
    "AnalysisMode",
    "AnalysisOutcome",
    "MatchRequest",
    "Narrative",
    "Opaque",
    "RemoteReply",
    "Structured",
]
