"""Analysis results and match request models."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Literal, Optional, Union

from comp_analyzer.models.player import PlayerContext
from comp_analyzer.models.roster import Roster


class AnalysisMode(str, Enum):
    """What the caller wants out of the analysis."""

    SPECTATOR = "spectator"  # predict how the match plays out
    PLAYER_STRATEGY = "player"  # personal strategy for the requester

    @property
    def request_tag(self) -> str:
        """Purpose tag sent to the remote service."""
        if self is AnalysisMode.PLAYER_STRATEGY:
            return "player_strategy_analysis"
        return "match_prediction_analysis"


@dataclass(frozen=True)
class MatchRequest:
    """A single analyze request. Built fresh for every call."""

    mode: AnalysisMode
    blue_roster: Roster
    red_roster: Roster
    player_context: Optional[PlayerContext] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        wants_player = self.mode is AnalysisMode.PLAYER_STRATEGY
        if wants_player and self.player_context is None:
            raise ValueError("Player strategy mode requires a player context")
        if not wants_player and self.player_context is not None:
            raise ValueError("Player context is only accepted in player strategy mode")


@dataclass(frozen=True)
class Analysis:
    """Structured composition assessment."""

    archetype: str
    strengths: tuple[str, ...]
    weaknesses: tuple[str, ...]
    strategy: str
    win_condition: str

    def to_dict(self) -> dict:
        """Serialize with the field names the frontend reads."""
        return {
            "teamComp": self.archetype,
            "strengths": list(self.strengths),
            "weaknesses": list(self.weaknesses),
            "strategy": self.strategy,
            "winCondition": self.win_condition,
        }


@dataclass(frozen=True)
class Narrative:
    """Free-text (markdown) reply, displayed as-is."""

    text: str


@dataclass(frozen=True)
class Structured:
    """Reply conforming to the Analysis shape."""

    analysis: Analysis


@dataclass(frozen=True)
class Opaque:
    """Unrecognized reply, kept as pretty-printed JSON."""

    text: str


RemoteReply = Union[Narrative, Structured, Opaque]


@dataclass(frozen=True)
class AnalysisOutcome:
    """What the caller finally gets back from an analyze call."""

    reply: RemoteReply
    source: Literal["remote", "local"]
    fallback_reason: Optional[str] = None  # remote error that forced the local path

    @property
    def kind(self) -> str:
        if isinstance(self.reply, Narrative):
            return "narrative"
        if isinstance(self.reply, Structured):
            return "structured"
        return "opaque"
