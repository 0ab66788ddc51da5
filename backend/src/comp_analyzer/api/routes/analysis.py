"""REST endpoints for team composition analysis."""

from typing import Literal, Optional

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field

from comp_analyzer.config import settings
from comp_analyzer.errors import AnalysisInProgressError, AnalysisValidationError, ConfigError
from comp_analyzer.models.analysis import AnalysisMode, AnalysisOutcome, MatchRequest, Narrative, Opaque, Structured
from comp_analyzer.models.player import MAX_POINTS, MIN_POINTS, SUBDIVISIONS, PlayerContext, Tier
from comp_analyzer.models.roster import ROLE_ORDER, ROSTER_SIZE, Roster, Side
from comp_analyzer.services.analysis_orchestrator import AnalysisOrchestrator
from comp_analyzer.services.remote_analysis_client import RemoteAnalysisClient
from comp_analyzer.utils.role_normalizer import ROLE_LABELS, normalize_role
from comp_analyzer.utils.tier_normalizer import normalize_tier

router = APIRouter(prefix="/api/analysis", tags=["analysis"])


def _get_orchestrator(request: Request) -> AnalysisOrchestrator:
    """Get the app's orchestrator, creating it if startup did not."""
    if not hasattr(request.app.state, "orchestrator"):
        request.app.state.orchestrator = AnalysisOrchestrator(
            RemoteAnalysisClient(settings.analysis_webhook_url)
        )
    return request.app.state.orchestrator


class PlayerInfoBody(BaseModel):
    """Requester's rank, as typed into the form."""

    tier: str = ""  # blank means not selected
    subdivision: Optional[int] = Field(default=None, ge=min(SUBDIVISIONS), le=max(SUBDIVISIONS))
    points: Optional[int] = Field(default=None, ge=MIN_POINTS, le=MAX_POINTS)
    role: str = "TOP"
    side: Literal["blue", "red"] = "blue"


class AnalyzeRequest(BaseModel):
    """Request body for an analysis. Team lists are in role order."""

    mode: Literal["spectator", "player"] = "spectator"
    blue_team: list[str] = Field(min_length=ROSTER_SIZE, max_length=ROSTER_SIZE)
    red_team: list[str] = Field(min_length=ROSTER_SIZE, max_length=ROSTER_SIZE)
    player: Optional[PlayerInfoBody] = None


def _to_player_context(body: Optional[PlayerInfoBody]) -> PlayerContext:
    if body is None:
        return PlayerContext()

    tier = None
    if body.tier.strip():
        tier = normalize_tier(body.tier)
        if tier is None:
            raise HTTPException(status_code=422, detail=f"Unknown tier: {body.tier}")
    role = normalize_role(body.role)
    if role is None:
        raise HTTPException(status_code=422, detail=f"Unknown role: {body.role}")

    return PlayerContext(
        tier=tier,
        subdivision=body.subdivision,
        points=body.points,
        role=role,
        side=Side(body.side),
    )


def _to_match_request(body: AnalyzeRequest) -> MatchRequest:
    mode = AnalysisMode(body.mode)
    player_context = None
    if mode is AnalysisMode.PLAYER_STRATEGY:
        player_context = _to_player_context(body.player)
    return MatchRequest(
        mode=mode,
        blue_roster=Roster.from_names(body.blue_team),
        red_roster=Roster.from_names(body.red_team),
        player_context=player_context,
    )


def _serialize_outcome(outcome: AnalysisOutcome) -> dict:
    reply = outcome.reply
    markdown = None
    analysis = None
    if isinstance(reply, (Narrative, Opaque)):
        markdown = reply.text
    elif isinstance(reply, Structured):
        analysis = reply.analysis.to_dict()
    return {
        "status": "ready",
        "source": outcome.source,
        "kind": outcome.kind,
        "markdown": markdown,
        "analysis": analysis,
        "fallback_reason": outcome.fallback_reason,
    }


@router.get("/options")
async def get_options():
    """Choices for the analysis form selects."""
    return {
        "modes": [mode.value for mode in AnalysisMode],
        "roles": [{"code": role.value, "label": ROLE_LABELS[role]} for role in ROLE_ORDER],
        "tiers": [{"name": tier.value, "apex": tier.is_apex} for tier in Tier],
        "subdivisions": list(SUBDIVISIONS),
        "points": {"min": MIN_POINTS, "max": MAX_POINTS},
        "sides": [side.value for side in Side],
    }


@router.post("")
async def analyze(request: Request, body: AnalyzeRequest):
    """Analyze both rosters.

    Falls back to the local classifier when the analysis service fails,
    so a configured server always answers with a result.
    """
    orchestrator = _get_orchestrator(request)
    match_request = _to_match_request(body)

    try:
        outcome = await orchestrator.analyze(match_request)
    except AnalysisInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except AnalysisValidationError as e:
        raise HTTPException(status_code=422, detail={"code": e.issue.value, "message": e.message})
    except ConfigError as e:
        raise HTTPException(status_code=503, detail=str(e))

    return _serialize_outcome(outcome)
