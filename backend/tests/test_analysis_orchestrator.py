"""Tests for the analysis orchestrator."""

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock

from comp_analyzer.errors import (
    AnalysisInProgressError,
    AnalysisValidationError,
    ConfigError,
    DecodeError,
    StatusError,
    TransportError,
    ValidationIssue,
)
from comp_analyzer.models.analysis import AnalysisMode, MatchRequest, Narrative, Opaque, Structured
from comp_analyzer.models.player import PlayerContext, Tier
from comp_analyzer.models.roster import Roster
from comp_analyzer.services.analysis_orchestrator import AnalysisOrchestrator, OrchestratorState
from comp_analyzer.services.heuristic_classifier import TANK_CENTRIC, TEAMFIGHT_STRATEGY, HeuristicClassifier
from comp_analyzer.services.remote_analysis_client import RemoteAnalysisClient

pytestmark = pytest.mark.anyio

BLUE = ["Malphite", "Ornn", "Azir", "Jinx", "Leona"]
RED = ["Jhin", "Caitlyn", "Ashe", "Garen", "Darius"]


def _request(mode=AnalysisMode.SPECTATOR, blue=BLUE, red=RED, player=None) -> MatchRequest:
    return MatchRequest(
        mode=mode,
        blue_roster=Roster.from_names(blue),
        red_roster=Roster.from_names(red),
        player_context=player,
    )


@pytest.fixture
def mock_client():
    client = MagicMock(spec=RemoteAnalysisClient)
    client.send = AsyncMock(return_value={"md": "# Blue favored"})
    return client


@pytest.fixture
def orchestrator(mock_client):
    return AnalysisOrchestrator(mock_client)


class TestValidation:
    """Requests that never reach the network."""

    async def test_incomplete_roster_fails_without_call(self, orchestrator, mock_client):
        with pytest.raises(AnalysisValidationError) as exc_info:
            await orchestrator.analyze(_request(red=["Jhin", "", "Ashe", "Garen", "Darius"]))
        assert exc_info.value.issue is ValidationIssue.MISSING_CHAMPIONS
        assert orchestrator.state is OrchestratorState.FAILED
        assert not orchestrator.busy
        mock_client.send.assert_not_called()

    async def test_missing_tier_fails_without_call(self, orchestrator, mock_client):
        request = _request(mode=AnalysisMode.PLAYER_STRATEGY, player=PlayerContext())
        with pytest.raises(AnalysisValidationError) as exc_info:
            await orchestrator.analyze(request)
        assert exc_info.value.issue is ValidationIssue.MISSING_TIER
        mock_client.send.assert_not_called()

    async def test_roster_checked_before_player(self, orchestrator):
        request = _request(mode=AnalysisMode.PLAYER_STRATEGY, blue=["", "", "", "", ""], player=PlayerContext())
        with pytest.raises(AnalysisValidationError) as exc_info:
            await orchestrator.analyze(request)
        assert exc_info.value.issue is ValidationIssue.MISSING_CHAMPIONS

    async def test_config_error_is_raised_without_fallback(self, orchestrator, mock_client):
        mock_client.send.side_effect = ConfigError("not configured")
        with pytest.raises(ConfigError):
            await orchestrator.analyze(_request())
        assert orchestrator.state is OrchestratorState.FAILED
        assert not orchestrator.busy


class TestRemotePath:
    """Successful remote replies are reconciled."""

    async def test_narrative_reply(self, orchestrator, mock_client):
        outcome = await orchestrator.analyze(_request())
        assert outcome.reply == Narrative("# Blue favored")
        assert outcome.source == "remote"
        assert outcome.fallback_reason is None
        assert orchestrator.state is OrchestratorState.DONE

    async def test_opaque_reply(self, orchestrator, mock_client):
        mock_client.send.return_value = {}
        outcome = await orchestrator.analyze(_request())
        assert outcome.reply == Opaque("{}")
        assert outcome.kind == "opaque"

    async def test_player_mode_passes_tier_label(self, orchestrator, mock_client):
        request = _request(
            mode=AnalysisMode.PLAYER_STRATEGY,
            player=PlayerContext(tier=Tier.CHALLENGER, points=1500),
        )
        await orchestrator.analyze(request)
        mock_client.send.assert_awaited_once_with(request, "Challenger 1500LP")

    async def test_spectator_mode_sends_no_label(self, orchestrator, mock_client):
        request = _request()
        await orchestrator.analyze(request)
        mock_client.send.assert_awaited_once_with(request, None)


class TestFallback:
    """Remote failures resolve to a local structured analysis."""

    @pytest.mark.parametrize(
        "error",
        [
            TransportError(httpx.ConnectError("refused")),
            StatusError(500),
            DecodeError("bad json"),
        ],
    )
    async def test_remote_error_uses_local_classifier(self, orchestrator, mock_client, error):
        mock_client.send.side_effect = error
        outcome = await orchestrator.analyze(_request())

        assert orchestrator.state is OrchestratorState.DONE
        assert outcome.source == "local"
        assert outcome.fallback_reason == str(error)
        assert isinstance(outcome.reply, Structured)
        assert outcome.reply.analysis == HeuristicClassifier().classify(BLUE)

    async def test_fallback_classifies_blue_roster_only(self, orchestrator, mock_client):
        mock_client.send.side_effect = StatusError(502)
        outcome = await orchestrator.analyze(_request())
        analysis = outcome.reply.analysis
        # Red is marksman-heavy, blue is tank-heavy
        assert analysis.archetype == TANK_CENTRIC
        assert analysis.strategy == TEAMFIGHT_STRATEGY
        assert "strong late-game carry potential" not in analysis.strengths

    async def test_real_client_connection_failure_falls_back(self):
        def handler(request):
            raise httpx.ConnectError("unreachable", request=request)

        client = RemoteAnalysisClient("http://analysis.invalid/hook", transport=httpx.MockTransport(handler))
        orchestrator = AnalysisOrchestrator(client)
        try:
            outcome = await orchestrator.analyze(_request())
        finally:
            await client.close()
        assert outcome.source == "local"
        assert outcome.reply.analysis.archetype == TANK_CENTRIC

    @pytest.mark.parametrize(
        "endpoint,response",
        [
            ("http://analysis.example/hook", httpx.Response(200, headers={"content-encoding": "gzip"}, content=b"not gzip")),
            ("http://[::1/x", httpx.Response(200, json={"md": "unreachable"})),
        ],
    )
    async def test_undecodable_body_or_bad_endpoint_falls_back(self, endpoint, response):
        client = RemoteAnalysisClient(endpoint, transport=httpx.MockTransport(lambda request: response))
        orchestrator = AnalysisOrchestrator(client)
        try:
            outcome = await orchestrator.analyze(_request())
        finally:
            await client.close()
        assert orchestrator.state is OrchestratorState.DONE
        assert not orchestrator.busy
        assert outcome.source == "local"
        assert isinstance(outcome.reply, Structured)


class TestBusyFlag:
    """Only one analysis may be in flight per orchestrator."""

    async def test_reentrant_request_is_rejected(self, orchestrator, mock_client):
        inner = {}

        async def send(request, tier_label):
            with pytest.raises(AnalysisInProgressError):
                await orchestrator.analyze(_request())
            inner["state"] = orchestrator.state
            inner["busy"] = orchestrator.busy
            return {"md": "ok"}

        mock_client.send.side_effect = send
        outcome = await orchestrator.analyze(_request())

        assert outcome.reply == Narrative("ok")
        assert inner == {"state": OrchestratorState.CALLING, "busy": True}
        assert not orchestrator.busy

    async def test_busy_cleared_after_each_exit_path(self, orchestrator, mock_client):
        with pytest.raises(AnalysisValidationError):
            await orchestrator.analyze(_request(blue=["", "", "", "", ""]))
        assert not orchestrator.busy

        mock_client.send.side_effect = StatusError(500)
        await orchestrator.analyze(_request())
        assert not orchestrator.busy

        mock_client.send.side_effect = None
        mock_client.send.return_value = {"md": "again"}
        outcome = await orchestrator.analyze(_request())
        assert outcome.reply == Narrative("again")

    async def test_starts_idle(self, mock_client):
        assert AnalysisOrchestrator(mock_client).state is OrchestratorState.IDLE


class TestMatchRequestModel:
    """Player context is present exactly in player strategy mode."""

    def test_player_mode_requires_context(self):
        with pytest.raises(ValueError, match="requires a player context"):
            _request(mode=AnalysisMode.PLAYER_STRATEGY, player=None)

    def test_spectator_mode_rejects_context(self):
        with pytest.raises(ValueError, match="only accepted in player strategy mode"):
            _request(mode=AnalysisMode.SPECTATOR, player=PlayerContext(tier=Tier.GOLD, subdivision=2))
