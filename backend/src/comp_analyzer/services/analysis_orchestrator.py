"""Sequencing of one analyze request from validation to final outcome."""

import logging
from enum import Enum
from typing import Optional

from comp_analyzer.errors import AnalysisInProgressError, AnalysisValidationError, ConfigError, RemoteError
from comp_analyzer.models.analysis import AnalysisMode, AnalysisOutcome, MatchRequest, Structured
from comp_analyzer.services.heuristic_classifier import HeuristicClassifier
from comp_analyzer.services.player_context_validator import validate_player_context
from comp_analyzer.services.remote_analysis_client import RemoteAnalysisClient
from comp_analyzer.services.response_reconciler import reconcile
from comp_analyzer.services.roster_normalizer import require_complete

logger = logging.getLogger(__name__)


class OrchestratorState(str, Enum):
    """Where the orchestrator is in the current (or last) request."""

    IDLE = "idle"
    VALIDATING = "validating"
    CALLING = "calling"
    RECONCILING = "reconciling"
    CLASSIFYING = "classifying"
    DONE = "done"
    FAILED = "failed"


class AnalysisOrchestrator:
    """Runs analyze requests one at a time.

    Remote failures fall back to the local classifier on the blue roster;
    validation and configuration errors are raised to the caller.
    """

    def __init__(
        self,
        client: RemoteAnalysisClient,
        classifier: Optional[HeuristicClassifier] = None,
    ):
        self.client = client
        self.classifier = classifier or HeuristicClassifier()
        self.state = OrchestratorState.IDLE
        self._busy = False

    @property
    def busy(self) -> bool:
        return self._busy

    async def analyze(self, request: MatchRequest) -> AnalysisOutcome:
        """Analyze a match request.

        Raises:
            AnalysisInProgressError: Another request is still running
            AnalysisValidationError: Rosters or player context are incomplete
            ConfigError: No webhook endpoint is configured
        """
        if self._busy:
            raise AnalysisInProgressError("An analysis is already in progress")

        self._busy = True
        try:
            return await self._run(request)
        finally:
            self._busy = False

    async def _run(self, request: MatchRequest) -> AnalysisOutcome:
        self.state = OrchestratorState.VALIDATING
        try:
            blue_entries, _ = require_complete(request.blue_roster, request.red_roster)
            tier_label = None
            if request.mode is AnalysisMode.PLAYER_STRATEGY:
                tier_label = validate_player_context(request.player_context)
        except AnalysisValidationError as e:
            self.state = OrchestratorState.FAILED
            logger.info(f"Analysis request rejected ({e.issue.value}): {e.message}")
            raise

        self.state = OrchestratorState.CALLING
        try:
            raw = await self.client.send(request, tier_label)
        except ConfigError:
            self.state = OrchestratorState.FAILED
            logger.error("Analysis webhook URL is not configured")
            raise
        except RemoteError as e:
            logger.warning(f"Remote analysis failed, using local analysis: {e}")
            self.state = OrchestratorState.CLASSIFYING
            # Only the blue roster is classified locally
            analysis = self.classifier.classify([entry.name for entry in blue_entries])
            self.state = OrchestratorState.DONE
            return AnalysisOutcome(Structured(analysis), source="local", fallback_reason=str(e))

        self.state = OrchestratorState.RECONCILING
        reply = reconcile(raw)
        self.state = OrchestratorState.DONE
        return AnalysisOutcome(reply, source="remote")
