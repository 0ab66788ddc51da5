"""Business logic services."""

from comp_analyzer.services.analysis_orchestrator import AnalysisOrchestrator, OrchestratorState
from comp_analyzer.services.heuristic_classifier import HeuristicClassifier
from comp_analyzer.services.remote_analysis_client import RemoteAnalysisClient, build_payload
from comp_analyzer.services.response_reconciler import reconcile

__all__ = [
    "AnalysisOrchestrator",
    "OrchestratorState",
    "HeuristicClassifier",
    "RemoteAnalysisClient",
    "build_payload",
    "reconcile",
]
