"""Exceptions raised while producing an analysis."""

from enum import Enum
from typing import Optional


class AnalysisError(Exception):
    """Base class for analysis failures."""


class ValidationIssue(str, Enum):
    """Input problems that stop a request before any network call."""

    MISSING_CHAMPIONS = "missing_champions"
    MISSING_TIER = "missing_tier"
    MISSING_SUBDIVISION = "missing_subdivision"
    MISSING_POINTS = "missing_points"


class AnalysisValidationError(AnalysisError):
    """Request rejected locally; nothing was sent."""

    def __init__(self, issue: ValidationIssue, message: str):
        super().__init__(message)
        self.issue = issue
        self.message = message


class AnalysisInProgressError(AnalysisError):
    """Another analysis is still in flight on the same orchestrator."""


class RemoteError(AnalysisError):
    """Remote analysis could not produce a reply."""


class ConfigError(RemoteError):
    """Webhook endpoint is not configured. The request is never sent."""


class TransportError(RemoteError):
    """Connection-level failure (unreachable host, refused, TLS, ...)."""

    def __init__(self, cause: Exception):
        super().__init__(f"Could not reach analysis service: {cause}")
        self.cause = cause


class StatusError(RemoteError):
    """Service answered with a non-2xx status."""

    def __init__(self, status_code: int, body: Optional[str] = None):
        super().__init__(f"Analysis service returned HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class DecodeError(RemoteError):
    """Reply body was not valid JSON."""
