"""HTTP client for the remote analysis webhook.

Posts a match request to the configured endpoint and returns the decoded
JSON reply. Every failure is raised as a RemoteError subclass so the
orchestrator can decide what to do with it.
"""

import json
import logging
from typing import Any, Optional

import httpx

from comp_analyzer.errors import ConfigError, DecodeError, StatusError, TransportError
from comp_analyzer.models.analysis import AnalysisMode, MatchRequest
from comp_analyzer.services.roster_normalizer import filled_entries

logger = logging.getLogger(__name__)


def build_payload(request: MatchRequest, tier_label: Optional[str] = None) -> dict:
    """Build the JSON body the analysis workflow consumes.

    Args:
        request: Validated match request
        tier_label: Full tier label, required in player strategy mode

    Returns:
        Payload dict ready for serialization
    """
    timestamp = request.timestamp.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    tag = request.mode.request_tag

    player_info = None
    if request.mode is AnalysisMode.PLAYER_STRATEGY and request.player_context:
        ctx = request.player_context
        apex = ctx.tier is not None and ctx.tier.is_apex
        player_info = {
            "tier": ctx.tier.value if ctx.tier else "",
            "tierLevel": str(ctx.subdivision) if not apex and ctx.subdivision is not None else None,
            "tierPoints": str(ctx.points) if apex and ctx.points is not None else None,
            "position": ctx.role.value,
            "team": ctx.side.value,
            "fullTierInfo": tier_label,
        }

    return {
        "timestamp": timestamp,
        "analysisMode": tag,
        "requestType": tag,
        "matchData": {
            "blueTeam": [
                {"name": e.name, "position": e.role.value} for e in filled_entries(request.blue_roster)
            ],
            "redTeam": [
                {"name": e.name, "position": e.role.value} for e in filled_entries(request.red_roster)
            ],
        },
        "playerInfo": player_info,
    }


class RemoteAnalysisClient:
    """Sends match requests to the analysis webhook.

    One POST per call, no retries. Timeouts are httpx's defaults.
    """

    def __init__(
        self,
        endpoint: Optional[str],
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            endpoint: Webhook URL; may be empty, in which case send() refuses to run
            transport: Optional httpx transport (used by tests)
        """
        self.endpoint = (endpoint or "").strip()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def is_configured(self) -> bool:
        return bool(self.endpoint)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(transport=self._transport)
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def send(self, request: MatchRequest, tier_label: Optional[str] = None) -> Any:
        """Post the request and return the decoded JSON reply.

        Raises:
            ConfigError: No endpoint configured; nothing is sent
            TransportError: Connection-level failure or malformed endpoint URL
            StatusError: Non-2xx response
            DecodeError: Response body cannot be decoded or is not JSON
        """
        if not self.is_configured:
            raise ConfigError("Analysis webhook URL is not configured")

        payload = build_payload(request, tier_label)
        client = await self._get_client()

        try:
            response = await client.post(
                self.endpoint,
                headers={"Content-Type": "application/json"},
                content=json.dumps(payload, ensure_ascii=False).encode("utf-8"),
            )
        except httpx.DecodingError as e:
            raise DecodeError(f"Analysis service returned an undecodable body: {e}") from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            # Unreachable host, refused connection or a malformed endpoint URL
            raise TransportError(e) from e

        if not response.is_success:
            logger.debug(f"Analysis webhook rejected request: {response.status_code} {response.text[:200]}")
            raise StatusError(response.status_code, response.text)

        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"Analysis service returned malformed JSON: {e}") from e
