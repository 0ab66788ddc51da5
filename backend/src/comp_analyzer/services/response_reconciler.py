"""Interpretation of whatever JSON the analysis service sends back."""

import json
import logging
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictStr, ValidationError

from comp_analyzer.models.analysis import Analysis, Narrative, Opaque, RemoteReply, Structured

logger = logging.getLogger(__name__)


class AnalysisPayload(BaseModel):
    """Wire shape of a structured ``analysis`` reply. No type coercion."""

    model_config = ConfigDict(strict=True)

    archetype: StrictStr = Field(validation_alias=AliasChoices("teamComp", "archetype"))
    strengths: list[StrictStr] = Field(min_length=1)
    weaknesses: list[StrictStr] = Field(min_length=1)
    strategy: StrictStr
    win_condition: StrictStr = Field(validation_alias="winCondition")

    def to_analysis(self) -> Analysis:
        return Analysis(
            archetype=self.archetype,
            strengths=tuple(self.strengths),
            weaknesses=tuple(self.weaknesses),
            strategy=self.strategy,
            win_condition=self.win_condition,
        )


def parse_analysis(value: Any) -> Optional[Analysis]:
    """Return an Analysis if ``value`` has the full analysis shape, else None."""
    if not isinstance(value, dict):
        return None
    try:
        return AnalysisPayload.model_validate(value).to_analysis()
    except ValidationError as e:
        logger.debug(f"Reply 'analysis' field does not match the analysis shape: {e.error_count()} errors")
        return None


def reconcile(value: Any) -> RemoteReply:
    """Classify a decoded reply.

    A non-empty ``md`` string wins over everything else, then a well-formed
    ``analysis`` object. Anything else is returned as pretty-printed JSON.
    """
    if isinstance(value, dict):
        md = value.get("md")
        if isinstance(md, str) and md:
            return Narrative(md)

        analysis = parse_analysis(value.get("analysis"))
        if analysis is not None:
            return Structured(analysis)

    logger.info("Unrecognized reply shape from analysis service, showing raw JSON")
    return Opaque(json.dumps(value, indent=2, ensure_ascii=False))
