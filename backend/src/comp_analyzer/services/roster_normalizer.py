"""Roster filtering and completeness checks."""

from comp_analyzer.errors import AnalysisValidationError, ValidationIssue
from comp_analyzer.models.roster import ROSTER_SIZE, Roster, RosterEntry, Side


def filled_entries(roster: Roster) -> list[RosterEntry]:
    """Entries with a non-blank name, trimmed, in role order."""
    return [
        RosterEntry(entry.name.strip(), entry.role)
        for entry in roster.entries
        if entry.is_filled
    ]


def require_complete(blue: Roster, red: Roster) -> tuple[list[RosterEntry], list[RosterEntry]]:
    """Return the filled entries of both sides, or reject partial rosters.

    Raises:
        AnalysisValidationError: MISSING_CHAMPIONS if either side has a blank slot
    """
    blue_entries = filled_entries(blue)
    red_entries = filled_entries(red)

    incomplete = [
        side.value
        for side, entries in ((Side.BLUE, blue_entries), (Side.RED, red_entries))
        if len(entries) < ROSTER_SIZE
    ]
    if incomplete:
        raise AnalysisValidationError(
            ValidationIssue.MISSING_CHAMPIONS,
            f"Enter all {ROSTER_SIZE} champions for: {', '.join(incomplete)}",
        )
    return blue_entries, red_entries
