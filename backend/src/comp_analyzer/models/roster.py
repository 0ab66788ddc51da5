"""Roster and role models."""

from dataclasses import dataclass, field
from enum import Enum


class Role(str, Enum):
    """Role slots, valued by the position code the webhook expects."""

    TOP = "TOP"
    JUNGLE = "JGL"
    MID = "MID"
    ADC = "ADC"
    SUPPORT = "SUP"


class Side(str, Enum):
    """Map side of a team."""

    BLUE = "blue"
    RED = "red"


# Slot order of every roster
ROLE_ORDER: tuple[Role, ...] = (Role.TOP, Role.JUNGLE, Role.MID, Role.ADC, Role.SUPPORT)

ROSTER_SIZE = len(ROLE_ORDER)


@dataclass(frozen=True)
class RosterEntry:
    """A champion slot. ``name`` is blank while the slot is unfilled."""

    name: str
    role: Role

    @property
    def is_filled(self) -> bool:
        return bool(self.name.strip())


@dataclass(frozen=True)
class Roster:
    """Five role-ordered champion slots for one side."""

    entries: tuple[RosterEntry, ...] = field(
        default_factory=lambda: tuple(RosterEntry("", role) for role in ROLE_ORDER)
    )

    def __post_init__(self):
        roles = tuple(entry.role for entry in self.entries)
        if roles != ROLE_ORDER:
            raise ValueError(
                f"Roster needs exactly {ROSTER_SIZE} entries in role order, got {[r.name for r in roles]}"
            )

    @classmethod
    def from_names(cls, names: list[str]) -> "Roster":
        """Build a roster from champion names listed in role order."""
        if len(names) != ROSTER_SIZE:
            raise ValueError(f"Expected {ROSTER_SIZE} champion names, got {len(names)}")
        return cls(tuple(RosterEntry(name, role) for name, role in zip(names, ROLE_ORDER)))

    @property
    def names(self) -> list[str]:
        return [entry.name for entry in self.entries]

    @property
    def is_complete(self) -> bool:
        """True when every slot has a non-blank name."""
        return all(entry.is_filled for entry in self.entries)
