"""Centralized role normalization utility.

Form inputs and API bodies spell roles many ways. Everything that turns a
string into a Role goes through this module.
"""

from typing import Optional

from comp_analyzer.models.roster import Role

# Mapping from lowercase role spellings to Role
ROLE_ALIASES: dict[str, Role] = {
    # Top lane variations
    "top": Role.TOP,
    "top laner": Role.TOP,
    "toplane": Role.TOP,
    "탑": Role.TOP,

    # Jungle variations
    "jungle": Role.JUNGLE,
    "jungler": Role.JUNGLE,
    "jgl": Role.JUNGLE,
    "jng": Role.JUNGLE,
    "jg": Role.JUNGLE,
    "정글": Role.JUNGLE,

    # Mid lane variations
    "mid": Role.MID,
    "middle": Role.MID,
    "mid laner": Role.MID,
    "midlane": Role.MID,
    "미드": Role.MID,

    # Bot/ADC variations
    "adc": Role.ADC,
    "bot": Role.ADC,
    "bottom": Role.ADC,
    "ad carry": Role.ADC,
    "marksman": Role.ADC,
    "원딜": Role.ADC,

    # Support variations
    "support": Role.SUPPORT,
    "sup": Role.SUPPORT,
    "supp": Role.SUPPORT,
    "서포터": Role.SUPPORT,
}

# Display labels for the form selects
ROLE_LABELS: dict[Role, str] = {
    Role.TOP: "Top",
    Role.JUNGLE: "Jungle",
    Role.MID: "Mid",
    Role.ADC: "ADC",
    Role.SUPPORT: "Support",
}


def normalize_role(role: Optional[str]) -> Optional[Role]:
    """Normalize a role string to a Role.

    Args:
        role: Role string in any known format (e.g., "JNG", "jungle", "bot", "SUP")

    Returns:
        The matching Role, or None if invalid/None

    Examples:
        >>> normalize_role("JNG")
        <Role.JUNGLE: 'JGL'>
        >>> normalize_role("bot")
        <Role.ADC: 'ADC'>
        >>> normalize_role(None)
    """
    if role is None:
        return None
    return ROLE_ALIASES.get(role.strip().lower())


def normalize_role_strict(role: str) -> Role:
    """Normalize a role string, raising ValueError if unknown."""
    normalized = normalize_role(role)
    if normalized is None:
        raise ValueError(f"Unknown role: {role}")
    return normalized
