"""Local keyword-based composition classifier.

Used when the remote analysis service cannot answer. Counts how many picks
belong to a few curated champion groups and maps the counts to canned
strengths, weaknesses and advice. Deterministic: same names, same result.
"""

from comp_analyzer.models.analysis import Analysis

BALANCED = "balanced composition"
TANK_CENTRIC = "tank-centric composition"
MAGIC_CENTRIC = "magic-damage-centric composition"

DEFAULT_STRENGTHS = ("balanced composition", "flexible strategic options")
DEFAULT_WEAKNESSES = ("no particular weakness", "situational counterplay required")

TEAMFIGHT_STRATEGY = (
    "Play around teamfights. Taking the initiative with strong engages is the key to winning."
)
LANING_STRATEGY = (
    "Win your lanes and build the lead gradually. Use pick-offs and split pushing."
)
LATE_GAME_WIN_CONDITION = (
    "Scale safely into the late game and set up fights your marksmen can carry."
)
MID_GAME_WIN_CONDITION = (
    "Win the mid-game teamfights and close the game out quickly."
)

# Count threshold for a group to define the composition
GROUP_THRESHOLD = 2


class HeuristicClassifier:
    """Classifies a roster by counting tanks, marksmen and burst mages."""

    # Keywords are matched as substrings of the case-folded champion name,
    # so Korean names and common English spellings both work.
    TANKS = (
        "malphite", "ornn", "cho'gath", "chogath", "maokai", "janna", "braum", "leona", "alistar",
        "말파이트", "오른", "초가스", "마오카이", "잔나", "브라움", "레오나", "알리스타",
    )
    MARKSMEN = (
        "jhin", "vayne", "kai'sa", "kaisa", "ezreal", "lucian", "jinx", "aphelios", "caitlyn", "ashe",
        "진", "베인", "카이사", "이즈리얼", "루시안", "징크스", "아펠리오스", "케이틀린", "애쉬",
    )
    MAGES = (
        "azir", "orianna", "syndra", "leblanc", "yasuo", "zed",
        "아지르", "오리아나", "신드라", "르블랑", "야스오", "제드",
    )

    @staticmethod
    def count_matches(names: list[str], keywords: tuple[str, ...]) -> int:
        """Number of names containing at least one keyword."""
        folded = [name.casefold() for name in names]
        return sum(1 for name in folded if any(k.casefold() in name for k in keywords))

    def classify(self, names: list[str]) -> Analysis:
        """Build an Analysis from champion names.

        Rules fire in order tanks, marksmen, mages. The mage rule overwrites
        the archetype set by the tank rule.
        """
        tank_count = self.count_matches(names, self.TANKS)
        marksman_count = self.count_matches(names, self.MARKSMEN)
        mage_count = self.count_matches(names, self.MAGES)

        archetype = BALANCED
        strengths: list[str] = []
        weaknesses: list[str] = []

        if tank_count >= GROUP_THRESHOLD:
            archetype = TANK_CENTRIC
            strengths.extend(["strong frontline", "excellent teamfight initiation"])
            weaknesses.extend(["possible damage shortfall", "limited mobility"])

        if marksman_count >= GROUP_THRESHOLD:
            strengths.extend(["strong late-game carry potential", "fast objective clearing"])
            weaknesses.extend(["weak early game", "vulnerable to burst assassins"])

        if mage_count >= GROUP_THRESHOLD:
            archetype = MAGIC_CENTRIC
            strengths.extend(["strong area damage", "strong mid-range poke"])
            weaknesses.extend(["vulnerable to magic resistance", "high mana dependency"])

        strategy = TEAMFIGHT_STRATEGY if tank_count >= GROUP_THRESHOLD else LANING_STRATEGY
        win_condition = (
            LATE_GAME_WIN_CONDITION if marksman_count >= GROUP_THRESHOLD else MID_GAME_WIN_CONDITION
        )

        return Analysis(
            archetype=archetype,
            strengths=tuple(strengths) if strengths else DEFAULT_STRENGTHS,
            weaknesses=tuple(weaknesses) if weaknesses else DEFAULT_WEAKNESSES,
            strategy=strategy,
            win_condition=win_condition,
        )
