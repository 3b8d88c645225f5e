from enum import Enum


class ScoreCategory(str, Enum):
    """Outcome tiers for a guess, declared from strictest to loosest."""

    PERFECT = "perfect"
    EXCELLENT = "excellent"
    SAME_COUNTRY = "sameCountry"
    SAME_CONTINENT = "sameContinent"
    MISS = "miss"

    @property
    def points(self) -> int:
        return _POINTS[self]

    @property
    def title(self) -> str:
        return _TITLES[self]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def color(self) -> str:
        """Color token for the renderer."""
        return _COLORS[self]

    @property
    def ring_position(self) -> float:
        """Normalized target-ring radius: 0.0 is the bullseye, 1.0 the outer ring."""
        return _RING_POSITIONS[self]

    @property
    def emoji(self) -> str:
        return _EMOJIS[self]

    @property
    def percentage(self) -> str:
        return _PERCENTAGES[self]

    @property
    def rank(self) -> int:
        """Position in strictness order, 0 being the strictest tier."""
        return list(ScoreCategory).index(self)

    def is_stricter_than(self, other: "ScoreCategory") -> bool:
        return self.rank < other.rank


_POINTS = {
    ScoreCategory.PERFECT: 5000,
    ScoreCategory.EXCELLENT: 3000,
    ScoreCategory.SAME_COUNTRY: 1500,
    ScoreCategory.SAME_CONTINENT: 500,
    ScoreCategory.MISS: 100,
}

_TITLES = {
    ScoreCategory.PERFECT: "Perfect!",
    ScoreCategory.EXCELLENT: "Excellent!",
    ScoreCategory.SAME_COUNTRY: "Same Country",
    ScoreCategory.SAME_CONTINENT: "Same Continent",
    ScoreCategory.MISS: "Miss",
}

_DESCRIPTIONS = {
    ScoreCategory.PERFECT: "Within 15km",
    ScoreCategory.EXCELLENT: "Within 100km",
    ScoreCategory.SAME_COUNTRY: "Correct Country",
    ScoreCategory.SAME_CONTINENT: "Correct Continent",
    ScoreCategory.MISS: "Wrong Continent",
}

_COLORS = {
    ScoreCategory.PERFECT: "green",
    ScoreCategory.EXCELLENT: "blue",
    ScoreCategory.SAME_COUNTRY: "orange",
    ScoreCategory.SAME_CONTINENT: "yellow",
    ScoreCategory.MISS: "red",
}

_RING_POSITIONS = {
    ScoreCategory.PERFECT: 0.2,
    ScoreCategory.EXCELLENT: 0.4,
    ScoreCategory.SAME_COUNTRY: 0.6,
    ScoreCategory.SAME_CONTINENT: 0.8,
    ScoreCategory.MISS: 1.0,
}

_EMOJIS = {
    ScoreCategory.PERFECT: "🟢",
    ScoreCategory.EXCELLENT: "🔵",
    ScoreCategory.SAME_COUNTRY: "🟠",
    ScoreCategory.SAME_CONTINENT: "🟡",
    ScoreCategory.MISS: "🔴",
}

_PERCENTAGES = {
    ScoreCategory.PERFECT: "100%",
    ScoreCategory.EXCELLENT: "80%",
    ScoreCategory.SAME_COUNTRY: "60%",
    ScoreCategory.SAME_CONTINENT: "40%",
    ScoreCategory.MISS: "20%",
}
