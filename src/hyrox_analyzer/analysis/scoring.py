"""Overall score from level and pacing consistency."""

from typing import Union

from ..models.race import PerformanceLevel


# Level dominates: 20 points between tiers, more than the bonus range (-5..+10)
LEVEL_BASE_SCORES = {
    PerformanceLevel.ELITE: 90,
    PerformanceLevel.INTERMEDIATE: 70,
    PerformanceLevel.BEGINNER: 50,
}


def calculate_overall_score(level: Union[PerformanceLevel, str], consistency_bonus: int) -> int:
    """Base score for the level plus the consistency bonus, clamped to 0-100."""
    base = LEVEL_BASE_SCORES[PerformanceLevel(level)]
    return int(round(min(100, max(0, base + consistency_bonus))))
