"""
Natural Language Summary Generator

Templated text used whenever the AI summary is unavailable.
"""

from typing import Sequence, Union

from ..models.analysis import StationWeakness
from ..models.race import PerformanceLevel


DEFAULT_PREDICTED_IMPROVEMENT = "5-10% improvement possible with consistent training"

LEVEL_DESCRIPTIONS = {
    PerformanceLevel.ELITE: "an elite-level athlete",
    PerformanceLevel.INTERMEDIATE: "a solid intermediate performer",
    PerformanceLevel.BEGINNER: "a beginner with good potential",
}


def explain_race(
    level: Union[PerformanceLevel, str],
    weaknesses: Sequence[StationWeakness],
    pacing_summary: str,
) -> str:
    """
    One-paragraph race summary from level, top weakness and pacing.

    Example:
        "You are a solid intermediate performer. Focus on Sled Push as
        primary weakness. Moderate fade of 0:45. ..."
    """
    level_text = LEVEL_DESCRIPTIONS[PerformanceLevel(level)]

    if weaknesses:
        weakness_text = f"Focus on {weaknesses[0].display_name} as primary weakness."
    else:
        weakness_text = "Good overall balance across stations."

    return f"You are {level_text}. {weakness_text} {pacing_summary}"
