"""
Training Recommendation Engine

Turns the ranked station weaknesses into exactly three prioritized
recommendations. Expected improvements come from a fixed catalog of
coach-authored ranges, not from a calculation.
"""

from dataclasses import dataclass
from typing import List, Sequence

from ..models.analysis import Recommendation, StationWeakness


RECOMMENDATION_COUNT = 3


@dataclass(frozen=True)
class CatalogEntry:
    """A generic recommendation template."""
    area: str
    suggestion: str
    expected_improvement: str


TECHNIQUE = CatalogEntry(
    area="Technique",
    suggestion="Focus on efficient movement patterns and transitions",
    expected_improvement="2-3 minutes",
)

STRENGTH = CatalogEntry(
    area="Strength",
    suggestion="Build functional strength for key stations",
    expected_improvement="3-5 minutes",
)

ENDURANCE = CatalogEntry(
    area="Endurance",
    suggestion="Improve cardiovascular capacity for consistent pacing",
    expected_improvement="2-4 minutes",
)

# Used as-is when no station stands out
GENERIC_CATALOG = (TECHNIQUE, STRENGTH, ENDURANCE)

# Paired with a station-specific recommendation
FILLER_CATALOG = (TECHNIQUE, ENDURANCE)

STATION_FOCUS_IMPROVEMENT = "2-3 minutes"


def _station_focus(weakness: StationWeakness) -> CatalogEntry:
    return CatalogEntry(
        area=weakness.display_name,
        suggestion=(
            f"Prioritize {weakness.display_name} training with dedicated sessions 2x per week"
        ),
        expected_improvement=STATION_FOCUS_IMPROVEMENT,
    )


def generate_recommendations(weaknesses: Sequence[StationWeakness]) -> List[Recommendation]:
    """
    Build the three prioritized training recommendations.

    With at least one weakness, priority 1 targets the worst station and
    is followed by technique and endurance work. Without weaknesses the
    generic technique / strength / endurance catalog is returned.

    Args:
        weaknesses: Station weaknesses, worst first

    Returns:
        Exactly three recommendations with priorities 1-3
    """
    if weaknesses:
        entries = (_station_focus(weaknesses[0]),) + FILLER_CATALOG
    else:
        entries = GENERIC_CATALOG

    return [
        Recommendation(
            priority=priority,
            area=entry.area,
            suggestion=entry.suggestion,
            expected_improvement=entry.expected_improvement,
        )
        for priority, entry in enumerate(entries[:RECOMMENDATION_COUNT], start=1)
    ]
