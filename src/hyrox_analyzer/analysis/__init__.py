"""Deterministic race analysis: level, station gaps, pacing and score."""

from .level import determine_level
from .pacing import (
    PacingReport,
    analyze_pacing,
    classify_trend,
    consistency_bonus,
    population_std_dev,
    summarize_pacing,
)
from .scoring import LEVEL_BASE_SCORES, calculate_overall_score
from .stations import (
    StationObservation,
    StationRanking,
    observe_stations,
    rank_stations,
)

__all__ = [
    "determine_level",
    "PacingReport",
    "analyze_pacing",
    "classify_trend",
    "consistency_bonus",
    "population_std_dev",
    "summarize_pacing",
    "LEVEL_BASE_SCORES",
    "calculate_overall_score",
    "StationObservation",
    "StationRanking",
    "observe_stations",
    "rank_stations",
]
