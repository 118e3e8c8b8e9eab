"""
Run pacing analysis.

Treats the 8 run splits as an ordered series and reports two reference
frames side by side:
- vs_first_run: cumulative drift against run 1
- trend: local signal against the immediately preceding run

Also derives the consistency bonus used by the score, based on the
spread of run times rather than their absolute speed.
"""

import math
from dataclasses import dataclass
from typing import List, Sequence

from ..models.analysis import PacingAnalysis, PacingPoint, PacingTrend
from ..utils.time_format import format_time


RUN_COUNT = 8

# A run more than this many seconds slower than the previous one is "slowing"
SLOWING_THRESHOLD_SEC = 15

SIGNIFICANT_FADE_SEC = 60
MODERATE_FADE_SEC = 30
CONSISTENT_SPREAD_SEC = 30

# (exclusive std-dev ceiling, bonus), checked in order
CONSISTENCY_BONUS_STEPS = (
    (15.0, 10),
    (30.0, 5),
    (45.0, 0),
)
INCONSISTENT_PENALTY = -5


@dataclass(frozen=True)
class PacingReport:
    """Pacing analysis plus the aggregate numbers behind it."""
    analysis: PacingAnalysis
    degradation: int      # last run - first run
    max_variation: int    # slowest run - fastest run
    average_run: float
    std_dev: float
    consistency_bonus: int


def classify_trend(time: int, previous: int) -> PacingTrend:
    """Trend of a run relative to the run before it."""
    if time < previous:
        return PacingTrend.FAST
    if time > previous + SLOWING_THRESHOLD_SEC:
        return PacingTrend.SLOWING
    return PacingTrend.STEADY


def population_std_dev(values: Sequence[float]) -> float:
    """Population standard deviation (divides by N)."""
    if not values:
        return 0.0
    mean = sum(values) / len(values)
    variance = sum((v - mean) ** 2 for v in values) / len(values)
    return math.sqrt(variance)


def consistency_bonus(run_times: Sequence[int]) -> int:
    """Score adjustment rewarding even pacing: +10, +5, 0 or -5."""
    std_dev = population_std_dev(run_times)
    for ceiling, bonus in CONSISTENCY_BONUS_STEPS:
        if std_dev < ceiling:
            return bonus
    return INCONSISTENT_PENALTY


def summarize_pacing(run_times: Sequence[int]) -> str:
    """Pick the pacing narrative. First matching rule wins."""
    degradation = run_times[-1] - run_times[0]
    max_variation = max(run_times) - min(run_times)

    if degradation > SIGNIFICANT_FADE_SEC:
        return (
            f"Significant fade - {format_time(degradation)} slower on final run vs first. "
            "Focus on endurance training."
        )
    if degradation > MODERATE_FADE_SEC:
        return (
            f"Moderate fade of {format_time(degradation)}. "
            "Good pacing but could improve stamina for late race."
        )
    if max_variation < CONSISTENT_SPREAD_SEC:
        return "Excellent pacing consistency! Very even splits throughout the race."
    return "Generally steady pacing with some variation. Solid race execution."


def analyze_pacing(run_times: Sequence[int]) -> PacingReport:
    """
    Analyze the 8 run splits.

    Args:
        run_times: Run times in seconds, run 1 first

    Returns:
        PacingReport with per-run points, summary and consistency bonus

    Raises:
        ValueError: If there are not exactly 8 runs
    """
    if len(run_times) != RUN_COUNT:
        raise ValueError(f"Expected {RUN_COUNT} run times, got {len(run_times)}")

    first = run_times[0]
    points: List[PacingPoint] = []
    for index, time in enumerate(run_times):
        if index == 0:
            trend = PacingTrend.STEADY
        else:
            trend = classify_trend(time, run_times[index - 1])

        points.append(PacingPoint(
            run_number=index + 1,
            time=time,
            formatted_time=format_time(time),
            vs_first_run=time - first,
            trend=trend,
        ))

    return PacingReport(
        analysis=PacingAnalysis(runs=points, summary=summarize_pacing(run_times)),
        degradation=run_times[-1] - first,
        max_variation=max(run_times) - min(run_times),
        average_run=sum(run_times) / len(run_times),
        std_dev=population_std_dev(run_times),
        consistency_bonus=consistency_bonus(run_times),
    )
