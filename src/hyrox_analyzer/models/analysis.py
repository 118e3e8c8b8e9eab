"""Race analysis result models."""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import CamelModel
from .race import PerformanceLevel


class PacingTrend(str, Enum):
    """Run-to-run trend, relative to the previous run."""
    FAST = "fast"
    STEADY = "steady"
    SLOWING = "slowing"


class StationWeakness(CamelModel):
    """A station slower than its benchmark midpoint."""
    station: str = Field(..., description="Station key, e.g. sledPush")
    display_name: str
    time: int = Field(..., description="Athlete's station time in seconds")
    formatted_time: str
    gap: float = Field(..., description="Seconds slower than the benchmark midpoint")
    gap_percent: int = Field(..., description="Gap as a percentage of the athlete's own time")


class StationStrength(CamelModel):
    """A station at or faster than its benchmark midpoint."""
    station: str
    display_name: str
    time: int
    formatted_time: str
    advantage: float = Field(..., description="Seconds faster than the benchmark midpoint")


class PacingPoint(CamelModel):
    """One run of the pacing series."""
    run_number: int = Field(..., ge=1, le=8)
    time: int
    formatted_time: str
    vs_first_run: int = Field(..., description="Seconds versus run 1 (cumulative drift)")
    trend: PacingTrend = Field(..., description="Trend versus the previous run (local signal)")


class PacingAnalysis(CamelModel):
    """Pacing of the 8 runs."""
    runs: List[PacingPoint] = Field(..., min_length=8, max_length=8)
    summary: str


class Recommendation(CamelModel):
    """A prioritized training recommendation."""
    priority: int = Field(..., ge=1, le=3)
    area: str
    suggestion: str
    expected_improvement: str


class AnalysisResult(CamelModel):
    """Complete race analysis."""
    level: PerformanceLevel
    overall_score: int = Field(..., ge=0, le=100)
    total_time: int
    formatted_total_time: str
    weaknesses: List[StationWeakness] = Field(default_factory=list, max_length=3)
    strengths: List[StationStrength] = Field(default_factory=list, max_length=2)
    pacing_analysis: PacingAnalysis
    recommendations: List[Recommendation] = Field(..., min_length=3, max_length=3)
    ai_summary: str
    predicted_improvement: str

    model_config = {
        "json_schema_extra": {
            "example": {
                "level": "elite",
                "overallScore": 100,
                "totalTime": 3560,
                "formattedTotalTime": "59:20",
                "weaknesses": [],
                "strengths": [],
                "pacingAnalysis": {
                    "runs": [],
                    "summary": "Excellent pacing consistency! Very even splits throughout the race.",
                },
                "recommendations": [],
                "aiSummary": "You are an elite-level athlete. Good overall balance across stations.",
                "predictedImprovement": "5-10% improvement possible with consistent training",
            }
        }
    }


# ============================================================================
# Quick analysis (numbers only)
# ============================================================================

class StationComparison(CamelModel):
    """A station time next to its benchmark midpoint."""
    station: str
    display_name: str
    time: int
    formatted_time: str
    benchmark: float
    gap: float


class QuickRun(CamelModel):
    run_number: int
    time: int
    formatted_time: str
    vs_first_run: int


class RunSummary(CamelModel):
    runs: List[QuickRun]
    first_run: int
    last_run: int
    degradation: int
    average: float


class QuickAnalysisResult(CamelModel):
    """Deterministic snapshot without recommendations or AI text."""
    total_time: int
    formatted_total_time: str
    level: PerformanceLevel
    stations: List[StationComparison]
    run_analysis: RunSummary


# ============================================================================
# Enrichment
# ============================================================================

class EnrichmentOverrides(CamelModel):
    """
    Fields an enrichment step may replace on an AnalysisResult.

    Anything left as None keeps the deterministic value.
    """
    recommendations: Optional[List[Recommendation]] = Field(
        default=None, min_length=3, max_length=3
    )
    ai_summary: Optional[str] = Field(default=None, min_length=1)
    predicted_improvement: Optional[str] = Field(default=None, min_length=1)

    @property
    def is_empty(self) -> bool:
        return (
            self.recommendations is None
            and self.ai_summary is None
            and self.predicted_improvement is None
        )
