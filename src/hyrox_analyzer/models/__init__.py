"""Data models for the HYROX Analyzer."""

from .base import CamelModel, to_camel
from .race import (
    AthleteInfo,
    Gender,
    PerformanceLevel,
    RUN_KEYS,
    SPLIT_KEYS,
    STATION_DISPLAY_NAMES,
    STATION_KEYS,
    Splits,
    station_display_name,
)
from .analysis import (
    AnalysisResult,
    EnrichmentOverrides,
    PacingAnalysis,
    PacingPoint,
    PacingTrend,
    QuickAnalysisResult,
    Recommendation,
    StationStrength,
    StationWeakness,
)
from .training import (
    PlanLevel,
    TrainingPlan,
    TrainingPlanRequest,
)

__all__ = [
    "CamelModel",
    "to_camel",
    "AthleteInfo",
    "Gender",
    "PerformanceLevel",
    "RUN_KEYS",
    "SPLIT_KEYS",
    "STATION_DISPLAY_NAMES",
    "STATION_KEYS",
    "Splits",
    "station_display_name",
    "AnalysisResult",
    "EnrichmentOverrides",
    "PacingAnalysis",
    "PacingPoint",
    "PacingTrend",
    "QuickAnalysisResult",
    "Recommendation",
    "StationStrength",
    "StationWeakness",
    "PlanLevel",
    "TrainingPlan",
    "TrainingPlanRequest",
]
