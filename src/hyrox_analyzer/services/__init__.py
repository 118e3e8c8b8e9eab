"""Business logic services for the HYROX Analyzer."""

from .analysis_service import AnalysisService, create_analysis_service
from .base import BaseService
from .training_plan import PLAN_TEMPLATES, generate_training_plan
from .validation import (
    normalize_split_entries,
    validate_analysis_payload,
    validate_athlete_info,
    validate_splits,
)

__all__ = [
    "AnalysisService",
    "create_analysis_service",
    "BaseService",
    "PLAN_TEMPLATES",
    "generate_training_plan",
    "normalize_split_entries",
    "validate_analysis_payload",
    "validate_athlete_info",
    "validate_splits",
]
