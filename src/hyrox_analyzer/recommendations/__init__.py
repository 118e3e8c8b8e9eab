"""Training recommendations and fallback narrative text."""

from .explain import DEFAULT_PREDICTED_IMPROVEMENT, explain_race
from .training import (
    ENDURANCE,
    GENERIC_CATALOG,
    RECOMMENDATION_COUNT,
    STRENGTH,
    TECHNIQUE,
    generate_recommendations,
)

__all__ = [
    "DEFAULT_PREDICTED_IMPROVEMENT",
    "explain_race",
    "ENDURANCE",
    "GENERIC_CATALOG",
    "RECOMMENDATION_COUNT",
    "STRENGTH",
    "TECHNIQUE",
    "generate_recommendations",
]
