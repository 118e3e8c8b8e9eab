"""Dependency injection for API routes."""

from functools import lru_cache

from ..services.analysis_service import AnalysisService, create_analysis_service


@lru_cache
def get_analysis_service() -> AnalysisService:
    """Get the analysis service instance."""
    return create_analysis_service()
