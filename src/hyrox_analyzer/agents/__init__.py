"""LangGraph agents for the HYROX Analyzer."""

from .enrichment_agent import (
    EnrichmentContext,
    RaceEnricher,
    RaceEnrichmentAgent,
    build_user_prompt,
    overrides_from_response,
)

__all__ = [
    "EnrichmentContext",
    "RaceEnricher",
    "RaceEnrichmentAgent",
    "build_user_prompt",
    "overrides_from_response",
]
