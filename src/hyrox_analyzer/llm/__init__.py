"""LLM integration for the HYROX Analyzer."""

from .prompts import RACE_ANALYSIS_SYSTEM, RACE_ANALYSIS_USER
from .providers import LLMClient, ModelType, get_llm_client, reset_llm_client

__all__ = [
    "RACE_ANALYSIS_SYSTEM",
    "RACE_ANALYSIS_USER",
    "LLMClient",
    "ModelType",
    "get_llm_client",
    "reset_llm_client",
]
