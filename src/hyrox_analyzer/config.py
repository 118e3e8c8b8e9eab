"""Configuration settings for the HYROX Analyzer."""

from pathlib import Path
from functools import lru_cache

from pydantic_settings import BaseSettings


# __file__ = src/hyrox_analyzer/config.py
# .parent.parent.parent = project root (where .env lives)
PROJECT_ROOT = Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    debug: bool = False
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173", "http://127.0.0.1:3000"]

    # OpenAI
    openai_api_key: str = ""

    # Model selection
    llm_model_fast: str = "gpt-4o-mini"  # For quick tasks
    llm_model_smart: str = "gpt-4o"  # For race analysis
    llm_temperature: float = 0.7
    llm_max_tokens: int = 2000

    # AI enrichment of the race report
    enrichment_enabled: bool = True
    enrichment_timeout_seconds: float = 8.0

    class Config:
        env_file = str(PROJECT_ROOT / ".env")
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
