"""
Application configuration using Pydantic Settings.
All environment-specific values are centralized here.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ── App ──────────────────────────────────────────────
    app_name: str = "Proposal Pricing Engine"
    debug: bool = True

    # ── MongoDB (parameter store) ────────────────────────
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_database: str = "proposal_pricing"
    parameters_collection: str = "pricing_parameters"

    # ── Presentation ─────────────────────────────────────
    currency_suffix: str = "Kz"
    default_location: str = "Luanda"

    # ── Parameter validation ─────────────────────────────
    # Inclusive bounds for overhead / margin fractions
    min_fraction: float = 0.0
    max_overhead_percentage: float = 1.0
    max_margin_percentage: float = 1.0

    # ── Server ───────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 8000

    # ── Logging ──────────────────────────────────────────
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings (singleton)."""
    return Settings()
