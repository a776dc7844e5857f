"""
kullback - configuration.
Defaults for the CLI and session, overridable via KULLBACK_* environment variables or a .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    LOG_LEVEL: str = "WARNING"

    # Standard deviations above the mean before a period is flagged as a spike
    SPIKE_THRESHOLD: float = 1.5

    # Decoded bytes required before running the test at all
    MIN_INPUT_LENGTH: int = 4

    DEFAULT_ENCODING: str = "UTF8"
    TOP_CANDIDATES: int = 10

    model_config = SettingsConfigDict(
        env_prefix="KULLBACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
