import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # Schedule API Configuration
    nhl_api_base_url: str = Field(
        "https://statsapi.web.nhl.com/api/v1",
        description="Base URL of the league stats API (teams and schedule endpoints).",
    )
    request_timeout: float = Field(
        30.0, gt=0, description="Timeout in seconds for each outbound request."
    )
    user_agent: str = Field(
        "team-schedule-counter/0.1",
        description="User-Agent header sent with every request.",
    )

    # Season Limits
    max_games_in_season: int = Field(
        82,
        ge=1,
        description="Maximum regular-season games per team; upper default for game filters.",
    )

    # Logging Configuration
    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    )

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


def load_settings() -> AppSettings:
    """Loads and validates application settings."""
    try:
        settings = AppSettings()
        log_level_upper = settings.log_level.upper()
        # Validate log_level even if loaded from .env
        if log_level_upper not in VALID_LOG_LEVELS:
            logging.warning(
                f"Invalid LOG_LEVEL '{settings.log_level}' found in .env or default. Using INFO."
            )
            settings.log_level = "INFO"
        else:
            settings.log_level = log_level_upper
        return settings
    except Exception as e:
        logging.exception(f"Error loading application settings: {e}")
        raise SystemExit("Failed to load application settings. Exiting.")


settings: AppSettings = load_settings()
