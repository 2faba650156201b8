# phrasekit/shared/config.py
from enum import Enum

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic; every field can be overridden
    with a PHRASEKIT_-prefixed environment variable.
    """

    # --- Application Meta ---
    APP_NAME: str = "phrasekit"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")
        return level

    # --- Term Selection ---
    # Resolve concepts without a declared term triple from their own name
    # (naive English plural) instead of raising MissingMetadataError.
    NAIVE_PLURAL_FALLBACK: bool = False

    model_config = SettingsConfigDict(
        env_prefix="PHRASEKIT_",
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
