from functools import lru_cache
from typing import Literal
import logging

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

# Explicitly load .env file to ensure environment variables are available
load_dotenv()

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    LOG_LEVEL: str = Field(default="INFO", description="Root log level")
    LOG_FORMAT: Literal["development", "json"] = Field(
        default="development",
        description="development (human readable) or json (structured, one object per line)"
    )
    SERVICE_NAME: str = Field(default="utm-projection", description="Service name stamped on JSON log records")

    REFERENCE_TOLERANCE_M: float = Field(
        default=0.01,
        description="Maximum planar deviation in metres between the series and PROJ before a comparison is flagged"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding='utf-8',
        extra="ignore"
    )

    @field_validator('LOG_FORMAT', mode='before')
    @classmethod
    def parse_log_format(cls, v):
        """Accept LOG_FORMAT=JSON / Development from the environment."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


def validate_settings(settings: Settings) -> None:
    """Validate settings values that pydantic types alone cannot express."""
    if not isinstance(getattr(logging, settings.LOG_LEVEL.upper(), None), int):
        raise ConfigurationError("LOG_LEVEL", f"unknown log level {settings.LOG_LEVEL!r}")

    if not settings.REFERENCE_TOLERANCE_M > 0:
        raise ConfigurationError(
            "REFERENCE_TOLERANCE_M", f"must be > 0, got {settings.REFERENCE_TOLERANCE_M}"
        )

    logger.debug(
        "Configuration summary",
        extra={
            "log_level": settings.LOG_LEVEL,
            "log_format": settings.LOG_FORMAT,
            "reference_tolerance_m": settings.REFERENCE_TOLERANCE_M,
        }
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return validated settings, cached for the process."""
    settings = Settings()
    validate_settings(settings)
    return settings
