"""Settings and logging setup."""

import logging
import sys
from functools import lru_cache
from pathlib import Path
from typing import Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from structlog.typing import Processor

Environment = Literal["development", "production", "test"]

DEFAULT_DATABASE_PATH = Path(__file__).parent.parent.resolve() / "vocabpath.db"


class Settings(BaseSettings):
    """Values come from the environment, then `.env`, then the defaults below."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    DATABASE_URL: str = f"sqlite:///{DEFAULT_DATABASE_PATH}"

    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "vocabpath API"
    VERSION: str = "0.1.0"

    ENVIRONMENT: Environment = "development"
    LOG_LEVEL: str | None = None

    CORS_ORIGINS: list[str] = ["*"]

    # Months of access bought by one payment
    PAYMENT_PERIOD_MONTHS: int = 1

    @field_validator("PAYMENT_PERIOD_MONTHS", mode="after")
    @classmethod
    def validate_payment_period(cls, value: int) -> int:
        if value < 1:
            msg = "PAYMENT_PERIOD_MONTHS must be at least 1"
            raise ValueError(msg)
        return value

    @field_validator("LOG_LEVEL", mode="after")
    @classmethod
    def validate_log_level(cls, value: str | None) -> str | None:
        if value is None:
            return None
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            msg = f"Unknown LOG_LEVEL {value!r}"
            raise ValueError(msg)
        return level


def configure_logging(environment: Environment = "development", level: str | None = None) -> None:
    """
    Route structlog through stdlib logging.

    Production writes one JSON object per line; other environments get the
    colored console renderer. Without an explicit level, development logs
    at DEBUG and everything else at INFO.
    """
    if level is None:
        level = "DEBUG" if environment == "development" else "INFO"
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if environment == "production"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
