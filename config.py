# config.py
from __future__ import annotations
import sys

from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """UI defaults and logging. The core library never reads these."""

    model_config = SettingsConfigDict(env_prefix="PWGEN_", env_file=".env", extra="ignore")

    log_level: str = "INFO"
    page_title: str = "KeySmith"
    default_length: int = 16
    min_length: int = 4
    max_length: int = 128


settings = Settings()

logger.remove()
logger.add(
    sys.stderr,
    level=settings.log_level.upper(),
    backtrace=True,
    diagnose=False,
)
