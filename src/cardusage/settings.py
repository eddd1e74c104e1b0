from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cardusage.card_api import DEFAULT_BASE_URL, SUMMARY_ENDPOINT, USAGES_ENDPOINT

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CARDUSAGE_",
        env_file=".env",
        extra="ignore",
    )

    base_url: str = DEFAULT_BASE_URL
    summary_path: str = SUMMARY_ENDPOINT
    usages_path: str = USAGES_ENDPOINT
    log_level: LogLevel = "INFO"

    # How long the CLI pumps the UI loop before rendering; not an HTTP timeout.
    fetch_wait_seconds: float = Field(default=30.0, gt=0)

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
    return Settings()
