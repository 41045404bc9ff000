"""Configuration for the cash desk payments service."""

from datetime import timedelta
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Service configuration.

    All settings can be overridden via environment variables prefixed
    with ``CASHDESK_`` (e.g. ``CASHDESK_DATABASE_URL``) or a ``.env`` file.
    """

    API_TITLE: str = Field(default="Cash Desk Payments")
    SERVICE_HOST: str = Field(default="127.0.0.1")
    SERVICE_PORT: int = Field(default=8000, ge=1, le=65535)
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )

    # "memory://" selects the in-memory store instead of a database.
    DATABASE_URL: str = Field(default="sqlite:///cash.db")
    SQL_ECHO: bool = Field(default=False)

    # How far a submitted payment date may lie in the future.
    PAYMENT_DATE_TOLERANCE_SECONDS: int = Field(default=60, ge=0)

    model_config = SettingsConfigDict(
        env_prefix="CASHDESK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def payment_date_tolerance(self) -> timedelta:
        return timedelta(seconds=self.PAYMENT_DATE_TOLERANCE_SECONDS)

    @property
    def uses_in_memory_store(self) -> bool:
        return self.DATABASE_URL == "memory://"
