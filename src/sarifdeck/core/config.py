# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SARIFDECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"  # "json" or "text"

    # Input limits
    max_payload_bytes: int = 52_428_800

    # Output
    include_raw_results: bool = True

    # CI mode
    fail_on: Annotated[list[str], NoDecode] = []

    @field_validator("fail_on", mode="before")
    @classmethod
    def _parse_fail_on(cls, v: object) -> list[str]:
        if isinstance(v, str):
            return [s.strip().lower() for s in v.split(",") if s.strip()]
        return [str(s).lower() for s in v] if isinstance(v, list) else []


def get_settings() -> Settings:
    return Settings()
