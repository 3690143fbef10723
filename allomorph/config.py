# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import logging
from typing import Any, ClassVar

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ("AllomorphSettings", "settings")


class AllomorphSettings(BaseSettings, frozen=True):
    """Registry settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="ALLOMORPH_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    STRICT_METHODS: bool = Field(
        default=True,
        description="Resolve role methods when the role is declared and "
        "fail on missing ones, instead of at invocation time",
    )
    STRICT_LABELS: bool = Field(
        default=False,
        description="Reject unknown declaration labels instead of ignoring "
        "them",
    )
    MAX_ANCESTRY_DEPTH: int = Field(
        default=256,
        ge=1,
        description="Deepest parent chain a capability query will follow",
    )
    LOG_LEVEL: str = "WARNING"

    # Class variable to store the singleton instance
    _instance: ClassVar[Any] = None

    @field_validator("LOG_LEVEL", mode="before")
    def _validate_log_level(cls, value: str | int) -> str:
        if isinstance(value, int):
            return logging.getLevelName(value)
        level = str(value).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level


# Create a singleton instance
settings = AllomorphSettings()
# Store the instance in the class variable for singleton pattern
AllomorphSettings._instance = settings
