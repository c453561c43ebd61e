"""Pydantic-based runtime settings for the validator and normalizer.

Loads from environment variables prefixed ``ADCOM_`` (with optional .env file).
Invalid values fail fast on first access.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

SeverityName = Literal["warning", "error"]


class RuntimeSettings(BaseSettings):
    """All configuration for validation runs, validated at startup."""

    model_config = {
        "env_prefix": "ADCOM_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    # --- Walk limits ---
    max_depth: int = Field(
        default=64,
        ge=1,
        # Two stack frames per level must fit within the default recursion limit.
        le=256,
        description="Maximum message nesting depth the validator and normalizer descend into",
    )

    # --- Forward compatibility ---
    unknown_enum_severity: SeverityName = Field(
        default="warning",
        description="Severity for non-zero enum codes missing from the registry",
    )
    unknown_field_severity: SeverityName = Field(
        default="warning",
        description="Severity for named fields the schema does not declare",
    )

    # --- Logging ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Level for the 'adcom' logger"
    )
    log_warnings: bool = Field(
        default=True,
        description="Emit one log record per WARNING-level validation issue",
    )

    @field_validator("unknown_enum_severity", "unknown_field_severity", "log_level", mode="before")
    @classmethod
    def _normalize_case(cls, v: object, info) -> object:
        if not isinstance(v, str):
            return v
        if info.field_name == "log_level":
            return v.strip().upper()
        return v.strip().lower()


@lru_cache(maxsize=1)
def get_settings() -> RuntimeSettings:
    """Return the singleton RuntimeSettings (cached after first call)."""
    return RuntimeSettings()
