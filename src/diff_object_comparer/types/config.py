"""Configuration for Diff Object Comparer."""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

ROOT_NAME_ENV_VAR = "DIFF_COMPARER_ROOT_NAME"
NULL_PLACEHOLDER_ENV_VAR = "DIFF_COMPARER_NULL_PLACEHOLDER"
LOG_LEVEL_ENV_VAR = "DIFF_COMPARER_LOG_LEVEL"


class ComparerConfig(BaseModel):
    """Settings of a ``DiffObjectComparer``.

    The defaults reproduce the standard report format: paths start at ``Root``
    and absent values are rendered as ``NULL``.

    Attributes:
        root_name: Path name given to the two root values.
        null_placeholder: Text shown for an absent value in null accordance messages.
        log_level: Level name used by ``setup_diff_object_comparer_logging``.
    """

    model_config = ConfigDict(frozen=True)

    root_name: str = Field(default="Root", min_length=1, description="Path name of the root values")
    null_placeholder: str = Field(default="NULL", min_length=1, description="Rendering of an absent value")
    log_level: str = Field(default="WARNING", description="Logging level name")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate the level is a standard logging level name."""
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level must be a logging level name (e.g. DEBUG, INFO), got '{value}'")
        return level

    @classmethod
    def from_env(cls) -> ComparerConfig:
        """Read configuration from environment variables, falling back to defaults."""
        overrides = {
            field_name: os.environ[env_var]
            for field_name, env_var in (
                ("root_name", ROOT_NAME_ENV_VAR),
                ("null_placeholder", NULL_PLACEHOLDER_ENV_VAR),
                ("log_level", LOG_LEVEL_ENV_VAR),
            )
            if env_var in os.environ
        }
        return cls(**overrides)


__all__ = [
    "LOG_LEVEL_ENV_VAR",
    "NULL_PLACEHOLDER_ENV_VAR",
    "ROOT_NAME_ENV_VAR",
    "ComparerConfig",
]
