from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

LOG_LEVEL_ENV_VAR = "BRIEFCASE_LOG_LEVEL"
DEFAULT_ROOT_ENV_VARS = ("BRIEFCASE_DIR", "TEMP", "TMPDIR")
DEFAULT_DIRNAME_ENV_VAR = "BRIEFCASE_DIRNAME"
DEFAULT_DIRNAME = "briefcase"


def _default_root() -> Path:
    return Path(tempfile.gettempdir())


class BriefcaseConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    root_env_vars: tuple[str, ...] = DEFAULT_ROOT_ENV_VARS
    dirname_env_var: str = DEFAULT_DIRNAME_ENV_VAR
    default_root: Path = Field(default_factory=_default_root)
    default_dirname: str = DEFAULT_DIRNAME
    log_level: str = "WARNING"

    @field_validator("root_env_vars")
    @classmethod
    def validate_root_env_vars(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        normalized = tuple(name.strip() for name in value)
        if not normalized or any(not name for name in normalized):
            raise ValueError("root_env_vars must be a non-empty list of variable names")
        return normalized

    @field_validator("dirname_env_var", "default_dirname")
    @classmethod
    def validate_non_empty(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("value must not be empty")
        return normalized

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if not isinstance(logging.getLevelName(normalized), int):
            raise ValueError(f"Unknown log level: {value}")
        return normalized


def load_config(environ: Mapping[str, str] | None = None) -> BriefcaseConfig:
    env = os.environ if environ is None else environ
    payload: dict[str, str] = {}
    log_level = env.get(LOG_LEVEL_ENV_VAR, "")
    if log_level.strip():
        payload["log_level"] = log_level
    try:
        return BriefcaseConfig.model_validate(payload)
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc
