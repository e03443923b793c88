"""Validator options and typed runtime settings with dotenv support."""

from __future__ import annotations

import logging
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from envassert.lookup import lookup_from_environ


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class ValidatorOptions(BaseModel):
    """Options accepted by the validation engine.

    Attributes:
        lookup: Function resolving one raw value by key; `""` means absent.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    lookup: Callable[[str], str] = Field(default=lookup_from_environ)


class RuntimeSettings(BaseSettings):
    """Settings for the `envassert` command line tool.

    Environment variable names are field names in uppercase with the
    `ENVASSERT_` prefix. Example: `dotenv_path` reads from `ENVASSERT_DOTENV_PATH`.

    Attributes:
        log_level: Logging level name for the command line tool.
        dotenv_path: Optional dotenv file consulted after the process environment.
        dotenv_encoding: Encoding of the dotenv file.
    """

    model_config = SettingsConfigDict(
        env_prefix="ENVASSERT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    log_level: str = Field(default="WARNING")
    dotenv_path: str | None = Field(default=None)
    dotenv_encoding: str = Field(default="utf-8", min_length=1)

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return normalized_value

    @field_validator("dotenv_path")
    @classmethod
    def _validate_dotenv_path(cls, value: str | None) -> str | None:
        if value is None:
            return None
        stripped_value = value.strip()
        return stripped_value or None


def config_load_settings() -> RuntimeSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        RuntimeSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return RuntimeSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"envassert runtime configuration validation failed. Update ENVASSERT_* variables. Details: {error}"
        ) from error
