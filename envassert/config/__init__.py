"""Configuration package for validator options and runtime settings."""

from .settings import RuntimeSettings, SettingsLoadError, ValidatorOptions, config_load_settings

__all__ = ["RuntimeSettings", "SettingsLoadError", "ValidatorOptions", "config_load_settings"]
