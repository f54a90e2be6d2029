"""Application configuration primitives."""

from __future__ import annotations

import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import GITHUB_PACKAGES_URL, SIGNING_KEY_ID
from .exceptions import PublishConfigurationError

DEFAULT_SECRETS_PATH = Path(".secrets/secrets.toml")


class Settings(BaseSettings):
    """Central configuration for the publish configurator."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    secrets_path: Path = DEFAULT_SECRETS_PATH
    github_packages_url: str = GITHUB_PACKAGES_URL
    signing_key_id: str = SIGNING_KEY_ID

    model_config = SettingsConfigDict(env_prefix="REALM_PUBLISH_", env_file=(), extra="ignore")

    @field_validator("github_packages_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached settings instance.

    The secrets file is located from the environment first, so
    ``REALM_PUBLISH_SECRETS_PATH`` also selects where the overrides are read.
    """
    try:
        secrets_path = Settings().secrets_path
        return Settings(**_load_settings_overrides(secrets_path))
    except ValidationError as exc:
        raise PublishConfigurationError(f"Invalid settings: {exc}") from exc


def load_property_overrides(secrets_path: Path = DEFAULT_SECRETS_PATH) -> dict[str, str]:
    """Return project properties declared in the ``[properties]`` table of the secrets file."""
    if not secrets_path.exists():
        return {}
    section = _read_toml(secrets_path).get("properties")
    if not isinstance(section, dict):
        return {}
    return {str(key): stringify_property(value) for key, value in section.items() if value is not None}


def _load_settings_overrides(secrets_path: Path = DEFAULT_SECRETS_PATH) -> dict[str, Any]:
    """Load configuration overrides from the secrets TOML file."""
    if not secrets_path.exists():
        return {}
    general_cfg = _read_toml(secrets_path).get("realm_publish") or {}
    return {
        key: value
        for key, value in general_cfg.items()
        if key in Settings.model_fields and value is not None
    }


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise PublishConfigurationError(f"Invalid TOML in {path}: {exc}") from exc


def stringify_property(value: Any) -> str:
    """Render a TOML value the way it would be written as a -P property."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
