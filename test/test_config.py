from __future__ import annotations

from pathlib import Path

import pytest

from realm_publish.core import config
from realm_publish.core.config import Settings, load_property_overrides
from realm_publish.core.exceptions import PublishConfigurationError


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("REALM_PUBLISH_GITHUB_PACKAGES_URL", raising=False)
    settings = Settings()
    assert settings.github_packages_url == "https://maven.pkg.github.com/Black-Bricks/realm-kotlin"
    assert settings.signing_key_id == "1F48C9B0"


def test_settings_read_prefixed_environment(monkeypatch) -> None:
    monkeypatch.setenv("REALM_PUBLISH_LOG_LEVEL", "DEBUG")
    assert Settings().log_level == "DEBUG"


def test_load_property_overrides(tmp_path: Path) -> None:
    secrets = tmp_path / "secrets.toml"
    secrets.write_text(
        '[properties]\nsignPasswordKotlin = "pw"\nsignBuild = true\n\n[other]\nkey = "ignored"\n',
        encoding="utf-8",
    )
    assert load_property_overrides(secrets) == {"signPasswordKotlin": "pw", "signBuild": "true"}


def test_load_property_overrides_missing_file(tmp_path: Path) -> None:
    assert load_property_overrides(tmp_path / "absent.toml") == {}


def test_settings_overrides_from_secrets(tmp_path: Path) -> None:
    secrets = tmp_path / "secrets.toml"
    secrets.write_text('[realm_publish]\nlog_level = "WARNING"\nunknown = 1\n', encoding="utf-8")
    overrides = config._load_settings_overrides(secrets)
    assert overrides == {"log_level": "WARNING"}


def test_get_settings_reads_overrides_from_configured_secrets_path(tmp_path: Path, monkeypatch) -> None:
    custom = tmp_path / "custom.toml"
    custom.write_text('[realm_publish]\nlog_level = "WARNING"\n', encoding="utf-8")
    monkeypatch.setenv("REALM_PUBLISH_SECRETS_PATH", str(custom))
    monkeypatch.delenv("REALM_PUBLISH_LOG_LEVEL", raising=False)
    config.get_settings.cache_clear()
    try:
        settings = config.get_settings()
        assert settings.secrets_path == custom
        assert settings.log_level == "WARNING"
    finally:
        config.get_settings.cache_clear()


def test_malformed_secrets_file_raises_configuration_error(tmp_path: Path) -> None:
    secrets = tmp_path / "secrets.toml"
    secrets.write_text("[properties\nbroken", encoding="utf-8")
    with pytest.raises(PublishConfigurationError):
        load_property_overrides(secrets)


def test_invalid_settings_raise_configuration_error(monkeypatch) -> None:
    monkeypatch.setenv("REALM_PUBLISH_LOG_LEVEL", "LOUD")
    config.get_settings.cache_clear()
    try:
        with pytest.raises(PublishConfigurationError):
            config.get_settings()
    finally:
        config.get_settings.cache_clear()
