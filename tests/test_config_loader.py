from __future__ import annotations

import textwrap
from datetime import timedelta
from pathlib import Path

import pytest

from namemc.config import get_app_config, reload_app_config


def _write_config(tmp_path: Path, body: str) -> Path:
    config_file = tmp_path / "namemc.yaml"
    config_file.write_text(textwrap.dedent(body).strip(), encoding="utf-8")
    return config_file


def test_defaults_without_config_file() -> None:
    settings = reload_app_config()
    assert settings.http.base_url == "https://api.namemc.com"
    assert settings.http.timeout_seconds == 5.0
    assert settings.profiles.to_cache_settings().ttl == timedelta(minutes=30)
    assert settings.servers.max_size is None
    assert get_app_config() is settings


def test_config_file_only(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    config_file = _write_config(
        tmp_path,
        """
        version: 1
        http:
          base_url: https://mirror.example/api/
          timeout_seconds: 2.5
        profiles:
          ttl_seconds: 60
          max_size: 100
        servers:
          ttl_seconds: 120
          single_flight: true
        logging:
          level: debug
        """,
    )
    monkeypatch.setenv("NAMEMC_CONFIG_FILE", str(config_file))

    settings = reload_app_config()

    assert settings.http.base_url == "https://mirror.example/api"
    assert settings.http.timeout_seconds == 2.5
    profiles = settings.profiles.to_cache_settings()
    assert profiles.ttl == timedelta(seconds=60)
    assert profiles.max_size == 100
    assert settings.servers.single_flight is True
    assert settings.servers.to_cache_settings().max_size is None
    assert settings.logging.level == "DEBUG"


def test_env_overrides_take_precedence(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    config_file = _write_config(
        tmp_path,
        """
        profiles:
          ttl_seconds: 60
        servers:
          max_size: 10
        """,
    )
    monkeypatch.setenv("NAMEMC_CONFIG_FILE", str(config_file))
    monkeypatch.setenv("NAMEMC_API_URL", "http://localhost:9000")
    monkeypatch.setenv("NAMEMC_PROFILE_CACHE_TTL", "2")
    monkeypatch.setenv("NAMEMC_SERVER_CACHE_MAX_SIZE", "0")
    monkeypatch.setenv("NAMEMC_PROFILE_SINGLE_FLIGHT", "yes")
    monkeypatch.setenv("NAMEMC_LOG_ROOT", str(tmp_path / "logs"))

    settings = reload_app_config()

    assert settings.http.base_url == "http://localhost:9000"
    assert settings.profiles.ttl_seconds == 2.0
    assert settings.profiles.single_flight is True
    assert settings.servers.to_cache_settings().max_size is None
    assert settings.logging.log_dir == str(tmp_path / "logs")


def test_invalid_env_values_are_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NAMEMC_HTTP_TIMEOUT", "-1")
    monkeypatch.setenv("NAMEMC_SERVER_CACHE_TTL", "soon")

    settings = reload_app_config()

    assert settings.http.timeout_seconds == 5.0
    assert settings.servers.ttl_seconds == 1800.0


def test_invalid_yaml_raises(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    config_file = tmp_path / "namemc.yaml"
    config_file.write_text("profiles: [unclosed", encoding="utf-8")
    monkeypatch.setenv("NAMEMC_CONFIG_FILE", str(config_file))
    with pytest.raises(RuntimeError):
        reload_app_config()


def test_non_mapping_yaml_raises(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    config_file = _write_config(tmp_path, "- just\n- a list")
    monkeypatch.setenv("NAMEMC_CONFIG_FILE", str(config_file))
    with pytest.raises(RuntimeError):
        reload_app_config()
