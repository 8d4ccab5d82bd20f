from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple

import yaml

from .models import AppSettings


logger = logging.getLogger(__name__)
_CONFIG_CACHE: AppSettings | None = None


def get_app_config() -> AppSettings:
    """Return the cached application settings, loading them if necessary."""

    global _CONFIG_CACHE
    if _CONFIG_CACHE is None:
        _CONFIG_CACHE = _load_settings()
    return _CONFIG_CACHE


def reload_app_config() -> AppSettings:
    """Reload the configuration from disk, bypassing the cache."""

    global _CONFIG_CACHE
    _CONFIG_CACHE = _load_settings()
    return _CONFIG_CACHE


def _load_settings() -> AppSettings:
    raw = _load_raw_config()
    merged = _apply_env_overrides(raw)
    return AppSettings.model_validate(merged)


def _load_raw_config() -> Dict[str, Any]:
    path = Path(os.getenv("NAMEMC_CONFIG_FILE", "config/namemc.yaml"))
    if not path.exists():
        return {}
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"Unable to read config file at {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise RuntimeError(f"Top-level structure in {path} must be a mapping.")
    return data


def _apply_env_overrides(source: Dict[str, Any]) -> Dict[str, Any]:
    result: Dict[str, Any] = copy.deepcopy(source)
    for env_name, overrides in _ENV_MAPPING.items():
        raw_value = os.getenv(env_name)
        if raw_value is None or raw_value == "":
            continue
        for path, transformer in overrides:
            try:
                value = transformer(raw_value) if transformer else raw_value
            except Exception as exc:
                logger.warning("Ignoring invalid value for %s: %s", env_name, exc)
                continue
            _assign_path(result, path, value)
    return result


def _assign_path(target: Dict[str, Any], path: Tuple[str, ...], value: Any) -> None:
    current: Dict[str, Any] = target
    for key in path[:-1]:
        if key not in current or not isinstance(current[key], dict):
            current[key] = {}
        current = current[key]
    current[path[-1]] = value


def _to_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on", "y"}


def _to_int(value: str) -> int:
    return int(value.strip())


def _to_positive_float(value: str) -> float:
    candidate = float(value.strip())
    if candidate <= 0:
        raise ValueError(f"expected a positive number, got {candidate}")
    return candidate


Transformer = Callable[[str], Any] | None
_ENV_MAPPING: Dict[str, List[Tuple[Tuple[str, ...], Transformer]]] = {}


def _register(env: str, path: Tuple[str, ...], transformer: Transformer = None) -> None:
    _ENV_MAPPING.setdefault(env, []).append((path, transformer))


_register("NAMEMC_CONFIG_VERSION", ("version",), _to_int)
_register("NAMEMC_API_URL", ("http", "base_url"))
_register("NAMEMC_HTTP_TIMEOUT", ("http", "timeout_seconds"), _to_positive_float)
_register("NAMEMC_PROFILE_CACHE_TTL", ("profiles", "ttl_seconds"), _to_positive_float)
_register("NAMEMC_PROFILE_CACHE_MAX_SIZE", ("profiles", "max_size"), _to_int)
_register("NAMEMC_PROFILE_SINGLE_FLIGHT", ("profiles", "single_flight"), _to_bool)
_register("NAMEMC_SERVER_CACHE_TTL", ("servers", "ttl_seconds"), _to_positive_float)
_register("NAMEMC_SERVER_CACHE_MAX_SIZE", ("servers", "max_size"), _to_int)
_register("NAMEMC_SERVER_SINGLE_FLIGHT", ("servers", "single_flight"), _to_bool)
_register("NAMEMC_LOG_LEVEL", ("logging", "level"))
_register("NAMEMC_LOG_ROOT", ("logging", "log_dir"))
