from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any, Mapping

import yaml


DEFAULT_CONFIG: dict[str, Any] = {
    "api": {
        "base_url": "https://chess-api.com/v1",
        "timeout_seconds": 30.0,
    },
    "query": {
        "depth": None,
    },
}

# Environment variable -> dotted config path.
ENV_OVERRIDES: dict[str, str] = {
    "CHESS_API_BASE_URL": "api.base_url",
    "CHESS_API_TIMEOUT_SECONDS": "api.timeout_seconds",
    "CHESS_API_DEPTH": "query.depth",
}


class ConfigError(ValueError):
    """Raised for config loading, merge and validation failures."""


def load_yaml(path: str | Path) -> dict[str, Any]:
    path_obj = Path(path)
    if not path_obj.exists():
        raise ConfigError(f"Config file not found: {path_obj}")
    try:
        raw = yaml.safe_load(path_obj.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path_obj}: {exc}") from exc
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML root must be a mapping: {path_obj}")
    return raw


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def parse_override_value(raw: str) -> Any:
    lowered = raw.lower()
    if lowered in {"true", "false"}:
        return lowered == "true"
    if lowered == "null":
        return None
    try:
        if "." in raw:
            return float(raw)
        return int(raw)
    except ValueError:
        return raw


def set_by_path(target: dict[str, Any], path: str, value: Any) -> None:
    parts = path.split(".")
    cursor = target
    for part in parts[:-1]:
        if part not in cursor or not isinstance(cursor[part], dict):
            cursor[part] = {}
        cursor = cursor[part]
    cursor[parts[-1]] = value


def apply_cli_overrides(config: dict[str, Any], overrides: list[str] | None) -> dict[str, Any]:
    if not overrides:
        return config

    merged = copy.deepcopy(config)
    for item in overrides:
        if "=" not in item:
            raise ConfigError(f"Invalid override '{item}'. Expected dotted.path=value")
        key, raw_value = item.split("=", 1)
        set_by_path(merged, key.strip(), parse_override_value(raw_value.strip()))
    return merged


def apply_env_overrides(
    config: dict[str, Any], env: Mapping[str, str] | None = None
) -> dict[str, Any]:
    environment = os.environ if env is None else env
    merged = copy.deepcopy(config)
    for env_key, path in ENV_OVERRIDES.items():
        raw = environment.get(env_key, "").strip()
        if raw:
            value = raw if env_key == "CHESS_API_BASE_URL" else parse_override_value(raw)
            set_by_path(merged, path, value)
    return merged


def validate_config(config: dict[str, Any]) -> None:
    api = config.get("api")
    if not isinstance(api, dict):
        raise ConfigError("'api' section must be a mapping")
    base_url = api.get("base_url")
    if not isinstance(base_url, str) or not base_url.strip():
        raise ConfigError("api.base_url must be a non-empty string")

    timeout = api.get("timeout_seconds")
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError(f"api.timeout_seconds must be a positive number, got {timeout!r}")

    query = config.get("query", {})
    if not isinstance(query, dict):
        raise ConfigError("'query' section must be a mapping")
    depth = query.get("depth")
    if depth is not None and (isinstance(depth, bool) or not isinstance(depth, int) or depth <= 0):
        raise ConfigError(f"query.depth must be a positive integer or null, got {depth!r}")


def resolve_config(
    config_path: str | Path | None = None,
    cli_overrides: list[str] | None = None,
    env: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    resolved = copy.deepcopy(DEFAULT_CONFIG)
    if config_path:
        resolved = deep_merge(resolved, load_yaml(config_path))
    resolved = apply_env_overrides(resolved, env)
    resolved = apply_cli_overrides(resolved, cli_overrides)

    validate_config(resolved)
    return resolved
