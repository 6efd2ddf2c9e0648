"""Configuration loading utilities for tagtally."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Mapping

_ENV_PREFIX = "TAGTALLY_"
_DEFAULT_CONFIG = Path("~/.tagtally/config.toml").expanduser()


_DEFAULT_SETTINGS: dict[str, Any] = {
    "content_dir": "content",
    "content_extensions": [".md", ".mdx"],
    "content_encoding": "utf-8",
    "content_recursive": True,
    "content_decode_errors": "replace",
    "json": False,
    "verbose": False,
}


def _coerce_env_value(key: str, value: str) -> Any:
    default = _DEFAULT_SETTINGS.get(key)
    if isinstance(default, bool):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    if isinstance(default, int):
        try:
            return int(value)
        except ValueError:
            return default
    if isinstance(default, list):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


def _resolve_config_path(cli_options: Mapping[str, Any] | None) -> Path:
    cli_options = dict(cli_options or {})
    raw_config_path = cli_options.get("config_path")
    return Path(raw_config_path).expanduser() if raw_config_path else _DEFAULT_CONFIG


def _load_file_config(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}


def _load_env_config() -> dict[str, Any]:
    config: dict[str, Any] = {}
    for env_key, raw_value in os.environ.items():
        if env_key.startswith(_ENV_PREFIX):
            normalized = env_key[len(_ENV_PREFIX) :].lower()
            config[normalized] = _coerce_env_value(normalized, raw_value)
    return config


def get_config(cli_options: Mapping[str, Any] | None = None) -> dict[str, Any]:
    cli_options = dict(cli_options or {})
    config_path = _resolve_config_path(cli_options)

    file_config = _load_file_config(config_path)
    env_config = _load_env_config()
    cli_config = {
        key: value
        for key, value in cli_options.items()
        if value is not None and key != "config_path"
    }

    merged: dict[str, Any] = dict(_DEFAULT_SETTINGS)
    merged.update(file_config)
    merged.update(env_config)
    merged.update(cli_config)

    merged["config_path"] = str(config_path)
    return merged
