"""YAML config file loading, in-place editing and runtime precedence."""

import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from openmeteo.config.defaults import (
    API_KEY_ENV, CONFIG_ENV, CONFIG_KEYS, CONFIG_TEMPLATE, NO_COLOR_ENV, PROG,
)
from openmeteo.config.schema import AppConfig, FileConfig, OutputFormat
from openmeteo.errors import ConfigError


def config_path(env: Mapping[str, str] | None = None) -> Path:
    """``$OPENMETEO_CONFIG``, else ``$XDG_CONFIG_HOME/openmeteo/config.yaml``,
    else ``~/.config/openmeteo/config.yaml``."""
    env = os.environ if env is None else env
    if env.get(CONFIG_ENV):
        return Path(env[CONFIG_ENV]).expanduser()
    if env.get("XDG_CONFIG_HOME"):
        base = Path(env["XDG_CONFIG_HOME"])
    else:
        base = Path(env["HOME"]) if env.get("HOME") else Path.home()
        base = base / ".config"
    return base / PROG / "config.yaml"


def _describe(e: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
    )


def _read(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text()
    except FileNotFoundError:
        return {}
    except OSError as e:
        raise ConfigError(f"cannot read config file {path}: {e.strerror}") from e
    try:
        raw = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid config file {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"invalid config file {path}: expected 'key: value' lines")
    return raw


def load_file_config(path: str | Path) -> FileConfig:
    """Load and validate the config file. A missing file is an empty config."""
    path = Path(path)
    raw = _read(path)
    try:
        return FileConfig(**raw)
    except ValidationError as e:
        raise ConfigError(f"invalid config file {path}: {_describe(e)}") from e


def _check_key(key: str) -> None:
    if key not in CONFIG_KEYS:
        raise ConfigError(
            f"unknown config key: '{key}'. Run 'openmeteo config help' for valid keys."
        )


def _key_line(key: str) -> re.Pattern[str]:
    return re.compile(rf"^{re.escape(key)}\s*:")


def _write(path: Path, lines: list[str]) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(lines) + "\n" if lines else "")
    except OSError as e:
        raise ConfigError(f"cannot write config file {path}: {e.strerror}") from e


def init_config(path: Path) -> None:
    """Create the config file from the commented template."""
    if path.exists():
        raise ConfigError(
            f"config file already exists: {path}. Use 'openmeteo config set' to modify it."
        )
    _write(path, CONFIG_TEMPLATE.splitlines())


def set_value(path: Path, key: str, value: str) -> FileConfig:
    """Validate ``key=value`` through the schema and store it, keeping comments.

    An existing ``key:`` line is replaced in place; otherwise the key is
    appended. Returns the updated config.
    """
    _check_key(key)
    current = load_file_config(path).model_dump(mode="json", exclude_none=True)
    try:
        updated = FileConfig(**{**current, key: value})
    except ValidationError as e:
        raise ConfigError(f"invalid value for {key}: {_describe(e)}") from e

    stored = updated.model_dump(mode="json")[key]
    entry = yaml.safe_dump({key: stored}, default_flow_style=False, allow_unicode=True).strip()
    lines = path.read_text().splitlines() if path.exists() else []
    pattern = _key_line(key)
    out: list[str] = []
    replaced = False
    for line in lines:
        if pattern.match(line):
            if not replaced:
                out.append(entry)
                replaced = True
            continue
        out.append(line)
    if not replaced:
        out.append(entry)
    _write(path, out)
    return updated


def unset_value(path: Path, key: str) -> None:
    _check_key(key)
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    lines = path.read_text().splitlines()
    pattern = _key_line(key)
    kept = [line for line in lines if not pattern.match(line)]
    if len(kept) == len(lines):
        raise ConfigError(f"'{key}' is not set in config")
    _write(path, kept)


def get_value(file_config: FileConfig, key: str) -> Any:
    _check_key(key)
    return getattr(file_config, key)


def resolve_app_config(
    file_config: FileConfig,
    api_key: str | None = None,
    output_format: OutputFormat | None = None,
    verbose: bool = False,
    env: Mapping[str, str] | None = None,
    stdout_isatty: bool = False,
) -> AppConfig:
    """Merge CLI flags, environment and file into one frozen AppConfig.

    Precedence is CLI > environment > file > built-in defaults.
    """
    env = os.environ if env is None else env
    fmt = output_format or file_config.format or OutputFormat.HUMAN
    color = stdout_isatty and fmt is OutputFormat.HUMAN and NO_COLOR_ENV not in env
    return AppConfig(
        api_key=api_key or env.get(API_KEY_ENV) or file_config.api_key or None,
        output_format=fmt,
        verbose=verbose or bool(file_config.verbose),
        color=color,
        city=file_config.city,
        country=file_config.country,
        lat=file_config.lat,
        lon=file_config.lon,
        temperature_unit=file_config.temperature_unit,
        wind_speed_unit=file_config.wind_speed_unit,
        precipitation_unit=file_config.precipitation_unit,
        timezone=file_config.timezone,
    )
