"""The ``config`` subcommand: show, path, init, set, unset, get and help."""

import os
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

from openmeteo.config.defaults import API_KEY_ENV, BUILTIN_VALUES, CONFIG_ENV, CONFIG_KEYS, PROG
from openmeteo.config.loader import get_value, init_config, load_file_config, set_value, unset_value
from openmeteo.config.schema import FileConfig, OutputFormat
from openmeteo.errors import ConfigError, UsageError


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def mask(key: str) -> str:
    return f"{key[:4]}***"


def help_text() -> str:
    keys = "\n".join(f"  {k:<20} {desc}" for k, desc in CONFIG_KEYS.items())
    return f"""\
{PROG} config -- Manage configuration file

Usage:
  {PROG} config <action> [arguments]

Actions:
  show              Show current configuration (values and sources)
  path              Print config file path
  init              Create config file with commented-out defaults
  set KEY=VALUE     Set a configuration value
  unset KEY         Remove a configuration value
  get KEY           Get a single configuration value
  help              Show this help

Valid keys:
{keys}

Config file location (in order of precedence):
  ${CONFIG_ENV} environment variable
  $XDG_CONFIG_HOME/{PROG}/config.yaml
  ~/.config/{PROG}/config.yaml

Precedence: CLI flags > environment variables > config file > built-in defaults

Examples:
  {PROG} config init
  {PROG} config set city=London
  {PROG} config get city
  {PROG} config unset city
  {PROG} config show"""


def show_lines(
    path: Path,
    file_config: FileConfig,
    env: Mapping[str, str],
    fmt: OutputFormat = OutputFormat.HUMAN,
) -> list[str]:
    """Effective value and source of every key.

    Machine formats list only the keys the file sets, unmasked.
    """
    stored = {k: _text(getattr(file_config, k)) for k in CONFIG_KEYS}
    if fmt in (OutputFormat.PORCELAIN, OutputFormat.LLM):
        return [f"{k}={v}" for k, v in stored.items() if v]

    lines = [
        f"Config file: {path}",
        "Status: loaded" if path.exists() else "Status: not found (using defaults)",
        "",
    ]
    for key in CONFIG_KEYS:
        value, source = stored[key], "config"
        if key == "api_key" and env.get(API_KEY_ENV):
            value, source = env[API_KEY_ENV], f"env ({API_KEY_ENV})"
        if not value and key in BUILTIN_VALUES:
            value, source = BUILTIN_VALUES[key], "default"
        if not value:
            lines.append(f"  {key:<22} (not set)")
            continue
        if key == "api_key":
            value = mask(value)
        lines.append(f"  {key:<22} {value}  ({source})")
    return lines


def run_config(
    action: str,
    key: str | None,
    fmt: OutputFormat,
    path: Path,
    env: Mapping[str, str] | None = None,
) -> int:
    """Execute one config action, printing to stdout. Raises ConfigError."""
    env = os.environ if env is None else env

    def need_key(usage: str) -> str:
        if not key:
            raise UsageError(f"usage: {PROG} config {usage}", command="config")
        return key

    if action == "help":
        print(help_text())
    elif action == "path":
        print(path)
    elif action == "show":
        print("\n".join(show_lines(path, load_file_config(path), env, fmt)))
    elif action == "init":
        init_config(path)
        print(f"Created config file: {path}")
    elif action == "set":
        pair = need_key("set KEY=VALUE")
        if "=" not in pair:
            raise ConfigError("use KEY=VALUE format (e.g. city=London)")
        name, value = (part.strip() for part in pair.split("=", 1))
        updated = set_value(path, name, value)
        shown = _text(getattr(updated, name))
        print(f"Set {name} = {mask(shown) if name == 'api_key' else shown}")
    elif action == "unset":
        name = need_key("unset KEY")
        unset_value(path, name)
        print(f"Removed {name}")
    elif action == "get":
        value = _text(get_value(load_file_config(path), need_key("get KEY")))
        if value:
            print(value)
    return 0
