"""Paths, constants, HTTP settings and layered user settings."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from platformdirs import user_config_dir

from .errors import ConfigError

APP_NAME = "rdaplookup"

# RDAP
DEFAULT_RDAP_BASE_URL = "https://rdap.arin.net/registry"
RDAP_ACCEPT = "application/json"

# Local configuration
CONFIG_DIR = Path(user_config_dir(APP_NAME))
CONFIG_PATH = CONFIG_DIR / "config.toml"

# HTTP
USER_AGENT = (
    "rdaplookup/0.1.0 "
    "(+https://github.com/example/rdaplookup; network-research)"
)
REQUEST_TIMEOUT = 30.0

# Output
DEFAULT_FIELDS = ("IP", "HostName", "Name", "Country", "Remarks")
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

ENV_PREFIX = "RDAPLOOKUP_"


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_RDAP_BASE_URL
    timeout: float = REQUEST_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL


def _coerce(values: Mapping[str, object], origin: str) -> dict:
    """Check and convert raw setting values from *origin*."""
    out: dict = {}
    for key, value in values.items():
        if key == "base_url":
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f"{origin}: base_url must be a non-empty string")
            out["base_url"] = value.strip()
        elif key == "timeout":
            try:
                timeout = float(value)
            except (TypeError, ValueError):
                raise ConfigError(f"{origin}: timeout must be a number, got {value!r}")
            if timeout <= 0:
                raise ConfigError(f"{origin}: timeout must be positive")
            out["timeout"] = timeout
        elif key == "log_level":
            level = str(value).upper()
            if level not in LOG_LEVELS:
                raise ConfigError(f"{origin}: unknown log level {value!r}")
            out["log_level"] = level
        else:
            raise ConfigError(f"{origin}: unknown setting {key!r}")
    return out


def _read_file(path: Path) -> dict:
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"{path}: {e}")

    section = data.get(APP_NAME, {})
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: [{APP_NAME}] must be a table")
    return _coerce(section, str(path))


def _read_environ(environ: Mapping[str, str]) -> dict:
    raw = {}
    for key in ("base_url", "timeout", "log_level"):
        env_key = ENV_PREFIX + key.upper()
        if environ.get(env_key):
            raw[key] = environ[env_key]
    return _coerce(raw, "environment")


def load_settings(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Defaults, then the TOML config file, then RDAPLOOKUP_* variables."""
    if path is None:
        path = CONFIG_PATH
    if environ is None:
        environ = os.environ

    settings = Settings()
    settings = replace(settings, **_read_file(path))
    settings = replace(settings, **_read_environ(environ))
    return settings
