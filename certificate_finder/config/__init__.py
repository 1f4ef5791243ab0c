"""Drive folder and API key settings for certificate lookups.

Values come from three sources, each overriding the one before it: a `.env`
file, a TOML file with a `[google]` table, and the process environment.
"""

from __future__ import annotations

import os
import sys
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dotenv import dotenv_values

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
DEFAULT_CONFIG_FILE = Path.home() / ".config" / "certificate_finder" / "config.toml"
ENV_FILE_ENV_VAR = "CERTIFICATE_FINDER_ENV_FILE"
CONFIG_FILE_ENV_VAR = "CERTIFICATE_FINDER_CONFIG_FILE"

# GoogleConfig field -> environment variable
ENV_KEYS: dict[str, str] = {
    "folder_id": "GOOGLE_DRIVE_FOLDER_ID",
    "api_key": "GOOGLE_API_KEY",
}


class ConfigError(RuntimeError):
    """Raised when the configuration cannot be loaded."""


@dataclass(frozen=True)
class GoogleConfig:
    folder_id: str
    api_key: str


@dataclass(frozen=True)
class AppConfig:
    google: GoogleConfig


def load_config(
    *,
    env_file: Path | str | None = None,
    config_file: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """Resolve the Drive settings from the `.env` file, the TOML file and the environment."""
    env_path = _pick_path(env_file, ENV_FILE_ENV_VAR, DEFAULT_ENV_FILE)
    config_path = _pick_path(config_file, CONFIG_FILE_ENV_VAR, DEFAULT_CONFIG_FILE)

    google: dict[str, str] = {}
    google.update(_google_from_env(_read_env_file(env_path)))
    google.update(_google_from_toml(_read_config_file(config_path)))
    google.update(_google_from_env(os.environ if environ is None else environ))

    missing = sorted(env for field, env in ENV_KEYS.items() if not google.get(field))
    if missing:
        raise ConfigError("Missing required values for " + ", ".join(missing))
    return AppConfig(google=GoogleConfig(**google))


def doctor(*, env_file: Path | str | None = None, config_file: Path | str | None = None) -> bool:
    """Print whether the Drive settings resolve, masking the API key."""
    try:
        config = load_config(env_file=env_file, config_file=config_file)
    except ConfigError as exc:
        print("Configuration invalid:", file=sys.stderr)
        print(f"  {exc}", file=sys.stderr)
        return False

    print("Configuration looks good.", file=sys.stdout)
    print(f"  Drive folder ID: {config.google.folder_id}", file=sys.stdout)
    print(f"  Google API key: {mask_secret(config.google.api_key)}", file=sys.stdout)
    return True


def mask_secret(value: str) -> str:
    if len(value) <= 8:
        return "***"
    return f"{value[:4]}...{value[-4:]}"


def _pick_path(explicit: Path | str | None, env_var: str, default: Path) -> Path:
    if explicit is not None:
        return Path(explicit)
    return Path(os.environ.get(env_var) or default)


def _read_env_file(path: Path) -> Mapping[str, str | None]:
    if not path.is_file():
        return {}
    try:
        return dotenv_values(path, encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read env file {path}: {exc}") from exc


def _read_config_file(path: Path) -> Mapping[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except FileNotFoundError:
        return {}
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config file {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed to read config file {path}: {exc}") from exc


def _google_from_env(values: Mapping[str, str | None]) -> dict[str, str]:
    return {
        field: values[env].strip()
        for field, env in ENV_KEYS.items()
        if values.get(env) is not None
    }


def _google_from_toml(document: Mapping[str, Any]) -> dict[str, str]:
    table = document.get("google")
    if not isinstance(table, Mapping):
        return {}
    return {field: str(table[field]).strip() for field in ENV_KEYS if field in table}


__all__ = [
    "AppConfig",
    "ConfigError",
    "GoogleConfig",
    "doctor",
    "load_config",
    "mask_secret",
]
