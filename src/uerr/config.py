"""XDG config loading for the `uerr` command."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import cast

from pydantic import BaseModel, ConfigDict, Field, field_validator

if sys.version_info >= (3, 11):
    import tomllib
else:  # pragma: no cover
    import tomli as tomllib

from .errors import ExitCode, UserError
from .logging import VALID_LOG_LEVELS, LogLevel, normalize_level

DEFAULT_CONFIG_PATH = Path("~/.config/uerr/config.toml")
DEFAULT_PREFIX = "error: "
DEFAULT_EXIT_CODE = int(ExitCode.FAILURE)
DEFAULT_LOG_LEVEL: LogLevel = "WARN"
PREFIX_ENV = "UERR_PREFIX"
LOG_LEVEL_ENV = "UERR_LOG_LEVEL"


class AppConfig(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    prefix: str = DEFAULT_PREFIX
    exit_code: int = Field(default=DEFAULT_EXIT_CODE, ge=0, le=255)
    log_level: LogLevel = DEFAULT_LOG_LEVEL
    log_file: str = ""

    @field_validator("log_level", mode="before")
    @classmethod
    def _validate_log_level(cls, value: object) -> object:
        normalized = _normalize_log_level(value)
        return value if normalized is None else normalized


def get_config_path(path: str | Path | None = None) -> Path:
    if path is None:
        return DEFAULT_CONFIG_PATH.expanduser()
    return Path(path).expanduser()


def _normalize_log_level(value: object) -> LogLevel | None:
    if not isinstance(value, str):
        return None
    normalized = normalize_level(value)
    if normalized not in VALID_LOG_LEVELS:
        return None
    return cast(LogLevel, normalized)


def _sanitize(raw: dict[str, object]) -> AppConfig:
    cfg = AppConfig()

    prefix = raw.get("prefix", cfg.prefix)
    if isinstance(prefix, str):
        cfg.prefix = prefix

    exit_code = raw.get("exit_code", cfg.exit_code)
    if isinstance(exit_code, int) and not isinstance(exit_code, bool) and 0 <= exit_code <= 255:
        cfg.exit_code = exit_code

    log_level = _normalize_log_level(raw.get("log_level", cfg.log_level))
    if log_level is not None:
        cfg.log_level = log_level

    log_file = raw.get("log_file", cfg.log_file)
    if isinstance(log_file, str):
        cfg.log_file = log_file

    return cfg


def _apply_env(cfg: AppConfig) -> AppConfig:
    env_prefix = os.getenv(PREFIX_ENV)
    if env_prefix is not None:
        cfg.prefix = env_prefix
    env_level = _normalize_log_level(os.getenv(LOG_LEVEL_ENV, ""))
    if env_level is not None:
        cfg.log_level = env_level
    return cfg


def _config_error(resolved: Path, reason: object) -> UserError:
    return (
        UserError(f"could not load config file {resolved}")
        .and_reason(reason)
        .and_help("Fix or remove the file, or pass --config with another path.")
    )


def load_config(path: str | Path | None = None, *, strict: bool = False) -> AppConfig:
    """Load the config file, falling back to defaults.

    With `strict`, a missing, unreadable or malformed file raises `UserError`
    instead of being ignored.
    """
    resolved = get_config_path(path)
    if not resolved.exists():
        if strict:
            raise _config_error(resolved, "The file does not exist.")
        return _apply_env(AppConfig())
    try:
        with resolved.open("rb") as handle:
            raw = tomllib.load(handle)
    except (tomllib.TOMLDecodeError, OSError) as exc:
        if strict:
            raise _config_error(resolved, exc) from exc
        return _apply_env(AppConfig())
    return _apply_env(_sanitize(raw))
