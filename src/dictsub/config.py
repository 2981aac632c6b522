from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .engine import DEFAULT_READ_SIZE
from .errors import ConfigError

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(slots=True)
class AppConfig:
    """Container for user configurable runtime options."""

    dictionary_path: Path
    log_file: Optional[Path]
    read_size: int
    verbose: bool
    quiet: bool


def load_environment() -> None:
    """Load environment variables from .env files if present."""

    load_dotenv(override=False)


def _env_flag(name: str) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if raw in TRUE_VALUES:
        return True
    if raw in FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean value, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc


def build_config(args) -> AppConfig:
    """Create an :class:`AppConfig` instance from parsed CLI arguments.

    Command line flags take precedence over ``DICTSUB_*`` environment variables.
    """

    load_environment()

    dictionary_path = Path(args.dictionary).expanduser()

    log_file: Optional[Path] = None
    raw_log_file = getattr(args, "log_file", None) or os.getenv("DICTSUB_LOG_FILE")
    if raw_log_file:
        log_file = Path(raw_log_file).expanduser()
        log_file.parent.mkdir(parents=True, exist_ok=True)

    read_size = getattr(args, "read_size", None)
    if read_size is None:
        read_size = _env_int("DICTSUB_READ_SIZE", DEFAULT_READ_SIZE)
    if read_size <= 0:
        raise ConfigError("--read-size must be a positive integer")

    verbose = bool(getattr(args, "verbose", False)) or _env_flag("DICTSUB_VERBOSE")
    quiet = bool(getattr(args, "quiet", False))
    if verbose and quiet:
        raise ConfigError("--verbose and --quiet are mutually exclusive")

    return AppConfig(
        dictionary_path=dictionary_path,
        log_file=log_file,
        read_size=read_size,
        verbose=verbose,
        quiet=quiet,
    )
