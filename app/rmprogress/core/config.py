"""Scan configuration and settings.

This module provides the configuration model and I/O functions for
rmprogress scans: which executable to watch, where the process-info
filesystem is mounted, and how per-process failures are handled.

Configuration is stored in ~/.config/rmprogress/config.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from rmprogress.core.paths import get_config_path

logger = logging.getLogger(__name__)

DEFAULT_PROCESS_MATCH = "/usr/bin/rm"


class ProgressConfig(BaseModel):
    """Configuration for progress scans.

    Attributes:
        process_match: Substring the executable path of a process must contain.
        proc_root: Mount point of the process-info filesystem.
        keep_going: Skip processes that fail analysis instead of aborting.
    """

    model_config = ConfigDict(extra="forbid")

    process_match: Annotated[
        str,
        Field(min_length=1, description="Executable path substring to match"),
    ] = DEFAULT_PROCESS_MATCH
    proc_root: Annotated[
        Path,
        Field(description="Process-info filesystem mount point"),
    ] = Path("/proc")
    keep_going: Annotated[
        bool,
        Field(description="Continue with the next process after a per-process error"),
    ] = False


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> ProgressConfig:
    """Load scan configuration from a TOML file.

    A missing file is not an error: defaults are returned instead.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated ProgressConfig object.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        logger.debug("No config at %s, using defaults", config_path)
        return ProgressConfig()
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return ProgressConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: ProgressConfig, path: Path | None = None) -> Path:
    """Save scan configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The ProgressConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data = {
        "process_match": config.process_match,
        "proc_root": str(config.proc_root),
        "keep_going": config.keep_going,
    }

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(tmp_path, config_path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config {config_path}: {e}") from e

    return config_path
