"""YAML configuration parser for rustcprobe.

This module provides parsing and validation for rustcprobe.yaml configuration files.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import yaml

from ..core.exceptions import ConfigError
from ..toolchain.probe import DEFAULT_TIMEOUT
from ..version.parser import DEFAULT_PROGRAM_NAMES

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "rustcprobe.yaml"

_KNOWN_KEYS = {"version", "rustc", "wrapper", "timeout", "program_names"}


@dataclass
class ProbeConfig:
    """Settings for locating and running the compiler."""

    rustc: Optional[str] = None  # falls back to $RUSTC, then "rustc"
    wrapper: Optional[str] = None  # falls back to $RUSTC_WRAPPER
    timeout: float = DEFAULT_TIMEOUT
    program_names: List[str] = field(
        default_factory=lambda: list(DEFAULT_PROGRAM_NAMES)
    )


def parse_config(config_path: Path) -> ProbeConfig:
    """
    Parse rustcprobe.yaml configuration file.

    Args:
        config_path: Path to rustcprobe.yaml

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}") from e

    if data is None:
        raise ConfigError("Configuration file is empty")

    return _parse_and_validate(data)


def load_config(config_path: Optional[Path] = None) -> ProbeConfig:
    """
    Load configuration, falling back to defaults.

    Args:
        config_path: Explicit config file; if None, ./rustcprobe.yaml is used
            when present

    Returns:
        Parsed configuration, or defaults if no file is found

    Raises:
        ConfigError: If an explicit file is missing or any file is invalid
    """
    if config_path is not None:
        return parse_config(config_path)

    default = Path.cwd() / DEFAULT_CONFIG_NAME
    if not default.exists():
        logger.debug(f"Config file not found (optional): {default}")
        return ProbeConfig()

    logger.debug(f"Loading configuration from {default}")
    return parse_config(default)


def _parse_and_validate(data) -> ProbeConfig:
    """Parse and validate configuration data."""
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    if data.get("version", 1) != 1:
        raise ConfigError(f"Unsupported version: {data['version']} (expected 1)")

    config = ProbeConfig()

    for key in ("rustc", "wrapper"):
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise ConfigError(f"'{key}' must be a string")
        setattr(config, key, value)

    if "timeout" in data:
        timeout = data["timeout"]
        # bool is an int subclass
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise ConfigError("'timeout' must be a number")
        if timeout <= 0:
            raise ConfigError(f"'timeout' must be positive, got {timeout}")
        config.timeout = float(timeout)

    if "program_names" in data:
        names = data["program_names"]
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise ConfigError("'program_names' must be a list of strings")
        config.program_names = names

    return config
