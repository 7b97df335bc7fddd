"""
Configuration management for rustcprobe.
"""

from rustcprobe.config.parser import (
    DEFAULT_CONFIG_NAME,
    ProbeConfig,
    load_config,
    parse_config,
)

__all__ = [
    "DEFAULT_CONFIG_NAME",
    "ProbeConfig",
    "load_config",
    "parse_config",
]
