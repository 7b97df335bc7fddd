"""
Shared utilities for CLI commands.

Provides common functionality used across multiple CLI commands to
eliminate duplication and ensure consistent behavior.
"""

import json
import logging
import sys
from typing import Optional

from rustcprobe.config.parser import ProbeConfig, load_config
from rustcprobe.toolchain.probe import RustcProbe
from rustcprobe.version.model import RustVersion

logger = logging.getLogger(__name__)


# ============================================================================
# Configuration Management
# ============================================================================


def load_cli_config(args) -> ProbeConfig:
    """
    Load configuration for a command, applying command-line overrides.

    Precedence: command-line flags, then the config file, then the
    environment (applied by RustcProbe), then defaults.

    Args:
        args: Parsed arguments (may carry config, rustc, wrapper, timeout)

    Returns:
        Effective configuration

    Raises:
        ConfigError: If the configuration file is invalid
    """
    config = load_config(getattr(args, "config", None))

    for key in ("rustc", "wrapper", "timeout"):
        value = getattr(args, key, None)
        if value is not None:
            logger.debug(f"Overriding {key} from command line: {value}")
            setattr(config, key, value)

    return config


def build_probe(config: ProbeConfig) -> RustcProbe:
    """Create a RustcProbe from configuration."""
    return RustcProbe(
        rustc=config.rustc,
        wrapper=config.wrapper,
        timeout=config.timeout,
        program_names=config.program_names,
    )


# ============================================================================
# Output Formatting
# ============================================================================


def print_version(version: RustVersion, as_json: bool = False):
    """
    Print a version to stdout.

    Args:
        version: Version to print
        as_json: Print a JSON object instead of the rustc-style string
    """
    if as_json:
        print(json.dumps(version.to_dict(), indent=2))
    else:
        print(version)


def print_error(message: str, details: Optional[str] = None):
    """
    Print error message to stderr in consistent format.

    Args:
        message: Main error message
        details: Optional additional details
    """
    print(f"ERROR: {message}", file=sys.stderr)
    if details:
        print(f"  {details}", file=sys.stderr)
