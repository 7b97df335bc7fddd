"""
Detect command implementation.

Runs the compiler and prints its parsed version.
"""

import logging

from rustcprobe.cli.utils import (
    build_probe,
    load_cli_config,
    print_error,
    print_version,
)
from rustcprobe.core.exceptions import RustcProbeError

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the detect command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    logger.debug(f"Arguments: {args}")

    try:
        config = load_cli_config(args)
        version = build_probe(config).detect()
    except RustcProbeError as e:
        print_error("Could not determine the Rust compiler version", str(e))
        return 1

    print_version(version, args.json)
    return 0
