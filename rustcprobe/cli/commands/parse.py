"""
Parse command implementation.

Parses a version banner given on the command line or standard input.
"""

import logging
import sys

from rustcprobe.cli.utils import load_cli_config, print_error, print_version
from rustcprobe.core.exceptions import RustcProbeError
from rustcprobe.version.parser import parse_version

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the parse command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    banner = sys.stdin.read() if args.banner == "-" else args.banner

    try:
        config = load_cli_config(args)
        version = parse_version(banner, config.program_names)
    except RustcProbeError as e:
        print_error("Invalid version banner", str(e))
        return 1

    print_version(version, args.json)
    return 0
