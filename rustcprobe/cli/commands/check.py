"""
Check command implementation.

Tests the compiler version against minimum/maximum releases, a nightly
date and a required channel, for use in shell-based build logic.
"""

import datetime
import logging
from typing import List

from rustcprobe.cli.utils import build_probe, load_cli_config, print_error
from rustcprobe.core.exceptions import RustcProbeError
from rustcprobe.version.model import RustVersion, StableSpec
from rustcprobe.version.parser import parse_version

logger = logging.getLogger(__name__)

EXIT_SATISFIED = 0
EXIT_UNSATISFIED = 1
EXIT_UNKNOWN = 2


def evaluate(version: RustVersion, args) -> List[str]:
    """
    Evaluate the requested conditions.

    Args:
        version: Detected compiler version
        args: Parsed arguments carrying since/before/nightly_since/channel

    Returns:
        Descriptions of the failed conditions (empty if all hold)

    Raises:
        VersionParseError: If --since/--before is not a valid release
        ValueError: If --nightly-since is not a valid date
    """
    failures = []

    if args.since:
        spec = StableSpec.parse(args.since)
        if not version.is_since(spec):
            failures.append(f"{version} is older than {spec}")

    if args.before:
        spec = StableSpec.parse(args.before)
        if not version.is_before(spec):
            failures.append(f"{version} is not older than {spec}")

    if args.nightly_since:
        start = datetime.date.fromisoformat(args.nightly_since)
        if not version.is_since_nightly(start):
            failures.append(f"{version} is not a nightly since {start.isoformat()}")

    if args.channel and version.channel.kind.value != args.channel:
        failures.append(f"{version} is not on the {args.channel} channel")

    return failures


def run(args) -> int:
    """
    Run the check command.

    Args:
        args: Parsed command-line arguments

    Returns:
        0 if every condition holds, 1 if any fails, 2 on errors
    """
    try:
        config = load_cli_config(args)
        if args.banner is not None:
            version = parse_version(args.banner, config.program_names)
        else:
            version = build_probe(config).detect()
        failures = evaluate(version, args)
    except (RustcProbeError, ValueError) as e:
        print_error("Could not check the Rust compiler version", str(e))
        return EXIT_UNKNOWN

    for failure in failures:
        logger.warning(failure)

    if failures:
        return EXIT_UNSATISFIED

    logger.info(f"{version} satisfies all requirements")
    return EXIT_SATISFIED
