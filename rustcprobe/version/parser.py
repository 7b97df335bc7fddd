"""
rustcprobe/version/parser.py

Parser for the banner printed by ``rustc --version``.

Recognized shapes:
    rustc 1.75.2 (def1234 2024-01-01)
    rustc 1.80.0-nightly (def5678 2024-06-01)
    1.70.0-beta.3 (abc1234 2023-05-01)
    1.80.0-dev
"""

import datetime
import logging
import re
from typing import Iterable, List, Optional

from ..core.exceptions import (
    ClippyDriverError,
    InvalidNumberError,
    MissingVersionNumberError,
    UnrecognizedChannelError,
    UnrecognizedFormatError,
    VersionParseError,
)
from .channel import Beta, Channel, Dev, Nightly, Stable
from .model import RustVersion, parse_component

logger = logging.getLogger(__name__)

# Leading program tokens stripped before the version token
DEFAULT_PROGRAM_NAMES = ("rustc",)

_GROUP_RE = re.compile(r"\(([^()]*)\)")
_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def parse_version(
    banner: str, program_names: Iterable[str] = DEFAULT_PROGRAM_NAMES
) -> RustVersion:
    """
    Parse a compiler version banner.

    Only the last non-empty line is considered; wrappers sometimes print
    warnings before the banner. The version token must be the first field
    or directly follow a recognized program name; banners from other tools
    (``cargo 1.70.0``) are rejected rather than scanned for a number.

    Args:
        banner: Output of ``rustc --version``
        program_names: Leading tokens accepted as the program name

    Returns:
        Parsed RustVersion

    Raises:
        UnrecognizedFormatError: No numeric version token where one is
            expected, or an unrecognized program name
        ClippyDriverError: The banner came from clippy-driver
        MissingVersionNumberError: Version token without exactly three parts
        InvalidNumberError: Non-numeric or oversized release/beta number
        UnrecognizedChannelError: Unknown -<suffix>
    """
    line = _last_line(banner)
    fields = line.split()

    if not fields:
        raise UnrecognizedFormatError("a version banner", banner, None)

    # Locate the version token
    if _looks_numeric(fields[0]):
        index = 0
    elif fields[0] in program_names:
        if len(fields) < 2 or not _looks_numeric(fields[1]):
            found = fields[1] if len(fields) > 1 else None
            raise UnrecognizedFormatError(
                f"a version number after {fields[0]!r}", found, banner
            )
        index = 1
    elif fields[0].startswith("clippy"):
        raise ClippyDriverError("rustc banner, not clippy-driver", fields[0], banner)
    else:
        raise UnrecognizedFormatError("a numeric version token", fields[0], banner)

    token = fields[index]
    numbers, has_suffix, suffix = token.partition("-")

    parts = numbers.split(".")
    if len(parts) != 3:
        raise MissingVersionNumberError("major.minor.patch", numbers, banner)
    major = parse_component(parts[0], "major version", banner)
    minor = parse_component(parts[1], "minor version", banner)
    patch = parse_component(parts[2], "patch version", banner)

    channel: Channel = _parse_channel(suffix, banner) if has_suffix else Stable()

    commit_date = _parse_commit_date(" ".join(fields[index + 1 :]))
    if commit_date is not None and isinstance(channel, Nightly):
        channel = Nightly(commit_date)

    version = RustVersion(major, minor, patch, channel, commit_date)
    logger.debug(f"Parsed {line!r} as {version}")
    return version


def try_parse_version(
    banner: str, program_names: Iterable[str] = DEFAULT_PROGRAM_NAMES
) -> Optional[RustVersion]:
    """
    Parse a banner, returning None instead of raising on failure.

    Args:
        banner: Output of ``rustc --version``
        program_names: Leading tokens accepted as the program name

    Returns:
        Parsed RustVersion or None
    """
    try:
        return parse_version(banner, program_names)
    except VersionParseError as e:
        logger.debug(f"Could not parse version banner: {e}")
        return None


def _last_line(banner: str) -> str:
    lines: List[str] = [line for line in banner.splitlines() if line.strip()]
    return lines[-1].strip() if lines else ""


def _looks_numeric(token: str) -> bool:
    return token[:1].isascii() and token[:1].isdigit()


def _parse_channel(suffix: str, banner: str) -> Channel:
    """Classify a -<suffix> into a channel variant."""
    if suffix == "nightly":
        return Nightly()
    if suffix == "dev":
        return Dev()
    if suffix == "beta":
        return Beta()
    if suffix.startswith("beta."):
        return Beta(parse_component(suffix[len("beta.") :], "beta number", banner))
    raise UnrecognizedChannelError("one of beta, beta.N, nightly, dev", suffix, banner)


def _parse_commit_date(rest: str) -> Optional[datetime.date]:
    """
    Extract the commit date from a trailing ``(<hash> <date>)`` group.

    Groups of any other shape are ignored.
    """
    match = _GROUP_RE.search(rest)
    if not match:
        return None

    inner = match.group(1).split()
    if len(inner) != 2:
        logger.debug(f"Ignoring parenthesized group {match.group(0)!r}")
        return None

    date_match = _DATE_RE.fullmatch(inner[1])
    if not date_match:
        logger.debug(f"Ignoring malformed commit date {inner[1]!r}")
        return None

    year, month, day = (int(g) for g in date_match.groups())
    try:
        return datetime.date(year, month, day)
    except ValueError:
        logger.debug(f"Ignoring impossible commit date {inner[1]!r}")
        return None
