"""
rustcprobe/version/model.py

Structured, comparable representation of a Rust compiler version.
"""

import datetime
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ..core.exceptions import InvalidNumberError, MissingVersionNumberError
from .channel import Beta, Channel, ChannelKind, Nightly, Stable, channel_sort_key

# Largest accepted release number (unsigned 32-bit)
MAX_COMPONENT = 2**32 - 1

_DIGITS_RE = re.compile(r"[0-9]+")


def parse_component(text: str, name: str, banner: Optional[str] = None) -> int:
    """
    Parse one unsigned numeric field of a version.

    Args:
        text: Field text (e.g. "70")
        name: Field name used in the error message (e.g. "minor version")
        banner: Full input, for diagnostics

    Returns:
        Parsed integer

    Raises:
        InvalidNumberError: If the text is not all ASCII digits or is too large
    """
    if not _DIGITS_RE.fullmatch(text):
        raise InvalidNumberError(f"numeric {name}", text, banner)
    value = int(text)
    if value > MAX_COMPONENT:
        raise InvalidNumberError(f"{name} no larger than {MAX_COMPONENT}", text, banner)
    return value


@dataclass(frozen=True)
class StableSpec:
    """
    A stable release specification, like ``1.48`` or ``1.32.4``.

    Attributes:
        major: Major version
        minor: Minor version
        patch: Patch version; None matches any patch of the minor release
    """

    major: int
    minor: int
    patch: Optional[int] = None

    @classmethod
    def parse(cls, text: str) -> "StableSpec":
        """
        Parse a "major.minor" or "major.minor.patch" specification.

        Raises:
            MissingVersionNumberError: If the wrong number of components is given
            InvalidNumberError: If a component is not a number
        """
        parts = text.strip().split(".")
        if len(parts) not in (2, 3):
            raise MissingVersionNumberError("major.minor[.patch]", text)

        major = parse_component(parts[0], "major version", text)
        minor = parse_component(parts[1], "minor version", text)
        patch = None
        if len(parts) == 3:
            patch = parse_component(parts[2], "patch version", text)
        return cls(major, minor, patch)

    def to_version(self) -> "RustVersion":
        """Convert to a concrete stable version, treating a missing patch as zero."""
        return RustVersion.stable(self.major, self.minor, self.patch or 0)

    def __str__(self) -> str:
        if self.patch is None:
            return f"{self.major}.{self.minor}"
        return f"{self.major}.{self.minor}.{self.patch}"


@dataclass(frozen=True)
class RustVersion:
    """
    A parsed Rust compiler version.

    Equality (``==``) is structural and includes ``commit_date``. Ordering
    (``<``, ``<=``, ``>``, ``>=`` and compare_versions) ignores
    ``commit_date``: two versions differing only in commit date are
    neither less nor greater than each other, yet are not ``==``.

    Attributes:
        major: Major version
        minor: Minor version
        patch: Patch version
        channel: Release channel
        commit_date: Date of the source commit the compiler was built from
    """

    major: int
    minor: int
    patch: int
    channel: Channel = field(default_factory=Stable)
    commit_date: Optional[datetime.date] = None

    @classmethod
    def stable(cls, major: int, minor: int, patch: int) -> "RustVersion":
        """Create a stable version with the given release numbers."""
        return cls(major, minor, patch, Stable())

    @property
    def release(self) -> Tuple[int, int, int]:
        """The (major, minor, patch) triple."""
        return (self.major, self.minor, self.patch)

    def sort_key(self) -> Tuple:
        """
        Key implementing the total order over versions.

        Release numbers first, then CHANNEL_PRECEDENCE, then the
        channel's own secondary key (beta number, nightly date).
        """
        return (self.release, channel_sort_key(self.channel))

    # Comparison ---------------------------------------------------------

    def __lt__(self, other: "RustVersion") -> bool:
        if not isinstance(other, RustVersion):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other: "RustVersion") -> bool:
        if not isinstance(other, RustVersion):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: "RustVersion") -> bool:
        if not isinstance(other, RustVersion):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: "RustVersion") -> bool:
        if not isinstance(other, RustVersion):
            return NotImplemented
        return self.sort_key() >= other.sort_key()

    # Queries ------------------------------------------------------------

    def is_at_least(self, major: int, minor: int, patch: int = 0) -> bool:
        """
        Check the release numbers against a minimum, ignoring the channel.

        Example:
            >>> RustVersion.stable(1, 70, 0).is_at_least(1, 65, 3)
            True
        """
        return self.release >= (major, minor, patch)

    def is_since(self, spec: StableSpec) -> bool:
        """
        Check if this version is at or after a stable specification.

        Ignores the channel. A spec without a patch matches every patch
        release of its minor version.
        """
        if spec.patch is None:
            return (self.major, self.minor) >= (spec.major, spec.minor)
        return self.release >= (spec.major, spec.minor, spec.patch)

    def is_before(self, spec: StableSpec) -> bool:
        """Negation of is_since."""
        return not self.is_since(spec)

    def is_since_nightly(self, start: datetime.date) -> bool:
        """
        Check if this is a nightly dated on or after ``start``.

        Stable and beta versions are before every nightly; dev versions
        are after every nightly. A nightly without a known date matches
        neither this nor is_before_nightly.
        """
        kind = self.channel.kind
        if kind is ChannelKind.NIGHTLY:
            return self.channel.date is not None and self.channel.date >= start
        return kind is ChannelKind.DEV

    def is_before_nightly(self, start: datetime.date) -> bool:
        """
        Check if this version comes before the nightly dated ``start``.

        Stable and beta versions are before every nightly; dev versions
        are after every nightly.
        """
        kind = self.channel.kind
        if kind is ChannelKind.NIGHTLY:
            return self.channel.date is not None and self.channel.date < start
        return kind is not ChannelKind.DEV

    def is_stable(self) -> bool:
        return self.channel.kind is ChannelKind.STABLE

    def is_beta(self) -> bool:
        return self.channel.kind is ChannelKind.BETA

    def is_nightly(self) -> bool:
        return self.channel.kind is ChannelKind.NIGHTLY

    def is_dev(self) -> bool:
        return self.channel.kind is ChannelKind.DEV

    # Rendering ----------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a JSON-ready dictionary.

        Returns:
            Dictionary with release numbers, channel name and ISO dates
        """
        channel = self.channel
        return {
            "major": self.major,
            "minor": self.minor,
            "patch": self.patch,
            "channel": channel.kind.value,
            "beta_number": channel.number if isinstance(channel, Beta) else None,
            "nightly_date": (
                channel.date.isoformat()
                if isinstance(channel, Nightly) and channel.date
                else None
            ),
            "commit_date": self.commit_date.isoformat() if self.commit_date else None,
        }

    def __str__(self) -> str:
        """Render in the style of ``rustc --version`` without the commit hash."""
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.channel.suffix:
            text += f"-{self.channel.suffix}"
        if isinstance(self.channel, Nightly) and self.channel.date:
            text += f" ({self.channel.date.isoformat()})"
        return text


def compare_versions(a: RustVersion, b: RustVersion) -> int:
    """
    Compare two versions under the total order.

    Args:
        a: First version
        b: Second version

    Returns:
        -1 if a < b, 0 if neither is ordered before the other, 1 if a > b
    """
    key_a, key_b = a.sort_key(), b.sort_key()
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0

