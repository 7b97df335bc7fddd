"""
rustcprobe/version/channel.py

Release channels of the Rust compiler.

A channel is one of a closed set of frozen variants: Stable, Beta, Nightly
and Dev. Code that branches on a channel should test ``channel.kind``
against ChannelKind so that an unexpected value fails loudly.
"""

from dataclasses import dataclass
import datetime
from enum import Enum
from typing import ClassVar, Dict, Optional, Tuple, Union


class ChannelKind(Enum):
    """Tag identifying a channel variant."""

    STABLE = "stable"
    BETA = "beta"
    NIGHTLY = "nightly"
    DEV = "dev"


# Ordering of channels for versions sharing (major, minor, patch).
# Follows the release train: a nightly becomes a beta, which becomes the
# stable release. Locally built dev compilers rank after everything.
CHANNEL_PRECEDENCE: Dict[ChannelKind, int] = {
    ChannelKind.NIGHTLY: 0,
    ChannelKind.BETA: 1,
    ChannelKind.STABLE: 2,
    ChannelKind.DEV: 3,
}


@dataclass(frozen=True)
class Stable:
    """The stable compiler."""

    kind: ClassVar[ChannelKind] = ChannelKind.STABLE

    @property
    def suffix(self) -> str:
        return ""

    def secondary_key(self) -> Tuple:
        return ()


@dataclass(frozen=True)
class Beta:
    """
    The beta compiler.

    Attributes:
        number: Beta iteration from ``-beta.N``; None for a bare ``-beta``
    """

    number: Optional[int] = None

    kind: ClassVar[ChannelKind] = ChannelKind.BETA

    @property
    def suffix(self) -> str:
        if self.number is None:
            return "beta"
        return f"beta.{self.number}"

    def secondary_key(self) -> Tuple:
        # A bare "beta" sorts before any numbered beta
        if self.number is None:
            return (0, 0)
        return (1, self.number)


@dataclass(frozen=True)
class Nightly:
    """
    The nightly compiler.

    Attributes:
        date: Date of the nightly build, when the banner reports one
    """

    date: Optional[datetime.date] = None

    kind: ClassVar[ChannelKind] = ChannelKind.NIGHTLY

    @property
    def suffix(self) -> str:
        return "nightly"

    def secondary_key(self) -> Tuple:
        if self.date is None:
            return (0, datetime.date.min)
        return (1, self.date)


@dataclass(frozen=True)
class Dev:
    """
    A development compiler.

    These are built locally from source instead of being distributed
    through rustup, and carry no channel date.
    """

    kind: ClassVar[ChannelKind] = ChannelKind.DEV

    @property
    def suffix(self) -> str:
        return "dev"

    def secondary_key(self) -> Tuple:
        return ()


Channel = Union[Stable, Beta, Nightly, Dev]


def channel_sort_key(channel: Channel) -> Tuple:
    """
    Ordering key of a channel among versions with equal release numbers.

    Args:
        channel: Channel variant

    Returns:
        Tuple of (precedence, secondary key)
    """
    return (CHANNEL_PRECEDENCE[channel.kind], channel.secondary_key())
