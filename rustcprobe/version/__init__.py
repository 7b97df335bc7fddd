"""
Rust compiler version model and banner parser.

This module provides functionality for:
- Representing a compiler version with its release channel
- Ordering versions and querying minimum supported versions
- Parsing the banner printed by ``rustc --version``
"""

from rustcprobe.version.channel import (
    CHANNEL_PRECEDENCE,
    Beta,
    Channel,
    ChannelKind,
    Dev,
    Nightly,
    Stable,
)
from rustcprobe.version.model import (
    MAX_COMPONENT,
    RustVersion,
    StableSpec,
    compare_versions,
)
from rustcprobe.version.parser import (
    DEFAULT_PROGRAM_NAMES,
    parse_version,
    try_parse_version,
)

__all__ = [
    # Channels
    "CHANNEL_PRECEDENCE",
    "Beta",
    "Channel",
    "ChannelKind",
    "Dev",
    "Nightly",
    "Stable",
    # Model
    "MAX_COMPONENT",
    "RustVersion",
    "StableSpec",
    "compare_versions",
    # Parser
    "DEFAULT_PROGRAM_NAMES",
    "parse_version",
    "try_parse_version",
]
