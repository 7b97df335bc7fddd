"""
rustcprobe - detect the version and release channel of the Rust compiler.

Parses the banner printed by ``rustc --version`` into a comparable
RustVersion so that build logic can branch on the toolchain in use.

Example:
    >>> from rustcprobe import parse_version
    >>> version = parse_version("rustc 1.80.0-nightly (def5678 2024-06-01)")
    >>> version.is_nightly() and version.is_at_least(1, 75, 0)
    True
"""

from rustcprobe.core.exceptions import (
    ClippyDriverError,
    ConfigError,
    InvalidNumberError,
    MissingVersionNumberError,
    ProbeError,
    RustcProbeError,
    UnrecognizedChannelError,
    UnrecognizedFormatError,
    VersionParseError,
)
from rustcprobe.toolchain.probe import RustcProbe, detect_rust_version
from rustcprobe.version import (
    CHANNEL_PRECEDENCE,
    Beta,
    Channel,
    ChannelKind,
    Dev,
    Nightly,
    RustVersion,
    Stable,
    StableSpec,
    compare_versions,
    parse_version,
    try_parse_version,
)

__all__ = [
    # Version model
    "CHANNEL_PRECEDENCE",
    "Beta",
    "Channel",
    "ChannelKind",
    "Dev",
    "Nightly",
    "RustVersion",
    "Stable",
    "StableSpec",
    "compare_versions",
    # Parser
    "parse_version",
    "try_parse_version",
    # Probe
    "RustcProbe",
    "detect_rust_version",
    # Errors
    "RustcProbeError",
    "VersionParseError",
    "UnrecognizedFormatError",
    "ClippyDriverError",
    "MissingVersionNumberError",
    "InvalidNumberError",
    "UnrecognizedChannelError",
    "ProbeError",
    "ConfigError",
]
