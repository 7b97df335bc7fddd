"""
Core functionality for rustcprobe.

This package contains the foundational modules that other components depend on.
"""

from .exceptions import (
    RustcProbeError,
    VersionParseError,
    UnrecognizedFormatError,
    ClippyDriverError,
    MissingVersionNumberError,
    InvalidNumberError,
    UnrecognizedChannelError,
    ProbeError,
    ConfigError,
)

__all__ = [
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
