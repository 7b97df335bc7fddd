"""
Centralized exception hierarchy for rustcprobe.

All failures raised by the library derive from RustcProbeError so callers
can treat "toolchain version unknown" with a single except clause.
"""

from typing import Optional


# ============================================================================
# Base Exceptions
# ============================================================================


class RustcProbeError(Exception):
    """Base exception for all rustcprobe errors."""

    pass


# ============================================================================
# Parse Exceptions
# ============================================================================


class VersionParseError(RustcProbeError):
    """
    Base exception for version banner parse failures.

    Attributes:
        banner: The raw banner text that failed to parse (if known)
        expected: What the parser was looking for
        found: What it found instead
    """

    def __init__(
        self,
        expected: str,
        found: Optional[str] = None,
        banner: Optional[str] = None,
    ):
        self.expected = expected
        self.found = found
        self.banner = banner
        msg = f"expected {expected}"
        if found is not None:
            msg += f", found {found!r}"
        if banner is not None:
            msg += f" (in {banner!r})"
        super().__init__(msg)


class UnrecognizedFormatError(VersionParseError):
    """The input has no discernible numeric version token at all."""

    pass


class ClippyDriverError(UnrecognizedFormatError):
    """The banner was printed by clippy-driver instead of rustc."""

    pass


class MissingVersionNumberError(VersionParseError):
    """A recognizable banner was found but its version token is absent."""

    pass


class InvalidNumberError(VersionParseError):
    """A numeric field is not a number or exceeds the supported bound."""

    pass


class UnrecognizedChannelError(VersionParseError):
    """A -<suffix> is present but names no known release channel."""

    pass


# ============================================================================
# Probe / Configuration Exceptions
# ============================================================================


class ProbeError(RustcProbeError):
    """Raised when running the compiler to obtain its banner fails."""

    def __init__(self, command: str, reason: str):
        self.command = command
        self.reason = reason
        super().__init__(f"Failed to run `{command}`: {reason}")


class ConfigError(RustcProbeError):
    """Configuration parsing or validation error."""

    pass
