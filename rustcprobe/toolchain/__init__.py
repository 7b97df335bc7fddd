"""
Compiler invocation for rustcprobe.

Obtains the raw ``rustc --version`` banner and hands it to the parser.
"""

from rustcprobe.toolchain.probe import (
    DEFAULT_TIMEOUT,
    RustcProbe,
    detect_rust_version,
)

__all__ = [
    "DEFAULT_TIMEOUT",
    "RustcProbe",
    "detect_rust_version",
]
