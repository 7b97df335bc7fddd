"""
rustcprobe/toolchain/probe.py

Runs the Rust compiler to obtain its version banner.
"""

import logging
import os
import subprocess
from typing import Iterable, List, Optional

from ..core.exceptions import ClippyDriverError, ProbeError
from ..version.model import RustVersion
from ..version.parser import DEFAULT_PROGRAM_NAMES, parse_version

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0


class RustcProbe:
    """
    Invoke ``rustc --version`` and parse the result.

    The compiler is taken from the ``rustc`` argument, else the RUSTC
    environment variable, else ``rustc`` on PATH. A wrapper (e.g. sccache)
    is taken from ``wrapper``, else RUSTC_WRAPPER; an empty value means no
    wrapper.

    Example:
        >>> probe = RustcProbe()
        >>> version = probe.detect()
        >>> version.is_at_least(1, 70, 0)
        True
    """

    def __init__(
        self,
        rustc: Optional[str] = None,
        wrapper: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        program_names: Iterable[str] = DEFAULT_PROGRAM_NAMES,
    ):
        self.rustc = rustc or os.environ.get("RUSTC") or "rustc"
        wrapper = wrapper if wrapper is not None else os.environ.get("RUSTC_WRAPPER")
        self.wrapper = wrapper or None
        self.timeout = timeout
        self.program_names = tuple(program_names)

    def command(self, clippy: bool = False) -> List[str]:
        """
        Build the version command line.

        Args:
            clippy: Pass --rustc so clippy-driver forwards to the real compiler

        Returns:
            Argument list
        """
        cmd = [self.wrapper] if self.wrapper else []
        cmd.append(self.rustc)
        if clippy:
            cmd.append("--rustc")
        cmd.append("--version")
        return cmd

    def read_banner(self, clippy: bool = False) -> str:
        """
        Run the compiler and return its stripped standard output.

        Raises:
            ProbeError: If the compiler cannot be run, times out, exits with
                an error or prints undecodable output
        """
        cmd = self.command(clippy)
        display = " ".join(cmd)
        logger.debug(f"Running {display}")

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise ProbeError(display, f"executable not found ({e})") from e
        except subprocess.TimeoutExpired as e:
            raise ProbeError(display, f"timed out after {self.timeout}s") from e
        except OSError as e:
            raise ProbeError(display, str(e)) from e

        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace").strip()
            raise ProbeError(
                display, f"exited with status {result.returncode}: {stderr[:200]}"
            )

        try:
            banner = result.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ProbeError(display, f"output is not valid UTF-8 ({e})") from e

        return banner.strip()

    def detect(self) -> RustVersion:
        """
        Detect the compiler version.

        If the configured compiler turns out to be clippy-driver, the
        command is retried once with --rustc.

        Returns:
            Parsed RustVersion

        Raises:
            ProbeError: If running the compiler fails
            VersionParseError: If the banner cannot be parsed
        """
        banner = self.read_banner()
        try:
            version = parse_version(banner, self.program_names)
        except ClippyDriverError:
            logger.debug(f"{self.rustc} is clippy-driver, retrying with --rustc")
            banner = self.read_banner(clippy=True)
            version = parse_version(banner, self.program_names)

        logger.info(f"Detected rustc {version}")
        return version


def detect_rust_version(
    rustc: Optional[str] = None,
    wrapper: Optional[str] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> RustVersion:
    """
    Detect the version of the Rust compiler in use.

    Convenience wrapper around RustcProbe.detect().

    Args:
        rustc: Compiler executable (default: $RUSTC or "rustc")
        wrapper: Compiler wrapper (default: $RUSTC_WRAPPER)
        timeout: Seconds to wait for the compiler

    Returns:
        Parsed RustVersion
    """
    return RustcProbe(rustc=rustc, wrapper=wrapper, timeout=timeout).detect()
