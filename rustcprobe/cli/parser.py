"""
rustcprobe CLI argument parser.

This module implements the command-line interface for rustcprobe using argparse.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Get version from package
try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("rustcprobe")
except PackageNotFoundError:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


def _positive_float(value: str) -> float:
    """argparse type for a strictly positive number of seconds."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if not number > 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return number


class CLI:
    """rustcprobe command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="rustcprobe",
            description="rustcprobe - detect the Rust compiler version and channel",
            epilog='Use "rustcprobe COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"rustcprobe {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./rustcprobe.yaml)",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_detect_command(subparsers)
        self._add_parse_command(subparsers)
        self._add_check_command(subparsers)

        return parser

    def _add_probe_arguments(self, parser):
        """Add options controlling how the compiler is run."""
        parser.add_argument(
            "--rustc",
            metavar="PATH",
            help="Compiler executable (default: $RUSTC or rustc)",
        )
        parser.add_argument(
            "--wrapper",
            metavar="CMD",
            help="Compiler wrapper (default: $RUSTC_WRAPPER)",
        )
        parser.add_argument(
            "--timeout",
            type=_positive_float,
            metavar="SECONDS",
            help="Seconds to wait for the compiler (default: 5)",
        )

    def _add_detect_command(self, subparsers):
        """Add 'detect' subcommand."""
        parser = subparsers.add_parser(
            "detect",
            help="Detect the compiler version",
            description="Run the compiler and print its parsed version",
        )
        self._add_probe_arguments(parser)
        parser.add_argument(
            "--json", action="store_true", help="Print the version as JSON"
        )

    def _add_parse_command(self, subparsers):
        """Add 'parse' subcommand."""
        parser = subparsers.add_parser(
            "parse",
            help="Parse a version banner",
            description="Parse the output of `rustc --version` given as text",
        )
        parser.add_argument(
            "banner",
            metavar="BANNER",
            help='Banner text, or "-" to read from standard input',
        )
        parser.add_argument(
            "--json", action="store_true", help="Print the version as JSON"
        )

    def _add_check_command(self, subparsers):
        """Add 'check' subcommand."""
        parser = subparsers.add_parser(
            "check",
            help="Check the compiler against requirements",
            description=(
                "Exit 0 if every given condition holds, 1 if any fails, "
                "2 if the version could not be determined"
            ),
        )
        parser.add_argument(
            "--since",
            metavar="X.Y[.Z]",
            help="Minimum stable release (channel ignored)",
        )
        parser.add_argument(
            "--before",
            metavar="X.Y[.Z]",
            help="Release the compiler must be older than",
        )
        parser.add_argument(
            "--nightly-since",
            metavar="YYYY-MM-DD",
            help="Require a nightly dated on or after this day (dev always passes)",
        )
        parser.add_argument(
            "--channel",
            choices=["stable", "beta", "nightly", "dev"],
            help="Require this release channel",
        )
        parser.add_argument(
            "--banner",
            metavar="TEXT",
            help="Check this banner instead of running the compiler",
        )
        self._add_probe_arguments(parser)

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        # Configure logging
        self._configure_logging(parsed_args)

        # Check if command specified
        if not parsed_args.command:
            self.parser.print_help()
            return 1

        # Dispatch to command handler
        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except Exception as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.WARNING
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        # Command module mapping
        command_map = {
            "detect": "rustcprobe.cli.commands.detect",
            "parse": "rustcprobe.cli.commands.parse",
            "check": "rustcprobe.cli.commands.check",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
