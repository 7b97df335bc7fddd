"""
Entry point for running rustcprobe as a module.

Usage: python -m rustcprobe [command] [options]
"""

from rustcprobe.cli.parser import main

if __name__ == "__main__":
    main()
