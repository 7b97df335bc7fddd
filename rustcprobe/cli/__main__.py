"""
Entry point for running the rustcprobe CLI as a module.

Usage: python -m rustcprobe.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
