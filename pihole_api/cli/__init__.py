"""
Command Line Interface Package for the Pi-hole API Client

This package provides a modular CLI implementation with separated concerns:
- args.py: Argument parsing and validation
- formatters.py: JSON conversion and output
- logging_setup.py: Logging configuration
- main.py: Main orchestration and entry point

License: MIT
"""

from .main import main

__all__ = ["main"]
