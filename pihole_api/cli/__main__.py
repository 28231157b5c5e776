"""
CLI package main module for direct execution.

This allows the CLI to be run with: python -m pihole_api.cli

License: MIT
"""

import sys

from .main import main

if __name__ == "__main__":
    if len(sys.argv) > 0 and sys.argv[0].endswith("__main__.py"):
        sys.argv[0] = "pihole-api"

    sys.exit(main())
