"""
Main CLI Orchestration Module

This module provides the main entry point for the Pi-hole API CLI. It builds
the right client for the requested subcommand, runs one API call and prints
the result as JSON.

License: MIT
"""

import argparse
import logging
import sys
import time
from typing import Any, Callable, Optional, Sequence

from pihole_api import AuthenticatedPiHoleAPI, PiHoleAPI, __version__
from pihole_api.config import PiHoleAPIConfig, PiHoleAPIConfigWithKey
from pihole_api.exceptions import PiHoleAPIError

from .args import AUTHENTICATED_COMMANDS, parse_args
from .formatters import format_json_output, print_error_suggestions, print_json_output
from .logging_setup import setup_logging

logger = logging.getLogger(__name__)

COMMANDS: dict[str, Callable[[Any, argparse.Namespace], Any]] = {
    "summary": lambda api, args: api.get_summary(),
    "summary-raw": lambda api, args: api.get_summary_raw(),
    "versions": lambda api, args: api.get_versions(),
    "top-items": lambda api, args: api.get_top_items(args.count),
    "queries": lambda api, args: api.get_all_queries(args.count),
    "enable": lambda api, args: api.enable(),
    "disable": lambda api, args: api.disable(args.seconds),
    "list-add": lambda api, args: api.list_add(args.domains, args.list_name),
    "list-remove": lambda api, args: api.list_remove(args.domains, args.list_name),
    "list-domains": lambda api, args: api.list_get_domains(args.list_name),
    "custom-dns": lambda api, args: api.get_custom_dns_records(),
    "max-logage": lambda api, args: api.get_max_logage(),
}


def create_client(args: argparse.Namespace) -> PiHoleAPI:
    """Build an authenticated client only when the subcommand needs the key."""
    timeout = (3, args.timeout)
    if args.command in AUTHENTICATED_COMMANDS:
        return AuthenticatedPiHoleAPI(PiHoleAPIConfigWithKey.from_env(args.host, args.api_key), timeout=timeout)
    return PiHoleAPI(PiHoleAPIConfig.from_env(args.host), timeout=timeout)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for the CLI application.

    Returns:
        Process exit status
    """
    start_time = time.time()

    try:
        args = parse_args(argv)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    setup_logging(debug=args.debug, quiet=args.quiet, log_file=args.log_file)
    logger.info(f"Pi-hole API Client v{__version__}: {args.command}")

    try:
        with create_client(args) as api:
            result = COMMANDS[args.command](api, args)
            host = api.host

        elapsed = time.time() - start_time
        print_json_output(format_json_output(result, args.command, host, elapsed))
        logger.info(f"{args.command} completed in {elapsed:.2f}s")
        return 0

    except KeyboardInterrupt:
        elapsed = time.time() - start_time
        print(f"Operation cancelled by user after {elapsed:.2f}s", file=sys.stderr)
        return 1

    except PiHoleAPIError as e:
        elapsed = time.time() - start_time
        logger.error(f"{args.command} failed after {elapsed:.2f}s: {e}")
        print(f"Error after {elapsed:.2f}s: {e}", file=sys.stderr)
        print_error_suggestions(debug=args.debug)
        return 1


if __name__ == "__main__":
    sys.exit(main())
