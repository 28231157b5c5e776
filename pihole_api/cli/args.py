"""
Command Line Argument Parsing Module

This module handles argument parsing and validation for the Pi-hole API CLI.

License: MIT
"""

import argparse
import logging
from typing import Optional, Sequence

from pihole_api.config import API_KEY_ENV_VAR, HOST_ENV_VAR

logger = logging.getLogger(__name__)

# Subcommands that need the API key
AUTHENTICATED_COMMANDS = frozenset(
    {
        "top-items",
        "queries",
        "enable",
        "disable",
        "list-add",
        "list-remove",
        "list-domains",
        "custom-dns",
        "max-logage",
    }
)


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="pihole-api",
        description="Query a Pi-hole and output JSON data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  %(prog)s --host http://192.168.0.100 summary
  %(prog)s --host http://pi.hole --api-key KEY top-items --count 5
  %(prog)s list-add black ads.example.com tracker.example.com

Environment:
  {HOST_ENV_VAR}     Used when --host is not given
  {API_KEY_ENV_VAR}      Used when --api-key is not given

Output:
  JSON on stdout. Logs and errors on stderr.
        """,
    )

    parser.add_argument("--host", help=f"Pi-hole base URL including scheme (default: ${HOST_ENV_VAR})")
    parser.add_argument("--api-key", help=f"Pi-hole API key (default: ${API_KEY_ENV_VAR})")
    parser.add_argument(
        "--timeout",
        type=int,
        default=12,
        help="Read timeout in seconds (default: %(default)s)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging output to stderr")
    parser.add_argument("--quiet", action="store_true", help="Only log warnings and errors")
    parser.add_argument("--log-file", help="Also write logs to this file")

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    subparsers.add_parser("summary", help="Formatted statistics for today")
    subparsers.add_parser("summary-raw", help="Raw statistics for today")
    subparsers.add_parser("versions", help="Installed and latest versions")

    top_items = subparsers.add_parser("top-items", help="Top domains and ads")
    top_items.add_argument("--count", type=int, default=None, help="Number of entries (default: 10)")

    queries = subparsers.add_parser("queries", help="Query log")
    queries.add_argument("--count", type=int, default=None, help="Number of entries (default: 10)")

    subparsers.add_parser("enable", help="Enable blocking")

    disable = subparsers.add_parser("disable", help="Disable blocking")
    disable.add_argument("seconds", type=int, nargs="?", default=None, help="Duration (default: until enabled)")

    for name, verb in (("list-add", "Add domains to"), ("list-remove", "Remove domains from")):
        list_parser = subparsers.add_parser(name, help=f"{verb} a list")
        list_parser.add_argument("list_name", metavar="LIST", help="white, black, white_regex, ...")
        list_parser.add_argument("domains", metavar="DOMAIN", nargs="+")

    list_domains = subparsers.add_parser("list-domains", help="Entries of a list")
    list_domains.add_argument("list_name", metavar="LIST")

    subparsers.add_parser("custom-dns", help="Local DNS records")
    subparsers.add_parser("max-logage", help="Statistics window in hours")

    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Args:
        argv: Arguments to parse (default: sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logger.debug(f"Parsed arguments: command={args.command}")

    validate_args(args)

    return args


def validate_args(args: argparse.Namespace) -> None:
    """
    Validate parsed arguments.

    Args:
        args: Parsed arguments namespace

    Raises:
        ValueError: If arguments are invalid
    """
    if args.timeout <= 0:
        raise ValueError("Timeout must be greater than 0")

    if getattr(args, "count", None) is not None and args.count < 0:
        raise ValueError("Count cannot be negative")

    if getattr(args, "seconds", None) is not None and args.seconds < 0:
        raise ValueError("Seconds cannot be negative")

    logger.debug("Arguments validated successfully")
