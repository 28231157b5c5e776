"""
Output Formatting Module

This module converts API records into JSON-serializable data and prints them.

License: MIT
"""

import dataclasses
import json
import logging
import sys
from datetime import datetime, timedelta
from enum import Enum
from ipaddress import IPv4Address, IPv6Address
from typing import Any

from pihole_api import __version__

logger = logging.getLogger(__name__)


def to_jsonable(value: Any) -> Any:
    """
    Convert a record (or any nesting of records) into plain JSON types.

    Enums become their member name, datetimes ISO 8601 strings, durations
    seconds as float, and IP addresses strings.
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {field.name: to_jsonable(getattr(value, field.name)) for field in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, timedelta):
        return value.total_seconds()
    if isinstance(value, (IPv4Address, IPv6Address)):
        return str(value)
    if isinstance(value, dict):
        return {str(key): to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    return value


def format_json_output(result: Any, command: str, host: str, elapsed_time: float) -> dict:
    """
    Wrap a command result with query metadata.

    Args:
        result: Value returned by the API call
        command: CLI subcommand that produced it
        host: Pi-hole base URL
        elapsed_time: Seconds spent on the call

    Returns:
        JSON-serializable output dictionary
    """
    logger.debug("Formatting complete JSON output")
    return {
        "command": command,
        "result": to_jsonable(result),
        "query_timestamp": datetime.now().isoformat(),
        "query_host": host,
        "client_version": __version__,
        "elapsed_time": elapsed_time,
    }


def print_json_output(json_data: dict) -> None:
    """Print JSON output to stdout."""
    logger.debug("Outputting JSON to stdout")
    print(json.dumps(json_data, indent=2))


def print_error_suggestions(debug: bool = False) -> None:
    """
    Print helpful error suggestions.

    Args:
        debug: Whether debug mode is enabled
    """
    if debug:
        import traceback

        traceback.print_exc(file=sys.stderr)
    else:
        print("\nTroubleshooting suggestions:", file=sys.stderr)
        print("1. Check that --host includes the scheme, e.g. http://192.168.0.100", file=sys.stderr)
        print("2. Verify the API key (Settings > API in the web interface)", file=sys.stderr)
        print("3. Make sure the FTL service is running (pihole status)", file=sys.stderr)
        print("4. Try with --debug for more detailed error information", file=sys.stderr)
