"""
Logging Configuration Module

Stdout is reserved for the JSON result, so every handler installed here writes
to stderr or to the optional ``--log-file``.

License: MIT
"""

import logging
import sys
from typing import Optional

LIBRARY_LOGGER = "pihole-api"

# HTTP stack loggers: (level when debugging, level otherwise)
THIRD_PARTY_LEVELS = {
    "urllib3": (logging.DEBUG, logging.WARNING),
    "urllib3.connectionpool": (logging.DEBUG, logging.ERROR),
    "requests": (logging.DEBUG, logging.WARNING),
}

_DEBUG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(funcName)s:%(lineno)d - %(message)s"
_DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

_logging_configured = False


def resolve_level(debug: bool = False, quiet: bool = False) -> int:
    """``--debug`` wins over ``--quiet``; neither means INFO."""
    if debug:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def setup_logging(debug: bool = False, quiet: bool = False, log_file: Optional[str] = None) -> None:
    """
    Configure root handlers for the CLI. Only the first call has any effect.

    Args:
        debug: Log everything, including request URLs (key redacted) and timings
        quiet: Only log warnings and errors
        log_file: Optional path that receives the same records as stderr
    """
    global _logging_configured

    if _logging_configured:
        return
    _logging_configured = True

    level = resolve_level(debug, quiet)
    formatter = logging.Formatter(_DEBUG_FORMAT if debug else _DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    for name, (debug_level, default_level) in THIRD_PARTY_LEVELS.items():
        logging.getLogger(name).setLevel(debug_level if debug else default_level)
    logging.getLogger(LIBRARY_LOGGER).setLevel(level)

    logger = logging.getLogger(__name__)
    logger.debug(f"Logging configured: level={logging.getLevelName(level)}, log_file={log_file}")
