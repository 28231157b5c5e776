"""
HTTP Session Factory for the Pi-hole API Client
===============================================

Builds the default transport: a ``requests.Session`` whose adapter never
retries. Retry policy belongs to the caller, so a failed request surfaces as
exactly one PiHoleTransportError.

License: MIT
"""

import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from . import __version__

# Reduce urllib3 logging noise; connection failures are reported as exceptions
logging.getLogger("urllib3.connectionpool").setLevel(logging.ERROR)

logger = logging.getLogger("pihole-api")


def create_pihole_session(pool_maxsize: int = 5) -> requests.Session:
    """
    Create a requests Session configured for the Pi-hole API.

    Args:
        pool_maxsize: Connections kept per host for concurrent callers

    Returns:
        requests.Session with retries disabled on both schemes
    """
    session = requests.Session()

    no_retries = Retry(
        total=0,
        connect=0,
        read=0,
        redirect=0,
        status=0,
        raise_on_status=False,
        raise_on_redirect=False,
    )

    adapter = HTTPAdapter(
        pool_connections=1,
        pool_maxsize=pool_maxsize,
        max_retries=no_retries,
        pool_block=False,
    )

    session.mount("https://", adapter)
    session.mount("http://", adapter)

    session.headers.update(
        {
            "User-Agent": f"pihole-api/{__version__}",
            "Accept": "application/json",
            "Cache-Control": "no-cache",
        }
    )

    logger.debug("🔧 Created Pi-hole session with retries disabled")
    return session


__all__ = ["create_pihole_session"]
