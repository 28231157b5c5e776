"""
Pi-hole API Client Package
==========================

Request building and authentication (http.py, auth.py), response sentinel
detection (error_handler.py), structural decoding (parser.py) and the endpoint
surface (main.py).
"""

from .main import DEFAULT_COUNT, KNOWN_LISTS, AuthenticatedPiHoleAPI, PiHoleAPI

__all__ = ["DEFAULT_COUNT", "KNOWN_LISTS", "AuthenticatedPiHoleAPI", "PiHoleAPI"]
