"""
Configuration for the Pi-hole API Client
========================================

Two immutable configuration types gate which operations a client may call:
PiHoleAPIConfig carries only the host, PiHoleAPIConfigWithKey adds the API
key. Only the latter can back an AuthenticatedPiHoleAPI.

License: MIT
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from .exceptions import PiHoleConfigurationError, PiHoleMissingAPIKeyError

HOST_ENV_VAR = "PIHOLE_API_HOST"
API_KEY_ENV_VAR = "PIHOLE_API_KEY"


def _normalize_host(host: str) -> str:
    if not isinstance(host, str) or not host.startswith(("http://", "https://")):
        raise PiHoleConfigurationError(
            "Pi-hole host must begin with http:// or https://",
            details={"parameter": "host", "value": host},
        )
    return host.rstrip("/")


@dataclass(frozen=True)
class PiHoleAPIConfig:
    """
    Host-only configuration for unauthenticated endpoints.

    Attributes:
        host: Base URL including the scheme, e.g. ``"http://192.168.0.100"``
    """

    host: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "host", _normalize_host(self.host))

    @classmethod
    def from_env(cls, host: Optional[str] = None) -> "PiHoleAPIConfig":
        """Build a config, falling back to ``$PIHOLE_API_HOST``."""
        resolved = host or os.environ.get(HOST_ENV_VAR)
        if not resolved:
            raise PiHoleConfigurationError(
                f"No Pi-hole host given and {HOST_ENV_VAR} is not set",
                details={"parameter": "host"},
            )
        return cls(resolved)


@dataclass(frozen=True)
class PiHoleAPIConfigWithKey:
    """
    Host and API key configuration for authenticated endpoints.

    The key is excluded from ``repr`` so it never ends up in logs.

    Attributes:
        host: Base URL including the scheme
        api_key: The appliance's API token (``WEBPASSWORD`` hash)
    """

    host: str
    api_key: str = field(repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "host", _normalize_host(self.host))
        if not self.api_key:
            raise PiHoleMissingAPIKeyError("An API key is required for authenticated Pi-hole endpoints")

    @classmethod
    def from_env(cls, host: Optional[str] = None, api_key: Optional[str] = None) -> "PiHoleAPIConfigWithKey":
        """Build a config, falling back to ``$PIHOLE_API_HOST`` and ``$PIHOLE_API_KEY``."""
        resolved_host = host or os.environ.get(HOST_ENV_VAR)
        if not resolved_host:
            raise PiHoleConfigurationError(
                f"No Pi-hole host given and {HOST_ENV_VAR} is not set",
                details={"parameter": "host"},
            )
        resolved_key = api_key or os.environ.get(API_KEY_ENV_VAR, "")
        return cls(resolved_host, resolved_key)


__all__ = ["API_KEY_ENV_VAR", "HOST_ENV_VAR", "PiHoleAPIConfig", "PiHoleAPIConfigWithKey"]
