"""
Custom exceptions for the Pi-hole API Client.

This module defines all custom exceptions used throughout the pihole-api
library. All exceptions inherit from PiHoleAPIError for easy catching of
library-specific errors.

The per-request taxonomy is closed: every failed call raises exactly one of
PiHoleTransportError (and its subclasses), PiHoleDecodeError,
PiHoleMissingAPIKeyError, PiHoleInvalidListError or
PiHoleBackendUnavailableError. Callers match on the type, never on the message.

Example usage:
    try:
        api = AuthenticatedPiHoleAPI(PiHoleAPIConfigWithKey(host, key))
        api.list_add(["example.com"], "not_a_list")
    except PiHoleInvalidListError:
        print("No such list")
    except PiHoleAPIError as e:
        print(f"Pi-hole error: {e}")

License: MIT
"""

from typing import Any, Optional

import requests


class PiHoleAPIError(Exception):
    """
    Base exception for all Pi-hole API Client errors.

    Catching this exception will catch all library-specific errors.

    Attributes:
        message: Human-readable error message
        details: Optional dictionary with additional error context

    Examples:
        >>> try:
        ...     api.get_cache_info()
        ... except PiHoleBackendUnavailableError:
        ...     print("FTL is not running")
        ... except PiHoleAPIError as e:
        ...     print(f"Other error: {e}")
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        """
        Initialize PiHoleAPIError.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class PiHoleTransportError(PiHoleAPIError):
    """
    Raised when the underlying HTTP request fails.

    This exception is raised when:
    - The appliance is unreachable (connection refused, DNS failure)
    - SSL/TLS handshake fails
    - The transport reports any other request failure

    Attributes:
        message: Human-readable error message
        details: May include 'operation', 'error_type', 'original_error'
    """


class PiHoleTimeoutError(PiHoleTransportError):
    """
    Raised when the transport gives up waiting for the appliance.

    Attributes:
        message: Human-readable error message
        details: May include 'operation', 'timeout'
    """


class PiHoleHTTPError(PiHoleTransportError):
    """
    Raised when the appliance answers with a non-200 status code.

    Attributes:
        message: Human-readable error message
        details: May include 'operation', 'status_code', 'response_text'
        status_code: HTTP status code if available
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize PiHoleHTTPError.

        Args:
            message: Human-readable error message
            status_code: HTTP status code if available
            details: Optional dictionary with additional error context
        """
        super().__init__(message, details)
        self.status_code = status_code
        if status_code and self.details is not None:
            self.details["status_code"] = status_code


class PiHoleDecodeError(PiHoleAPIError):
    """
    Raised when a response body cannot be decoded into its declared shape.

    This exception is raised when:
    - The body is not valid JSON
    - A required field or wrapper key is missing
    - A field has the wrong type or a malformed stringified value
    - An enumeration ordinal is out of range
    - A positional row is shorter than expected

    Attributes:
        message: Human-readable error message
        details: May include 'field', 'value', 'operation'
    """


class PiHoleMissingAPIKeyError(PiHoleAPIError):
    """Raised when an authenticated operation is set up without an API key."""


class PiHoleInvalidListError(PiHoleAPIError):
    """
    Raised when the appliance answers a list request with "Invalid list".

    The appliance does not validate list names up front; this is the only
    signal that a list name such as ``"NOT_A_LIST"`` was rejected.
    """


class PiHoleBackendUnavailableError(PiHoleAPIError):
    """Raised when the appliance reports that its FTL backend is not running."""


class PiHoleConfigurationError(PiHoleAPIError, ValueError):
    """
    Raised when client configuration is invalid.

    Only raised while constructing a configuration, never by a request.

    Attributes:
        message: Human-readable error message
        details: May include 'parameter', 'value'
    """


def wrap_transport_error(
    original_error: requests.exceptions.RequestException, operation: str, redacted_error: str
) -> PiHoleTransportError:
    """
    Wrap a requests exception in PiHoleTransportError.

    Args:
        original_error: The original exception
        operation: Endpoint query that failed (e.g. "summaryRaw")
        redacted_error: String form of the error with any API key removed

    Returns:
        PiHoleTransportError (or PiHoleTimeoutError) with context
    """
    if isinstance(original_error, requests.exceptions.Timeout):
        return PiHoleTimeoutError(
            f"Request for {operation} timed out",
            details={
                "operation": operation,
                "error_type": type(original_error).__name__,
                "original_error": redacted_error,
            },
        )

    message = f"Request for {operation} failed"
    if isinstance(original_error, requests.exceptions.ConnectionError):
        message = f"Failed to connect to Pi-hole for {operation}"

    return PiHoleTransportError(
        message,
        details={
            "operation": operation,
            "error_type": type(original_error).__name__,
            "original_error": redacted_error,
        },
    )


__all__ = [
    "PiHoleAPIError",
    "PiHoleBackendUnavailableError",
    "PiHoleConfigurationError",
    "PiHoleDecodeError",
    "PiHoleHTTPError",
    "PiHoleInvalidListError",
    "PiHoleMissingAPIKeyError",
    "PiHoleTimeoutError",
    "PiHoleTransportError",
    "wrap_transport_error",
]
