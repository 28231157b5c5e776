"""
HTTP Request Handling for the Pi-hole API Client
================================================

This module builds request URLs, performs the single GET per call, and runs
the sentinel detector on the raw body before JSON decoding.

"""

import json
import logging
import time
from typing import Any, Optional
from urllib.parse import quote_plus

import requests

from pihole_api.client.auth import APIKeyAuthenticator, QueryParams
from pihole_api.client.error_handler import check_response_sentinels
from pihole_api.exceptions import (
    PiHoleDecodeError,
    PiHoleHTTPError,
    PiHoleMissingAPIKeyError,
    wrap_transport_error,
)

logger = logging.getLogger("pihole-api")

API_PATH = "/admin/api.php"
DB_API_PATH = "/admin/api_db.php"


def build_query(params: QueryParams) -> str:
    """
    Encode ordered query parameters.

    A value of None produces a bare flag, so ``[("summaryRaw", None)]``
    encodes to ``summaryRaw`` exactly as the appliance documents it.

    Examples:
        >>> build_query([("list", "white"), ("add", "a.example b.example")])
        'list=white&add=a.example+b.example'
    """
    parts = []
    for name, value in params:
        if value is None:
            parts.append(quote_plus(name))
        else:
            parts.append(f"{quote_plus(name)}={quote_plus(str(value))}")
    return "&".join(parts)


class PiHoleRequestHandler:
    """
    Issues GET requests against the appliance.

    The session is the transport: anything with a ``requests.Session``-style
    ``get(url, timeout=...)`` returning an object with ``status_code`` and
    ``text`` works, which is how the tests run without a live appliance.
    """

    def __init__(
        self,
        session: requests.Session,
        host: str,
        authenticator: Optional[APIKeyAuthenticator] = None,
        timeout: Optional[tuple] = (3, 12),
        instrumentation: Optional[Any] = None,
    ):
        """
        Initialize the request handler.

        Args:
            session: HTTP session to use
            host: Base URL including the scheme, without trailing slash
            authenticator: Attaches the API key to authenticated requests
            timeout: Request timeout (connect, read) passed to the session
            instrumentation: Optional performance instrumentation
        """
        self.session = session
        self.host = host
        self.authenticator = authenticator
        self.timeout = timeout
        self.instrumentation = instrumentation

    def build_url(self, path: str, params: QueryParams) -> str:
        """Compose ``host + path + "?" + encoded params``."""
        query = build_query(params)
        return f"{self.host}{path}?{query}" if query else f"{self.host}{path}"

    def _redact(self, text: str) -> str:
        return self.authenticator.redact(text) if self.authenticator else text

    def get_text(self, path: str, params: QueryParams, authenticated: bool = False) -> str:
        """
        Perform one GET and return the body after sentinel checks.

        Args:
            path: API_PATH or DB_API_PATH
            params: Ordered query parameters, endpoint selector first
            authenticated: Append the ``auth`` parameter

        Returns:
            Raw response text

        Raises:
            PiHoleMissingAPIKeyError: authenticated without an authenticator
            PiHoleTransportError: request failed or returned a non-200 status
            PiHoleInvalidListError: "Invalid list" sentinel
            PiHoleBackendUnavailableError: FTL not running sentinel
        """
        operation = params[0][0] if params else path

        if authenticated:
            if self.authenticator is None:
                raise PiHoleMissingAPIKeyError(
                    f"{operation} requires an API key",
                    details={"operation": operation},
                )
            params = self.authenticator.apply(params)

        url = self.build_url(path, params)
        timer_name = f"api_request_{operation}"
        start_time = self.instrumentation.start_timer(timer_name) if self.instrumentation else time.time()

        logger.debug(f"📤 GET {path}?{operation}")

        transport_error = None
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            if self.instrumentation:
                self.instrumentation.record_timing(timer_name, start_time, success=False, error_type=type(e).__name__)
            # The original message embeds the request URL, key included
            transport_error = wrap_transport_error(e, operation, self._redact(str(e)))

        # Raised outside the handler so the unredacted exception is neither
        # __cause__ nor __context__
        if transport_error is not None:
            raise transport_error

        if response.status_code != 200:
            if self.instrumentation:
                self.instrumentation.record_timing(
                    timer_name,
                    start_time,
                    success=False,
                    error_type=f"HTTP_{response.status_code}",
                    http_status=response.status_code,
                )
            raise PiHoleHTTPError(
                f"HTTP {response.status_code} response from Pi-hole",
                status_code=response.status_code,
                details={"operation": operation, "response_text": self._redact(str(response.text)[:500])},
            )

        response_text = str(response.text)
        logger.debug(f"📥 Response: {len(response_text)} chars")

        if self.instrumentation:
            self.instrumentation.record_timing(
                timer_name,
                start_time,
                success=True,
                http_status=response.status_code,
                response_size=len(response_text),
            )

        return check_response_sentinels(response_text, operation)

    def get_json(self, path: str, params: QueryParams, authenticated: bool = False) -> Any:
        """Perform one GET and parse the body as JSON."""
        response_text = self.get_text(path, params, authenticated)
        try:
            return json.loads(response_text)
        except json.JSONDecodeError as e:
            operation = params[0][0] if params else path
            logger.error(f"❌ Invalid JSON for {operation}: {e}")
            raise PiHoleDecodeError(
                "Pi-hole response is not valid JSON",
                details={
                    "operation": operation,
                    "parse_error": str(e),
                    "response_text": self._redact(response_text[:200]),
                },
            ) from e
