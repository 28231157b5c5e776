"""
Authentication module for the Pi-hole API Client
================================================

The appliance authenticates with a single shared secret sent as the ``auth``
query parameter. This module attaches it and keeps it out of anything that
is logged or raised.

"""

import logging
from typing import Optional
from urllib.parse import quote, quote_plus

logger = logging.getLogger("pihole-api")

AUTH_PARAM = "auth"
REDACTED = "***"

QueryParams = list[tuple[str, Optional[str]]]


class APIKeyAuthenticator:
    """Attaches the API key to query parameters and redacts it from text."""

    def __init__(self, api_key: str):
        """
        Initialize the authenticator.

        Args:
            api_key: The appliance's API token
        """
        self._api_key = api_key

    def __repr__(self) -> str:
        return f"{type(self).__name__}(api_key={REDACTED!r})"

    def apply(self, params: QueryParams) -> QueryParams:
        """Return a copy of ``params`` with ``auth=<key>`` appended last."""
        return [*params, (AUTH_PARAM, self._api_key)]

    def redact(self, text: str) -> str:
        """
        Remove the API key from ``text``.

        Both the raw key and its URL-encoded forms are replaced, since
        transport errors usually quote the full request URL.
        """
        for form in {self._api_key, quote_plus(self._api_key), quote(self._api_key, safe="")}:
            if form:
                text = text.replace(form, REDACTED)
        return text
