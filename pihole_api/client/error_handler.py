"""
Response Sentinel Detection for the Pi-hole API Client
======================================================

The appliance answers HTTP 200 for both payloads and two failure conditions,
so these must be recognised in the raw body before structural decoding:

* a plain-text body starting with ``Invalid list`` (unknown list name);
* a JSON object ``{"FTLnotrunning": true}`` (the FTL backend is down).

"""

import json
import logging

from pihole_api.exceptions import PiHoleBackendUnavailableError, PiHoleInvalidListError

logger = logging.getLogger("pihole-api")

INVALID_LIST_PREFIX = "Invalid list"
FTL_NOT_RUNNING_FIELD = "FTLnotrunning"


def check_response_sentinels(response_text: str, operation: str = "request") -> str:
    """
    Raise if ``response_text`` is one of the appliance's failure sentinels.

    Args:
        response_text: Raw response body
        operation: Endpoint query, for error context

    Returns:
        ``response_text`` unmodified when it is not a sentinel

    Raises:
        PiHoleInvalidListError: Body starts with "Invalid list"
        PiHoleBackendUnavailableError: Body is an object whose FTLnotrunning flag is true
    """
    if response_text.startswith(INVALID_LIST_PREFIX):
        logger.debug(f"🚫 Invalid list sentinel for {operation}")
        raise PiHoleInvalidListError(
            "Pi-hole rejected the list name",
            details={"operation": operation, "response_text": response_text[:200]},
        )

    if FTL_NOT_RUNNING_FIELD in response_text and is_ftl_not_running(response_text):
        logger.debug(f"🚫 FTL not running sentinel for {operation}")
        raise PiHoleBackendUnavailableError(
            "Pi-hole FTL backend is not running",
            details={"operation": operation},
        )

    return response_text


def is_ftl_not_running(response_text: str) -> bool:
    """
    Decode ``response_text`` as the not-running sentinel object.

    ``true`` means the backend is NOT running. ``false``, a non-boolean flag,
    a missing flag or a body that is not a JSON object all count as running.
    """
    try:
        data = json.loads(response_text)
    except json.JSONDecodeError:
        return False

    if not isinstance(data, dict):
        return False

    return data.get(FTL_NOT_RUNNING_FIELD) is True


__all__ = ["FTL_NOT_RUNNING_FIELD", "INVALID_LIST_PREFIX", "check_response_sentinels", "is_ftl_not_running"]
