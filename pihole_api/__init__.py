"""
Pi-hole API Library
===================

Typed Python client for the Pi-hole HTTP statistics and administration API
(``/admin/api.php`` and ``/admin/api_db.php``).

The appliance's JSON is loosely typed and reports some failures inside HTTP 200
bodies. This library normalizes every response into immutable, strictly
decoded records and raises a typed exception for everything else.

Quick Start:
    Unauthenticated endpoints only need the host:

    >>> from pihole_api import PiHoleAPI, PiHoleAPIConfig
    >>> with PiHoleAPI(PiHoleAPIConfig("http://192.168.0.100")) as api:
    ...     summary = api.get_summary_raw()
    ...     print(f"Blocked today: {summary.ads_blocked_today}")

    Everything else needs the API key:

    >>> from pihole_api import AuthenticatedPiHoleAPI, PiHoleAPIConfigWithKey
    >>> config = PiHoleAPIConfigWithKey("http://192.168.0.100", "0123...cdef")
    >>> with AuthenticatedPiHoleAPI(config) as api:
    ...     for query in api.get_all_queries(count=100):
    ...         print(query.timestamp, query.domain, query.status.name)

Error Handling:
    Every failure raises a subclass of PiHoleAPIError:

    >>> from pihole_api import PiHoleInvalidListError
    >>> try:
    ...     api.list_add(["ads.example.com"], "NOT_A_LIST")
    ... except PiHoleInvalidListError:
    ...     print("Unknown list")

This is an unofficial library not affiliated with Pi-hole LLC.

License: MIT
"""

# Version information
__version__ = "1.0.0"
__license__ = "MIT"

from .client.main import DEFAULT_COUNT, KNOWN_LISTS, AuthenticatedPiHoleAPI, PiHoleAPI  # noqa: E402
from .config import PiHoleAPIConfig, PiHoleAPIConfigWithKey  # noqa: E402
from .exceptions import (  # noqa: E402
    PiHoleAPIError,
    PiHoleBackendUnavailableError,
    PiHoleConfigurationError,
    PiHoleDecodeError,
    PiHoleHTTPError,
    PiHoleInvalidListError,
    PiHoleMissingAPIKeyError,
    PiHoleTimeoutError,
    PiHoleTransportError,
)
from .ftl_types import DNSSECStatus, QueryStatus, QueryType, ReplyType  # noqa: E402
from .models import (  # noqa: E402
    CacheInfo,
    ClientName,
    CustomCNAMERecord,
    CustomDNSRecord,
    CustomListDomainDetails,
    ForwardDestinations,
    ListModificationResponse,
    NetworkClient,
    OverTimeData,
    Query,
    QueryTypes,
    Status,
    Summary,
    SummaryRaw,
    TopClients,
    TopClientsBlocked,
    TopItems,
    Versions,
)

# Public API
__all__ = [
    "DEFAULT_COUNT",
    "KNOWN_LISTS",
    "AuthenticatedPiHoleAPI",
    "CacheInfo",
    "ClientName",
    "CustomCNAMERecord",
    "CustomDNSRecord",
    "CustomListDomainDetails",
    "DNSSECStatus",
    "ForwardDestinations",
    "ListModificationResponse",
    "NetworkClient",
    "OverTimeData",
    "PiHoleAPI",
    "PiHoleAPIConfig",
    "PiHoleAPIConfigWithKey",
    "PiHoleAPIError",
    "PiHoleBackendUnavailableError",
    "PiHoleConfigurationError",
    "PiHoleDecodeError",
    "PiHoleHTTPError",
    "PiHoleInvalidListError",
    "PiHoleMissingAPIKeyError",
    "PiHoleTimeoutError",
    "PiHoleTransportError",
    "Query",
    "QueryStatus",
    "QueryType",
    "QueryTypes",
    "ReplyType",
    "Status",
    "Summary",
    "SummaryRaw",
    "TopClients",
    "TopClientsBlocked",
    "TopItems",
    "Versions",
    "__license__",
    "__version__",
]
