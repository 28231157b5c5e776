"""
Main Pi-hole API Client
=======================

This module contains the two client classes. PiHoleAPI serves the endpoints
that need no API key; AuthenticatedPiHoleAPI adds every endpoint that does and
can only be built from a PiHoleAPIConfigWithKey.

Each operation performs exactly one GET, checks the body for the appliance's
failure sentinels, and decodes it into a typed record.

"""

import logging
from collections.abc import Sequence
from typing import Any, Optional, Union

import requests

from pihole_api.client.auth import APIKeyAuthenticator, QueryParams
from pihole_api.client.http import API_PATH, DB_API_PATH, PiHoleRequestHandler
from pihole_api.client.parser import PiHoleResponseParser
from pihole_api.config import PiHoleAPIConfig, PiHoleAPIConfigWithKey
from pihole_api.exceptions import PiHoleMissingAPIKeyError
from pihole_api.instrumentation import PerformanceInstrumentation
from pihole_api.models import (
    CacheInfo,
    ClientName,
    CustomCNAMERecord,
    CustomDNSRecord,
    CustomListDomainDetails,
    ForwardDestinations,
    IPAddress,
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
from pihole_api.session import create_pihole_session

logger = logging.getLogger("pihole-api")

DEFAULT_COUNT = 10

# Conventional list names. Not enforced: the appliance answers "Invalid list"
# for anything it does not know.
KNOWN_LISTS = ("white", "black", "white_regex", "black_regex", "white_wild", "black_wild", "audit")

AnyConfig = Union[PiHoleAPIConfig, PiHoleAPIConfigWithKey]


def _resolve_count(count: Optional[int]) -> str:
    return str(DEFAULT_COUNT if count is None else count)


def _join_domains(domains: Union[str, Sequence[str]]) -> str:
    if isinstance(domains, str):
        return domains
    return " ".join(domains)


class PiHoleAPI:
    """
    Client for the unauthenticated Pi-hole API endpoints.

    Examples:
        >>> api = PiHoleAPI(PiHoleAPIConfig("http://192.168.0.100"))
        >>> api.get_summary().status
        'enabled'
    """

    def __init__(
        self,
        config: AnyConfig,
        session: Optional[requests.Session] = None,
        timeout: Optional[tuple] = (3, 12),
        enable_instrumentation: bool = True,
    ):
        """
        Initialize the client.

        Args:
            config: Host (and optionally key) configuration
            session: Transport to use; a no-retry requests.Session by default
            timeout: (connect_timeout, read_timeout) in seconds (default: (3, 12))
            enable_instrumentation: Record per-request timing metrics (default: True)
        """
        self.config = config
        self.host = config.host
        self.timeout = timeout

        self.instrumentation = PerformanceInstrumentation() if enable_instrumentation else None

        self._owns_session = session is None
        self.session = session if session is not None else create_pihole_session()

        self.parser = PiHoleResponseParser()
        self.request_handler = PiHoleRequestHandler(
            session=self.session,
            host=self.host,
            authenticator=self._create_authenticator(),
            timeout=timeout,
            instrumentation=self.instrumentation,
        )

        logger.info(f"🛡️ {type(self).__name__} initialized for {self.host}")

    def _create_authenticator(self) -> Optional[APIKeyAuthenticator]:
        return None

    def _get(self, params: QueryParams, path: str = API_PATH) -> Any:
        return self.request_handler.get_json(path, params)

    def get_summary_raw(self) -> SummaryRaw:
        """Get today's statistics as plain numbers."""
        return self.parser.parse_summary_raw(self._get([("summaryRaw", None)]))

    def get_summary(self) -> Summary:
        """Get today's statistics formatted for display."""
        return self.parser.parse_summary(self._get([("summary", None)]))

    def get_over_time_data_10_mins(self) -> OverTimeData:
        """Get domain and ad counts for each 10 minute period."""
        return self.parser.parse_over_time_data(self._get([("overTimeData10mins", None)]))

    def get_version(self) -> int:
        """Get the API version number."""
        return self.parser.parse_version(self._get([("version", None)]))

    def get_versions(self) -> Versions:
        """Get installed and latest versions of core, web interface and FTL."""
        return self.parser.parse_versions(self._get([("versions", None)]))

    def get_performance_metrics(self) -> dict[str, Any]:
        """Get the request timing summary."""
        if not self.instrumentation:
            return {"error": "Performance instrumentation not enabled"}
        return self.instrumentation.get_performance_summary()

    def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session and self.session:
            self.session.close()
            logger.debug("🔒 Session closed")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


class AuthenticatedPiHoleAPI(PiHoleAPI):
    """
    Client for every Pi-hole API endpoint, including those that need the API key.

    Examples:
        >>> config = PiHoleAPIConfigWithKey("http://192.168.0.100", "0123...cdef")
        >>> with AuthenticatedPiHoleAPI(config) as api:
        ...     api.list_add(["ads.example.com"], "black").success
        True
    """

    config: PiHoleAPIConfigWithKey

    def __init__(
        self,
        config: PiHoleAPIConfigWithKey,
        session: Optional[requests.Session] = None,
        timeout: Optional[tuple] = (3, 12),
        enable_instrumentation: bool = True,
    ):
        if not isinstance(config, PiHoleAPIConfigWithKey):
            raise PiHoleMissingAPIKeyError(
                "AuthenticatedPiHoleAPI requires a PiHoleAPIConfigWithKey",
                details={"config_type": type(config).__name__},
            )
        super().__init__(config, session=session, timeout=timeout, enable_instrumentation=enable_instrumentation)

    def _create_authenticator(self) -> Optional[APIKeyAuthenticator]:
        return APIKeyAuthenticator(self.config.api_key)

    def _get_authenticated(self, params: QueryParams, path: str = API_PATH) -> Any:
        return self.request_handler.get_json(path, params, authenticated=True)

    # Statistics

    def get_top_items(self, count: Optional[int] = None) -> TopItems:
        """Get the top domains and ads. ``count`` defaults to 10 and is not clamped."""
        return self.parser.parse_top_items(self._get_authenticated([("topItems", _resolve_count(count))]))

    def get_top_clients(self, count: Optional[int] = None) -> TopClients:
        """Get the clients with the most queries."""
        return self.parser.parse_top_clients(self._get_authenticated([("topClients", _resolve_count(count))]))

    def get_top_clients_blocked(self, count: Optional[int] = None) -> TopClientsBlocked:
        """Get the clients with the most blocked queries."""
        return self.parser.parse_top_clients_blocked(
            self._get_authenticated([("topClientsBlocked", _resolve_count(count))])
        )

    def get_forward_destinations(self, unsorted: bool = False) -> ForwardDestinations:
        """Get the share of queries answered by each upstream destination."""
        params: QueryParams = [("getForwardDestinations", "unsorted" if unsorted else None)]
        return self.parser.parse_forward_destinations(self._get_authenticated(params))

    def get_query_types(self) -> QueryTypes:
        """Get the share of queries per record type."""
        return self.parser.parse_query_types(self._get_authenticated([("getQueryTypes", None)]))

    def get_all_queries(self, count: Optional[int] = None) -> list[Query]:
        """Get the query log, limited to ``count`` entries (default 10)."""
        return self.parser.parse_all_queries(self._get_authenticated([("getAllQueries", _resolve_count(count))]))

    def get_cache_info(self) -> CacheInfo:
        """Get DNS cache statistics."""
        return self.parser.parse_cache_info(self._get_authenticated([("getCacheInfo", None)]))

    def get_client_names(self) -> list[ClientName]:
        """Get hostname and IP of every known client."""
        return self.parser.parse_client_names(self._get_authenticated([("getClientNames", None)]))

    def get_over_time_data_clients(self) -> dict[str, list[int]]:
        """
        Get query counts per client for each 10 minute period.

        Maps the period's epoch-seconds string to one count per client, in the
        same order as get_client_names().
        """
        return self.parser.parse_over_time_data_clients(self._get_authenticated([("overTimeDataClients", None)]))

    def get_network(self) -> list[NetworkClient]:
        """Get the devices of the network table."""
        return self.parser.parse_network(self._get_authenticated([("network", None)], path=DB_API_PATH))

    def get_queries_count(self) -> int:
        """Get the total number of queries stored in the long-term database."""
        return self.parser.parse_queries_count(self._get_authenticated([("getQueriesCount", None)], path=DB_API_PATH))

    def get_max_logage(self) -> float:
        """Get the time window, in hours, covered by the statistics."""
        return self.parser.parse_max_logage(self._get_authenticated([("getMaxlogage", None)]))

    # Blocking

    def enable(self) -> Status:
        """Enable blocking."""
        return self.parser.parse_status(self._get_authenticated([("enable", None)]))

    def disable(self, seconds: Optional[int] = None) -> Status:
        """Disable blocking for ``seconds`` seconds, or until re-enabled when None."""
        value = None if seconds is None else str(seconds)
        return self.parser.parse_status(self._get_authenticated([("disable", value)]))

    # Domain lists

    def list_add(self, domains: Union[str, Sequence[str]], list_name: str) -> ListModificationResponse:
        """
        Add domains to a list.

        Args:
            domains: One domain or several (sent space-separated)
            list_name: Usually one of KNOWN_LISTS

        Raises:
            PiHoleInvalidListError: The appliance does not know ``list_name``
        """
        params: QueryParams = [("add", _join_domains(domains)), ("list", list_name)]
        return self.parser.parse_list_modification(self._get_authenticated(params), "add")

    def list_remove(self, domains: Union[str, Sequence[str]], list_name: str) -> ListModificationResponse:
        """Remove domains from a list. Raises PiHoleInvalidListError for unknown lists."""
        params: QueryParams = [("sub", _join_domains(domains)), ("list", list_name)]
        return self.parser.parse_list_modification(self._get_authenticated(params), "sub")

    def list_get_domains(self, list_name: str) -> list[CustomListDomainDetails]:
        """Get the entries of a list. Raises PiHoleInvalidListError for unknown lists."""
        # Without "add" or "sub" the appliance answers with the list contents
        params: QueryParams = [("get_domains", ""), ("list", list_name)]
        return self.parser.parse_list_domains(self._get_authenticated(params))

    # Local DNS records

    def get_custom_dns_records(self) -> list[CustomDNSRecord]:
        """Get the local DNS (A/AAAA) records."""
        params: QueryParams = [("customdns", None), ("action", "get")]
        return self.parser.parse_custom_dns_records(self._get_authenticated(params))

    def add_custom_dns_record(self, ip_address: Union[str, IPAddress], domain: str) -> ListModificationResponse:
        """Add a local DNS record pointing ``domain`` at ``ip_address``."""
        params: QueryParams = [("customdns", None), ("action", "add"), ("ip", str(ip_address)), ("domain", domain)]
        return self.parser.parse_list_modification(self._get_authenticated(params), "customdns")

    def delete_custom_dns_record(self, ip_address: Union[str, IPAddress], domain: str) -> ListModificationResponse:
        """Delete a local DNS record."""
        params: QueryParams = [("customdns", None), ("action", "delete"), ("ip", str(ip_address)), ("domain", domain)]
        return self.parser.parse_list_modification(self._get_authenticated(params), "customdns")

    def get_custom_cname_records(self) -> list[CustomCNAMERecord]:
        """Get the local CNAME records."""
        params: QueryParams = [("customcname", None), ("action", "get")]
        return self.parser.parse_custom_cname_records(self._get_authenticated(params))

    def add_custom_cname_record(self, domain: str, target_domain: str) -> ListModificationResponse:
        """Add a local CNAME record from ``domain`` to ``target_domain``."""
        params: QueryParams = [("customcname", None), ("action", "add"), ("domain", domain), ("target", target_domain)]
        return self.parser.parse_list_modification(self._get_authenticated(params), "customcname")

    def delete_custom_cname_record(self, domain: str, target_domain: str) -> ListModificationResponse:
        """Delete a local CNAME record."""
        params: QueryParams = [
            ("customcname", None),
            ("action", "delete"),
            ("domain", domain),
            ("target", target_domain),
        ]
        return self.parser.parse_list_modification(self._get_authenticated(params), "customcname")
