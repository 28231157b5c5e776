"""
Data Models for the Pi-hole API Client
======================================

This module contains all dataclasses returned by the Pi-hole API Client.
Records are frozen: they are only ever built by a successful decode of a
complete response. The freeze is shallow; dict and list fields hold plain
containers, and callers that mutate them only change their own copy of the
result.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from ipaddress import IPv4Address, IPv6Address
from typing import Optional, Union

from .ftl_types import DNSSECStatus, QueryStatus, QueryType, ReplyType

IPAddress = Union[IPv4Address, IPv6Address]


@dataclass
class TimingMetrics:
    """Timing of a single request, for performance analysis."""

    operation: str
    start_time: float
    end_time: float
    duration: float
    success: bool
    error_type: Optional[str] = None
    http_status: Optional[int] = None
    response_size: int = 0

    @property
    def duration_ms(self) -> float:
        """Duration in milliseconds."""
        return self.duration * 1000


@dataclass(frozen=True)
class SummaryRaw:
    """Statistics for today as plain numbers (``?summaryRaw``)."""

    domains_being_blocked: int
    dns_queries_today: int
    ads_blocked_today: int
    ads_percentage_today: float
    unique_domains: int
    queries_forwarded: int
    queries_cached: int
    clients_ever_seen: int
    unique_clients: int
    dns_queries_all_types: int
    reply_nodata: int
    reply_nxdomain: int
    reply_cname: int
    reply_ip: int
    privacy_level: int
    status: str


@dataclass(frozen=True)
class Summary:
    """
    Statistics for today, formatted for display (``?summary``).

    Every value is the appliance's pre-formatted string, e.g. ``"1,234"`` or
    ``"12.3"``. ``status`` is ``"enabled"`` or ``"disabled"``.
    """

    domains_being_blocked: str
    dns_queries_today: str
    ads_blocked_today: str
    ads_percentage_today: str
    unique_domains: str
    queries_forwarded: str
    queries_cached: str
    clients_ever_seen: str
    unique_clients: str
    dns_queries_all_types: str
    reply_nodata: str
    reply_nxdomain: str
    reply_cname: str
    reply_ip: str
    privacy_level: str
    status: str


@dataclass(frozen=True)
class OverTimeData:
    """Domains and ads per 10 minute bucket, keyed by epoch-seconds string."""

    domains_over_time: dict[str, int]
    ads_over_time: dict[str, int]


@dataclass(frozen=True)
class TopItems:
    """Top queried and top blocked domains with their request counts."""

    top_queries: dict[str, int]
    top_ads: dict[str, int]


@dataclass(frozen=True)
class TopClients:
    """Top clients, keyed by ``"IP"`` or ``"hostname|IP"``."""

    top_sources: dict[str, int]


@dataclass(frozen=True)
class TopClientsBlocked:
    """Top clients by blocked requests, keyed by ``"IP"`` or ``"hostname|IP"``."""

    top_sources_blocked: dict[str, int]


@dataclass(frozen=True)
class ForwardDestinations:
    """Share of queries answered per destination, keyed by ``"name|IP"``."""

    forward_destinations: dict[str, float]


@dataclass(frozen=True)
class QueryTypes:
    """Share of queries per record type, keyed by labels such as ``"A (IPv4)"``."""

    querytypes: dict[str, float]


@dataclass(frozen=True)
class Query:
    """
    A single query log entry.

    Decoded from a positional row; see ``QUERY_ROW_FIELDS`` in
    ``pihole_api.client.parser`` for the column order.
    """

    timestamp: datetime
    query_type: QueryType
    domain: str
    client: str
    status: QueryStatus
    dnssec_status: DNSSECStatus
    reply_type: ReplyType
    response_time: timedelta
    cname_domain: str
    regex_id: int
    upstream_destination: str
    ede: str


@dataclass(frozen=True)
class Status:
    """Blocking status, ``"enabled"`` or ``"disabled"``."""

    status: str


@dataclass(frozen=True)
class Versions:
    """Installed and latest versions of Pi-hole core, web interface and FTL."""

    core_update: bool
    web_update: bool
    ftl_update: bool
    core_current: str
    web_current: str
    ftl_current: str
    core_latest: str
    web_latest: str
    ftl_latest: str
    core_branch: str
    web_branch: str
    ftl_branch: str


@dataclass(frozen=True)
class CacheInfo:
    """DNS cache statistics."""

    cache_size: int
    cache_live_freed: int
    cache_inserted: int


@dataclass(frozen=True)
class ClientName:
    name: str
    ip: IPAddress


@dataclass(frozen=True)
class NetworkClient:
    """A device from the network table (``api_db.php?network``)."""

    id: int
    ip: list[IPAddress]
    hwaddr: str
    interface: str
    name: list[str]
    first_seen: int
    last_query: int
    num_queries: int
    mac_vendor: str


@dataclass(frozen=True)
class ListModificationResponse:
    """Outcome of a list or local DNS mutation."""

    success: bool
    message: Optional[str] = None


@dataclass(frozen=True)
class CustomListDomainDetails:
    """An entry of a white/black/regex/wildcard list."""

    id: int
    domain_type: int
    domain: str
    enabled: bool
    date_added: datetime
    date_modified: datetime
    comment: Optional[str]
    groups: list[int]


@dataclass(frozen=True)
class CustomDNSRecord:
    """A local DNS (A/AAAA) record."""

    domain: str
    ip_address: IPAddress


@dataclass(frozen=True)
class CustomCNAMERecord:
    """A local CNAME record."""

    domain: str
    target_domain: str


__all__ = [
    "CacheInfo",
    "ClientName",
    "CustomCNAMERecord",
    "CustomDNSRecord",
    "CustomListDomainDetails",
    "ForwardDestinations",
    "IPAddress",
    "ListModificationResponse",
    "NetworkClient",
    "OverTimeData",
    "Query",
    "QueryTypes",
    "Status",
    "Summary",
    "SummaryRaw",
    "TimingMetrics",
    "TopClients",
    "TopClientsBlocked",
    "TopItems",
    "Versions",
]
