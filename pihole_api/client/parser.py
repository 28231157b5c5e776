"""
Response Parser for the Pi-hole API Client
==========================================

This module turns parsed JSON into the typed records of ``pihole_api.models``.
Decoding is all-or-nothing: the first field that fails raises
PiHoleDecodeError and no partial record is returned.

"""

import logging
from typing import Any, Callable

from pihole_api.decoders import (
    decode_error,
    decode_flexible_map,
    expect_bool,
    expect_float,
    expect_list,
    expect_list_of,
    expect_object,
    expect_optional_str,
    expect_str,
    expect_uint,
    parse_duration_100us,
    parse_epoch_seconds,
    parse_ftl_enum,
    parse_i32,
    parse_ip_address,
    parse_query_type,
    parse_uint_bool,
    require_key,
)
from pihole_api.ftl_types import DNSSECStatus, QueryStatus, ReplyType
from pihole_api.models import (
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

logger = logging.getLogger("pihole-api")

# (attribute, wire key, decoder)
FieldSpec = list[tuple[str, str, Callable[[Any, str], Any]]]

_SUMMARY_KEYS = [
    ("domains_being_blocked", "domains_being_blocked"),
    ("dns_queries_today", "dns_queries_today"),
    ("ads_blocked_today", "ads_blocked_today"),
    ("ads_percentage_today", "ads_percentage_today"),
    ("unique_domains", "unique_domains"),
    ("queries_forwarded", "queries_forwarded"),
    ("queries_cached", "queries_cached"),
    ("clients_ever_seen", "clients_ever_seen"),
    ("unique_clients", "unique_clients"),
    ("dns_queries_all_types", "dns_queries_all_types"),
    ("reply_nodata", "reply_NODATA"),
    ("reply_nxdomain", "reply_NXDOMAIN"),
    ("reply_cname", "reply_CNAME"),
    ("reply_ip", "reply_IP"),
    ("privacy_level", "privacy_level"),
    ("status", "status"),
]

# summaryRaw counters are integers except these
_SUMMARY_RAW_DECODERS = {"ads_percentage_today": expect_float, "status": expect_str}

SUMMARY_RAW_FIELDS: FieldSpec = [
    (attr, key, _SUMMARY_RAW_DECODERS.get(attr, expect_uint)) for attr, key in _SUMMARY_KEYS
]

SUMMARY_FIELDS: FieldSpec = [(attr, key, expect_str) for attr, key in _SUMMARY_KEYS]

VERSIONS_FIELDS: FieldSpec = [
    ("core_update", "core_update", expect_bool),
    ("web_update", "web_update", expect_bool),
    ("ftl_update", "FTL_update", expect_bool),
    ("core_current", "core_current", expect_str),
    ("web_current", "web_current", expect_str),
    ("ftl_current", "FTL_current", expect_str),
    ("core_latest", "core_latest", expect_str),
    ("web_latest", "web_latest", expect_str),
    ("ftl_latest", "FTL_latest", expect_str),
    ("core_branch", "core_branch", expect_str),
    ("web_branch", "web_branch", expect_str),
    ("ftl_branch", "FTL_branch", expect_str),
]

CACHE_INFO_FIELDS: FieldSpec = [
    ("cache_size", "cache-size", expect_uint),
    ("cache_live_freed", "cache-live-freed", expect_uint),
    ("cache_inserted", "cache-inserted", expect_uint),
]

CLIENT_NAME_FIELDS: FieldSpec = [
    ("name", "name", expect_str),
    ("ip", "ip", parse_ip_address),
]

NETWORK_CLIENT_FIELDS: FieldSpec = [
    ("id", "id", expect_uint),
    ("ip", "ip", lambda value, field: expect_list_of(value, parse_ip_address, field)),
    ("hwaddr", "hwaddr", expect_str),
    ("interface", "interface", expect_str),
    ("name", "name", lambda value, field: expect_list_of(value, expect_str, field)),
    ("first_seen", "firstSeen", expect_uint),
    ("last_query", "lastQuery", expect_uint),
    ("num_queries", "numQueries", expect_uint),
    ("mac_vendor", "macVendor", expect_str),
]

LIST_DOMAIN_FIELDS: FieldSpec = [
    ("id", "id", expect_uint),
    ("domain_type", "type", expect_uint),
    ("domain", "domain", expect_str),
    ("enabled", "enabled", parse_uint_bool),
    ("date_added", "date_added", parse_epoch_seconds),
    ("date_modified", "date_modified", parse_epoch_seconds),
    ("comment", "comment", expect_optional_str),
    ("groups", "groups", lambda value, field: expect_list_of(value, expect_uint, field)),
]

# Column order of a query log row
QUERY_ROW_FIELDS: FieldSpec = [
    ("timestamp", "0", parse_epoch_seconds),
    ("query_type", "1", parse_query_type),
    ("domain", "2", expect_str),
    ("client", "3", expect_str),
    ("status", "4", lambda value, field: parse_ftl_enum(QueryStatus, value, field)),
    ("dnssec_status", "5", lambda value, field: parse_ftl_enum(DNSSECStatus, value, field)),
    ("reply_type", "6", lambda value, field: parse_ftl_enum(ReplyType, value, field)),
    ("response_time", "7", parse_duration_100us),
    ("cname_domain", "8", expect_str),
    ("regex_id", "9", parse_i32),
    ("upstream_destination", "10", expect_str),
    ("ede", "11", expect_str),
]


def unwrap(data: Any, key: str, operation: str) -> Any:
    """Return the payload nested under the single wrapper ``key``."""
    return require_key(expect_object(data, operation), key, operation)


class PiHoleResponseParser:
    """Parses Pi-hole API responses into typed records."""

    def _decode_fields(self, data: Any, fields: FieldSpec, context: str) -> dict[str, Any]:
        obj = expect_object(data, context)
        return {attr: decoder(require_key(obj, key, context), f"{context}.{key}") for attr, key, decoder in fields}

    def _decode_row(self, row: Any, fields: FieldSpec, context: str) -> dict[str, Any]:
        columns = expect_list(row, context)
        if len(columns) < len(fields):
            raise decode_error(context, row, f"expected {len(fields)} columns, got {len(columns)}")
        if len(columns) > len(fields):
            logger.debug(f"🔍 {context}: ignoring {len(columns) - len(fields)} extra columns")
        return {attr: decoder(columns[index], f"{context}.{attr}") for index, (attr, _, decoder) in enumerate(fields)}

    # Summary endpoints

    def parse_summary_raw(self, data: Any) -> SummaryRaw:
        return SummaryRaw(**self._decode_fields(data, SUMMARY_RAW_FIELDS, "summaryRaw"))

    def parse_summary(self, data: Any) -> Summary:
        return Summary(**self._decode_fields(data, SUMMARY_FIELDS, "summary"))

    def parse_over_time_data(self, data: Any) -> OverTimeData:
        obj = expect_object(data, "overTimeData10mins")
        return OverTimeData(
            domains_over_time=decode_flexible_map(
                require_key(obj, "domains_over_time", "overTimeData10mins"), expect_uint, "domains_over_time"
            ),
            ads_over_time=decode_flexible_map(
                require_key(obj, "ads_over_time", "overTimeData10mins"), expect_uint, "ads_over_time"
            ),
        )

    def parse_version(self, data: Any) -> int:
        return expect_uint(unwrap(data, "version", "version"), "version")

    def parse_versions(self, data: Any) -> Versions:
        return Versions(**self._decode_fields(data, VERSIONS_FIELDS, "versions"))

    # Top lists

    def parse_top_items(self, data: Any) -> TopItems:
        obj = expect_object(data, "topItems")
        return TopItems(
            top_queries=decode_flexible_map(require_key(obj, "top_queries", "topItems"), expect_uint, "top_queries"),
            top_ads=decode_flexible_map(require_key(obj, "top_ads", "topItems"), expect_uint, "top_ads"),
        )

    def parse_top_clients(self, data: Any) -> TopClients:
        obj = expect_object(data, "topClients")
        return TopClients(
            top_sources=decode_flexible_map(require_key(obj, "top_sources", "topClients"), expect_uint, "top_sources")
        )

    def parse_top_clients_blocked(self, data: Any) -> TopClientsBlocked:
        obj = expect_object(data, "topClientsBlocked")
        return TopClientsBlocked(
            top_sources_blocked=decode_flexible_map(
                require_key(obj, "top_sources_blocked", "topClientsBlocked"), expect_uint, "top_sources_blocked"
            )
        )

    def parse_forward_destinations(self, data: Any) -> ForwardDestinations:
        obj = expect_object(data, "getForwardDestinations")
        return ForwardDestinations(
            forward_destinations=decode_flexible_map(
                require_key(obj, "forward_destinations", "getForwardDestinations"),
                expect_float,
                "forward_destinations",
            )
        )

    def parse_query_types(self, data: Any) -> QueryTypes:
        obj = expect_object(data, "getQueryTypes")
        return QueryTypes(
            querytypes=decode_flexible_map(require_key(obj, "querytypes", "getQueryTypes"), expect_float, "querytypes")
        )

    # Query log

    def parse_query_row(self, row: Any, context: str = "query") -> Query:
        return Query(**self._decode_row(row, QUERY_ROW_FIELDS, context))

    def parse_all_queries(self, data: Any) -> list[Query]:
        rows = expect_list(unwrap(data, "data", "getAllQueries"), "data")
        return [self.parse_query_row(row, f"data[{index}]") for index, row in enumerate(rows)]

    # Status and statistics

    def parse_status(self, data: Any) -> Status:
        return Status(status=expect_str(unwrap(data, "status", "status"), "status"))

    def parse_cache_info(self, data: Any) -> CacheInfo:
        return CacheInfo(**self._decode_fields(unwrap(data, "cacheinfo", "getCacheInfo"), CACHE_INFO_FIELDS, "cacheinfo"))

    def parse_client_names(self, data: Any) -> list[ClientName]:
        clients = expect_list(unwrap(data, "clients", "getClientNames"), "clients")
        return [
            ClientName(**self._decode_fields(client, CLIENT_NAME_FIELDS, f"clients[{index}]"))
            for index, client in enumerate(clients)
        ]

    def parse_over_time_data_clients(self, data: Any) -> dict[str, list[int]]:
        return decode_flexible_map(
            unwrap(data, "over_time", "overTimeDataClients"),
            lambda value, field: expect_list_of(value, expect_uint, field),
            "over_time",
        )

    def parse_network(self, data: Any) -> list[NetworkClient]:
        devices = expect_list(unwrap(data, "network", "network"), "network")
        return [
            NetworkClient(**self._decode_fields(device, NETWORK_CLIENT_FIELDS, f"network[{index}]"))
            for index, device in enumerate(devices)
        ]

    def parse_queries_count(self, data: Any) -> int:
        return expect_uint(unwrap(data, "count", "getQueriesCount"), "count")

    def parse_max_logage(self, data: Any) -> float:
        return expect_float(unwrap(data, "maxlogage", "getMaxlogage"), "maxlogage")

    # Lists and local DNS

    def parse_list_modification(self, data: Any, context: str = "list") -> ListModificationResponse:
        obj = expect_object(data, context)
        return ListModificationResponse(
            success=expect_bool(require_key(obj, "success", context), f"{context}.success"),
            message=expect_optional_str(obj.get("message"), f"{context}.message"),
        )

    def parse_list_domains(self, data: Any) -> list[CustomListDomainDetails]:
        entries = expect_list(unwrap(data, "data", "list"), "data")
        return [
            CustomListDomainDetails(**self._decode_fields(entry, LIST_DOMAIN_FIELDS, f"data[{index}]"))
            for index, entry in enumerate(entries)
        ]

    def parse_custom_dns_records(self, data: Any) -> list[CustomDNSRecord]:
        rows = expect_list(unwrap(data, "data", "customdns"), "data")
        records = []
        for index, row in enumerate(rows):
            columns = self._decode_row(
                row, [("domain", "0", expect_str), ("ip_address", "1", parse_ip_address)], f"data[{index}]"
            )
            records.append(CustomDNSRecord(**columns))
        return records

    def parse_custom_cname_records(self, data: Any) -> list[CustomCNAMERecord]:
        rows = expect_list(unwrap(data, "data", "customcname"), "data")
        records = []
        for index, row in enumerate(rows):
            columns = self._decode_row(
                row, [("domain", "0", expect_str), ("target_domain", "1", expect_str)], f"data[{index}]"
            )
            records.append(CustomCNAMERecord(**columns))
        return records
