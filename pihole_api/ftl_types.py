"""
FTL Enumerations for the Pi-hole API Client
===========================================

These types mirror the enums in ``enums.h`` of the Pi-hole FTL daemon. The
integer-backed enums are dense and zero-based: the wire ordinal of a member is
``int(member)`` and the declaration order must not change.

License: MIT
"""

from enum import Enum, IntEnum


class DNSSECStatus(IntEnum):
    """DNSSEC validation result of a query."""

    UNSPECIFIED = 0
    SECURE = 1
    INSECURE = 2
    BOGUS = 3
    ABANDONED = 4


class QueryStatus(IntEnum):
    """How FTL handled a query (blocked, forwarded, cached, ...)."""

    UNKNOWN = 0
    GRAVITY = 1
    FORWARDED = 2
    CACHE = 3
    REGEX = 4
    BLACKLIST = 5
    EXTERNAL_BLOCKED_IP = 6
    EXTERNAL_BLOCKED_NULL = 7
    EXTERNAL_BLOCKED_NXRA = 8
    GRAVITY_CNAME = 9
    REGEX_CNAME = 10
    BLACKLIST_CNAME = 11
    RETRIED = 12
    RETRIED_DNSSEC = 13
    IN_PROGRESS = 14
    DBBUSY = 15
    STATUS_MAX = 16


class ReplyType(IntEnum):
    """Type of the reply sent to the client."""

    UNKNOWN = 0
    NODATA = 1
    NXDOMAIN = 2
    CNAME = 3
    IP = 4
    DOMAIN = 5
    RRNAME = 6
    SERVFAIL = 7
    REFUSED = 8
    NOTIMP = 9
    OTHER = 10
    DNSSEC = 11
    NONE = 12
    BLOB = 13
    REPLY_MAX = 14


class QueryType(Enum):
    """DNS record type of a query. Sent by name on the wire, e.g. ``"AAAA"``."""

    A = "A"
    AAAA = "AAAA"
    ANY = "ANY"
    SRV = "SRV"
    SOA = "SOA"
    PTR = "PTR"
    TXT = "TXT"
    NAPTR = "NAPTR"
    MX = "MX"
    DS = "DS"
    RRSIG = "RRSIG"
    DNSKEY = "DNSKEY"
    NS = "NS"
    OTHER = "OTHER"
    SVCB = "SVCB"
    HTTPS = "HTTPS"
    MAX = "MAX"


__all__ = ["DNSSECStatus", "QueryStatus", "QueryType", "ReplyType"]
