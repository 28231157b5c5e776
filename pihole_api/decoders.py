"""
Field Decoders for the Pi-hole API Client
=========================================

The appliance's JSON is loosely typed: counters arrive as numbers in one
endpoint and as decimal strings in the next, timestamps and durations are
stringified integers, and maps that happen to be empty are sent as ``[]``.
This module isolates every conversion from wire value to typed value.

All decoders share the signature ``decoder(value, field) -> typed value`` and
raise PiHoleDecodeError on malformed input. None of them substitutes a default.

License: MIT
"""

import ipaddress
import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import IntEnum
from typing import Any, Callable, Optional, TypeVar, Union

from .exceptions import PiHoleDecodeError
from .ftl_types import QueryType

logger = logging.getLogger("pihole-api")

T = TypeVar("T")
E = TypeVar("E", bound=IntEnum)

Decoder = Callable[[Any, str], T]

_SIGNED_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT_PATTERN = re.compile(r"\+?[0-9]+")

I32_MIN, I32_MAX = -(2**31), 2**31 - 1
I64_MIN, I64_MAX = -(2**63), 2**63 - 1
U8_MAX = 2**8 - 1
U64_MAX = 2**64 - 1

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _preview(value: Any) -> str:
    text = repr(value)
    return text if len(text) <= 100 else f"{text[:97]}..."


def decode_error(field: str, value: Any, reason: str) -> PiHoleDecodeError:
    """Build a PiHoleDecodeError describing a rejected wire value."""
    return PiHoleDecodeError(
        f"Cannot decode {field}: {reason}",
        details={"field": field, "value": _preview(value)},
    )


def _parse_integer(
    value: Any,
    field: str,
    minimum: int,
    maximum: int,
    accept_numbers: bool = True,
) -> int:
    """
    Parse a JSON integer or a decimal integer string within [minimum, maximum].

    Booleans are rejected even though ``bool`` subclasses ``int``. Strings must
    be plain decimal digits with an optional sign (no whitespace, no ``_``).
    """
    if isinstance(value, bool):
        raise decode_error(field, value, "expected an integer, got a boolean")

    if isinstance(value, int) and accept_numbers:
        number = value
    elif isinstance(value, str):
        pattern = _SIGNED_INT_PATTERN if minimum < 0 else _UNSIGNED_INT_PATTERN
        if not pattern.fullmatch(value):
            raise decode_error(field, value, "not a decimal integer string")
        number = int(value)
    else:
        expected = "an integer or integer string" if accept_numbers else "an integer string"
        raise decode_error(field, value, f"expected {expected}")

    if not minimum <= number <= maximum:
        raise decode_error(field, value, f"integer out of range [{minimum}, {maximum}]")
    return number


# ---------------------------------------------------------------------------
# Field coercions
# ---------------------------------------------------------------------------


def parse_i32(value: Any, field: str = "value") -> int:
    """
    Parse an integer string into a signed 32-bit integer.

    Examples:
        >>> parse_i32("-1")
        -1
    """
    return _parse_integer(value, field, I32_MIN, I32_MAX, accept_numbers=False)


def parse_uint_bool(value: Any, field: str = "value") -> bool:
    """
    Parse an unsigned integer (or integer string) into a boolean.

    ``0`` is False, every other value up to 2**64 - 1 is True.
    """
    return _parse_integer(value, field, 0, U64_MAX) != 0


def parse_epoch_seconds(value: Any, field: str = "value") -> datetime:
    """
    Parse epoch seconds into a UTC-aware datetime with no sub-second part.

    The query log sends the timestamp as a string, the list endpoints send it
    as a JSON integer; both forms are accepted.
    """
    seconds = _parse_integer(value, field, I64_MIN, I64_MAX)
    try:
        return UNIX_EPOCH + timedelta(seconds=seconds)
    except OverflowError as e:
        raise decode_error(field, value, "timestamp outside the representable range") from e


def parse_duration_100us(value: Any, field: str = "value") -> timedelta:
    """
    Parse a duration given in units of 100 microseconds.

    Examples:
        >>> parse_duration_100us("10")
        datetime.timedelta(microseconds=1000)
    """
    units = _parse_integer(value, field, 0, U64_MAX, accept_numbers=False)
    try:
        return timedelta(microseconds=units * 100)
    except OverflowError as e:
        raise decode_error(field, value, "duration outside the representable range") from e


def parse_ftl_enum(enum_cls: type[E], value: Any, field: str = "value") -> E:
    """
    Map an 8-bit ordinal (integer or integer string) onto an FTL enum member.

    An ordinal without a member is a decode error, never a fallback member.
    """
    ordinal = _parse_integer(value, field, 0, U8_MAX)
    try:
        return enum_cls(ordinal)
    except ValueError as e:
        raise decode_error(field, value, f"no {enum_cls.__name__} with ordinal {ordinal}") from e


def parse_query_type(value: Any, field: str = "value") -> QueryType:
    """Map a record type name such as ``"AAAA"`` onto QueryType."""
    name = expect_str(value, field)
    try:
        return QueryType(name)
    except ValueError as e:
        raise decode_error(field, value, "unknown query type") from e


def parse_ip_address(value: Any, field: str = "value") -> Union[ipaddress.IPv4Address, ipaddress.IPv6Address]:
    """Parse an IPv4 or IPv6 literal."""
    text = expect_str(value, field)
    try:
        return ipaddress.ip_address(text)
    except ValueError as e:
        raise decode_error(field, value, "not an IP address") from e


# ---------------------------------------------------------------------------
# Strict primitive readers
# ---------------------------------------------------------------------------


def expect_str(value: Any, field: str = "value") -> str:
    if not isinstance(value, str):
        raise decode_error(field, value, "expected a string")
    return value


def expect_optional_str(value: Any, field: str = "value") -> Optional[str]:
    if value is None:
        return None
    return expect_str(value, field)


def expect_bool(value: Any, field: str = "value") -> bool:
    if not isinstance(value, bool):
        raise decode_error(field, value, "expected a boolean")
    return value


def expect_uint(value: Any, field: str = "value") -> int:
    """Read a JSON integer in the unsigned 64-bit range."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise decode_error(field, value, "expected an unsigned integer")
    if not 0 <= value <= U64_MAX:
        raise decode_error(field, value, "integer out of unsigned 64-bit range")
    return value


def expect_float(value: Any, field: str = "value") -> float:
    """Read a JSON number; integers are widened to float."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise decode_error(field, value, "expected a number")
    return float(value)


def expect_object(value: Any, field: str = "value") -> dict[str, Any]:
    if not isinstance(value, dict):
        raise decode_error(field, value, "expected a JSON object")
    return value


def expect_list(value: Any, field: str = "value") -> list[Any]:
    if not isinstance(value, list):
        raise decode_error(field, value, "expected a JSON array")
    return value


def expect_list_of(value: Any, item_decoder: Decoder[T], field: str = "value") -> list[T]:
    """Decode every element of a JSON array with ``item_decoder``."""
    return [item_decoder(item, f"{field}[{index}]") for index, item in enumerate(expect_list(value, field))]


def require_key(data: dict[str, Any], key: str, context: str = "response") -> Any:
    """Return ``data[key]`` or raise PiHoleDecodeError naming the missing key."""
    if key not in data:
        raise PiHoleDecodeError(
            f"Missing field '{key}' in {context}",
            details={"field": key, "available_fields": sorted(data)[:20]},
        )
    return data[key]


# ---------------------------------------------------------------------------
# Flexible map ("fake map")
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProperMap:
    """A map slot that arrived as a JSON object."""

    entries: dict[str, Any]


@dataclass(frozen=True)
class EmptySequence:
    """
    A map slot that arrived as a JSON array.

    The appliance encodes an empty map as ``[]``. It has never been seen to send
    a populated array here; if it does, the elements are dropped and only their
    count is kept in ``discarded``.
    """

    discarded: int = 0


FlexibleMap = Union[ProperMap, EmptySequence]


def classify_flexible_map(value: Any, field: str = "value") -> FlexibleMap:
    """Tag a wire value as ProperMap or EmptySequence, or reject it."""
    if isinstance(value, dict):
        return ProperMap(value)

    if isinstance(value, list):
        if value:
            logger.warning(f"⚠️ {field}: expected a map but got a list of {len(value)} items, discarding them")
        return EmptySequence(discarded=len(value))

    raise decode_error(field, value, "expected a JSON object or an empty array")


def decode_flexible_map(value: Any, value_decoder: Decoder[T], field: str = "value") -> dict[str, T]:
    """
    Decode a map slot that may have been sent as ``[]``.

    Args:
        value: Raw JSON value
        value_decoder: Strict decoder applied to each map value
        field: Field name used in error messages

    Returns:
        The decoded mapping; empty when the wire value was an array
    """
    shape = classify_flexible_map(value, field)
    if isinstance(shape, EmptySequence):
        return {}
    return {key: value_decoder(item, f"{field}[{key!r}]") for key, item in shape.entries.items()}


__all__ = [
    "EmptySequence",
    "FlexibleMap",
    "ProperMap",
    "classify_flexible_map",
    "decode_error",
    "decode_flexible_map",
    "expect_bool",
    "expect_float",
    "expect_list",
    "expect_list_of",
    "expect_object",
    "expect_optional_str",
    "expect_str",
    "expect_uint",
    "parse_duration_100us",
    "parse_epoch_seconds",
    "parse_ftl_enum",
    "parse_i32",
    "parse_ip_address",
    "parse_query_type",
    "parse_uint_bool",
    "require_key",
]
