"""Tests for the FTL enumerations."""

import pytest

from pihole_api.decoders import parse_ftl_enum
from pihole_api.exceptions import PiHoleDecodeError
from pihole_api.ftl_types import DNSSECStatus, QueryStatus, QueryType, ReplyType


@pytest.mark.unit
class TestFTLEnums:
    """Ordinals must stay dense, zero-based and in FTL's order."""

    @pytest.mark.parametrize("enum_cls", [DNSSECStatus, QueryStatus, ReplyType])
    def test_every_member_round_trips(self, enum_cls):
        for member in enum_cls:
            assert parse_ftl_enum(enum_cls, str(int(member))) is member

    @pytest.mark.parametrize("enum_cls", [DNSSECStatus, QueryStatus, ReplyType])
    def test_ordinals_are_dense(self, enum_cls):
        assert [int(member) for member in enum_cls] == list(range(len(enum_cls)))

    @pytest.mark.parametrize("enum_cls", [DNSSECStatus, QueryStatus, ReplyType])
    def test_one_past_last_member_fails(self, enum_cls):
        with pytest.raises(PiHoleDecodeError):
            parse_ftl_enum(enum_cls, str(len(enum_cls)))

    def test_known_ordinals(self):
        assert QueryStatus(1) is QueryStatus.GRAVITY
        assert QueryStatus.STATUS_MAX == 16
        assert ReplyType(2) is ReplyType.NXDOMAIN
        assert ReplyType.REPLY_MAX == 14
        assert DNSSECStatus(4) is DNSSECStatus.ABANDONED

    def test_query_type_values_are_wire_names(self):
        assert all(member.value == member.name for member in QueryType)
        assert QueryType("HTTPS") is QueryType.HTTPS
