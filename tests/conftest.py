import json
from unittest.mock import MagicMock, Mock

import pytest

from pihole_api import AuthenticatedPiHoleAPI, PiHoleAPI, PiHoleAPIConfig, PiHoleAPIConfigWithKey

TEST_HOST = "http://192.168.0.100"
TEST_API_KEY = "0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"


def query_row(domain="google.com", **overrides):
    """A query log row in wire column order, with stringified numbers."""
    columns = {
        "timestamp": "1656247185",
        "query_type": "A",
        "domain": domain,
        "client": "192.168.0.10",
        "status": "2",
        "dnssec_status": "0",
        "reply_type": "4",
        "response_time": "12",
        "cname_domain": "",
        "regex_id": "-1",
        "upstream_destination": "8.8.8.8#53",
        "ede": "0",
    }
    columns.update(overrides)
    return list(columns.values())


@pytest.fixture
def mock_pihole_responses():
    """Fixture providing realistic Pi-hole response bodies."""
    summary_keys = [
        "domains_being_blocked",
        "dns_queries_today",
        "ads_blocked_today",
        "ads_percentage_today",
        "unique_domains",
        "queries_forwarded",
        "queries_cached",
        "clients_ever_seen",
        "unique_clients",
        "dns_queries_all_types",
        "reply_NODATA",
        "reply_NXDOMAIN",
        "reply_CNAME",
        "reply_IP",
        "privacy_level",
    ]
    summary_raw = {key: 100 + index for index, key in enumerate(summary_keys)}
    summary_raw["ads_percentage_today"] = 12.5
    summary_raw["status"] = "enabled"
    summary_raw["gravity_last_updated"] = {"file_exists": True, "absolute": 1656240000}

    summary = {key: f"1,{index:03d}" for index, key in enumerate(summary_keys)}
    summary["status"] = "disabled"

    return {
        "summary_raw": json.dumps(summary_raw),
        "summary": json.dumps(summary),
        "over_time_data": json.dumps(
            {
                "domains_over_time": {"1656246600": 52, "1656247200": 17},
                "ads_over_time": [],
            }
        ),
        "version": json.dumps({"version": 3}),
        "versions": json.dumps(
            {
                "core_update": False,
                "web_update": True,
                "FTL_update": False,
                "core_current": "v5.11.4",
                "web_current": "v5.13",
                "FTL_current": "v5.16.1",
                "core_latest": "v5.11.4",
                "web_latest": "v5.14",
                "FTL_latest": "v5.16.1",
                "core_branch": "master",
                "web_branch": "master",
                "FTL_branch": "master",
            }
        ),
        "top_items": json.dumps(
            {
                "top_queries": {"google.com": 42, "github.com": 7},
                "top_ads": {"ads.example.com": 3},
            }
        ),
        "top_items_one": json.dumps({"top_queries": {"google.com": 42}, "top_ads": []}),
        "top_items_empty": json.dumps({"top_queries": [], "top_ads": []}),
        "top_clients": json.dumps({"top_sources": {"laptop|192.168.0.10": 120, "192.168.0.11": 4}}),
        "top_clients_blocked": json.dumps({"top_sources_blocked": []}),
        "forward_destinations": json.dumps(
            {"forward_destinations": {"blocked|blocked": 10.5, "cached|cached": 30, "dns.google#53|8.8.8.8": 59.5}}
        ),
        "query_types": json.dumps({"querytypes": {"A (IPv4)": 60.0, "AAAA (IPv6)": 35.5, "PTR": 4.5}}),
        "all_queries": json.dumps(
            {
                "data": [
                    query_row("github.com"),
                    query_row(
                        "google.com",
                        status="3",
                        dnssec_status="1",
                        reply_type="3",
                        query_type="AAAA",
                        regex_id="7",
                    ),
                ]
            }
        ),
        "status_enabled": json.dumps({"status": "enabled"}),
        "status_disabled": json.dumps({"status": "disabled"}),
        "cache_info": json.dumps({"cacheinfo": {"cache-size": 10000, "cache-live-freed": 0, "cache-inserted": 987}}),
        "client_names": json.dumps(
            {"clients": [{"name": "laptop", "ip": "192.168.0.10"}, {"name": "", "ip": "fe80::1"}]}
        ),
        "over_time_data_clients": json.dumps({"over_time": {"1656246600": [3, 0], "1656247200": [1, 2]}}),
        "network": json.dumps(
            {
                "network": [
                    {
                        "id": 1,
                        "ip": ["192.168.0.10", "fe80::1"],
                        "hwaddr": "aa:bb:cc:dd:ee:ff",
                        "interface": "eth0",
                        "name": ["laptop"],
                        "firstSeen": 1656000000,
                        "lastQuery": 1656247185,
                        "numQueries": 1234,
                        "macVendor": "Raspberry Pi Trading Ltd",
                    }
                ]
            }
        ),
        "queries_count": json.dumps({"count": 123456}),
        "list_success": json.dumps({"success": True, "message": "Added testdomain.foo"}),
        "list_domains": json.dumps(
            {
                "data": [
                    {
                        "id": 5,
                        "type": 0,
                        "domain": "testdomain.foo",
                        "enabled": 1,
                        "date_added": 1656247185,
                        "date_modified": 1656247200,
                        "comment": None,
                        "groups": [0],
                    }
                ]
            }
        ),
        "custom_dns": json.dumps({"data": [["4.example.com", "127.0.0.1"], ["6.example.com", "::1"]]}),
        "custom_cname": json.dumps({"data": [["abc.example.com", "abc.example.net"]]}),
        "custom_success": json.dumps({"success": True, "message": ""}),
        "max_logage": json.dumps({"maxlogage": 24.0}),
        "invalid_list": "Invalid list [NOT_A_LIST]",
        "ftl_not_running": json.dumps({"FTLnotrunning": True}),
    }


@pytest.fixture
def mock_http_session():
    """Mock HTTP session for testing."""
    session = MagicMock()
    session.get = MagicMock()
    session.close = MagicMock()
    session.headers = {}
    return session


@pytest.fixture
def respond(mock_http_session):
    """Make the mock session answer every GET with ``text``."""

    def _respond(text, status_code=200):
        mock_http_session.get.return_value = Mock(status_code=status_code, text=text)
        return mock_http_session

    return _respond


@pytest.fixture
def config():
    return PiHoleAPIConfig(TEST_HOST)


@pytest.fixture
def config_with_key():
    return PiHoleAPIConfigWithKey(TEST_HOST, TEST_API_KEY)


@pytest.fixture
def api(config, mock_http_session):
    """Unauthenticated client over the mock session."""
    return PiHoleAPI(config, session=mock_http_session)


@pytest.fixture
def auth_api(config_with_key, mock_http_session):
    """Authenticated client over the mock session."""
    return AuthenticatedPiHoleAPI(config_with_key, session=mock_http_session)


@pytest.fixture
def requested_url(mock_http_session):
    """Return the URL of the most recent GET."""

    def _requested_url():
        return mock_http_session.get.call_args[0][0]

    return _requested_url
