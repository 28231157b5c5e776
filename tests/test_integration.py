"""
Live tests against a real Pi-hole.

Skipped unless PIHOLE_API_TEST_HOST, PIHOLE_API_TEST_API_KEY and
PIHOLE_API_TEST_DNS_ADDRESS (``ip`` or ``ip:port``) are set. The tests modify
the appliance: they add and remove ``testdomain.foo`` on the whitelist, toggle
blocking and create local DNS records for ``4.example.com``/``6.example.com``.
"""

import os
from datetime import datetime, timezone
from ipaddress import IPv4Address, IPv6Address

import pytest

from pihole_api import (
    AuthenticatedPiHoleAPI,
    PiHoleAPI,
    PiHoleAPIConfig,
    PiHoleAPIConfigWithKey,
    PiHoleInvalidListError,
)

dns_resolver = pytest.importorskip("dns.resolver")

HOST = os.environ.get("PIHOLE_API_TEST_HOST")
API_KEY = os.environ.get("PIHOLE_API_TEST_API_KEY")
DNS_ADDRESS = os.environ.get("PIHOLE_API_TEST_DNS_ADDRESS")

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not (HOST and API_KEY and DNS_ADDRESS),
        reason="PIHOLE_API_TEST_HOST, PIHOLE_API_TEST_API_KEY and PIHOLE_API_TEST_DNS_ADDRESS required",
    ),
]

# Anything outside this window means seconds were decoded with the wrong unit
LOWER_CUTOFF = datetime(2020, 1, 1, tzinfo=timezone.utc)
UPPER_CUTOFF = datetime(2030, 1, 1, tzinfo=timezone.utc)


@pytest.fixture(scope="module")
def resolver():
    """Resolver that sends every lookup to the Pi-hole under test, uncached."""
    address, _, port = DNS_ADDRESS.partition(":")
    resolver = dns_resolver.Resolver(configure=False)
    resolver.nameservers = [address]
    resolver.port = int(port) if port else 53
    resolver.lifetime = 5
    resolver.cache = None
    return resolver


@pytest.fixture
def lookup(resolver):
    def _lookup(domain):
        resolver.resolve(domain, "A")

    return _lookup


@pytest.fixture
def live_api():
    with PiHoleAPI(PiHoleAPIConfig(HOST)) as api:
        yield api


@pytest.fixture
def live_auth_api():
    with AuthenticatedPiHoleAPI(PiHoleAPIConfigWithKey(HOST, API_KEY)) as api:
        yield api


class TestLiveUnauthenticated:
    def test_summary_raw(self, live_api):
        assert live_api.get_summary_raw().status in ("enabled", "disabled")

    def test_summary(self, live_api):
        assert live_api.get_summary().status in ("enabled", "disabled")

    def test_over_time_data(self, live_api):
        live_api.get_over_time_data_10_mins()

    def test_version(self, live_api):
        assert live_api.get_version() >= 3

    def test_versions(self, live_api):
        versions = live_api.get_versions()

        assert (versions.core_current == versions.core_latest) != versions.core_update
        assert (versions.web_current == versions.web_latest) != versions.web_update
        assert (versions.ftl_current == versions.ftl_latest) != versions.ftl_update


class TestLiveStatistics:
    def test_top_items(self, live_auth_api, lookup):
        lookup("google.com")

        assert len(live_auth_api.get_top_items().top_queries) >= 1

        top = live_auth_api.get_top_items(1).top_queries
        assert len(top) == 1
        domain, count = next(iter(top.items()))

        lookup(domain)
        assert live_auth_api.get_top_items(1).top_queries.get(domain) == count + 1

        assert len(live_auth_api.get_top_items(100).top_queries) <= 100

    def test_top_clients(self, live_auth_api, lookup):
        lookup("google.com")

        assert len(live_auth_api.get_top_clients().top_sources) >= 1

    def test_top_clients_blocked(self, live_auth_api):
        live_auth_api.get_top_clients_blocked()

    def test_forward_destinations(self, live_auth_api):
        live_auth_api.get_forward_destinations()

    def test_query_types(self, live_auth_api, lookup):
        lookup("google.com")

        assert live_auth_api.get_query_types().querytypes["A (IPv4)"] >= 0.0

    def test_all_queries(self, live_auth_api, lookup):
        lookup("google.com")

        queries = live_auth_api.get_all_queries(100)

        assert len(queries) >= 1
        assert any(query.domain == "google.com" for query in queries)

    def test_cache_info(self, live_auth_api, lookup):
        lookup("google.com")

        assert live_auth_api.get_cache_info().cache_inserted > 0

    def test_client_names(self, live_auth_api, lookup):
        lookup("google.com")

        assert len(live_auth_api.get_client_names()) > 0

    def test_over_time_data_clients(self, live_auth_api):
        live_auth_api.get_over_time_data_clients()

    def test_network(self, live_auth_api):
        live_auth_api.get_network()

    def test_queries_count(self, live_auth_api):
        live_auth_api.get_queries_count()

    def test_max_logage(self, live_auth_api):
        assert live_auth_api.get_max_logage() > 0


class TestLiveBlocking:
    def test_enable(self, live_auth_api):
        assert live_auth_api.enable().status == "enabled"

    def test_disable(self, live_auth_api):
        try:
            assert live_auth_api.disable(10).status == "disabled"
        finally:
            live_auth_api.enable()


class TestLiveLists:
    def test_add(self, live_auth_api):
        assert live_auth_api.list_add(["testdomain.foo"], "white").success

        with pytest.raises(PiHoleInvalidListError):
            live_auth_api.list_add(["testdomain.foo"], "NOT_A_LIST")

    def test_remove(self, live_auth_api):
        assert live_auth_api.list_remove(["x.testdomain.foo"], "white").success

        with pytest.raises(PiHoleInvalidListError):
            live_auth_api.list_remove(["x.testdomain.foo"], "NOT_A_LIST")

    def test_get_domains(self, live_auth_api):
        live_auth_api.list_add(["testdomain.foo"], "white")

        domains = live_auth_api.list_get_domains("white")
        assert any(entry.domain == "testdomain.foo" for entry in domains)
        assert all(LOWER_CUTOFF < entry.date_added < UPPER_CUTOFF for entry in domains)
        assert all(LOWER_CUTOFF < entry.date_modified < UPPER_CUTOFF for entry in domains)

        live_auth_api.list_remove(["testdomain.foo"], "white")
        domains = live_auth_api.list_get_domains("white")
        assert not any(entry.domain == "testdomain.foo" for entry in domains)

        with pytest.raises(PiHoleInvalidListError):
            live_auth_api.list_get_domains("NOT_A_LIST")


class TestLiveLocalDNS:
    RECORDS = [(IPv4Address("127.0.0.1"), "4.example.com"), (IPv6Address("::1"), "6.example.com")]

    def test_get_custom_dns_records(self, live_auth_api):
        live_auth_api.get_custom_dns_records()

    def test_add_and_delete_custom_dns_records(self, live_auth_api):
        for address, domain in self.RECORDS:
            live_auth_api.delete_custom_dns_record(address, domain)

        present = {(record.ip_address, record.domain) for record in live_auth_api.get_custom_dns_records()}
        assert not present & set(self.RECORDS)

        for address, domain in self.RECORDS:
            live_auth_api.add_custom_dns_record(address, domain)

        records = live_auth_api.get_custom_dns_records()
        for address, domain in self.RECORDS:
            assert sum(1 for r in records if (r.ip_address, r.domain) == (address, domain)) == 1

        for address, domain in self.RECORDS:
            live_auth_api.delete_custom_dns_record(address, domain)

    def test_add_and_delete_custom_cname_records(self, live_auth_api):
        live_auth_api.delete_custom_cname_record("cname.example.com", "4.example.com")

        live_auth_api.add_custom_cname_record("cname.example.com", "4.example.com")
        records = live_auth_api.get_custom_cname_records()
        assert any(r.domain == "cname.example.com" and r.target_domain == "4.example.com" for r in records)

        live_auth_api.delete_custom_cname_record("cname.example.com", "4.example.com")
        records = live_auth_api.get_custom_cname_records()
        assert not any(r.domain == "cname.example.com" for r in records)
