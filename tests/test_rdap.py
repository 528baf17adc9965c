"""Tests for RDAP requests."""

import pytest
import requests

from rdaplookup.config import DEFAULT_RDAP_BASE_URL
from rdaplookup.errors import RdapLookupError
from rdaplookup.rdap import build_rdap_url, fetch_rdap, new_session

from .conftest import PRIVATE_NET, mock_response


class TestBuildRdapUrl:
    def test_default_base(self):
        assert build_rdap_url(DEFAULT_RDAP_BASE_URL, "8.8.8.8") == (
            "https://rdap.arin.net/registry/ip/8.8.8.8"
        )

    def test_trailing_slash_not_doubled(self):
        assert build_rdap_url("https://rdap.example/", "1.1.1.1") == (
            "https://rdap.example/ip/1.1.1.1"
        )


class TestNewSession:
    def test_headers(self):
        session = new_session()
        assert session.headers["Accept"] == "application/json"
        assert session.headers["User-Agent"].startswith("rdaplookup/")


class TestFetchRdap:
    def test_success(self, session):
        session.get.return_value = mock_response(PRIVATE_NET)

        record = fetch_rdap("192.168.10.10", session=session)

        assert record.name == "PRIVATE-NET"
        url = session.get.call_args[0][0]
        assert url == "https://rdap.arin.net/registry/ip/192.168.10.10"
        assert session.get.call_args[1]["headers"] == {"Accept": "application/json"}

    def test_custom_base_and_timeout(self, session):
        session.get.return_value = mock_response({})

        fetch_rdap("1.1.1.1", base_url="https://rdap.apnic.net", session=session, timeout=5)

        session.get.assert_called_once_with(
            "https://rdap.apnic.net/ip/1.1.1.1",
            headers={"Accept": "application/json"},
            timeout=5,
        )

    def test_http_error(self, session):
        session.get.return_value = mock_response(status_code=404)

        with pytest.raises(RdapLookupError) as exc:
            fetch_rdap("10.0.0.1", session=session)

        assert exc.value.address == "10.0.0.1"
        assert "10.0.0.1" in str(exc.value)
        assert isinstance(exc.value.cause, requests.HTTPError)

    def test_transport_error(self, session):
        session.get.side_effect = requests.ConnectionError("Connection refused")

        with pytest.raises(RdapLookupError, match="Connection refused"):
            fetch_rdap("10.0.0.1", session=session)

    def test_not_json(self, session):
        session.get.return_value = mock_response(json_error=ValueError("Expecting value"))

        with pytest.raises(RdapLookupError, match="not JSON"):
            fetch_rdap("10.0.0.1", session=session)

    def test_json_array(self, session):
        session.get.return_value = mock_response([1, 2])

        with pytest.raises(RdapLookupError, match="not a JSON object"):
            fetch_rdap("10.0.0.1", session=session)
