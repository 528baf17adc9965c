"""Shared fixtures: fake RDAP responses and fake PTR answers."""

from unittest.mock import MagicMock

import dns.rrset
import dns.resolver
import pytest
import requests

PRIVATE_NET = {
    "name": "PRIVATE-NET",
    "type": "ALLOCATION",
    "startAddress": "192.168.0.0",
    "endAddress": "192.168.255.255",
    "country": "ZZ",
    "remarks": [{"description": "private use"}],
}


def mock_response(payload=None, status_code=200, json_error=None):
    """Create a mock requests.Response carrying a JSON payload."""
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status_code
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Client Error", response=resp
        )
    else:
        resp.raise_for_status = MagicMock()
    return resp


def ptr_answer(address, hostname, ttl=300):
    """A resolver answer whose rrset is a real PTR rrset."""
    octets = address.split(".")
    owner = ".".join(reversed(octets)) + ".in-addr.arpa."
    answer = MagicMock()
    answer.rrset = dns.rrset.from_text(owner, ttl, "IN", "PTR", hostname + ".")
    return answer


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def resolver():
    return MagicMock(spec=dns.resolver.Resolver)
