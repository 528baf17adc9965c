"""RDAP queries against a registry's ``/ip`` endpoint."""

from __future__ import annotations

import logging

import requests

from .config import DEFAULT_RDAP_BASE_URL, RDAP_ACCEPT, REQUEST_TIMEOUT, USER_AGENT
from .errors import RdapLookupError
from .models import RdapRecord

logger = logging.getLogger(__name__)


def new_session() -> requests.Session:
    """A session carrying the User-Agent and JSON Accept headers."""
    session = requests.Session()
    session.headers.update({"User-Agent": USER_AGENT, "Accept": RDAP_ACCEPT})
    return session


def build_rdap_url(base_url: str, address: str) -> str:
    """``{base_url}/ip/{address}``, without doubling a trailing slash."""
    return f"{base_url.rstrip('/')}/ip/{address}"


def fetch_rdap(
    address: str,
    base_url: str = DEFAULT_RDAP_BASE_URL,
    session: requests.Session | None = None,
    timeout: float = REQUEST_TIMEOUT,
) -> RdapRecord:
    """GET the RDAP network record for *address*.

    Transport errors, non-2xx statuses and bodies that are not a JSON
    object all raise RdapLookupError.
    """
    if session is None:
        session = new_session()

    url = build_rdap_url(base_url, address)
    logger.debug("GET %s", url)

    try:
        resp = session.get(url, headers={"Accept": RDAP_ACCEPT}, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise RdapLookupError(address, e) from e

    try:
        payload = resp.json()
    except ValueError as e:
        raise RdapLookupError(address, f"response is not JSON ({e})") from e

    if not isinstance(payload, dict):
        raise RdapLookupError(address, "response is not a JSON object")

    return RdapRecord.from_json(payload)
