"""Lookup engine — RDAP and reverse DNS merged into one record per address."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field

import dns.resolver
import requests

from .config import DEFAULT_RDAP_BASE_URL, REQUEST_TIMEOUT
from .errors import DnsLookupError, RdapLookupError
from .models import ConsolidatedResult, DnsRecord, RdapRecord
from .rdap import fetch_rdap, new_session
from .reverse_dns import resolve_ptr

logger = logging.getLogger(__name__)


def _pair(a: str | None, b: str | None) -> str:
    return f"{a or ''}: {b or ''}"


def merge(address: str, rdap: RdapRecord, dns_record: DnsRecord | None) -> ConsolidatedResult:
    """Combine one RDAP record and an optional PTR answer.

    The address is echoed as given, never re-read from either response.
    """
    return ConsolidatedResult(
        ip=address,
        reverse_dns=dns_record.names if dns_record else (),
        host_name=dns_record.hostname if dns_record else None,
        ttl=dns_record.ttl if dns_record else None,
        name=rdap.name,
        type=rdap.type,
        start_address=rdap.start_address,
        end_address=rdap.end_address,
        country=rdap.country,
        remarks=tuple(r.description or "" for r in rdap.remarks),
        events=tuple(_pair(e.event_date, e.event_action) for e in rdap.events),
        entities=tuple(_pair(e.roles, e.handle) for e in rdap.entities),
        links=tuple(_pair(li.rel, li.href) for li in rdap.links),
        notices=tuple(_pair(n.title, n.description) for n in rdap.notices),
    )


@dataclass
class LookupClient:
    """Collaborators and settings shared by every lookup in a batch."""

    base_url: str = DEFAULT_RDAP_BASE_URL
    timeout: float = REQUEST_TIMEOUT
    session: requests.Session = field(default_factory=new_session)
    resolver: dns.resolver.Resolver | None = None
    on_error: Callable[[RdapLookupError], None] | None = None

    def rdap(self, address: str) -> RdapRecord | None:
        """RDAP record, or None after reporting the failure."""
        try:
            return fetch_rdap(
                address,
                base_url=self.base_url,
                session=self.session,
                timeout=self.timeout,
            )
        except RdapLookupError as e:
            if self.on_error:
                self.on_error(e)
            else:
                logger.error("%s", e)
            return None

    def reverse_dns(self, address: str) -> DnsRecord | None:
        """PTR answer, or None. Failures are not reported."""
        try:
            return resolve_ptr(address, resolver=self.resolver)
        except DnsLookupError as e:
            logger.debug("%s", e)
            return None


def lookup_address(address: str, client: LookupClient | None = None) -> ConsolidatedResult | None:
    """Look up one validated address.

    Returns None when RDAP failed. A DNS failure only leaves the DNS fields
    empty.
    """
    if client is None:
        client = LookupClient()

    rdap = client.rdap(address)
    dns_record = client.reverse_dns(address)

    if rdap is None:
        return None
    return merge(address, rdap, dns_record)


def lookup_addresses(
    addresses: Iterable[str],
    client: LookupClient | None = None,
) -> Iterator[ConsolidatedResult]:
    """Yield a record per address, in input order, skipping RDAP failures."""
    if client is None:
        client = LookupClient()

    for address in addresses:
        result = lookup_address(address, client)
        if result is not None:
            yield result
