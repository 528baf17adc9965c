"""PTR lookups with dnspython."""

from __future__ import annotations

import logging

import dns.exception
import dns.resolver
import dns.reversename

from .errors import DnsLookupError
from .models import DnsRecord

logger = logging.getLogger(__name__)


def resolve_ptr(address: str, resolver: dns.resolver.Resolver | None = None) -> DnsRecord:
    """Resolve the PTR record of *address*.

    Returns the ``in-addr.arpa`` owner name(s), the first PTR target as the
    host name, every target, and the answer TTL. Any resolver failure
    (no usable configuration, NXDOMAIN, no answer, timeout) raises
    DnsLookupError.
    """
    try:
        if resolver is None:
            resolver = dns.resolver.Resolver()
        qname = dns.reversename.from_address(address)
        answer = resolver.resolve(qname, "PTR")
    except dns.exception.DNSException as e:
        raise DnsLookupError(address, e) from e

    rrset = answer.rrset
    if rrset is None or len(rrset) == 0:
        raise DnsLookupError(address, "empty PTR answer")

    hostnames = tuple(r.to_text().rstrip(".") for r in rrset)
    names = (rrset.name.to_text().rstrip("."),)
    logger.debug("%s -> %s (ttl %s)", address, ", ".join(hostnames), rrset.ttl)

    return DnsRecord(
        names=names,
        hostname=hostnames[0],
        ttl=rrset.ttl,
        hostnames=hostnames,
    )
