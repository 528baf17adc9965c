"""Dataclasses for RDAP responses, PTR answers and consolidated results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# External field names, in display order
FIELD_NAMES = (
    "IP",
    "ReverseDNS",
    "HostName",
    "Name",
    "Type",
    "StartAddress",
    "EndAddress",
    "TTL",
    "Country",
    "Remarks",
    "Events",
    "Entities",
    "Links",
    "Notices",
)


def _text(value: Any) -> str | None:
    """Coerce a loosely-typed JSON scalar or line array to a string.

    RDAP sends ``description`` and ``roles`` as arrays; they are joined with
    a single space.
    """
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return " ".join(str(v) for v in value if v is not None)
    if isinstance(value, dict):
        return None
    return str(value)


def _items(payload: dict, key: str) -> list[dict]:
    """Return the dict members of an RDAP array, tolerating junk."""
    value = payload.get(key)
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


@dataclass(frozen=True)
class RdapRemark:
    title: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class RdapEvent:
    event_date: str | None = None
    event_action: str | None = None


@dataclass(frozen=True)
class RdapEntity:
    roles: str | None = None
    handle: str | None = None


@dataclass(frozen=True)
class RdapLink:
    rel: str | None = None
    href: str | None = None


@dataclass(frozen=True)
class RdapNotice:
    title: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class RdapRecord:
    """The part of an RDAP ``ip network`` response that gets consolidated."""

    name: str | None = None
    type: str | None = None
    start_address: str | None = None
    end_address: str | None = None
    country: str | None = None
    remarks: tuple[RdapRemark, ...] = ()
    events: tuple[RdapEvent, ...] = ()
    entities: tuple[RdapEntity, ...] = ()
    links: tuple[RdapLink, ...] = ()
    notices: tuple[RdapNotice, ...] = ()

    @classmethod
    def from_json(cls, payload: Any) -> RdapRecord:
        """Build a record from a decoded JSON body.

        Every member is optional. Missing keys, nulls and malformed array
        entries produce ``None`` or are skipped; this never raises.
        """
        if not isinstance(payload, dict):
            return cls()

        return cls(
            name=_text(payload.get("name")),
            type=_text(payload.get("type")),
            start_address=_text(payload.get("startAddress")),
            end_address=_text(payload.get("endAddress")),
            country=_text(payload.get("country")),
            remarks=tuple(
                RdapRemark(
                    title=_text(r.get("title")),
                    description=_text(r.get("description")),
                )
                for r in _items(payload, "remarks")
            ),
            events=tuple(
                RdapEvent(
                    event_date=_text(e.get("eventDate")),
                    event_action=_text(e.get("eventAction")),
                )
                for e in _items(payload, "events")
            ),
            entities=tuple(
                RdapEntity(
                    roles=_text(e.get("roles")),
                    handle=_text(e.get("handle")),
                )
                for e in _items(payload, "entities")
            ),
            links=tuple(
                RdapLink(rel=_text(li.get("rel")), href=_text(li.get("href")))
                for li in _items(payload, "links")
            ),
            notices=tuple(
                RdapNotice(
                    title=_text(n.get("title")),
                    description=_text(n.get("description")),
                )
                for n in _items(payload, "notices")
            ),
        )


@dataclass(frozen=True)
class DnsRecord:
    """A PTR answer for one address."""

    names: tuple[str, ...]  # owner names, e.g. "10.10.168.192.in-addr.arpa"
    hostname: str | None
    ttl: int | None
    hostnames: tuple[str, ...] = ()


@dataclass(frozen=True)
class ConsolidatedResult:
    """RDAP and reverse-DNS data merged for one queried address."""

    ip: str
    reverse_dns: tuple[str, ...] = ()
    host_name: str | None = None
    name: str | None = None
    type: str | None = None
    start_address: str | None = None
    end_address: str | None = None
    ttl: int | None = None
    country: str | None = None
    remarks: tuple[str, ...] = ()
    events: tuple[str, ...] = ()
    entities: tuple[str, ...] = ()
    links: tuple[str, ...] = ()
    notices: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Render with the external field names, sequences as lists."""
        return {
            "IP": self.ip,
            "ReverseDNS": list(self.reverse_dns),
            "HostName": self.host_name,
            "Name": self.name,
            "Type": self.type,
            "StartAddress": self.start_address,
            "EndAddress": self.end_address,
            "TTL": self.ttl,
            "Country": self.country,
            "Remarks": list(self.remarks),
            "Events": list(self.events),
            "Entities": list(self.entities),
            "Links": list(self.links),
            "Notices": list(self.notices),
        }
