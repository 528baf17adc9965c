"""Exception types raised by validation and the two lookups."""

from __future__ import annotations


class RdapLookupToolError(Exception):
    """Base class for all rdaplookup errors."""


class ConfigError(RdapLookupToolError):
    """A settings file or environment value could not be used."""


class ValidationError(RdapLookupToolError, ValueError):
    """A candidate string is not a usable IPv4 address."""

    def __init__(self, candidate: object, reason: str):
        self.candidate = candidate
        self.reason = reason
        super().__init__(f"Invalid IPv4 address {candidate!r}: {reason}")


class NoAddressesError(ValidationError):
    """The batch was empty or missing."""

    def __init__(self):
        self.candidate = None
        self.reason = "no IPv4 addresses supplied"
        RdapLookupToolError.__init__(self, "No IPv4 addresses supplied")


class LookupFailure(RdapLookupToolError):
    """One remote lookup failed for one address."""

    source = "lookup"

    def __init__(self, address: str, cause: object):
        self.address = address
        self.cause = cause
        super().__init__(f"{self.source} lookup failed for {address}: {cause}")


class RdapLookupError(LookupFailure):
    source = "RDAP"


class DnsLookupError(LookupFailure):
    source = "DNS"
