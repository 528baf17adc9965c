"""rdaplookup — consolidated RDAP and reverse DNS records for IPv4 addresses."""

__version__ = "0.1.0"
