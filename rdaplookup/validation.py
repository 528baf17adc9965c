"""IPv4 dotted-quad validation.

Structural check first (four dot-separated groups of 1-3 digits), then a
range check on each octet. Addresses are returned exactly as given; leading
zeros are neither stripped nor rejected.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from .errors import NoAddressesError, ValidationError

_DOTTED_QUAD_RE = re.compile(r"\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}", re.ASCII)


def validate_address(candidate: str) -> str:
    """Return *candidate* if it is a valid IPv4 address, else raise."""
    if not isinstance(candidate, str):
        raise ValidationError(candidate, f"expected a string, got {type(candidate).__name__}")

    if not _DOTTED_QUAD_RE.fullmatch(candidate):
        raise ValidationError(candidate, "expected four dot-separated numbers")

    for octet in candidate.split("."):
        if int(octet) > 255:
            raise ValidationError(candidate, f"octet {octet} is greater than 255")

    return candidate


def validate_addresses(candidates: Iterable[str] | None) -> list[str]:
    """Validate a whole batch, preserving order.

    An empty or missing batch is rejected before any per-address check.
    The first invalid entry aborts the batch.
    """
    if candidates is None:
        raise NoAddressesError()

    batch = list(candidates)
    if not batch:
        raise NoAddressesError()

    return [validate_address(c) for c in batch]
