"""Candidate address collection from arguments and line-oriented streams."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import TextIO

# Notations that replace the dot in defanged addresses
_DOT_PATTERNS = [
    r"\[\.\]",
    r"\[dot\]",
    r"\(dot\)",
    r"\(\.\)",
]
_DOT_RE = re.compile("|".join(_DOT_PATTERNS), re.IGNORECASE)


def refang(text: str) -> str:
    """Replace defanged dot notations with actual dots.

    Handles: [.] [dot] (dot) (.)
    """
    return _DOT_RE.sub(".", text)


def read_addresses(stream: TextIO) -> list[str]:
    """Read one candidate per line, skipping blanks and ``#`` comments."""
    candidates: list[str] = []
    for line in stream:
        s = line.strip()
        if not s or s.startswith("#"):
            continue
        candidates.append(s)
    return candidates


def collect_candidates(
    arguments: Iterable[str] = (),
    streams: Iterable[TextIO] = (),
    refang_input: bool = False,
) -> list[str]:
    """Literal arguments first, then stream lines, in order."""
    candidates = list(arguments)
    for stream in streams:
        candidates.extend(read_addresses(stream))

    if refang_input:
        candidates = [refang(c) for c in candidates]
    return candidates
