"""Parsers for random.org plain-text response bodies."""

from __future__ import annotations

import re

# ASCII only: int() alone would also take "+5", "1_000" and non-Latin digits
_INTEGER_RE = re.compile(r"-?[0-9]+")


def parse_integer_lines(text: str) -> list[int]:
    """Parse a newline-delimited list of base-10 integers.

    Blank lines (including the trailing newline) are ignored.

    Raises:
        ValueError: a non-blank line is not an integer.
    """
    values = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        if _INTEGER_RE.fullmatch(line) is None:
            raise ValueError(f"not an integer: {line!r}")
        values.append(int(line))
    return values


def parse_quota(text: str) -> int | None:
    """Extract the first integer in *text*, keeping a leading minus sign.

    random.org reports a negative allowance once a client has overdrawn its
    quota, so the sign matters. Returns ``None`` when there is no integer.
    """
    match = _INTEGER_RE.search(text)
    if match is None:
        return None
    return int(match.group())
