"""Human-readable byte sizes."""

from __future__ import annotations

import re

from .errors import InvalidArgument

UNIT_BASE = 1024
UNITS: tuple[tuple[str, int], ...] = (
    ("K", UNIT_BASE),
    ("M", UNIT_BASE**2),
    ("G", UNIT_BASE**3),
    ("T", UNIT_BASE**4),
    ("P", UNIT_BASE**5),
    ("E", UNIT_BASE**6),
)

_SIZE_PATTERN = re.compile(r"(?P<amount>\d*)(?P<unit>.*)")


def format_size(num_bytes: int) -> str:
    """Render a byte count such as 1343686458 as '1.25 GB'."""
    if num_bytes < UNIT_BASE:
        return f"{num_bytes}B"
    symbol, multiplier = UNITS[0]
    for candidate, candidate_multiplier in UNITS:
        if candidate_multiplier > num_bytes:
            break
        symbol, multiplier = candidate, candidate_multiplier
    return f"{num_bytes / multiplier:.2f} {symbol}B"


def parse_size(text: str) -> int:
    """Convert strings like '200MB' or '1g' into a byte count."""
    raw = text.strip()
    match = _SIZE_PATTERN.fullmatch(raw)
    amount, unit = (match.group("amount"), match.group("unit")) if match else ("", "")
    if not amount:
        raise InvalidArgument(f"Unable to determine the size from '{text}'")
    if not unit:
        raise InvalidArgument(f"Unable to determine the unit from '{text}'")
    return int(amount) * unit_bytes(unit)


def unit_bytes(unit: str) -> int:
    """Return the multiplier for a unit symbol with or without the 'B' suffix."""
    normalized = unit.strip().upper()
    for symbol, multiplier in UNITS:
        if normalized in (symbol, f"{symbol}B"):
            return multiplier
    raise InvalidArgument(f"Unable to parse the unit '{unit}'")
