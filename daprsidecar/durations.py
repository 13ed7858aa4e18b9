"""Parsing and formatting of duration strings such as ``"1h30m"`` or ``"250ms"``."""

from __future__ import annotations

import re
from datetime import timedelta

_UNITS = {
    "ns": 1,
    "us": 1_000,
    "\u00b5s": 1_000,
    "\u03bcs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_COMPONENT = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")
_MAX_NANOS = 2**63 - 1


def _from_nanos(nanos: int) -> timedelta:
    micros = abs(nanos) // 1_000
    return timedelta(microseconds=-micros if nanos < 0 else micros)


def _to_nanos(delta: timedelta) -> int:
    return (delta.days * 86_400 + delta.seconds) * 1_000_000_000 + delta.microseconds * 1_000


def parse_duration(text: str) -> timedelta:
    """Parse a signed sequence of decimal numbers with unit suffixes.

    Valid units are ``ns``, ``us`` (or ``µs``), ``ms``, ``s``, ``m`` and ``h``.
    Precision below one microsecond is truncated. Raises ``ValueError`` on
    malformed input or on overflow.
    """
    rest = text
    negative = False
    if rest and rest[0] in "+-":
        negative = rest[0] == "-"
        rest = rest[1:]
    if rest == "0":
        return timedelta(0)
    if not rest:
        raise ValueError(f'invalid duration "{text}"')

    limit = _MAX_NANOS + 1 if negative else _MAX_NANOS
    total = 0
    position = 0
    while position < len(rest):
        match = _COMPONENT.match(rest, position)
        whole, fraction, unit = match.group(1), match.group(2) or "", match.group(3)
        if not whole and not fraction:
            raise ValueError(f'invalid duration "{text}"')
        if not unit:
            raise ValueError(f'missing unit in duration "{text}"')
        factor = _UNITS.get(unit)
        if factor is None:
            raise ValueError(f'unknown unit "{unit}" in duration "{text}"')
        value = int(whole or "0") * factor
        if fraction:
            value += int(fraction) * factor // 10 ** len(fraction)
        total += value
        if total > limit:
            raise ValueError(f'invalid duration "{text}"')
        position = match.end()

    return _from_nanos(-total if negative else total)


def _with_fraction(value: int, precision: int) -> str:
    whole, remainder = divmod(value, 10**precision)
    if not remainder:
        return str(whole)
    return f"{whole}." + f"{remainder:0{precision}d}".rstrip("0")


def format_duration(delta: timedelta) -> str:
    """Format ``delta`` in the form accepted by :func:`parse_duration`, e.g. ``"1h0m0s"``."""
    nanos = _to_nanos(delta)
    sign = "-" if nanos < 0 else ""
    magnitude = abs(nanos)

    if magnitude == 0:
        return "0s"
    if magnitude < 1_000:
        return f"{sign}{magnitude}ns"
    if magnitude < 1_000_000:
        return f"{sign}{_with_fraction(magnitude, 3)}\u00b5s"
    if magnitude < 1_000_000_000:
        return f"{sign}{_with_fraction(magnitude, 6)}ms"

    seconds, remainder = divmod(magnitude, 1_000_000_000)
    text = _with_fraction((seconds % 60) * 1_000_000_000 + remainder, 9) + "s"
    minutes = seconds // 60
    if minutes:
        text = f"{minutes % 60}m{text}"
        hours = minutes // 60
        if hours:
            text = f"{hours}h{text}"
    return sign + text