"""Rendering canonical duration parts as text."""

from __future__ import annotations

import re
from collections.abc import Callable
from decimal import Decimal

from pyduration._constants import CALENDAR_HOURS_PER_DAY
from pyduration._types import DurationParts

_TOKEN_RE = re.compile(r"dd?|hh?|HH?|mm?|ss?|SS?")
_SECONDS_TOKEN_RE = re.compile(r"[sS]")


def format_number(value: float) -> str:
    """Render a number without a trailing ".0" or trailing zeros."""
    if float(value).is_integer():
        return str(int(value))
    # repr() gives the shortest form, "f" keeps it out of exponent notation
    return format(Decimal(repr(float(value))), "f")


def json_number(value: float) -> int | float:
    """Whole numbers as int, anything else unchanged."""
    return int(value) if float(value).is_integer() else value


def has_seconds_token(pattern: str) -> bool:
    return _SECONDS_TOKEN_RE.search(pattern) is not None


def _pad(value: int, token: str) -> str:
    return str(value).zfill(len(token))


def _fractional_seconds(seconds: float, token: str) -> str:
    whole = _pad(int(seconds), token)
    if float(seconds).is_integer():
        return whole
    return whole + format_number(seconds)[len(str(int(seconds))):]


def format_pattern(parts: DurationParts, pattern: str, hours_per_day: int) -> str:
    """Render parts using the d/h/H/m/s/S token mini-language.

    Lowercase h reads the hours field. Uppercase H reads the total hour
    count with days folded in. Lowercase s keeps any fractional part,
    uppercase S truncates to whole seconds. Doubled tokens pad to two
    digits. Everything else is copied through.
    """
    renderers: dict[str, Callable[[str], str]] = {
        "d": lambda tok: _pad(parts.days, tok),
        "h": lambda tok: _pad(parts.hours, tok),
        "H": lambda tok: _pad(parts.total_hours(hours_per_day), tok),
        "m": lambda tok: _pad(parts.minutes, tok),
        "s": lambda tok: _fractional_seconds(parts.seconds, tok),
        "S": lambda tok: _pad(int(parts.seconds), tok),
    }
    return _TOKEN_RE.sub(lambda m: renderers[m.group()[0]](m.group()), pattern)


def humanize(parts: DurationParts) -> str:
    """Render only the non-zero units, e.g. "1d 2h 30s"."""
    if parts.is_zero():
        return "0s"
    segments = []
    if parts.days:
        segments.append(f"{parts.days}d")
    if parts.hours:
        segments.append(f"{parts.hours}h")
    if parts.minutes:
        segments.append(f"{parts.minutes}m")
    if parts.seconds:
        segments.append(f"{format_number(parts.seconds)}s")
    return " ".join(segments)


def to_iso8601(parts: DurationParts, hours_per_day: int) -> str:
    """Render parts as an ISO 8601 duration such as P1DT2H3M4S.

    Days are emitted as 24-hour days, the unit the parser reads back.
    """
    if parts.is_zero():
        return "PT0S"
    days, hours = divmod(parts.total_hours(hours_per_day), CALENDAR_HOURS_PER_DAY)
    result = "P"
    if days:
        result += f"{days}D"
    if hours or parts.minutes or parts.seconds:
        result += "T"
        if hours:
            result += f"{hours}H"
        if parts.minutes:
            result += f"{parts.minutes}M"
        if parts.seconds:
            result += f"{format_number(parts.seconds)}S"
    return result
