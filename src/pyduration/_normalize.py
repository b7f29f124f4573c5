"""Carry rules between duration units."""

from __future__ import annotations

from decimal import Decimal, localcontext

from pyduration._constants import MINUTES_PER_HOUR, SECONDS_PER_MINUTE
from pyduration._errors import ERR_MSG_INVALID_HOURS_PER_DAY, InvalidHoursPerDayError
from pyduration._types import DurationParts, RawDuration

# Extra digits for the unit multipliers applied while flattening
_CARRY_HEADROOM = 10


def validate_hours_per_day(hours_per_day: object) -> int:
    """Return hours_per_day if it is a positive int, else raise."""
    if (
        isinstance(hours_per_day, bool)
        or not isinstance(hours_per_day, int)
        or hours_per_day <= 0
    ):
        raise InvalidHoursPerDayError(
            ERR_MSG_INVALID_HOURS_PER_DAY,
            f"hours_per_day must be an int > 0, got {hours_per_day!r}",
        )
    return hours_per_day


def carry(seconds: Decimal, hours_per_day: int) -> DurationParts:
    """Split a non-negative count of seconds into carried parts.

    Seconds roll into minutes and minutes into hours at 60. Hours roll
    into days at hours_per_day. Seconds keep their fractional part.
    """
    minutes, seconds = divmod(seconds, SECONDS_PER_MINUTE)
    minutes = int(minutes)
    remainder = float(seconds)
    if remainder >= SECONDS_PER_MINUTE:
        # float rounding of a remainder just under 60 lands on 60.0
        minutes += 1
        remainder = 0.0
    hours, minutes = divmod(minutes, MINUTES_PER_HOUR)
    days, hours = divmod(hours, hours_per_day)
    return DurationParts(days=days, hours=hours, minutes=minutes, seconds=remainder)


def _precision_for(raw: RawDuration) -> int:
    """Digits needed to flatten and carry raw without rounding."""
    fields = (raw.days, raw.hours, raw.minutes, raw.seconds)
    return sum(len(value.as_tuple().digits) + abs(value.as_tuple().exponent) for value in fields)


def normalize(raw: RawDuration, hours_per_day: int) -> DurationParts:
    """Flatten fractional units down to seconds, then carry them up."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _precision_for(raw) + _CARRY_HEADROOM)
        return carry(raw.total_seconds(), hours_per_day)


def drop_seconds(parts: DurationParts) -> DurationParts:
    """Return parts with the seconds field truncated to zero."""
    return DurationParts(days=parts.days, hours=parts.hours, minutes=parts.minutes)
