"""Value types shared by the parser, normalizer and formatter."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pyduration._constants import (
    MINUTES_PER_HOUR,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)

_ZERO = Decimal(0)


@dataclass(frozen=True)
class RawDuration:
    """Un-carried unit totals collected by a matcher.

    Fields may exceed their modulus and may be fractional. Days are
    calendar days of 24 hours.
    """

    days: Decimal = _ZERO
    hours: Decimal = _ZERO
    minutes: Decimal = _ZERO
    seconds: Decimal = _ZERO

    def __add__(self, other: RawDuration) -> RawDuration:
        if not isinstance(other, RawDuration):
            return NotImplemented
        return RawDuration(
            days=self.days + other.days,
            hours=self.hours + other.hours,
            minutes=self.minutes + other.minutes,
            seconds=self.seconds + other.seconds,
        )

    def total_seconds(self) -> Decimal:
        return (
            self.days * SECONDS_PER_DAY
            + self.hours * SECONDS_PER_HOUR
            + self.minutes * SECONDS_PER_MINUTE
            + self.seconds
        )


@dataclass(frozen=True)
class DurationParts:
    """Canonical (days, hours, minutes, seconds) tuple."""

    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: float = 0.0

    def total_hours(self, hours_per_day: int) -> int:
        return self.days * hours_per_day + self.hours

    def total_seconds(self, hours_per_day: int) -> float:
        minutes = self.total_hours(hours_per_day) * MINUTES_PER_HOUR + self.minutes
        return float(minutes * SECONDS_PER_MINUTE) + self.seconds

    def is_zero(self) -> bool:
        return not (self.days or self.hours or self.minutes or self.seconds)
