"""The Duration value object."""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
from typing import Any

from pyduration import _format
from pyduration._constants import (
    DEFAULT_HOURS_PER_DAY,
    DEFAULT_PATTERN,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from pyduration._errors import (
    ERR_MSG_INVALID_DURATION,
    ERR_MSG_INVALID_PATTERN,
    InvalidDurationError,
    InvalidPatternError,
)
from pyduration._normalize import drop_seconds, validate_hours_per_day
from pyduration._parser import parse, to_decimal, valid
from pyduration._types import DurationParts


class Duration:
    """An immutable, normalized span of elapsed time.

    Accepts a number of seconds, a numeric string, an ISO 8601 duration
    ("P1DT2H"), a colon form ("1d 10:29:30") or unit tokens
    ("1d 2h 3m 4.5s"). Omitting the value gives the zero duration.

    Args:
        value: Duration to parse, or None for zero.
        hours_per_day: Hours carried into one stored day.
        pattern: Default pattern for format() and str(). If it has no
            seconds token the seconds are dropped.

    Raises:
        InvalidDurationError: If value is not a duration.
        InvalidHoursPerDayError: If hours_per_day is not a positive int.
        InvalidPatternError: If pattern is not a string.
    """

    __slots__ = ("_parts", "_hours_per_day", "_pattern")

    def __init__(
        self,
        value: Any = None,
        hours_per_day: int = DEFAULT_HOURS_PER_DAY,
        pattern: str = DEFAULT_PATTERN,
    ) -> None:
        self._hours_per_day = validate_hours_per_day(hours_per_day)
        self._pattern = _checked_pattern(pattern)

        if value is None:
            parts = DurationParts()
        else:
            parts = parse(value, hours_per_day)
            if parts is None:
                raise InvalidDurationError(
                    ERR_MSG_INVALID_DURATION,
                    f"cannot parse duration: {value!r}",
                )
        if not _format.has_seconds_token(pattern):
            parts = drop_seconds(parts)
        self._parts = parts

    # --- Factories ---

    @classmethod
    def from_seconds(
        cls,
        seconds: float | Decimal,
        hours_per_day: int = DEFAULT_HOURS_PER_DAY,
        pattern: str = DEFAULT_PATTERN,
    ) -> Duration:
        return cls(_scaled(seconds, 1), hours_per_day, pattern)

    @classmethod
    def from_minutes(
        cls,
        minutes: float | Decimal,
        hours_per_day: int = DEFAULT_HOURS_PER_DAY,
        pattern: str = DEFAULT_PATTERN,
    ) -> Duration:
        return cls(_scaled(minutes, SECONDS_PER_MINUTE), hours_per_day, pattern)

    @classmethod
    def from_hours(
        cls,
        hours: float | Decimal,
        hours_per_day: int = DEFAULT_HOURS_PER_DAY,
        pattern: str = DEFAULT_PATTERN,
    ) -> Duration:
        return cls(_scaled(hours, SECONDS_PER_HOUR), hours_per_day, pattern)

    @classmethod
    def from_days(
        cls,
        days: float | Decimal,
        hours_per_day: int = DEFAULT_HOURS_PER_DAY,
        pattern: str = DEFAULT_PATTERN,
    ) -> Duration:
        """Build from calendar days of 24 hours each."""
        return cls(_scaled(days, SECONDS_PER_DAY), hours_per_day, pattern)

    @classmethod
    def from_string(
        cls,
        text: str,
        hours_per_day: int = DEFAULT_HOURS_PER_DAY,
        pattern: str = DEFAULT_PATTERN,
    ) -> Duration:
        if not isinstance(text, str):
            raise InvalidDurationError(
                ERR_MSG_INVALID_DURATION,
                f"from_string() requires a str, got {type(text).__name__}",
            )
        return cls(text, hours_per_day, pattern)

    @classmethod
    def from_timedelta(
        cls,
        delta: timedelta,
        hours_per_day: int = DEFAULT_HOURS_PER_DAY,
        pattern: str = DEFAULT_PATTERN,
    ) -> Duration:
        if not isinstance(delta, timedelta):
            raise InvalidDurationError(
                ERR_MSG_INVALID_DURATION,
                f"from_timedelta() requires a timedelta, got {type(delta).__name__}",
            )
        seconds = (
            Decimal(delta.days) * SECONDS_PER_DAY
            + Decimal(delta.seconds)
            + Decimal(delta.microseconds).scaleb(-6)
        )
        return cls(seconds, hours_per_day, pattern)

    @classmethod
    def zero(
        cls,
        hours_per_day: int = DEFAULT_HOURS_PER_DAY,
        pattern: str = DEFAULT_PATTERN,
    ) -> Duration:
        return cls(None, hours_per_day, pattern)

    # --- Validation ---

    @staticmethod
    def valid(value: Any) -> bool:
        """Return True if value can be parsed into a Duration."""
        return valid(value)

    @staticmethod
    def parse(value: Any, hours_per_day: int = DEFAULT_HOURS_PER_DAY) -> DurationParts | None:
        """Parse value into canonical parts without raising on bad input."""
        return parse(value, hours_per_day)

    # --- Fields ---

    @property
    def days(self) -> int:
        return self._parts.days

    @property
    def hours(self) -> int:
        return self._parts.hours

    @property
    def minutes(self) -> int:
        return self._parts.minutes

    @property
    def seconds(self) -> float:
        return self._parts.seconds

    @property
    def parts(self) -> DurationParts:
        return self._parts

    @property
    def hours_per_day(self) -> int:
        return self._hours_per_day

    @property
    def pattern(self) -> str:
        return self._pattern

    # --- Conversions ---

    def to_seconds(self) -> float:
        return self._parts.total_seconds(self._hours_per_day)

    def to_minutes(self) -> float:
        return self.to_seconds() / SECONDS_PER_MINUTE

    def to_hours(self) -> float:
        return self.to_seconds() / SECONDS_PER_HOUR

    def to_timedelta(self) -> timedelta:
        return timedelta(seconds=self.to_seconds())

    # --- Formatting ---

    def format(self, pattern: str | None = None) -> str:
        """Render with pattern, or with the default pattern if omitted.

        Tokens: d/dd days, h/hh hours of the day, H/HH total hours,
        m/mm minutes, s/ss seconds with fraction, S/SS whole seconds.
        """
        if pattern is None:
            pattern = self._pattern
        return _format.format_pattern(self._parts, _checked_pattern(pattern), self._hours_per_day)

    def humanize(self) -> str:
        return _format.humanize(self._parts)

    def to_iso8601(self) -> str:
        return _format.to_iso8601(self._parts, self._hours_per_day)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready payload: total seconds, raw fields and both renderings."""
        return {
            "seconds": int(self.to_seconds()),
            "values": {
                "days": self.days,
                "hours": self.hours,
                "minutes": self.minutes,
                "seconds": _format.json_number(self.seconds),
            },
            "formatted": str(self),
            "humanized": self.humanize(),
        }

    # --- Dunder methods ---

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return (
            f"Duration(days={self.days}, hours={self.hours}, minutes={self.minutes}, "
            f"seconds={self.seconds!r}, hours_per_day={self._hours_per_day})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._parts == other._parts and self._hours_per_day == other._hours_per_day

    def __hash__(self) -> int:
        return hash((self._parts, self._hours_per_day))


def _scaled(magnitude: Any, seconds_per_unit: int) -> Decimal:
    """Convert a factory magnitude to seconds, rejecting non-numbers."""
    value = to_decimal(magnitude)
    if value is None:
        raise InvalidDurationError(
            ERR_MSG_INVALID_DURATION,
            f"expected a finite number, got {magnitude!r}",
        )
    return value * seconds_per_unit


def _checked_pattern(pattern: Any) -> str:
    if not isinstance(pattern, str):
        raise InvalidPatternError(
            ERR_MSG_INVALID_PATTERN,
            f"pattern must be a string, got {type(pattern).__name__}",
        )
    return pattern
