"""Duration parsing: an ordered list of independent matchers.

Each matcher recognizes one notation and returns a RawDuration, or None
when the input is not in that notation. parse() tries them in order and
normalizes the first match.
"""

from __future__ import annotations

import enum
import logging
import re
from abc import ABC, abstractmethod
from decimal import Decimal
from numbers import Real

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import UnexpectedInput

from pyduration._constants import DAYS_PER_WEEK, DEFAULT_HOURS_PER_DAY
from pyduration._normalize import normalize, validate_hours_per_day
from pyduration._types import DurationParts, RawDuration

logger = logging.getLogger(__name__)


class MatcherName(enum.StrEnum):
    NUMERIC = "numeric"
    ISO8601 = "iso8601"
    COLON = "colon"
    UNIT = "unit"


def to_decimal(value: object) -> Decimal | None:
    """Convert a real number to a finite Decimal, or None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, Decimal)):
        result = Decimal(value)
    elif isinstance(value, Real):
        # repr() keeps 3661.8 as 3661.8 instead of its binary expansion
        result = Decimal(repr(float(value)))
    else:
        return None
    return result if result.is_finite() else None


class DurationMatcher(ABC):
    """Abstract base class for one duration notation."""

    name: MatcherName

    @abstractmethod
    def match(self, value: object) -> RawDuration | None: ...


class NumericMatcher(DurationMatcher):
    """A number, or a numeric-looking string, counted as seconds."""

    name = MatcherName.NUMERIC

    _NUMBER_RE = re.compile(r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)$")

    def match(self, value: object) -> RawDuration | None:
        if isinstance(value, str):
            if not self._NUMBER_RE.match(value):
                return None
            seconds = Decimal(value)
        else:
            seconds = to_decimal(value)
            if seconds is None:
                return None
        if seconds < 0:
            return None
        return RawDuration(seconds=seconds)


class Iso8601Matcher(DurationMatcher):
    """ISO 8601 durations made of weeks, days, hours, minutes and seconds.

    Years and months are not supported. When weeks appear together with
    any other designator, only the other designators are kept.
    """

    name = MatcherName.ISO8601

    _N = r"[0-9]+(?:\.[0-9]+)?"
    _ISO_RE = re.compile(
        rf"^P(?:(?P<weeks>{_N})W)?(?:(?P<days>{_N})D)?"
        rf"(?P<time>T(?:(?P<hours>{_N})H)?(?:(?P<minutes>{_N})M)?(?:(?P<seconds>{_N})S)?)?$",
        re.IGNORECASE,
    )

    def match(self, value: object) -> RawDuration | None:
        if not isinstance(value, str):
            return None
        m = self._ISO_RE.match(value)
        if m is None:
            return None
        weeks, days, hours, minutes, seconds = m.group(
            "weeks", "days", "hours", "minutes", "seconds"
        )
        time_parts = (hours, minutes, seconds)
        if m.group("time") and all(part is None for part in time_parts):
            return None
        if weeks is None and days is None and all(part is None for part in time_parts):
            return None

        if days is None and all(part is None for part in time_parts):
            return RawDuration(days=Decimal(weeks) * DAYS_PER_WEEK)

        return RawDuration(
            days=_decimal_or_zero(days),
            hours=_decimal_or_zero(hours),
            minutes=_decimal_or_zero(minutes),
            seconds=_decimal_or_zero(seconds),
        )


def _decimal_or_zero(value: str | None) -> Decimal:
    return Decimal(value) if value is not None else Decimal(0)


# Numbers are fused with their unit or colon so whitespace only separates
# whole tokens. ASCII digits only.
_NUMBER = r"(?:[0-9]+(?:\.[0-9]+)?|\.[0-9]+)"

_IGNORE_WS = r"""
%import common.WS
%ignore WS
"""

COLON_GRAMMAR = rf"""
start: clock
     | day clock
     | clock day

clock: CLOCK
day: DAY

CLOCK: /{_NUMBER}:{_NUMBER}(?::{_NUMBER})?/
DAY: /{_NUMBER}d/i
""" + _IGNORE_WS

UNIT_GRAMMAR = rf"""
start: term+

term: TERM

TERM: /{_NUMBER}[dhms]/i
""" + _IGNORE_WS


@v_args(inline=True)
class _RawDurationTransformer(Transformer):
    """Fold a parse tree into a single RawDuration."""

    _UNIT_FIELDS = {"d": "days", "h": "hours", "m": "minutes", "s": "seconds"}

    def start(self, *parts: RawDuration) -> RawDuration:
        return sum(parts, RawDuration())

    def clock(self, token: Token) -> RawDuration:
        # Read right to left: seconds, minutes, then optional hours
        values = [Decimal(g) for g in reversed(token.split(":"))] + [Decimal(0)]
        return RawDuration(hours=values[2], minutes=values[1], seconds=values[0])

    def day(self, token: Token) -> RawDuration:
        return RawDuration(days=Decimal(token[:-1]))

    def term(self, token: Token) -> RawDuration:
        field = self._UNIT_FIELDS[token[-1].lower()]
        return RawDuration(**{field: Decimal(token[:-1])})


class _GrammarMatcher(DurationMatcher):
    """Shared Lark plumbing for the text grammars."""

    grammar: str

    def __init__(self) -> None:
        self._parser = Lark(self.grammar, parser="lalr")
        self._transformer = _RawDurationTransformer()

    def match(self, value: object) -> RawDuration | None:
        if not isinstance(value, str):
            return None
        try:
            tree = self._parser.parse(value)
        except UnexpectedInput:
            return None
        return self._transformer.transform(tree)


class ColonMatcher(_GrammarMatcher):
    """h:m:s or m:s groups, with an optional "<n>d" before or after."""

    name = MatcherName.COLON
    grammar = COLON_GRAMMAR


class UnitMatcher(_GrammarMatcher):
    """Unit-suffixed tokens such as "1d 2h 30m 4.5s"."""

    name = MatcherName.UNIT
    grammar = UNIT_GRAMMAR


MATCHERS: tuple[DurationMatcher, ...] = (
    NumericMatcher(),
    Iso8601Matcher(),
    ColonMatcher(),
    UnitMatcher(),
)


def match_raw(value: object) -> RawDuration | None:
    """Run the matchers in order and return the first match."""
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    for matcher in MATCHERS:
        raw = matcher.match(value)
        if raw is not None:
            logger.debug("matched %r as %s duration", value, matcher.name)
            return raw
    return None


def parse(value: object, hours_per_day: int = DEFAULT_HOURS_PER_DAY) -> DurationParts | None:
    """Parse a duration into canonical parts.

    Args:
        value: A non-negative number of seconds, or a duration string.
        hours_per_day: Hours carried into one day.

    Returns:
        The carried DurationParts, or None if value is not a duration.

    Raises:
        InvalidHoursPerDayError: If hours_per_day is not a positive int.
    """
    validate_hours_per_day(hours_per_day)
    raw = match_raw(value)
    if raw is None:
        logger.debug("rejected duration %r", value)
        return None
    return normalize(raw, hours_per_day)


def valid(value: object) -> bool:
    """Return True if parse() would accept value."""
    return parse(value) is not None
