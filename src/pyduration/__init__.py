"""pyduration - Parse, normalize and format elapsed-time durations."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyduration")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0.dev0"

from pyduration._errors import (
    DurationError,
    InvalidDurationError,
    InvalidHoursPerDayError,
    InvalidPatternError,
)
from pyduration._json import DurationJSONEncoder, to_json
from pyduration._parser import parse, valid
from pyduration._types import DurationParts
from pyduration.duration import Duration

__all__ = [
    "parse",
    "valid",
    "to_json",
    "Duration",
    "DurationParts",
    "DurationJSONEncoder",
    "DurationError",
    "InvalidDurationError",
    "InvalidHoursPerDayError",
    "InvalidPatternError",
]
