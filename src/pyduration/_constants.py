"""Defaults and unit constants for duration parsing and formatting."""

DEFAULT_HOURS_PER_DAY = 24
"""Hours carried into one stored day unless configured otherwise."""

DEFAULT_PATTERN = "hh:mm:ss"
"""Pattern used by format() and str() when none is given."""

SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTES_PER_HOUR

CALENDAR_HOURS_PER_DAY = 24
"""Length of a day designator in input text, independent of hours_per_day."""

SECONDS_PER_DAY = CALENDAR_HOURS_PER_DAY * SECONDS_PER_HOUR
DAYS_PER_WEEK = 7

