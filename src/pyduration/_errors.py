"""Exception hierarchy for duration parsing and construction."""


class DurationError(Exception):
    """Base exception for duration errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class InvalidDurationError(DurationError):
    """Raised when a value cannot be parsed into a duration."""


class InvalidHoursPerDayError(DurationError):
    """Raised when hours_per_day is not a positive integer."""


class InvalidPatternError(DurationError):
    """Raised when a format pattern is not a string."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_DURATION = "invalid duration value"
ERR_MSG_INVALID_HOURS_PER_DAY = "hours per day must be a positive integer"
ERR_MSG_INVALID_PATTERN = "invalid pattern"
