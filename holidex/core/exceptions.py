"""Error taxonomy shared by resolvers, registries and the HTTP layer."""


class HolidexError(Exception):
    """Base class for all holidex errors."""


class InvalidDateError(HolidexError, ValueError):
    """A date cannot exist in the proleptic Gregorian calendar, or a value is not a date."""

    def __init__(self, value, reason: str = ""):
        self.value = value
        message = f"Invalid date: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidArgumentError(HolidexError, ValueError):
    """A caller-supplied parameter violates a precondition."""


class NotFoundError(HolidexError, LookupError):
    """A lookup found no matching entry."""
