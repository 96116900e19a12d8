"""Error types for datebook."""


class DatebookError(Exception):
    """Base class for datebook errors."""


class InvalidDate(DatebookError, ValueError):
    """Day, month or year do not form a valid calendar date."""


class InputError(DatebookError, ValueError):
    """Malformed user input (e.g. text where a number was expected)."""
