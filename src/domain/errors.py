"""
Error taxonomy for the form field utilities.

Every error derives from ValueError, so callers that only care about
"bad input" can catch ValueError, while callers that need the detail
can catch the specific type.
"""

from typing import Any


class FormUtilsError(ValueError):
    """Base class for all input errors raised by the utilities."""


class DateParseError(FormUtilsError):
    """
    A date string is not a valid calendar date in dd-mm-yyyy form.

    Attributes:
        value: The offending input
    """

    def __init__(self, value: Any, message: str = ''):
        self.value = value
        super().__init__(message or f"Invalid date, expected dd-mm-yyyy: {value!r}")


class ClassificationError(FormUtilsError):
    """
    Input is neither an email address nor a phone number.

    Attributes:
        value: The offending input
        reason: Why classification failed (currently always UNRECOGNIZED)
    """

    UNRECOGNIZED = 'unrecognized'

    def __init__(self, value: Any, reason: str = UNRECOGNIZED, message: str = ''):
        self.value = value
        self.reason = reason
        super().__init__(message or "Input is neither an email address nor a phone number")


class OrdinalRangeError(FormUtilsError):
    """
    Strict ordinal policy only: the value is lower than 1.

    Attributes:
        value: The offending input
    """

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Ordinal value must be greater than zero, got {value}")
