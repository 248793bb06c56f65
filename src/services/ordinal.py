"""
English ordinal formatting for integers.

Two policies are provided:
- format_ordinal() is total: any integer, 0 -> "0th", -1 -> "-1st"
- format_positive_ordinal() is strict: values lower than 1 raise OrdinalRangeError

The suffix only depends on the absolute value, so the sign never changes it.
"""

from dataclasses import dataclass

from domain.errors import OrdinalRangeError


def _check_int(n) -> None:
    # bool is an int subclass
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Ordinal value must be an int, got {type(n).__name__}")


def ordinal_suffix(n: int) -> str:
    """
    Return the English ordinal suffix for an integer.

    Args:
        n: Any integer

    Returns:
        str: One of "st", "nd", "rd", "th"

    Example:
        >>> ordinal_suffix(22)
        'nd'
        >>> ordinal_suffix(112)
        'th'
    """
    _check_int(n)
    n = abs(n)
    if n % 100 in (11, 12, 13):
        return 'th'
    return {1: 'st', 2: 'nd', 3: 'rd'}.get(n % 10, 'th')


def format_ordinal(n: int) -> str:
    """
    Format any integer with its ordinal suffix.

    Args:
        n: Any integer, including zero and negatives

    Returns:
        str: e.g. "1st", "0th", "-21st"

    Raises:
        TypeError: If n is not an int
    """
    return f"{n}{ordinal_suffix(n)}"


def format_positive_ordinal(n: int) -> str:
    """
    Format a positive integer with its ordinal suffix.

    Raises:
        OrdinalRangeError: If n is lower than 1
        TypeError: If n is not an int
    """
    return str(Ordinal.from_positive(n))


@dataclass(frozen=True)
class Ordinal:
    """
    Integer rendered as an ordinal number by str().

    Use Ordinal.from_positive() to get the guarantee that the value is >= 1.
    """
    value: int

    def __post_init__(self):
        _check_int(self.value)

    @classmethod
    def from_positive(cls, value: int) -> 'Ordinal':
        _check_int(value)
        if value < 1:
            raise OrdinalRangeError(value)
        return cls(value)

    def __str__(self) -> str:
        return format_ordinal(self.value)
