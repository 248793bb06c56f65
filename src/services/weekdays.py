"""
Counting a given weekday inside an inclusive date range.

Dates use the fixed dd-mm-yyyy format. The count is computed in closed
form: find the first matching day in the range, then count whole weeks
from there to the end date.
"""

import re
from datetime import date
from typing import Union

from domain.errors import DateParseError
from domain.models import Weekday

# datetime.strptime('%d-%m-%Y') also accepts "1-5-2021", so the shape is checked first
_DATE_RE = re.compile(r'([0-9]{2})-([0-9]{2})-([0-9]{4})')


def parse_date(value: str) -> date:
    """
    Parse a dd-mm-yyyy date string.

    Args:
        value: Date string, e.g. "01-05-2021"

    Returns:
        date: The parsed calendar date

    Raises:
        DateParseError: If the string has the wrong shape or is not a real date

    Example:
        >>> parse_date("29-02-2024")
        datetime.date(2024, 2, 29)
    """
    if not isinstance(value, str):
        raise DateParseError(value)

    match = _DATE_RE.fullmatch(value)
    if not match:
        raise DateParseError(value)

    day, month, year = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise DateParseError(value, f"Invalid calendar date {value!r}: {e}") from e


def count_weekdays_between(start: date, end: date, target: Weekday) -> int:
    """
    Count days in [start, end] that fall on the target weekday.

    Returns 0 when start is after end.
    """
    if start > end:
        return 0

    num_days = (end - start).days
    offset = (target - start.weekday()) % 7
    if offset > num_days:
        return 0

    return (num_days - offset) // 7 + 1


def count_weekday(
    date_from: str,
    date_to: str,
    target: Union[Weekday, int, str]
) -> int:
    """
    Count how many days in an inclusive dd-mm-yyyy range fall on a weekday.

    Args:
        date_from: First day of the range, "dd-mm-yyyy"
        date_to: Last day of the range, "dd-mm-yyyy"
        target: Weekday member, 0-6 (Monday is 0) or an English day name

    Returns:
        int: Number of matching days (0 if date_from is after date_to)

    Raises:
        DateParseError: If either date is invalid
        ValueError: If target is not a weekday

    Example:
        >>> count_weekday("01-05-2021", "30-05-2021", Weekday.SUN)
        5
    """
    start = parse_date(date_from)
    end = parse_date(date_to)
    return count_weekdays_between(start, end, Weekday.parse(target))


def count_sundays(date_from: str, date_to: str) -> int:
    """Count Sundays in an inclusive dd-mm-yyyy range."""
    return count_weekday(date_from, date_to, Weekday.SUN)
