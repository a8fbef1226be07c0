"""
Month length lookup backed by the standard calendar.

Leap years are never computed here: the length of a month is measured as the
distance between its first day and the first day of the following month,
so the leap rule is whatever ``datetime.date`` implements.
"""

from datetime import date, timedelta

from .errors import InvalidMonthError

_ONE_DAY = timedelta(days=1)


def days_in_month(year: int, month: int) -> int:
    """
    Get the number of days in a month, leap days included.

    Args:
        year: Calendar year (any year ``datetime.date`` supports)
        month: Month number, 1-12

    Returns:
        Number of days in the month

    Raises:
        InvalidMonthError: If month is not an integer in 1-12
        ValueError: If year is outside the range of ``datetime.date``
    """
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise InvalidMonthError(
            f"Month must be an integer in 1..12, got {month!r}",
            year=year,
            month=month,
        )

    first = date(year, month, 1)
    if month == 12:
        # date(year + 1, 1, 1) overflows for the last supported year
        return (date(year, 12, 31) - first + _ONE_DAY).days

    return (date(year, month + 1, 1) - first).days
