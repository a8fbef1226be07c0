"""
Calendar difference between two dates.

The computation mirrors subtracting dates by hand: when the later date's day
is smaller than the earlier one's, a whole month of days is borrowed from the
month before it; when its month is then smaller, twelve months are borrowed
from the year. No conversion to a total day count happens at any point.
"""

from datetime import date, datetime

from .interval import Interval
from .logging import get_logger
from .months import days_in_month

logger = get_logger(__name__)


def _as_date(value: date) -> date:
    # datetime is a date subclass; time of day is ignored
    if isinstance(value, datetime):
        return value.date()
    return value


def difference(start: date, end: date) -> Interval:
    """
    Get the calendar interval from ``start`` to ``end``.

    Args:
        start: Start date
        end: End date, may be before ``start``

    Returns:
        Interval with non-negative magnitudes; ``positive`` is False when
        ``end`` is earlier than ``start``
    """
    start, end = _as_date(start), _as_date(end)
    positive = not end < start
    earlier, later = (start, end) if positive else (end, start)

    start_day = earlier.day
    end_day, end_month, end_year = later.day, later.month, later.year
    borrowed_days = borrowed_months = False

    if end_day < start_day:
        if end_month > 1:
            borrowed = days_in_month(end_year, end_month - 1)
        else:
            # borrow from December of the previous year
            borrowed = days_in_month(end_year - 1, 12)
        end_day += borrowed
        if end_day < start_day:
            # earlier day lies past the whole borrowed month, count from its last day
            start_day = borrowed
        end_month -= 1
        borrowed_days = True

    if end_month < earlier.month:
        end_month += 12
        end_year -= 1
        borrowed_months = True

    interval = Interval(
        years=end_year - earlier.year,
        months=end_month - earlier.month,
        days=end_day - start_day,
        positive=positive,
    )

    logger.debug(
        "Computed date difference",
        start=start.isoformat(),
        end=end.isoformat(),
        borrowed_days=borrowed_days,
        borrowed_months=borrowed_months,
        **interval.to_dict(),
    )

    return interval


# DATEDIFF-style name
get_diff = difference
