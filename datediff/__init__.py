"""
datediff - calendar-aware date differences

Computes the difference between two dates as an interval of years, months
and days (similar to SQL DATEDIFF, but borrowing across real month lengths
instead of counting raw days).

    >>> from datetime import date
    >>> from datediff import difference
    >>> str(difference(date(1947, 8, 15), date(1950, 1, 26)))
    '(2 years 5 months 11 days Ahead)'
"""

from .calculator import difference, get_diff
from .interval import Interval, format_interval
from .months import days_in_month

__version__ = "0.1.0"
__author__ = "datediff contributors"

__all__ = [
    "Interval",
    "days_in_month",
    "difference",
    "format_interval",
    "get_diff",
]
