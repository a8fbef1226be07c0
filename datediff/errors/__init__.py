"""
Error classification for the datediff package.

Every error here signals a programming defect (a bad month handed to the
month-length lookup, a malformed interval, an invalid configuration value)
rather than a runtime condition callers are expected to recover from.
"""

from .programming import (
    DateDiffError,
    InvalidMonthError,
    InvalidIntervalError,
    ConfigurationError,
)

__all__ = [
    "DateDiffError",
    "InvalidMonthError",
    "InvalidIntervalError",
    "ConfigurationError",
]
