"""
Programming defect errors.

These are raised when a caller breaks a precondition. They subclass
ValueError so generic argument validation handlers still catch them.
"""

from typing import Optional, Dict, Any


class DateDiffError(ValueError):
    """Base class for datediff errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class InvalidMonthError(DateDiffError):
    """Month number outside 1..12 passed to the month-length lookup."""

    def __init__(self, message: str, year: Optional[int] = None,
                 month: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.year = year
        self.month = month


class InvalidIntervalError(DateDiffError):
    """Interval built with a negative or non-integer magnitude."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value


class ConfigurationError(DateDiffError):
    """Configuration value failed validation."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value
