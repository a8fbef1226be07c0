"""Interval value type produced by the date difference calculator."""

from dataclasses import asdict, dataclass
from typing import Any, Optional

from .config.defaults import DisplayParams
from .errors import InvalidIntervalError

_DEFAULT_DISPLAY = DisplayParams()


@dataclass(frozen=True)
class Interval:
    """
    Calendar difference between two dates.

    ``years``, ``months`` and ``days`` are non-negative magnitudes; the
    direction is carried by ``positive``, which is False when the end date
    came before the start date.
    """
    years: int
    months: int
    days: int
    positive: bool = True

    def __post_init__(self) -> None:
        for field_name in ("years", "months", "days"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidIntervalError(
                    f"Interval {field_name} must be a non-negative integer, got {value!r}",
                    field=field_name,
                    value=value,
                )
        if not isinstance(self.positive, bool):
            raise InvalidIntervalError(
                f"Interval positive flag must be a bool, got {self.positive!r}",
                field="positive",
                value=self.positive,
            )

    @property
    def direction(self) -> str:
        """Default direction label, 'Ahead' or 'Behind'."""
        return _DEFAULT_DISPLAY.label_for(self.positive)

    def to_dict(self) -> dict[str, Any]:
        """Plain dict of the four fields, for structured logging."""
        return asdict(self)

    def __str__(self) -> str:
        return format_interval(self)


def format_interval(interval: Interval, display: Optional[DisplayParams] = None) -> str:
    """
    Render an interval for humans.

    Args:
        interval: Interval to render
        display: Direction labels, defaults to Ahead/Behind

    Returns:
        Text like ``"(2 years 5 months 11 days Ahead)"``
    """
    if display is None:
        label = interval.direction
    else:
        label = display.label_for(interval.positive)

    return (
        f"({interval.years} years {interval.months} months "
        f"{interval.days} days {label})"
    )
