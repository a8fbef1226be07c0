#!/usr/bin/env python3
"""
Basic Usage Example - datediff

Shows how to:
- Compute the calendar difference between two dates
- Read the interval fields and render it
- Look up month lengths
- Log intervals with the configured structlog setup

Run: python examples/basic_usage.py
"""

from datetime import date

from datediff import days_in_month, difference, format_interval
from datediff.config.loader import ConfigLoader
from datediff.logging import get_logger, log_interval
from datediff.logging.config import configure_from_params


def main():
    config = ConfigLoader.create().load()
    configure_from_params(config.logging)
    logger = get_logger("examples.basic_usage")

    start_date = date(1947, 8, 15)
    end_date = date(1950, 1, 26)

    duration = difference(start_date, end_date)
    print(f"Duration is {duration}")
    print(f"  years={duration.years} months={duration.months} "
          f"days={duration.days} positive={duration.positive}")

    # Reversed arguments give the same magnitudes, marked Behind
    print(f"Reversed: {difference(end_date, start_date)}")

    # Labels come from config/datediff.yaml when present
    print(f"Configured: {format_interval(duration, config.display)}")

    log_interval(logger, difference(date(1857, 1, 5), date(2020, 1, 1)), "since_1857")

    for year in (2019, 2020, 1900, 2000):
        print(f"February {year}: {days_in_month(year, 2)} days")


if __name__ == "__main__":
    main()
