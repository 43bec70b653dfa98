from __future__ import annotations

from datetime import datetime, timedelta
from typing import Final

ONE_DAY: Final[timedelta] = timedelta(days=1)


def rental_days(start: datetime, end: datetime) -> int:
    """Return the number of billable days between two instants.

    Any started day is billed in full, so 24 hours is one day and 25 hours
    is two. The order of the arguments does not matter.
    """

    days, remainder = divmod(abs(end - start), ONE_DAY)
    if remainder:
        days += 1
    return days


def calculate_total_price(price_per_day: float, start: datetime, end: datetime) -> float:
    """Price of renting at ``price_per_day`` from ``start`` to ``end``."""

    return rental_days(start, end) * price_per_day
