"""Calendar day enumeration for a single month."""

from __future__ import annotations

import datetime

from dataclasses import dataclass
from typing import List, Optional

THIRTY_ONE_DAY_MONTHS = frozenset({1, 3, 5, 7, 8, 10, 12})
THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month``, or 0 when the month is not 1-12."""

    if month in THIRTY_ONE_DAY_MONTHS:
        return 31
    if month in THIRTY_DAY_MONTHS:
        return 30
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return 0


def get_days(year: int, month: int) -> List[datetime.date]:
    """Return every valid date of the month in ascending order."""

    days: List[datetime.date] = []
    for day in range(1, days_in_month(year, month) + 1):
        try:
            days.append(datetime.date(year, month, day))
        except ValueError:
            # year outside what datetime can represent
            continue
    return days


@dataclass(frozen=True)
class MonthRequest:
    year: int
    month: int
    path: Optional[str] = None

    @property
    def yyyymm(self) -> str:
        return f"{self.year:04d}{self.month:02d}"

    def get_days(self) -> List[datetime.date]:
        return get_days(self.year, self.month)
