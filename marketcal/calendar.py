"""Calendar base classes, Easter helpers and the generic calendars."""

from __future__ import annotations

import datetime as _dt
from enum import IntEnum
from functools import lru_cache
from typing import NamedTuple

from abc import ABC, abstractmethod
from dateutil.easter import EASTER_ORTHODOX, EASTER_WESTERN, easter


class Weekday(IntEnum):
    """Days of the week, numbered as ``datetime.date.weekday`` numbers them."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class _DateParts(NamedTuple):
    day: int
    day_of_year: int
    month: int
    year: int
    weekday: Weekday


def _day_of_year_after(sunday: _dt.date) -> int:
    return (sunday + _dt.timedelta(days=1)).timetuple().tm_yday


@lru_cache(maxsize=None)
def easter_monday(year: int) -> int:
    """Day of the year (1-based) of Western Easter Monday."""
    return _day_of_year_after(easter(year, EASTER_WESTERN))


@lru_cache(maxsize=None)
def orthodox_easter_monday(year: int) -> int:
    """Day of the year (1-based) of Orthodox Easter Monday, Gregorian dates."""
    return _day_of_year_after(easter(year, EASTER_ORTHODOX))


class Calendar(ABC):
    """A holiday calendar deciding which dates are business days."""

    name: str = "calendar"

    def is_weekend(self, weekday: int) -> bool:
        """True if the weekday is part of the weekend (Saturday and Sunday)."""
        return Weekday(weekday) in (Weekday.SATURDAY, Weekday.SUNDAY)

    @abstractmethod
    def is_business_day(self, date: _dt.date) -> bool:
        """True if markets following this calendar are open on ``date``."""

    def is_holiday(self, date: _dt.date) -> bool:
        """True if ``date`` is not a business day."""
        return not self.is_business_day(date)

    @staticmethod
    def _parts(date: _dt.date) -> _DateParts:
        return _DateParts(
            day=date.day,
            day_of_year=date.timetuple().tm_yday,
            month=date.month,
            year=date.year,
            weekday=Weekday(date.weekday()),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Calendar):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class WesternCalendar(Calendar):
    """Calendar whose movable feasts follow Western Easter."""

    @staticmethod
    def _easter_monday(year: int) -> int:
        return easter_monday(year)


class OrthodoxCalendar(Calendar):
    """Calendar whose movable feasts follow Orthodox Easter."""

    @staticmethod
    def _easter_monday(year: int) -> int:
        return orthodox_easter_monday(year)


class WeekendsOnly(WesternCalendar):
    """Calendar with no holidays except Saturdays and Sundays."""

    name = "weekends only"

    def is_business_day(self, date: _dt.date) -> bool:
        return not self.is_weekend(date.weekday())


class Target(WesternCalendar):
    """The TARGET calendar of the euro payment system."""

    name = "TARGET"

    def is_business_day(self, date: _dt.date) -> bool:
        d, dd, m, y, w = self._parts(date)
        em = self._easter_monday(y)
        return not (
            self.is_weekend(w)
            # New Year's Day
            or (d == 1 and m == 1)
            # Good Friday
            or (dd == em - 3 and y >= 2000)
            # Easter Monday
            or (dd == em and y >= 2000)
            # Labour Day
            or (d == 1 and m == 5 and y >= 2000)
            # Christmas
            or (d == 25 and m == 12)
            # Day of Goodwill
            or (d == 26 and m == 12 and y >= 2000)
            # December 31st, 1998, 1999 and 2001 only
            or (d == 31 and m == 12 and y in (1998, 1999, 2001))
        )