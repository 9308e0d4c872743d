"""Singapore exchange calendar."""

from __future__ import annotations

import datetime as _dt
from enum import Enum

from .calendar import Weekday, WesternCalendar


class SingaporeMarket(Enum):
    """Markets covered by the Singapore calendar."""

    SGX = "SGX"


def _dates(year: int, month: int, *days: int) -> list[_dt.date]:
    return [_dt.date(year, month, d) for d in days]


_ONE_OFF_HOLIDAYS = frozenset(
    [
        # Chinese New Year
        *_dates(2004, 1, 22, 23),
        *_dates(2005, 2, 9, 10),
        *_dates(2006, 1, 30, 31),
        *_dates(2007, 2, 19, 20),
        *_dates(2008, 2, 7, 8),
        *_dates(2009, 1, 26, 27),
        *_dates(2010, 1, 15, 16),
        *_dates(2012, 1, 23, 24),
        *_dates(2013, 2, 11, 12),
        *_dates(2014, 1, 31),
        *_dates(2014, 2, 1),
        # Hari Raya Haji
        *_dates(2004, 2, 1, 2),
        *_dates(2005, 1, 21),
        *_dates(2006, 1, 10),
        *_dates(2007, 1, 2),
        *_dates(2007, 12, 20),
        *_dates(2008, 12, 8),
        *_dates(2009, 11, 27),
        *_dates(2010, 11, 17),
        *_dates(2012, 10, 26),
        *_dates(2013, 10, 15),
        *_dates(2014, 10, 6),
        # Vesak Poya Day
        *_dates(2004, 6, 2),
        *_dates(2005, 5, 22),
        *_dates(2006, 5, 12),
        *_dates(2007, 5, 31),
        *_dates(2008, 5, 18),
        *_dates(2009, 5, 9),
        *_dates(2010, 5, 28),
        *_dates(2012, 5, 5),
        *_dates(2013, 5, 24),
        *_dates(2014, 5, 13),
        # Deepavali
        *_dates(2004, 11, 11),
        *_dates(2007, 11, 8),
        *_dates(2008, 10, 28),
        *_dates(2009, 11, 16),
        *_dates(2010, 11, 5),
        *_dates(2012, 11, 13),
        *_dates(2013, 11, 2),
        *_dates(2014, 10, 23),
        # Diwali
        *_dates(2005, 11, 1),
        # Hari Raya Puasa
        *_dates(2004, 11, 14, 15),
        *_dates(2005, 11, 3),
        *_dates(2006, 10, 24),
        *_dates(2007, 10, 13),
        *_dates(2008, 10, 1),
        *_dates(2009, 9, 21),
        *_dates(2010, 9, 10),
        *_dates(2012, 8, 20),
        *_dates(2013, 8, 8),
        *_dates(2014, 7, 28),
    ]
)


class Singapore(WesternCalendar):
    """Holidays of the Singapore exchange."""

    name = "Singapore exchange"

    def __init__(self, market: SingaporeMarket = SingaporeMarket.SGX) -> None:
        self.market = SingaporeMarket(market)

    def is_business_day(self, date: _dt.date) -> bool:
        d, dd, m, y, w = self._parts(date)
        em = self._easter_monday(y)
        if (
            self.is_weekend(w)
            # New Year's Day
            or ((d == 1 or (d == 2 and w == Weekday.MONDAY)) and m == 1)
            # Good Friday
            or dd == em - 3
            # Labour Day
            or (d == 1 and m == 5)
            # National Day
            or ((d == 9 or (d == 10 and w == Weekday.MONDAY)) and m == 8)
            # Christmas Day
            or (d == 25 and m == 12)
        ):
            return False
        return _dt.date(y, m, d) not in _ONE_OFF_HOLIDAYS