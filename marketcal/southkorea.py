"""South Korean settlement and Korea exchange calendars."""

from __future__ import annotations

import datetime as _dt
from enum import Enum

from .calendar import Calendar, Weekday


class SouthKoreaMarket(Enum):
    """Markets covered by the South Korean calendars."""

    SETTLEMENT = "Settlement"
    KRX = "KRX"


_NAMES = {
    SouthKoreaMarket.SETTLEMENT: "South-Korean settlement",
    SouthKoreaMarket.KRX: "South-Korea exchange",
}


def _dates(year: int, month: int, *days: int) -> list[_dt.date]:
    return [_dt.date(year, month, d) for d in days]


_ONE_OFF_HOLIDAYS = frozenset(
    [
        # Children's Day substitutes
        *_dates(2018, 5, 7),
        *_dates(2019, 5, 6),
        # Lunar New Year
        *_dates(2004, 1, 21, 22, 23),
        *_dates(2005, 2, 8, 9, 10),
        *_dates(2006, 1, 28, 29, 30),
        *_dates(2007, 2, 19),
        *_dates(2008, 2, 6, 7, 8),
        *_dates(2009, 1, 25, 26, 27),
        *_dates(2010, 2, 13, 14, 15),
        *_dates(2011, 2, 2, 3, 4),
        *_dates(2012, 1, 23, 24),
        *_dates(2013, 2, 11),
        *_dates(2014, 1, 30, 31),
        *_dates(2015, 2, 18, 19, 20),
        *_dates(2016, 2, *range(7, 11)),
        *_dates(2017, 1, *range(27, 31)),
        *_dates(2018, 2, 15, 16, 17),
        *_dates(2019, 2, 4, 5, 6),
        *_dates(2020, 1, *range(24, 28)),
        *_dates(2021, 2, 11, 12, 13),
        *_dates(2022, 1, 31),
        *_dates(2022, 2, 1, 2),
        *_dates(2023, 1, 21, 22, 23),
        *_dates(2024, 2, 9, 10, 11),
        *_dates(2025, 1, 28, 29, 30),
        *_dates(2026, 2, 16, 17, 18),
        *_dates(2027, 2, 5, 6, 7),
        *_dates(2028, 1, 25, 26, 27),
        *_dates(2029, 2, 12, 13, 14),
        *_dates(2030, 2, 2, 3, 4),
        *_dates(2031, 1, 22, 23, 24),
        *_dates(2032, 2, 10, 11, 12),
        # Election days
        *_dates(2004, 4, 15),
        *_dates(2006, 5, 31),
        *_dates(2007, 12, 19),
        *_dates(2008, 4, 9),
        *_dates(2010, 6, 2),
        *_dates(2012, 4, 11),
        *_dates(2012, 12, 19),
        *_dates(2014, 6, 4),
        *_dates(2016, 4, 13),
        *_dates(2017, 5, 9),
        *_dates(2018, 6, 13),
        *_dates(2020, 4, 15),
        # Buddha's birthday
        *_dates(2004, 5, 26),
        *_dates(2005, 5, 15),
        *_dates(2006, 5, 5),
        *_dates(2007, 5, 24),
        *_dates(2008, 5, 12),
        *_dates(2009, 5, 2),
        *_dates(2010, 5, 21),
        *_dates(2011, 5, 10),
        *_dates(2012, 5, 28),
        *_dates(2013, 5, 17),
        *_dates(2014, 5, 6),
        *_dates(2015, 5, 25),
        *_dates(2016, 5, 14),
        *_dates(2017, 5, 3),
        *_dates(2018, 5, 22),
        *_dates(2019, 5, 12),
        *_dates(2020, 4, 30),
        *_dates(2021, 5, 19),
        *_dates(2022, 5, 8),
        *_dates(2023, 5, 26),
        *_dates(2024, 5, 15),
        *_dates(2025, 5, 5),
        *_dates(2026, 5, 24),
        *_dates(2027, 5, 13),
        *_dates(2028, 5, 2),
        *_dates(2029, 5, 20),
        *_dates(2030, 5, 9),
        *_dates(2031, 5, 28),
        *_dates(2032, 5, 16),
        # Special holiday: 70 years from Independence Day
        *_dates(2015, 8, 14),
        # Special temporary holiday
        *_dates(2020, 8, 17),
        # Harvest Moon Day
        *_dates(2004, 9, 27, 28, 29),
        *_dates(2005, 9, 17, 18, 19),
        *_dates(2006, 10, 5, 6, 7),
        *_dates(2007, 9, 24, 25, 26),
        *_dates(2008, 9, 13, 14, 15),
        *_dates(2009, 10, 2, 3, 4),
        *_dates(2010, 9, 21, 22, 23),
        *_dates(2011, 9, 12, 13),
        *_dates(2012, 10, 1),
        *_dates(2013, 9, 18, 19, 20),
        *_dates(2014, 9, 8, 9, 10),
        *_dates(2015, 9, 28, 29),
        *_dates(2016, 9, 14, 15, 16),
        *_dates(2017, 10, *range(3, 7)),
        *_dates(2018, 9, *range(23, 27)),
        *_dates(2019, 9, 12, 13, 14),
        *_dates(2020, 9, 30),
        *_dates(2020, 10, 1, 2),
        *_dates(2021, 9, 20, 21, 22),
        *_dates(2022, 9, 9, 10, 11),
        *_dates(2023, 9, 28, 29, 30),
        *_dates(2024, 9, 16, 17, 18),
        *_dates(2025, 10, 5, 6, 7),
        *_dates(2026, 9, 24, 25, 26),
        *_dates(2027, 9, 14, 15, 16),
        *_dates(2028, 10, 2, 3, 4),
        *_dates(2029, 9, 21, 22, 23),
        *_dates(2030, 9, 11, 12, 13),
        *_dates(2031, 9, 30),
        *_dates(2031, 10, 1, 2),
        *_dates(2032, 9, 18, 19, 20),
    ]
)

_KRX_CLOSINGS = frozenset({_dt.date(2016, 5, 6), _dt.date(2017, 10, 2)})


class SouthKorea(Calendar):
    """South Korean public holidays, optionally with Korea exchange closings."""

    def __init__(self, market: SouthKoreaMarket = SouthKoreaMarket.KRX) -> None:
        try:
            self.market = SouthKoreaMarket(market)
        except ValueError:
            raise ValueError("unknown market") from None
        self.name = _NAMES[self.market]

    def _is_settlement_business_day(self, date: _dt.date) -> bool:
        d, _, m, y, w = self._parts(date)
        if (
            self.is_weekend(w)
            # New Year's Day
            or (d == 1 and m == 1)
            # Independence Day
            or (d == 1 and m == 3)
            # Arbour Day
            or (d == 5 and m == 4 and y <= 2005)
            # Labour Day
            or (d == 1 and m == 5)
            # Children's Day
            or (d == 5 and m == 5)
            # Memorial Day
            or (d == 6 and m == 6)
            # Constitution Day
            or (d == 17 and m == 7 and y <= 2007)
            # Liberation Day
            or (d == 15 and m == 8)
            # National Foundation Day
            or (d == 3 and m == 10)
            # Christmas Day
            or (d == 25 and m == 12)
            # Hangul Proclamation of Korea
            or (d == 9 and m == 10 and y >= 2013)
        ):
            return False
        return _dt.date(y, m, d) not in _ONE_OFF_HOLIDAYS

    def is_business_day(self, date: _dt.date) -> bool:
        if not self._is_settlement_business_day(date):
            return False
        if self.market is not SouthKoreaMarket.KRX:
            return True
        d, _, m, y, w = self._parts(date)
        # Year-end closing
        if m == 12 and (d == 31 or (d in (29, 30) and w == Weekday.FRIDAY)):
            return False
        # Occasional closing days (KRX day)
        return _dt.date(y, m, d) not in _KRX_CLOSINGS