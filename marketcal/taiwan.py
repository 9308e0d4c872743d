"""Taiwan stock exchange calendar."""

from __future__ import annotations

import datetime as _dt
from enum import Enum

from .calendar import Calendar


class TaiwanMarket(Enum):
    """Markets covered by the Taiwanese calendar."""

    TSEC = "TSEC"


def _dates(year: int, month: int, *days: int) -> list[_dt.date]:
    return [_dt.date(year, month, d) for d in days]


def _span(year: int, month: int, first: int, last: int) -> list[_dt.date]:
    return _dates(year, month, *range(first, last + 1))


# New Year's Day, Peace Memorial Day, Labor Day, Double Tenth
_FIXED_HOLIDAYS = frozenset({(1, 1), (28, 2), (1, 5), (10, 10)})

_ONE_OFF_HOLIDAYS = frozenset(
    [
        # 2002: Lunar New Year, Tomb Sweeping Day
        *_span(2002, 2, 9, 17),
        *_dates(2002, 4, 5),
        # 2003: Lunar New Year, Dragon Boat Festival, Moon Festival
        *_dates(2003, 1, 31),
        *_span(2003, 2, 1, 5),
        *_dates(2003, 6, 4),
        *_dates(2003, 9, 11),
        # 2004: Lunar New Year, Dragon Boat Festival, Moon Festival
        *_span(2004, 1, 21, 26),
        *_dates(2004, 6, 22),
        *_dates(2004, 9, 28),
        # 2005: Lunar New Year, Tomb Sweeping Day, Labor Day make-up
        *_span(2005, 2, 6, 13),
        *_dates(2005, 4, 5),
        *_dates(2005, 5, 2),
        # 2006: Lunar New Year, Tomb Sweeping, Dragon Boat, Moon Festival
        *_span(2006, 1, 28, 31),
        *_span(2006, 2, 1, 5),
        *_dates(2006, 4, 5),
        *_dates(2006, 5, 31),
        *_dates(2006, 10, 6),
        # 2007: Lunar New Year, Tomb Sweeping, festivals and adjusted days
        *_span(2007, 2, 17, 25),
        *_dates(2007, 4, 5, 6),
        *_dates(2007, 6, 18, 19),
        *_dates(2007, 9, 24, 25),
        # 2008: Lunar New Year, Tomb Sweeping Day
        *_span(2008, 2, 4, 11),
        *_dates(2008, 4, 4),
        # 2009: public holiday, Lunar New Year, Tomb Sweeping, festivals
        *_dates(2009, 1, 2),
        *_span(2009, 1, 24, 31),
        *_dates(2009, 4, 4),
        *_dates(2009, 5, 28, 29),
        *_dates(2009, 10, 3),
        # 2010: Lunar New Year, Tomb Sweeping, festivals
        *_span(2010, 1, 13, 21),
        *_dates(2010, 4, 5),
        *_dates(2010, 5, 16),
        *_dates(2010, 9, 22),
        # 2011: Spring Festival, Children's Day, Tomb Sweeping, festivals
        *_span(2011, 2, 2, 7),
        *_dates(2011, 4, 4, 5),
        *_dates(2011, 5, 2),
        *_dates(2011, 6, 6),
        *_dates(2011, 9, 12),
        # 2012
        *_span(2012, 1, 23, 27),
        *_dates(2012, 2, 27),
        *_dates(2012, 4, 4),
        *_dates(2012, 5, 1),
        *_dates(2012, 6, 23),
        *_dates(2012, 9, 30),
        *_dates(2012, 12, 31),
        # 2013
        *_span(2013, 2, 10, 15),
        *_dates(2013, 4, 4, 5),
        *_dates(2013, 5, 1),
        *_dates(2013, 6, 12),
        *_dates(2013, 9, 19, 20),
        # 2014
        *_span(2014, 1, 28, 31),
        *_span(2014, 2, 1, 4),
        *_dates(2014, 4, 4, 5),
        *_dates(2014, 6, 2),
        *_dates(2014, 9, 8),
        # 2015
        *_dates(2015, 1, 2),
        *_span(2015, 2, 18, 23),
        *_dates(2015, 2, 27),
        *_dates(2015, 4, 3, 6),
        *_dates(2015, 6, 19),
        *_dates(2015, 9, 28),
        *_dates(2015, 10, 9),
        # 2016
        *_span(2016, 2, 8, 12),
        *_dates(2016, 2, 29),
        *_dates(2016, 4, 4, 5),
        *_dates(2016, 5, 2),
        *_dates(2016, 6, 9, 10),
        *_dates(2016, 9, 15, 16),
        # 2017
        *_dates(2017, 1, 2),
        *_span(2017, 1, 27, 31),
        *_dates(2017, 2, 1, 27),
        *_dates(2017, 4, 3, 4),
        *_dates(2017, 5, 29, 30),
        *_dates(2017, 10, 4, 9),
        # 2018
        *_span(2018, 2, 15, 20),
        *_dates(2018, 4, 4, 5, 6),
        *_dates(2018, 6, 18),
        *_dates(2018, 9, 24),
        *_dates(2018, 12, 31),
        # 2019
        *_span(2019, 2, 4, 8),
        *_dates(2019, 3, 1),
        *_dates(2019, 4, 4, 5),
        *_dates(2019, 6, 7),
        *_dates(2019, 9, 13),
        *_dates(2019, 10, 11),
    ]
)


class Taiwan(Calendar):
    """Holidays of the Taiwan stock exchange."""

    name = "Taiwan stock exchange"

    def __init__(self, market: TaiwanMarket = TaiwanMarket.TSEC) -> None:
        try:
            self.market = TaiwanMarket(market)
        except ValueError:
            raise ValueError("unknown market") from None

    def is_business_day(self, date: _dt.date) -> bool:
        d, _, m, y, w = self._parts(date)
        if self.is_weekend(w) or (d, m) in _FIXED_HOLIDAYS:
            return False
        return _dt.date(y, m, d) not in _ONE_OFF_HOLIDAYS