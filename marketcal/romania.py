"""Romanian public and Bucharest stock exchange calendars."""

from __future__ import annotations

import datetime as _dt
from enum import Enum

from .calendar import OrthodoxCalendar


class RomaniaMarket(Enum):
    """Markets covered by the Romanian calendars."""

    PUBLIC = "Public"
    BVB = "BVB"


_NAMES = {
    RomaniaMarket.PUBLIC: "Romania",
    RomaniaMarket.BVB: "Bucharest stock exchange",
}

_BVB_CLOSINGS = frozenset({_dt.date(2014, 12, 24), _dt.date(2014, 12, 31)})


class Romania(OrthodoxCalendar):
    """Romanian public holidays, optionally with exchange closing days."""

    def __init__(self, market: RomaniaMarket = RomaniaMarket.BVB) -> None:
        try:
            self.market = RomaniaMarket(market)
        except ValueError:
            raise ValueError("unknown market") from None
        self.name = _NAMES[self.market]

    def _is_public_business_day(self, date: _dt.date) -> bool:
        d, dd, m, y, w = self._parts(date)
        em = self._easter_monday(y)
        return not (
            self.is_weekend(w)
            # New Year's Day and the day after
            or (d in (1, 2) and m == 1)
            # Unification Day
            or (d == 24 and m == 1)
            # Orthodox Easter Monday
            or dd == em
            # Labour Day
            or (d == 1 and m == 5)
            # Pentecost
            or dd == em + 49
            # Children's Day (since 2017)
            or (d == 1 and m == 6 and y >= 2017)
            # St Mary's Day
            or (d == 15 and m == 8)
            # Feast of St Andrew
            or (d == 30 and m == 11)
            # National Day
            or (d == 1 and m == 12)
            # Christmas and the second day of Christmas
            or (d in (25, 26) and m == 12)
        )

    def is_business_day(self, date: _dt.date) -> bool:
        if not self._is_public_business_day(date):
            return False
        if self.market is RomaniaMarket.BVB:
            return _dt.date(date.year, date.month, date.day) not in _BVB_CLOSINGS
        return True