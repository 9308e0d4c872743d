"""Russian settlement and Moscow Exchange calendars."""

from __future__ import annotations

import datetime as _dt
from enum import Enum

from .calendar import OrthodoxCalendar, Weekday


class RussiaMarket(Enum):
    """Markets covered by the Russian calendars."""

    SETTLEMENT = "Settlement"
    MOEX = "MOEX"


_NAMES = {
    RussiaMarket.SETTLEMENT: "Russian settlement",
    RussiaMarket.MOEX: "Moscow exchange",
}

# (year, month) -> days
_SETTLEMENT_EXTRA_HOLIDAYS: dict[tuple[int, int], frozenset[int]] = {
    (2017, 2): frozenset({24}),
    (2017, 5): frozenset({8}),
    (2017, 11): frozenset({6}),
    (2018, 3): frozenset({9}),
    (2018, 4): frozenset({30}),
    (2018, 5): frozenset({2}),
    (2018, 6): frozenset({11}),
    (2018, 12): frozenset({31}),
    (2019, 5): frozenset({2, 3, 10}),
    (2020, 3): frozenset({30, 31}),
    (2020, 4): frozenset({1, 2, 3}),
    (2020, 5): frozenset({4, 5}),
}

_MOEX_WORKING_WEEKENDS: dict[tuple[int, int], frozenset[int]] = {
    (2012, 3): frozenset({11}),
    (2012, 4): frozenset({28}),
    (2012, 5): frozenset({5, 12}),
    (2012, 6): frozenset({9}),
    (2016, 2): frozenset({20}),
    (2018, 4): frozenset({28}),
    (2018, 6): frozenset({9}),
    (2018, 12): frozenset({29}),
}

_MOEX_EXTRA_HOLIDAYS: dict[tuple[int, int], frozenset[int]] = {
    (2012, 1): frozenset({2}),
    (2012, 3): frozenset({9}),
    (2012, 4): frozenset({30}),
    (2012, 6): frozenset({11}),
    (2013, 1): frozenset({1, 2, 3, 4, 7}),
    (2014, 1): frozenset({1, 2, 3, 7}),
    (2015, 1): frozenset({1, 2, 7}),
    (2016, 1): frozenset({1, 7, 8}),
    (2016, 5): frozenset({2, 3}),
    (2016, 6): frozenset({13}),
    (2016, 12): frozenset({30}),
    (2017, 1): frozenset({2}),
    (2017, 5): frozenset({8}),
    (2018, 1): frozenset({1, 2, 8}),
    (2018, 12): frozenset({31}),
    (2019, 1): frozenset({1, 2, 7}),
    (2019, 12): frozenset({31}),
    (2020, 1): frozenset({1, 2, 7}),
    (2020, 2): frozenset({24}),
    (2020, 6): frozenset({24}),
    (2020, 7): frozenset({1}),
}


def _listed(table: dict[tuple[int, int], frozenset[int]], d: int, m: int, y: int) -> bool:
    return d in table.get((y, m), frozenset())


def _observed(d: int, m: int, w: Weekday, day: int, month: int) -> bool:
    """A holiday on ``day``/``month``, possibly moved to the following Monday."""
    return m == month and (d == day or (d in (day + 1, day + 2) and w == Weekday.MONDAY))


class Russia(OrthodoxCalendar):
    """Russian public holidays or Moscow Exchange trading holidays."""

    def __init__(self, market: RussiaMarket = RussiaMarket.SETTLEMENT) -> None:
        try:
            self.market = RussiaMarket(market)
        except ValueError:
            raise ValueError("unknown market") from None
        self.name = _NAMES[self.market]

    def is_business_day(self, date: _dt.date) -> bool:
        if self.market is RussiaMarket.MOEX:
            return self._is_exchange_business_day(date)
        return self._is_settlement_business_day(date)

    def _is_settlement_business_day(self, date: _dt.date) -> bool:
        d, _, m, y, w = self._parts(date)
        if (
            self.is_weekend(w)
            # New Year's holidays
            or (y <= 2005 and d <= 2 and m == 1)
            or (y >= 2005 and d <= 5 and m == 1)
            # in 2012, the 6th was also a holiday
            or (y == 2012 and d == 6 and m == 1)
            # Christmas
            or _observed(d, m, w, 7, 1)
            # Defender of the Fatherland Day
            or _observed(d, m, w, 23, 2)
            # International Women's Day
            or _observed(d, m, w, 8, 3)
            # Labour Day
            or _observed(d, m, w, 1, 5)
            # Victory Day
            or _observed(d, m, w, 9, 5)
            # Russia Day
            or _observed(d, m, w, 12, 6)
            # Unity Day
            or _observed(d, m, w, 4, 11)
        ):
            return False
        return not _listed(_SETTLEMENT_EXTRA_HOLIDAYS, d, m, y)

    def _is_exchange_business_day(self, date: _dt.date) -> bool:
        d, _, m, y, w = self._parts(date)
        # the exchange was formally established in 2011
        if y < 2012:
            raise ValueError(f"MOEX calendar for the year {y} does not exist.")
        if _listed(_MOEX_WORKING_WEEKENDS, d, m, y):
            return True
        if (
            self.is_weekend(w)
            # Defender of the Fatherland Day
            or (d == 23 and m == 2)
            # International Women's Day
            or _observed(d, m, w, 8, 3)
            # Labour Day
            or (d == 1 and m == 5)
            # Victory Day
            or _observed(d, m, w, 9, 5)
            # Russia Day
            or (d == 12 and m == 6)
            # Unity Day
            or _observed(d, m, w, 4, 11)
            # New Year's Eve
            or (d == 31 and m == 12)
        ):
            return False
        return not _listed(_MOEX_EXTRA_HOLIDAYS, d, m, y)