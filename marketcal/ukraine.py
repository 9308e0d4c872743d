"""Ukrainian stock exchange calendar."""

from __future__ import annotations

import datetime as _dt
from enum import Enum

from .calendar import OrthodoxCalendar, Weekday


class UkraineMarket(Enum):
    """Markets covered by the Ukrainian calendar."""

    USE = "USE"


def _observed(d: int, m: int, w: Weekday, day: int, month: int) -> bool:
    """A holiday on ``day``/``month``, possibly moved to the following Monday."""
    return m == month and (d == day or (d in (day + 1, day + 2) and w == Weekday.MONDAY))


class Ukraine(OrthodoxCalendar):
    """Holidays of the Ukrainian stock exchange."""

    name = "Ukrainian stock exchange"

    def __init__(self, market: UkraineMarket = UkraineMarket.USE) -> None:
        try:
            self.market = UkraineMarket(market)
        except ValueError:
            raise ValueError("unknown market") from None

    def is_business_day(self, date: _dt.date) -> bool:
        d, dd, m, y, w = self._parts(date)
        em = self._easter_monday(y)
        return not (
            self.is_weekend(w)
            # New Year's Day (possibly moved to Monday)
            or _observed(d, m, w, 1, 1)
            # Orthodox Christmas
            or _observed(d, m, w, 7, 1)
            # Women's Day
            or _observed(d, m, w, 8, 3)
            # Orthodox Easter Monday
            or dd == em
            # Holy Trinity Day
            or dd == em + 49
            # Workers' Solidarity Days
            or ((d in (1, 2) or (d == 3 and w == Weekday.MONDAY)) and m == 5)
            # Victory Day
            or _observed(d, m, w, 9, 5)
            # Constitution Day
            or (d == 28 and m == 6)
            # Independence Day
            or (d == 24 and m == 8)
            # Defender's Day (since 2015)
            or (d == 14 and m == 10 and y >= 2015)
        )