"""Bratislava stock exchange calendar."""

from __future__ import annotations

import datetime as _dt
from enum import Enum

from .calendar import WesternCalendar


class SlovakiaMarket(Enum):
    """Markets covered by the Slovak calendar."""

    BSSE = "BSSE"


_FIXED_HOLIDAYS = frozenset(
    {
        (1, 1),  # New Year's Day
        (6, 1),  # Epiphany
        (1, 5),  # May Day
        (8, 5),  # Liberation of the Republic
        (5, 7),  # SS. Cyril and Methodius
        (29, 8),  # Slovak National Uprising
        (1, 9),  # Constitution of the Slovak Republic
        (15, 9),  # Our Lady of the Seven Sorrows
        (1, 11),  # All Saints Day
        (17, 11),  # Freedom and Democracy of the Slovak Republic
        (24, 12),  # Christmas Eve
        (25, 12),  # Christmas
        (26, 12),  # St. Stephen
    }
)


class Slovakia(WesternCalendar):
    """Holidays of the Bratislava stock exchange."""

    name = "Bratislava stock exchange"

    def __init__(self, market: SlovakiaMarket = SlovakiaMarket.BSSE) -> None:
        self.market = SlovakiaMarket(market)

    def is_business_day(self, date: _dt.date) -> bool:
        d, dd, m, y, w = self._parts(date)
        em = self._easter_monday(y)
        return not (
            self.is_weekend(w)
            or (d, m) in _FIXED_HOLIDAYS
            # Good Friday
            or dd == em - 3
            # Easter Monday
            or dd == em
            # unidentified closing days for stock exchange
            or (24 <= d <= 31 and m == 12 and y in (2004, 2005))
        )