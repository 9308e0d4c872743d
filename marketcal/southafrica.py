"""South-African calendar."""

from __future__ import annotations

import datetime as _dt

from .calendar import Weekday, WesternCalendar

# Holidays moved to the following Monday when they fall on a Sunday,
# as (day, month).
_MOVABLE_TO_MONDAY = (
    (1, 1),  # New Year's Day
    (21, 3),  # Human Rights Day
    (27, 4),  # Freedom Day
    (1, 5),  # Workers Day
    (16, 6),  # Youth Day
    (9, 8),  # National Women's Day
    (24, 9),  # Heritage Day
    (16, 12),  # Day of Reconciliation
    (26, 12),  # Day of Goodwill
)

_ONE_OFF_HOLIDAYS = frozenset(
    {
        _dt.date(2004, 4, 14),  # Election Day
        _dt.date(2009, 4, 22),  # Election Day
        _dt.date(2016, 8, 3),  # Election Day
    }
)


class SouthAfrica(WesternCalendar):
    """South-African public holidays."""

    name = "South Africa"

    def is_business_day(self, date: _dt.date) -> bool:
        d, dd, m, y, w = self._parts(date)
        em = self._easter_monday(y)
        if (
            self.is_weekend(w)
            # Good Friday
            or dd == em - 3
            # Family Day
            or dd == em
            # Christmas
            or (d == 25 and m == 12)
        ):
            return False
        for day, month in _MOVABLE_TO_MONDAY:
            if m == month and (d == day or (d == day + 1 and w == Weekday.MONDAY)):
                return False
        return _dt.date(y, m, d) not in _ONE_OFF_HOLIDAYS