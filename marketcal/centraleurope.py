"""Polish and Swiss calendars."""

from __future__ import annotations

import datetime as _dt

from .calendar import WesternCalendar

_POLAND_FIXED = frozenset(
    {
        (1, 1),  # New Year's Day
        (1, 5),  # May Day
        (3, 5),  # Constitution Day
        (15, 8),  # Assumption of the Blessed Virgin Mary
        (1, 11),  # All Saints Day
        (11, 11),  # Independence Day
        (25, 12),  # Christmas
        (26, 12),  # 2nd Day of Christmas
    }
)

_SWISS_FIXED = frozenset(
    {
        (1, 1),  # New Year's Day
        (2, 1),  # Berchtoldstag
        (1, 5),  # Labour Day
        (1, 8),  # National Day
        (25, 12),  # Christmas
        (26, 12),  # St. Stephen's Day
    }
)


class Poland(WesternCalendar):
    """Polish public holidays."""

    name = "Poland"

    def is_business_day(self, date: _dt.date) -> bool:
        d, dd, m, y, w = self._parts(date)
        em = self._easter_monday(y)
        return not (
            self.is_weekend(w)
            # Easter Monday
            or dd == em
            # Corpus Christi
            or dd == em + 59
            or (d, m) in _POLAND_FIXED
            # Epiphany (since 2011)
            or (d == 6 and m == 1 and y >= 2011)
        )


class Switzerland(WesternCalendar):
    """Swiss public holidays."""

    name = "Switzerland"

    def is_business_day(self, date: _dt.date) -> bool:
        d, dd, m, y, w = self._parts(date)
        em = self._easter_monday(y)
        return not (
            self.is_weekend(w)
            # Good Friday
            or dd == em - 3
            # Easter Monday
            or dd == em
            # Ascension Day
            or dd == em + 38
            # Whit Monday
            or dd == em + 49
            or (d, m) in _SWISS_FIXED
        )