"""Norwegian and Swedish calendars."""

from __future__ import annotations

import datetime as _dt

from .calendar import Weekday, WesternCalendar


class Norway(WesternCalendar):
    """Norwegian public holidays."""

    name = "Norway"

    def is_business_day(self, date: _dt.date) -> bool:
        d, dd, m, y, w = self._parts(date)
        em = self._easter_monday(y)
        return not (
            self.is_weekend(w)
            # Holy Thursday
            or dd == em - 4
            # Good Friday
            or dd == em - 3
            # Easter Monday
            or dd == em
            # Ascension Thursday
            or dd == em + 38
            # Whit Monday
            or dd == em + 49
            # New Year's Day
            or (d == 1 and m == 1)
            # May Day
            or (d == 1 and m == 5)
            # National Independence Day
            or (d == 17 and m == 5)
            # Christmas Eve
            or (d == 24 and m == 12 and y >= 2002)
            # Christmas and Boxing Day
            or (d in (25, 26) and m == 12)
        )


class Sweden(WesternCalendar):
    """Swedish public holidays."""

    name = "Sweden"

    def is_business_day(self, date: _dt.date) -> bool:
        d, dd, m, y, w = self._parts(date)
        em = self._easter_monday(y)
        return not (
            self.is_weekend(w)
            # Good Friday
            or dd == em - 3
            # Easter Monday
            or dd == em
            # Ascension Thursday
            or dd == em + 38
            # Whit Monday (till 2004)
            or (dd == em + 49 and y < 2005)
            # New Year's Day
            or (d == 1 and m == 1)
            # Epiphany
            or (d == 6 and m == 1)
            # May Day
            or (d == 1 and m == 5)
            # National Day, a holiday since 2005
            or (d == 6 and m == 6 and y >= 2005)
            # Midsummer Eve (Friday between June 19-25)
            or (w == Weekday.FRIDAY and 19 <= d <= 25 and m == 6)
            # Christmas Eve, Christmas Day, Boxing Day, New Year's Eve
            or (d in (24, 25, 26, 31) and m == 12)
        )