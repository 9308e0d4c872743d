"""Saudi Arabian Tadawul calendar."""

from __future__ import annotations

import datetime as _dt
from enum import Enum

from .calendar import Calendar, Weekday


class SaudiArabiaMarket(Enum):
    """Markets covered by the Saudi Arabian calendar."""

    TADAWUL = "Tadawul"


# The Saudi weekend moved from Thursday/Friday to Friday/Saturday on this date.
_WEEKEND_CHANGE = _dt.date(2013, 6, 29)

_EID_AL_ADHA = [
    _dt.date(1998, 4, 7),
    _dt.date(1999, 3, 27),
    _dt.date(2000, 3, 16),
    _dt.date(2001, 3, 5),
    _dt.date(2002, 2, 23),
    _dt.date(2003, 2, 12),
    _dt.date(2004, 2, 1),
    _dt.date(2005, 1, 21),
    _dt.date(2006, 1, 10),
    _dt.date(2006, 12, 31),
    _dt.date(2007, 12, 20),
    _dt.date(2008, 12, 8),
    _dt.date(2009, 11, 27),
    _dt.date(2010, 11, 16),
    _dt.date(2011, 11, 6),
    _dt.date(2012, 10, 26),
    _dt.date(2013, 10, 15),
    _dt.date(2014, 10, 4),
    _dt.date(2015, 9, 24),
    _dt.date(2016, 9, 11),
    _dt.date(2017, 9, 1),
    _dt.date(2018, 8, 23),
    _dt.date(2019, 8, 12),
    _dt.date(2020, 7, 31),
    _dt.date(2021, 7, 20),
    _dt.date(2022, 7, 10),
]

_EID_AL_FITR = [
    _dt.date(2001, 12, 16),
    _dt.date(2002, 12, 5),
    _dt.date(2003, 11, 25),
    _dt.date(2004, 11, 13),
    _dt.date(2005, 11, 3),
    _dt.date(2006, 10, 23),
    _dt.date(2007, 10, 12),
    _dt.date(2008, 9, 30),
    _dt.date(2009, 9, 20),
    _dt.date(2010, 9, 10),
    _dt.date(2011, 8, 30),
    _dt.date(2012, 8, 19),
    _dt.date(2013, 8, 8),
    _dt.date(2014, 7, 28),
    _dt.date(2015, 7, 17),
    _dt.date(2016, 7, 6),
    _dt.date(2017, 6, 25),
    _dt.date(2018, 6, 15),
    _dt.date(2019, 6, 4),
    _dt.date(2020, 5, 24),
    _dt.date(2021, 5, 13),
    _dt.date(2022, 5, 2),
    _dt.date(2023, 4, 21),
    _dt.date(2024, 4, 10),
    _dt.date(2025, 3, 30),
    _dt.date(2026, 3, 20),
    _dt.date(2027, 3, 9),
    _dt.date(2028, 2, 26),
    _dt.date(2029, 2, 14),
]


def _eid_window(eid: _dt.date) -> list[_dt.date]:
    # Conservatively, Eid-1 to Eid+4 is taken as the holiday.
    return [eid + _dt.timedelta(days=offset) for offset in range(-1, 5)]


_EID_HOLIDAYS = frozenset(
    day for eid in (*_EID_AL_ADHA, *_EID_AL_FITR) for day in _eid_window(eid)
)

_ONE_OFF_HOLIDAYS = frozenset({_dt.date(2011, 2, 26), _dt.date(2011, 3, 19)})


class SaudiArabia(Calendar):
    """Holidays of the Tadawul financial market."""

    name = "Tadawul"

    def __init__(self, market: SaudiArabiaMarket = SaudiArabiaMarket.TADAWUL) -> None:
        try:
            self.market = SaudiArabiaMarket(market)
        except ValueError:
            raise ValueError("unknown market") from None

    def is_weekend(self, weekday: int) -> bool:
        """True for Fridays and Saturdays."""
        return Weekday(weekday) in (Weekday.FRIDAY, Weekday.SATURDAY)

    @staticmethod
    def _is_true_weekend(date: _dt.date) -> bool:
        w = Weekday(date.weekday())
        if date < _WEEKEND_CHANGE:
            return w in (Weekday.THURSDAY, Weekday.FRIDAY)
        return w in (Weekday.FRIDAY, Weekday.SATURDAY)

    def is_business_day(self, date: _dt.date) -> bool:
        day = _dt.date(date.year, date.month, date.day)
        return not (
            self._is_true_weekend(day)
            or day in _EID_HOLIDAYS
            # National Day
            or (day.day == 23 and day.month == 9)
            or day in _ONE_OFF_HOLIDAYS
        )