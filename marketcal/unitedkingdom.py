"""United Kingdom settlement, stock exchange and metals exchange calendars."""

from __future__ import annotations

import datetime as _dt
from enum import Enum

from .calendar import Weekday, WesternCalendar


class UnitedKingdomMarket(Enum):
    """Markets covered by the United Kingdom calendars."""

    SETTLEMENT = "Settlement"
    EXCHANGE = "Exchange"
    METALS = "Metals"


_NAMES = {
    UnitedKingdomMarket.SETTLEMENT: "UK settlement",
    UnitedKingdomMarket.EXCHANGE: "London stock exchange",
    UnitedKingdomMarket.METALS: "London metals exchange",
}

# Years in which the Early May Bank Holiday was moved to May 8th (V.E. day).
_VE_DAY_YEARS = (1995, 2020)

# Years in which the Spring Bank Holiday was replaced by two June jubilee days.
_JUBILEE_DAYS = {
    2002: (3, 4),
    2012: (4, 5),
    2022: (2, 3),
}


def _is_bank_holiday(d: int, w: Weekday, m: int, y: int) -> bool:
    monday = w == Weekday.MONDAY
    return (
        # first Monday of May (Early May Bank Holiday)
        (d <= 7 and monday and m == 5 and y not in _VE_DAY_YEARS)
        or (d == 8 and m == 5 and y in _VE_DAY_YEARS)
        # last Monday of May (Spring Bank Holiday)
        or (d >= 25 and monday and m == 5 and y not in _JUBILEE_DAYS)
        or (m == 6 and d in _JUBILEE_DAYS.get(y, ()))
        # last Monday of August (Summer Bank Holiday)
        or (d >= 25 and monday and m == 8)
        # April 29th, 2011 only (Royal Wedding Bank Holiday)
        or (d == 29 and m == 4 and y == 2011)
    )


class UnitedKingdom(WesternCalendar):
    """United Kingdom public holidays for settlement and the London exchanges."""

    def __init__(
        self, market: UnitedKingdomMarket = UnitedKingdomMarket.SETTLEMENT
    ) -> None:
        try:
            self.market = UnitedKingdomMarket(market)
        except ValueError:
            raise ValueError("unknown market") from None
        self.name = _NAMES[self.market]

    def is_business_day(self, date: _dt.date) -> bool:
        d, dd, m, y, w = self._parts(date)
        em = self._easter_monday(y)
        moved_to_mon_or_tue = w in (Weekday.MONDAY, Weekday.TUESDAY)
        return not (
            self.is_weekend(w)
            # New Year's Day (possibly moved to Monday)
            or ((d == 1 or (d in (2, 3) and w == Weekday.MONDAY)) and m == 1)
            # Good Friday
            or dd == em - 3
            # Easter Monday
            or dd == em
            or _is_bank_holiday(d, w, m, y)
            # Christmas (possibly moved to Monday or Tuesday)
            or ((d == 25 or (d == 27 and moved_to_mon_or_tue)) and m == 12)
            # Boxing Day (possibly moved to Monday or Tuesday)
            or ((d == 26 or (d == 28 and moved_to_mon_or_tue)) and m == 12)
            # December 31st, 1999 only
            or (d == 31 and m == 12 and y == 1999)
        )