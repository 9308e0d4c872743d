import datetime as dt

import pytest

from marketcal.calendar import easter_monday
from marketcal.singapore import Singapore, SingaporeMarket


def _days(year):
    day = dt.date(year, 1, 1)
    while day.year == year:
        yield day
        day += dt.timedelta(days=1)


def test_name_and_default_market():
    cal = Singapore()
    assert cal.name == "Singapore exchange"
    assert cal.market is SingaporeMarket.SGX


def test_unknown_market_rejected():
    with pytest.raises(ValueError):
        Singapore("NYSE")


@pytest.mark.parametrize(
    "day",
    [
        dt.date(2013, 2, 11),
        dt.date(2013, 2, 12),
        dt.date(2014, 1, 31),
        dt.date(2010, 11, 17),
        dt.date(2013, 5, 24),
        dt.date(2012, 11, 13),
        dt.date(2005, 11, 1),
        dt.date(2014, 7, 28),
        dt.date(2007, 12, 20),
    ],
)
def test_one_off_holidays(day):
    assert Singapore().is_holiday(day)


@pytest.mark.parametrize("year", range(2000, 2030))
def test_fixed_holidays(year):
    cal = Singapore()
    assert cal.is_holiday(dt.date(year, 1, 1))
    assert cal.is_holiday(dt.date(year, 5, 1))
    assert cal.is_holiday(dt.date(year, 8, 9))
    assert cal.is_holiday(dt.date(year, 12, 25))


@pytest.mark.parametrize("year", range(2000, 2030))
def test_good_friday_but_not_easter_monday(year):
    cal = Singapore()
    em = dt.date(year, 1, 1) + dt.timedelta(days=easter_monday(year) - 1)
    assert cal.is_holiday(em - dt.timedelta(days=3))
    assert cal.is_business_day(em)


@pytest.mark.parametrize("year", range(2000, 2040))
def test_national_day_moved_to_monday(year):
    day = dt.date(year, 8, 10)
    assert Singapore().is_holiday(day) == (day.weekday() in (0, 5, 6))


@pytest.mark.parametrize("year", range(2000, 2040))
def test_new_year_moved_to_monday(year):
    day = dt.date(year, 1, 2)
    expected_holiday = day.weekday() in (0, 5, 6) or day in {
        dt.date(2007, 1, 2)
    }
    assert Singapore().is_holiday(day) == expected_holiday


def test_no_lunar_holidays_after_table():
    cal = Singapore()
    for day in _days(2020):
        if cal.is_holiday(day):
            assert (
                day.weekday() >= 5
                or (day.month, day.day) in {(1, 1), (5, 1), (8, 9), (12, 25), (8, 10), (1, 2)}
                or day.timetuple().tm_yday == easter_monday(2020) - 3
            )