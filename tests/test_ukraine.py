import datetime as dt

import pytest

from marketcal.calendar import orthodox_easter_monday
from marketcal.ukraine import Ukraine, UkraineMarket


def _from_day_of_year(year, day_of_year):
    return dt.date(year, 1, 1) + dt.timedelta(days=day_of_year - 1)


@pytest.fixture
def cal():
    return Ukraine()


def test_name_and_market(cal):
    assert cal.name == "Ukrainian stock exchange"
    assert cal.market is UkraineMarket.USE
    assert cal == Ukraine(UkraineMarket.USE)


def test_unknown_market_rejected():
    with pytest.raises(ValueError):
        Ukraine("NOPE")


def test_weekends_are_holidays(cal):
    start = dt.date(2019, 1, 1)
    for offset in range(365):
        day = start + dt.timedelta(days=offset)
        if day.weekday() >= 5:
            assert cal.is_holiday(day)


@pytest.mark.parametrize("year", range(2005, 2025))
def test_orthodox_easter_monday_and_trinity(cal, year):
    em = orthodox_easter_monday(year)
    assert cal.is_holiday(_from_day_of_year(year, em))
    assert cal.is_holiday(_from_day_of_year(year, em + 49))


@pytest.mark.parametrize("year", range(2005, 2025))
@pytest.mark.parametrize(
    "month,day", [(1, 1), (1, 7), (3, 8), (5, 1), (5, 2), (5, 9), (6, 28), (8, 24)]
)
def test_fixed_holidays(cal, year, month, day):
    assert cal.is_holiday(dt.date(year, month, day))


def test_new_year_moved_to_monday(cal):
    monday = dt.date(2017, 1, 2)
    assert dt.date(2017, 1, 1).weekday() == 6
    assert monday.weekday() == 0
    assert cal.is_holiday(monday)


def test_defenders_day_since_2015(cal):
    before = dt.date(2014, 10, 14)
    after = dt.date(2015, 10, 14)
    assert before.weekday() < 5 and after.weekday() < 5
    assert cal.is_business_day(before)
    assert cal.is_holiday(after)


def test_holiday_is_negation_of_business_day(cal):
    start = dt.date(2020, 1, 1)
    for offset in range(366):
        day = start + dt.timedelta(days=offset)
        assert cal.is_holiday(day) == (not cal.is_business_day(day))