import datetime as dt

import pytest

from marketcal.calendar import easter_monday
from marketcal.southafrica import SouthAfrica


@pytest.fixture
def cal():
    return SouthAfrica()


def _from_day_of_year(year, day_of_year):
    return dt.date(year, 1, 1) + dt.timedelta(days=day_of_year - 1)


def test_name(cal):
    assert cal.name == "South Africa"
    assert repr(cal) == "SouthAfrica('South Africa')"


@pytest.mark.parametrize("year", [2005, 2010, 2019, 2023])
def test_good_friday_and_family_day(cal, year):
    monday = _from_day_of_year(year, easter_monday(year))
    friday = monday - dt.timedelta(days=3)
    assert monday.weekday() == 0
    assert friday.weekday() == 4
    assert not cal.is_business_day(monday)
    assert not cal.is_business_day(friday)


@pytest.mark.parametrize(
    "date",
    [
        dt.date(2019, 1, 1),
        dt.date(2019, 3, 21),
        dt.date(2019, 4, 27),
        dt.date(2019, 5, 1),
        dt.date(2019, 6, 16),
        dt.date(2019, 8, 9),
        dt.date(2019, 9, 24),
        dt.date(2019, 12, 16),
        dt.date(2019, 12, 25),
        dt.date(2019, 12, 26),
    ],
)
def test_fixed_holidays(cal, date):
    assert cal.is_holiday(date)


@pytest.mark.parametrize(
    "date",
    [dt.date(2004, 4, 14), dt.date(2009, 4, 22), dt.date(2016, 8, 3)],
)
def test_election_days(cal, date):
    assert not cal.is_business_day(date)


def test_election_day_only_in_its_year(cal):
    date = dt.date(2017, 8, 3)
    assert date.weekday() < 5
    assert cal.is_business_day(date)


def test_sunday_holiday_moves_to_monday(cal):
    sunday = dt.date(2021, 3, 21)
    monday = dt.date(2021, 3, 22)
    assert sunday.weekday() == 6
    assert monday.weekday() == 0
    assert not cal.is_business_day(monday)


def test_day_after_holiday_not_monday_is_business_day(cal):
    date = dt.date(2022, 3, 22)
    assert date.weekday() == 1
    assert cal.is_business_day(date)


def test_weekends_are_holidays(cal):
    start = dt.date(2020, 1, 1)
    for i in range(366):
        date = start + dt.timedelta(days=i)
        if date.weekday() >= 5:
            assert not cal.is_business_day(date)


def test_holiday_is_negation_of_business_day(cal):
    start = dt.date(2015, 1, 1)
    for i in range(365):
        date = start + dt.timedelta(days=i)
        assert cal.is_holiday(date) is (not cal.is_business_day(date))