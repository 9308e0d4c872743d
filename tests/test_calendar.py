import datetime as dt

import pytest

from marketcal.calendar import (
    Calendar,
    Target,
    WeekendsOnly,
    Weekday,
    easter_monday,
    orthodox_easter_monday,
)


def _from_day_of_year(year, doy):
    return dt.date(year, 1, 1) + dt.timedelta(days=doy - 1)


def _days(year):
    day = dt.date(year, 1, 1)
    while day.year == year:
        yield day
        day += dt.timedelta(days=1)


def test_easter_monday_known_value():
    assert easter_monday(2024) == 92


def test_orthodox_easter_monday_known_value():
    assert orthodox_easter_monday(2024) == 127


@pytest.mark.parametrize("year", range(1901, 2200, 7))
def test_easter_mondays_fall_on_monday(year):
    assert _from_day_of_year(year, easter_monday(year)).weekday() == Weekday.MONDAY
    assert (
        _from_day_of_year(year, orthodox_easter_monday(year)).weekday()
        == Weekday.MONDAY
    )


@pytest.mark.parametrize("year", range(1950, 2100, 3))
def test_orthodox_easter_not_before_western(year):
    assert orthodox_easter_monday(year) >= easter_monday(year)


def test_calendar_is_abstract():
    with pytest.raises(TypeError):
        Calendar()


def test_is_weekend_default():
    cal = WeekendsOnly()
    assert cal.is_weekend(Weekday.SATURDAY) is True
    assert cal.is_weekend(Weekday.SUNDAY) is True
    assert cal.is_weekend(Weekday.MONDAY) is False
    assert cal.is_weekend(Weekday.FRIDAY) is False


def test_is_weekend_rejects_bad_weekday():
    with pytest.raises(ValueError):
        WeekendsOnly().is_weekend(9)


def test_weekends_only_matches_weekday():
    cal = WeekendsOnly()
    for day in _days(2023):
        assert cal.is_business_day(day) == (day.weekday() < 5)


def test_is_holiday_is_negation():
    cal = Target()
    for day in _days(2001):
        assert cal.is_holiday(day) == (not cal.is_business_day(day))


def test_names():
    assert Target().name == "TARGET"
    assert WeekendsOnly().name == "weekends only"
    assert str(Target()) == "TARGET"


def test_equality_by_name():
    assert Target() == Target()
    assert Target() != WeekendsOnly()
    assert len({Target(), Target(), WeekendsOnly()}) == 2


@pytest.mark.parametrize("year", range(1995, 2030))
def test_target_fixed_holidays(year):
    cal = Target()
    assert cal.is_holiday(dt.date(year, 1, 1))
    assert cal.is_holiday(dt.date(year, 12, 25))


@pytest.mark.parametrize("year", range(2000, 2030))
def test_target_easter_holidays_since_2000(year):
    cal = Target()
    em = _from_day_of_year(year, easter_monday(year))
    assert cal.is_holiday(em)
    assert cal.is_holiday(em - dt.timedelta(days=3))
    assert cal.is_holiday(dt.date(year, 5, 1))
    assert cal.is_holiday(dt.date(year, 12, 26))


def test_target_before_2000_only_weekends_around_easter():
    cal = Target()
    year = 1999
    em = _from_day_of_year(year, easter_monday(year))
    assert cal.is_business_day(em)
    assert cal.is_business_day(em - dt.timedelta(days=3))
    may_day = dt.date(year, 5, 1)
    assert cal.is_business_day(may_day) == (may_day.weekday() < 5)


@pytest.mark.parametrize("year", [1998, 1999, 2001])
def test_target_special_new_years_eve(year):
    assert Target().is_holiday(dt.date(year, 12, 31))


@pytest.mark.parametrize("year", [2000, 2002, 2003, 2010])
def test_target_ordinary_new_years_eve(year):
    day = dt.date(year, 12, 31)
    assert Target().is_business_day(day) == (day.weekday() < 5)


def test_target_holidays_superset_of_weekends():
    target, weekends = Target(), WeekendsOnly()
    for day in _days(2015):
        if weekends.is_holiday(day):
            assert target.is_holiday(day)