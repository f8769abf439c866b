import calendar
import datetime

import pytest

from espurna.buildtime import (
    build_timestamp,
    february_days,
    month_number,
    parse_build_date,
    unix_timestamp,
    year_day,
)


@pytest.mark.parametrize("index", range(1, 13))
def test_month_number_matches_calendar(index):
    assert month_number(calendar.month_abbr[index]) == index


def test_month_number_uses_first_three_letters():
    assert month_number("September") == month_number("Sep")


def test_month_number_unknown():
    with pytest.raises(ValueError):
        month_number("Foo")


@pytest.mark.parametrize("year", [1900, 1970, 1996, 2000, 2018, 2019, 2100, 2400])
def test_february_days_matches_calendar(year):
    assert february_days(year) == calendar.monthrange(year, 2)[1]


@pytest.mark.parametrize(
    "date",
    [datetime.date(2018, 3, 29), datetime.date(2000, 12, 31),
     datetime.date(2019, 1, 1), datetime.date(2024, 7, 15),
     datetime.date(2100, 11, 30)],
)
def test_year_day_matches_datetime(date):
    assert year_day(date.year, date.month, date.day) == date.timetuple().tm_yday


def test_year_day_bad_month():
    with pytest.raises(ValueError):
        year_day(2018, 13, 1)


@pytest.mark.parametrize(
    "parts",
    [(1970, 1, 1, 0, 0, 0), (2018, 3, 29, 12, 34, 56), (2000, 2, 29, 23, 59, 59),
     (2038, 1, 19, 3, 14, 8), (2100, 3, 1, 0, 0, 1), (1999, 12, 31, 23, 59, 59)],
)
def test_unix_timestamp_matches_timegm(parts):
    assert unix_timestamp(*parts) == calendar.timegm(parts + (0, 0, 0))


def test_unix_timestamp_epoch():
    assert unix_timestamp(1970, 1, 1, 0, 0, 0) == 0


def test_unix_timestamp_rejects_early_year():
    with pytest.raises(ValueError):
        unix_timestamp(1969, 12, 31, 0, 0, 0)


def test_parse_build_date_space_padded_day():
    parsed = parse_build_date("Mar  9 2018", "01:02:03")
    assert tuple(parsed) == (2018, 3, 9, 1, 2, 3)


def test_parse_build_date_fields():
    parsed = parse_build_date("Dec 25 2019", "23:45:10")
    assert (parsed.year, parsed.month, parsed.day) == (2019, 12, 25)
    assert (parsed.hour, parsed.minute, parsed.second) == (23, 45, 10)


@pytest.mark.parametrize(
    "date, time",
    [("Mar 29 18", "12:00:00"), ("Mar 29 2018", "12-00-00"),
     ("Xyz 29 2018", "12:00:00"), ("Mar 2a 2018", "12:00:00")],
)
def test_parse_build_date_malformed(date, time):
    with pytest.raises(ValueError):
        parse_build_date(date, time)


def test_build_timestamp_matches_timegm():
    expected = calendar.timegm((2018, 3, 29, 12, 34, 56, 0, 0, 0))
    assert build_timestamp("Mar 29 2018", "12:34:56") == expected


def test_build_timestamp_is_monotonic():
    earlier = build_timestamp("Feb 28 2020", "23:59:59")
    later = build_timestamp("Feb 29 2020", "00:00:00")
    assert later - earlier == 1