"""Build date and time helpers for compiler style ``__DATE__``/``__TIME__`` strings."""

from __future__ import annotations

from typing import NamedTuple

SEC_PER_MIN = 60
SEC_PER_HOUR = 3600
SEC_PER_DAY = 86400
SEC_PER_YEAR = SEC_PER_DAY * 365

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# Days per month; February is filled in per year.
_MONTH_DAYS = (31, 0, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class BuildTime(NamedTuple):
    """Broken-down build date and time."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int


def month_number(name: str) -> int:
    """Return 1..12 for a month name, looking only at its first three letters."""
    try:
        return _MONTHS.index(name[:3]) + 1
    except ValueError:
        raise ValueError(f"unknown month name: {name!r}") from None


def february_days(year: int) -> int:
    """Number of days in February of the Gregorian ``year``."""
    if year % 400 == 0:
        return 29
    if year % 100 == 0:
        return 28
    if year % 4 == 0:
        return 29
    return 28


def year_day(year: int, month: int, day: int) -> int:
    """One-based day of the year for the given date."""
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")
    lengths = [february_days(year) if length == 0 else length for length in _MONTH_DAYS]
    return sum(lengths[: month - 1]) + day


def unix_timestamp(year: int, month: int, day: int,
                   hour: int, minute: int, second: int) -> int:
    """Seconds since 1970-01-01 00:00:00 for the given broken-down time."""
    if year < 1970:
        raise ValueError(f"year before 1970: {year}")
    return (
        second
        + minute * SEC_PER_MIN
        + hour * SEC_PER_HOUR
        + (year_day(year, month, day) - 1) * SEC_PER_DAY
        + (year - 1970) * SEC_PER_YEAR
        + ((year - 1969) // 4) * SEC_PER_DAY
        - ((year - 1901) // 100) * SEC_PER_DAY
        + ((year - 1601) // 400) * SEC_PER_DAY
    )


def _decimal(text: str) -> int:
    """Decimal value of ``text``; a leading space or zero counts as zero."""
    value = 0
    for pos, ch in enumerate(text):
        if pos == 0 and ch in " 0":
            digit = 0
        elif ch.isdigit():
            digit = int(ch)
        else:
            raise ValueError(f"not a decimal field: {text!r}")
        value = value * 10 + digit
    return value


def parse_build_date(date: str, time: str) -> BuildTime:
    """Parse ``"Mmm dd yyyy"`` and ``"hh:mm:ss"`` into a :class:`BuildTime`."""
    if len(date) != 11 or date[3] != " " or date[6] != " ":
        raise ValueError(f"malformed date: {date!r}")
    if len(time) != 8 or time[2] != ":" or time[5] != ":":
        raise ValueError(f"malformed time: {time!r}")
    return BuildTime(
        year=_decimal(date[7:11]),
        month=month_number(date[0:3]),
        day=_decimal(date[4:6]),
        hour=_decimal(time[0:2]),
        minute=_decimal(time[3:5]),
        second=_decimal(time[6:8]),
    )


def build_timestamp(date: str, time: str) -> int:
    """Unix timestamp of the build date and time strings."""
    return unix_timestamp(*parse_build_date(date, time))