# The MIT License (MIT)
#
# Copyright (c) Arie Bovenberg
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

# Maintainer's notes:
#
# - Instants are plain ints (milliseconds since the epoch). Every function
#   here is pure: it takes an instant and returns a new one (or a reading
#   of it). There is no module state to protect, so everything is safe to
#   call from any thread.
# - All local fields of an instant come from ONE call to the zone's
#   resolver. Never read the hour and the minute in separate calls.
# - The DST corrections in `set_day` and `add_days_z` are deliberately
#   narrow: they assume a one-hour shift near local midnight, as in the
#   US and EU rules. Existing callers rely on these exact results, so
#   don't "fix" them without a major version bump.
from __future__ import annotations

__version__ = "0.1.0"

import time as _time_module
from datetime import datetime as _datetime
from typing import NamedTuple, Optional

from ._common import (
    APRIL,
    AUGUST,
    DECEMBER,
    FEBRUARY,
    FRIDAY,
    JANUARY,
    JULY,
    JUNE,
    MARCH,
    MAY,
    MONDAY,
    NOVEMBER,
    OCTOBER,
    SATURDAY,
    SEPTEMBER,
    SUNDAY,
    THURSDAY,
    TUESDAY,
    WEDNESDAY,
    Err,
    Month,
    Ok,
    Result,
    Weekday,
    _MONTHS_BY_INT,
    _WEEKDAYS_BY_INT,
)
from ._math import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    days_in_month as _days_in_month,
    floor_mod,
    is_leap,
    leap_years_before as _leap_years_before,
    month_offset_ms,
    trunc_rem,
    year_start_ms,
)
from ._tz import (
    UTC,
    EpochMillis,
    FixedOffsetResolver,
    IanaResolver,
    LocalFields,
    Resolver,
    TimeZoneNotFoundError,
    Zone,
    available_zones,
)
from ._tz.common import epoch_ms_from_datetime, utc_datetime

__all__ = [
    # Values
    "EpochMillis",
    "DateTuple",
    "TimeTuple",
    "Month",
    "Weekday",
    "Ok",
    "Err",
    "Result",
    # Zones
    "Zone",
    "UTC",
    "Resolver",
    "LocalFields",
    "IanaResolver",
    "FixedOffsetResolver",
    "available_zones",
    # Calendar tables
    "is_leap_year",
    "days_in_month",
    "leap_years_before",
    "month_to_int",
    "int_to_month",
    "weekday_to_int",
    "weekday_from_int",
    # Decomposition
    "to_date_tuple",
    "to_time_tuple",
    "to_weekday",
    "to_year",
    "to_month",
    "to_day",
    "to_hour",
    "to_minute",
    "to_second",
    "to_millis",
    "from_date_tuple",
    # Setters
    "set_year",
    "set_month",
    "set_day",
    "set_hour",
    "set_minute",
    "set_second",
    "set_millis",
    # Rounding
    "start_of_hour",
    "end_of_hour",
    "start_of_day",
    "end_of_day",
    "start_of_week",
    "end_of_week",
    "start_of_month",
    "end_of_month",
    # Arithmetic
    "add_millis",
    "add_seconds",
    "add_minutes",
    "add_hours",
    "add_days",
    "add_days_z",
    "compare",
    # Formatting
    "to_iso8601_date",
    "to_iso8601_time",
    "to_iso8601_date_time",
    "to_iso8601_date_time_utc",
    # Interop
    "now",
    "from_py_datetime",
    "to_py_datetime",
    # Exceptions
    "TimeZoneNotFoundError",
    # Constants
    "JANUARY",
    "FEBRUARY",
    "MARCH",
    "APRIL",
    "MAY",
    "JUNE",
    "JULY",
    "AUGUST",
    "SEPTEMBER",
    "OCTOBER",
    "NOVEMBER",
    "DECEMBER",
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
]


class DateTuple(NamedTuple):
    """A calendar date as read in some zone"""

    year: int
    month: Month
    day: int


class TimeTuple(NamedTuple):
    """A wall-clock time as read in some zone"""

    hour: int
    minute: int
    second: int
    millisecond: int


# -------------------------------------------------------------------------
# Calendar tables
# -------------------------------------------------------------------------


def is_leap_year(year: int, /) -> bool:
    """Whether the year has a February 29th in the Gregorian calendar.

    Example
    -------
    >>> is_leap_year(2000), is_leap_year(1900), is_leap_year(2024)
    (True, False, True)
    """
    return is_leap(year)


def days_in_month(year: int, month: Month, /) -> int:
    """The number of days in the given month, always one of 28-31.

    This is the only authority used for clamping days-of-month.
    """
    return _days_in_month(year, month.value)


def leap_years_before(year: int, /) -> int:
    """Count the leap years strictly before the given year"""
    return _leap_years_before(year)


def month_to_int(month: Month, /) -> int:
    """January is 1, December is 12"""
    return month.value


def int_to_month(i: int, /) -> Optional[Month]:
    """The inverse of :func:`month_to_int`.
    Returns ``None`` for numbers outside 1-12.
    """
    return _MONTHS_BY_INT.get(i)


def weekday_to_int(day: Weekday, /) -> int:
    """ISO numbering: Monday is 1, Sunday is 7"""
    return day.value


def weekday_from_int(i: int, /) -> Result[Weekday]:
    """The inverse of :func:`weekday_to_int`.

    Example
    -------
    >>> weekday_from_int(1)
    Ok(<Weekday.MONDAY: 1>)
    >>> weekday_from_int(8)
    Err('Unknown integer value for weekday: 8')
    """
    try:
        return Ok(_WEEKDAYS_BY_INT[i])
    except KeyError:
        return Err(f"Unknown integer value for weekday: {i}")


# -------------------------------------------------------------------------
# Decomposition
# -------------------------------------------------------------------------


def to_date_tuple(zone: Zone, t: EpochMillis, /) -> DateTuple:
    """Read the local date of an instant

    Example
    -------
    >>> to_date_tuple(UTC, 0)
    DateTuple(year=1970, month=<Month.JANUARY: 1>, day=1)
    """
    f = zone.fields(t)
    return DateTuple(f.year, _MONTHS_BY_INT[f.month], f.day)


def to_time_tuple(zone: Zone, t: EpochMillis, /) -> TimeTuple:
    """Read the local wall-clock time of an instant"""
    f = zone.fields(t)
    return TimeTuple(f.hour, f.minute, f.second, f.millisecond)


def to_weekday(zone: Zone, t: EpochMillis, /) -> Weekday:
    return _WEEKDAYS_BY_INT[zone.fields(t).weekday]


def to_year(zone: Zone, t: EpochMillis, /) -> int:
    return zone.fields(t).year


def to_month(zone: Zone, t: EpochMillis, /) -> Month:
    return _MONTHS_BY_INT[zone.fields(t).month]


def to_day(zone: Zone, t: EpochMillis, /) -> int:
    return zone.fields(t).day


def to_hour(zone: Zone, t: EpochMillis, /) -> int:
    return zone.fields(t).hour


def to_minute(zone: Zone, t: EpochMillis, /) -> int:
    return zone.fields(t).minute


def to_second(zone: Zone, t: EpochMillis, /) -> int:
    return zone.fields(t).second


def to_millis(zone: Zone, t: EpochMillis, /) -> int:
    return zone.fields(t).millisecond


def from_date_tuple(
    zone: Zone, date: tuple[int, Month, int], /
) -> EpochMillis:
    """Build an instant on the given local date.

    Starts at the epoch and applies :func:`set_year`, :func:`set_month`
    and :func:`set_day` in that order. The time of day is whatever the
    epoch reads as in the zone (e.g. 19:00 in New York).
    """
    year, month, day = date
    return set_day(zone, day, set_month(zone, month, set_year(zone, year, 0)))


# -------------------------------------------------------------------------
# Setters
# -------------------------------------------------------------------------


def set_year(zone: Zone, year: int, t: EpochMillis, /) -> EpochMillis:
    """Move the instant to the given year, shifting by whole days.

    The zone isn't consulted after the shift: if the target lies across
    a DST transition, the wall-clock time differs by the DST delta.
    A February 29th moved to a common year lands on March 1st.
    """
    return t + year_start_ms(year) - year_start_ms(zone.fields(t).year)


def set_month(zone: Zone, month: Month, t: EpochMillis, /) -> EpochMillis:
    """Move the instant to the given month of the same year.

    The day is clamped to the length of the target month, and the time
    of day is carried over by whole-day shifting (without a DST check).
    """
    f = zone.fields(t)
    day = min(f.day, _days_in_month(f.year, month.value))
    return (
        t
        + month_offset_ms(f.year, month.value)
        + (day - 1) * MS_PER_DAY
        - month_offset_ms(f.year, f.month)
        - (f.day - 1) * MS_PER_DAY
    )


def set_day(zone: Zone, day: int, t: EpochMillis, /) -> EpochMillis:
    """Move the instant to the given day of the same month.

    The day is clamped to ``1..days_in_month``. If the local hour
    changed by the whole-day shift, one hour is added (hour went up)
    or subtracted (hour went down). Only single one-hour transitions
    are accounted for.
    """
    f = zone.fields(t)
    day = max(1, min(day, _days_in_month(f.year, f.month)))
    shifted = t + (day - f.day) * MS_PER_DAY
    new_hour = zone.fields(shifted).hour
    if new_hour > f.hour:
        return shifted + MS_PER_HOUR
    elif new_hour < f.hour:
        return shifted - MS_PER_HOUR
    return shifted


def set_hour(zone: Zone, hour: int, t: EpochMillis, /) -> EpochMillis:
    """Set the local hour; any int is accepted and reduced modulo 24.

    Unlike :func:`set_day`, there is no DST check after shifting.
    """
    return t + (floor_mod(hour, 24) - zone.fields(t).hour) * MS_PER_HOUR


def set_minute(zone: Zone, minute: int, t: EpochMillis, /) -> EpochMillis:
    """Set the local minute; any int is accepted and reduced modulo 60"""
    return (
        t + (floor_mod(minute, 60) - zone.fields(t).minute) * MS_PER_MINUTE
    )


def set_second(zone: Zone, second: int, t: EpochMillis, /) -> EpochMillis:
    """Set the local second; any int is accepted and reduced modulo 60.

    Note that 60 therefore means 0 of the *same* minute.
    """
    return (
        t + (floor_mod(second, 60) - zone.fields(t).second) * MS_PER_SECOND
    )


def set_millis(zone: Zone, millis: int, t: EpochMillis, /) -> EpochMillis:
    """Set the millisecond of the second.

    The value is reduced with a *truncating* remainder, so negative input
    keeps its sign: ``-5`` lands 5ms before the start of the second.
    """
    # Compatibility: the other setters use a floored modulo. The
    # difference is part of the public behavior and must stay.
    return t + trunc_rem(millis, 1_000) - zone.fields(t).millisecond


# -------------------------------------------------------------------------
# Rounding
# -------------------------------------------------------------------------


def start_of_hour(zone: Zone, t: EpochMillis, /) -> EpochMillis:
    return set_millis(zone, 0, set_second(zone, 0, set_minute(zone, 0, t)))


def end_of_hour(zone: Zone, t: EpochMillis, /) -> EpochMillis:
    return set_millis(
        zone, 999, set_second(zone, 59, set_minute(zone, 59, t))
    )


def start_of_day(zone: Zone, t: EpochMillis, /) -> EpochMillis:
    return start_of_hour(zone, set_hour(zone, 0, t))


def end_of_day(zone: Zone, t: EpochMillis, /) -> EpochMillis:
    return end_of_hour(zone, set_hour(zone, 23, t))


def start_of_month(zone: Zone, t: EpochMillis, /) -> EpochMillis:
    return start_of_day(zone, set_day(zone, 1, t))


def end_of_month(zone: Zone, t: EpochMillis, /) -> EpochMillis:
    """The last millisecond of the instant's local month

    Example
    -------
    >>> nyc = Zone.iana("America/New_York")
    >>> to_iso8601_date_time(nyc, end_of_month(nyc, 1520269200000))
    '2018-03-31T23:59:59.999'
    """
    f = zone.fields(t)
    return end_of_day(
        zone, set_day(zone, _days_in_month(f.year, f.month), t)
    )


def start_of_week(
    zone: Zone, first_day: Weekday, t: EpochMillis, /
) -> EpochMillis:
    """The start of the week containing the instant, with weeks
    beginning on ``first_day``.

    Example
    -------
    >>> to_iso8601_date_time_utc(start_of_week(UTC, SUNDAY, 0))
    '1969-12-28T00:00Z'
    """
    days_back = floor_mod(
        zone.fields(t).weekday - weekday_to_int(first_day), 7
    )
    return start_of_day(zone, t) - days_back * MS_PER_DAY


def end_of_week(
    zone: Zone, first_day: Weekday, t: EpochMillis, /
) -> EpochMillis:
    """The last millisecond of the week containing the instant, with
    weeks beginning on ``first_day``.
    """
    days_ahead = floor_mod(
        6 + weekday_to_int(first_day) - zone.fields(t).weekday, 7
    )
    return end_of_day(zone, t) + days_ahead * MS_PER_DAY


# -------------------------------------------------------------------------
# Arithmetic
# -------------------------------------------------------------------------


def add_millis(n: int, t: EpochMillis, /) -> EpochMillis:
    return t + n


def add_seconds(n: int, t: EpochMillis, /) -> EpochMillis:
    return t + n * MS_PER_SECOND


def add_minutes(n: int, t: EpochMillis, /) -> EpochMillis:
    return t + n * MS_PER_MINUTE


def add_hours(n: int, t: EpochMillis, /) -> EpochMillis:
    return t + n * MS_PER_HOUR


def add_days(n: int, t: EpochMillis, /) -> EpochMillis:
    """Add ``n`` times 24 hours. DST transitions are not accounted for;
    use :func:`add_days_z` to keep the wall-clock time.
    """
    return t + n * MS_PER_DAY


def add_days_z(n: int, zone: Zone, t: EpochMillis, /) -> EpochMillis:
    """Add days, correcting for DST transitions at local midnight.

    After adding ``n`` times 24 hours, a local hour of 1 means a
    transition to summer time was crossed (one hour is taken off), and
    a local hour of 23 means a transition back (one hour is added).
    Any other hour is left alone.

    Example
    -------
    >>> nyc = Zone.iana("America/New_York")
    >>> to_iso8601_date_time(nyc, add_days_z(1, nyc, 1541304000000))
    '2018-11-05T00:00'
    """
    shifted = add_days(n, t)
    hour = zone.fields(shifted).hour
    if hour == 1:
        return shifted - MS_PER_HOUR
    elif hour == 23:
        return shifted + MS_PER_HOUR
    return shifted


def compare(a: EpochMillis, b: EpochMillis, /) -> int:
    """Order two instants: -1 if ``a`` is earlier, 1 if later, 0 if equal"""
    return (a > b) - (a < b)


# -------------------------------------------------------------------------
# Formatting
# -------------------------------------------------------------------------


def to_iso8601_date(zone: Zone, t: EpochMillis, /) -> str:
    """Format the local date as ``YYYY-MM-DD``"""
    return _format_date(zone.fields(t))


def to_iso8601_time(zone: Zone, t: EpochMillis, /) -> str:
    """Format the local time as ``HH:MM[:SS[.mmm]]``.

    Seconds are included only if they (or the milliseconds) are nonzero,
    milliseconds only if they are nonzero.
    """
    return _format_time(zone.fields(t))


def to_iso8601_date_time(zone: Zone, t: EpochMillis, /) -> str:
    """Format the local date and time, without any offset or zone marker

    Example
    -------
    >>> to_iso8601_date_time(Zone.iana("America/New_York"), 0)
    '1969-12-31T19:00'
    """
    f = zone.fields(t)
    return f"{_format_date(f)}T{_format_time(f)}"


def to_iso8601_date_time_utc(t: EpochMillis, /) -> str:
    """Format the instant in UTC, with a trailing ``Z``

    Example
    -------
    >>> to_iso8601_date_time_utc(0)
    '1970-01-01T00:00Z'
    """
    return to_iso8601_date_time(UTC, t) + "Z"


def _format_date(f: LocalFields) -> str:
    sign = "-" if f.year < 0 else ""
    return f"{sign}{abs(f.year):04d}-{f.month:02d}-{f.day:02d}"


def _format_time(f: LocalFields) -> str:
    return (
        f"{f.hour:02d}:{f.minute:02d}"
        + bool(f.second or f.millisecond) * f":{f.second:02d}"
        + bool(f.millisecond) * f".{f.millisecond:03d}"
    )


# -------------------------------------------------------------------------
# Interop
# -------------------------------------------------------------------------


def now() -> EpochMillis:
    """The current instant, truncated to the millisecond"""
    # Looked up on the module each call so time-patching tools apply
    return _time_module.time_ns() // 1_000_000


def from_py_datetime(d: _datetime, /) -> EpochMillis:
    """Create an instant from an aware standard library ``datetime``.
    Sub-millisecond precision is floored away.
    """
    if not isinstance(d, _datetime):
        raise TypeError(f"Expected datetime, got {type(d)!r}")
    if d.tzinfo is None or d.utcoffset() is None:
        raise ValueError("Cannot create an instant from a naive datetime")
    return epoch_ms_from_datetime(d)


def to_py_datetime(t: EpochMillis, /) -> _datetime:
    """Convert to an aware standard library ``datetime`` in UTC"""
    return utc_datetime(t)


# We expose the public members in the root of the package.
# For clarity, we remove the "_engine" part from the names,
# since this is an implementation detail.
for name in __all__:
    member = locals()[name]
    if callable(member) and getattr(member, "__module__", "").startswith(
        "epochal."
    ):
        member.__module__ = "epochal"

# clear up loop variables so they don't leak into the namespace
del name
del member
