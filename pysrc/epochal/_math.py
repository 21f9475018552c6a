"""Calendar tables and millisecond arithmetic helpers."""

MS_PER_SECOND = 1_000
MS_PER_MINUTE = 60_000
MS_PER_HOUR = 3_600_000
MS_PER_DAY = 86_400_000
# A common (non-leap) year. Leap days are accounted for separately.
MS_PER_YEAR = 365 * MS_PER_DAY

EPOCH_YEAR = 1970


def is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


# 1-indexed days per month
_MONTHDAYS = [0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


def days_in_month(year: int, month: int) -> int:
    return _MONTHDAYS[month] + (month == 2 and is_leap(year))


def leap_years_before(year: int) -> int:
    """Number of leap years strictly before the given year.

    Floor division keeps this correct for years before 1 as well.
    """
    y = year - 1
    return y // 4 - y // 100 + y // 400


_EPOCH_LEAP_YEARS = leap_years_before(EPOCH_YEAR)


def year_start_ms(year: int) -> int:
    """Milliseconds from the epoch to January 1st of the given year (UTC)"""
    return (
        MS_PER_YEAR * (year - EPOCH_YEAR)
        + MS_PER_DAY * (leap_years_before(year) - _EPOCH_LEAP_YEARS)
    )


def month_offset_ms(year: int, month: int) -> int:
    """Combined length of all months preceding the given month"""
    return MS_PER_DAY * sum(
        days_in_month(year, m) for m in range(1, month)
    )


def floor_mod(a: int, n: int) -> int:
    # Python's % already floors; named for symmetry with trunc_rem
    return a % n


def trunc_rem(a: int, n: int) -> int:
    """Remainder that takes the sign of the dividend, like C's ``%``.

    Avoids ``math.fmod`` so arbitrarily large ints keep full precision.
    """
    r = abs(a) % n
    return -r if a < 0 else r
