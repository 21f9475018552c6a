from functools import cmp_to_key

import pytest
from hypothesis import given
from hypothesis.strategies import integers

from epochal import (
    UTC,
    add_days,
    add_days_z,
    add_hours,
    add_millis,
    add_minutes,
    add_seconds,
    compare,
    to_iso8601_date_time,
)

from .common import AMS, NYC, US_EASTERN_2018, ams_ms, nyc_ms


class TestLinear:
    def test_days(self):
        assert add_days(1, 0) == 86_400_000
        assert add_days(-1, 0) == -86_400_000
        assert add_days(0, 123) == 123

    def test_units(self):
        assert add_millis(5, 10) == 15
        assert add_seconds(2, 10) == 2_010
        assert add_minutes(-1, 0) == -60_000
        assert add_hours(3, 0) == 10_800_000

    def test_no_saturation(self):
        huge = 1 << 70
        assert add_days(huge, 0) == huge * 86_400_000
        assert add_millis(1, (1 << 63) - 1) == 1 << 63

    def test_add_days_ignores_dst(self):
        t = add_days(1, nyc_ms(2018, 11, 4))
        assert to_iso8601_date_time(NYC, t) == "2018-11-04T23:00"

    @given(integers(), integers())
    def test_composes(self, n, t):
        assert add_hours(n, t) == add_minutes(60 * n, t)
        assert add_days(n, t) == add_hours(24 * n, t)
        assert add_seconds(n, t) == add_millis(1_000 * n, t)


class TestAddDaysZ:
    @pytest.mark.parametrize("zone", [NYC, US_EASTERN_2018])
    @pytest.mark.parametrize(
        "start, n, expect",
        [
            # spring forward
            ((2018, 3, 10), 1, "2018-03-11T00:00"),
            ((2018, 3, 11), 1, "2018-03-12T00:00"),
            ((2018, 3, 1), 20, "2018-03-21T00:00"),
            ((2018, 3, 12), -1, "2018-03-11T00:00"),
            # fall back
            ((2018, 11, 3), 1, "2018-11-04T00:00"),
            ((2018, 11, 4), 1, "2018-11-05T00:00"),
            ((2018, 11, 20), -30, "2018-10-21T00:00"),
            # no transition
            ((2018, 6, 1, 15, 30), 7, "2018-06-08T15:30"),
            # only hours 1 and 23 are corrected
            ((2018, 3, 10, 12), 1, "2018-03-11T13:00"),
        ],
    )
    def test_dst(self, zone, start, n, expect):
        t = add_days_z(n, zone, nyc_ms(*start))
        assert to_iso8601_date_time(zone, t) == expect

    @pytest.mark.parametrize(
        "start, n, expect",
        [
            ((2018, 3, 24), 1, "2018-03-25T00:00"),
            ((2018, 3, 25), 1, "2018-03-26T00:00"),
            ((2018, 10, 28), 1, "2018-10-29T00:00"),
            # not corrected: the local hour is neither 1 nor 23
            ((2018, 3, 24, 12), 1, "2018-03-25T13:00"),
            ((2018, 10, 27, 2, 30), 1, "2018-10-28T02:30"),
        ],
    )
    def test_dst_europe(self, start, n, expect):
        t = add_days_z(n, AMS, ams_ms(*start))
        assert to_iso8601_date_time(AMS, t) == expect

    def test_utc_is_linear(self):
        assert add_days_z(3, UTC, 1_000) == add_days(3, 1_000)

    def test_corrects_genuine_one_and_eleven_pm(self):
        # the heuristic can't tell these apart from a DST shift
        t = add_days_z(1, UTC, 3_600_000)
        assert t == 86_400_000
        t = add_days_z(1, UTC, -3_600_000)
        assert t == 86_400_000


class TestCompare:
    @pytest.mark.parametrize(
        "a, b, expect",
        [(1, 2, -1), (2, 1, 1), (5, 5, 0), (-(1 << 64), 0, -1)],
    )
    def test_examples(self, a, b, expect):
        assert compare(a, b) == expect

    def test_sorting(self):
        assert sorted([3, -1, 2, 0], key=cmp_to_key(compare)) == [
            -1,
            0,
            2,
            3,
        ]

    @given(integers(), integers())
    def test_antisymmetric(self, a, b):
        assert compare(a, b) == -compare(b, a)
