from bisect import bisect_right
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from epochal import LocalFields, Zone, from_py_datetime

NYC = Zone.iana("America/New_York")
AMS = Zone.iana("Europe/Amsterdam")

# Range of instants (1900-2100) used in property-based tests
MIN_MS = -2208988800000
MAX_MS = 4102444800000


def utc_ms(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> int:
    return from_py_datetime(
        datetime(
            year,
            month,
            day,
            hour,
            minute,
            second,
            millisecond * 1_000,
            tzinfo=timezone.utc,
        )
    )


def local_ms(
    key: str,
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> int:
    """The instant at which the given wall-clock time occurs in a zone.
    Only use this for times that exist exactly once."""
    return from_py_datetime(
        datetime(
            year,
            month,
            day,
            hour,
            minute,
            second,
            millisecond * 1_000,
            tzinfo=ZoneInfo(key),
        )
    )


def nyc_ms(*args: int) -> int:
    return local_ms("America/New_York", *args)


def ams_ms(*args: int) -> int:
    return local_ms("Europe/Amsterdam", *args)


class SteppedResolver:
    """A synthetic rule set: each entry reads "FROM instant X onwards
    (epoch ms) the offset is Y (seconds)". Before the first entry,
    ``initial`` applies."""

    def __init__(self, initial: int, transitions: tuple[tuple[int, int], ...]):
        self.initial = initial
        self.transitions = transitions

    def resolve(self, key: str, epoch_ms: int, /) -> LocalFields:
        idx = bisect_right([t for t, _ in self.transitions], epoch_ms)
        offset = self.transitions[idx - 1][1] if idx else self.initial
        d = datetime(1970, 1, 1) + timedelta(
            milliseconds=epoch_ms + offset * 1_000
        )
        return LocalFields(
            d.year,
            d.month,
            d.day,
            d.hour,
            d.minute,
            d.second,
            d.microsecond // 1_000,
            d.isoweekday(),
        )


class StubResolver:
    """Always returns the same fields, whatever the instant"""

    def __init__(self, fields: LocalFields):
        self.fields = fields

    def resolve(self, key: str, epoch_ms: int, /) -> LocalFields:
        return self.fields


class CountingResolver:
    """Wraps a resolver and counts how often it is consulted"""

    def __init__(self, inner):
        self.inner = inner
        self.calls = 0

    def resolve(self, key: str, epoch_ms: int, /) -> LocalFields:
        self.calls += 1
        return self.inner.resolve(key, epoch_ms)


# US rules as they applied in 2018, as a synthetic zone
US_EASTERN_2018 = Zone(
    "Synthetic/US-Eastern-2018",
    SteppedResolver(
        -5 * 3600,
        (
            (1520751600000, -4 * 3600),  # 2018-03-11T07:00Z
            (1541311200000, -5 * 3600),  # 2018-11-04T06:00Z
        ),
    ),
)
