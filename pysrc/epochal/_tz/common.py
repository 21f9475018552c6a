from __future__ import annotations

from datetime import (
    datetime as _datetime,
    timedelta as _timedelta,
    timezone as _timezone,
    tzinfo as _tzinfo,
)
from typing import NamedTuple, Protocol

EpochMillis = int

UTC = _timezone.utc
_UNIX_EPOCH = _datetime(1970, 1, 1, tzinfo=UTC)


class LocalFields(NamedTuple):
    """The wall-clock reading of an instant in some zone.

    ``weekday`` follows ISO numbering: Monday is 1, Sunday is 7.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int
    weekday: int


class Resolver(Protocol):
    """Looks up the local fields of an instant in a named zone.

    Implementations must be referentially transparent: the same key and
    instant always give the same fields.
    """

    def resolve(self, key: str, epoch_ms: EpochMillis, /) -> LocalFields: ...


def utc_datetime(epoch_ms: EpochMillis) -> _datetime:
    try:
        return _UNIX_EPOCH + _timedelta(milliseconds=epoch_ms)
    except OverflowError as e:
        raise ValueError("Instant out of range") from e


def epoch_ms_from_datetime(dt: _datetime) -> EpochMillis:
    # Integer division on timedelta keeps this exact, unlike .timestamp()
    return (dt - _UNIX_EPOCH) // _timedelta(milliseconds=1)


def fields_from_datetime(dt: _datetime) -> LocalFields:
    return LocalFields(
        dt.year,
        dt.month,
        dt.day,
        dt.hour,
        dt.minute,
        dt.second,
        dt.microsecond // 1_000,
        dt.isoweekday(),
    )


def local_fields(dt: _datetime, tz: _tzinfo) -> LocalFields:
    try:
        return fields_from_datetime(dt.astimezone(tz))
    except (OverflowError, ValueError) as e:
        raise ValueError("Instant out of range") from e
