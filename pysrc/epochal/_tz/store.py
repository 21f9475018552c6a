"""Timezone database access, backed by :mod:`zoneinfo`."""

from __future__ import annotations

from typing import NewType
from zoneinfo import (
    ZoneInfo,
    ZoneInfoNotFoundError,
    available_timezones as _available_timezones,
)

from .common import EpochMillis, LocalFields, local_fields, utc_datetime

__all__ = [
    "IanaResolver",
    "TimeZoneNotFoundError",
    "available_zones",
    "validate_tzid",
]


class IanaResolver:
    """Resolves zone keys against the IANA database.

    The data comes from the system's zoneinfo directories or, failing that,
    from the ``tzdata`` package. Lookups are delegated to
    :class:`zoneinfo.ZoneInfo`; this class holds no state of its own.
    """

    __slots__ = ()

    def resolve(self, key: str, epoch_ms: EpochMillis, /) -> LocalFields:
        return local_fields(utc_datetime(epoch_ms), load_tz(key))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IanaResolver):
            return True
        return NotImplemented

    def __hash__(self) -> int:
        return hash(IanaResolver)

    def __repr__(self) -> str:
        return "IanaResolver()"


def load_tz(key: str) -> ZoneInfo:
    try:
        return ZoneInfo(key)
    # Several exceptions amount to "can't find the key"
    except (
        ZoneInfoNotFoundError,
        ValueError,
        IsADirectoryError,
        UnicodeEncodeError,
    ):
        raise TimeZoneNotFoundError.for_key(key)


def validate_tzid(key: str) -> SafeTzId:
    """Checks for invalid characters and path traversal in the key."""
    if (
        key.isascii()
        # There's no standard limit on IANA tz IDs, but we have to draw
        # the line somewhere to prevent abuse.
        and 0 < len(key) < 100
        and all(b.isalnum() or b in "-_+/." for b in key)
        # specific sequences not allowed
        and ".." not in key
        and "//" not in key
        and "/./" not in key
        # specific restrictions on the first and last characters
        and key[0] not in ".-+/"
        and key[-1] != "/"
    ):
        return SafeTzId(key)
    else:
        raise TimeZoneNotFoundError.for_key(key)


# Alias for a TZ key that has been confirmed not to be a path traversal
# or contain other "bad" characters.
SafeTzId = NewType("SafeTzId", str)


def available_zones() -> set[str]:
    """Gather the set of all available IANA zone keys.

    Recalculated on each call, so it reflects the current ``TZPATH``
    and whether the ``tzdata`` package is installed.
    """
    return _available_timezones()


class TimeZoneNotFoundError(ValueError):
    """A timezone with the given ID was not found"""

    @classmethod
    def for_key(cls, key: str) -> TimeZoneNotFoundError:
        return cls(f"No time zone found for key: {key!r}")
