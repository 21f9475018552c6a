from __future__ import annotations

from datetime import timedelta as _timedelta, timezone as _timezone

from .common import EpochMillis, LocalFields, local_fields, utc_datetime


class FixedOffsetResolver:
    """A resolver with a single, constant UTC offset and no DST.

    The zone key is ignored, so one instance can serve several zones.
    """

    __slots__ = ("offset", "_tzinfo")

    offset: int  # seconds east of UTC

    def __init__(self, offset: int):
        if not -86_400 < offset < 86_400:
            raise ValueError(f"Offset out of range: {offset}")
        self.offset = offset
        self._tzinfo = _timezone(_timedelta(seconds=offset))

    def resolve(self, key: str, epoch_ms: EpochMillis, /) -> LocalFields:
        return local_fields(utc_datetime(epoch_ms), self._tzinfo)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FixedOffsetResolver):
            return self.offset == other.offset
        return NotImplemented

    def __hash__(self) -> int:
        return hash((FixedOffsetResolver, self.offset))

    def __repr__(self) -> str:
        return f"FixedOffsetResolver({self.offset})"


def format_offset(secs: int) -> str:
    """Format an offset as ``±HH:MM``, with ``:SS`` only when needed"""
    sign = "-" if secs < 0 else "+"
    hrs, rest = divmod(abs(secs), 3600)
    mins, secs = divmod(rest, 60)
    return f"{sign}{hrs:02}:{mins:02}" + (f":{secs:02}" if secs else "")
