from __future__ import annotations

from typing import final

from .common import EpochMillis, LocalFields, Resolver
from .fixed import FixedOffsetResolver, format_offset
from .store import IanaResolver, load_tz, validate_tzid


@final
class Zone:
    """A zone identifier together with the resolver that interprets it.

    Every zone-aware operation reads local fields exclusively through
    :meth:`fields`, so any object implementing ``Resolver`` can stand
    in for the IANA database.

    Example
    -------
    >>> nyc = Zone.iana("America/New_York")
    >>> nyc.fields(0)
    LocalFields(year=1969, month=12, day=31, hour=19, minute=0, second=0, millisecond=0, weekday=3)
    """

    __slots__ = ("key", "resolver")

    key: str
    resolver: Resolver

    def __init__(self, key: str, resolver: Resolver) -> None:
        self.key = key
        self.resolver = resolver

    @classmethod
    def iana(cls, key: str, /) -> Zone:
        """Create a zone from an IANA key, e.g. ``"Europe/Amsterdam"``.

        Raises ``TimeZoneNotFoundError`` if the key is malformed or
        unknown to the database.
        """
        load_tz(validate_tzid(key))
        return cls(key, IanaResolver())

    @classmethod
    def fixed(cls, offset: int, /) -> Zone:
        """Create a zone with a constant offset (in seconds) from UTC"""
        key = "UTC" if offset == 0 else f"UTC{format_offset(offset)}"
        return cls(key, FixedOffsetResolver(offset))

    def fields(self, epoch_ms: EpochMillis, /) -> LocalFields:
        return self.resolver.resolve(self.key, epoch_ms)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Zone):
            return self.key == other.key and self.resolver == other.resolver
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.key, self.resolver))

    def __repr__(self) -> str:
        return f"Zone({self.key})"


UTC = Zone("UTC", FixedOffsetResolver(0))
