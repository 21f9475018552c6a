from .common import EpochMillis, LocalFields, Resolver
from .fixed import FixedOffsetResolver
from .store import IanaResolver, TimeZoneNotFoundError, available_zones
from .zone import UTC, Zone

__all__ = [
    "EpochMillis",
    "LocalFields",
    "Resolver",
    "FixedOffsetResolver",
    "IanaResolver",
    "TimeZoneNotFoundError",
    "available_zones",
    "UTC",
    "Zone",
]
