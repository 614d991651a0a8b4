"""Pace zone models."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from marathon_engine.models.enums import ZoneType


@dataclass(frozen=True)
class PaceZone:
    """A single pace band in seconds per km.

    ``lower`` is the faster bound (fewer s/km), ``upper`` the slower one.
    """

    zone: ZoneType
    lower: int
    upper: int

    @property
    def midpoint(self) -> float:
        return (self.lower + self.upper) / 2


@dataclass(frozen=True)
class PaceZones:
    """The six Daniels training zones for one runner."""

    recovery: PaceZone
    easy: PaceZone
    marathon: PaceZone
    tempo: PaceZone
    interval: PaceZone
    repetition: PaceZone

    def get(self, zone: ZoneType) -> PaceZone:
        """Return the band for *zone*."""
        return getattr(self, zone.name.lower())

    def __iter__(self) -> Iterator[PaceZone]:
        """Iterate fastest (repetition) to slowest (recovery)."""
        return (self.get(zone) for zone in ZoneType)
