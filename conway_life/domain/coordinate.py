"""Immutable 2D integer grid position."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """A grid position; equal fields mean the same position."""

    latitude: int = 0
    longitude: int = 0

    def translate(self, d_latitude: int, d_longitude: int) -> Coordinate:
        """Return the coordinate shifted by the given deltas."""
        return Coordinate(self.latitude + d_latitude, self.longitude + d_longitude)
