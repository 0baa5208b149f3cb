"""Centralized defaults for the Game of Life engine and its driver.

Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

DEFAULT_SIZE_LATITUDE = 5
"""Default latitude extent of a ``Size``."""

DEFAULT_SIZE_LONGITUDE = 5
"""Default longitude extent of a ``Size``."""

BOARD_SIZE = 10
"""Default extent (both axes) of a ``Board`` built without an explicit size."""

DEFAULT_TICKS = 5
"""Number of ticks the driver runs after the initial generation."""

DEFAULT_INTERVAL = 0.5
"""Seconds the driver sleeps between ticks."""

MAX_SEED_CELLS = 10
"""Upper bound (exclusive) on random seeding draws."""

SURVIVAL_COUNTS: frozenset[int] = frozenset({2, 3})
"""Live-neighbor counts under which a live cell survives."""

BIRTH_COUNT = 3
"""Live-neighbor count at which an empty coordinate becomes live."""

NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (d_lat, d_long)
    for d_lat in (-1, 0, 1)
    for d_long in (-1, 0, 1)
    if (d_lat, d_long) != (0, 0)
)
"""(latitude, longitude) deltas of the 8-cell Moore neighborhood."""
