"""Configuration dataclasses for boards and the simulation driver.

All config objects are frozen and validate themselves in ``__post_init__``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from conway_life.config.constants import (
    DEFAULT_INTERVAL,
    DEFAULT_SIZE_LATITUDE,
    DEFAULT_SIZE_LONGITUDE,
    DEFAULT_TICKS,
    MAX_SEED_CELLS,
)

__all__ = [
    "DriverConfig",
    "Size",
]


@dataclass(frozen=True)
class Size:
    """Rectangular grid bound used for birth candidates and rendering."""

    latitude: int = DEFAULT_SIZE_LATITUDE
    longitude: int = DEFAULT_SIZE_LONGITUDE

    def __post_init__(self) -> None:
        if self.latitude < 1:
            raise ValueError("latitude must be >= 1")
        if self.longitude < 1:
            raise ValueError("longitude must be >= 1")

    @classmethod
    def parse(cls, raw: str) -> Size:
        """Parse a ``LATxLONG`` string such as ``"10x12"``."""
        tokens = raw.strip().lower().split("x")
        if len(tokens) != 2:
            raise ValueError("size must use LATxLONG format")
        try:
            latitude, longitude = int(tokens[0]), int(tokens[1])
        except ValueError as exc:
            raise ValueError("size must use integer LATxLONG values") from exc
        return cls(latitude=latitude, longitude=longitude)


@dataclass(frozen=True)
class DriverConfig:
    """Runtime knobs for the seed-and-tick driver loop."""

    size: Size = field(default_factory=Size)
    ticks: int = DEFAULT_TICKS
    interval: float = DEFAULT_INTERVAL
    max_seed_cells: int = MAX_SEED_CELLS
    seed: int | None = None
    stop_when_static: bool = False
    halt_window: int = 1

    def __post_init__(self) -> None:
        if self.ticks < 0:
            raise ValueError("ticks must be >= 0")
        if self.interval < 0:
            raise ValueError("interval must be >= 0")
        if self.max_seed_cells < 0:
            raise ValueError("max_seed_cells must be >= 0")
        if self.halt_window < 1:
            raise ValueError("halt_window must be >= 1")
