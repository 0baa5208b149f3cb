"""Configuration layer: constants and typed config dataclasses."""

from conway_life.config.constants import (
    BIRTH_COUNT,
    BOARD_SIZE,
    DEFAULT_INTERVAL,
    DEFAULT_SIZE_LATITUDE,
    DEFAULT_SIZE_LONGITUDE,
    DEFAULT_TICKS,
    MAX_SEED_CELLS,
    NEIGHBOR_OFFSETS,
    SURVIVAL_COUNTS,
)
from conway_life.config.types import DriverConfig, Size

__all__ = [
    "BIRTH_COUNT",
    "BOARD_SIZE",
    "DEFAULT_INTERVAL",
    "DEFAULT_SIZE_LATITUDE",
    "DEFAULT_SIZE_LONGITUDE",
    "DEFAULT_TICKS",
    "DriverConfig",
    "MAX_SEED_CELLS",
    "NEIGHBOR_OFFSETS",
    "SURVIVAL_COUNTS",
    "Size",
]
