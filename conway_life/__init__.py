"""Conway's Game of Life on a sparse live-cell set."""

from conway_life.config import DriverConfig, Size
from conway_life.domain import Board, Cell, Coordinate, Generation, Neighborhood, Outcome
from conway_life.simulation import Driver

__version__ = "0.1.0"

__all__ = [
    "Board",
    "Cell",
    "Coordinate",
    "Driver",
    "DriverConfig",
    "Generation",
    "Neighborhood",
    "Outcome",
    "Size",
]
