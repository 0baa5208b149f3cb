"""Domain layer: coordinates, cells, neighborhoods, generations and the board."""

from conway_life.domain.board import Board, blank_grid, build_grid_array
from conway_life.domain.cell import Cell, Outcome, evaluate, is_happy, is_lonely, is_overcrowded
from conway_life.domain.coordinate import Coordinate
from conway_life.domain.errors import (
    DuplicateCoordinates,
    GenerationSealed,
    InvalidCoordinates,
    InvalidGeneration,
    InvalidNeighborCount,
    LifeError,
)
from conway_life.domain.filters import ExtinctionDetector, HaltDetector
from conway_life.domain.generation import Generation
from conway_life.domain.neighborhood import (
    Neighborhood,
    adjacent_coordinates,
    count_live_neighbors,
    enumerate_reproduction_candidates,
)

__all__ = [
    "Board",
    "Cell",
    "Coordinate",
    "DuplicateCoordinates",
    "ExtinctionDetector",
    "Generation",
    "GenerationSealed",
    "HaltDetector",
    "InvalidCoordinates",
    "InvalidGeneration",
    "InvalidNeighborCount",
    "LifeError",
    "Neighborhood",
    "Outcome",
    "adjacent_coordinates",
    "blank_grid",
    "build_grid_array",
    "count_live_neighbors",
    "enumerate_reproduction_candidates",
    "evaluate",
    "is_happy",
    "is_lonely",
    "is_overcrowded",
]
