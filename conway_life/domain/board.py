"""Fixed-size display board wrapping the current generation."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from conway_life.config.constants import BOARD_SIZE
from conway_life.config.types import Size
from conway_life.domain.coordinate import Coordinate
from conway_life.domain.generation import Generation


def blank_grid(size: Size) -> np.ndarray:
    """Return an all-zero (latitude, longitude) int array."""
    return np.zeros((size.latitude, size.longitude), dtype=int)


def build_grid_array(coordinates: Iterable[Coordinate], size: Size) -> np.ndarray:
    """Return a (latitude, longitude) int array: 1 for live cells, 0 elsewhere.

    Out-of-bounds coordinates are silently skipped.
    """
    grid = blank_grid(size)
    for coordinate in coordinates:
        if 0 <= coordinate.latitude < size.latitude and 0 <= coordinate.longitude < size.longitude:
            grid[coordinate.latitude, coordinate.longitude] = 1
    return grid


class Board:
    """Holds the current generation and renders it into a display buffer.

    The board and its generation always share one ``Size``: it bounds both
    births and the display buffer.
    """

    def __init__(self, size: Size | None = None, generation: Generation | None = None) -> None:
        if generation is not None:
            if size is not None and size != generation.size:
                raise ValueError(
                    f"board size {size} conflicts with generation size {generation.size}"
                )
            size = generation.size
        self.size = size if size is not None else Size(latitude=BOARD_SIZE, longitude=BOARD_SIZE)
        self.generation = generation if generation is not None else Generation(size=self.size)

    def tick(self) -> Generation:
        self.generation = self.generation.advance()
        return self.generation

    def blank_board(self) -> np.ndarray:
        return blank_grid(self.size)

    def draw(self) -> np.ndarray:
        """Render live coordinates into a fresh buffer."""
        return build_grid_array(self.generation.coordinates(), self.size)

    def render_text(self, live: str = "#", dead: str = ".") -> str:
        grid = self.draw()
        return "\n".join("".join(live if value else dead for value in row) for row in grid)
