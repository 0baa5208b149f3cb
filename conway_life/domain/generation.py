"""Generations of live cells and the advance-to-next-generation algorithm."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from conway_life.config.constants import BIRTH_COUNT
from conway_life.config.types import Size
from conway_life.domain.cell import Cell
from conway_life.domain.coordinate import Coordinate
from conway_life.domain.errors import DuplicateCoordinates, GenerationSealed, InvalidCoordinates

logger = logging.getLogger(__name__)


def _candidate_order(coordinate: Coordinate) -> tuple[int, int]:
    return (coordinate.longitude, coordinate.latitude)


class Generation:
    """Ordered, coordinate-unique collection of live cells tagged with a number.

    Cells can only be appended through :meth:`add` while the generation is
    being built. Advancing (or calling :meth:`seal`) freezes it; the next
    generation is always a new object.
    """

    def __init__(
        self,
        cells: Iterable[Cell] = (),
        number: int = 1,
        size: Size | None = None,
    ) -> None:
        if number < 1:
            raise ValueError("number must be >= 1")
        self._number = number
        self._size = size if size is not None else Size()
        self._cells: list[Cell] = []
        self._alive: set[Coordinate] = set()
        self._sealed = False
        for cell in cells:
            self.add(cell)

    @classmethod
    def from_coordinates(
        cls,
        coordinates: Iterable[Coordinate],
        number: int = 1,
        size: Size | None = None,
    ) -> Generation:
        """Build a generation with one live cell per coordinate."""
        generation = cls(number=number, size=size)
        for coordinate in coordinates:
            if not isinstance(coordinate, Coordinate):
                raise InvalidCoordinates(
                    f"expected a Coordinate, got {type(coordinate).__name__}"
                )
            generation.add(Cell(coordinates=coordinate, generation_number=number))
        return generation

    @property
    def number(self) -> int:
        return self._number

    @property
    def size(self) -> Size:
        return self._size

    @property
    def sealed(self) -> bool:
        return self._sealed

    def add(self, cell: Cell) -> None:
        """Append a live cell; only allowed before the generation is sealed."""
        if self._sealed:
            raise GenerationSealed(f"generation {self._number} can no longer be modified")
        if not isinstance(cell, Cell):
            raise InvalidCoordinates(f"expected a Cell, got {type(cell).__name__}")
        if cell.coordinates in self._alive:
            raise DuplicateCoordinates(
                f"generation {self._number} already has a live cell at {cell.coordinates}"
            )
        self._cells.append(cell)
        self._alive.add(cell.coordinates)

    def seal(self) -> None:
        self._sealed = True

    def coordinates(self) -> tuple[Coordinate, ...]:
        """Live coordinates in insertion order (read-only snapshot)."""
        return tuple(cell.coordinates for cell in self._cells)

    def live_coordinates(self) -> frozenset[Coordinate]:
        return frozenset(self._alive)

    def advance(self) -> Generation:
        """Derive the next generation from this one.

        Survivals and births are both counted against the same unmodified
        snapshot of this generation, so a cell dying never changes another
        cell's count within one advance.
        """
        from conway_life.domain.neighborhood import Neighborhood

        self.seal()
        next_number = self._number + 1
        neighborhood = Neighborhood(self)
        following = Generation(number=next_number, size=self._size)

        for cell in self._cells:
            survivor = cell.tick(neighborhood.count_live_neighbors(cell.coordinates), next_number)
            if survivor is not None:
                following.add(survivor)
        survivors = len(following)

        candidates = sorted(
            neighborhood.enumerate_reproduction_candidates(self._size), key=_candidate_order
        )
        for coordinate in candidates:
            if neighborhood.count_live_neighbors(coordinate) == BIRTH_COUNT:
                following.add(Cell(coordinates=coordinate, generation_number=next_number))

        logger.debug(
            "generation %d: %d live -> %d survivors, %d births (%d candidates)",
            next_number,
            len(self._cells),
            survivors,
            len(following) - survivors,
            len(candidates),
        )
        return following

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(tuple(self._cells))

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Cell):
            return item.coordinates in self._alive
        if isinstance(item, Coordinate):
            return item in self._alive
        return False

    def __repr__(self) -> str:
        return f"Generation(number={self._number}, live={len(self._cells)}, size={self._size})"
