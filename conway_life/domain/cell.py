"""Live cells and the per-generation survival rule.

A live cell with fewer than two live neighbors dies of loneliness, one with
more than three dies of overcrowding, and one with exactly two or three is
happy and survives. The three predicates cover every non-negative count.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from conway_life.config.constants import SURVIVAL_COUNTS
from conway_life.domain.coordinate import Coordinate
from conway_life.domain.errors import InvalidNeighborCount


class Outcome(Enum):
    """Fate of a live cell in the next generation."""

    SURVIVES = "survives"
    DIES = "dies"


def is_lonely(live_neighbor_count: int) -> bool:
    return live_neighbor_count < 2


def is_overcrowded(live_neighbor_count: int) -> bool:
    return live_neighbor_count > 3


def is_happy(live_neighbor_count: int) -> bool:
    return live_neighbor_count in SURVIVAL_COUNTS


# Checked in order; the first matching predicate decides.
_RULES: tuple[tuple[Callable[[int], bool], Outcome], ...] = (
    (is_lonely, Outcome.DIES),
    (is_overcrowded, Outcome.DIES),
    (is_happy, Outcome.SURVIVES),
)


def evaluate(live_neighbor_count: int) -> Outcome:
    """Apply the survival rule to a live cell's neighbor count."""
    if live_neighbor_count < 0:
        raise InvalidNeighborCount(
            f"live_neighbor_count must be >= 0, got {live_neighbor_count}"
        )
    return next(outcome for predicate, outcome in _RULES if predicate(live_neighbor_count))


@dataclass(frozen=True)
class Cell:
    """One live position within a specific generation."""

    coordinates: Coordinate = field(default_factory=Coordinate)
    generation_number: int = 1

    @staticmethod
    def evaluate(live_neighbor_count: int) -> Outcome:
        return evaluate(live_neighbor_count)

    def tick(self, live_neighbor_count: int, generation_number: int) -> Cell | None:
        """Return this cell re-anchored in ``generation_number`` if it survives."""
        if evaluate(live_neighbor_count) is Outcome.DIES:
            return None
        return Cell(coordinates=self.coordinates, generation_number=generation_number)
