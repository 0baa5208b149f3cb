"""Neighbor counting and reproduction-candidate enumeration.

A ``Neighborhood`` snapshots the live coordinates of one generation into a
frozenset when it is constructed: O(live cells) to build, then O(1) amortized
per adjacency check, so counting for a single target costs 8 lookups
regardless of generation size. A snapshot belongs to exactly one generation
and is never reused after that generation advances.
"""

from __future__ import annotations

from collections.abc import Iterator

from conway_life.config.constants import NEIGHBOR_OFFSETS
from conway_life.config.types import Size
from conway_life.domain.coordinate import Coordinate
from conway_life.domain.errors import InvalidCoordinates, InvalidGeneration
from conway_life.domain.generation import Generation


def adjacent_coordinates(target: Coordinate) -> Iterator[Coordinate]:
    """Yield the 8 coordinates surrounding ``target`` (target excluded)."""
    for d_lat, d_long in NEIGHBOR_OFFSETS:
        yield target.translate(d_lat, d_long)


def _in_bounds(coordinate: Coordinate, size: Size) -> bool:
    # Both upper bounds are inclusive.
    return 0 <= coordinate.latitude <= size.latitude and 0 <= coordinate.longitude <= size.longitude


class Neighborhood:
    """Live-neighbor queries against a frozen view of one generation."""

    def __init__(self, generation: Generation) -> None:
        if not isinstance(generation, Generation):
            raise InvalidGeneration(
                f"Neighborhood requires a Generation, got {type(generation).__name__}"
            )
        self._generation = generation
        self._alive: frozenset[Coordinate] = generation.live_coordinates()

    @property
    def generation(self) -> Generation:
        return self._generation

    def is_alive(self, coordinate: Coordinate) -> bool:
        return coordinate in self._alive

    def count_live_neighbors(self, target: Coordinate) -> int:
        """Count live coordinates among the 8 neighbors of ``target``.

        No bounds are applied: negative and out-of-size positions are counted
        like any other.
        """
        _require_coordinate(target)
        return sum(1 for neighbor in adjacent_coordinates(target) if neighbor in self._alive)

    def empty_neighbors(self, target: Coordinate, size: Size | None = None) -> set[Coordinate]:
        """Return in-bounds, currently empty coordinates adjacent to ``target``."""
        _require_coordinate(target)
        bound = size if size is not None else self._generation.size
        return {
            neighbor
            for neighbor in adjacent_coordinates(target)
            if _in_bounds(neighbor, bound) and neighbor not in self._alive
        }

    def enumerate_reproduction_candidates(self, size: Size | None = None) -> frozenset[Coordinate]:
        """Return every empty in-bounds coordinate adjacent to a live cell.

        Deduplicated by structural equality: a coordinate bordering several
        live cells appears once.
        """
        bound = size if size is not None else self._generation.size
        candidates: set[Coordinate] = set()
        for live in self._alive:
            candidates |= self.empty_neighbors(live, bound)
        return frozenset(candidates)


def _require_coordinate(target: object) -> None:
    if not isinstance(target, Coordinate):
        raise InvalidCoordinates(
            f"expected a Coordinate, got {type(target).__name__}"
        )


def count_live_neighbors(generation: Generation, target: Coordinate) -> int:
    """One-off neighbor count; builds a fresh snapshot of ``generation``."""
    return Neighborhood(generation).count_live_neighbors(target)


def enumerate_reproduction_candidates(
    generation: Generation, size: Size | None = None
) -> frozenset[Coordinate]:
    """One-off candidate enumeration; builds a fresh snapshot of ``generation``."""
    return Neighborhood(generation).enumerate_reproduction_candidates(size)
