"""Tests for conway_life.domain.neighborhood."""

from __future__ import annotations

import pytest

from conway_life.config.types import Size
from conway_life.domain.coordinate import Coordinate
from conway_life.domain.errors import InvalidCoordinates, InvalidGeneration
from conway_life.domain.generation import Generation
from conway_life.domain.neighborhood import (
    Neighborhood,
    adjacent_coordinates,
    count_live_neighbors,
    enumerate_reproduction_candidates,
)


def _generation(*pairs: tuple[int, int], size: Size | None = None) -> Generation:
    return Generation.from_coordinates(
        (Coordinate(latitude=lat, longitude=long) for lat, long in pairs), size=size
    )


class TestConstruction:
    def test_requires_generation(self) -> None:
        with pytest.raises(InvalidGeneration):
            Neighborhood(None)  # type: ignore[arg-type]

    def test_rejects_plain_coordinate_list(self) -> None:
        with pytest.raises(InvalidGeneration):
            Neighborhood([Coordinate()])  # type: ignore[arg-type]

    def test_snapshot_is_not_affected_by_later_generations(self) -> None:
        generation = _generation((0, 0), (0, 1))
        neighborhood = Neighborhood(generation)
        generation.advance()
        assert neighborhood.is_alive(Coordinate(0, 0))
        assert neighborhood.count_live_neighbors(Coordinate(1, 0)) == 2


class TestCountLiveNeighbors:
    def test_requires_coordinates(self) -> None:
        neighborhood = Neighborhood(Generation())
        with pytest.raises(InvalidCoordinates):
            neighborhood.count_live_neighbors(None)  # type: ignore[arg-type]

    def test_defaults_to_zero(self) -> None:
        generation = _generation((1, 0))
        assert count_live_neighbors(generation, Coordinate(latitude=1, longitude=0)) == 0

    def test_counts_existing_neighboring_coordinates(self) -> None:
        generation = _generation((0, 0), (2, 0), (5, 5), (1, 0))
        assert count_live_neighbors(generation, Coordinate(latitude=1, longitude=0)) == 2

    def test_counts_all_eight_neighbors(self) -> None:
        generation = _generation(*[(1 + dl, 1 + dg) for dl in (-1, 0, 1) for dg in (-1, 0, 1)])
        assert count_live_neighbors(generation, Coordinate(1, 1)) == 8

    def test_counts_negative_positions_without_bounds_check(self) -> None:
        generation = _generation((-1, -1), (-1, 0), (0, -1))
        assert count_live_neighbors(generation, Coordinate(0, 0)) == 3

    def test_ignores_the_target_itself(self) -> None:
        generation = _generation((3, 3))
        assert count_live_neighbors(generation, Coordinate(3, 3)) == 0

    @pytest.mark.parametrize("d_lat,d_long", [(0, 0), (7, -3), (-20, 11), (100, 100)])
    def test_is_symmetric_under_translation(self, d_lat: int, d_long: int) -> None:
        pairs = [(0, 0), (0, 1), (1, 2), (2, 2), (4, 4)]
        targets = [Coordinate(1, 1), Coordinate(0, 2), Coordinate(3, 3), Coordinate(9, 9)]
        original = Neighborhood(_generation(*pairs))
        moved = Neighborhood(_generation(*[(lat + d_lat, long + d_long) for lat, long in pairs]))
        for target in targets:
            assert original.count_live_neighbors(target) == moved.count_live_neighbors(
                target.translate(d_lat, d_long)
            )


class TestReproductionCandidates:
    def test_empty_neighbors_around_isolated_coordinate(self) -> None:
        neighborhood = Neighborhood(Generation())
        empty = neighborhood.empty_neighbors(Coordinate(latitude=1, longitude=1))
        assert Coordinate(1, 1) not in empty
        assert Coordinate(0, 1) in empty
        assert len(empty) == 8

    def test_empty_neighbors_requires_coordinates(self) -> None:
        with pytest.raises(InvalidCoordinates):
            Neighborhood(Generation()).empty_neighbors("1,1")  # type: ignore[arg-type]

    def test_corner_cell_is_clipped_to_bounds(self) -> None:
        candidates = enumerate_reproduction_candidates(_generation((0, 0)), Size(5, 5))
        assert candidates == {Coordinate(0, 1), Coordinate(1, 0), Coordinate(1, 1)}

    def test_upper_bounds_are_inclusive(self) -> None:
        candidates = enumerate_reproduction_candidates(_generation((4, 4)), Size(5, 5))
        assert Coordinate(5, 5) in candidates
        assert Coordinate(5, 3) in candidates
        assert len(candidates) == 8

        edge = enumerate_reproduction_candidates(_generation((5, 5)), Size(5, 5))
        assert edge == {Coordinate(4, 4), Coordinate(4, 5), Coordinate(5, 4)}

    def test_excludes_live_coordinates(self) -> None:
        generation = _generation((1, 1), (1, 2))
        candidates = enumerate_reproduction_candidates(generation)
        assert Coordinate(1, 1) not in candidates
        assert Coordinate(1, 2) not in candidates

    def test_shared_neighbors_appear_once(self) -> None:
        generation = _generation((1, 1), (1, 3))
        candidates = enumerate_reproduction_candidates(generation, Size(10, 10))
        # 8 + 8 neighbors, minus 3 shared in column 2.
        assert len(candidates) == 13
        assert Coordinate(1, 2) in candidates

    def test_candidates_stay_in_bounds_unique_and_empty(self) -> None:
        size = Size(4, 6)
        generation = _generation((0, 0), (0, 1), (2, 3), (3, 3), (4, 6), (1, 5))
        candidates = Neighborhood(generation).enumerate_reproduction_candidates(size)
        alive = generation.live_coordinates()
        assert len(candidates) == len(set(candidates))
        for coordinate in candidates:
            assert 0 <= coordinate.latitude <= size.latitude
            assert 0 <= coordinate.longitude <= size.longitude
            assert coordinate not in alive
            assert any(coordinate in set(adjacent_coordinates(live)) for live in alive)

    def test_defaults_to_generation_size(self) -> None:
        generation = _generation((2, 2), size=Size(2, 2))
        candidates = enumerate_reproduction_candidates(generation)
        assert candidates == {Coordinate(1, 1), Coordinate(1, 2), Coordinate(2, 1)}

    def test_empty_generation_has_no_candidates(self) -> None:
        assert enumerate_reproduction_candidates(Generation()) == frozenset()
