"""Tests for conway_life.domain.board."""

from __future__ import annotations

import numpy as np
import pytest

from conway_life.config.types import Size
from conway_life.domain.board import Board, blank_grid, build_grid_array
from conway_life.domain.coordinate import Coordinate
from conway_life.domain.generation import Generation


def test_board_contains_a_generation() -> None:
    board = Board()
    assert isinstance(board.generation, Generation)
    assert board.generation.size == board.size


def test_default_board_is_ten_by_ten() -> None:
    assert Board().size == Size(10, 10)


def test_blank_board_is_all_zero() -> None:
    blank = Board().blank_board()
    assert blank.shape == (10, 10)
    assert not blank.any()


def test_empty_generation_renders_all_zero_grid() -> None:
    board = Board(size=Size(3, 4))
    grid = board.draw()
    assert grid.shape == (3, 4)
    assert np.array_equal(grid, np.zeros((3, 4), dtype=int))


def test_draw_marks_live_coordinates() -> None:
    size = Size(5, 5)
    coords = [Coordinate(0, 0), Coordinate(2, 0), Coordinate(4, 4)]
    board = Board(size=size, generation=Generation.from_coordinates(coords, size=size))
    grid = board.draw()
    assert grid[0, 0] == 1
    assert grid[2, 0] == 1
    assert grid[4, 4] == 1
    assert grid.sum() == 3


def test_draw_returns_a_fresh_buffer_each_time() -> None:
    size = Size(3, 3)
    board = Board(size=size, generation=Generation.from_coordinates([Coordinate(1, 1)], size=size))
    first = board.draw()
    board.tick()
    assert first.sum() == 1
    assert board.draw().sum() == 0


def test_out_of_bounds_coordinates_are_skipped() -> None:
    grid = build_grid_array([Coordinate(3, 0), Coordinate(-1, 1), Coordinate(1, 1)], Size(3, 3))
    assert grid.sum() == 1
    assert grid[1, 1] == 1


def test_tick_results_in_a_new_generation() -> None:
    board = Board()
    generation = board.generation
    returned = board.tick()
    assert board.generation is returned
    assert board.generation is not generation
    assert board.generation.number == 2


def test_render_text() -> None:
    size = Size(2, 3)
    board = Board(size=size, generation=Generation.from_coordinates([Coordinate(0, 2)], size=size))
    assert board.render_text() == "..#\n..."
    assert board.render_text(live="1", dead="0") == "001\n000"


def test_board_adopts_the_generation_size() -> None:
    size = Size(10, 10)
    blinker = [Coordinate(5, 6), Coordinate(5, 7), Coordinate(5, 8)]
    board = Board(generation=Generation.from_coordinates(blinker, size=size))
    assert board.size == size
    board.tick()
    assert board.draw().sum() == 3
    assert board.generation.live_coordinates() == frozenset(
        [Coordinate(4, 7), Coordinate(5, 7), Coordinate(6, 7)]
    )


def test_board_without_size_uses_default_generation_size() -> None:
    generation = Generation.from_coordinates([Coordinate(1, 1)])
    assert Board(generation=generation).size == generation.size == Size(5, 5)


def test_board_rejects_conflicting_sizes() -> None:
    generation = Generation.from_coordinates([Coordinate(1, 1)], size=Size(5, 5))
    with pytest.raises(ValueError):
        Board(size=Size(10, 10), generation=generation)


def test_draw_starts_from_the_blank_board() -> None:
    board = Board(size=Size(2, 3))
    assert np.array_equal(board.draw(), board.blank_board())
    assert np.array_equal(blank_grid(Size(2, 3)), np.zeros((2, 3), dtype=int))
