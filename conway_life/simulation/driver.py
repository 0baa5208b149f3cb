"""Seed-and-tick driver loop around a :class:`Board`."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator
from random import Random

from conway_life.config.types import DriverConfig
from conway_life.domain.board import Board
from conway_life.domain.coordinate import Coordinate
from conway_life.domain.filters import ExtinctionDetector, HaltDetector
from conway_life.domain.generation import Generation

logger = logging.getLogger(__name__)


class Driver:
    """Owns one board, seeds it randomly and advances it at a fixed cadence."""

    def __init__(
        self,
        config: DriverConfig | None = None,
        rng: Random | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config or DriverConfig()
        self.rng = rng if rng is not None else Random(self.config.seed)
        self._sleep = sleep
        self._board: Board | None = None

    @property
    def board(self) -> Board:
        if self._board is None:
            self._board = self._build_board()
        return self._board

    def reset(self) -> Board:
        """Discard the current board and seed a new one."""
        self._board = self._build_board()
        return self._board

    def seed_coordinates(self) -> list[Coordinate]:
        """Draw a random, duplicate-free set of in-bounds starting coordinates.

        The number of draws is itself random in ``[0, max_seed_cells)``, so
        collisions can leave fewer live cells than draws.
        """
        size = self.config.size
        draws = self.rng.randrange(self.config.max_seed_cells) if self.config.max_seed_cells else 0
        seen: dict[Coordinate, None] = {}
        for _ in range(draws):
            coordinate = Coordinate(
                latitude=self.rng.randrange(size.latitude),
                longitude=self.rng.randrange(size.longitude),
            )
            seen.setdefault(coordinate, None)
        return list(seen)

    def _build_board(self) -> Board:
        size = self.config.size
        coordinates = self.seed_coordinates()
        logger.info(
            "Seeded %dx%d board with %d live cells", size.latitude, size.longitude, len(coordinates)
        )
        return Board(size=size, generation=Generation.from_coordinates(coordinates, size=size))

    def run(self) -> Iterator[Generation]:
        """Yield the current generation, then each of up to ``config.ticks`` successors."""
        board = self.board
        halt_detector = HaltDetector(window=self.config.halt_window)
        extinction_detector = ExtinctionDetector()
        halt_detector.observe(board.generation)
        yield board.generation

        if self.config.stop_when_static and extinction_detector.observe(board.generation):
            logger.info("Stopping at generation %d: extinct", board.generation.number)
            return

        for _ in range(self.config.ticks):
            if self.config.interval > 0:
                self._sleep(self.config.interval)
            generation = board.tick()
            logger.info("Generation %d: %d live cells", generation.number, len(generation))
            yield generation

            if self.config.stop_when_static:
                halted = halt_detector.observe(generation)
                if extinction_detector.observe(generation):
                    logger.info("Stopping at generation %d: extinct", generation.number)
                    return
                if halted:
                    logger.info("Stopping at generation %d: static", generation.number)
                    return
