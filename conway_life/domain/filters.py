"""Early-stop detectors for the driver loop."""

from __future__ import annotations

from conway_life.domain.coordinate import Coordinate
from conway_life.domain.generation import Generation


class ExtinctionDetector:
    """Detect a generation with no live cells."""

    def observe(self, generation: Generation) -> bool:
        return len(generation) == 0


class HaltDetector:
    """Detect an unchanged live set across consecutive generations."""

    def __init__(self, window: int) -> None:
        if window < 1:
            raise ValueError("window must be >= 1")
        self.window = window
        self._last: frozenset[Coordinate] | None = None
        self._unchanged = 0

    def observe(self, generation: Generation) -> bool:
        alive = generation.live_coordinates()
        if self._last is not None and alive == self._last:
            self._unchanged += 1
        else:
            self._unchanged = 0
        self._last = alive
        return self._unchanged >= self.window
