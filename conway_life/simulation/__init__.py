"""Simulation layer: the driver loop that seeds and ticks a board."""

from conway_life.simulation.driver import Driver

__all__ = ["Driver"]
