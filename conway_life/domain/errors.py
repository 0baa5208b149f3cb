"""Input-contract errors raised by the domain layer.

Every error here signals a caller bug. None of them are retried.
"""

from __future__ import annotations


class LifeError(Exception):
    """Base class for all domain errors."""


class InvalidGeneration(LifeError, TypeError):
    """A neighborhood computation was requested without a backing generation."""


class InvalidCoordinates(LifeError, TypeError):
    """An operation needing a focal coordinate (or cell) received something else."""


class InvalidNeighborCount(LifeError, ValueError):
    """A negative live-neighbor count reached the survival rule."""


class DuplicateCoordinates(LifeError, ValueError):
    """A generation already holds a live cell at the given coordinate."""


class GenerationSealed(LifeError, RuntimeError):
    """A generation was modified after it was advanced or sealed."""
