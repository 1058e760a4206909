"""Randomness used to roll individual dice; kept apart so tests can swap it."""
from __future__ import annotations

import random
from typing import Protocol


class RandomSource(Protocol):
    def roll_die(self, faces: int) -> int:
        """Roll one die with ``faces`` sides, returning a value in [1, faces]."""
        ...


class SystemRandomSource:
    """Uniform die rolls backed by a ``random.Random`` instance."""

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng

    def roll_die(self, faces: int) -> int:
        if self._rng is None:
            return random.randint(1, faces)
        return self._rng.randint(1, faces)


_default_source: RandomSource = SystemRandomSource()


def default_source() -> RandomSource:
    return _default_source


def set_default_source(source: RandomSource) -> RandomSource:
    """Replace the shared source, returning the previous one."""
    global _default_source
    previous = _default_source
    _default_source = source
    return previous
