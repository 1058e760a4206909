"""Shared fixtures for the dicecompile test suite."""
from __future__ import annotations

import random

import pytest

from dicecompile.compiler import default_compiler


class ScriptedSource:
    """Plays back fixed rolls per die size and records every call."""

    def __init__(self, rolls: dict[int, list[int]] | None = None):
        self.rolls = {faces: list(values) for faces, values in (rolls or {}).items()}
        self.calls: list[int] = []

    def roll_die(self, faces: int) -> int:
        self.calls.append(faces)
        return self.rolls[faces].pop(0)


class FixedSource:
    """Always rolls the same face."""

    def __init__(self, value: int):
        self.value = value
        self.calls = 0

    def roll_die(self, faces: int) -> int:
        self.calls += 1
        return self.value


@pytest.fixture
def scripted():
    return ScriptedSource


@pytest.fixture
def fixed():
    return FixedSource


@pytest.fixture(autouse=True)
def fresh_cache():
    default_compiler().clear()
    yield
    default_compiler().clear()


@pytest.fixture
def seeded_rng():
    state = random.getstate()
    random.seed(42)
    yield
    random.setstate(state)
