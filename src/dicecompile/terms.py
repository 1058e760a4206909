"""Compiled chunks and the single function that rolls them."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from dicecompile.config import MAX_DICE
from dicecompile.modifiers import create_modifier
from dicecompile.random_source import RandomSource


@dataclass(frozen=True)
class Constant:
    value: int


@dataclass(frozen=True)
class DicePool:
    """A pool like ``-4d6kh3`` with its modifier argument already resolved.

    ``offset`` shifts every die: a dF is a d3 with offset -2.
    """

    count: int
    faces: int
    offset: int = 0
    negative: bool = False
    modifier: str | None = None
    argument: int = 0
    max_dice: int = MAX_DICE

    @property
    def lowest(self) -> int:
        return 1 + self.offset

    @property
    def highest(self) -> int:
        return self.faces + self.offset


Term = Union[Constant, DicePool]


def roll_pool(pool: DicePool, source: RandomSource) -> list[int]:
    def roll_one() -> int:
        return source.roll_die(pool.faces) + pool.offset

    rolls = [roll_one() for _ in range(pool.count)]
    apply_modifier = create_modifier(pool.modifier, pool.argument, roll_one, pool.max_dice)
    rolls = apply_modifier(rolls)
    if pool.negative:
        rolls = [-r for r in rolls]
    return rolls


def evaluate_term(term: Term, source: RandomSource) -> int | list[int]:
    """Roll one compiled chunk: constants give an int, pools a list of ints."""
    if isinstance(term, Constant):
        return term.value
    return roll_pool(term, source)
