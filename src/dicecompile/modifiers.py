"""Pool modifiers — pure transformations of a list of die results.

Every modifier is built as ``modifier(arg, reroll)`` and returns a function
taking the rolled pool and returning a replacement pool. ``reroll`` rolls one
more die of the same kind as the pool.
"""
from __future__ import annotations

import logging
from typing import Callable

from dicecompile.config import MAX_DICE
from dicecompile.errors import RollLimitExceededError

logger = logging.getLogger(__name__)

Reroll = Callable[[], int]
ModifierFunc = Callable[[list[int]], list[int]]

REROLL = "r"
TWICE = "t"
EXPLODE = "!"
KEEP_HIGHEST = "kh"
KEEP_LOWEST = "kl"
DROP_HIGHEST = "dh"
DROP_LOWEST = "dl"


def reroll(arg: int, reroll: Reroll) -> ModifierFunc:
    """Discard dice showing ``arg`` and roll each of them again, once only."""
    def apply(rolls: list[int]) -> list[int]:
        return [reroll() if r == arg else r for r in rolls]
    return apply


def twice(arg: int, reroll: Reroll) -> ModifierFunc:
    """Count dice showing ``arg`` twice."""
    def apply(rolls: list[int]) -> list[int]:
        result: list[int] = []
        for r in rolls:
            result.append(r)
            if r == arg:
                result.append(r)
        return result
    return apply


def keep_highest(arg: int, reroll: Reroll) -> ModifierFunc:
    def apply(rolls: list[int]) -> list[int]:
        return sorted(rolls, reverse=True)[:max(arg, 0)]
    return apply


def keep_lowest(arg: int, reroll: Reroll) -> ModifierFunc:
    def apply(rolls: list[int]) -> list[int]:
        return sorted(rolls)[:max(arg, 0)]
    return apply


def drop_highest(arg: int, reroll: Reroll) -> ModifierFunc:
    def apply(rolls: list[int]) -> list[int]:
        return sorted(rolls, reverse=True)[max(arg, 0):]
    return apply


def drop_lowest(arg: int, reroll: Reroll) -> ModifierFunc:
    def apply(rolls: list[int]) -> list[int]:
        return sorted(rolls)[max(arg, 0):]
    return apply


def explode(arg: int, reroll: Reroll, max_dice: int = MAX_DICE) -> ModifierFunc:
    """Dice showing ``arg`` are kept and another die is rolled beside them.

    New dice are inserted straight after the die that triggered them and may
    explode in turn. The pool may never grow past ``max_dice``.

    Raises:
        RollLimitExceededError: If unresolved explosions would exceed ``max_dice``.
    """
    def apply(rolls: list[int]) -> list[int]:
        # (value, pending) pairs; only freshly rolled dice can explode again.
        pool = [(r, True) for r in rolls]
        while True:
            pending = sum(1 for value, live in pool if live and value == arg)
            if pending == 0:
                break
            if len(pool) + pending > max_dice:
                logger.warning(
                    "Explosion on %s stopped at %d dice (limit %d)", arg, len(pool), max_dice,
                )
                raise RollLimitExceededError(
                    f"Explosion exceeded roll limit: {len(pool) + pending} > {max_dice}"
                )
            next_pool: list[tuple[int, bool]] = []
            for value, live in pool:
                next_pool.append((value, False))
                if live and value == arg:
                    next_pool.append((reroll(), True))
            pool = next_pool
        return [value for value, _ in pool]
    return apply


MODIFIERS: dict[str, Callable[..., ModifierFunc]] = {
    REROLL: reroll,
    TWICE: twice,
    EXPLODE: explode,
    KEEP_HIGHEST: keep_highest,
    KEEP_LOWEST: keep_lowest,
    DROP_HIGHEST: drop_highest,
    DROP_LOWEST: drop_lowest,
}


def default_argument(token: str, count: int, lowest: int, highest: int) -> int:
    """Argument used when a modifier is written without one.

    Reroll targets the lowest face, twice and explode the highest. Keeps and
    drops count dice rather than faces: keep or drop all but one.
    """
    if token == REROLL:
        return lowest
    if token in (TWICE, EXPLODE):
        return highest
    return min(1, count - 1)


def _identity(rolls: list[int]) -> list[int]:
    return rolls


def create_modifier(
    token: str | None, arg: int, reroll: Reroll, max_dice: int = MAX_DICE,
) -> ModifierFunc:
    """Build the modifier function for ``token``; identity when there is none."""
    if token is None:
        return _identity
    factory = MODIFIERS[token]
    if factory is explode:
        return explode(arg, reroll, max_dice=max_dice)
    return factory(arg, reroll)
