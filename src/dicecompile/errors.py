"""Exceptions raised while compiling or evaluating dice expressions."""
from __future__ import annotations


class DiceError(ValueError):
    """Base class for every dice expression failure."""


class ExpressionTooLongError(DiceError):
    """The expression is longer than the configured maximum."""


class TooManyChunksError(DiceError):
    """The expression splits into more chunks than allowed."""


class InvalidChunkError(DiceError):
    """One or more chunks are not valid dice notation."""

    def __init__(self, message: str, chunks: list[str] | None = None):
        super().__init__(message)
        self.chunks = list(chunks or [])


class DieTooBigError(DiceError):
    """A die in the expression has too many faces."""


class TooManyDiceError(DiceError):
    """A dice pool is larger than the configured maximum."""


class RollLimitExceededError(DiceError):
    """A modifier tried to roll more dice than allowed.

    Unlike TooManyDiceError this is raised while rolling, since explosions are
    resolved on every evaluation rather than at compile time.
    """
