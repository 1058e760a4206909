"""Compile dice notation such as ``4d6kh3+2`` into reusable roll evaluators."""
from __future__ import annotations

from dicecompile.compiler import DiceCompiler, Evaluator, compile_expression, parse
from dicecompile.config import MAX_CHUNKS, MAX_DICE, MAX_FACES, MAX_LENGTH, Limits, load_limits
from dicecompile.dice import DiceResult, roll
from dicecompile.errors import (
    DiceError,
    DieTooBigError,
    ExpressionTooLongError,
    InvalidChunkError,
    RollLimitExceededError,
    TooManyChunksError,
    TooManyDiceError,
)
from dicecompile.random_source import RandomSource, SystemRandomSource, set_default_source

__all__ = [
    "DiceCompiler",
    "DiceError",
    "DiceResult",
    "DieTooBigError",
    "Evaluator",
    "ExpressionTooLongError",
    "InvalidChunkError",
    "Limits",
    "MAX_CHUNKS",
    "MAX_DICE",
    "MAX_FACES",
    "MAX_LENGTH",
    "RandomSource",
    "RollLimitExceededError",
    "SystemRandomSource",
    "TooManyChunksError",
    "TooManyDiceError",
    "compile_expression",
    "load_limits",
    "parse",
    "roll",
    "set_default_source",
]
