"""Compiles dice expressions like ``3d6+1-2d4`` into reusable evaluators."""
from __future__ import annotations

import logging
from typing import Union

from dicecompile import grammar
from dicecompile.config import DEFAULT_LIMITS, Limits
from dicecompile.errors import (
    DieTooBigError,
    ExpressionTooLongError,
    InvalidChunkError,
    TooManyChunksError,
    TooManyDiceError,
)
from dicecompile.modifiers import default_argument
from dicecompile.random_source import RandomSource, default_source
from dicecompile.terms import Constant, DicePool, Term, evaluate_term

logger = logging.getLogger(__name__)

NestedResult = list[Union[int, list[int]]]

# Named dice: (faces, offset).
_SPECIAL_DICE = {
    "f": (3, -2),
    "%": (100, 0),
}


class Evaluator:
    """A compiled expression. Every call rolls all of its dice again."""

    def __init__(self, expression: str, chunks: list[str], terms: list[Term]):
        self.expression = expression
        self.chunks = list(chunks)
        self.terms = tuple(terms)

    def roll(self, source: RandomSource | None = None) -> NestedResult:
        source = source or default_source()
        return [evaluate_term(term, source) for term in self.terms]

    def __call__(self, reduce: bool = True, *, source: RandomSource | None = None) -> int | NestedResult:
        parts = self.roll(source)
        if not reduce:
            return parts
        return sum(flatten(parts))

    def __repr__(self) -> str:
        return f"Evaluator({self.expression!r})"


def flatten(parts: NestedResult) -> list[int]:
    flat: list[int] = []
    for part in parts:
        if isinstance(part, list):
            flat.extend(part)
        else:
            flat.append(part)
    return flat


class DiceCompiler:
    """Compiles expressions under a set of limits, caching what it builds.

    Both caches live as long as the compiler and are never evicted. Compiling
    is deterministic, so two callers racing to fill an entry is harmless.
    """

    def __init__(self, limits: Limits = DEFAULT_LIMITS):
        self.limits = limits
        self._expressions: dict[str, Evaluator] = {}
        self._chunks: dict[str, Term] = {}

    def compile(self, expression: str) -> Evaluator:
        """Compile ``expression`` into an Evaluator.

        Raises:
            ExpressionTooLongError: The tidied expression exceeds max_length.
            TooManyChunksError: It splits into more than max_chunks chunks.
            InvalidChunkError: Any chunk is not valid notation.
            TooManyDiceError: A pool has more than max_dice dice.
            DieTooBigError: A die has more than max_faces faces.
        """
        normalized = grammar.normalize(expression)
        cached = self._expressions.get(normalized)
        if cached is not None:
            return cached

        if len(normalized) > self.limits.max_length:
            logger.debug("Rejected expression of length %d", len(normalized))
            raise ExpressionTooLongError(
                f"Expression is too long: {len(normalized)} > {self.limits.max_length}"
            )

        chunks = grammar.split_chunks(normalized)
        if len(chunks) > self.limits.max_chunks:
            raise TooManyChunksError(
                f"Expression contains too many chunks: {len(chunks)} > {self.limits.max_chunks}"
            )

        bad = grammar.invalid_chunks(chunks)
        if bad:
            logger.debug("Invalid chunks in %r: %s", expression, bad)
            raise InvalidChunkError(
                f"{expression!r} contains invalid or unsupported parts: {', '.join(bad)}",
                chunks=bad,
            )

        terms = [self.compile_chunk(c) for c in chunks]
        evaluator = Evaluator(normalized, chunks, terms)
        self._expressions[normalized] = evaluator
        logger.debug("Compiled %r into %d chunk(s)", normalized, len(terms))
        return evaluator

    def compile_chunk(self, chunk: str) -> Term:
        """Compile one valid chunk into a Constant or DicePool."""
        cached = self._chunks.get(chunk)
        if cached is not None:
            return cached

        if grammar.is_constant_chunk(chunk):
            term: Term = Constant(int(chunk))
        else:
            term = self._compile_pool(chunk)
        self._chunks[chunk] = term
        return term

    def _compile_pool(self, chunk: str) -> DicePool:
        desc = grammar.parse_dice_chunk(chunk)
        if desc.count > self.limits.max_dice:
            raise TooManyDiceError(f"Dice pool is too large: {desc.count} > {self.limits.max_dice}")

        faces, offset = _SPECIAL_DICE.get(desc.faces, (None, 0))
        if faces is None:
            faces = int(desc.faces)
        if faces > self.limits.max_faces:
            raise DieTooBigError(f"Die has too many faces: {faces} > {self.limits.max_faces}")
        if faces < 1:
            raise InvalidChunkError(f"Die must have at least one face: {chunk!r}", chunks=[chunk])

        argument = 0
        if desc.modifier is not None:
            if desc.argument is None:
                argument = default_argument(desc.modifier, desc.count, 1 + offset, faces + offset)
            else:
                argument = int(desc.argument)

        return DicePool(
            count=desc.count,
            faces=faces,
            offset=offset,
            negative=desc.negative,
            modifier=desc.modifier,
            argument=argument,
            max_dice=self.limits.max_dice,
        )

    def clear(self) -> None:
        self._expressions.clear()
        self._chunks.clear()


_default_compiler = DiceCompiler()


def default_compiler() -> DiceCompiler:
    return _default_compiler


def compile_expression(expression: str) -> Evaluator:
    """Compile with the process-wide compiler and its shared caches."""
    return _default_compiler.compile(expression)


parse = compile_expression
