"""One-shot rolling helpers on top of the compiler — pure math, no I/O."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from dicecompile.compiler import compile_expression, flatten
from dicecompile.random_source import RandomSource


@dataclass
class DiceResult:
    expression: str
    parts: list[Union[int, list[int]]] = field(default_factory=list)
    total: int = 0

    @property
    def individual_rolls(self) -> list[int]:
        """Every die kept in the result, constants excluded."""
        return [r for part in self.parts if isinstance(part, list) for r in part]


def roll(expression: str, source: RandomSource | None = None) -> DiceResult:
    """Roll an expression like '2d6+3', '4d6kh3' or '4dF', keeping the breakdown."""
    evaluator = compile_expression(expression)
    parts = evaluator(reduce=False, source=source)
    return DiceResult(expression=expression, parts=parts, total=sum(flatten(parts)))
