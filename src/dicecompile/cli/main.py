"""Typer CLI application."""
from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from dicecompile.compiler import DiceCompiler, default_compiler, flatten
from dicecompile.config import DEFAULT_LIMITS, load_limits
from dicecompile.errors import DiceError
from dicecompile.random_source import SystemRandomSource
from dicecompile.terms import Constant

app = typer.Typer(
    name="dicecompile",
    help="Roll dice expressions such as 4d6kh3+2",
    no_args_is_help=True,
)


_project_compiler: DiceCompiler | None = None


def _compiler(config: Optional[Path]) -> DiceCompiler:
    """Compiler for an explicit --config file, else for the project config.toml."""
    global _project_compiler
    if config is not None:
        return DiceCompiler(load_limits(config))
    if _project_compiler is None:
        limits = load_limits()
        _project_compiler = default_compiler() if limits == DEFAULT_LIMITS else DiceCompiler(limits)
    return _project_compiler


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def roll(
    expression: str = typer.Argument(..., help="Dice expression, e.g. 3d6+2"),
    times: int = typer.Option(1, "--times", "-n", min=1, help="How many times to roll"),
    breakdown: bool = typer.Option(False, "--breakdown", "-b", help="Show every die"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for repeatable rolls"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="config.toml with a [dice] table"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Roll an expression and print the total."""
    from dicecompile.cli.display import Display

    _setup_logging(verbose)
    display = Display(show_breakdown=breakdown)
    source = SystemRandomSource(random.Random(seed)) if seed is not None else None
    try:
        evaluator = _compiler(config).compile(expression)
        for _ in range(times):
            parts = evaluator(reduce=False, source=source)
            display.show_roll(evaluator.expression, sum(flatten(parts)), parts)
    except (DiceError, ValidationError) as exc:
        display.show_error(str(exc))
        raise typer.Exit(code=1)


@app.command()
def check(
    expression: str = typer.Argument(..., help="Dice expression to validate"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="config.toml with a [dice] table"),
) -> None:
    """Validate an expression and list its chunks."""
    from dicecompile.cli.display import Display

    display = Display()
    try:
        evaluator = _compiler(config).compile(expression)
    except (DiceError, ValidationError) as exc:
        display.show_error(str(exc))
        raise typer.Exit(code=1)
    kinds = ["constant" if isinstance(t, Constant) else "dice" for t in evaluator.terms]
    display.show_chunks(evaluator.expression, evaluator.chunks, kinds)


if __name__ == "__main__":
    app()
