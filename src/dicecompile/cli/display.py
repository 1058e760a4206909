"""Rich terminal output for the dice CLI."""
from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


def _format_part(part: int | list[int], first: bool = False) -> str:
    if isinstance(part, list):
        text = "[" + ", ".join(str(r) for r in part) + "]"
        return text if first else f"+{text}"
    return f"+{part}" if part >= 0 and not first else str(part)


class Display:
    def __init__(self, show_breakdown: bool = False):
        self.console = console
        self.show_breakdown = show_breakdown

    def show_roll(self, expression: str, total: int, parts: list[int | list[int]] | None = None) -> None:
        if self.show_breakdown and parts is not None:
            breakdown = " ".join(_format_part(p, first=(i == 0)) for i, p in enumerate(parts))
            self.console.print(f"  [dim]Roll {expression}: {breakdown} =[/dim] [bold]{total}[/bold]")
        else:
            self.console.print(f"  [dim]Roll {expression}:[/dim] [bold]{total}[/bold]")

    def show_chunks(self, expression: str, chunks: list[str], kinds: list[str]) -> None:
        table = Table(title=f"{expression}", box=box.ROUNDED, border_style="cyan")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Chunk", style="bold")
        table.add_column("Kind")
        for i, (chunk, kind) in enumerate(zip(chunks, kinds), start=1):
            table.add_row(str(i), chunk, kind)
        self.console.print(table)

    def show_error(self, message: str) -> None:
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)
