"""Rich terminal output for the command line."""
from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from rollex.engine.printer import format_number
from rollex.errors import ExpressionSyntaxError
from rollex.models.roll import RollResult

console = Console()


class Display:
    def __init__(self, show_rolls: bool = True):
        self.console = console
        self.show_rolls = show_rolls

    def show_total(self, expression: str, total: int | float) -> None:
        text = Text()
        text.append(f"{expression} = ", style="dim")
        text.append(format_number(total), style="bold green")
        self.console.print(text)

    def show_rolls_table(self, rolls: list[RollResult]) -> None:
        if not self.show_rolls or not rolls:
            return
        table = Table(box=box.SIMPLE, show_header=True, header_style="bold cyan")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Die")
        table.add_column("Rolls")
        table.add_column("Value", justify="right", style="bold")
        for i, r in enumerate(rolls, 1):
            table.add_row(str(i), f"d{r.die}", ", ".join(str(v) for v in r.rolls), str(r.value))
        self.console.print(table)

    def show_expression(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False)

    def show_syntax_error(self, error: ExpressionSyntaxError) -> None:
        text = Text()
        text.append("Syntax error: ", style="bold red")
        text.append(error.message)
        if error.position is not None and error.text:
            text.append(f"\n  at offset {error.position}: ")
            text.append(error.text, style="yellow")
        self.console.print(text)
