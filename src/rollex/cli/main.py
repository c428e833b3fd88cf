"""Typer CLI application."""
from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Optional

import typer

from rollex.config import Settings, load_config
from rollex.engine.nodes import Expression
from rollex.engine.parser import parse
from rollex.engine.simplifier import simplify as simplify_expression
from rollex.errors import ExpressionSyntaxError
from rollex.models.roll import RollResult
from rollex.utils import parse_assignments

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="rollex",
    help="Roll, simplify and format dice expressions like '2d20h + DEX - 1'",
    no_args_is_help=True,
)

_VAR_HELP = "Variable value as NAME=VALUE (repeatable)"
_CONFIG_HELP = "Path to a rollex.toml settings file"


def _setup(config: Optional[Path], verbose: bool) -> Settings:
    settings = load_config(config)
    level = logging.DEBUG if verbose else settings.logging.level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _context(settings: Settings, var: Optional[list[str]]) -> dict[str, float]:
    context: dict[str, float] = dict(settings.variables)
    try:
        context.update(parse_assignments(var))
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--var") from exc
    return context


def _parse_or_exit(expression: str, display) -> Expression:
    try:
        return parse(expression)
    except ExpressionSyntaxError as exc:
        logger.debug("Rejected %r: %s", expression, exc)
        display.show_syntax_error(exc)
        raise typer.Exit(code=1) from exc


@app.command()
def roll(
    expression: str = typer.Argument(..., help="Expression to evaluate"),
    var: Optional[list[str]] = typer.Option(None, "--var", "-V", help=_VAR_HELP),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Seed the dice for repeatable rolls"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print the total"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """Roll the dice and evaluate an expression."""
    from rollex.cli.display import Display

    settings = _setup(config, verbose)
    display = Display(show_rolls=settings.display.show_rolls and not quiet)
    expr = _parse_or_exit(expression, display)
    context = _context(settings, var)

    rng = random.Random(seed).random if seed is not None else None
    rolls: list[RollResult] = []
    total = expr.calc(context, rolls, rng)

    display.show_total(str(expr), total)
    display.show_rolls_table(rolls)


@app.command()
def simplify(
    expression: str = typer.Argument(..., help="Expression to simplify"),
    var: Optional[list[str]] = typer.Option(None, "--var", "-V", help=_VAR_HELP),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """Do the arithmetic that doesn't need dice or unknown variables."""
    from rollex.cli.display import Display

    settings = _setup(config, verbose)
    display = Display()
    expr = _parse_or_exit(expression, display)
    display.show_expression(str(simplify_expression(expr, _context(settings, var))))


@app.command("format")
def format_(
    expression: str = typer.Argument(..., help="Expression to format"),
) -> None:
    """Print the canonical form of an expression."""
    from rollex.cli.display import Display

    display = Display()
    display.show_expression(str(_parse_or_exit(expression, display)))


@app.command()
def check(
    expression: str = typer.Argument(..., help="Expression to check"),
) -> None:
    """Check that an expression parses."""
    from rollex.cli.display import Display

    display = Display()
    expr = _parse_or_exit(expression, display)
    display.console.print(f"[green]OK[/green] {expr}", highlight=False)


if __name__ == "__main__":
    app()
