"""CLI for the tally calculator.

Usage:
    python -m tally eval "2+3*4"            # Evaluate left to right → 20
    python -m tally tokens "10*-2"          # Show the token stream
    python -m tally press "12+3=" -v        # Drive the calculator key by key
    python -m tally repl                    # Interactive calculator
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from tally.config import Settings
from tally.controller import Calculator, format_number
from tally.errors import DivisionByZeroError, FormatError
from tally.evaluator import evaluate
from tally.models import NumberToken
from tally.tokenizer import strip_whitespace, tokenize

app = typer.Typer(
    name="tally",
    help="Left-to-right running-total calculator",
    no_args_is_help=True,
)
console = Console(stderr=True)

_QUIT_WORDS = ("q", "quit", "exit")

# Expressions and key sequences may start with "-" ("-5+3")
_EXPRESSION_ARGS = {"ignore_unknown_options": True}


def _load_settings() -> Settings:
    try:
        return Settings.from_env()
    except ValueError as e:
        console.print(f"[red]Invalid configuration:[/red] {e}")
        raise typer.Exit(1)


@app.command("eval", context_settings=_EXPRESSION_ARGS)
def cmd_eval(
    expression: str = typer.Argument(help="Expression, e.g. '12.5/2' or '10*-2'"),
) -> None:
    """Evaluate an expression strictly left to right."""
    try:
        result = evaluate(expression)
    except DivisionByZeroError as e:
        console.print(f"[red]Division by zero:[/red] {e}")
        raise typer.Exit(2)
    except FormatError as e:
        console.print(f"[red]Invalid expression:[/red] {e}")
        raise typer.Exit(1)
    typer.echo(format_number(result))


@app.command("tokens", context_settings=_EXPRESSION_ARGS)
def cmd_tokens(
    expression: str = typer.Argument(help="Expression to tokenize"),
) -> None:
    """Show how an expression is split into numbers and operators."""
    try:
        tokens = tokenize(strip_whitespace(expression))
    except FormatError as e:
        console.print(f"[red]Invalid expression:[/red] {e}")
        raise typer.Exit(1)

    if not tokens:
        console.print("[yellow]No tokens.[/yellow]")
        return

    table = Table(title="Tokens", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind", min_width=8)
    table.add_column("Text", style="green")
    table.add_column("Value", justify="right")

    for i, token in enumerate(tokens):
        if isinstance(token, NumberToken):
            try:
                value = format_number(token.value)
            except FormatError:
                value = "[red]invalid[/red]"
            table.add_row(str(i), "number", token.text, value)
        else:
            table.add_row(str(i), "[cyan]operator[/cyan]", token.text, "--")

    console.print()
    console.print(table)
    console.print()


@app.command("press", context_settings=_EXPRESSION_ARGS)
def cmd_press(
    keys: str = typer.Argument(help="Key sequence, e.g. '12+3=' or '50%'"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show composed expressions"),
) -> None:
    """Press keys on the calculator and show the display after each one."""
    calc = Calculator(_load_settings())

    table = Table(title="Key presses", show_header=True, header_style="bold")
    table.add_column("Key", style="cyan", justify="center")
    table.add_column("Display", justify="right", min_width=12)
    if verbose:
        table.add_column("Evaluated", style="dim")

    for key in keys:
        if key.isspace():
            continue
        try:
            display = calc.press(key)
        except ValueError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(1)
        row = [key, display]
        if verbose:
            row.append(calc.last_expression or "--")
        table.add_row(*row)

    console.print()
    console.print(table)
    console.print()
    typer.echo(calc.display)


@app.command("repl")
def cmd_repl() -> None:
    """Interactive calculator: each line is a key sequence. 'q' to quit."""
    calc = Calculator(_load_settings())
    console.print("[bold]tally[/bold] keys: 0-9 . + - * / % = C  ([dim]q to quit[/dim])")
    console.print(f"  {calc.display}")

    while True:
        try:
            line = input("> ").strip()
        except EOFError:
            break
        if line.lower() in _QUIT_WORDS:
            break
        try:
            calc.press_all(line)
        except ValueError as e:
            console.print(f"  [red]{e}[/red]")
            continue
        if calc.last_expression:
            console.print(f"  [dim]{calc.last_expression}[/dim]")
        console.print(f"  [bold]{calc.display}[/bold]")


if __name__ == "__main__":
    app()
