"""
Command-line interface for keycalc.

Provides commands for:
- Evaluating a single expression
- Inspecting the infix and postfix token sequences
- Running an interactive keypad session
"""

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from keycalc import __version__
from keycalc.config import NonFinitePolicy, settings
from keycalc.errors import CalculatorError
from keycalc.evaluator import to_postfix
from keycalc.logging_config import configure_logging
from keycalc.models import EvaluationReport
from keycalc.session import KeypadSession
from keycalc.tokenizer import validate
from keycalc.tokens import CloseParen, Number, OpenParen, Token, render

app = typer.Typer(
    name="keycalc",
    help="keycalc - keypad arithmetic validator and evaluator",
    add_completion=False,
)

console = Console()

ASCII_ALIASES = {"*": "×", "/": "÷"}

QUIT_COMMANDS = {"q", "quit", "exit"}


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override the log level"),
):
    """Configure logging before any command runs."""
    configure_logging(level=log_level)


# =============================================================================
# Evaluation Commands
# =============================================================================

@app.command("eval", context_settings={"ignore_unknown_options": True})
def eval_(
    expression: str = typer.Argument(..., help="Expression, e.g. '(1+2)×3'; may start with -"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON report"),
    non_finite: Optional[NonFinitePolicy] = typer.Option(
        None, "--non-finite", help="Reject or pass through NaN/Infinity results"
    ),
):
    """Evaluate an expression."""
    report = EvaluationReport.from_expression(normalize_input(expression), non_finite)

    if as_json:
        typer.echo(report.model_dump_json())
    elif report.ok:
        console.print(report.display)
    else:
        console.print(f"[red]{escape(report.error)}[/]")

    if not report.ok:
        raise typer.Exit(1)


@app.command(context_settings={"ignore_unknown_options": True})
def tokens(
    expression: str = typer.Argument(..., help="Expression to tokenize"),
):
    """Show the infix tokens and postfix order of an expression."""
    try:
        infix = validate(normalize_input(expression))
        postfix = to_postfix(infix)
    except CalculatorError as e:
        console.print(f"[red]{escape(e.message)}[/]")
        raise typer.Exit(1)

    table = Table(title="Tokens")
    table.add_column("#", style="dim")
    table.add_column("Kind", style="magenta")
    table.add_column("Text", style="cyan")

    for index, token in enumerate(infix):
        table.add_row(str(index), _token_kind(token), escape(str(token)))

    console.print(table)
    console.print(f"Postfix: [green]{escape(render(postfix, ' '))}[/]")


# =============================================================================
# Interactive Commands
# =============================================================================

@app.command()
def repl(
    non_finite: Optional[NonFinitePolicy] = typer.Option(
        None, "--non-finite", help="Reject or pass through NaN/Infinity results"
    ),
):
    """Run an interactive keypad session (C clears, c deletes, = commits)."""
    session = KeypadSession(non_finite_policy=non_finite)
    console.print(f"[bold green]keycalc {__version__}[/] - type keys, 'q' to quit")

    while True:
        try:
            line = console.input("[bold]> [/]")
        except EOFError:
            break

        if line.strip() in QUIT_COMMANDS:
            break

        session.enter(normalize_input(line))

        console.print(f"  {escape(session.formula) or '[dim]empty[/]'}")
        if session.answer:
            style = "green" if session.result is not None else "red"
            console.print(f"  [{style}]{escape(session.answer)}[/]")


# =============================================================================
# Helpers
# =============================================================================

def normalize_input(text: str) -> str:
    """Drop whitespace and map ASCII operator aliases when enabled."""
    text = "".join(text.split())
    if settings.ascii_operators:
        text = "".join(ASCII_ALIASES.get(char, char) for char in text)
    return text


def _token_kind(token: Token) -> str:
    """Get a display name for a token's kind."""
    if isinstance(token, Number):
        return "number"
    elif isinstance(token, (OpenParen, CloseParen)):
        return "paren"
    else:
        return "operator"


if __name__ == "__main__":
    app()
