"""
calcrepr CLI - Entry point.

Evaluates one arithmetic expression, taken from the command line or read
from stdin, and prints its canonical rendering and value:

    $ calcrepr "2 + 3 * 4"
    REPR: <2+<3*4>>
    Result: 14
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from calcrepr._version import get_version
from calcrepr.core.config import CalcConfig, IntegerPolicy, load_config
from calcrepr.core.errors import CalcError
from calcrepr.core.expression_lang import evaluate, tokenize

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Evaluate an integer arithmetic expression and show its canonical form.",
    add_completion=False,
)

console = Console()


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"calcrepr {get_version()}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _read_expression() -> str:
    """Prompt for one line on stdin."""
    typer.echo("Input your expr: ")
    line = sys.stdin.readline()
    typer.echo("---")
    return line.strip()


def _print_tokens(source: str, policy: IntegerPolicy) -> None:
    table = Table(title="Tokens")
    table.add_column("Pos", justify="right", style="dim")
    table.add_column("Kind", style="cyan")
    table.add_column("Value")

    for token in tokenize(source, policy):
        table.add_row(str(token.pos), str(token.kind), str(token))

    console.print(table)


@app.command(context_settings={"ignore_unknown_options": True})
def calculate(
    expression: str | None = typer.Argument(
        None,
        help="Expression to evaluate (prompted on stdin when omitted)",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        exists=True,
        dir_okay=False,
        help="TOML file with an [integers] table",
    ),
    show_tokens: bool = typer.Option(
        False,
        "--tokens",
        help="Print the token stream before the result",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable debug logging on stderr",
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Evaluate EXPRESSION and print its canonical rendering and value.

    Examples:
        calcrepr "12 + 34 - (56 / 7) * 8"
        calcrepr "-1 * (-2 + 5)"
        echo "7 / 2" | calcrepr
        calcrepr -c calcrepr.toml "2147483647 + 1"
    """
    _configure_logging(verbose)

    try:
        config = load_config(config_path) if config_path else CalcConfig()
        source = expression if expression is not None else _read_expression()
        logger.debug("Evaluating %r with %s", source, config.integers)

        if show_tokens:
            _print_tokens(source, config.integers)

        result = evaluate(source, config.integers)
    except CalcError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"REPR: {result.rendered}")
    typer.echo(f"Result: {result.value}")


def main(argv: list[str] | None = None) -> None:
    app(args=argv)


if __name__ == "__main__":
    main(sys.argv[1:])
