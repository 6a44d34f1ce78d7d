"""CLI entry point for todo-tracker.

Invoked as::

    todo-tracker [OPTIONS] [COMMAND]

or, during development::

    python -m todo.cli.main

Commands
--------
run         Start the interactive todo list (the default)
show        Print the saved state.ron as RON, JSON or YAML
version     Show version information
"""
from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

console = Console(emoji=False)
err_console = Console(stderr=True, emoji=False)


def _configure_logging(verbose: bool) -> None:
    """Send the package's DEBUG records to stderr when ``verbose``."""
    if not verbose:
        return
    package_logger = logging.getLogger("todo")
    package_logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=err_console, show_path=False))


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group(invoke_without_command=True)
@click.version_option(package_name="todo-tracker")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Interactive todo list saved to state.ron in the current directory."""
    _configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        ctx.invoke(run_command)


# ---------------------------------------------------------------------------
# run command
# ---------------------------------------------------------------------------


@cli.command(name="run")
def run_command() -> None:
    """Start the interactive todo list.

    Type `help` at the prompt for the list of commands.
    """
    from todo.commands import CommandContext
    from todo.interpreter import Interpreter
    from todo.storage import StateStore

    context = CommandContext(store=StateStore(), console=console, err_console=err_console)
    Interpreter(context).run()


# ---------------------------------------------------------------------------
# show command
# ---------------------------------------------------------------------------


@cli.command(name="show")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["ron", "json", "yaml"], case_sensitive=False),
    default="ron",
    help="Output format",
)
def show_command(output_format: str) -> None:
    """Print the saved todo list without starting the interpreter."""
    from todo.errors import StateFileError
    from todo.state import StateSerializer
    from todo.storage import StateStore

    store = StateStore()
    if not store.exists():
        err_console.print(f"[red]Error:[/red] No state data file found at {store.path}")
        sys.exit(1)
    try:
        state = store.read()
    except StateFileError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    serializer = StateSerializer()
    output_format = output_format.lower()
    if output_format == "json":
        text, lang = serializer.to_json(state), "json"
    elif output_format == "yaml":
        text, lang = serializer.to_yaml(state), "yaml"
    else:
        text, lang = serializer.to_ron(state), "text"

    console.print(Syntax(text, lang, line_numbers=True))
    console.print(f"\n[bold]{len(state.entries)}[/bold] entr{'y' if len(state.entries) == 1 else 'ies'}")


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from todo import __version__
    from todo.state import STATE_MANIFEST_VERSION

    table = Table(show_header=False, box=None)
    table.add_row("[bold]todo-tracker[/bold]", f"v{__version__}")
    table.add_row("Manifest version", str(STATE_MANIFEST_VERSION))
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


if __name__ == "__main__":
    cli()
