#!/usr/bin/env python3
"""
stateprop CLI - Stateful Property Runner

Main entrypoint for the stateprop command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from stateprop.cli.commands import run

# Initialize Typer app
app = typer.Typer(
    name="stateprop",
    help="Run stateful (model-based) property tests",
    add_completion=False,
)

# Console for rich output
console = Console()

app.command(name="run")(run.run_command)


@app.command()
def version():
    """Show version information."""
    from stateprop import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]stateprop[/bold]", f"v{__version__}")
    table.add_row("Engine", "Stateful property runner")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
