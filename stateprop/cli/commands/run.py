"""
Run command: load a stateful property and execute it
"""

import importlib
import json
import os
import sys
from typing import Any, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from stateprop.core.canonical import serialize
from stateprop.core.errors import ConfigurationError, PropertyFailedError
from stateprop.core.random import Random
from stateprop.logging_config import get_logger, setup_logging
from stateprop.stateful.property import StatefulProperty

console = Console()


def load_property(target: str) -> StatefulProperty[Any, Any]:
    """
    Resolve "package.module:attribute" to a StatefulProperty.

    The attribute may be a property or a zero-argument callable returning
    one. The working directory is importable so local test modules resolve.

    Raises:
        ValueError: If target is malformed or does not name a property
        ImportError: If the module cannot be imported
        AttributeError: If the attribute does not exist
    """
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"target must look like package.module:attribute, got {target!r}")

    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    module = importlib.import_module(module_name)
    obj = getattr(module, attr)
    if not isinstance(obj, StatefulProperty) and callable(obj):
        obj = obj()
    if not isinstance(obj, StatefulProperty):
        raise ValueError(f"{target} is not a StatefulProperty")
    return obj


def _failure_output(e: Exception) -> dict:
    output: dict = {"success": False, "error": str(e), "error_type": type(e).__name__}
    if isinstance(e, PropertyFailedError):
        output["shrunk"] = e.shrunk
        output["trial"] = e.trial
        output["initial"] = serialize(e.initial)
        output["actions"] = [repr(a) for a in e.actions]
    return output


def run_command(
    target: str = typer.Argument(..., help="Property to run, as package.module:attribute"),
    seed: Optional[str] = typer.Option(None, "--seed", "-s", help="Seed string (replays a reported failure)"),
    runs: Optional[int] = typer.Option(None, "--runs", "-n", help="Number of trials"),
    min_size: Optional[int] = typer.Option(None, "--min-size", help="Minimum actions per trial"),
    max_size: Optional[int] = typer.Option(None, "--max-size", help="Maximum actions per trial"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Run a stateful property.

    Examples:
        stateprop run tests.props:queue_property
        stateprop run tests.props:queue_property --seed 1 --runs 50
        stateprop run tests.props:make_property --max-size 20 --json
    """
    setup_logging()

    try:
        prop = load_property(target)
    except (ImportError, AttributeError, ValueError) as e:
        if json_output:
            print(json.dumps({"success": False, "error": str(e), "target": target}))
        else:
            console.print(f"[red]Error: cannot load property:[/red] {e}")
        raise typer.Exit(2)

    if seed is not None:
        prop.set_seed(seed)
    if runs is not None:
        prop.set_num_runs(runs)
    if min_size is not None:
        prop.set_min_size(min_size)
    if max_size is not None:
        prop.set_max_size(max_size)
    # Pin a seed so any failure can be replayed with --seed
    if not prop.config.seed:
        prop.set_seed(Random().seed)

    logger = get_logger(__name__, seed=prop.config.seed)
    logger.info("Running %s", target)

    exit_code = 0
    try:
        prop.run()
        output: dict = {"success": True}
    except ConfigurationError as e:
        output = {"success": False, "error": str(e), "error_type": "ConfigurationError"}
        exit_code = 2
    except Exception as e:
        output = _failure_output(e)
        exit_code = 1

    output["seed"] = prop.config.seed
    output["num_runs"] = prop.config.num_runs

    if json_output:
        print(json.dumps(output, indent=2))
        raise typer.Exit(exit_code)

    table = Table(show_header=False, box=None)
    table.add_row("Property", target)
    table.add_row("Seed", f"[yellow]{prop.config.seed}[/yellow]")
    table.add_row("Trials", str(prop.config.num_runs))
    console.print(table)

    if exit_code == 0:
        console.print(f"[green]✓ {prop.config.num_runs} trials passed[/green]")
    elif exit_code == 2:
        console.print(f"[red]Configuration error:[/red] {output['error']}")
    else:
        console.print(f"[red]✗ Property failed ({output['error_type']})[/red]")
        console.print(output["error"], markup=False, highlight=False)
        if "actions" in output:
            steps = Table(title="Reproduction" + (" (shrunk)" if output["shrunk"] else ""))
            steps.add_column("#", style="cyan", justify="right")
            steps.add_column("Action", style="green")
            for idx, action in enumerate(output["actions"]):
                steps.add_row(str(idx), Text(action))
            console.print(f"Initial: {output['initial']}", markup=False, highlight=False)
            console.print(steps)

    raise typer.Exit(exit_code)
