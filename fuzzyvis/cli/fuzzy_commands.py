"""
Fuzzy logic commands for the FuzzyVis CLI.

This module contains the CLI commands for working with membership functions:
- functions: List the membership function catalogue
- evaluate: Evaluate one membership function at a point
- fuzzify: Compute the degree of a crisp value in every set of a variable
- sample: Sample every set of a variable across its domain
"""

import json
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fuzzyvis.errors import ConfigurationError, FuzzyVisError
from fuzzyvis.fuzzy.catalogue import evaluate as evaluate_membership
from fuzzyvis.fuzzy.catalogue import list_specs
from fuzzyvis.fuzzy.config import FuzzyConfigLoader
from fuzzyvis.fuzzy.engine import FuzzyEngine
from fuzzyvis.logging import get_logger

# Setup logging and console
logger = get_logger(__name__)
console = Console()
error_console = Console(stderr=True)

OUTPUT_FORMATS = ("table", "json", "csv")

# Create the CLI app for fuzzy commands
fuzzy_app = typer.Typer(
    name="fuzzy",
    help="Membership function and fuzzification commands",
    no_args_is_help=True,
)


def _fail(error: Exception) -> NoReturn:
    """Report an error on stderr and exit with status 1."""
    if isinstance(error, ConfigurationError):
        error_console.print(f"[bold red]{escape(error.format_user_message())}[/bold red]")
    else:
        error_console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")
    logger.debug(f"Command failed: {error!r}")
    sys.exit(1)


def _check_format(output_format: str, allowed: tuple[str, ...]) -> str:
    output_format = output_format.lower()
    if output_format not in allowed:
        error_console.print(
            f"[bold red]Error:[/bold red] unsupported format '{output_format}' "
            f"(choose from: {', '.join(allowed)})"
        )
        sys.exit(1)
    return output_format


def _load_engine(config_path: Path) -> FuzzyEngine:
    variable = FuzzyConfigLoader().load_from_yaml(config_path)
    return FuzzyEngine(variable)


@fuzzy_app.command("functions")
def list_functions(
    vmin: Optional[float] = typer.Option(
        None, "--min", help="Domain minimum used to show default parameters"
    ),
    vmax: Optional[float] = typer.Option(
        None, "--max", help="Domain maximum used to show default parameters"
    ),
):
    """
    List the membership function catalogue.

    Examples:
        fuzzyvis fuzzy functions
        fuzzyvis fuzzy functions --min 0 --max 100
    """
    show_defaults = vmin is not None and vmax is not None

    table = Table(title="Membership functions")
    table.add_column("Key", style="cyan")
    table.add_column("Label", style="green")
    table.add_column("Parameters", style="blue")
    if show_defaults:
        table.add_column(f"Defaults on [{vmin}, {vmax}]", justify="right")

    for spec in list_specs():
        row = [spec.key, spec.label, ", ".join(spec.param_labels)]
        if show_defaults:
            defaults = spec.default_parameters(vmin, vmax)
            row.append(", ".join(f"{p:g}" for p in defaults))
        table.add_row(*row)

    console.print(table)


@fuzzy_app.command("evaluate")
def evaluate_function(
    function: str = typer.Argument(..., help="Catalogue key, e.g. triangular"),
    x: float = typer.Argument(..., help="Crisp input value"),
    parameters: Optional[List[float]] = typer.Argument(
        None, help="Shape parameters in call order"
    ),
    output_format: str = typer.Option(
        "table", "--format", "-f", help="Output format (table, json)"
    ),
):
    """
    Evaluate one membership function at a point.

    Examples:
        fuzzyvis fuzzy evaluate triangular 2.5 0 5 10
        fuzzyvis fuzzy evaluate gaussian 1 0 2 --format json
    """
    output_format = _check_format(output_format, ("table", "json"))
    parameters = parameters or []
    try:
        degree = evaluate_membership(function, x, parameters)
    except FuzzyVisError as e:
        _fail(e)

    if output_format == "json":
        print(
            json.dumps(
                {"function": function, "x": x, "parameters": parameters, "degree": degree}
            )
        )
    else:
        console.print(f"{function}({x:g}; {', '.join(f'{p:g}' for p in parameters)}) = {degree:.6g}")


@fuzzy_app.command("fuzzify")
def fuzzify_value(
    x: float = typer.Argument(..., help="Crisp input value"),
    config_path: Path = typer.Option(
        ..., "--config", "-c", help="Crisp variable YAML file"
    ),
    output_format: str = typer.Option(
        "table", "--format", "-f", help="Output format (table, json)"
    ),
):
    """
    Compute the membership degree of a crisp value in every fuzzy set.

    Examples:
        fuzzyvis fuzzy fuzzify 42 --config config/fuzzy.yaml
    """
    output_format = _check_format(output_format, ("table", "json"))
    try:
        engine = _load_engine(config_path)
        degrees = engine.fuzzify(x)
    except FuzzyVisError as e:
        _fail(e)

    variable = engine.variable
    if output_format == "json":
        print(json.dumps({"variable": variable.id, "x": x, "degrees": degrees}))
        return

    best = engine.best_match(x)
    table = Table(title=f"{escape(variable.name)} = {x:g}")
    table.add_column("Set", style="cyan")
    table.add_column("Function", style="blue")
    table.add_column("Degree", style="green", justify="right")
    for fuzzy_set in variable.fuzzy_sets:
        marker = " *" if fuzzy_set.id == best else ""
        table.add_row(
            f"{escape(fuzzy_set.label)}{marker}",
            fuzzy_set.function,
            f"{degrees[fuzzy_set.id]:.4f}",
        )
    console.print(table)


@fuzzy_app.command("sample")
def sample_variable(
    config_path: Path = typer.Option(
        ..., "--config", "-c", help="Crisp variable YAML file"
    ),
    resolution: Optional[int] = typer.Option(
        None, "--resolution", "-r", help="Number of sampling intervals"
    ),
    output_format: str = typer.Option(
        "table", "--format", "-f", help="Output format (table, csv, json)"
    ),
    output_file: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Save output to file"
    ),
):
    """
    Sample every fuzzy set of a variable across its domain.

    Examples:
        fuzzyvis fuzzy sample --config config/fuzzy.yaml --resolution 20
        fuzzyvis fuzzy sample -c config/fuzzy.yaml -f csv -o series.csv
    """
    output_format = _check_format(output_format, OUTPUT_FORMATS)
    try:
        engine = _load_engine(config_path)
        frame = engine.sample(resolution)
    except FuzzyVisError as e:
        _fail(e)

    if output_format == "csv":
        text = frame.to_csv(index=False)
    elif output_format == "json":
        text = frame.to_json(orient="records")
    else:
        text = None

    if text is not None:
        if output_file:
            output_file.write_text(text, encoding="utf-8")
            console.print(f"Saved {len(frame)} rows to {output_file}")
        else:
            print(text)
        return

    table = Table(title=f"{escape(engine.variable.name)} [{engine.variable.min:g}, {engine.variable.max:g}]")
    table.add_column("x", style="cyan", justify="right")
    for fuzzy_set in engine.variable.fuzzy_sets:
        table.add_column(escape(fuzzy_set.label), style="green", justify="right")
    for row in frame.itertuples(index=False):
        table.add_row(*(f"{value:.4f}" for value in row))
    console.print(table)
