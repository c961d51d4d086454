"""CLI app entry point.

Provides the main Typer app with a global verbosity flag. Logging is
configured here, once per invocation, from the logging settings.
"""

import logging

import typer

from fuzzyvis import __version__, configure_logging
from fuzzyvis.cli.fuzzy_commands import fuzzy_app
from fuzzyvis.config import get_logging_settings

app = typer.Typer(
    name="fuzzyvis",
    help="FuzzyVis - fuzzy membership functions and fuzzification.",
    add_completion=False,
    no_args_is_help=True,
)
app.add_typer(fuzzy_app, name="fuzzy")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging"
    ),
):
    """FuzzyVis command line interface."""
    settings = get_logging_settings()
    console_level = logging.getLevelName(settings.level.upper())
    if not isinstance(console_level, int):
        console_level = logging.INFO
    if verbose:
        console_level = logging.DEBUG

    configure_logging(
        log_dir=settings.log_dir,
        console_level=console_level,
        config={"debug_mode": verbose},
    )


@app.command("version")
def show_version():
    """Show the FuzzyVis version."""
    typer.echo(f"fuzzyvis {__version__}")
