"""
Defines the command-line interface for the application using Typer.
"""

import asyncio
import logging
import time
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from vendurl import __version__
from vendurl.core.vendor_manager import VendorManager
from vendurl.exceptions import UserAbort, VendurlError
from vendurl.models.options import RunOptions
from vendurl.storage.config_manager import ConfigManager

from .formatters import (
    format_error_with_suggestions,
    print_config_table,
    print_summary_panel,
)
from .reporter import Reporter

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=True,
        )
    ],
)
log = logging.getLogger("vendurl")

HELP_WORDS = ("help",)

app = typer.Typer(
    name="vendurl",
    help=(
        "Vendor remote script dependencies listed under \"vendurl\" in"
        " package.json into a local directory."
    ),
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def normalize_args(args: list[str]) -> list[str]:
    """Treats a bare `help` word the same as --help."""
    return ["--help" if arg in HELP_WORDS else arg for arg in args]


def _version_callback(value: bool) -> None:
    if value:
        Console().print(f"[bold]vendurl[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()


@app.command()
def vend(
    clean: bool = typer.Option(
        False, "--clean", "-c", help="Remove the destination directory first."
    ),
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Skip the confirmation prompt for --clean."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Print extra progress details."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable colored output (also honors NO_COLOR)."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """Download every package in the manifest into the vendor directory."""
    options = RunOptions.from_flags(
        clean=clean, yes=yes, verbose=verbose, no_color=no_color
    )
    log.setLevel("DEBUG" if options.verbose else "INFO")
    reporter = Reporter(options)
    project_dir = Path.cwd()

    try:
        config = ConfigManager(project_dir).load_config()
        manager = VendorManager(config, options, reporter, project_dir)
        if options.verbose:
            print_config_table(reporter.console, config, str(manager.destination))

        start_time = time.monotonic()
        stats = asyncio.run(manager.execute())
        duration = time.monotonic() - start_time
    except UserAbort as e:
        reporter.error(str(e))
        raise typer.Exit(code=1) from e
    except VendurlError as e:
        reporter.err_console.print(format_error_with_suggestions(e))
        raise typer.Exit(code=1) from e

    reporter.plain("Vendored.")
    if options.verbose:
        print_summary_panel(reporter.console, stats, duration)

    if not stats.succeeded:
        raise typer.Exit(code=1)
