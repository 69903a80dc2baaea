"""Analyze command: discover files under the given paths and report metrics."""

from pathlib import Path
from typing import List, Optional

import click
import typer

from ..api import analyze as run_analysis
from ..exceptions import InvalidPathError, SourceMetricsError
from ..formatters import get_formatter
from ..formatters.rich_formatter import RichFormatter
from ..logging_config import setup_logging
from ..scanning.discovery import DiscoveredFiles, discover
from . import app
from ._common import console, err_console, resolve_config


@app.command()
def analyze(
    paths: List[Path] = typer.Argument(
        None,
        help="Files or directories to analyze (default: current directory)",
    ),
    output_format: str = typer.Option(
        "rich",
        "-f",
        "--format",
        help="Output format",
        click_type=click.Choice(["rich", "json"], case_sensitive=False),
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    workers: Optional[int] = typer.Option(
        None,
        "-w",
        "--workers",
        help="Threads used to scan files",
        min=1,
        max=32,
    ),
    top: Optional[int] = typer.Option(
        None,
        "--top",
        help="Number of largest files to list",
        min=0,
    ),
    no_manifests: bool = typer.Option(
        False,
        "--no-manifests",
        help="Skip Gemfile and gemspec analysis",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
):
    """
    Report lines of code, complexity, nesting and block sizes.

    [bold cyan]Examples:[/bold cyan]

      source-metrics analyze

      source-metrics analyze lib app --format json

      source-metrics analyze . --top 5 --workers 4
    """
    logger = setup_logging("quiet" if quiet else "verbose" if verbose else "normal")

    try:
        settings = resolve_config(
            config=config,
            workers=workers,
            top=top,
            no_manifests=no_manifests,
            verbose=verbose,
            quiet=quiet,
        )
        logger = setup_logging(settings.verbosity)

        found = DiscoveredFiles()
        for path in paths or [Path.cwd()]:
            if not path.exists():
                raise InvalidPathError(path, "path does not exist")
            found.extend(discover(path, settings))

        logger.info(
            f"Found {len(found.source_files)} source files "
            f"and {len(found.manifest_files)} manifests"
        )

        report = run_analysis(found.source_files, found.manifest_files, config=settings)

        formatter = get_formatter(output_format.lower())
        if isinstance(formatter, RichFormatter):
            formatter.console = console
        formatter.render(report)

    except InvalidPathError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    except SourceMetricsError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        err_console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)


@app.command()
def version():
    """Show version and exit."""
    from .. import __version__

    console.print(f"[bold cyan]source-metrics[/bold cyan] version [green]{__version__}[/green]")
