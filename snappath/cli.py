"""CLI commands for snappath."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table
from rich.text import Text

from snappath import __version__
from snappath.core.config import ConfigLoader, SnappathConfig, setup_logging

# Load .env file from current directory or parent directories
load_dotenv()

app = typer.Typer(
    name="snappath",
    help="Compute file names and paths for image snapshots",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"snappath version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """snappath - snapshot file names and paths."""
    pass


def _load_config(
    snapshots_dir: str | None = None,
    report_dir: str | None = None,
    pattern: str | None = None,
    verbose: bool = False,
    log_dir: Path | None = None,
) -> SnappathConfig:
    """Load config files and apply command line overrides."""
    config = ConfigLoader.load()

    if snapshots_dir:
        config.snapshots_dir = snapshots_dir
    if report_dir:
        config.report_dir = report_dir
    if pattern:
        config.file_name_pattern = pattern
    if verbose:
        config.verbose = True

    log_file = setup_logging(verbose=config.verbose, log_dir=log_dir)
    if log_file:
        console.print(f"[dim]Verbose logging -> {log_file}[/dim]")

    return config


def _print_plain(text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


@app.command()
def name(
    test_file: Path = typer.Argument(..., help="Test file the snapshot belongs to"),
    test_name: str = typer.Argument(..., help="Full name of the test"),
    counter: int = typer.Option(1, "--counter", "-n", min=1, help="Snapshot occurrence in the test"),
    pattern: str | None = typer.Option(
        None, "--pattern", "-p", help="File name pattern, e.g. '{identifier}-{counter}.png'"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Write debug.log to --log-dir"),
    log_dir: Path | None = typer.Option(None, "--log-dir", help="Directory for debug.log"),
) -> None:
    """Print the snapshot file name."""
    from snappath.core.naming import build_file_name

    config = _load_config(pattern=pattern, verbose=verbose, log_dir=log_dir)
    try:
        naming = config.naming()
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    _print_plain(build_file_name(test_file, test_name, counter, naming))


@app.command()
def path(
    test_file: Path = typer.Argument(..., help="Test file the snapshot belongs to"),
    test_name: str = typer.Argument(..., help="Full name of the test"),
    counter: int = typer.Option(1, "--counter", "-n", min=1, help="Snapshot occurrence in the test"),
    snapshots_dir: str | None = typer.Option(
        None, "--snapshots-dir", "-s", help="Snapshot directory next to the test file"
    ),
    report_dir: str | None = typer.Option(
        None, "--report-dir", "-r", help="Report directory relative to the working directory"
    ),
    pattern: str | None = typer.Option(
        None, "--pattern", "-p", help="File name pattern, e.g. '{identifier}-{counter}.png'"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
    verbose: bool = typer.Option(False, "--verbose", help="Write debug.log to --log-dir"),
    log_dir: Path | None = typer.Option(None, "--log-dir", help="Directory for debug.log"),
) -> None:
    """Print the snapshot and report paths of a snapshot."""
    from snappath.core.resolver import SnapshotPathResolver

    config = _load_config(snapshots_dir, report_dir, pattern, verbose, log_dir)

    try:
        resolver = SnapshotPathResolver(config)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    location = resolver.locate(test_file.absolute(), test_name, counter)

    if as_json:
        console.print_json(json.dumps(location.to_dict()))
        return

    table = Table(title=f"Snapshot #{location.counter}", show_header=False)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="green", overflow="fold")
    table.add_row("File name", Text(location.file_name))
    table.add_row("Snapshot", Text(location.snapshot_path))
    report = Text(location.report_path) if location.report_path else "[dim]disabled[/dim]"
    table.add_row("Report", report)
    console.print(table)


@app.command("report-dir")
def report_dir_command(
    report_dir: str | None = typer.Option(
        None, "--report-dir", "-r", help="Report directory relative to the working directory"
    ),
) -> None:
    """Print the report root directory."""
    from snappath.core.paths import build_report_root_path

    config = _load_config(report_dir=report_dir)
    _print_plain(build_report_root_path(config.report_dir))
