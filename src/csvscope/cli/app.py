"""csvscope CLI application entry point.

Provides commands for analyzing CSV files (structure, column types and
statistics), describing their headers, printing single rows and showing
the persisted schema document.

Usage:
    csvscope analyze <csv-file>
    csvscope describe <csv-file>
    csvscope row <index> <csv-file>
    csvscope schema <csv-file>
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from csvscope.config import get_settings
from csvscope.errors import CsvScopeError

app = typer.Typer(
    name="csvscope",
    help="Inspect large CSV files: structure, column types and statistics.",
    no_args_is_help=True,
)

console = Console()


def _stderr_sink(message: str) -> None:
    sys.stderr.write(message)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-V", help="Show progress logging on stderr"),
    ] = False,
) -> None:
    """Configure logging before any command runs."""
    level = "INFO" if verbose else get_settings().log_level
    logger.remove()
    logger.add(_stderr_sink, level=level, format="{time:HH:mm:ss} | {level: <8} | {message}")


def _fail(error: CsvScopeError) -> typer.Exit:
    console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")
    return typer.Exit(code=1)


@app.command()
def version() -> None:
    """Show the current version."""
    from csvscope import __version__

    console.print(f"csvscope {__version__}")


@app.command()
def analyze(
    csv_file: Annotated[
        Path,
        typer.Argument(help="CSV file to analyze"),
    ],
    report: Annotated[
        bool,
        typer.Option("--report", "-r", help="Also save a plain-text report next to the file"),
    ] = False,
    top: Annotated[
        int | None,
        typer.Option("--top", "-t", min=1, help="Frequency rows shown per categorical column"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the full profile as JSON to this file"),
    ] = None,
) -> None:
    """Analyze a CSV file.

    Detects the header, counts rows and columns, infers column types from a
    sample, writes the schema document and prints per-column statistics.
    """
    from csvscope.cli.display import display_profile
    from csvscope.profiling.analyzer import profile_csv_file, validate_csv_path
    from csvscope.reporting.report import write_profile_json, write_report

    settings = get_settings()
    top_n = top if top is not None else settings.top_values

    try:
        path = validate_csv_path(csv_file)
        console.print(f"\n[bold blue]Analyzing[/bold blue] {escape(path.name)}...")
        profile = profile_csv_file(path, settings=settings)
    except CsvScopeError as e:
        raise _fail(e) from e

    console.print()
    display_profile(profile, console, top_n=top_n)

    if report:
        try:
            report_path = write_report(profile, top_n=top_n)
        except CsvScopeError as e:
            raise _fail(e) from e
        console.print(f"[green]Analysis report written to {escape(str(report_path))}[/green]")

    if output is not None:
        try:
            json_path = write_profile_json(profile, output)
        except CsvScopeError as e:
            raise _fail(e) from e
        console.print(f"[green]Profile written to {escape(str(json_path))}[/green]")


@app.command()
def describe(
    csv_file: Annotated[
        Path,
        typer.Argument(help="CSV file whose first line is a header"),
    ],
) -> None:
    """Show column count, data-row count and the header line."""
    from csvscope.cli.display import display_describe
    from csvscope.profiling.analyzer import validate_csv_path
    from csvscope.profiling.inspection import describe_csv

    try:
        result = describe_csv(validate_csv_path(csv_file))
    except CsvScopeError as e:
        raise _fail(e) from e

    display_describe(result, console)


@app.command()
def row(
    row_index: Annotated[
        int,
        typer.Argument(min=0, help="0-based data row index (blank lines are skipped)"),
    ],
    csv_file: Annotated[
        Path,
        typer.Argument(help="CSV file whose first line is a header"),
    ],
) -> None:
    """Print a single data row with its headers."""
    from csvscope.cli.display import display_row
    from csvscope.profiling.analyzer import validate_csv_path
    from csvscope.profiling.inspection import read_csv_row

    try:
        lookup = read_csv_row(validate_csv_path(csv_file), row_index)
    except CsvScopeError as e:
        raise _fail(e) from e

    display_row(lookup, console)


@app.command()
def schema(
    csv_file: Annotated[
        Path,
        typer.Argument(help="CSV file whose schema document should be shown"),
    ],
) -> None:
    """Show the schema document recorded by the last analysis of a file."""
    from csvscope.cli.display import display_schema
    from csvscope.io.schema import read_schema, schema_path_for

    try:
        schema_path = schema_path_for(csv_file)
        if not schema_path.exists():
            console.print(
                f"[bold red]Error:[/bold red] No schema document at {escape(str(schema_path))}. "
                f"Run [bold]csvscope analyze {escape(str(csv_file))}[/bold] first."
            )
            raise typer.Exit(code=1)
        document = read_schema(schema_path)
    except CsvScopeError as e:
        raise _fail(e) from e

    display_schema(document, console)
