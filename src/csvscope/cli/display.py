"""Rich display helpers for terminal output.

Provides formatted display functions for analysis summaries, per-column
statistics, describe results, single rows and schema documents using Rich
tables and panels.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from csvscope.models.profiling import AnalysisResult, DescribeResult, RowLookup
from csvscope.models.schema import SchemaDocument, section_key
from csvscope.models.statistics import (
    CategoricalStatistics,
    ColumnStatistics,
    CsvProfile,
    NumericStatistics,
)


def _missing_text(missing_pct: float) -> Text:
    """Color-code a missing percentage."""
    if missing_pct > 50:
        style = "bold red"
    elif missing_pct > 20:
        style = "yellow"
    else:
        style = "green"
    return Text(f"{missing_pct:.1f}%", style=style)


def display_analysis_summary(analysis: AnalysisResult, console: Console) -> None:
    """Print file-level structure and the sampled column profiles.

    Args:
        analysis: AnalysisResult from analyze_csv_file.
        console: Rich Console for output.
    """
    info_lines = [
        f"[bold]File:[/bold] {escape(str(analysis.source_path))}",
        f"[bold]Columns:[/bold] {analysis.total_column_count}",
        f"[bold]Data rows:[/bold] {analysis.total_data_row_count}",
        f"[bold]Has header:[/bold] {'yes' if analysis.has_header else 'no'}",
    ]
    if analysis.schema_path is not None:
        verb = "Updated" if analysis.schema_existed else "Created"
        info_lines.append(f"[bold]Schema:[/bold] {verb} {escape(str(analysis.schema_path))}")
    console.print(Panel("\n".join(info_lines), title="CSV Structure"))

    table = Table(title="Column Types", show_lines=True)
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Column", style="bold cyan", no_wrap=True)
    table.add_column("Type", no_wrap=True)
    table.add_column("Field", no_wrap=True)
    table.add_column("Non-empty", justify="right", style="green")
    table.add_column("Empty", justify="right")
    table.add_column("Samples", max_width=40)

    for column in analysis.columns:
        table.add_row(
            str(column.column_index + 1),
            escape(column.column_name),
            column.data_type.value,
            column.data_type.field_class.value,
            str(column.non_empty_count),
            str(column.empty_count),
            escape(", ".join(column.sample_values[:3])),
        )

    console.print(table)


def _numeric_lines(stats: NumericStatistics) -> list[str]:
    return [
        f"min: {stats.min:.3f}    q1: {stats.q1:.3f}    q2: {stats.median:.3f}    "
        f"q3: {stats.q3:.3f}    max: {stats.max:.3f}",
        f"mean: {stats.mean:.3f}    stdev: {stats.stdev:.3f}",
        f"%missing: {stats.missing_pct:.1f}%",
    ]


def _categorical_table(stats: CategoricalStatistics, top_n: int) -> Table:
    table = Table(show_header=True, box=None, padding=(0, 2))
    table.add_column("Value", style="cyan")
    table.add_column("Count", justify="right")
    table.add_column("%", justify="right")
    for freq in stats.value_frequencies[:top_n]:
        table.add_row(escape(freq.value), str(freq.count), f"{freq.percentage:.1f}%")
    return table


def display_column_statistics(
    statistics: list[ColumnStatistics],
    console: Console,
    top_n: int = 5,
) -> None:
    """Print one block per column with its numeric or categorical statistics.

    Categorical blocks show at most ``top_n`` frequency rows followed by a
    note when more distinct values exist.
    """
    for position, column_stats in enumerate(statistics, start=1):
        column = column_stats.column
        title = (
            f"{position}. {column.column_name} "
            f"({column.data_type.value} - {column_stats.field_class.value})"
        )
        console.print(Text(title, style="bold"))

        if column_stats.numeric is not None:
            for line in _numeric_lines(column_stats.numeric):
                console.print(f"   {line}")
        elif column_stats.categorical is not None:
            cat = column_stats.categorical
            console.print(f"   Unique values: {cat.unique_count}")
            console.print("   %missing: ", _missing_text(cat.missing_pct), sep="")
            if cat.mode_value is not None:
                console.print(f"   Mode: {escape(cat.mode_value)} ({cat.mode_pct:.1f}%)")
            console.print(_categorical_table(cat, top_n))
            if len(cat.value_frequencies) > top_n:
                console.print(
                    f"   [dim]... (showing top {top_n} of {cat.unique_count} unique values)[/dim]"
                )
        console.print()


def display_profile(profile: CsvProfile, console: Console, top_n: int = 5) -> None:
    """Print the full analysis: structure, column types and statistics."""
    display_analysis_summary(profile.analysis, console)
    console.print()
    display_column_statistics(profile.statistics, console, top_n=top_n)


def display_describe(result: DescribeResult, console: Console) -> None:
    """Print column count, row count and the header line of a file."""
    console.print(f"[bold]Number of columns:[/bold] {result.column_count}")
    console.print(f"[bold]Number of data rows:[/bold] {result.data_row_count}")

    table = Table(title="Column Headers", show_lines=True)
    for header in result.headers:
        table.add_column(escape(header) if header else "[dim](blank)[/dim]", no_wrap=True)
    console.print(table)


def display_row(lookup: RowLookup, console: Console) -> None:
    """Print one data row underneath its headers."""
    table = Table(title=f"Row {lookup.row_index} Data", show_lines=True)
    pairs = lookup.as_pairs()
    for header, _value in pairs:
        table.add_column(escape(header), no_wrap=True)
    table.add_row(*(escape(value) for _header, value in pairs))
    console.print(table)


def display_schema(document: SchemaDocument, console: Console) -> None:
    """Print the contents of a schema document."""
    table = Table(title=f"Schema ({document.total_columns} columns)", show_lines=True)
    table.add_column("Section", style="dim", no_wrap=True)
    table.add_column("Name", style="bold cyan", no_wrap=True)
    table.add_column("Type", no_wrap=True)
    table.add_column("Index", justify="right")
    table.add_column("Non-empty", justify="right", style="green")
    table.add_column("Empty", justify="right")

    for column in document.ordered_columns():
        table.add_row(
            section_key(column.column_index),
            escape(column.name),
            column.data_type.value,
            str(column.column_index),
            str(column.non_empty_values),
            str(column.empty_values),
        )

    console.print(table)
