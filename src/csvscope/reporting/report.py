"""Plain-text analysis report written next to the source file.

The report is the same Rich rendering the CLI prints, captured with a
recording console and saved without ANSI styling.
"""

from __future__ import annotations

import io
from pathlib import Path

from loguru import logger
from rich.console import Console

from csvscope.cli.display import display_profile
from csvscope.errors import ConfigurationError, FileSystemError
from csvscope.models.statistics import CsvProfile

REPORT_FILE_SUFFIX = "csv_analysis.txt"
REPORT_WIDTH = 100


def report_path_for(source_path: str | Path) -> Path:
    """Return ``<dir>/<stem>.csv_analysis.txt`` for a CSV file.

    Raises:
        ConfigurationError: If no filename stem can be derived from the path.
    """
    source = Path(source_path)
    if not source.stem:
        raise ConfigurationError(f"Cannot determine filename from CSV path: {source}")
    return source.parent / f"{source.stem}.{REPORT_FILE_SUFFIX}"


def render_report(profile: CsvProfile, top_n: int = 5) -> str:
    """Render a profile to plain text."""
    console = Console(
        file=io.StringIO(),
        record=True,
        width=REPORT_WIDTH,
        color_system=None,
        force_terminal=False,
    )
    display_profile(profile, console, top_n=top_n)
    return console.export_text(styles=False)


def write_report(
    profile: CsvProfile,
    report_path: str | Path | None = None,
    top_n: int = 5,
) -> Path:
    """Write the plain-text report for a profile, overwriting any earlier one.

    Args:
        profile: Result of profile_csv_file.
        report_path: Destination; defaults to report_path_for(source).
        top_n: Frequency rows shown per categorical column.

    Returns:
        Path of the written report.

    Raises:
        FileSystemError: If the directory cannot be created or the file written.
    """
    path = (
        Path(report_path)
        if report_path is not None
        else report_path_for(profile.analysis.source_path)
    )
    text = render_report(profile, top_n=top_n)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise FileSystemError(f"Failed to write analysis report: {path}", e) from e

    logger.info("Saved analysis report to {}", path)
    return path


def write_profile_json(profile: CsvProfile, output_path: str | Path) -> Path:
    """Write the full profile as indented JSON, overwriting any earlier file.

    Raises:
        FileSystemError: If the directory cannot be created or the file written.
    """
    path = Path(output_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(profile.model_dump_json(indent=2), encoding="utf-8")
    except OSError as e:
        raise FileSystemError(f"Failed to write profile JSON: {path}", e) from e

    logger.info("Saved profile JSON to {}", path)
    return path
