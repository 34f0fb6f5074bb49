"""Analysis orchestration for a single CSV file.

Runs the structural scan, the type sampler and the schema recorder in
order, and optionally the full statistics pass. Each stage streams the
file on its own; errors from any stage propagate unchanged.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from csvscope.config import Settings, get_settings
from csvscope.errors import ConfigurationError, FileSystemError
from csvscope.io.schema import schema_path_for, write_schema
from csvscope.models.profiling import AnalysisResult
from csvscope.models.statistics import CsvProfile
from csvscope.profiling.header import HeaderStrategy
from csvscope.profiling.sampler import sample_column_types
from csvscope.profiling.scanner import scan_structure
from csvscope.profiling.statistics import analyze_statistics

CSV_EXTENSIONS: frozenset[str] = frozenset({".csv", ".tsv"})


def validate_csv_path(csv_path: str | Path) -> Path:
    """Check that a path names a readable-looking CSV file.

    Unusual extensions are logged but allowed.

    Returns:
        The absolute, resolved path.

    Raises:
        FileSystemError: If the path does not exist or cannot be resolved.
        ConfigurationError: If the path exists but is not a regular file.
    """
    path = Path(csv_path)
    if not path.exists():
        raise FileSystemError(
            f"CSV file does not exist: {path}",
            FileNotFoundError(2, "No such file or directory", str(path)),
        )
    if not path.is_file():
        raise ConfigurationError(f"Path exists but is not a file: {path}")

    suffix = path.suffix.lower()
    if not suffix:
        logger.warning("{} has no extension; expecting comma-separated values", path.name)
    elif suffix not in CSV_EXTENSIONS:
        logger.warning("Extension {!r} is not typical for CSV files: {}", suffix, path.name)

    try:
        return path.resolve(strict=True)
    except OSError as e:
        raise FileSystemError(f"Failed to resolve absolute path for: {path}", e) from e


def analyze_csv_file(
    csv_path: str | Path,
    settings: Settings | None = None,
    header_strategy: HeaderStrategy | None = None,
    schema_path: str | Path | None = None,
) -> AnalysisResult:
    """Infer the structure and column types of a CSV file and record its schema.

    The schema document is regenerated on every call, replacing any earlier
    document for the same file.

    Args:
        csv_path: CSV file to analyze.
        settings: Sampling limits; defaults to get_settings().
        header_strategy: Header classifier passed to the structural scan.
        schema_path: Where to write the schema; defaults to the file next to the source.

    Returns:
        AnalysisResult with per-column profiles and the schema location.
    """
    settings = settings or get_settings()
    path = Path(csv_path)
    logger.info("Analyzing CSV file: {}", path)

    scan = scan_structure(path, header_strategy=header_strategy)
    columns = sample_column_types(
        path,
        scan.has_header,
        scan.column_count,
        sample_rows=settings.sample_rows,
        max_sample_values=settings.max_sample_values,
    )

    destination = Path(schema_path) if schema_path is not None else schema_path_for(path)
    existed = destination.exists()
    if existed:
        logger.info("Replacing existing schema document {}", destination)
    write_schema(destination, columns)

    return AnalysisResult(
        source_path=path,
        has_header=scan.has_header,
        total_column_count=scan.column_count,
        total_data_row_count=scan.data_row_count,
        columns=columns,
        schema_path=destination,
        schema_existed=existed,
    )


def profile_csv_file(
    csv_path: str | Path,
    settings: Settings | None = None,
    header_strategy: HeaderStrategy | None = None,
    schema_path: str | Path | None = None,
) -> CsvProfile:
    """Run every analysis stage, statistics included, on a CSV file."""
    analysis = analyze_csv_file(
        csv_path,
        settings=settings,
        header_strategy=header_strategy,
        schema_path=schema_path,
    )
    statistics = analyze_statistics(csv_path, analysis)
    return CsvProfile(analysis=analysis, statistics=statistics)
