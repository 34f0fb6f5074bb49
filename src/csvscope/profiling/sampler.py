"""Sample-based column type inference.

Reads a bounded prefix of data rows, counts empty and non-empty values
per column and votes on each column's type. The vote covers every
non-empty sampled value; only the first few are kept for display.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from csvscope.errors import CsvProcessingError
from csvscope.io.reader import LineReader, iter_data_lines
from csvscope.io.tokenizer import tokenize_line
from csvscope.models.profiling import ColumnProfile
from csvscope.models.schema import ColumnDataType
from csvscope.profiling.values import is_boolean_token, parse_float64, parse_int64

SAMPLE_ROWS = 10
MAX_SAMPLE_VALUES = 5

# A type wins when at least 7 in 10 sampled values vote for it.
_THRESHOLD_NUMERATOR = 7
_THRESHOLD_DENOMINATOR = 10


def placeholder_name(column_index: int) -> str:
    """Generated name for a 0-based column index: column_1, column_2, ..."""
    return f"column_{column_index + 1}"


def detect_column_type(values: list[str]) -> ColumnDataType:
    """Infer a column type from its non-empty sampled values.

    Each value votes for boolean first, then integer, then float; a value
    matching none of them votes for nothing. With
    ``threshold = floor(n * 7 / 10)``, the first of Boolean, Integer, Float
    whose vote count reaches the threshold wins, else String. With one
    value the threshold is 0, so such a column is always Boolean.

    Args:
        values: Non-empty sampled values of one column.

    Returns:
        The inferred ColumnDataType.
    """
    if not values:
        return ColumnDataType.STRING

    boolean_votes = 0
    integer_votes = 0
    float_votes = 0
    for raw in values:
        value = raw.strip().lower()
        if is_boolean_token(value):
            boolean_votes += 1
        elif parse_int64(value) is not None:
            integer_votes += 1
        elif parse_float64(value) is not None:
            float_votes += 1

    threshold = len(values) * _THRESHOLD_NUMERATOR // _THRESHOLD_DENOMINATOR

    for data_type, votes in (
        (ColumnDataType.BOOLEAN, boolean_votes),
        (ColumnDataType.INTEGER, integer_votes),
        (ColumnDataType.FLOAT, float_votes),
    ):
        if votes >= threshold:
            return data_type
    return ColumnDataType.STRING


def sample_column_types(
    csv_path: str | Path,
    has_header: bool,
    column_count: int,
    sample_rows: int = SAMPLE_ROWS,
    max_sample_values: int = MAX_SAMPLE_VALUES,
) -> list[ColumnProfile]:
    """Profile each column from the first ``sample_rows`` data rows.

    Blank lines are skipped. Fields beyond ``column_count`` are dropped and
    columns missing from a short row count as empty for that row, so every
    profile's counts add up to the number of sampled rows.

    Args:
        csv_path: CSV file to sample.
        has_header: Whether the first line is a header.
        column_count: Number of columns reported by the structural scan.
        sample_rows: Maximum number of data rows to read.
        max_sample_values: Maximum representative values kept per column.

    Returns:
        One ColumnProfile per column, in position order.

    Raises:
        CsvProcessingError: If a header is expected but the file is empty.
        FileSystemError: If the file cannot be opened or read.
    """
    path = Path(csv_path)
    votes: list[list[str]] = [[] for _ in range(column_count)]
    non_empty = [0] * column_count
    empty = [0] * column_count
    rows_sampled = 0

    with LineReader(path, "type analysis") as lines:
        if has_header:
            header = next(lines, None)
            if header is None:
                raise CsvProcessingError(
                    "CSV file appears empty when trying to read header", line_number=1
                )
            header_fields = tokenize_line(header[1])
        else:
            header_fields = []

        for _number, text in iter_data_lines(lines):
            if rows_sampled >= sample_rows:
                break
            fields = tokenize_line(text)
            for index in range(column_count):
                value = fields[index] if index < len(fields) else ""
                if value:
                    non_empty[index] += 1
                    votes[index].append(value)
                else:
                    empty[index] += 1
            rows_sampled += 1

    profiles: list[ColumnProfile] = []
    for index in range(column_count):
        name = header_fields[index] if index < len(header_fields) else ""
        data_type = detect_column_type(votes[index])
        logger.debug("Column {} ({}) sampled as {}", index, name or placeholder_name(index), data_type)
        profiles.append(
            ColumnProfile(
                column_index=index,
                column_name=name or placeholder_name(index),
                data_type=data_type,
                non_empty_count=non_empty[index],
                empty_count=empty[index],
                sample_values=votes[index][:max_sample_values],
            )
        )

    logger.info("Sampled {} rows across {} columns of {}", rows_sampled, column_count, path.name)
    return profiles
