"""Quick structural inspection: describe a file or fetch one row.

Both helpers treat the first line as a header unconditionally and skip
blank lines when counting or indexing data rows.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from csvscope.errors import CsvProcessingError
from csvscope.io.reader import LineReader, iter_data_lines
from csvscope.io.tokenizer import tokenize_line
from csvscope.models.profiling import DescribeResult, RowLookup


def describe_csv(csv_path: str | Path) -> DescribeResult:
    """Return the header fields and data-row count of a CSV file.

    Raises:
        CsvProcessingError: If the file is empty.
        FileSystemError: If the file cannot be opened or read.
    """
    path = Path(csv_path)
    with LineReader(path, "describe") as lines:
        first = next(lines, None)
        if first is None:
            raise CsvProcessingError("Empty CSV file", line_number=1)
        headers = tokenize_line(first[1])
        row_count = sum(1 for _ in iter_data_lines(lines))

    logger.info("Described {}: {} columns, {} data rows", path.name, len(headers), row_count)
    return DescribeResult(source_path=path, headers=headers, data_row_count=row_count)


def read_csv_row(csv_path: str | Path, row_index: int) -> RowLookup:
    """Fetch a single data row by its 0-based index.

    Raises:
        CsvProcessingError: If the file is empty, the index is negative or
            the file has fewer data rows than requested.
        FileSystemError: If the file cannot be opened or read.
    """
    if row_index < 0:
        raise CsvProcessingError(f"Row index must be non-negative, got {row_index}")

    path = Path(csv_path)
    with LineReader(path, "row lookup") as lines:
        first = next(lines, None)
        if first is None:
            raise CsvProcessingError("Empty CSV file", line_number=1)
        headers = tokenize_line(first[1])

        seen = 0
        for _number, text in iter_data_lines(lines):
            if seen == row_index:
                return RowLookup(row_index=row_index, headers=headers, values=tokenize_line(text))
            seen += 1

    raise CsvProcessingError(
        f"Row index {row_index} out of range (file has only {seen} data rows)"
    )
