"""Structural scanner: header flag, column count and data-row count.

One streaming pass with a single line resident. The column count comes
from the first line's comma count (quotes ignored); header presence is
delegated to a HeaderStrategy fed the first two lines.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from csvscope.errors import CsvProcessingError
from csvscope.io.reader import LineReader, is_blank
from csvscope.io.tokenizer import count_delimited_fields
from csvscope.models.profiling import StructureScan
from csvscope.profiling.header import HeaderStrategy, TwoLineNumericHeuristic


def scan_structure(
    csv_path: str | Path,
    header_strategy: HeaderStrategy | None = None,
) -> StructureScan:
    """Scan a CSV file once to determine its basic shape.

    Every non-blank line after the first counts as a data row. The first
    line is added to the count when it is not a header and not blank.

    Args:
        csv_path: CSV file to scan.
        header_strategy: Header classifier; defaults to TwoLineNumericHeuristic.

    Returns:
        StructureScan with header flag, column count and data-row count.

    Raises:
        CsvProcessingError: If the file contains no lines.
        FileSystemError: If the file cannot be opened or read.
    """
    strategy = header_strategy or TwoLineNumericHeuristic()
    path = Path(csv_path)

    with LineReader(path, "structural analysis") as lines:
        first = next(lines, None)
        if first is None:
            raise CsvProcessingError("CSV file appears to be empty", line_number=1)
        _, first_line = first
        column_count = count_delimited_fields(first_line)

        second = next(lines, None)
        second_line = second[1] if second is not None else None
        has_header = strategy.classify(first_line, second_line)

        if second_line is not None and count_delimited_fields(second_line) != column_count:
            logger.warning(
                "Inconsistent column counts in {}: line 1 has {}, line 2 has {}",
                path.name,
                column_count,
                count_delimited_fields(second_line),
            )

        row_count = 0
        if second_line is not None and not is_blank(second_line):
            row_count += 1
        for _number, text in lines:
            if not is_blank(text):
                row_count += 1

    if not has_header and not is_blank(first_line):
        row_count += 1

    logger.info(
        "Structure of {}: {} columns, {} data rows, header={}",
        path.name,
        column_count,
        row_count,
        has_header,
    )
    return StructureScan(has_header=has_header, column_count=column_count, data_row_count=row_count)
