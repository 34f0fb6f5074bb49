"""Full-pass statistics engine.

Streams every data row once, collecting each column's trimmed values, then
computes numeric statistics for continuous columns and frequency statistics
for categorical columns.
"""

from __future__ import annotations

import math
from pathlib import Path

from loguru import logger

from csvscope.errors import StatisticalAnalysisError
from csvscope.io.reader import LineReader, iter_data_lines
from csvscope.io.tokenizer import tokenize_line
from csvscope.models.profiling import AnalysisResult
from csvscope.models.schema import FieldClass
from csvscope.models.statistics import (
    CategoricalStatistics,
    ColumnStatistics,
    NumericStatistics,
    ValueFrequency,
)
from csvscope.profiling.values import parse_finite_number

QUARTILES: tuple[float, float, float] = (25.0, 50.0, 75.0)


def _percent(part: int, whole: int) -> float:
    return part / whole * 100.0 if whole > 0 else 0.0


def collect_column_values(
    csv_path: str | Path,
    has_header: bool,
    column_count: int,
) -> list[list[str]]:
    """Read every data row and gather trimmed values per column.

    The header line is skipped when present and blank lines are ignored.
    Extra fields are dropped; a short row contributes "" to each column it
    lacks, so every list has one entry per data row.
    """
    columns: list[list[str]] = [[] for _ in range(column_count)]
    with LineReader(csv_path, "statistical analysis") as lines:
        if has_header:
            next(lines, None)
        for _number, text in iter_data_lines(lines):
            fields = tokenize_line(text)
            for index in range(column_count):
                columns[index].append(fields[index] if index < len(fields) else "")
    return columns


def percentile(sorted_values: list[float], p: float) -> float:
    """Linearly interpolated percentile of an ascending sequence.

    ``index = p / 100 * (n - 1)``; when the index falls between two
    elements the result is weighted by its fractional part.

    Args:
        sorted_values: Values in ascending order.
        p: Percentile in [0, 100].

    Returns:
        The interpolated value, or 0.0 for an empty sequence.
    """
    if not sorted_values:
        return 0.0
    index = (p / 100.0) * (len(sorted_values) - 1)
    lower = math.floor(index)
    upper = math.ceil(index)
    low_value = sorted_values[lower]
    high_value = sorted_values[upper]
    if lower == upper or low_value == high_value:
        return low_value
    weight = index - lower
    # high - low can overflow for opposite-sign values near the float limits.
    interpolated = low_value * (1.0 - weight) + high_value * weight
    return min(max(interpolated, low_value), high_value)


def compute_numeric_statistics(values: list[str], column_name: str) -> NumericStatistics:
    """Compute the numeric summary of a continuous column.

    Empty and unparseable values (NaN and infinities included) count as
    missing and are left out of every measure. The standard deviation is
    the population form (divides by n); when squared deviations exceed the
    float range it is reported as infinity.

    Raises:
        StatisticalAnalysisError: If no value parses as a number.
    """
    numbers: list[float] = []
    missing = 0
    for raw in values:
        value = raw.strip()
        parsed = parse_finite_number(value) if value else None
        if parsed is None:
            missing += 1
        else:
            numbers.append(parsed)

    if not numbers:
        raise StatisticalAnalysisError(
            "No valid numerical values found for statistical analysis", column_name
        )

    numbers.sort()
    n = len(numbers)
    mean = sum(x / n for x in numbers)
    variance = sum((x - mean) * (x - mean) for x in numbers) / n
    q1, median, q3 = (percentile(numbers, p) for p in QUARTILES)

    return NumericStatistics(
        min=numbers[0],
        q1=q1,
        median=median,
        q3=q3,
        max=numbers[-1],
        mean=mean,
        stdev=math.sqrt(variance),
        count=n,
        missing_count=missing,
        missing_pct=_percent(missing, len(values)),
    )


def compute_categorical_statistics(values: list[str]) -> CategoricalStatistics:
    """Count distinct values of a categorical column.

    Frequencies are ordered by descending count; equal counts keep the order
    in which the values first appeared. Percentages are relative to the
    non-empty values, while ``missing_pct`` is relative to all values.
    """
    counts: dict[str, int] = {}
    missing = 0
    for raw in values:
        value = raw.strip()
        if not value:
            missing += 1
            continue
        counts[value] = counts.get(value, 0) + 1

    non_empty_total = sum(counts.values())
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    frequencies = [
        ValueFrequency(value=value, count=count, percentage=_percent(count, non_empty_total))
        for value, count in ranked
    ]
    mode = frequencies[0] if frequencies else None

    return CategoricalStatistics(
        unique_count=len(counts),
        value_frequencies=frequencies,
        missing_count=missing,
        missing_pct=_percent(missing, len(values)),
        mode_value=mode.value if mode else None,
        mode_pct=mode.percentage if mode else 0.0,
    )


def analyze_statistics(
    csv_path: str | Path,
    analysis: AnalysisResult,
) -> list[ColumnStatistics]:
    """Compute statistics for every column of an analyzed file.

    Args:
        csv_path: CSV file to read.
        analysis: Structural and type result for the same file.

    Returns:
        One ColumnStatistics per column, in position order.

    Raises:
        StatisticalAnalysisError: If a continuous column has no numeric values.
        FileSystemError: If the file cannot be opened or read.
    """
    all_values = collect_column_values(
        csv_path, analysis.has_header, analysis.total_column_count
    )

    results: list[ColumnStatistics] = []
    for column in analysis.columns:
        values = all_values[column.column_index]
        field_class = column.data_type.field_class
        if field_class is FieldClass.CONTINUOUS:
            numeric = compute_numeric_statistics(values, column.column_name)
            results.append(ColumnStatistics(column=column, field_class=field_class, numeric=numeric))
        else:
            categorical = compute_categorical_statistics(values)
            results.append(
                ColumnStatistics(column=column, field_class=field_class, categorical=categorical)
            )
        logger.debug("Computed {} statistics for {}", field_class, column.column_name)

    logger.info("Computed statistics for {} columns of {}", len(results), Path(csv_path).name)
    return results
