"""Structural analysis, type sampling and statistics for CSV files."""

from csvscope.profiling.analyzer import analyze_csv_file, profile_csv_file, validate_csv_path
from csvscope.profiling.header import HeaderStrategy, TwoLineNumericHeuristic
from csvscope.profiling.inspection import describe_csv, read_csv_row
from csvscope.profiling.sampler import detect_column_type, sample_column_types
from csvscope.profiling.scanner import scan_structure
from csvscope.profiling.statistics import (
    analyze_statistics,
    compute_categorical_statistics,
    compute_numeric_statistics,
    percentile,
)

__all__ = [
    "analyze_csv_file",
    "profile_csv_file",
    "validate_csv_path",
    "HeaderStrategy",
    "TwoLineNumericHeuristic",
    "scan_structure",
    "sample_column_types",
    "detect_column_type",
    "analyze_statistics",
    "compute_numeric_statistics",
    "compute_categorical_statistics",
    "percentile",
    "describe_csv",
    "read_csv_row",
]
