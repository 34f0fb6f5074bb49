"""Pydantic data models shared across all csvscope components.

All models are re-exported here for convenient imports:
    from csvscope.models import AnalysisResult, ColumnProfile, NumericStatistics
"""

from csvscope.models.profiling import (
    AnalysisResult,
    ColumnProfile,
    DescribeResult,
    RowLookup,
    StructureScan,
)
from csvscope.models.schema import (
    ColumnDataType,
    FieldClass,
    SchemaColumn,
    SchemaDocument,
    section_key,
)
from csvscope.models.statistics import (
    CategoricalStatistics,
    ColumnStatistics,
    CsvProfile,
    NumericStatistics,
    ValueFrequency,
)

__all__ = [
    # schema
    "ColumnDataType",
    "FieldClass",
    "SchemaColumn",
    "SchemaDocument",
    "section_key",
    # profiling
    "StructureScan",
    "ColumnProfile",
    "AnalysisResult",
    "DescribeResult",
    "RowLookup",
    # statistics
    "NumericStatistics",
    "ValueFrequency",
    "CategoricalStatistics",
    "ColumnStatistics",
    "CsvProfile",
]
