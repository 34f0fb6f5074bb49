"""Full-column statistics models.

Continuous columns get NumericStatistics, categorical columns get
CategoricalStatistics. ColumnStatistics ties either one to the column
profile it was computed for.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from csvscope.models.profiling import AnalysisResult, ColumnProfile
from csvscope.models.schema import FieldClass


class NumericStatistics(BaseModel):
    """Five-number summary plus mean, population stdev and missing share."""

    min: float = Field(..., description="Smallest parsed value")
    q1: float = Field(..., description="25th percentile")
    median: float = Field(..., description="50th percentile")
    q3: float = Field(..., description="75th percentile")
    max: float = Field(..., description="Largest parsed value")
    mean: float = Field(..., description="Arithmetic mean")
    stdev: float = Field(..., ge=0.0, description="Population standard deviation")
    count: int = Field(..., ge=1, description="Values that parsed as numbers")
    missing_count: int = Field(default=0, ge=0, description="Empty or unparseable values")
    missing_pct: float = Field(..., ge=0.0, le=100.0, description="Missing share of all values")


class ValueFrequency(BaseModel):
    """Frequency entry for a single categorical value."""

    value: str = Field(..., description="The observed value")
    count: int = Field(..., ge=1, description="Number of occurrences")
    percentage: float = Field(
        ..., ge=0.0, le=100.0, description="Share of non-empty values"
    )


class CategoricalStatistics(BaseModel):
    """Distinct-value counts of a categorical column."""

    unique_count: int = Field(..., ge=0, description="Distinct non-empty values")
    value_frequencies: list[ValueFrequency] = Field(
        default_factory=list, description="Values by descending count, ties in first-seen order"
    )
    missing_count: int = Field(default=0, ge=0, description="Empty values")
    missing_pct: float = Field(..., ge=0.0, le=100.0, description="Empty share of all values")
    mode_value: str | None = Field(default=None, description="Most frequent value")
    mode_pct: float = Field(default=0.0, ge=0.0, le=100.0, description="Share of the mode")

    @property
    def total_count(self) -> int:
        return sum(f.count for f in self.value_frequencies) + self.missing_count


class ColumnStatistics(BaseModel):
    """Statistics for one column, numeric or categorical by field class."""

    column: ColumnProfile = Field(..., description="Sampling-stage profile of the column")
    field_class: FieldClass = Field(..., description="Statistics family applied")
    numeric: NumericStatistics | None = Field(default=None)
    categorical: CategoricalStatistics | None = Field(default=None)

    @model_validator(mode="after")
    def _check_family(self) -> ColumnStatistics:
        if self.field_class is FieldClass.CONTINUOUS:
            if self.numeric is None or self.categorical is not None:
                raise ValueError("Continuous columns carry numeric statistics only")
        elif self.categorical is None or self.numeric is not None:
            raise ValueError("Categorical columns carry categorical statistics only")
        return self


class CsvProfile(BaseModel):
    """Everything known about a CSV file after all analysis stages."""

    analysis: AnalysisResult = Field(..., description="Structure and type inference")
    statistics: list[ColumnStatistics] = Field(
        default_factory=list, description="Per-column statistics in position order"
    )
