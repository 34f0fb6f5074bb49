"""Structural analysis and sampling result models.

These models represent the output of the scanning and sampling stages,
before any full-column statistics are computed.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from csvscope.models.schema import ColumnDataType


class StructureScan(BaseModel):
    """Outcome of the single structural pass over a file."""

    has_header: bool = Field(..., description="Whether the first line was judged a header")
    column_count: int = Field(..., ge=1, description="Comma-delimited segments on the first line")
    data_row_count: int = Field(..., ge=0, description="Non-blank data lines")


class ColumnProfile(BaseModel):
    """Name, inferred type and value counts of one column.

    Counts cover the sampled rows only, so ``non_empty_count + empty_count``
    equals the number of data rows the sampler visited.
    """

    column_index: int = Field(..., ge=0, description="0-based column position")
    column_name: str = Field(..., description="Header value or column_<n> placeholder")
    data_type: ColumnDataType = Field(
        default=ColumnDataType.STRING, description="Type inferred from the sample"
    )
    non_empty_count: int = Field(default=0, ge=0, description="Non-empty sampled values")
    empty_count: int = Field(default=0, ge=0, description="Empty sampled values")
    sample_values: list[str] = Field(
        default_factory=list, description="Up to five non-empty values in file order"
    )

    @property
    def sampled_count(self) -> int:
        return self.non_empty_count + self.empty_count


class AnalysisResult(BaseModel):
    """Structural and type-inference result for one CSV file."""

    source_path: Path = Field(..., description="Analyzed CSV file")
    has_header: bool = Field(..., description="Whether the first line is a header")
    total_column_count: int = Field(..., ge=1, description="Number of columns")
    total_data_row_count: int = Field(
        ..., ge=0, description="Non-blank lines, header excluded"
    )
    columns: list[ColumnProfile] = Field(
        default_factory=list, description="One profile per column, in position order"
    )
    schema_path: Path | None = Field(
        default=None, description="Schema document written for this file"
    )
    schema_existed: bool = Field(
        default=False, description="A schema document was present before this run"
    )


class DescribeResult(BaseModel):
    """Headers and row count of a CSV file whose first line is a header."""

    source_path: Path = Field(..., description="Described CSV file")
    headers: list[str] = Field(default_factory=list, description="First-line fields")
    data_row_count: int = Field(..., ge=0, description="Non-blank lines after the header")

    @property
    def column_count(self) -> int:
        return len(self.headers)


class RowLookup(BaseModel):
    """A single data row paired with the header line."""

    row_index: int = Field(..., ge=0, description="0-based data row index, blank lines skipped")
    headers: list[str] = Field(default_factory=list, description="First-line fields")
    values: list[str] = Field(default_factory=list, description="Fields of the requested row")

    def as_pairs(self) -> list[tuple[str, str]]:
        """Header/value pairs; values missing from a short row become empty."""
        return [
            (header, self.values[i] if i < len(self.values) else "")
            for i, header in enumerate(self.headers)
        ]
