"""Column type vocabulary and the persisted schema document.

The schema document is what ``<stem>.csv_metadata.toml`` holds: a
``total_columns`` count and one ``column_<n>`` table per column.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field, model_validator

# Accepted spellings when reading a type tag back from a schema document.
_TYPE_ALIASES: dict[str, str] = {
    "boolean": "boolean",
    "bool": "boolean",
    "integer": "integer",
    "int": "integer",
    "float": "float",
    "decimal": "float",
    "number": "float",
    "string": "string",
    "text": "string",
    "str": "string",
}


class FieldClass(StrEnum):
    """Statistics family applied to a column."""

    CONTINUOUS = "continuous"
    CATEGORICAL = "categorical"


class ColumnDataType(StrEnum):
    """Inferred data type of a CSV column.

    STRING is the fallback when no other type reaches the voting threshold.
    """

    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"

    @property
    def field_class(self) -> FieldClass:
        """Numeric types are continuous, everything else categorical."""
        if self in (ColumnDataType.INTEGER, ColumnDataType.FLOAT):
            return FieldClass.CONTINUOUS
        return FieldClass.CATEGORICAL

    @classmethod
    def from_tag(cls, tag: str) -> ColumnDataType | None:
        """Resolve a serialized type tag or one of its aliases.

        Args:
            tag: Tag text such as "integer", "INT" or "text".

        Returns:
            The matching ColumnDataType, or None for an unknown tag.
        """
        canonical = _TYPE_ALIASES.get(tag.strip().lower())
        return cls(canonical) if canonical is not None else None


class SchemaColumn(BaseModel):
    """One ``[column_<n>]`` table of the schema document."""

    name: str = Field(..., description="Header value or generated placeholder")
    data_type: ColumnDataType = Field(..., description="Inferred column type")
    column_index: int = Field(..., ge=0, description="0-based column position")
    non_empty_values: int = Field(..., ge=0, description="Non-empty values seen while sampling")
    empty_values: int = Field(..., ge=0, description="Empty values seen while sampling")


class SchemaDocument(BaseModel):
    """Key/value description of a source file's inferred column structure."""

    total_columns: int = Field(..., ge=0, description="Number of columns in the source file")
    columns: dict[str, SchemaColumn] = Field(
        default_factory=dict, description="Column tables keyed by column_<1-based index>"
    )

    @model_validator(mode="after")
    def _check_keys(self) -> SchemaDocument:
        for key, column in self.columns.items():
            expected = section_key(column.column_index)
            if key != expected:
                msg = f"Section {key!r} holds column_index {column.column_index}, expected {expected!r}"
                raise ValueError(msg)
        return self

    def ordered_columns(self) -> list[SchemaColumn]:
        """Columns sorted by position."""
        return sorted(self.columns.values(), key=lambda c: c.column_index)


def section_key(column_index: int) -> str:
    """Schema section name for a 0-based column index."""
    return f"column_{column_index + 1}"
