"""Schema document persistence.

The schema document sits next to its source as
``<stem>.csv_metadata.toml``. Each analysis regenerates it completely;
there is no merge with a previous document.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import tomli_w
from loguru import logger
from pydantic import ValidationError

from csvscope.errors import ConfigurationError, FileSystemError, MetadataError
from csvscope.models.profiling import ColumnProfile
from csvscope.models.schema import (
    ColumnDataType,
    SchemaColumn,
    SchemaDocument,
    section_key,
)

SCHEMA_FILE_SUFFIX = "csv_metadata.toml"

_HEADER_COMMENT = "# CSV Metadata File\n# Generated by csvscope\n\n"


def schema_path_for(source_path: str | Path) -> Path:
    """Return the schema document path for a CSV file.

    Raises:
        ConfigurationError: If no filename stem can be derived from the path.
    """
    source = Path(source_path)
    if not source.stem:
        raise ConfigurationError(f"Cannot determine filename from CSV path: {source}")
    return source.parent / f"{source.stem}.{SCHEMA_FILE_SUFFIX}"


def build_schema_document(columns: list[ColumnProfile]) -> SchemaDocument:
    """Map sampling profiles onto the schema document layout."""
    return SchemaDocument(
        total_columns=len(columns),
        columns={
            section_key(c.column_index): SchemaColumn(
                name=c.column_name,
                data_type=c.data_type,
                column_index=c.column_index,
                non_empty_values=c.non_empty_count,
                empty_values=c.empty_count,
            )
            for c in columns
        },
    )


def dump_schema(document: SchemaDocument) -> str:
    """Serialize a schema document to TOML text."""
    payload: dict[str, Any] = {"total_columns": document.total_columns}
    for column in document.ordered_columns():
        payload[section_key(column.column_index)] = {
            "name": column.name,
            "data_type": column.data_type.value,
            "column_index": column.column_index,
            "non_empty_values": column.non_empty_values,
            "empty_values": column.empty_values,
        }
    return _HEADER_COMMENT + tomli_w.dumps(payload)


def write_schema(schema_path: str | Path, columns: list[ColumnProfile]) -> SchemaDocument:
    """Write (overwriting) the schema document for a set of column profiles.

    Parent directories are created when missing. A failure part-way through
    may leave a truncated file behind.

    Args:
        schema_path: Destination path of the schema document.
        columns: Column profiles from the sampling stage.

    Returns:
        The SchemaDocument that was written.

    Raises:
        FileSystemError: If the directory cannot be created or the file written.
    """
    path = Path(schema_path)
    document = build_schema_document(columns)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileSystemError(
            f"Failed to create metadata file parent directory: {path.parent}", e
        ) from e

    try:
        path.write_text(dump_schema(document), encoding="utf-8")
    except OSError as e:
        raise FileSystemError(f"Failed to write metadata file: {path}", e) from e

    logger.info("Wrote schema for {} columns to {}", document.total_columns, path)
    return document


def read_schema(schema_path: str | Path) -> SchemaDocument:
    """Load and validate a schema document.

    Type tags are matched case-insensitively and accept the usual aliases
    ("int", "text", ...), so hand-edited documents still load.

    Raises:
        FileSystemError: If the file cannot be read.
        MetadataError: If the TOML is malformed or fails validation.
    """
    path = Path(schema_path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FileSystemError(f"Failed to read metadata file: {path}", e) from e

    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as e:
        raise MetadataError(f"Invalid TOML ({e})", str(path)) from e

    if "total_columns" not in data:
        raise MetadataError("Missing total_columns", str(path))

    columns: dict[str, dict[str, Any]] = {}
    for key, section in data.items():
        if key == "total_columns":
            continue
        if not isinstance(section, dict):
            raise MetadataError(f"Unexpected top-level key {key!r}", str(path))
        tag = str(section.get("data_type", ""))
        data_type = ColumnDataType.from_tag(tag)
        if data_type is None:
            raise MetadataError(f"Unknown data_type {tag!r} in section {key!r}", str(path))
        columns[key] = {**section, "data_type": data_type}

    try:
        document = SchemaDocument(total_columns=data["total_columns"], columns=columns)
    except ValidationError as e:
        raise MetadataError(f"Schema validation failed: {e}", str(path)) from e

    logger.debug("Loaded schema with {} columns from {}", document.total_columns, path)
    return document
