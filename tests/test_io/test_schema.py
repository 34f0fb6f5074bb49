"""Tests for schema document writing and reading."""

from __future__ import annotations

import tomllib
from pathlib import Path

import pytest

from csvscope.errors import ConfigurationError, FileSystemError, MetadataError
from csvscope.io.schema import (
    build_schema_document,
    read_schema,
    schema_path_for,
    write_schema,
)
from csvscope.models.profiling import ColumnProfile
from csvscope.models.schema import ColumnDataType

# --- Fixtures ---


@pytest.fixture
def profiles() -> list[ColumnProfile]:
    return [
        ColumnProfile(
            column_index=0,
            column_name="name",
            data_type=ColumnDataType.STRING,
            non_empty_count=3,
            empty_count=0,
            sample_values=["Alice", "Bob", "Carol"],
        ),
        ColumnProfile(
            column_index=1,
            column_name='age "years"',
            data_type=ColumnDataType.INTEGER,
            non_empty_count=2,
            empty_count=1,
            sample_values=["30", "25"],
        ),
    ]


class TestSchemaPathFor:
    def test_same_directory_with_suffix(self, tmp_path: Path) -> None:
        source = tmp_path / "sales.csv"
        assert schema_path_for(source) == tmp_path / "sales.csv_metadata.toml"

    def test_relative_path(self) -> None:
        assert schema_path_for("data/people.csv") == Path("data/people.csv_metadata.toml")

    def test_no_stem_raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            schema_path_for("/")


class TestWriteSchema:
    def test_document_contract(self, tmp_path: Path, profiles: list[ColumnProfile]) -> None:
        path = tmp_path / "people.csv_metadata.toml"
        write_schema(path, profiles)

        data = tomllib.loads(path.read_text())
        assert data["total_columns"] == 2
        assert data["column_1"] == {
            "name": "name",
            "data_type": "string",
            "column_index": 0,
            "non_empty_values": 3,
            "empty_values": 0,
        }
        assert data["column_2"]["data_type"] == "integer"
        assert data["column_2"]["name"] == 'age "years"'
        assert data["column_2"]["empty_values"] == 1

    def test_has_comment_header(self, tmp_path: Path, profiles: list[ColumnProfile]) -> None:
        path = tmp_path / "x.csv_metadata.toml"
        write_schema(path, profiles)
        assert path.read_text().startswith("# CSV Metadata File")

    def test_creates_parent_directories(
        self, tmp_path: Path, profiles: list[ColumnProfile]
    ) -> None:
        path = tmp_path / "nested" / "deeper" / "x.csv_metadata.toml"
        write_schema(path, profiles)
        assert path.exists()

    def test_overwrites_without_merge(
        self, tmp_path: Path, profiles: list[ColumnProfile]
    ) -> None:
        path = tmp_path / "x.csv_metadata.toml"
        write_schema(path, profiles)
        write_schema(path, profiles[:1])

        data = tomllib.loads(path.read_text())
        assert data["total_columns"] == 1
        assert "column_2" not in data

    def test_unwritable_destination_raises(
        self, tmp_path: Path, profiles: list[ColumnProfile]
    ) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        with pytest.raises(FileSystemError):
            write_schema(blocker / "x.csv_metadata.toml", profiles)


class TestReadSchema:
    def test_reads_back_written_document(
        self, tmp_path: Path, profiles: list[ColumnProfile]
    ) -> None:
        path = tmp_path / "x.csv_metadata.toml"
        written = write_schema(path, profiles)
        assert read_schema(path) == written

    def test_accepts_type_aliases(self, tmp_path: Path) -> None:
        path = tmp_path / "x.csv_metadata.toml"
        path.write_text(
            "total_columns = 1\n\n[column_1]\n"
            'name = "id"\ndata_type = "INT"\ncolumn_index = 0\n'
            "non_empty_values = 4\nempty_values = 0\n"
        )
        document = read_schema(path)
        assert document.columns["column_1"].data_type is ColumnDataType.INTEGER

    def test_unknown_type_tag_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "x.csv_metadata.toml"
        path.write_text(
            "total_columns = 1\n\n[column_1]\n"
            'name = "id"\ndata_type = "uuid"\ncolumn_index = 0\n'
            "non_empty_values = 4\nempty_values = 0\n"
        )
        with pytest.raises(MetadataError, match="uuid"):
            read_schema(path)

    def test_malformed_toml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "x.csv_metadata.toml"
        path.write_text("total_columns = = 3\n")
        with pytest.raises(MetadataError):
            read_schema(path)

    def test_mismatched_section_key_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "x.csv_metadata.toml"
        path.write_text(
            "total_columns = 1\n\n[column_3]\n"
            'name = "id"\ndata_type = "string"\ncolumn_index = 0\n'
            "non_empty_values = 1\nempty_values = 0\n"
        )
        with pytest.raises(MetadataError):
            read_schema(path)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileSystemError):
            read_schema(tmp_path / "absent.csv_metadata.toml")


class TestBuildSchemaDocument:
    def test_keys_are_one_based(self, profiles: list[ColumnProfile]) -> None:
        document = build_schema_document(profiles)
        assert list(document.columns) == ["column_1", "column_2"]
        assert document.total_columns == 2
