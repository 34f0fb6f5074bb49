"""Tests for the structural scanner and the header heuristic."""

from __future__ import annotations

from pathlib import Path

import pytest

from csvscope.errors import CsvProcessingError, FileSystemError
from csvscope.profiling.header import (
    HeaderStrategy,
    TwoLineNumericHeuristic,
    numeric_field_count,
)
from csvscope.profiling.scanner import scan_structure


def _write(tmp_path: Path, text: str, name: str = "data.csv") -> Path:
    path = tmp_path / name
    path.write_text(text)
    return path


class TestNumericFieldCount:
    def test_counts_int_and_float(self) -> None:
        assert numeric_field_count("Alice,30,2.5,true") == 2

    def test_header_line_has_none(self) -> None:
        assert numeric_field_count("name,age,active") == 0


class TestTwoLineNumericHeuristic:
    def test_text_then_numbers_is_header(self) -> None:
        assert TwoLineNumericHeuristic().classify("name,age", "Alice,30") is True

    def test_equal_numeric_counts_is_not_header(self) -> None:
        assert TwoLineNumericHeuristic().classify("1,2", "3,4") is False
        assert TwoLineNumericHeuristic().classify("a,b", "c,d") is False

    def test_single_line_is_not_header(self) -> None:
        assert TwoLineNumericHeuristic().classify("name,age", None) is False

    def test_satisfies_protocol(self) -> None:
        assert isinstance(TwoLineNumericHeuristic(), HeaderStrategy)


class TestScanStructure:
    def test_header_plus_rows(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "name,age,active\nAlice,30,true\nBob,25,false\nCarol,,true\n")
        scan = scan_structure(path)
        assert scan.has_header is True
        assert scan.column_count == 3
        assert scan.data_row_count == 3

    @pytest.mark.parametrize("n_rows", [0, 1, 2, 7])
    def test_header_plus_n_rows_counts_n(self, tmp_path: Path, n_rows: int) -> None:
        lines = ["id,value"] + [f"{i},{i * 1.5}" for i in range(n_rows)]
        path = _write(tmp_path, "\n".join(lines) + "\n")
        scan = scan_structure(path, header_strategy=_AlwaysHeader())
        assert scan.data_row_count == n_rows

    def test_no_header_counts_first_line(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "1,2\n3,4\n5,6\n")
        scan = scan_structure(path)
        assert scan.has_header is False
        assert scan.data_row_count == 3

    def test_blank_lines_not_counted(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "name,age\nAlice,30\n\n   \nBob,25\n\n")
        scan = scan_structure(path)
        assert scan.data_row_count == 2

    def test_single_line_file_has_no_header(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "name,age,city\n")
        scan = scan_structure(path)
        assert scan.has_header is False
        assert scan.column_count == 3
        assert scan.data_row_count == 1

    def test_no_trailing_newline(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "a,b\n1,2")
        scan = scan_structure(path)
        assert scan.has_header is True
        assert scan.data_row_count == 1

    def test_column_count_ignores_quotes(self, tmp_path: Path) -> None:
        path = _write(tmp_path, '"last, first",age\n"Smith, J",40\n')
        assert scan_structure(path).column_count == 3

    def test_empty_file_raises(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "")
        with pytest.raises(CsvProcessingError, match="empty"):
            scan_structure(path)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileSystemError):
            scan_structure(tmp_path / "nope.csv")

    def test_custom_strategy_is_used(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "1,2\n3,4\n")
        scan = scan_structure(path, header_strategy=_AlwaysHeader())
        assert scan.has_header is True
        assert scan.data_row_count == 1


class _AlwaysHeader:
    def classify(self, first_line: str, second_line: str | None) -> bool:
        return True
