"""Tests for the plain-text analysis report."""

from __future__ import annotations

from pathlib import Path

import pytest

from csvscope.errors import ConfigurationError, FileSystemError
from csvscope.models.statistics import CsvProfile
from csvscope.profiling.analyzer import profile_csv_file
from csvscope.reporting.report import (
    render_report,
    report_path_for,
    write_profile_json,
    write_report,
)


@pytest.fixture
def profile(tmp_path: Path) -> CsvProfile:
    path = tmp_path / "people.csv"
    path.write_text("name,age,active\nAlice,30,true\nBob,25,false\nCarol,,true\n")
    return profile_csv_file(path)


class TestReportPathFor:
    def test_suffix(self, tmp_path: Path) -> None:
        assert report_path_for(tmp_path / "people.csv") == tmp_path / "people.csv_analysis.txt"

    def test_no_stem(self) -> None:
        with pytest.raises(ConfigurationError):
            report_path_for("/")


class TestRenderReport:
    def test_contains_sections(self, profile: CsvProfile) -> None:
        text = render_report(profile)
        assert "CSV Structure" in text
        assert "Column Types" in text
        assert "2. age (integer - continuous)" in text
        assert "q2: 27.500" in text
        assert "Mode: true (66.7%)" in text

    def test_plain_text_only(self, profile: CsvProfile) -> None:
        assert "\x1b[" not in render_report(profile)

    def test_top_n_note(self, profile: CsvProfile) -> None:
        text = render_report(profile, top_n=1)
        assert "showing top 1 of 3 unique values" in text


class TestWriteReport:
    def test_default_location(self, profile: CsvProfile) -> None:
        path = write_report(profile)
        assert path == profile.analysis.source_path.parent / "people.csv_analysis.txt"
        assert "Column Types" in path.read_text()

    def test_explicit_location(self, profile: CsvProfile, tmp_path: Path) -> None:
        target = tmp_path / "reports" / "out.txt"
        assert write_report(profile, report_path=target) == target
        assert target.exists()

    def test_unwritable_location(self, profile: CsvProfile, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        with pytest.raises(FileSystemError):
            write_report(profile, report_path=blocker / "out.txt")


class TestWriteProfileJson:
    def test_round_trips_through_model(self, profile: CsvProfile, tmp_path: Path) -> None:
        path = write_profile_json(profile, tmp_path / "json" / "profile.json")
        assert CsvProfile.model_validate_json(path.read_text()) == profile

    def test_unwritable_location(self, profile: CsvProfile, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        with pytest.raises(FileSystemError):
            write_profile_json(profile, blocker / "profile.json")
