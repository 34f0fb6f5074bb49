"""Plain-text analysis reports."""

from csvscope.reporting.report import (
    render_report,
    report_path_for,
    write_profile_json,
    write_report,
)

__all__ = ["render_report", "report_path_for", "write_report", "write_profile_json"]
