"""Exception hierarchy for csvscope.

Every stage raises one of these and none of them recovers from another
stage's failure. The CLI is the only place that catches CsvScopeError.
"""

from __future__ import annotations


class CsvScopeError(Exception):
    """Base class for all csvscope failures."""


class FileSystemError(CsvScopeError):
    """An open, read, write or directory-create operation failed.

    The underlying OSError is kept on ``cause`` and is also chained as
    ``__cause__`` by the raising site.
    """

    def __init__(self, operation: str, cause: OSError) -> None:
        self.operation = operation
        self.cause = cause
        super().__init__(f"File system operation failed: {operation} - Underlying error: {cause}")


class CsvProcessingError(CsvScopeError):
    """Structural or parse-level problem with the CSV content."""

    def __init__(
        self,
        description: str,
        line_number: int | None = None,
        column: str | None = None,
    ) -> None:
        self.description = description
        self.line_number = line_number
        self.column = column
        line_info = f" at line {line_number}" if line_number is not None else ""
        column_info = f" in column '{column}'" if column is not None else ""
        super().__init__(f"CSV processing failed: {description}{line_info}{column_info}")


class StatisticalAnalysisError(CsvScopeError):
    """Statistics could not be computed for a column."""

    def __init__(self, description: str, column_name: str) -> None:
        self.description = description
        self.column_name = column_name
        super().__init__(f"Statistical analysis failed: {description} for column '{column_name}'")


class ConfigurationError(CsvScopeError):
    """Setup or validation problem not tied to a specific row."""

    def __init__(self, description: str) -> None:
        self.description = description
        super().__init__(f"Configuration error: {description}")


class MetadataError(CsvScopeError):
    """A schema document exists but cannot be parsed or validated."""

    def __init__(self, description: str, path: str) -> None:
        self.description = description
        self.path = path
        super().__init__(f"Metadata operation failed: {description} for file: {path}")
