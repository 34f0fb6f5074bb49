"""Header detection strategies.

The structural scan only ever shows a strategy the first two lines of a
file. Any object with a matching ``classify`` method can be passed to
``scan_structure``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from csvscope.io.tokenizer import split_plain
from csvscope.profiling.values import is_numeric


@runtime_checkable
class HeaderStrategy(Protocol):
    """Decides whether the first line of a file is a header."""

    def classify(self, first_line: str, second_line: str | None) -> bool:
        """Return True when ``first_line`` should be treated as a header.

        ``second_line`` is None for a one-line file.
        """
        ...


def numeric_field_count(line: str) -> int:
    """Number of comma-separated fields that parse as a number."""
    return sum(1 for field in split_plain(line) if is_numeric(field))


class TwoLineNumericHeuristic:
    """First line is a header when it has fewer numeric fields than the second.

    A lone first line is never a header. Two lines with the same number of
    numeric fields are treated as data, so an all-text file is reported
    headerless. This is a best-effort guess for small or unusual files.
    """

    def classify(self, first_line: str, second_line: str | None) -> bool:
        if second_line is None:
            return False
        return numeric_field_count(first_line) < numeric_field_count(second_line)
