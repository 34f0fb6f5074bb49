"""Streaming line access to a source file.

Every analysis stage opens the file through LineReader so that I/O and
decoding failures surface as csvscope errors with the operation spelled
out. Only one line is resident at a time.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from types import TracebackType
from typing import IO

from loguru import logger

from csvscope.errors import CsvProcessingError, FileSystemError
from csvscope.io.tokenizer import strip_line_ending


class LineReader:
    """Context manager yielding ``(line_number, text)`` pairs.

    Line numbers are 1-based physical line numbers. Text has its line
    ending removed but is otherwise untouched.

    Usage:
        with LineReader(path, "structural scan") as lines:
            first = next(lines, None)
            for number, text in lines:
                ...
    """

    def __init__(self, path: str | Path, purpose: str, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.purpose = purpose
        self.encoding = encoding
        self._handle: IO[str] | None = None

    def __enter__(self) -> Iterator[tuple[int, str]]:
        try:
            self._handle = self.path.open("r", encoding=self.encoding)
        except OSError as e:
            raise FileSystemError(
                f"Failed to open CSV file for {self.purpose}: {self.path}", e
            ) from e
        logger.debug("Opened {} for {}", self.path.name, self.purpose)
        return self._iterate(self._handle)

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def _iterate(self, handle: IO[str]) -> Iterator[tuple[int, str]]:
        line_number = 0
        while True:
            try:
                raw = handle.readline()
            except UnicodeDecodeError as e:
                raise CsvProcessingError(
                    f"Cannot decode {self.path.name} as {self.encoding} during {self.purpose}",
                    line_number=line_number + 1,
                ) from e
            except OSError as e:
                raise FileSystemError(
                    f"Failed to read CSV line {line_number + 1} during {self.purpose}", e
                ) from e
            if not raw:
                return
            line_number += 1
            yield line_number, strip_line_ending(raw)


def is_blank(text: str) -> bool:
    """True when a line holds nothing but whitespace."""
    return not text.strip()


def iter_data_lines(
    lines: Iterator[tuple[int, str]],
) -> Iterator[tuple[int, str]]:
    """Filter a LineReader stream down to non-blank lines."""
    for number, text in lines:
        if not is_blank(text):
            yield number, text
