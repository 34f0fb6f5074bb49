"""Line tokenizer for comma-delimited text.

Two routines live here on purpose. ``tokenize_line`` honours a simple
double-quote toggle and is used wherever field values matter.
``count_delimited_fields`` and ``split_plain`` ignore quoting entirely and
are used by the structural scan, which only needs a cheap column count and
a rough numeric sniff of the first two lines.

Escaped quotes inside quoted fields are not supported. An unbalanced quote
leaves the rest of the line inside one field without raising.
"""

from __future__ import annotations

DELIMITER = ","
QUOTE = '"'


def strip_line_ending(line: str) -> str:
    """Remove a trailing ``\\n`` or ``\\r\\n`` left by file iteration."""
    return line.rstrip("\r\n")


def tokenize_line(line: str) -> list[str]:
    """Split one line into trimmed field strings.

    Every ``"`` toggles the quoted state and is dropped from the output.
    A comma outside quotes ends the current field. The buffer left at end
    of line is always emitted, so an empty line yields ``[""]`` and a
    trailing comma yields a trailing empty field.

    Args:
        line: Raw line text, with or without its line ending.

    Returns:
        Ordered list of fields, each stripped of surrounding whitespace.
    """
    fields: list[str] = []
    buffer: list[str] = []
    within_quotes = False

    for char in strip_line_ending(line):
        if char == QUOTE:
            within_quotes = not within_quotes
        elif char == DELIMITER and not within_quotes:
            fields.append("".join(buffer).strip())
            buffer = []
        else:
            buffer.append(char)

    fields.append("".join(buffer).strip())
    return fields


def count_delimited_fields(line: str) -> int:
    """Count comma-separated segments, ignoring quotes."""
    return strip_line_ending(line).count(DELIMITER) + 1


def split_plain(line: str) -> list[str]:
    """Split on every comma and trim each segment, ignoring quotes."""
    return [segment.strip() for segment in strip_line_ending(line).split(DELIMITER)]
