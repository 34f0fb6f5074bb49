"""Recognition of typed values in field text.

Python's int() and float() are more lenient than a 64-bit parse should be
(they accept digit-group underscores and surrounding whitespace), so the
text is checked against a strict grammar before conversion.
"""

from __future__ import annotations

import math
import re

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

BOOLEAN_TOKENS: frozenset[str] = frozenset(
    {"true", "false", "yes", "no", "1", "0", "t", "f", "y", "n"}
)

_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(
    r"^[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)$",
    re.IGNORECASE,
)


def parse_int64(text: str) -> int | None:
    """Parse text as a signed 64-bit integer, or return None."""
    if not _INTEGER_RE.match(text):
        return None
    value = int(text)
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def parse_float64(text: str) -> float | None:
    """Parse text as a 64-bit float, or return None.

    Accepts decimal and exponent forms plus inf/infinity/nan spellings.
    """
    if not _FLOAT_RE.match(text):
        return None
    return float(text)


def parse_finite_number(text: str) -> float | None:
    """Parse text for statistics: like parse_float64 but NaN and infinities are rejected."""
    value = parse_float64(text)
    if value is None or not math.isfinite(value):
        return None
    return value


def is_boolean_token(text: str) -> bool:
    """True for the recognised boolean spellings, case-insensitively."""
    return text.strip().lower() in BOOLEAN_TOKENS


def is_numeric(text: str) -> bool:
    """True when trimmed text parses as a 64-bit integer or float."""
    trimmed = text.strip()
    return parse_int64(trimmed) is not None or parse_float64(trimmed) is not None
