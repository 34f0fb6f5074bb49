"""Unit tests for strict numeric and boolean recognition."""

from __future__ import annotations

import math

from csvscope.profiling.values import (
    is_boolean_token,
    is_numeric,
    parse_finite_number,
    parse_float64,
    parse_int64,
)


class TestParseInt64:
    def test_plain_and_signed(self) -> None:
        assert parse_int64("42") == 42
        assert parse_int64("-7") == -7
        assert parse_int64("+3") == 3

    def test_rejects_underscores_and_spaces(self) -> None:
        assert parse_int64("1_000") is None
        assert parse_int64(" 5") is None

    def test_rejects_decimal(self) -> None:
        assert parse_int64("1.0") is None

    def test_range_limits(self) -> None:
        assert parse_int64("9223372036854775807") == 2**63 - 1
        assert parse_int64("9223372036854775808") is None
        assert parse_int64("-9223372036854775808") == -(2**63)


class TestParseFloat64:
    def test_decimal_forms(self) -> None:
        assert parse_float64("2.5") == 2.5
        assert parse_float64(".5") == 0.5
        assert parse_float64("5.") == 5.0
        assert parse_float64("1e3") == 1000.0
        assert parse_float64("-1.5E-2") == -0.015

    def test_special_values(self) -> None:
        assert parse_float64("inf") == math.inf
        assert parse_float64("-Infinity") == -math.inf
        assert math.isnan(parse_float64("NaN"))

    def test_rejects_text(self) -> None:
        assert parse_float64("abc") is None
        assert parse_float64("") is None
        assert parse_float64("1_0.5") is None

    def test_finite_number_rejects_nan_and_infinities(self) -> None:
        assert parse_finite_number("nan") is None
        assert parse_finite_number("inf") is None
        assert parse_finite_number("-Infinity") is None
        assert parse_finite_number("1e308") == 1e308
        assert parse_finite_number("3") == 3.0


class TestBooleanAndNumeric:
    def test_boolean_tokens_case_insensitive(self) -> None:
        for token in ["true", "FALSE", "Yes", "no", "1", "0", "T", "f", "y", "N"]:
            assert is_boolean_token(token)

    def test_non_boolean(self) -> None:
        assert not is_boolean_token("maybe")
        assert not is_boolean_token("2")

    def test_is_numeric_trims(self) -> None:
        assert is_numeric(" 30 ")
        assert is_numeric("2.5")
        assert not is_numeric("Alice")
        assert not is_numeric("")
