"""Unit tests for the coerce module."""

from __future__ import annotations

import pytest

from envjson.core.coerce import coerce_scalar


class TestCoerceScalar:
    """Test suite for coerce_scalar."""

    def test_booleans(self):
        """Test exact boolean literals."""
        assert coerce_scalar("true") is True
        assert coerce_scalar("false") is False

    @pytest.mark.parametrize("raw", ["True", "FALSE", "yes", "on", " true"])
    def test_boolean_is_case_sensitive(self, raw):
        """Test that only lower-case literals become booleans."""
        assert coerce_scalar(raw) == raw

    @pytest.mark.parametrize(
        "raw, expected",
        [("1", 1), ("-42", -42), ("+7", 7), ("007", 7), ("0", 0)],
    )
    def test_integers(self, raw, expected):
        """Test base-10 integers."""
        value = coerce_scalar(raw)
        assert value == expected
        assert type(value) is int

    def test_big_integer(self):
        """Test integers beyond 64 bits stay integers."""
        assert coerce_scalar("123456789012345678901234567890") == 123456789012345678901234567890

    @pytest.mark.parametrize(
        "raw, expected",
        [("1.1", 1.1), ("-2.5", -2.5), ("1e3", 1000.0), (".5", 0.5), ("5.", 5.0), ("2.5E-1", 0.25)],
    )
    def test_floats(self, raw, expected):
        """Test decimal and exponent floats."""
        value = coerce_scalar(raw)
        assert value == expected
        assert type(value) is float

    @pytest.mark.parametrize("raw", ["inf", "nan", "-Infinity", "1e400"])
    def test_non_finite_stays_string(self, raw):
        """Test that values JSON cannot represent are kept as strings."""
        assert coerce_scalar(raw) == raw

    @pytest.mark.parametrize("raw", [" 1", "1 ", "1_000", "0x10", "1.2.3", "", "string"])
    def test_fallback_string(self, raw):
        """Test that anything else is returned unchanged."""
        assert coerce_scalar(raw) == raw

    def test_round_trip_examples(self):
        """Test the canonical coercion examples."""
        assert coerce_scalar("true") is True
        assert coerce_scalar("false") is False
        assert coerce_scalar("1") == 1
        assert coerce_scalar("1.1") == 1.1
        assert coerce_scalar("string") == "string"

    def test_overlong_digit_run(self):
        """Test digit strings longer than int() accepts never raise."""
        raw = "9" * 5000
        assert coerce_scalar(raw) == raw
        assert coerce_scalar("-" + raw) == "-" + raw
