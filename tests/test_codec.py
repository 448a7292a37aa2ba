"""Tests for the value codecs.

Covers:
- Canonical text of each value type
- Lenient decoding of malformed text
- decode(encode(v)) == v for representable values
"""

import math

import pytest
from hypothesis import given, strategies as st

from cliparams.parameters import codec
from cliparams.parameters.codec import (
    BOOLEAN,
    DOUBLE,
    DOUBLE_SEQUENCE,
    FLOAT,
    FLOAT_SEQUENCE,
    INTEGER,
    INTEGER_SEQUENCE,
    TEXT,
    TEXT_SEQUENCE,
)

# Items that survive the comma-joined sequence form
_sequence_text = st.text().filter(lambda s: "," not in s)
_text_lists = st.lists(_sequence_text).filter(lambda items: not items or items[-1] != "")


class TestBooleanCodec:
    """Tests for boolean text."""

    def test_encode(self):
        """Booleans are written as true/false."""
        assert BOOLEAN.encode(True) == "true"
        assert BOOLEAN.encode(False) == "false"

    @pytest.mark.parametrize("text", ["true", "yes", "TRUE", "Yes", "1", "7"])
    def test_decode_true(self, text):
        assert BOOLEAN.decode(text) is True

    @pytest.mark.parametrize("text", ["false", "no", "No", "0", "-3", "", "maybe"])
    def test_decode_false(self, text):
        assert BOOLEAN.decode(text) is False

    def test_coerce_text(self):
        """Assigning text goes through the parser, not bool()."""
        assert BOOLEAN.coerce("false") is False
        assert BOOLEAN.coerce(1) is True


class TestScalarCodecs:
    """Tests for integer, float, double and text."""

    def test_integer_prefix(self):
        """Only the leading integer is read."""
        assert INTEGER.decode("42") == 42
        assert INTEGER.decode("  -7 apples") == -7
        assert INTEGER.decode("3.9") == 3

    def test_integer_invalid_is_zero(self):
        assert INTEGER.decode("abc") == 0
        assert INTEGER.decode("") == 0

    def test_double_text(self):
        assert DOUBLE.encode(0.333) == "0.333"
        assert DOUBLE.encode(2) == "2.0"
        assert DOUBLE.decode("1e-3") == 0.001
        assert DOUBLE.decode("2.5mm") == 2.5

    def test_double_invalid_is_zero(self):
        assert DOUBLE.decode("n/a") == 0.0

    def test_double_special_values(self):
        assert DOUBLE.decode("inf") == math.inf
        assert DOUBLE.decode("-inf") == -math.inf
        assert math.isnan(DOUBLE.decode("nan"))

    def test_float_is_single_precision(self):
        """Float values are rounded to binary32 but print short."""
        value = FLOAT.decode("0.1")
        assert value != 0.1
        assert value == pytest.approx(0.1)
        assert FLOAT.encode(value) == "0.1"

    def test_text_is_identity(self):
        assert TEXT.encode("a, b = c") == "a, b = c"
        assert TEXT.decode(" padded ") == " padded "


class TestSequenceCodecs:
    """Tests for comma-separated sequences."""

    def test_names(self):
        assert INTEGER_SEQUENCE.name == "integer-vector"
        assert TEXT_SEQUENCE.name == "string-vector"
        assert DOUBLE_SEQUENCE.is_sequence
        assert DOUBLE_SEQUENCE.scalar is DOUBLE
        assert DOUBLE.scalar is DOUBLE

    def test_encode_joins_with_commas(self):
        assert INTEGER_SEQUENCE.encode([1, 2, 3]) == "1,2,3"
        assert DOUBLE_SEQUENCE.encode([1.5, 2]) == "1.5,2.0"
        assert TEXT_SEQUENCE.encode([]) == ""

    def test_decode_drops_trailing_empty_item(self):
        assert INTEGER_SEQUENCE.decode("1,2,") == [1, 2]
        assert INTEGER_SEQUENCE.decode("") == []
        assert TEXT_SEQUENCE.decode("a,,b") == ["a", "", "b"]

    def test_coerce_accepts_text_and_iterables(self):
        assert DOUBLE_SEQUENCE.coerce("1,2") == [1.0, 2.0]
        assert INTEGER_SEQUENCE.coerce((1.0, "2")) == [1, 2]

    def test_module_helpers(self):
        assert codec.encode(INTEGER_SEQUENCE, (4, 5)) == "4,5"
        assert codec.decode(BOOLEAN, "yes") is True


class TestRoundTrip:
    """Property: decode(encode(v)) == v for every representable value."""

    @given(st.booleans())
    def test_boolean(self, value):
        assert BOOLEAN.decode(BOOLEAN.encode(value)) == value

    @given(st.integers())
    def test_integer(self, value):
        assert INTEGER.decode(INTEGER.encode(value)) == value

    @given(st.floats(width=32, allow_nan=False))
    def test_float(self, value):
        assert FLOAT.decode(FLOAT.encode(value)) == value

    @given(st.floats(allow_nan=False))
    def test_double(self, value):
        assert DOUBLE.decode(DOUBLE.encode(value)) == value

    @given(st.text())
    def test_text(self, value):
        assert TEXT.decode(TEXT.encode(value)) == value

    @given(st.lists(st.integers()))
    def test_integer_sequence(self, values):
        assert INTEGER_SEQUENCE.decode(INTEGER_SEQUENCE.encode(values)) == values

    @given(st.lists(st.floats(width=32, allow_nan=False)))
    def test_float_sequence(self, values):
        assert FLOAT_SEQUENCE.decode(FLOAT_SEQUENCE.encode(values)) == values

    @given(st.lists(st.floats(allow_nan=False)))
    def test_double_sequence(self, values):
        assert DOUBLE_SEQUENCE.decode(DOUBLE_SEQUENCE.encode(values)) == values

    @given(_text_lists)
    def test_text_sequence(self, values):
        assert TEXT_SEQUENCE.decode(TEXT_SEQUENCE.encode(values)) == values
