#!/usr/bin/env python3
"""
Tests for input normalization and the error hierarchy.
"""

import types

import numpy as np
import pytest

from blocksort.errors import (
    BlockSortError,
    IndexOutOfRangeError,
    InvalidLengthError,
    MalformedAlphabetError,
    MissingInputError,
)
import blocksort
from blocksort.bwt import transform
from blocksort.symbols import as_symbols, format_symbol, format_symbols


class TestAsSymbols:
    """Test conversion of the accepted input types."""

    def test_bytes(self):
        assert as_symbols(b"abc") == b"abc"

    def test_bytearray_and_memoryview(self):
        assert as_symbols(bytearray(b"abc")) == b"abc"
        assert as_symbols(memoryview(b"abc")) == b"abc"

    def test_str_is_utf8(self):
        assert as_symbols("é") == b"\xc3\xa9"

    def test_list(self):
        assert as_symbols([0, 65, 255]) == b"\x00A\xff"

    def test_generator(self):
        assert as_symbols(x for x in [1, 2, 3]) == b"\x01\x02\x03"

    def test_numpy_array(self):
        assert as_symbols(np.array([1, 2, 3], dtype=np.uint8)) == b"\x01\x02\x03"
        assert as_symbols(np.array([], dtype=np.int64)) == b""

    def test_numpy_out_of_range(self):
        with pytest.raises(MalformedAlphabetError):
            as_symbols(np.array([1, 256]))

    def test_numpy_float_rejected(self):
        """Float arrays are not truncated to bytes."""
        with pytest.raises(MalformedAlphabetError, match="float64"):
            as_symbols(np.array([65.9, 66.2, 67.7]))
        with pytest.raises(MalformedAlphabetError):
            transform(np.array([65.0, 66.0], dtype=np.float32))

    def test_none(self):
        with pytest.raises(MissingInputError, match="sequence"):
            as_symbols(None)

    def test_none_named(self):
        with pytest.raises(MissingInputError, match="ranks"):
            as_symbols(None, name="ranks")

    def test_out_of_range(self):
        with pytest.raises(MalformedAlphabetError, match="position 1"):
            as_symbols([1, 256])
        with pytest.raises(MalformedAlphabetError):
            as_symbols([-1])

    def test_non_int(self):
        with pytest.raises(MalformedAlphabetError):
            as_symbols([1, "a"])
        with pytest.raises(MalformedAlphabetError):
            as_symbols([True])


class TestFormatting:
    """Test readable symbol display."""

    def test_printable(self):
        assert format_symbol(ord("A")) == "A"

    def test_non_printable(self):
        assert format_symbol(0) == "<0x00>"
        assert format_symbol(255) == "<0xff>"

    def test_sequence(self):
        assert format_symbols(b"A\nB") == "A<0x0a>B"


class TestErrorHierarchy:
    """Errors derive from the package base and the matching builtin."""

    @pytest.mark.parametrize("error, builtin", [
        (MissingInputError, TypeError),
        (InvalidLengthError, ValueError),
        (IndexOutOfRangeError, IndexError),
        (MalformedAlphabetError, ValueError),
    ])
    def test_hierarchy(self, error, builtin):
        assert issubclass(error, BlockSortError)
        assert issubclass(error, builtin)


class TestPublicAPI:
    """Test the package-level exports."""

    def test_stage_modules_exported(self):
        for name in ("bwt", "mtf"):
            assert name in blocksort.__all__
            assert isinstance(getattr(blocksort, name), types.ModuleType)

    def test_all_names_resolve(self):
        for name in blocksort.__all__:
            assert hasattr(blocksort, name)
