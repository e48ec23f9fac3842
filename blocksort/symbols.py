"""
Alphabet constants and input normalization.

All stages work on 8-bit symbols. Callers may pass bytes, strings or lists
of ints; everything is normalized to immutable bytes here.
"""

from typing import Iterable, List, Union

import numpy as np

from blocksort.errors import MalformedAlphabetError, MissingInputError


# Fixed alphabet: all 256 possible byte values
ALPHABET_SIZE = 256

SymbolInput = Union[bytes, bytearray, memoryview, str, np.ndarray, Iterable[int]]


def as_symbols(sequence: SymbolInput, name: str = "sequence") -> bytes:
    """
    Normalize a symbol sequence to bytes.

    Args:
        sequence: bytes-like object, str (UTF-8 encoded), uint8 array
            or iterable of ints in [0, 256)
        name: Argument name used in error messages

    Returns:
        Immutable bytes

    Raises:
        MissingInputError: If sequence is None
        MalformedAlphabetError: If a value falls outside the alphabet
    """
    if sequence is None:
        raise MissingInputError(f"{name} is required, got None")

    if isinstance(sequence, bytes):
        return sequence
    if isinstance(sequence, (bytearray, memoryview)):
        return bytes(sequence)
    if isinstance(sequence, str):
        return sequence.encode('utf-8')
    if isinstance(sequence, np.ndarray):
        if not np.issubdtype(sequence.dtype, np.integer):
            raise MalformedAlphabetError(
                f"{name} must contain only ints, got array of dtype {sequence.dtype}"
            )
        if sequence.size and (sequence.min() < 0 or sequence.max() >= ALPHABET_SIZE):
            raise MalformedAlphabetError(
                f"{name} must contain only values in [0, {ALPHABET_SIZE})"
            )
        return sequence.astype(np.uint8).tobytes()

    values = list(sequence)
    _check_alphabet(values, name)
    return bytes(values)


def _check_alphabet(values: List[int], name: str):
    """Validate that every value is an int inside the alphabet."""
    for i, val in enumerate(values):
        if isinstance(val, bool) or not isinstance(val, (int, np.integer)):
            raise MalformedAlphabetError(
                f"{name} must contain only ints, but found {val!r} at position {i}"
            )
        if val < 0 or val >= ALPHABET_SIZE:
            raise MalformedAlphabetError(
                f"{name} must contain only values in [0, {ALPHABET_SIZE}), "
                f"but found {val} at position {i}"
            )


def format_symbol(symbol: int) -> str:
    """Readable form of a symbol: the character if printable, else hex."""
    if 32 <= symbol < 127:
        return chr(symbol)
    return f"<0x{symbol:02x}>"


def format_symbols(data: bytes) -> str:
    """Readable form of a whole sequence."""
    return "".join(format_symbol(b) for b in data)
