"""
Burrows-Wheeler Transform (BWT) for a single block.

The BWT rearranges a block so that symbols preceding similar contexts end up
next to each other, which makes the output far more compressible for a
move-to-front + entropy coder back end. No information is lost.

Forward:
1. Rank all rotations of the block (circular suffix array)
2. Emit the last column of the sorted rotation matrix
3. Record the origin: the row holding the untransformed block

Inverse:
Key-indexed counting over the 256-symbol alphabet yields the "next" array
linking each row of the sorted matrix to the row of the following rotation.
Following that cycle from the origin for n steps rebuilds the block.
"""

from typing import NamedTuple, Optional

import numpy as np

from blocksort.errors import (
    IndexOutOfRangeError,
    InvalidLengthError,
    MissingInputError,
)
from blocksort.suffix_array import DEFAULT_STRATEGY, CircularSuffixArray
from blocksort.symbols import ALPHABET_SIZE, SymbolInput, as_symbols


class TransformedBlock(NamedTuple):
    """A transformed block: origin row plus transformed symbols."""
    origin: Optional[int]
    data: bytes


def last_column(data: bytes, order: np.ndarray) -> bytes:
    """
    Last column of the sorted rotation matrix.

    For the rotation starting at offset i the last symbol is data[i - 1],
    wrapping to the final symbol for i == 0.
    """
    if len(data) == 0:
        return b""
    buf = np.frombuffer(data, dtype=np.uint8)
    return buf[(order - 1) % len(data)].tobytes()


def first_column(data: bytes) -> bytes:
    """First column of the sorted rotation matrix: the symbols in sorted order."""
    return bytes(sorted(data))


def transform(sequence: SymbolInput, strategy: str = DEFAULT_STRATEGY) -> TransformedBlock:
    """
    Apply the Burrows-Wheeler Transform to a block.

    Args:
        sequence: Block to transform
        strategy: Rotation ranking strategy

    Returns:
        TransformedBlock(origin, data); an empty block gives (None, b"")

    Example:
        >>> transform(b"ABRACADABRA!")
        TransformedBlock(origin=3, data=b'ARD!RCAAAABB')
    """
    data = as_symbols(sequence)
    if len(data) == 0:
        return TransformedBlock(None, b"")

    csa = CircularSuffixArray(data, strategy=strategy)
    origin = csa.rank_of(0)

    return TransformedBlock(origin, last_column(data, csa.order))


def build_next(data: bytes) -> np.ndarray:
    """
    Build the next array of a transformed block by key-indexed counting.

    next[j] is the row of the rotation that follows row j by one position.

    Time complexity: O(n + R)
    """
    n = len(data)

    # count[c + 1] = occurrences of c, turned into start rows by prefix sums
    count = [0] * (ALPHABET_SIZE + 1)
    for c in data:
        count[c + 1] += 1
    for r in range(ALPHABET_SIZE):
        count[r + 1] += count[r]

    # Stable scan: the k-th c in the last column is the k-th c in the first
    nxt = np.empty(n, dtype=np.int64)
    for i, c in enumerate(data):
        nxt[count[c]] = i
        count[c] += 1

    return nxt


def inverse_transform(data: SymbolInput, origin: Optional[int],
                      length: Optional[int] = None) -> bytes:
    """
    Reconstruct the original block from its transform.

    Args:
        data: Transformed symbols (last column)
        origin: Row of the original block in the sorted rotation matrix
        length: Declared block length, checked against data when given

    Returns:
        The original block

    Raises:
        MissingInputError: If origin is None for a non-empty block
        InvalidLengthError: If length does not match data
        IndexOutOfRangeError: If origin is outside [0, n)
    """
    data = as_symbols(data, name="data")
    n = len(data)

    if length is not None and length != n:
        raise InvalidLengthError(
            f"Declared length {length} does not match {n} transformed symbols"
        )

    if origin is None:
        if n == 0:
            return b""
        raise MissingInputError("origin is required for a non-empty block")

    if origin < 0 or origin >= n:
        raise IndexOutOfRangeError(
            f"origin {origin} out of range for block of length {n}"
        )

    nxt = build_next(data)

    result = bytearray(n)
    cursor = nxt[origin]
    for i in range(n):
        result[i] = data[cursor]
        cursor = nxt[cursor]

    return bytes(result)


def untransform(block: TransformedBlock, length: Optional[int] = None) -> bytes:
    """
    Reverse the Burrows-Wheeler Transform.

    Example:
        >>> untransform(TransformedBlock(3, b"ARD!RCAAAABB"))
        b'ABRACADABRA!'
    """
    if block is None:
        raise MissingInputError("transformed block is required, got None")
    return inverse_transform(block.data, block.origin, length=length)
