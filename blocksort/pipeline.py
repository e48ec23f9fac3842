"""
Forward and inverse block-sort pipeline with single-block framing.

Forward:  block -> BWT -> (origin, last column) -> MTF -> ranks
Inverse:  ranks -> MTF decode -> (origin, last column) -> inverse BWT -> block

Frame format (one block, the same bytes `blocksort-bwt -` writes):
    [origin: 4 bytes, big-endian][transformed symbols: n bytes]

An empty block has no origin and produces an empty frame.
"""

import struct
import time
from typing import Optional

from blocksort import bwt, mtf
from blocksort.bwt import TransformedBlock
from blocksort.errors import (
    IndexOutOfRangeError,
    InvalidLengthError,
    MissingInputError,
)
from blocksort.suffix_array import DEFAULT_STRATEGY
from blocksort.symbols import SymbolInput, as_symbols


HEADER = struct.Struct('>I')


def pack_block(block: TransformedBlock) -> bytes:
    """Serialize a transformed block as origin header + symbols."""
    if block is None:
        raise MissingInputError("transformed block is required, got None")

    if block.origin is None:
        if block.data:
            raise MissingInputError("origin is required for a non-empty block")
        return b""

    if block.origin < 0 or block.origin >= len(block.data):
        raise IndexOutOfRangeError(
            f"origin {block.origin} out of range for block of length {len(block.data)}"
        )

    return HEADER.pack(block.origin) + bytes(block.data)


def unpack_block(payload: SymbolInput) -> TransformedBlock:
    """
    Parse a frame written by pack_block.

    Raises:
        InvalidLengthError: If the payload is too short to hold the header
        IndexOutOfRangeError: If the header origin is outside the block
    """
    payload = as_symbols(payload, name="payload")
    if not payload:
        return TransformedBlock(None, b"")

    if len(payload) < HEADER.size:
        raise InvalidLengthError(
            f"Truncated frame: {len(payload)} bytes, header needs {HEADER.size}"
        )

    origin, = HEADER.unpack_from(payload)
    data = payload[HEADER.size:]

    if origin >= len(data):
        raise IndexOutOfRangeError(
            f"origin {origin} out of range for block of length {len(data)}"
        )

    return TransformedBlock(origin, data)


def compress_block(sequence: SymbolInput, strategy: str = DEFAULT_STRATEGY) -> TransformedBlock:
    """
    Run the forward pipeline on one block.

    Returns:
        TransformedBlock whose data holds the MTF ranks of the last column
    """
    block = bwt.transform(sequence, strategy=strategy)
    return TransformedBlock(block.origin, mtf.encode(block.data))


def decompress_block(block: TransformedBlock, length: Optional[int] = None) -> bytes:
    """Run the inverse pipeline on one block produced by compress_block."""
    if block is None:
        raise MissingInputError("transformed block is required, got None")
    return bwt.inverse_transform(mtf.decode(block.data), block.origin, length=length)


def compress(sequence: SymbolInput, strategy: str = DEFAULT_STRATEGY,
             verbose: bool = False) -> bytes:
    """
    Compress front end for a single block.

    Equivalent to piping `blocksort-bwt -` into `blocksort-mtf -`: the framed
    BWT output, header included, is MTF-encoded.

    Args:
        sequence: Block to process
        strategy: Rotation ranking strategy
        verbose: Print size and timing statistics

    Returns:
        MTF-encoded frame
    """
    data = as_symbols(sequence)

    start = time.time()
    frame = pack_block(bwt.transform(data, strategy=strategy))
    payload = mtf.encode(frame)
    elapsed = time.time() - start

    if verbose:
        zeros = payload.count(0)
        print(f"Transformed {len(data):,} bytes in {elapsed:.3f}s (strategy: {strategy})")
        if payload:
            print(f"Output: {len(payload):,} bytes, {zeros / len(payload):.1%} zero ranks")

    return payload


def decompress(payload: SymbolInput, verbose: bool = False) -> bytes:
    """Invert compress()."""
    payload = as_symbols(payload, name="payload")

    start = time.time()
    data = bwt.untransform(unpack_block(mtf.decode(payload)))
    elapsed = time.time() - start

    if verbose:
        print(f"Restored {len(data):,} bytes in {elapsed:.3f}s")

    return data
