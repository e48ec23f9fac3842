"""
blocksort: Burrows-Wheeler / Move-to-Front Block Transforms

The entropy-redistribution front end of a block-sort compressor: circular
suffix ranking, the Burrows-Wheeler transform and its inverse, and
move-to-front recoding over the 256-symbol byte alphabet.
"""

__version__ = "0.2.0"
__author__ = "Alex Towell"
__email__ = "lex@metafunctor.com"

from blocksort.errors import (
    BlockSortError,
    MissingInputError,
    InvalidLengthError,
    IndexOutOfRangeError,
    MalformedAlphabetError,
)
from blocksort.suffix_array import CircularSuffixArray, rank_rotations
from blocksort.bwt import TransformedBlock, transform, untransform, inverse_transform
from blocksort.mtf import RecencyList, MoveToFrontEncoder, MoveToFrontDecoder
from blocksort import bwt, mtf
from blocksort.pipeline import compress, decompress, compress_block, decompress_block

__all__ = [
    "CircularSuffixArray",
    "rank_rotations",
    "TransformedBlock",
    "transform",
    "untransform",
    "inverse_transform",
    "bwt",
    "RecencyList",
    "MoveToFrontEncoder",
    "MoveToFrontDecoder",
    "mtf",
    "compress",
    "decompress",
    "compress_block",
    "decompress_block",
    "BlockSortError",
    "MissingInputError",
    "InvalidLengthError",
    "IndexOutOfRangeError",
    "MalformedAlphabetError",
]
