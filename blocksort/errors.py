"""
Exception hierarchy for blocksort.

Every validation failure raised by the library derives from BlockSortError
and from the builtin exception callers already expect (TypeError,
ValueError or IndexError).
"""


class BlockSortError(Exception):
    """Base class for all blocksort errors."""


class MissingInputError(BlockSortError, TypeError):
    """A required sequence, block or origin was not supplied."""


class InvalidLengthError(BlockSortError, ValueError):
    """A declared length does not match the symbol data it describes."""


class IndexOutOfRangeError(BlockSortError, IndexError):
    """An origin or position falls outside its valid interval."""


class MalformedAlphabetError(BlockSortError, ValueError):
    """A symbol or rank falls outside the 256-symbol alphabet."""
