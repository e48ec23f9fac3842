"""
Move-to-front (MTF) recoding over the 256-symbol alphabet.

Each symbol is replaced by its current position in a most-recently-used
list, then moved to the front of that list. Runs of the same symbol (which
the BWT produces) turn into runs of zeros.

Encoding and decoding evolve the list identically, so they are inverses step
for step. Both sides start from the alphabet in ascending order and keep no
state between independent streams.
"""

from typing import Iterable, Iterator

from blocksort.errors import MalformedAlphabetError
from blocksort.symbols import ALPHABET_SIZE, SymbolInput, as_symbols


class RecencyList:
    """
    Most-recently-used order of the whole alphabet.

    A flat array of 256 symbols with linear-scan lookup and shift-based
    move-to-front. Always a permutation of [0, 256).
    """

    def __init__(self):
        self._order = bytearray(range(ALPHABET_SIZE))

    def rank_of(self, symbol: int) -> int:
        """Current position of symbol."""
        if symbol < 0 or symbol >= ALPHABET_SIZE:
            raise MalformedAlphabetError(
                f"symbol {symbol} outside alphabet [0, {ALPHABET_SIZE})"
            )
        return self._order.index(symbol)

    def symbol_at(self, rank: int) -> int:
        """Symbol currently at position rank."""
        if rank < 0 or rank >= ALPHABET_SIZE:
            raise MalformedAlphabetError(
                f"rank {rank} outside alphabet [0, {ALPHABET_SIZE})"
            )
        return self._order[rank]

    def move_to_front(self, rank: int) -> int:
        """
        Move the symbol at position rank to the front.

        Symbols in front of it shift one position toward the tail.

        Returns:
            The moved symbol
        """
        if rank < 0 or rank >= ALPHABET_SIZE:
            raise MalformedAlphabetError(
                f"rank {rank} outside alphabet [0, {ALPHABET_SIZE})"
            )
        symbol = self._order[rank]
        if rank:
            self._order[1:rank + 1] = self._order[0:rank]
            self._order[0] = symbol
        return symbol

    def symbols(self) -> bytes:
        """Snapshot of the current order."""
        return bytes(self._order)

    def __len__(self) -> int:
        return len(self._order)

    def __repr__(self) -> str:
        head = ", ".join(str(s) for s in self._order[:8])
        return f"RecencyList([{head}, ...])"


def iter_encode(symbols: Iterable[int]) -> Iterator[int]:
    """
    Stream MTF ranks for a stream of symbols.

    Example:
        >>> list(iter_encode(b"BANANA"))
        [66, 66, 78, 1, 1, 1]
    """
    recency = RecencyList()
    for symbol in symbols:
        rank = recency.rank_of(symbol)
        recency.move_to_front(rank)
        yield rank


def iter_decode(ranks: Iterable[int]) -> Iterator[int]:
    """Stream symbols for a stream of MTF ranks."""
    recency = RecencyList()
    for rank in ranks:
        symbol = recency.symbol_at(rank)
        recency.move_to_front(rank)
        yield symbol


def encode(sequence: SymbolInput) -> bytes:
    """
    MTF-encode a whole sequence.

    Every rank is below 256, so the output is one byte per symbol.
    """
    return bytes(iter_encode(as_symbols(sequence)))


def decode(ranks: SymbolInput) -> bytes:
    """
    MTF-decode a whole rank sequence.

    Raises:
        MalformedAlphabetError: If a rank falls outside [0, 256)
    """
    return bytes(iter_decode(as_symbols(ranks, name="ranks")))


class MoveToFrontEncoder:
    """
    Incremental MTF encoder.

    Keeps its RecencyList between feed() calls so a stream can be encoded
    in chunks. Use one encoder per stream.

    Example:
        >>> enc = MoveToFrontEncoder()
        >>> enc.feed(b"BAN") + enc.feed(b"ANA") == encode(b"BANANA")
        True
    """

    def __init__(self):
        self.recency = RecencyList()
        self.count = 0

    def feed(self, chunk: SymbolInput) -> bytes:
        """Encode the next chunk of the stream."""
        out = bytearray()
        for symbol in as_symbols(chunk, name="chunk"):
            rank = self.recency.rank_of(symbol)
            self.recency.move_to_front(rank)
            out.append(rank)
        self.count += len(out)
        return bytes(out)

    def reset(self):
        """Start a new stream."""
        self.recency = RecencyList()
        self.count = 0


class MoveToFrontDecoder:
    """Incremental MTF decoder, the mirror of MoveToFrontEncoder."""

    def __init__(self):
        self.recency = RecencyList()
        self.count = 0

    def feed(self, chunk: SymbolInput) -> bytes:
        """Decode the next chunk of ranks."""
        out = bytearray()
        for rank in as_symbols(chunk, name="ranks"):
            out.append(self.recency.move_to_front(rank))
        self.count += len(out)
        return bytes(out)

    def reset(self):
        """Start a new stream."""
        self.recency = RecencyList()
        self.count = 0
