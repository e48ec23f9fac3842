"""
Circular suffix array: the sorted order of all rotations of a block.

Three ranking strategies are available:

- comparison: stable comparison sort with a wrap-around comparator,
  O(n^2 log n) worst case (periodic input).
- doubling: prefix doubling over cyclic rank pairs, O(n log^2 n).
- divsufsort: suffix array of the doubled block via pydivsufsort (C library),
  O(n) construction; only offsets < n are kept.

Rotations are never copied for ranking; every strategy works from the single
stored buffer and integer offsets.
"""

from functools import cmp_to_key
from typing import Callable, Dict

import numpy as np
import pydivsufsort

from blocksort.errors import IndexOutOfRangeError
from blocksort.symbols import SymbolInput, as_symbols


def compare_rotations(data: bytes, a: int, b: int) -> int:
    """
    Compare the rotations of data starting at offsets a and b.

    Scans at most len(data) symbols, wrapping around at the end.

    Returns:
        -1, 0 or 1
    """
    n = len(data)
    if a == b:
        return 0

    for k in range(n):
        x = data[(a + k) % n]
        y = data[(b + k) % n]
        if x < y:
            return -1
        elif x > y:
            return 1

    return 0


def _rank_by_comparison(data: bytes) -> np.ndarray:
    """Sort offsets with the circular comparator (stable, ties by offset)."""
    n = len(data)
    key = cmp_to_key(lambda a, b: compare_rotations(data, a, b))
    return np.array(sorted(range(n), key=key), dtype=np.int64)


def _rank_by_doubling(data: bytes) -> np.ndarray:
    """
    Prefix doubling over rotations.

    After the round for step k, rank[i] orders the rotations at i by their
    first 2k symbols. Stops once every rank is distinct or 2k >= n.
    """
    n = len(data)
    offsets = np.arange(n, dtype=np.int64)
    rank = np.frombuffer(data, dtype=np.uint8).astype(np.int64)
    order = np.argsort(rank, kind='stable')

    k = 1
    while k < n:
        second = rank[(offsets + k) % n]
        order = np.lexsort((second, rank))

        first_sorted = rank[order]
        second_sorted = second[order]
        boundary = np.zeros(n, dtype=np.int64)
        boundary[1:] = (
            (first_sorted[1:] != first_sorted[:-1]) |
            (second_sorted[1:] != second_sorted[:-1])
        )

        new_rank = np.empty(n, dtype=np.int64)
        new_rank[order] = np.cumsum(boundary)
        rank = new_rank

        if rank[order[-1]] == n - 1:
            break
        k *= 2

    return order.astype(np.int64)


def _rank_by_divsufsort(data: bytes) -> np.ndarray:
    """
    Rank rotations through the suffix array of data + data.

    Every suffix of the doubled block starting before n is longer than n,
    so its first n symbols are exactly the rotation at that offset.
    """
    n = len(data)
    sa = pydivsufsort.divsufsort(data + data).astype(np.int64)
    return sa[sa < n]


# Available ranking strategies
RANKING_STRATEGIES: Dict[str, Callable[[bytes], np.ndarray]] = {
    'comparison': _rank_by_comparison,
    'doubling': _rank_by_doubling,
    'divsufsort': _rank_by_divsufsort,
}

DEFAULT_STRATEGY = 'divsufsort'


def get_ranking_strategy(name: str) -> Callable[[bytes], np.ndarray]:
    """
    Get a ranking strategy by name.

    Raises:
        ValueError: If name is not recognized

    Example:
        >>> rank = get_ranking_strategy('doubling')
        >>> rank(b"cab").tolist()
        [1, 2, 0]
    """
    if name not in RANKING_STRATEGIES:
        raise ValueError(
            f"Unknown ranking strategy '{name}'. "
            f"Available: {list(RANKING_STRATEGIES.keys())}"
        )
    return RANKING_STRATEGIES[name]


def rank_rotations(sequence: SymbolInput, strategy: str = DEFAULT_STRATEGY) -> np.ndarray:
    """
    Compute the permutation of offsets that sorts all rotations of sequence.

    Args:
        sequence: Symbols to rank
        strategy: Ranking strategy name

    Returns:
        int64 array where element k is the offset of the k-th smallest rotation
    """
    data = as_symbols(sequence)
    rank = get_ranking_strategy(strategy)

    if len(data) == 0:
        return np.array([], dtype=np.int64)
    elif len(data) == 1:
        return np.array([0], dtype=np.int64)

    return rank(data)


class CircularSuffixArray:
    """
    Sorted order of the circular suffixes (rotations) of a block.

    Built once per block and read-only afterwards.

    Example:
        >>> csa = CircularSuffixArray(b"ABRACADABRA!")
        >>> csa.index(0), csa.index(1)
        (11, 10)
    """

    def __init__(self, sequence: SymbolInput, strategy: str = DEFAULT_STRATEGY):
        """
        Build the circular suffix array.

        Args:
            sequence: Block of symbols (bytes, str or list of ints)
            strategy: 'comparison', 'doubling' or 'divsufsort'
        """
        self._bytes = as_symbols(sequence)
        self.n = len(self._bytes)
        self.strategy = strategy
        self.order = rank_rotations(self._bytes, strategy)

        # Inverse permutation built lazily on first access
        self._ranks = None

    @property
    def data(self) -> bytes:
        return self._bytes

    @property
    def ranks(self) -> np.ndarray:
        """Inverse of order: ranks[offset] is the sorted position of that rotation."""
        if self._ranks is None:
            ranks = np.empty(self.n, dtype=np.int64)
            ranks[self.order] = np.arange(self.n, dtype=np.int64)
            self._ranks = ranks
        return self._ranks

    def length(self) -> int:
        return self.n

    def index(self, i: int) -> int:
        """Offset of the i-th smallest rotation."""
        self._check_position(i, "index")
        return int(self.order[i])

    def rank_of(self, offset: int) -> int:
        """Sorted position of the rotation starting at offset."""
        self._check_position(offset, "offset")
        return int(self.ranks[offset])

    def compare(self, a: int, b: int) -> int:
        """Three-way comparison of the rotations at offsets a and b."""
        self._check_position(a, "offset")
        self._check_position(b, "offset")
        return compare_rotations(self._bytes, a, b)

    def rotation(self, offset: int) -> bytes:
        """Materialize the rotation starting at offset (for display)."""
        self._check_position(offset, "offset")
        return self._bytes[offset:] + self._bytes[:offset]

    def _check_position(self, i: int, name: str):
        if i < 0 or i >= self.n:
            raise IndexOutOfRangeError(
                f"{name} {i} out of range for block of length {self.n}"
            )

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return f"CircularSuffixArray(n={self.n}, strategy='{self.strategy}')"
