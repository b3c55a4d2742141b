"""
Bijection between the distinct permutations of a multiset and [0, size()).

Symbols are processed in order of first appearance. Each symbol's placement
code yields one digit of a mixed-radix number whose radix is the code's own
size; the first symbol is the least significant digit.
"""

import logging
import operator
from typing import Generic, Iterator

from mprank.binomial import BinomialTable
from mprank.errors import IndexOverflowError, InvalidInputError, OutOfRangeError
from mprank.mptypes import Elements, Placement, SymbolT
from mprank.placement import SymbolCount, SymbolPlacementCode

logger = logging.getLogger(__name__)


def build_signature(elements: Elements[SymbolT]) -> tuple[SymbolCount[SymbolT], ...]:
    """
    Group ``elements`` into (symbol, count, remaining) records.

    >>> build_signature("abab")
    (SymbolCount(symbol='a', count=2, remaining=4), SymbolCount(symbol='b', count=2, remaining=2))
    """
    counts: dict[SymbolT, int] = {}
    for value in elements:
        counts[value] = counts.get(value, 0) + 1
    remaining = sum(counts.values())
    signature = []
    # dicts keep insertion order, i.e. order of first appearance
    for symbol, count in counts.items():
        signature.append(SymbolCount(symbol, count, remaining))
        remaining -= count
    return tuple(signature)


class MultisetPermutationIndexer(Generic[SymbolT]):
    """
    Rank and unrank the distinct arrangements of a fixed multiset.

    >>> indexer = MultisetPermutationIndexer("AAABBC")
    >>> indexer.size()
    60
    >>> indexer.rank("BAAABC")
    10
    >>> indexer.unrank(10)
    ('B', 'A', 'A', 'A', 'B', 'C')

    ``width`` optionally bounds the index to an unsigned integer of that many
    bits; a multiset with more permutations than that is rejected here rather
    than at query time.
    """

    def __init__(self, elements: Elements[SymbolT], width: int | None = None):
        if width is not None and width <= 0:
            raise ValueError("width must be a positive number of bits")
        self._signature = build_signature(elements)
        self._n = sum(entry.count for entry in self._signature)
        self._width = width
        max_count = max((entry.count for entry in self._signature), default=0)
        self._table = BinomialTable(self._n, max_count)
        self._codes = tuple(
            SymbolPlacementCode.from_signature(entry, self._table)
            for entry in self._signature
        )
        self._size = self._compute_size()
        logger.debug(
            "indexer for %d symbols, signature %r: size=%d",
            self._n, self._signature, self._size
        )

    def _compute_size(self) -> int:
        limit = None if self._width is None else 1 << self._width
        size = 1
        for code in self._codes:
            size *= code.size()
            # size itself must be representable, as must every index below it
            if limit is not None and size >= limit:
                raise IndexOverflowError(
                    f"multiset has at least 2**{self._width} permutations"
                )
        return size

    @property
    def signature(self) -> tuple[SymbolCount[SymbolT], ...]:
        return self._signature

    @property
    def n(self) -> int:
        """Length of every permutation."""
        return self._n

    @property
    def width(self) -> int | None:
        return self._width

    @property
    def table(self) -> BinomialTable:
        return self._table

    def size(self) -> int:
        """Number of distinct permutations: n! / (c_1! * ... * c_k!)."""
        return self._size

    def is_valid(self, permutation: Placement[SymbolT]) -> bool:
        """True iff ``permutation`` is an arrangement of this multiset."""
        if len(permutation) != self._n:
            return False
        return all(code.is_valid_count(permutation) for code in self._codes)

    def rank(self, permutation: Elements[SymbolT]) -> int:
        buffer = list(permutation)
        if len(buffer) != self._n:
            raise InvalidInputError(
                f"expected a permutation of length {self._n}, got {len(buffer)}"
            )
        bad = [code.symbol for code in self._codes if not code.is_valid_count(buffer)]
        if bad:
            raise InvalidInputError(
                f"occurrence counts do not match the multiset for {bad!r}"
            )
        index = 0
        base = 1
        for code in self._codes:
            digit, buffer = code.rank(buffer)
            index += digit * base
            base *= code.size()
        return index

    def unrank(self, index: int) -> tuple[SymbolT, ...]:
        index = operator.index(index)
        if index < 0 or index >= self._size:
            raise OutOfRangeError(f"index {index} out of range [0, {self._size})")
        digits = []
        for code in self._codes:
            index, digit = divmod(index, code.size())
            digits.append(digit)
        output = [None] * self._n
        filled = [False] * self._n
        for code, digit in zip(self._codes, digits):
            code.unrank(digit, output, filled)
        return tuple(output)

    # sequence-style access: indexer[i], indexer.index(p), p in indexer

    def index(self, permutation: Elements[SymbolT]) -> int:
        return self.rank(permutation)

    def __getitem__(self, index: int) -> tuple[SymbolT, ...]:
        return self.unrank(index)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        # never empty, and len() overflows past sys.maxsize
        return True

    def __iter__(self) -> Iterator[tuple[SymbolT, ...]]:
        for index in range(self._size):
            yield self.unrank(index)

    def __contains__(self, permutation: object) -> bool:
        try:
            return self.is_valid(tuple(permutation))
        except TypeError:
            return False

    def __repr__(self) -> str:
        multiset = tuple(
            entry.symbol for entry in self._signature for _ in range(entry.count)
        )
        return f"{type(self).__name__}({multiset!r})"
