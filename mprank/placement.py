"""
Placement of a single symbol among the slots left open by earlier symbols.

A symbol occurring ``count`` times among ``remaining`` open slots can occupy
C(remaining, count) distinct subsets of those slots. ``SymbolPlacementCode``
ranks and unranks that subset in the combinatorial number system: subsets are
ordered so that one placing the symbol further left comes first.
"""

from typing import Generic, NamedTuple

from mprank.binomial import BinomialTable
from mprank.mptypes import FilledMask, Placement, Slots, SymbolT


class SymbolCount(NamedTuple, Generic[SymbolT]):
    """One entry of a multiset signature."""

    symbol: SymbolT
    count: int
    # slots not taken by symbols earlier in the signature
    remaining: int


class SymbolPlacementCode(Generic[SymbolT]):
    __slots__ = ("_symbol", "_count", "_remaining", "_table", "_size")

    def __init__(
        self, symbol: SymbolT, count: int, remaining: int, table: BinomialTable
    ):
        if count < 0 or remaining < count:
            raise ValueError(
                f"cannot place {count} of {symbol!r} in {remaining} slots"
            )
        self._symbol = symbol
        self._count = count
        self._remaining = remaining
        self._table = table
        self._size = table.get(remaining, count)

    @classmethod
    def from_signature(
        cls, entry: SymbolCount[SymbolT], table: BinomialTable
    ) -> "SymbolPlacementCode[SymbolT]":
        return cls(entry.symbol, entry.count, entry.remaining, table)

    @property
    def symbol(self) -> SymbolT:
        return self._symbol

    @property
    def count(self) -> int:
        return self._count

    @property
    def remaining(self) -> int:
        return self._remaining

    def size(self) -> int:
        """Number of ways to choose the symbol's slots: C(remaining, count)."""
        return self._size

    def is_valid_count(self, buffer: Placement[SymbolT]) -> bool:
        """True iff ``buffer`` holds exactly ``count`` occurrences of the symbol."""
        symbol = self._symbol
        return sum(1 for value in buffer if value == symbol) == self._count

    def rank(
        self, buffer: Placement[SymbolT]
    ) -> tuple[int, list[SymbolT]]:
        """
        Rank the positions the symbol occupies in ``buffer``.

        ``buffer`` must have length ``remaining`` and contain the symbol
        exactly ``count`` times; the caller checks this. Returns the local
        index in [0, size()) together with ``buffer`` minus every occurrence
        of the symbol, which is what the next symbol in the signature ranks.
        """
        symbol = self._symbol
        get = self._table.get
        pending = self._count
        last = self._remaining - 1
        index = 0
        compacted = []
        for position, value in enumerate(buffer):
            if value == symbol:
                pending -= 1
            else:
                if pending > 0:
                    # every subset putting the symbol here sorts before ours
                    index += get(last - position, pending - 1)
                compacted.append(value)
        return index, compacted

    def unrank(self, index: int, output: Slots, filled: FilledMask) -> None:
        """
        Write the symbol into the open slots of ``output`` selected by ``index``.

        Slots whose ``filled`` flag is set belong to earlier symbols and are
        skipped; exactly ``count`` open slots are claimed and flagged.
        """
        symbol = self._symbol
        get = self._table.get
        pending = self._count
        # open slots from the current one to the end, current one included
        left = self._remaining
        for slot, taken in enumerate(filled):
            if pending == 0:
                break
            if taken:
                continue
            skipped = get(left - 1, pending - 1)
            if pending >= left or index < skipped:
                output[slot] = symbol
                filled[slot] = True
                pending -= 1
            else:
                index -= skipped
            left -= 1
        assert pending == 0, "placement did not consume every occurrence"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._symbol!r}, count={self._count}, "
            f"remaining={self._remaining})"
        )
