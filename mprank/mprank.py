from typing import Callable, TypeVar

from mprank.mprank_core import MultisetPermutationIndexer
from mprank.mptypes import Elements, SymbolT

R = TypeVar('R')


def _mpwrap(
    func: Callable[[Elements[SymbolT], int | None], R],
    elements: Elements[SymbolT],
    width: int | None
) -> R:
    try:
        iter(elements)
    except (TypeError, ValueError):
        raise TypeError("Elements must be iterable")
    # count and range checks occur in the indexer
    return func(elements, width)


def mpindexer(
    elements: Elements[SymbolT], width: int | None = None
) -> MultisetPermutationIndexer[SymbolT]:
    return _mpwrap(MultisetPermutationIndexer, elements, width)


def mpsize(elements: Elements[SymbolT], width: int | None = None) -> int:
    return mpindexer(elements, width).size()


def mprank(
    elements: Elements[SymbolT],
    permutation: Elements[SymbolT],
    width: int | None = None
) -> int:
    return mpindexer(elements, width).rank(permutation)


def mpunrank(
    elements: Elements[SymbolT], index: int, width: int | None = None
) -> tuple[SymbolT, ...]:
    return mpindexer(elements, width).unrank(index)
