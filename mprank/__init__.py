import logging

from mprank.binomial import BinomialTable
from mprank.errors import (
    IndexOverflowError, InvalidInputError, MPRankError, OutOfRangeError
)
from mprank.mprank import mpindexer, mprank, mpsize, mpunrank
from mprank.mprank_core import MultisetPermutationIndexer, build_signature
from mprank.placement import SymbolCount, SymbolPlacementCode

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BinomialTable",
    "IndexOverflowError",
    "InvalidInputError",
    "MPRankError",
    "MultisetPermutationIndexer",
    "OutOfRangeError",
    "SymbolCount",
    "SymbolPlacementCode",
    "build_signature",
    "mpindexer",
    "mprank",
    "mpsize",
    "mpunrank",
]
