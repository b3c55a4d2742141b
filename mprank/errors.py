class MPRankError(Exception):
    """Base class for errors raised by mprank."""


class InvalidInputError(MPRankError, ValueError):
    """A permutation does not match the indexer's multiset."""


class OutOfRangeError(MPRankError, IndexError):
    """A rank or a binomial-table lookup lies outside its valid range."""


class IndexOverflowError(MPRankError, OverflowError):
    """The number of permutations does not fit in the configured width."""
