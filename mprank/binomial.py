"""
Precomputed binomial coefficients.

The table is filled once by Pascal's rule and is read-only afterwards, so a
single instance can be shared by every placement code of an indexer (and by
concurrent readers).
"""

import logging

from mprank.errors import OutOfRangeError

logger = logging.getLogger(__name__)


class BinomialTable:
    """
    C(n, m) for 0 <= n <= n_max and 0 <= m <= m_max.

    >>> table = BinomialTable(4)
    >>> table.get(4, 2)
    6
    >>> table.get(1, 2)
    0
    """

    __slots__ = ("_n_max", "_m_max", "_rows")

    def __init__(self, n_max: int, m_max: int | None = None):
        if m_max is None:
            m_max = n_max
        if n_max < 0 or m_max < 0:
            raise ValueError("table bounds must be non-negative")
        if m_max > n_max:
            raise ValueError(f"m_max ({m_max}) must not exceed n_max ({n_max})")
        self._n_max = n_max
        self._m_max = m_max
        rows = []
        for i in range(n_max + 1):
            # row i holds C(i, 0) .. C(i, min(i, m_max))
            row = [1] * (min(i, m_max) + 1)
            for j in range(1, len(row)):
                if j == i:
                    break
                row[j] = rows[i - 1][j] + rows[i - 1][j - 1]
            rows.append(tuple(row))
        self._rows = tuple(rows)
        logger.debug("built binomial table n_max=%d m_max=%d", n_max, m_max)

    @property
    def n_max(self) -> int:
        return self._n_max

    @property
    def m_max(self) -> int:
        return self._m_max

    def get(self, n: int, m: int) -> int:
        """
        Return C(n, m).

        m > n is the mathematical zero and is answered for any n; otherwise
        asking beyond the bounds the table was built for is an error.
        """
        if m > n:
            return 0
        if n < 0 or m < 0 or n > self._n_max or m > self._m_max:
            raise OutOfRangeError(
                f"C({n}, {m}) is outside the table bounds "
                f"n <= {self._n_max}, m <= {self._m_max}"
            )
        return self._rows[n][m]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._n_max}, {self._m_max})"
