"""Multiplication matrix for a type II optimal normal basis.

With basis elements beta_k = gamma^(2^k) + gamma^(-2^k), the product of two
basis elements is

    beta_i * beta_j = (gamma^(u+v) + gamma^-(u+v)) + (gamma^(u-v) + gamma^-(u-v))

where u = 2^i mod p and v = 2^j mod p.  The coefficient of beta_0 in that
product is 1 exactly when u + v or u - v is congruent to +1 or -1 mod p.
Collecting these (i, j) pairs gives the m x m bilinear form Lambda with

    c_0 = B^T . Lambda . A

for the beta_0 coefficient of a product.  Every other coefficient follows by
rotating the operands, so a single matrix serves the whole multiplication.

Lambda is very sparse: row 0 has one entry, every other row has exactly two,
for 2m - 1 entries overall.  The matrix for the fixed field parameters is
built once per process by :func:`get_multiplication_matrix`.
"""

import logging
import threading
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .errors import InvalidFieldParametersError
from .params import M, P

logger = logging.getLogger(__name__)

_MAX_ENTRIES_PER_ROW = 2


@lru_cache(maxsize=None)
def mod_pow2(exponent: int, modulus: int) -> int:
    """Return 2^exponent mod modulus, memoized per (exponent, modulus)."""
    result = 1
    for _ in range(exponent):
        result = (result * 2) % modulus
    return result


def matrix_entry(i: int, j: int, p: int) -> int:
    """Return Lambda[i][j] (0 or 1) for auxiliary prime *p*.

    The four signed combinations of u = 2^i and v = 2^j are reduced into
    [0, p).  Testing them against 1 covers both u +/- v = 1 and
    u +/- v = -1, since -(p - 1) reduces to 1 as well.
    """
    u = mod_pow2(i, p)
    v = mod_pow2(j, p)
    residues = (
        (u + v) % p,
        (u - v) % p,
        (-u + v) % p,
        (-u - v) % p,
    )
    return 1 if 1 in residues else 0


@dataclass(frozen=True, eq=False)
class MultiplicationMatrix:
    """Marked (row, column) entries of Lambda in row-major scan order.

    Attributes:
        m:    Extension degree (matrix dimension).
        p:    Auxiliary prime the matrix was derived from.
        rows: Row index of each marked entry.
        cols: Column index of each marked entry, aligned with *rows*.
    """

    m: int
    p: int
    rows: np.ndarray
    cols: np.ndarray

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        for i, j in zip(self.rows.tolist(), self.cols.tolist()):
            yield i, j

    def row(self, i: int) -> List[int]:
        """Return the marked columns of row *i*."""
        return self.cols[self.rows == i].tolist()


def build_multiplication_matrix(m: int, p: int) -> MultiplicationMatrix:
    """Build Lambda for extension degree *m* and auxiliary prime *p*.

    Raises:
        InvalidFieldParametersError: If any row has no marked entry or more
            than two, i.e. (m, p) is not a type II ONB pair.
    """
    rows = []
    cols = []
    for i in range(m):
        marked = [j for j in range(m) if matrix_entry(i, j, p)]
        if not marked or len(marked) > _MAX_ENTRIES_PER_ROW:
            raise InvalidFieldParametersError(
                f"Row {i} of the multiplication matrix has {len(marked)} "
                f"entries; (m={m}, p={p}) is not a valid optimal normal basis"
            )
        rows.extend([i] * len(marked))
        cols.extend(marked)

    matrix = MultiplicationMatrix(
        m=m,
        p=p,
        rows=np.array(rows, dtype=np.intp),
        cols=np.array(cols, dtype=np.intp),
    )
    matrix.rows.flags.writeable = False
    matrix.cols.flags.writeable = False
    return matrix


_matrix: Optional[MultiplicationMatrix] = None
_matrix_lock = threading.Lock()


def get_multiplication_matrix() -> MultiplicationMatrix:
    """Return the process-wide matrix for (M, P), building it on first use."""
    global _matrix
    if _matrix is None:
        with _matrix_lock:
            if _matrix is None:
                logger.debug("Building ONB multiplication matrix (m=%d, p=%d)", M, P)
                _matrix = build_multiplication_matrix(M, P)
                logger.debug("Multiplication matrix ready: %d entries", len(_matrix))
    return _matrix
