"""GF(2^233) elements in a type II optimal normal basis.

An element is a vector of M = 233 coefficients over GF(2).  Coefficient
index i holds the coefficient of beta^(2^(M-1-i)), so the big-endian bit
string (index M-1 printed first) lists the coefficients of

    beta, beta^2, beta^4, ..., beta^(2^(M-1))

from left to right.  In this basis:

  - addition is a coefficient-wise XOR,
  - squaring is a cyclic rotation of the coefficient vector,
  - the trace is the parity of the coefficients,
  - the multiplicative identity is the all-ones vector.

Multiplication uses the sparse matrix from :mod:`onbfield.matrix`.
"""

from typing import Iterable, Union

import numpy as np

from .errors import InvalidBitStringError
from .matrix import get_multiplication_matrix
from .params import M

_BIT_CHARS = frozenset("01")


class FieldElement:
    """An immutable element of GF(2^233).

    Args:
        coefficients: Up to M coefficients, index 0 first.  Shorter input is
                      zero-padded at the high end.

    Raises:
        InvalidBitStringError: If more than M coefficients are given.
    """

    __slots__ = ("_coeffs",)

    def __init__(self, coefficients: Union[Iterable, np.ndarray] = ()) -> None:
        if isinstance(coefficients, (str, bytes)):
            raise TypeError("Use FieldElement.from_bitstring() for bit strings")
        if not isinstance(coefficients, np.ndarray):
            coefficients = list(coefficients)
        values = np.asarray(coefficients, dtype=bool)
        if values.ndim != 1:
            raise InvalidBitStringError(
                f"Coefficients must be one-dimensional, got shape {values.shape}"
            )
        if len(values) > M:
            raise InvalidBitStringError(
                f"Expected at most {M} coefficients, got {len(values)}"
            )
        coeffs = np.zeros(M, dtype=bool)
        coeffs[: len(values)] = values
        coeffs.flags.writeable = False
        self._coeffs = coeffs

    @classmethod
    def _wrap(cls, coeffs: np.ndarray) -> "FieldElement":
        # coeffs must be a fresh length-M bool array owned by the new element.
        element = object.__new__(cls)
        coeffs.flags.writeable = False
        element._coeffs = coeffs
        return element

    @classmethod
    def from_bitstring(cls, bits: str) -> "FieldElement":
        """Parse a big-endian '0'/'1' string; the last character is index 0.

        Raises:
            InvalidBitStringError: On other characters or more than M bits.
        """
        if not isinstance(bits, str):
            raise TypeError(f"Bit string must be str, not {type(bits).__name__}")
        if not _BIT_CHARS.issuperset(bits):
            bad = sorted(set(bits) - _BIT_CHARS)
            raise InvalidBitStringError(f"Bit string contains invalid characters: {bad!r}")
        if len(bits) > M:
            raise InvalidBitStringError(f"Bit string has {len(bits)} bits, at most {M} allowed")
        coeffs = np.zeros(M, dtype=bool)
        if bits:
            coeffs[: len(bits)] = np.frombuffer(bits[::-1].encode("ascii"), dtype=np.uint8) == ord("1")
        return cls._wrap(coeffs)

    @classmethod
    def zero(cls) -> "FieldElement":
        return cls._wrap(np.zeros(M, dtype=bool))

    @classmethod
    def one(cls) -> "FieldElement":
        """The multiplicative identity (all coefficients set)."""
        return cls._wrap(np.ones(M, dtype=bool))

    # ------------------------------------------------------------------
    # Accessors and serialisation
    # ------------------------------------------------------------------

    @property
    def coefficients(self) -> np.ndarray:
        """Read-only view of the coefficient vector, index 0 first."""
        return self._coeffs

    def to_bitstring(self) -> str:
        """Return the M-character big-endian bit string."""
        return (self._coeffs[::-1].astype(np.uint8) + ord("0")).tobytes().decode("ascii")

    def is_zero(self) -> bool:
        return not self._coeffs.any()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return bool(np.array_equal(self._coeffs, other._coeffs))

    def __hash__(self) -> int:
        return hash(self._coeffs.tobytes())

    def __str__(self) -> str:
        return self.to_bitstring()

    def __repr__(self) -> str:
        return f"FieldElement.from_bitstring('{self.to_bitstring()}')"

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: "FieldElement") -> "FieldElement":
        """Return self + other (coefficient-wise XOR)."""
        return FieldElement._wrap(np.logical_xor(self._coeffs, other._coeffs))

    def square(self) -> "FieldElement":
        """Return self^2.

        Squaring maps beta^(2^k) to beta^(2^(k+1)), which in this index
        order moves every coefficient down one slot: c[i] = a[i+1] and
        c[M-1] = a[0].
        """
        squared = np.empty(M, dtype=bool)
        squared[M - 1] = self._coeffs[0]
        squared[: M - 1] = self._coeffs[1:]
        return FieldElement._wrap(squared)

    def rotate(self, positions: int) -> "FieldElement":
        """Cyclic shift with c[(i + positions) mod M] = a[i].

        rotate(1) is the square root (the inverse of :meth:`square`) and
        rotate(-1) equals :meth:`square`.
        """
        return FieldElement._wrap(np.roll(self._coeffs, positions))

    def trace(self) -> bool:
        """Return the trace to GF(2): the parity of the coefficients."""
        return bool(np.count_nonzero(self._coeffs) & 1)

    def multiply(self, other: "FieldElement") -> "FieldElement":
        """Return self * other using the multiply-and-shift algorithm.

        Each of the M rounds computes the beta coefficient of
        (a * b)^(2^-step) as B^T . Lambda . A, then replaces both operands
        by their square roots, which shifts the next coefficient of the
        product into the beta position.  Round *step* therefore yields the
        coefficient of beta^(2^step), i.e. index M-1-step.
        """
        matrix = get_multiplication_matrix()
        # Lambda is indexed by basis position, coefficients by reversed index.
        taps = M - 1 - matrix.cols
        a = self._coeffs
        b = other._coeffs
        bits = np.empty(M, dtype=bool)
        for step in range(M):
            t = np.zeros(M, dtype=bool)
            np.logical_xor.at(t, matrix.rows, a[taps])
            bits[step] = np.count_nonzero(t & b[::-1]) & 1
            a = np.roll(a, 1)
            b = np.roll(b, 1)
        return FieldElement._wrap(bits[::-1].copy())

    def __add__(self, other: object) -> "FieldElement":
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.add(other)

    # Characteristic 2: subtraction is addition.
    __sub__ = __add__

    def __mul__(self, other: object) -> "FieldElement":
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.multiply(other)


GF2M_ZERO = FieldElement.zero()
GF2M_ONE = FieldElement.one()
