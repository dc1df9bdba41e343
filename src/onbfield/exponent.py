"""Exponentiation and inversion in GF(2^233).

Both routines are built only from the element primitives: squaring is a
rotation, so they are dominated by the number of multiplications.
"""

from typing import Union

from .element import GF2M_ONE, FieldElement
from .errors import InvalidBitStringError, ZeroInversionError
from .params import M, inversion_chain


def _exponent_bits(exponent: Union[str, int]) -> str:
    if isinstance(exponent, bool):
        raise TypeError("Exponent must be a bit string or int, not bool")
    if isinstance(exponent, int):
        if exponent < 0:
            raise ValueError(f"Exponent must be non-negative, got {exponent}")
        return format(exponent, "b") if exponent else ""
    if not isinstance(exponent, str):
        raise TypeError(f"Exponent must be a bit string or int, not {type(exponent).__name__}")
    if set(exponent) - {"0", "1"}:
        raise InvalidBitStringError(f"Exponent {exponent!r} is not a bit string")
    return exponent


def power(base: FieldElement, exponent: Union[str, int]) -> FieldElement:
    """Compute base^exponent with left-to-right square-and-multiply.

    Args:
        base:     A field element.
        exponent: Most-significant-bit-first '0'/'1' string, or a
                  non-negative int.

    Returns:
        base^exponent.  An empty string (or 0) yields GF2M_ONE.
    """
    bits = _exponent_bits(exponent)
    result = GF2M_ONE
    if bits[:1] == "1":
        result = result * base
    for bit in bits[1:]:
        result = result.square()
        if bit == "1":
            result = result * base
    return result


def inverse(element: FieldElement) -> FieldElement:
    """Return element^-1 = element^(2^M - 2) by Itoh-Tsujii inversion.

    beta holds element^(2^k - 1).  Each chain bit doubles k via
    beta^(2^k) * beta, and a set bit adds one more via beta^2 * element.
    After the chain k = M - 1, and a final squaring gives 2^M - 2.

    Raises:
        ZeroInversionError: If *element* is zero.
    """
    if element.is_zero():
        raise ZeroInversionError("Zero has no multiplicative inverse in GF(2^m)")

    chain = inversion_chain(M)
    beta = element
    k = 1
    for bit in chain[1:]:
        original_beta = beta
        for _ in range(k):
            beta = beta.square()
        beta = beta * original_beta
        k *= 2

        if bit == "1":
            beta = beta.square() * element
            k += 1
    return beta.square()
