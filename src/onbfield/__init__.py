"""onbfield – GF(2^233) arithmetic in a type II optimal normal basis.

Public API re-exports for convenience:

    from onbfield import FieldElement, GF2M_ONE, GF2M_ZERO
    from onbfield import power, inverse
    from onbfield import get_multiplication_matrix
"""

from .element import GF2M_ONE, GF2M_ZERO, FieldElement
from .errors import (
    InvalidBitStringError,
    InvalidFieldParametersError,
    ONBFieldError,
    ZeroInversionError,
)
from .exponent import inverse, power
from .matrix import (
    MultiplicationMatrix,
    build_multiplication_matrix,
    get_multiplication_matrix,
)
from .params import M, P

__all__ = [
    # Field parameters
    "M",
    "P",
    # Elements
    "FieldElement",
    "GF2M_ZERO",
    "GF2M_ONE",
    # Exponentiation / inversion
    "power",
    "inverse",
    # Multiplication matrix
    "MultiplicationMatrix",
    "build_multiplication_matrix",
    "get_multiplication_matrix",
    # Errors
    "ONBFieldError",
    "InvalidBitStringError",
    "InvalidFieldParametersError",
    "ZeroInversionError",
]
