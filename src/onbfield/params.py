"""Fixed parameters of the GF(2^233) type II optimal normal basis.

The field is GF(2^M) with M = 233.  The basis is built from a primitive
P-th root of unity gamma, where P = 2M + 1 = 467 is prime and 2 is a
primitive root mod P:

    beta_k = gamma^(2^k) + gamma^(-2^k),  k = 0 .. M-1

P is only used to derive the multiplication matrix; it is not a field
modulus.
"""

# Extension degree.
M = 233

# Auxiliary prime 2M + 1.
P = 467


def inversion_chain(m: int) -> str:
    """Return the Itoh-Tsujii addition chain for GF(2^m) as a bit string.

    The chain is the binary expansion of m - 1, most-significant bit first
    ("11101000" for m = 233).
    """
    if m < 2:
        raise ValueError(f"Extension degree must be at least 2, got {m}")
    return format(m - 1, "b")
