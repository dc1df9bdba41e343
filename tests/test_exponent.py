"""Tests for exponentiation and Itoh-Tsujii inversion (exponent.py)."""

import pytest

from onbfield.bench import DEFAULT_A, DEFAULT_B
from onbfield.element import GF2M_ONE, GF2M_ZERO, FieldElement
from onbfield.errors import InvalidBitStringError, ZeroInversionError
from onbfield.exponent import inverse, power
from onbfield.params import M, inversion_chain


@pytest.fixture(scope="module")
def a():
    return FieldElement.from_bitstring(DEFAULT_A)


@pytest.fixture(scope="module")
def b():
    return FieldElement.from_bitstring(DEFAULT_B)


# ---------------------------------------------------------------------------
# Exponentiation
# ---------------------------------------------------------------------------

class TestPower:

    def test_pow_one(self, a):
        assert power(a, "1") == a

    def test_pow_zero(self, a):
        assert power(a, "") == GF2M_ONE
        assert power(a, "0") == GF2M_ONE
        assert power(a, 0) == GF2M_ONE

    def test_leading_zeros_ignored(self, a):
        assert power(a, "00101") == power(a, "101")

    def test_small_powers_match_repeated_multiplication(self, a):
        assert power(a, "10") == a * a
        assert power(a, "11") == a * a * a
        assert power(a, "100") == a * a * a * a

    def test_int_exponent(self, b):
        assert power(b, 5) == power(b, "101")

    def test_exponent_addition(self, b):
        assert power(b, 6) * power(b, 7) == power(b, 13)

    def test_fermat(self, a):
        # a^(2^M) = a for every element.
        assert power(a, "1" + "0" * M) == a

    def test_power_of_one_and_zero(self):
        assert power(GF2M_ONE, "1011") == GF2M_ONE
        assert power(GF2M_ZERO, "11") == GF2M_ZERO

    def test_invalid_exponent_string(self, a):
        with pytest.raises(InvalidBitStringError):
            power(a, "12")

    def test_negative_exponent(self, a):
        with pytest.raises(ValueError):
            power(a, -1)


# ---------------------------------------------------------------------------
# Inversion
# ---------------------------------------------------------------------------

class TestInverse:

    def test_chain_constant(self):
        assert inversion_chain(M) == "11101000"
        assert inversion_chain(163) == "10100010"

    def test_chain_rejects_tiny_degree(self):
        with pytest.raises(ValueError):
            inversion_chain(1)

    def test_round_trip(self, a, b):
        for x in (a, b, FieldElement.from_bitstring("1"), FieldElement.from_bitstring("110")):
            assert x * inverse(x) == GF2M_ONE

    def test_inverse_of_one(self):
        assert inverse(GF2M_ONE) == GF2M_ONE

    def test_double_inverse(self, b):
        assert inverse(inverse(b)) == b

    def test_inverse_of_product(self, a, b):
        assert inverse(a * b) == inverse(a) * inverse(b)

    def test_matches_power(self, a):
        # a^-1 = a^(2^M - 2).
        assert inverse(a) == power(a, 2 ** M - 2)

    def test_zero_raises(self):
        with pytest.raises(ZeroInversionError):
            inverse(GF2M_ZERO)

    def test_zero_raises_zero_division(self):
        with pytest.raises(ZeroDivisionError):
            inverse(FieldElement.zero())
