# SPDX-FileCopyrightText: 2025 fixrat contributors
# SPDX-License-Identifier: Apache-2.0

from fixrat.core import checked
from fixrat.core.checked import INT_BITS, INT_MAX, INT_MIN
from fixrat import InvalidArgument, IntegerOverflow
import pytest

def test_limits():
    assert INT_BITS == 64
    assert INT_MAX == 9223372036854775807
    assert INT_MIN == -9223372036854775808
    assert checked.fits(INT_MAX)
    assert checked.fits(INT_MIN)
    assert not checked.fits(INT_MAX + 1)
    assert not checked.fits(INT_MIN - 1)

def test_add():
    assert checked.add(2, 3) == 5
    assert checked.add(INT_MAX, INT_MIN) == -1
    assert checked.add(INT_MAX - 1, 1) == INT_MAX
    assert checked.add(INT_MIN + 1, -1) == INT_MIN
    with pytest.raises(IntegerOverflow):
        checked.add(INT_MAX, 1)
    with pytest.raises(IntegerOverflow):
        checked.add(INT_MIN, -1)

def test_sub():
    assert checked.sub(2, 3) == -1
    assert checked.sub(-1, INT_MAX) == INT_MIN
    with pytest.raises(IntegerOverflow):
        checked.sub(INT_MIN, 1)
    with pytest.raises(IntegerOverflow):
        checked.sub(0, INT_MIN)

def test_mul():
    assert checked.mul(-4, 5) == -20
    assert checked.mul(-1, INT_MAX) == -INT_MAX
    assert checked.mul(2**31, 2**31) == 2**62
    assert checked.mul(-2**32, 2**31) == INT_MIN
    with pytest.raises(IntegerOverflow):
        checked.mul(INT_MAX, 2)
    with pytest.raises(IntegerOverflow):
        checked.mul(2**32, 2**31)
    with pytest.raises(IntegerOverflow):
        checked.mul(INT_MIN, -1)

def test_overflow_is_overflow_error():
    with pytest.raises(OverflowError):
        checked.mul(INT_MAX, INT_MAX)

def test_rejects_non_integers():
    with pytest.raises(TypeError):
        checked.add(1.5, 1)
    with pytest.raises(TypeError):
        checked.mul(2, "3")

@pytest.mark.parametrize("base, exponent, expected", [
    (0, 0, 1),
    (5, 0, 1),
    (0, 10, 0),
    (1, 10**18, 1),
    (-1, 10**18, 1),
    (-1, 10**18 + 1, -1),
    (2, 62, 2**62),
    (-2, 63, INT_MIN),
    (10, 18, 10**18),
    (-3, 3, -27),
    (7, 1, 7),
])
def test_pow(base, exponent, expected):
    assert checked.pow(base, exponent) == expected

def test_pow_overflow():
    with pytest.raises(IntegerOverflow):
        checked.pow(2, 63)
    with pytest.raises(IntegerOverflow):
        checked.pow(10, 19)
    with pytest.raises(IntegerOverflow):
        # Must fail fast instead of computing a gigantic integer.
        checked.pow(3, 10**18)

def test_pow_negative_exponent():
    with pytest.raises(InvalidArgument):
        checked.pow(2, -1)
    with pytest.raises(ValueError):
        checked.pow(0, -1)

def test_gcd():
    assert checked.gcd(12, 18) == 6
    assert checked.gcd(-12, 18) == 6
    assert checked.gcd(12, -18) == 6
    assert checked.gcd(0, 5) == 5
    assert checked.gcd(5, 0) == 5
    assert checked.gcd(0) == 0
    assert checked.gcd(0, 0) == 0
    assert checked.gcd(-7) == 7
    assert checked.gcd(12, 18, 8) == 2
    assert checked.gcd(INT_MAX, INT_MAX - 1) == 1
    assert checked.gcd(INT_MIN, 6) == 2
    assert checked.gcd(INT_MIN, INT_MAX) == 1

def test_gcd_errors():
    with pytest.raises(InvalidArgument):
        checked.gcd()
    with pytest.raises(IntegerOverflow):
        checked.gcd(INT_MIN)
    with pytest.raises(IntegerOverflow):
        checked.gcd(INT_MIN, 0)
