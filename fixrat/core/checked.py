# SPDX-FileCopyrightText: 2025 fixrat contributors
# SPDX-License-Identifier: Apache-2.0

"""
Overflow-checked arithmetic on fixed-width (64 bit) signed integers.

Python integers never overflow, so they serve as the widening type: every
function computes the exact result first and then checks that it fits
[INT_MIN, INT_MAX]. Nothing is ever wrapped around or promoted to float.
"""

import operator
from public import public
from .errors import InvalidArgument, IntegerOverflow

INT_BITS = 64
INT_MAX = (1 << (INT_BITS - 1)) - 1
INT_MIN = -(1 << (INT_BITS - 1))

public(INT_BITS=INT_BITS, INT_MAX=INT_MAX, INT_MIN=INT_MIN)

@public
def fits(value: int) -> bool:
    """Returns True if value is representable as fixed-width integer."""
    return INT_MIN <= value <= INT_MAX

def _checked(value: int, what: str) -> int:
    if not fits(value):
        raise IntegerOverflow(f"Overflow in integer {what}.")
    return value

@public
def add(a: int, b: int) -> int:
    """Returns a + b, raises :class:`IntegerOverflow` if out of range."""
    return _checked(operator.index(a) + operator.index(b), "addition")

@public
def sub(a: int, b: int) -> int:
    """Returns a - b, raises :class:`IntegerOverflow` if out of range."""
    return _checked(operator.index(a) - operator.index(b), "subtraction")

@public
def mul(a: int, b: int) -> int:
    """Returns a * b, raises :class:`IntegerOverflow` if out of range."""
    return _checked(operator.index(a) * operator.index(b), "multiplication")

@public
def pow(base: int, exponent: int) -> int:
    """
    Returns base ** exponent for a non-negative exponent. 0 ** 0 is 1.

    The power is built by square-and-multiply through :func:`mul`, so an
    overflowing result fails after a handful of steps, however large the
    exponent is.
    """
    base = operator.index(base)
    exponent = operator.index(exponent)
    if exponent < 0:
        raise InvalidArgument("Negative exponents are not supported.")
    if exponent == 0 or base == 1:
        return 1
    if base == 0:
        return 0
    if base == -1:
        return -1 if exponent & 1 else 1

    result = 1
    while True:
        if exponent & 1:
            result = mul(result, base)
        exponent >>= 1
        if not exponent:
            return result
        # |base| >= 2 and bits remain, so an overflowing square means the
        # final result overflows as well.
        base = mul(base, base)

@public
def gcd(*values: int) -> int:
    """
    Greatest common divisor of the absolute values of one or more integers,
    using Euclid's algorithm pairwise across the arguments.
    """
    if len(values) == 0:
        raise InvalidArgument("At least one integer is required.")

    result = abs(operator.index(values[0]))
    for value in values[1:]:
        a, b = result, abs(operator.index(value))
        while b != 0:
            a, b = b, a % b
        result = a

    # Only reachable with INT_MIN and zeros: gcd(INT_MIN) = 2**63.
    return _checked(result, "gcd")
