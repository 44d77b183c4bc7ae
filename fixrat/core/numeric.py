# SPDX-FileCopyrightText: 2025 fixrat contributors
# SPDX-License-Identifier: Apache-2.0

"""
Sign classification and IEEE-754 signed-zero helpers for int and float values.
"""

import math
from public import public

@public
def is_number(value) -> bool:
    """True for int and float, False for bool, numeric strings and the rest."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)

@public
def is_uint(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0

@public
def is_negative_zero(value: float) -> bool:
    return value == 0.0 and math.copysign(1.0, value) < 0

@public
def is_positive_zero(value: float) -> bool:
    return value == 0.0 and math.copysign(1.0, value) > 0

@public
def normalize_zero(value: float) -> float:
    """Maps -0.0 to 0.0, leaves all other values untouched."""
    return 0.0 if is_negative_zero(value) else value

@public
def is_negative(value: float) -> bool:
    """True for -0.0, -inf and negative values; False for NaN."""
    return not math.isnan(value) and (value < 0 or is_negative_zero(value))

@public
def is_positive(value: float) -> bool:
    """True for +0.0, inf and positive values; False for NaN."""
    return not math.isnan(value) and (value > 0 or is_positive_zero(value))

@public
def is_special(value: float) -> bool:
    """True for NaN, -0.0, inf and -inf. +0.0 is not special."""
    return not math.isfinite(value) or is_negative_zero(value)

@public
def sign(value, zero_for_zero: bool=True) -> int:
    """
    Returns 1 for positive and -1 for negative values.

    For zero, returns 0 if zero_for_zero is set. Otherwise the sign of the
    zero itself is returned: -1 for -0.0, 1 for 0 and 0.0.
    """
    if value > 0:
        return 1
    if value < 0:
        return -1
    if zero_for_zero:
        return 0
    return -1 if is_negative_zero(value) else 1

@public
def copysign(num, sign_source):
    """Returns abs(num) with the (signed-zero aware) sign of sign_source."""
    if math.isnan(num) or math.isnan(sign_source):
        raise ValueError("NaN is not allowed for either parameter.")
    return abs(num) * sign(sign_source, zero_for_zero=False)

@public
def wrap(value: float, units_per_turn: float, signed: bool=False) -> float:
    """
    Wraps an angle into [0, units_per_turn), or into
    [-units_per_turn/2, units_per_turn/2) if signed is set.
    """
    r = math.fmod(value, units_per_turn)
    half = units_per_turn / 2.0
    lo = -half if signed else 0.0
    hi = half if signed else units_per_turn
    if r < lo:
        r += units_per_turn
    elif r >= hi:
        r -= units_per_turn
    return normalize_zero(r)

@public
def float_to_string(value: float) -> str:
    """
    Shortest round-tripping representation of a float that cannot be
    mistaken for an integer.
    """
    if math.isnan(value):
        return 'NaN'
    if value == math.inf:
        return '∞'
    if value == -math.inf:
        return '-∞'
    # repr() is the shortest string that round-trips and always carries a
    # '.' or an exponent for finite floats.
    return repr(value)
