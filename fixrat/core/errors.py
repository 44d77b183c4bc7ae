# SPDX-FileCopyrightText: 2025 fixrat contributors
# SPDX-License-Identifier: Apache-2.0

from public import public

@public
class RationalError(Exception):
    """Base class for all fixrat custom exceptions."""
    pass

@public
class InvalidArgument(RationalError, ValueError):
    """
    Raised when an argument is outside the domain of an operation, e.g.:

    - malformed literal passed to :meth:`Rational.parse`,
    - negative exponent passed to :func:`fixrat.core.checked.pow`,
    - empty argument list passed to :func:`fixrat.core.checked.gcd`,
    - infinity or NaN passed to :meth:`Rational.from_number`.
    """
    pass

@public
class ZeroDenominator(InvalidArgument, ZeroDivisionError):
    """Raised for a zero denominator, division by zero, reciprocal of zero
    and zero raised to a negative power."""
    pass

@public
class OutOfRange(RationalError, ValueError):
    """Raised when a numerator or denominator would be INT_MIN or otherwise
    not fit the fixed-width integer range, or when a real value lies outside
    [1/INT_MAX, INT_MAX]."""
    pass

@public
class IntegerOverflow(RationalError, OverflowError):
    """Raised when the exact result of a checked integer operation does not
    fit the fixed-width integer range."""
    pass
