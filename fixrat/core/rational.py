# SPDX-FileCopyrightText: 2025 fixrat contributors
# SPDX-License-Identifier: Apache-2.0

import fractions
import logging
import math
import numbers
import operator
from public import public
from . import checked
from .checked import INT_MAX, INT_MIN
from .errors import InvalidArgument, ZeroDenominator, OutOfRange, IntegerOverflow
from .literal import parse_literal, IntegerLiteral, DecimalLiteral
from .numeric import sign

log = logging.getLogger(__name__)

def _fixed(value, what: str) -> int:
    value = operator.index(value)
    if value == INT_MIN or not checked.fits(value):
        raise OutOfRange(f"{what} {value} is outside the supported range "
            f"[{INT_MIN + 1}, {INT_MAX}].")
    return value

def _divmod_trunc(num: int, den: int) -> tuple[int, int]:
    # Quotient rounded toward zero, remainder with the sign of num (den > 0).
    q, r = divmod(abs(num), den)
    return (-q, -r) if num < 0 else (q, r)

def _is_operand(other) -> bool:
    # Operator overloads take numbers only; strings need the named methods.
    return isinstance(other, (numbers.Rational, float))

def _operators(method):
    """Builds forward and reflected operator methods from a named method."""
    def forward(self, other):
        if _is_operand(other):
            return method(self, other)
        return NotImplemented

    def reverse(self, other):
        if _is_operand(other):
            return method(self.to_rational(other), self)
        return NotImplemented

    return forward, reverse

def _comparison(op):
    def compare(self, other):
        if _is_operand(other):
            # Exact, without the float fallback of cmp().
            return op(self._as_fraction(), other)
        return NotImplemented
    return compare

@public
class Rational:
    """
    Exact rational number stored as a pair of fixed-width (64 bit) integers.

    Values are always kept in canonical form:

    - 0 is represented as 0/1.
    - The denominator is positive, the sign is carried by the numerator.
    - Numerator and denominator are coprime, e.g. Rational(9, 12) is 3/4.

    Neither numerator nor denominator may be INT_MIN, because -INT_MIN does
    not fit the fixed-width range. The magnitude of a non-zero Rational thus
    lies in [1/INT_MAX, INT_MAX].

    All arithmetic is performed with :mod:`fixrat.core.checked`, so any
    intermediate result leaving the fixed-width range raises
    :class:`IntegerOverflow` instead of producing a wrong value.

    Besides the named methods (add, sub, cmp, ...), which also accept
    numeric strings as operand, the usual Python operators are supported
    for int, float, :class:`fractions.Fraction` and Rational operands.
    Arithmetic converts floats with :meth:`from_number`. The comparison
    operators compare exactly, like Fraction does, so that equal values
    hash equally. Unlike :meth:`eq`, ``Rational(1, 10) == 0.1`` is False.

    Rational objects are immutable and can safely be shared between threads.
    """

    __slots__ = ('_num', '_den')

    def __new__(cls, num=0, den=1):
        num = operator.index(num)
        den = operator.index(den)
        if den == 0:
            raise ZeroDenominator("Denominator cannot be zero.")
        num = _fixed(num, "Numerator")
        den = _fixed(den, "Denominator")

        self = super().__new__(cls)
        self._num, self._den = cls._simplify(num, den)
        return self

    @staticmethod
    def _simplify(num: int, den: int) -> tuple[int, int]:
        if num == 0:
            return 0, 1
        if num == den:
            return 1, 1
        if num == -den:
            return -1, 1

        g = checked.gcd(num, den)
        if g > 1:
            num //= g
            den //= g
        return (-num, -den) if den < 0 else (num, den)

    @property
    def numerator(self) -> int:
        return self._num

    @property
    def denominator(self) -> int:
        return self._den

    # Factories
    # ---------

    @classmethod
    def from_number(cls, value: int|float) -> 'Rational':
        """
        Returns the rational number closest to value, found by a search over
        the continued-fraction convergents of value.

        If a convergent reproduces value exactly (as float), it is returned
        right away. Otherwise the search ends when the next convergent no
        longer fits the fixed-width range, and the closest convergent seen so
        far is returned.

        Integers are converted exactly, including those above 2**53 that a
        float cannot hold.

        Raises :class:`InvalidArgument` for infinity and NaN and
        :class:`OutOfRange` for magnitudes outside [1/INT_MAX, INT_MAX].
        """
        if isinstance(value, numbers.Integral):
            return cls(value)
        if not isinstance(value, float):
            raise TypeError(f"Expected int or float, got {type(value).__name__}.")
        if not math.isfinite(value):
            raise InvalidArgument("Cannot convert an infinity or NaN to a rational number.")
        if value.is_integer():
            return cls(int(value))

        value_sign = sign(value, zero_for_zero=False)
        abs_value = abs(value)
        if abs_value < 1 / INT_MAX or abs_value > INT_MAX:
            raise OutOfRange(f"{value!r} is outside the valid range for "
                "representation as a rational number.")

        h0, h1 = 1, 0
        k0, k1 = 0, 1
        x = abs_value

        h_best = 0 if abs_value < 0.5 else 1
        k_best = 1
        min_err = abs(h_best - abs_value)

        while True:
            a = math.floor(x)
            h_new = a * h0 + h1
            k_new = a * k0 + k1

            if k_new > INT_MAX or h_new > INT_MAX:
                if h_best == 0:
                    # Only at the lower bound, where 1/value rounds up to 2**63.
                    h_best, k_best = 1, INT_MAX
                    min_err = abs(1 / INT_MAX - abs_value)
                log.debug("No exact rational for %r, closest is %d/%d (error %g).",
                    value, value_sign * h_best, k_best, min_err)
                return cls(value_sign * h_best, k_best)

            err = abs(h_new / k_new - abs_value)
            if err == 0.0:
                return cls(value_sign * h_new, k_new)

            if err < min_err:
                h_best, k_best, min_err = h_new, k_new, err

            h1, h0 = h0, h_new
            k1, k0 = k0, k_new

            rem = x - a
            if rem == 0.0:
                return cls(value_sign * h0, k0)
            x = 1.0 / rem

    @classmethod
    def parse(cls, text: str) -> 'Rational':
        """
        Parses an integer ("-12"), decimal ("1.25", "3e-5") or fraction
        ("1/2", " -3 / 4 ") literal. Surrounding whitespace is ignored.

        Decimal literals are converted with :meth:`from_number`.
        """
        lit = parse_literal(text)
        if isinstance(lit, IntegerLiteral):
            return cls(lit.value)
        elif isinstance(lit, DecimalLiteral):
            if not math.isfinite(lit.value):
                raise OutOfRange(f"{text.strip()} is outside the valid range for "
                    "representation as a rational number.")
            return cls.from_number(lit.value)
        else:
            return cls(lit.numerator, lit.denominator)

    @classmethod
    def to_rational(cls, value) -> 'Rational':
        """
        Converts int, float, str, :class:`fractions.Fraction` (or any other
        :class:`numbers.Rational`) to Rational. Rationals are returned as-is.
        """
        if isinstance(value, Rational):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, (numbers.Integral, float)):
            return cls.from_number(value)
        if isinstance(value, numbers.Rational):
            return cls(value.numerator, value.denominator)
        raise TypeError(f"Cannot convert {type(value).__name__} to Rational.")

    # Conversion
    # ----------

    def to_float(self) -> float:
        """Nearest float; precision is lost for large numerators/denominators."""
        return self._num / self._den

    def to_int(self) -> int:
        """Integer part, rounding toward zero."""
        return _divmod_trunc(self._num, self._den)[0]

    def to_display_string(self) -> str:
        if self._den == 1:
            return str(self._num)
        return f"{self._num}/{self._den}"

    # Arithmetic
    # ----------

    def neg(self) -> 'Rational':
        return type(self)(-self._num, self._den)

    def add(self, other) -> 'Rational':
        other = self.to_rational(other)
        na, da = self._num, self._den
        nb, db = other._num, other._den
        g = checked.gcd(da, db)
        if g == 1:
            # a/b + c/d = (ad + bc) / bd
            num = checked.add(checked.mul(na, db), checked.mul(da, nb))
            return type(self)(num, checked.mul(da, db))
        # Shared factor g of the denominators: only the cofactors are
        # multiplied, and the result's only possible common factor divides g.
        s = da // g
        t = checked.add(checked.mul(na, db // g), checked.mul(nb, s))
        g2 = checked.gcd(t, g)
        return type(self)(t // g2, checked.mul(s, db // g2))

    def sub(self, other) -> 'Rational':
        return self.add(self.to_rational(other).neg())

    def inv(self) -> 'Rational':
        """Reciprocal."""
        if self._num == 0:
            raise ZeroDenominator("Cannot take reciprocal of zero.")
        if self._num > 0:
            return type(self)(self._den, self._num)
        return type(self)(-self._den, -self._num)

    def mul(self, other) -> 'Rational':
        other = self.to_rational(other)
        # Cancel common factors crosswise first, (a/b) * (c/d) with
        # gcd(a, d) and gcd(b, c), to keep the products small.
        gcd1 = checked.gcd(self._num, other._den)
        gcd2 = checked.gcd(self._den, other._num)
        a = self._num // gcd1
        b = self._den // gcd2
        c = other._num // gcd2
        d = other._den // gcd1
        return type(self)(checked.mul(a, c), checked.mul(b, d))

    def div(self, other) -> 'Rational':
        other = self.to_rational(other)
        if other._num == 0:
            raise ZeroDenominator("Cannot divide by zero.")
        return self.mul(other.inv())

    def pow(self, exponent: int) -> 'Rational':
        """
        Integer power. x.pow(0) is 1 for every x, including zero.
        Raising zero to a negative power raises :class:`ZeroDenominator`.
        """
        exponent = operator.index(exponent)
        if exponent == 0:
            return type(self)(1)
        if self._num == 0:
            if exponent < 0:
                raise ZeroDenominator("Cannot raise zero to a negative power.")
            return type(self)(0)
        if exponent < 0:
            return self.inv().pow(-exponent)
        return type(self)(checked.pow(self._num, exponent), checked.pow(self._den, exponent))

    def floordiv(self, other) -> int:
        """Largest integer not greater than self / other."""
        return self.div(other).floor()

    def mod(self, other) -> 'Rational':
        """
        Remainder of :meth:`floordiv`. The result has the sign of other,
        as with Python's % operator.
        """
        other = self.to_rational(other)
        return self.sub(other.mul(self.floordiv(other)))

    def abs(self) -> 'Rational':
        return type(self)(abs(self._num), self._den)

    def floor(self) -> int:
        return self._num // self._den

    def ceil(self) -> int:
        return -(-self._num // self._den)

    def round(self) -> int:
        """Nearest integer, ties are rounded away from zero."""
        q, r = _divmod_trunc(self._num, self._den)
        # 2|r| >= den, written so that no intermediate exceeds den.
        if abs(r) >= self._den - abs(r):
            return q + 1 if self._num > 0 else q - 1
        return q

    # Comparison
    # ----------

    def cmp(self, other, exact: bool=False) -> int:
        """
        Returns -1, 0 or 1 if self is less than, equal to or greater than other.

        The cross products are computed with checked arithmetic. Should they
        overflow, the float approximations of both values are compared
        instead. Values that differ only beyond float precision (magnitudes
        of about 2**53 and up) may then compare as equal.
        With exact=True, the cross products are computed with unbounded
        integers and the result is always exact.
        """
        other = self.to_rational(other)
        if self._den == other._den:
            left, right = self._num, other._num
        elif exact:
            left, right = self._num * other._den, self._den * other._num
        else:
            try:
                left = checked.mul(self._num, other._den)
                right = checked.mul(self._den, other._num)
            except IntegerOverflow:
                log.debug("Comparing %s with %s using float approximation.", self, other)
                left, right = self.to_float(), other.to_float()
        return sign(left - right)

    def eq(self, other) -> bool:
        return self.cmp(other) == 0

    def lt(self, other) -> bool:
        return self.cmp(other) == -1

    def gt(self, other) -> bool:
        return self.cmp(other) == 1

    def lte(self, other) -> bool:
        return self.cmp(other) != 1

    def gte(self, other) -> bool:
        return self.cmp(other) != -1

    # Python number protocol
    # ----------------------

    def __repr__(self):
        return f"{type(self).__name__}({self._num}, {self._den})"

    def __str__(self):
        return self.to_display_string()

    def __format__(self, spec):
        if spec == '':
            return str(self)
        return format(self.to_float(), spec)

    def _as_fraction(self):
        return fractions.Fraction(self._num, self._den)

    @property
    def real(self) -> 'Rational':
        return self

    @property
    def imag(self) -> int:
        return 0

    def conjugate(self) -> 'Rational':
        return self

    def __hash__(self):
        # Same hash as int, float and Fraction objects of identical value.
        return hash(self._as_fraction())

    def __reduce__(self):
        return (type(self), (self._num, self._den))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __bool__(self):
        return self._num != 0

    def __float__(self):
        return self.to_float()

    def __complex__(self):
        return complex(self.to_float())

    def __int__(self):
        return self.to_int()

    __trunc__ = __int__

    def __floor__(self):
        return self.floor()

    def __ceil__(self):
        return self.ceil()

    def __round__(self, ndigits=None):
        if ndigits is None:
            return self.round()
        shift = checked.pow(10, abs(ndigits))
        if ndigits >= 0:
            return type(self)(self.mul(shift).round(), shift)
        return type(self)(checked.mul(self.div(shift).round(), shift))

    def __neg__(self):
        return self.neg()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.abs()

    def __pow__(self, exponent):
        if isinstance(exponent, numbers.Integral):
            return self.pow(exponent)
        return NotImplemented

    def __rpow__(self, base):
        if self._den == 1 and _is_operand(base):
            return self.to_rational(base).pow(self._num)
        return NotImplemented

    __add__, __radd__ = _operators(add)
    __sub__, __rsub__ = _operators(sub)
    __mul__, __rmul__ = _operators(mul)
    __truediv__, __rtruediv__ = _operators(div)
    __floordiv__, __rfloordiv__ = _operators(floordiv)
    __mod__, __rmod__ = _operators(mod)

    def __divmod__(self, other):
        if _is_operand(other):
            return self.floordiv(other), self.mod(other)
        return NotImplemented

    def __rdivmod__(self, other):
        if _is_operand(other):
            return divmod(self.to_rational(other), self)
        return NotImplemented

    __lt__ = _comparison(operator.lt)
    __gt__ = _comparison(operator.gt)
    __le__ = _comparison(operator.le)
    __ge__ = _comparison(operator.ge)
    __eq__ = _comparison(operator.eq)

numbers.Rational.register(Rational)

public(R = Rational) # alias
