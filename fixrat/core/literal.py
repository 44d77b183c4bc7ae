# SPDX-FileCopyrightText: 2025 fixrat contributors
# SPDX-License-Identifier: Apache-2.0

"""
Parser for textual rational literals (see literal.lark).

:func:`parse_literal` only classifies and converts the text; turning the
result into a :class:`fixrat.core.rational.Rational` (and range checking it)
is left to :meth:`Rational.parse`.
"""

from pathlib import Path
from typing import NamedTuple
from lark import Lark, Transformer, UnexpectedInput
from lark.exceptions import VisitError
from public import public
from .errors import InvalidArgument
from .stringify import abbrev

@public
class IntegerLiteral(NamedTuple):
    value: int

@public
class DecimalLiteral(NamedTuple):
    value: float

@public
class FractionLiteral(NamedTuple):
    numerator: int
    denominator: int

class LiteralTransformer(Transformer):
    def integer(self, items):
        (tok,) = items
        return IntegerLiteral(int(tok))

    def decimal(self, items):
        (tok,) = items
        # Values beyond the float range become +/-inf here.
        return DecimalLiteral(float(tok))

    def fraction(self, items):
        num, den = items
        return FractionLiteral(int(num), int(den))

lark_fn = Path(__file__).parent / "literal.lark"
parser = Lark.open(lark_fn, parser="lalr", start="literal")

@public
def parse_literal(text: str) -> IntegerLiteral | DecimalLiteral | FractionLiteral:
    """
    Parses an integer, decimal/exponential or 'numerator/denominator' literal.
    Whitespace around the literal and around '/' is ignored.

    Raises :class:`InvalidArgument` for anything else.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}.")
    try:
        tree = parser.parse(text)
    except UnexpectedInput:
        raise InvalidArgument(f"Invalid rational number: {abbrev(text)}") from None
    try:
        return LiteralTransformer().transform(tree)
    except VisitError as e:
        # int() refuses digit strings beyond sys.get_int_max_str_digits().
        raise InvalidArgument(f"Invalid rational number: {abbrev(text)}") from e.orig_exc
