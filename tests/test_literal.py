# SPDX-FileCopyrightText: 2025 fixrat contributors
# SPDX-License-Identifier: Apache-2.0

from fixrat.core.literal import parse_literal, IntegerLiteral, DecimalLiteral, FractionLiteral
from fixrat import InvalidArgument
import math
import pytest

def test_integer():
    assert parse_literal("12") == IntegerLiteral(12)
    assert parse_literal("-0012") == IntegerLiteral(-12)
    assert parse_literal(" +5\t") == IntegerLiteral(5)
    assert isinstance(parse_literal("12"), IntegerLiteral)

def test_decimal():
    assert parse_literal("1.5") == DecimalLiteral(1.5)
    assert parse_literal("1.") == DecimalLiteral(1.0)
    assert parse_literal(" -.25 ") == DecimalLiteral(-0.25)
    assert parse_literal("3e-5") == DecimalLiteral(3e-5)
    assert parse_literal("1.5E+3") == DecimalLiteral(1500.0)
    assert isinstance(parse_literal("1e3"), DecimalLiteral)
    assert parse_literal("1e400").value == math.inf

def test_fraction():
    assert parse_literal("1/2") == FractionLiteral(1, 2)
    assert parse_literal(" 3 / -4 ") == FractionLiteral(3, -4)
    assert parse_literal("-6/+8") == FractionLiteral(-6, 8)
    assert parse_literal("1/0") == FractionLiteral(1, 0)

@pytest.mark.parametrize("text", [
    "", "x", "1/2/3", "1 2", "1.5/2", "1/2.5", "- 1", "1e", "e5", ".", "1..2", "0b101",
])
def test_invalid(text):
    with pytest.raises(InvalidArgument):
        parse_literal(text)

def test_error_message_quotes_text():
    with pytest.raises(InvalidArgument, match='"abc"'):
        parse_literal("abc")
    with pytest.raises(InvalidArgument, match=r'"1234567890123456\.\.\.'):
        parse_literal("12345678901234567890 apples")

def test_type_error():
    with pytest.raises(TypeError):
        parse_literal(12)
    with pytest.raises(TypeError):
        parse_literal(b"12")
