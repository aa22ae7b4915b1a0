"""Operator and control-flow helpers: query strings, arithmetic, bit operations, grading."""

from __future__ import annotations

from typing import Any, NamedTuple

_UINT_MASK = (1 << 64) - 1
_SHIFT = 2


class Arithmetic(NamedTuple):
    """Results of the integer arithmetic operators on two operands."""

    sum: int
    difference: int
    product: int
    quotient: int
    remainder: int


class Bitwise(NamedTuple):
    """Results of the bit operators on two unsigned operands."""

    and_: int
    or_: int
    xor: int
    left_shift: int
    right_shift: int


def format_query(stock_code: int, end_date: str) -> str:
    """Build the 'Code=<n>&endDate=<date>' query string."""
    return f"Code={int(stock_code)}&endDate={end_date}"


def arithmetic(a: int, b: int) -> Arithmetic:
    """Apply +, -, *, / and % with integer division that truncates toward zero.

    The remainder takes the sign of ``a``. Raises ZeroDivisionError when ``b`` is 0.
    """
    if b == 0:
        raise ZeroDivisionError("integer divide by zero")
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    remainder = a - b * quotient
    return Arithmetic(a + b, a - b, a * b, quotient, remainder)


def bitwise(a: int, b: int) -> Bitwise:
    """Apply &, |, ^ to ``a`` and ``b`` and shift ``a`` left and right by two bits.

    Operands are 64-bit unsigned; the left shift wraps at 64 bits.
    """
    if a < 0 or b < 0 or a > _UINT_MASK or b > _UINT_MASK:
        raise ValueError("operands must be unsigned 64-bit integers")
    return Bitwise(
        a & b,
        a | b,
        a ^ b,
        (a << _SHIFT) & _UINT_MASK,
        a >> _SHIFT,
    )


def grade_for(marks: int) -> str:
    """Map exact marks to a letter grade: 90 A, 80 B, 50/60/70 C, otherwise D."""
    if marks == 90:
        return "A"
    if marks == 80:
        return "B"
    if marks in (50, 60, 70):
        return "C"
    return "D"


def describe_grade(grade: str) -> str:
    """Describe a letter grade in words."""
    if grade == "A":
        return "优秀"
    if grade in ("B", " C"):
        return "良好"
    if grade == "D":
        return "及格"
    if grade == "F":
        return "不及格"
    return "差"


def describe_type(value: Any) -> str:
    """Say which kind of value was given."""
    if value is None:
        return "x is nil"
    if isinstance(value, (str, bool)):
        return "x is string or bool"
    if isinstance(value, int):
        return "x is int"
    if isinstance(value, float):
        return "x is float64"
    if callable(value):
        return f"x type: {type(value).__name__}"
    return "未知型"