"""Exact arithmetic on scaled integers.

A decimal value is handled here as a pair ``(unscaled, scale)`` meaning
``unscaled / 10**scale``, where ``unscaled`` is a signed Python int of any
size. Every operation computes the exact result first and then truncates it
toward zero to the requested scale, so no digit is ever produced by rounding.
"""

from __future__ import annotations

from bigdec.constants import RADIX_MARK
from bigdec.errors import DivisionByZero

__all__ = [
    "div_trunc",
    "to_unscaled",
    "rescale",
    "format_unscaled",
    "compare",
    "add",
    "subtract",
    "multiply",
    "divide",
]


def div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Python's // operator rounds toward negative infinity, which would round
    negative quotients away from zero.

    Raises:
        DivisionByZero: If b is zero

    Examples:
        -7 // 3 = -3 (floor)
        div_trunc(-7, 3) = -2
    """
    if b == 0:
        raise DivisionByZero(f"Division by zero: {a} / 0")
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def to_unscaled(negative: bool, integral: int, fractional: str) -> int:
    """Combine sign, integral magnitude and fractional digits into one int."""
    magnitude = integral * 10 ** len(fractional) + int(fractional or "0")
    return -magnitude if negative else magnitude


def rescale(unscaled: int, from_scale: int, to_scale: int) -> int:
    """Move an unscaled value to another scale, truncating toward zero."""
    if to_scale >= from_scale:
        return unscaled * 10 ** (to_scale - from_scale)
    return div_trunc(unscaled, 10 ** (from_scale - to_scale))


def format_unscaled(unscaled: int, scale: int) -> str:
    """Render ``unscaled / 10**scale`` as ``[-]integral[.fractional]``.

    Zero is never rendered with a minus sign.
    """
    sign = "-" if unscaled < 0 else ""
    digits = str(abs(unscaled))
    if scale == 0:
        return sign + digits
    digits = digits.rjust(scale + 1, "0")
    return f"{sign}{digits[:-scale]}{RADIX_MARK}{digits[-scale:]}"


def _align(a: int, a_scale: int, b: int, b_scale: int) -> tuple[int, int, int]:
    scale = max(a_scale, b_scale)
    return rescale(a, a_scale, scale), rescale(b, b_scale, scale), scale


def compare(a: int, a_scale: int, b: int, b_scale: int) -> int:
    """Compare two values exactly at the larger of their scales.

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b
    """
    left, right, _ = _align(a, a_scale, b, b_scale)
    return (left > right) - (left < right)


def add(a: int, a_scale: int, b: int, b_scale: int, scale: int) -> int:
    """Exact sum truncated to ``scale``."""
    left, right, working = _align(a, a_scale, b, b_scale)
    return rescale(left + right, working, scale)


def subtract(a: int, a_scale: int, b: int, b_scale: int, scale: int) -> int:
    """Exact difference truncated to ``scale``."""
    left, right, working = _align(a, a_scale, b, b_scale)
    return rescale(left - right, working, scale)


def multiply(a: int, a_scale: int, b: int, b_scale: int, scale: int) -> int:
    """Exact product truncated to ``scale``."""
    return rescale(a * b, a_scale + b_scale, scale)


def divide(a: int, a_scale: int, b: int, b_scale: int, scale: int) -> int:
    """Quotient truncated to ``scale`` by long division.

    (a / 10^as) / (b / 10^bs) * 10^s == a * 10^(bs + s) / (b * 10^as)

    Raises:
        DivisionByZero: If b is zero
    """
    if b == 0:
        raise DivisionByZero(f"Division by zero: {format_unscaled(a, a_scale)} / 0")
    return div_trunc(a * 10 ** (b_scale + scale), b * 10**a_scale)
