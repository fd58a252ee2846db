"""Error classes for decimal parsing and arithmetic.

Every error derives from DecimalError, which is an ArithmeticError. Each
concrete error also derives from the builtin exception callers would expect
(ValueError for bad input, ZeroDivisionError for division by zero).
"""


class DecimalError(ArithmeticError):
    """Base class for decimal errors."""

    pass


class InvalidFormat(DecimalError, ValueError):
    """Literal matches neither the plain nor the scientific grammar."""

    pass


class PrecisionLoss(DecimalError, ValueError):
    """Requested scale would truncate digits present in the literal."""

    pass


class InvalidScale(DecimalError, ValueError):
    """Scale is negative or exceeds the configured maximum."""

    pass


class DivisionByZero(DecimalError, ZeroDivisionError):
    """Divisor is zero."""

    pass


__all__ = [
    "DecimalError",
    "InvalidFormat",
    "PrecisionLoss",
    "InvalidScale",
    "DivisionByZero",
]
