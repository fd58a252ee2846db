"""Immutable arbitrary-precision decimal value type.

A Decimal is a sign, an unbounded integral magnitude and a string of
fractional digits. Its scale is the number of fractional digits and is kept
exactly: ``Decimal("1.50")`` has scale 2 and renders as ``1.50``.

Usage pattern:
    from bigdec import Decimal, D

    total = D("19.99").multiply(3)        # 59.97 (scale 2 + 0)
    share = total.divide(7, scale=4)      # 8.5671 (truncated)
    share.round(2).to_string()            # "8.57"

Arithmetic never rounds implicitly. Results are truncated toward zero at the
resolved scale; use round() to apply a RoundingMode.
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Any, ClassVar, Union

import structlog

from bigdec import arithmetic
from bigdec.config import DEFAULT_CONFIG, DecimalConfig
from bigdec.constants import RADIX_MARK, RoundingMode
from bigdec.errors import DivisionByZero, InvalidFormat
from bigdec.parsing import check_scale, parse_literal
from bigdec.payload import DecimalPayload
from bigdec.rounding import round_unscaled

__all__ = ["Decimal", "D", "DecimalLike"]

logger = structlog.get_logger()

DecimalLike = Union["Decimal", str, int, float]


class Decimal:
    """Immutable decimal number with an explicit scale.

    Attributes:
        integral_part: Magnitude before the radix point (read-only)
        fractional_part: Digits after the radix point (read-only)
    """

    __slots__ = ("_negative", "_integral", "_fractional")
    _negative: bool
    _integral: int
    _fractional: str

    config: ClassVar[DecimalConfig] = DEFAULT_CONFIG

    def __init__(self, value: DecimalLike, scale: int | None = None) -> None:
        """Create a Decimal from a literal, number or another Decimal.

        Args:
            value: Plain or scientific string, int, float (via its repr),
                or Decimal to copy
            scale: Number of fractional digits to pad to

        Raises:
            TypeError: If value is not a str, int, float or Decimal
            InvalidFormat: If value is not a valid literal
            PrecisionLoss: If scale is smaller than the digits present
            InvalidScale: If scale is negative or too large
        """
        if scale is not None:
            check_scale(scale, self.config.max_scale)

        parsed = parse_literal(_to_literal(value), scale)
        zero = parsed.integral == 0 and not parsed.fractional.strip("0")
        self._set(parsed.negative and not zero, parsed.integral, parsed.fractional)

    def _set(self, negative: bool, integral: int, fractional: str) -> None:
        object.__setattr__(self, "_negative", negative)
        object.__setattr__(self, "_integral", integral)
        object.__setattr__(self, "_fractional", fractional)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def _build(cls, negative: bool, integral: int, fractional: str) -> Decimal:
        """Create an instance from already-validated parts."""
        inst = cls.__new__(cls)
        zero = integral == 0 and not fractional.strip("0")
        inst._set(negative and not zero, integral, fractional)
        return inst

    @classmethod
    def _from_unscaled(cls, unscaled: int, scale: int) -> Decimal:
        """Feed an engine result back through the literal parser."""
        return cls(arithmetic.format_unscaled(unscaled, scale))

    @classmethod
    def create(cls, value: DecimalLike, scale: int | None = None) -> Decimal:
        """Return value if it is already a Decimal, otherwise construct one.

        Decimals are immutable, so an existing instance is returned as is
        unless a scale is requested.
        """
        if scale is None and isinstance(value, cls):
            return value
        return cls(value, scale)

    @classmethod
    def zero(cls) -> Decimal:
        """Create a Decimal with value 0."""
        return cls._build(False, 0, "")

    @classmethod
    def from_payload(cls, payload: DecimalPayload | dict[str, Any]) -> Decimal:
        """Create from the structured ``{"value", "scale"}`` form.

        Raises:
            pydantic.ValidationError: If a dict payload is malformed
        """
        if not isinstance(payload, DecimalPayload):
            payload = DecimalPayload.model_validate(payload)
        return cls(payload.value, payload.scale)

    # --- Accessors ---

    @property
    def integral_part(self) -> int:
        return self._integral

    @property
    def fractional_part(self) -> str:
        return self._fractional

    def scale(self) -> int:
        """Number of fractional digits."""
        return len(self._fractional)

    def precision(self) -> int:
        """Number of significant digits.

        Leading zeros of a purely fractional value are not significant:
        ``0.0012`` has precision 2, ``10.50`` has precision 4.
        """
        if self._integral:
            return len(str(self._integral)) + len(self._fractional)
        return len(self._fractional.lstrip("0"))

    def sign(self) -> int:
        """Signum: 0 if zero, -1 if negative, 1 if positive."""
        if self.is_zero():
            return 0
        return -1 if self._negative else 1

    def is_zero(self) -> bool:
        return self._integral == 0 and not self._fractional.strip("0")

    def is_negative(self) -> bool:
        return self._negative and not self.is_zero()

    def is_positive(self) -> bool:
        return not self._negative and not self.is_zero()

    def _unscaled(self) -> int:
        return arithmetic.to_unscaled(self._negative, self._integral, self._fractional)

    def _fraction(self) -> Fraction:
        return Fraction(self._unscaled(), 10 ** self.scale())

    # --- Comparison ---

    def compare_to(self, value: DecimalLike) -> int:
        """Compare with value exactly.

        Returns:
            -1 if self < value, 0 if equal, 1 if self > value
        """
        other = Decimal.create(value)
        return arithmetic.compare(self._unscaled(), self.scale(), other._unscaled(), other.scale())

    def equals(self, value: DecimalLike) -> bool:
        """True if numerically equal, regardless of scale."""
        return self.compare_to(value) == 0

    def greater_than(self, value: DecimalLike) -> bool:
        return self.compare_to(value) > 0

    def less_than(self, value: DecimalLike) -> bool:
        return self.compare_to(value) < 0

    def greater_than_or_equals(self, value: DecimalLike) -> bool:
        return self.compare_to(value) >= 0

    def less_than_or_equals(self, value: DecimalLike) -> bool:
        return self.compare_to(value) <= 0

    # --- Arithmetic ---

    def _result_scale(self, other: Decimal, scale: int | None) -> int:
        """Return the explicit scale if given, else the larger operand scale."""
        if scale is None:
            return max(self.scale(), other.scale())
        return check_scale(scale, self.config.max_scale)

    def add(self, value: DecimalLike, scale: int | None = None) -> Decimal:
        """Add value and return the sum, truncated to the result scale."""
        other = Decimal.create(value)
        result_scale = self._result_scale(other, scale)
        unscaled = arithmetic.add(
            self._unscaled(), self.scale(), other._unscaled(), other.scale(), result_scale
        )
        return Decimal._from_unscaled(unscaled, result_scale)

    def subtract(self, value: DecimalLike, scale: int | None = None) -> Decimal:
        """Subtract value and return the difference, truncated to the result scale."""
        other = Decimal.create(value)
        result_scale = self._result_scale(other, scale)
        unscaled = arithmetic.subtract(
            self._unscaled(), self.scale(), other._unscaled(), other.scale(), result_scale
        )
        return Decimal._from_unscaled(unscaled, result_scale)

    def multiply(self, value: DecimalLike, scale: int | None = None) -> Decimal:
        """Multiply by value.

        The result scale defaults to the sum of both operand scales, which
        keeps the product exact.
        """
        other = Decimal.create(value)
        if scale is None:
            result_scale = self.scale() + other.scale()
        else:
            result_scale = check_scale(scale, self.config.max_scale)
        unscaled = arithmetic.multiply(
            self._unscaled(), self.scale(), other._unscaled(), other.scale(), result_scale
        )
        return Decimal._from_unscaled(unscaled, result_scale)

    def divide(self, value: DecimalLike, scale: int | None = None) -> Decimal:
        """Divide by value, truncating digits beyond the result scale.

        Raises:
            DivisionByZero: If value is zero
        """
        other = Decimal.create(value)
        if other.is_zero():
            raise DivisionByZero(f"Division by zero: {self} / {other}")
        result_scale = self._result_scale(other, scale)
        unscaled = arithmetic.divide(
            self._unscaled(), self.scale(), other._unscaled(), other.scale(), result_scale
        )
        return Decimal._from_unscaled(unscaled, result_scale)

    def round(self, scale: int = 0, mode: RoundingMode | None = None) -> Decimal:
        """Round to ``scale`` fractional digits.

        Args:
            scale: Target number of fractional digits
            mode: Rounding mode (default: config.default_rounding)
        """
        check_scale(scale, self.config.max_scale)
        if mode is None:
            mode = self.config.default_rounding
        unscaled = round_unscaled(self._unscaled(), self.scale(), scale, mode)
        return Decimal._from_unscaled(unscaled, scale)

    def trim(self) -> Decimal:
        """Remove trailing zeros from the fractional part, reducing the scale."""
        return Decimal._build(self._negative, self._integral, self._fractional.rstrip("0"))

    def absolute(self) -> Decimal:
        return Decimal._build(False, self._integral, self._fractional)

    def negation(self) -> Decimal:
        """Return the value with its sign flipped. Zero stays zero."""
        return Decimal._build(not self._negative, self._integral, self._fractional)

    # --- Conversion ---

    def to_string(self) -> str:
        """Render as ``[-]integral[.fractional]``.

        The output re-parses to an equal value with the same scale.
        """
        text = str(self._integral)
        if self._fractional:
            text = f"{text}{RADIX_MARK}{self._fractional}"
        return "-" + text if self._negative else text

    def to_float(self) -> float:
        """Approximate as a float.

        Values beyond float range or precision cannot be represented exactly;
        out-of-range values become infinities.
        """
        result = float(self.to_string())
        if math.isinf(result):
            logger.warning("float_conversion_overflow", value=self.to_string())
        return result

    def to_int(self) -> int:
        """Convert to int, truncating toward zero. Does not round."""
        return -self._integral if self._negative else self._integral

    def to_dict(self) -> dict[str, Any]:
        """Structured form for serializers: ``{"value": str, "scale": int}``."""
        return {"value": self.to_string(), "scale": self.scale()}

    def to_payload(self) -> DecimalPayload:
        return DecimalPayload(value=self.to_string(), scale=self.scale())

    # --- Python protocol ---

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Decimal('{self.to_string()}')"

    def __hash__(self) -> int:
        # Equal values at different scales must hash alike, as must an equal
        # int or float.
        return hash(self._fraction())

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.to_string(),))

    def __copy__(self) -> Decimal:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Decimal:
        return self

    def __float__(self) -> float:
        return self.to_float()

    def __int__(self) -> int:
        return self.to_int()

    def __bool__(self) -> bool:
        """True if non-zero."""
        return not self.is_zero()

    def __round__(self, ndigits: int | None = None) -> Decimal | int:
        """Builtin round() using config.default_rounding.

        Without ndigits the result is an int. A negative ndigits rounds to
        tens, hundreds and so on, giving a Decimal of scale 0.
        """
        if ndigits is None:
            return self.round(0).to_int()
        if ndigits >= 0:
            return self.round(ndigits)
        shift = -ndigits
        unscaled = round_unscaled(
            self._unscaled(), self.scale() + shift, 0, self.config.default_rounding
        )
        return Decimal._from_unscaled(unscaled * 10**shift, 0)

    def __neg__(self) -> Decimal:
        return self.negation()

    def __pos__(self) -> Decimal:
        return self

    def __abs__(self) -> Decimal:
        return self.absolute()

    def __add__(self, other: DecimalLike) -> Decimal:
        if not _is_coercible(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: DecimalLike) -> Decimal:
        if not _is_coercible(other):
            return NotImplemented
        return Decimal.create(other).add(self)

    def __sub__(self, other: DecimalLike) -> Decimal:
        if not _is_coercible(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: DecimalLike) -> Decimal:
        if not _is_coercible(other):
            return NotImplemented
        return Decimal.create(other).subtract(self)

    def __mul__(self, other: DecimalLike) -> Decimal:
        if not _is_coercible(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: DecimalLike) -> Decimal:
        if not _is_coercible(other):
            return NotImplemented
        return Decimal.create(other).multiply(self)

    def __truediv__(self, other: DecimalLike) -> Decimal:
        if not _is_coercible(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: DecimalLike) -> Decimal:
        if not _is_coercible(other):
            return NotImplemented
        return Decimal.create(other).divide(self)

    def _compare_operand(self, other: object) -> int | None:
        """Exact comparison for operators; None when other is not a number.

        Strings are not numbers here, and floats are compared by their exact
        binary value, so that equal operands always hash alike.
        """
        if isinstance(other, bool):
            return None
        if isinstance(other, (Decimal, int)):
            return self.compare_to(other)
        if isinstance(other, float):
            if math.isnan(other):
                return None
            if math.isinf(other):
                return -1 if other > 0 else 1
            mine, theirs = self._fraction(), Fraction(other)
            return (mine > theirs) - (mine < theirs)
        return None

    def __eq__(self, other: object) -> bool:
        result = self._compare_operand(other)
        if result is None:
            return NotImplemented
        return result == 0

    def __ne__(self, other: object) -> bool:
        result = self._compare_operand(other)
        if result is None:
            return NotImplemented
        return result != 0

    def __lt__(self, other: DecimalLike) -> bool:
        result = self._compare_operand(other)
        if result is None:
            return NotImplemented
        return result < 0

    def __le__(self, other: DecimalLike) -> bool:
        result = self._compare_operand(other)
        if result is None:
            return NotImplemented
        return result <= 0

    def __gt__(self, other: DecimalLike) -> bool:
        result = self._compare_operand(other)
        if result is None:
            return NotImplemented
        return result > 0

    def __ge__(self, other: DecimalLike) -> bool:
        result = self._compare_operand(other)
        if result is None:
            return NotImplemented
        return result >= 0


def _is_coercible(value: object) -> bool:
    """Check whether an operand can take part in Decimal arithmetic."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (Decimal, str, int, float))


def _to_literal(value: object) -> str:
    """Convert a constructor argument to the literal text to parse."""
    if isinstance(value, Decimal):
        return value.to_string()
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        raise TypeError("Decimal does not accept bool")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidFormat(f"Non-finite float cannot be a Decimal: {value!r}")
        return repr(value)
    raise TypeError(f"Decimal requires str, int, float or Decimal, got {type(value).__name__}")


# Convenience alias for concise code
D = Decimal
