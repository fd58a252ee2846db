"""Immutable arbitrary-precision decimal numbers with explicit scale."""

from bigdec.config import DEFAULT_CONFIG, DecimalConfig
from bigdec.constants import EXP_MARK, MAX_SCALE, RADIX_MARK, RoundingMode
from bigdec.decimal import D, Decimal, DecimalLike
from bigdec.errors import (
    DecimalError,
    DivisionByZero,
    InvalidFormat,
    InvalidScale,
    PrecisionLoss,
)
from bigdec.payload import DecimalPayload

__version__ = "0.1.0"
__all__ = [
    # Classes
    "Decimal",
    "D",
    "DecimalLike",
    "DecimalPayload",
    "DecimalConfig",
    "RoundingMode",
    # Errors
    "DecimalError",
    "InvalidFormat",
    "PrecisionLoss",
    "InvalidScale",
    "DivisionByZero",
    # Constants
    "MAX_SCALE",
    "EXP_MARK",
    "RADIX_MARK",
    "DEFAULT_CONFIG",
    "__version__",
]
