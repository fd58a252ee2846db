"""Configuration for decimal construction and rounding."""

from dataclasses import dataclass

from bigdec.constants import MAX_SCALE, RoundingMode


@dataclass(frozen=True)
class DecimalConfig:
    """Centralized configuration for Decimal behavior.

    Attributes:
        max_scale: Largest explicit scale accepted at construction or as an
            operation result scale (default: 2^31 - 1)
        default_rounding: Mode used by Decimal.round() when none is given
    """

    max_scale: int = MAX_SCALE
    default_rounding: RoundingMode = RoundingMode.HALF_UP

    def __post_init__(self) -> None:
        if not 0 <= self.max_scale <= MAX_SCALE:
            raise ValueError(f"max_scale must be in [0, {MAX_SCALE}], got {self.max_scale}")


# Default configuration instance
DEFAULT_CONFIG = DecimalConfig()
