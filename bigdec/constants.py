"""Constants shared across the decimal package."""

from enum import Enum

# Largest scale accepted (2^31 - 1)
MAX_SCALE = 2_147_483_647

EXP_MARK = "e"
RADIX_MARK = "."


class RoundingMode(str, Enum):
    """How digits beyond the target scale are resolved."""

    TRUNCATE = "truncate"  # Drop extra digits (toward zero)
    HALF_UP = "half_up"  # Ties away from zero
    HALF_DOWN = "half_down"  # Ties toward zero
    CEILING = "ceiling"  # Toward +infinity
    FLOOR = "floor"  # Toward -infinity


__all__ = ["MAX_SCALE", "EXP_MARK", "RADIX_MARK", "RoundingMode"]
