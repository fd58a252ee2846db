"""Rounding of scaled integers under a RoundingMode."""

from __future__ import annotations

from bigdec.constants import RoundingMode

__all__ = ["round_unscaled"]


def round_unscaled(unscaled: int, from_scale: int, to_scale: int, mode: RoundingMode) -> int:
    """Round ``unscaled / 10**from_scale`` to ``to_scale`` fractional digits.

    Args:
        unscaled: Signed unscaled value
        from_scale: Scale of ``unscaled``
        to_scale: Target scale
        mode: How the discarded digits are resolved

    Returns:
        Unscaled value at ``to_scale``

    Examples:
        round_unscaled(125, 2, 1, RoundingMode.HALF_UP) = 13    # 1.25 -> 1.3
        round_unscaled(125, 2, 1, RoundingMode.HALF_DOWN) = 12  # 1.25 -> 1.2
        round_unscaled(-121, 2, 1, RoundingMode.FLOOR) = -13    # -1.21 -> -1.3
    """
    mode = RoundingMode(mode)
    if to_scale >= from_scale:
        return unscaled * 10 ** (to_scale - from_scale)

    divisor = 10 ** (from_scale - to_scale)
    negative = unscaled < 0
    quotient, remainder = divmod(abs(unscaled), divisor)

    if remainder:
        if mode is RoundingMode.HALF_UP:
            bump = 2 * remainder >= divisor
        elif mode is RoundingMode.HALF_DOWN:
            bump = 2 * remainder > divisor
        elif mode is RoundingMode.CEILING:
            bump = not negative
        elif mode is RoundingMode.FLOOR:
            bump = negative
        else:
            bump = False
        if bump:
            quotient += 1

    return -quotient if negative else quotient
