"""Literal parsing and normalization.

Turns a textual literal into a (negative, integral, fractional) triple.
Two grammars are accepted:

- plain: ``[-]digits[.digits]`` (``-.5`` is read as ``-0.5``)
- scientific: ``[-]mantissa e [+-]digits`` (case-insensitive marker)

Scientific literals are expanded exactly from the mantissa's digits, never
through a float.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

import structlog

from bigdec.constants import EXP_MARK, MAX_SCALE, RADIX_MARK
from bigdec.errors import InvalidFormat, InvalidScale, PrecisionLoss

__all__ = ["ParsedLiteral", "parse_literal", "check_scale"]

logger = structlog.get_logger()

_RADIX = re.escape(RADIX_MARK)

_PLAIN_RE = re.compile(rf"^(-?)(\d+)(?:{_RADIX}(\d+))?$", re.ASCII)
_SCIENTIFIC_RE = re.compile(
    rf"^(-?)(\d+(?:{_RADIX}\d*)?|{_RADIX}\d+){EXP_MARK}([+-]?\d+)$",
    re.IGNORECASE | re.ASCII,
)


@dataclass(frozen=True)
class ParsedLiteral:
    """Components of a parsed literal.

    Attributes:
        negative: Sign as written (a zero value may still carry it)
        integral: Magnitude of the part before the radix point
        fractional: Digits after the radix point, padded to the requested scale
    """

    negative: bool
    integral: int
    fractional: str

    @property
    def scale(self) -> int:
        return len(self.fractional)


def check_scale(scale: int, max_scale: int = MAX_SCALE) -> int:
    """Validate an explicit scale.

    Raises:
        TypeError: If scale is not an int
        InvalidScale: If scale is negative or above max_scale
    """
    if isinstance(scale, bool) or not isinstance(scale, int):
        raise TypeError(f"Scale must be int, got {type(scale).__name__}")
    if scale < 0 or scale > max_scale:
        raise InvalidScale(f"Scale {scale} outside valid range [0, {max_scale}]")
    return scale


def parse_literal(literal: str, scale: int | None = None) -> ParsedLiteral:
    """Parse a plain or scientific literal.

    Args:
        literal: Text to parse. Surrounding whitespace is ignored.
        scale: Optional number of fractional digits to pad to

    Returns:
        ParsedLiteral with the fractional part padded to ``scale``

    Raises:
        InvalidFormat: If the literal matches neither grammar
        PrecisionLoss: If ``scale`` is smaller than the digits present
    """
    text = literal.strip()
    if text.startswith("-" + RADIX_MARK):
        text = "-0" + text[1:]

    plain = _PLAIN_RE.match(text)
    if plain:
        negative, integral, fractional = _split_plain(text, plain)
    else:
        scientific = _SCIENTIFIC_RE.match(text)
        if not scientific:
            logger.debug("literal_rejected", literal=literal)
            raise InvalidFormat(f"Invalid value/notation: {literal!r}")
        negative, integral, fractional = _expand_scientific(scientific)

    if scale is not None:
        if scale < len(fractional):
            raise PrecisionLoss(
                f"Loss of precision detected: literal {literal!r} has scale "
                f"{len(fractional)} > {scale} as defined"
            )
        fractional = fractional.ljust(scale, "0")

    return ParsedLiteral(negative=negative, integral=integral, fractional=fractional)


def _split_plain(text: str, match: re.Match[str]) -> tuple[bool, int, str]:
    sign, before, after = match.groups()
    integral = int(before)
    fractional = after or ""
    # "-0" is not negative, "-0.5" is
    negative = sign == "-" and (integral != 0 or after is not None)
    return negative, integral, fractional


def _expand_scientific(match: re.Match[str]) -> tuple[bool, int, str]:
    sign, mantissa, exp_text = match.groups()
    exponent = int(exp_text)

    int_text, _, frac_text = mantissa.partition(RADIX_MARK)
    # Trailing zeros after the mantissa's radix point carry no value
    frac_text = frac_text.rstrip("0")
    digits = int_text + frac_text

    if exponent < 0:
        point = len(int_text) + exponent
        if point <= 0:
            integral = 0
            fractional = "0" * -point + digits
        else:
            integral = int(digits[:point])
            fractional = digits[point:]
    else:
        # Digits still below the radix point after shifting are discarded
        integral = int(digits or "0") * 10**exponent // 10 ** len(frac_text)
        fractional = ""

    logger.debug(
        "scientific_literal_expanded",
        mantissa=mantissa,
        exponent=exponent,
        integral=integral,
        fractional=fractional,
    )
    return sign == "-", integral, fractional
