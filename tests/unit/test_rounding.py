"""Tests for rounding under each RoundingMode."""

import pytest

from bigdec import Decimal, DecimalConfig, RoundingMode
from bigdec.rounding import round_unscaled


class TestRoundUnscaled:
    """Tests for round_unscaled."""

    @pytest.mark.parametrize(
        "mode,positive,negative",
        [
            (RoundingMode.TRUNCATE, 12, -12),
            (RoundingMode.HALF_UP, 13, -13),
            (RoundingMode.HALF_DOWN, 12, -12),
            (RoundingMode.CEILING, 13, -12),
            (RoundingMode.FLOOR, 12, -13),
        ],
    )
    def test_tie(self, mode, positive, negative):
        """1.25 and -1.25 to one digit under each mode."""
        assert round_unscaled(125, 2, 1, mode) == positive
        assert round_unscaled(-125, 2, 1, mode) == negative

    def test_above_half(self):
        """Above the midpoint both half modes round away from zero."""
        assert round_unscaled(127, 2, 1, RoundingMode.HALF_UP) == 13
        assert round_unscaled(127, 2, 1, RoundingMode.HALF_DOWN) == 13

    def test_below_half(self):
        """Below the midpoint both half modes round toward zero."""
        assert round_unscaled(-123, 2, 1, RoundingMode.HALF_UP) == -12
        assert round_unscaled(-123, 2, 1, RoundingMode.HALF_DOWN) == -12

    def test_exact_value_unchanged(self):
        """Dropping zero digits never bumps, even for ceiling."""
        assert round_unscaled(120, 2, 1, RoundingMode.CEILING) == 12
        assert round_unscaled(-120, 2, 1, RoundingMode.FLOOR) == -12

    def test_upscale_pads(self):
        """Raising the scale pads with zeros."""
        assert round_unscaled(5, 0, 2, RoundingMode.FLOOR) == 500

    def test_mode_by_value(self):
        """Modes may be given by their string value."""
        assert round_unscaled(125, 2, 1, "half_up") == 13  # type: ignore[arg-type]

    def test_unknown_mode_raises(self):
        """Unknown mode values raise ValueError."""
        with pytest.raises(ValueError):
            round_unscaled(125, 2, 1, "banker")  # type: ignore[arg-type]


class TestDecimalRound:
    """Tests for Decimal.round."""

    def test_default_half_up(self):
        """Default mode rounds ties away from zero."""
        assert Decimal("2.345").round(2).to_string() == "2.35"
        assert Decimal("-2.345").round(2).to_string() == "-2.35"

    def test_default_scale_zero(self):
        """Default scale is 0."""
        assert Decimal("9.5").round().to_string() == "10"

    def test_explicit_mode(self):
        """Mode argument overrides the default."""
        assert Decimal("2.349").round(2, RoundingMode.TRUNCATE).to_string() == "2.34"
        assert Decimal("2.341").round(2, RoundingMode.CEILING).to_string() == "2.35"
        assert Decimal("-2.341").round(2, RoundingMode.FLOOR).to_string() == "-2.35"

    def test_round_to_zero_not_negative(self):
        """A value rounding to zero loses its sign."""
        result = Decimal("-0.004").round(2)
        assert result.to_string() == "0.00"
        assert result.sign() == 0

    def test_round_pads(self):
        """Rounding to a larger scale pads."""
        assert Decimal("1.5").round(3).to_string() == "1.500"

    def test_config_default_rounding(self, monkeypatch):
        """config.default_rounding supplies the mode."""
        monkeypatch.setattr(
            Decimal, "config", DecimalConfig(default_rounding=RoundingMode.FLOOR)
        )
        assert Decimal("2.9").round().to_string() == "2"
