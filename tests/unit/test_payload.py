"""Tests for the structured (value, scale) payload."""

import pytest
from pydantic import ValidationError

from bigdec import Decimal, DecimalPayload


class TestDecimalPayload:
    """Tests for DecimalPayload validation."""

    def test_valid(self):
        """A value matching its scale validates."""
        payload = DecimalPayload(value="123.00", scale=2)
        assert payload.value == "123.00"
        assert payload.scale == 2

    def test_scale_pads(self):
        """A scale above the digits present is accepted."""
        assert DecimalPayload(value="1", scale=3).scale == 3

    def test_scale_too_small_rejected(self):
        """A scale below the digits present fails validation."""
        with pytest.raises(ValidationError) as exc_info:
            DecimalPayload(value="1.234", scale=2)
        assert "Loss of precision" in str(exc_info.value)

    def test_invalid_value_rejected(self):
        """Unparsable values fail validation."""
        with pytest.raises(ValidationError):
            DecimalPayload(value="abc", scale=0)

    def test_negative_scale_rejected(self):
        """Scale must be non-negative."""
        with pytest.raises(ValidationError):
            DecimalPayload(value="1", scale=-1)

    def test_frozen(self):
        """Payloads are immutable."""
        payload = DecimalPayload(value="1", scale=0)
        with pytest.raises(ValidationError):
            payload.scale = 2  # type: ignore[misc]

    def test_json_dump(self):
        """Payload serializes to the plain structured form."""
        payload = DecimalPayload(value="-0.50", scale=2)
        assert payload.model_dump() == {"value": "-0.50", "scale": 2}


class TestDecimalPayloadConversion:
    """Tests for Decimal <-> payload conversion."""

    def test_to_payload(self):
        """to_payload mirrors to_dict."""
        d = Decimal("123", 2)
        assert d.to_payload().model_dump() == d.to_dict()

    def test_from_payload_model(self):
        """from_payload restores value and scale."""
        d = Decimal.from_payload(DecimalPayload(value="5", scale=2))
        assert d.to_string() == "5.00"

    def test_from_payload_dict(self):
        """from_payload validates plain dicts."""
        d = Decimal.from_payload({"value": "-1.5", "scale": 1})
        assert d == Decimal("-1.5")

    def test_from_payload_dict_invalid(self):
        """Malformed dicts raise ValidationError."""
        with pytest.raises(ValidationError):
            Decimal.from_payload({"value": "1.5"})

    def test_round_trip(self):
        """Payload round trip preserves value and scale."""
        d = Decimal("-987654321.000100")
        payload = DecimalPayload.model_validate_json(d.to_payload().model_dump_json())
        restored = Decimal.from_payload(payload)
        assert restored == d
        assert restored.scale() == d.scale()
