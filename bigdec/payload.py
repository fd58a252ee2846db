"""Structured (value, scale) form of a Decimal for external serializers."""

from pydantic import BaseModel, Field, model_validator

from bigdec.constants import MAX_SCALE
from bigdec.errors import DecimalError
from bigdec.parsing import parse_literal


class DecimalPayload(BaseModel):
    """A decimal value as its canonical string plus its scale.

    Example: ``{"value": "123.00", "scale": 2}``
    """

    value: str = Field(description="Canonical decimal string")
    scale: int = Field(ge=0, le=MAX_SCALE, description="Number of fractional digits")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _value_fits_scale(self) -> "DecimalPayload":
        try:
            parse_literal(self.value, self.scale)
        except DecimalError as err:
            raise ValueError(str(err)) from err
        return self


__all__ = ["DecimalPayload"]
