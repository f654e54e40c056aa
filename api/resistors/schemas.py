"""
Pydantic schemas for resistor conversion endpoints.

Fields are camelCase on the wire (`firstBand`, `resistorValue`, ...);
snake_case names are accepted on input as well.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ValueFromBandsRequest(_CamelModel):
    first_band: str = Field(..., min_length=1, max_length=20)
    second_band: str = Field(..., min_length=1, max_length=20)
    # Left out for 4-band-coded resistors.
    third_band: str | None = Field(default=None, min_length=1, max_length=20)
    multiplier: str = Field(..., min_length=1, max_length=20)
    tolerance: str = Field(..., min_length=1, max_length=20)


class ValueFromBandsResponse(_CamelModel):
    resistor_value: float
    tolerance: float


class BandsFromValueRequest(_CamelModel):
    # Sign and range are checked by the codec, which reports them as 400s.
    resistor_value: float
    tolerance: float
    number_of_bands: int


class BandsFromValueResponse(_CamelModel):
    first_band: str
    second_band: str
    third_band: str | None
    multiplier: str
    tolerance: str
