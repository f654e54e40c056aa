"""
Conversions between color bands and resistor values.

- value_from_bands: 4-band (two digits) or 5-band (three digits) code -> ohms + tolerance
- bands_from_value: ohms + tolerance -> band colors for a 4- or 5-band resistor

Values are handled as decimals so that multipliers stay exact powers of ten;
floats only appear at the edges (inputs and the returned resistance).
"""

from __future__ import annotations

from decimal import Decimal
from typing import NamedTuple

from . import colors
from .colors import ColorBand
from .errors import (
    InvalidBandCountError,
    InvalidBandError,
    InvalidToleranceError,
    InvalidValueError,
    UnknownColorError,
    UnknownMultiplierError,
    UnknownToleranceError,
)

BAND_COUNTS = (4, 5)
MAX_DECIMAL_PLACES = 2


class ResistorValue(NamedTuple):
    resistance: float
    tolerance: float


class BandColors(NamedTuple):
    first_band: ColorBand
    second_band: ColorBand
    third_band: ColorBand | None
    multiplier: ColorBand
    tolerance: ColorBand


def _digit_of(color_name: str | ColorBand, *, position: str) -> int:
    try:
        digit = colors.lookup(color_name).digit
    except UnknownColorError as exc:
        raise InvalidBandError(f"Unknown color for the {position} band: {color_name!r}.") from exc
    if digit is None:
        raise InvalidBandError(f"{colors.to_color(color_name).value} is not a digit color ({position} band).")
    return digit


def value_from_bands(
    first_band: str | ColorBand,
    second_band: str | ColorBand,
    third_band: str | ColorBand | None,
    multiplier: str | ColorBand,
    tolerance: str | ColorBand,
) -> ResistorValue:
    """
    Decode a band code. `third_band=None` means a 4-band resistor.
    """
    digits = [
        _digit_of(first_band, position="first"),
        _digit_of(second_band, position="second"),
    ]
    if third_band is not None:
        digits.append(_digit_of(third_band, position="third"))

    try:
        multiplier_spec = colors.lookup(multiplier)
    except UnknownColorError as exc:
        raise InvalidBandError(f"Unknown color for the multiplier band: {multiplier!r}.") from exc

    try:
        tolerance_value = colors.lookup(tolerance).tolerance
    except UnknownColorError as exc:
        raise InvalidToleranceError(f"Unknown color for the tolerance band: {tolerance!r}.") from exc
    if tolerance_value is None:
        raise InvalidToleranceError(f"{colors.to_color(tolerance).value} has no tolerance value.")

    significand = 0
    for digit in digits:
        significand = significand * 10 + digit

    # repr() gives the shortest exact literal of the multiplier (e.g. "0.1").
    resistance = Decimal(significand) * Decimal(repr(multiplier_spec.multiplier))
    return ResistorValue(float(resistance), tolerance_value)


def _as_decimal(resistance: float) -> Decimal:
    if isinstance(resistance, bool) or not isinstance(resistance, (int, float)):
        raise InvalidValueError(f"Resistor value must be a number, got {resistance!r}.")
    # Ints convert exactly, whatever their size; floats go through their shortest repr.
    value = Decimal(resistance) if isinstance(resistance, int) else Decimal(repr(resistance))
    if not value.is_finite() or value <= 0:
        raise InvalidValueError("Resistor value must be a positive finite number.")
    return value


def _normalize(value: Decimal, number_of_bands: int) -> tuple[int, int]:
    """
    Returns (significand, exponent) with value == significand * 10**exponent.
    """
    digit_count = number_of_bands - 2

    if value != value.to_integral_value():
        decimals = -value.normalize().as_tuple().exponent
        if decimals > MAX_DECIMAL_PLACES:
            raise InvalidValueError(
                f"Resistor value {value} has more than {MAX_DECIMAL_PLACES} decimal places."
            )
        if decimals == MAX_DECIMAL_PLACES and number_of_bands != 5:
            raise InvalidValueError(f"Resistor value {value} needs a 5-band code.")
        return int(value.scaleb(decimals)), -decimals

    significand = int(value)
    length = value.adjusted() + 1
    if (length == 2 and number_of_bands != 4) or (length == 3 and number_of_bands != 5):
        raise InvalidValueError(
            f"A {length}-digit resistor value cannot be written with {number_of_bands} bands."
        )

    exponent = 0
    while significand % 10 == 0 and length > digit_count:
        significand //= 10
        exponent += 1
        length -= 1
    return significand, exponent


def _digit_colors(significand: int, digit_count: int) -> list[ColorBand]:
    if significand >= 10**digit_count:
        raise InvalidValueError(
            f"Resistor value does not fit in {digit_count} significant digits."
        )
    # Leading zeros become black bands.
    return [colors.color_for_digit(int(ch)) for ch in str(significand).zfill(digit_count)]


def bands_from_value(resistance: float, tolerance: float, number_of_bands: int) -> BandColors:
    """
    Encode a resistor value and tolerance percentage as band colors.

    The multiplier is matched by its exact power of ten and the tolerance by
    exact value against the tolerance colors.
    """
    if isinstance(number_of_bands, bool) or number_of_bands not in BAND_COUNTS:
        raise InvalidBandCountError(f"Number of bands must be 4 or 5, got {number_of_bands!r}.")
    number_of_bands = int(number_of_bands)

    significand, exponent = _normalize(_as_decimal(resistance), number_of_bands)
    digit_bands = _digit_colors(significand, number_of_bands - 2)

    multiplier_color = colors.color_for_exponent(exponent)
    if multiplier_color is None:
        raise UnknownMultiplierError(f"No multiplier band for 10^{exponent}.")

    # True == 1.0 would otherwise select brown.
    tolerance_color = None if isinstance(tolerance, bool) else colors.color_for_tolerance(tolerance)
    if tolerance_color is None:
        raise UnknownToleranceError(f"No tolerance band for {tolerance}%.")

    if number_of_bands == 5:
        first, second, third = digit_bands
    else:
        (first, second), third = digit_bands, None
    return BandColors(first, second, third, multiplier_color, tolerance_color)
