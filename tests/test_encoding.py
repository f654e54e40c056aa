"""Unit tests for band <-> value conversions."""

import math

import pytest

from codec import encoding
from codec.colors import ColorBand
from codec.errors import (
    InvalidBandCountError,
    InvalidBandError,
    InvalidToleranceError,
    InvalidValueError,
    UnknownMultiplierError,
    UnknownToleranceError,
)


@pytest.mark.unit
class TestValueFromBands:
    """Decoding 4- and 5-band codes."""

    def test_four_band_code(self) -> None:
        result = encoding.value_from_bands("brown", "black", None, "red", "gold")
        assert result.resistance == 1000
        assert result.tolerance == 5

    def test_five_band_code_uses_three_digits(self) -> None:
        result = encoding.value_from_bands("brown", "black", "black", "brown", "gold")
        assert result.resistance == 1000
        assert result.tolerance == 5

    def test_fractional_multipliers_are_exact(self) -> None:
        assert encoding.value_from_bands("yellow", "violet", None, "gold", "brown").resistance == 4.7
        assert encoding.value_from_bands("green", "blue", "violet", "silver", "blue") == (5.67, 0.25)

    def test_largest_multiplier(self) -> None:
        result = encoding.value_from_bands("white", "white", None, "white", "silver")
        assert result == (99_000_000_000.0, 10.0)

    def test_accepts_enum_members(self) -> None:
        result = encoding.value_from_bands(
            ColorBand.YELLOW, ColorBand.VIOLET, None, ColorBand.RED, ColorBand.GOLD
        )
        assert result.resistance == 4700

    @pytest.mark.parametrize("position", [0, 1, 2])
    def test_gold_is_not_a_digit_band(self, position: int) -> None:
        bands = ["brown", "black", "black"]
        bands[position] = "gold"
        with pytest.raises(InvalidBandError, match="gold"):
            encoding.value_from_bands(*bands, "red", "gold")

    def test_unknown_digit_color(self) -> None:
        with pytest.raises(InvalidBandError):
            encoding.value_from_bands("purple", "black", None, "red", "gold")

    def test_unknown_multiplier_color(self) -> None:
        with pytest.raises(InvalidBandError, match="multiplier"):
            encoding.value_from_bands("brown", "black", None, "purple", "gold")

    @pytest.mark.parametrize("tolerance", ["black", "orange", "yellow", "white"])
    def test_colors_without_tolerance_are_rejected(self, tolerance: str) -> None:
        with pytest.raises(InvalidToleranceError):
            encoding.value_from_bands("brown", "black", None, "red", tolerance)

    def test_unknown_tolerance_color(self) -> None:
        with pytest.raises(InvalidToleranceError):
            encoding.value_from_bands("brown", "black", None, "red", "purple")


@pytest.mark.unit
class TestBandsFromValue:
    """Encoding values into band colors."""

    def test_four_bands(self) -> None:
        bands = encoding.bands_from_value(1000, 5, 4)
        assert bands == (
            ColorBand.BROWN, ColorBand.BLACK, None, ColorBand.RED, ColorBand.GOLD,
        )

    def test_five_bands(self) -> None:
        bands = encoding.bands_from_value(1000, 5, 5)
        assert bands == (
            ColorBand.BROWN, ColorBand.BLACK, ColorBand.BLACK, ColorBand.BROWN, ColorBand.GOLD,
        )

    def test_trailing_zeros_move_into_the_multiplier(self) -> None:
        bands = encoding.bands_from_value(68_000, 2, 4)
        assert bands == (
            ColorBand.BLUE, ColorBand.GRAY, None, ColorBand.ORANGE, ColorBand.RED,
        )

    def test_one_decimal_place_uses_gold(self) -> None:
        bands = encoding.bands_from_value(4.7, 1, 4)
        assert bands == (
            ColorBand.YELLOW, ColorBand.VIOLET, None, ColorBand.GOLD, ColorBand.BROWN,
        )

    def test_two_decimal_places_use_silver(self) -> None:
        bands = encoding.bands_from_value(5.67, 0.25, 5)
        assert bands == (
            ColorBand.GREEN, ColorBand.BLUE, ColorBand.VIOLET, ColorBand.SILVER, ColorBand.BLUE,
        )

    def test_leading_zeros_become_black(self) -> None:
        assert encoding.bands_from_value(5, 5, 4)[:4] == (
            ColorBand.BLACK, ColorBand.GREEN, None, ColorBand.BLACK,
        )
        assert encoding.bands_from_value(0.47, 10, 5)[:4] == (
            ColorBand.BLACK, ColorBand.YELLOW, ColorBand.VIOLET, ColorBand.SILVER,
        )

    @pytest.mark.parametrize("count", [0, 3, 6, -4])
    def test_band_count_must_be_four_or_five(self, count: int) -> None:
        with pytest.raises(InvalidBandCountError):
            encoding.bands_from_value(1000, 5, count)

    def test_band_count_is_checked_first(self) -> None:
        with pytest.raises(InvalidBandCountError):
            encoding.bands_from_value(-1, 3, 6)

    @pytest.mark.parametrize("value", [0, -10, math.nan, math.inf])
    def test_value_must_be_positive_and_finite(self, value: float) -> None:
        with pytest.raises(InvalidValueError):
            encoding.bands_from_value(value, 5, 4)

    def test_more_than_two_decimal_places(self) -> None:
        with pytest.raises(InvalidValueError, match="decimal places"):
            encoding.bands_from_value(4.567, 5, 5)

    def test_two_decimal_places_need_five_bands(self) -> None:
        with pytest.raises(InvalidValueError, match="5-band"):
            encoding.bands_from_value(5.67, 5, 4)

    def test_two_digit_whole_value_needs_four_bands(self) -> None:
        with pytest.raises(InvalidValueError):
            encoding.bands_from_value(47, 5, 5)

    def test_three_digit_whole_value_needs_five_bands(self) -> None:
        with pytest.raises(InvalidValueError):
            encoding.bands_from_value(470, 5, 4)

    def test_too_many_significant_digits(self) -> None:
        with pytest.raises(InvalidValueError, match="significant digits"):
            encoding.bands_from_value(4710, 5, 4)
        with pytest.raises(InvalidValueError):
            encoding.bands_from_value(123.4, 5, 4)

    def test_multiplier_out_of_range(self) -> None:
        with pytest.raises(UnknownMultiplierError):
            encoding.bands_from_value(1e12, 5, 4)

    @pytest.mark.parametrize("tolerance", [0, 3, 5.5])
    def test_tolerance_without_a_color(self, tolerance: float) -> None:
        with pytest.raises(UnknownToleranceError):
            encoding.bands_from_value(1000, tolerance, 4)

    def test_int_too_large_for_a_float(self) -> None:
        """Arbitrarily large ints stay inside the codec's error types."""
        with pytest.raises(UnknownMultiplierError):
            encoding.bands_from_value(10**400, 5, 4)
        with pytest.raises(InvalidValueError):
            encoding.bands_from_value(-(10**400), 5, 4)

    def test_large_int_value(self) -> None:
        bands = encoding.bands_from_value(47 * 10**9, 5, 4)
        assert bands == (
            ColorBand.YELLOW, ColorBand.VIOLET, None, ColorBand.WHITE, ColorBand.GOLD,
        )

    @pytest.mark.parametrize("tolerance", [True, False])
    def test_bool_tolerance_is_rejected(self, tolerance: bool) -> None:
        with pytest.raises(UnknownToleranceError):
            encoding.bands_from_value(1000, tolerance, 4)


ROUND_TRIP_CODES = [
    ("brown", "black", None, "red", "gold"),
    ("yellow", "violet", None, "red", "gold"),
    ("blue", "gray", None, "orange", "red"),
    ("brown", "black", None, "yellow", "violet"),
    ("yellow", "violet", None, "gold", "brown"),
    ("gray", "red", None, "green", "gold"),
    ("white", "white", None, "white", "silver"),
    ("brown", "black", "black", "brown", "gold"),
    ("green", "blue", "violet", "silver", "blue"),
    ("red", "red", "black", "black", "brown"),
    ("orange", "orange", "violet", "orange", "gray"),
    ("yellow", "violet", "green", "gold", "green"),
]


@pytest.mark.unit
@pytest.mark.parametrize("code", ROUND_TRIP_CODES)
def test_bands_value_bands_round_trip(code: tuple) -> None:
    """Decoding a code and re-encoding the value gives the same colors back."""
    number_of_bands = 5 if code[2] is not None else 4
    value = encoding.value_from_bands(*code)
    bands = encoding.bands_from_value(value.resistance, value.tolerance, number_of_bands)
    assert tuple(b.value if b is not None else None for b in bands) == code
