"""
Resistor color table.

One record per color band:
- digit: 0-9 for black..white, None for gold/silver
- multiplier: power of ten the band scales the significand by
- tolerance: percentage, None for colors without a standard tolerance

The table is read-only and shared by every caller.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, NamedTuple

from .errors import UnknownColorError


class ColorBand(str, Enum):
    BLACK = "black"
    BROWN = "brown"
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    VIOLET = "violet"
    GRAY = "gray"
    WHITE = "white"
    GOLD = "gold"
    SILVER = "silver"


class ColorSpec(NamedTuple):
    digit: int | None
    multiplier: float
    tolerance: float | None


COLOR_TABLE: Mapping[ColorBand, ColorSpec] = MappingProxyType(
    {
        ColorBand.BLACK: ColorSpec(0, 1.0, None),
        ColorBand.BROWN: ColorSpec(1, 10.0, 1.0),
        ColorBand.RED: ColorSpec(2, 100.0, 2.0),
        ColorBand.ORANGE: ColorSpec(3, 1_000.0, None),
        ColorBand.YELLOW: ColorSpec(4, 10_000.0, None),
        ColorBand.GREEN: ColorSpec(5, 100_000.0, 0.5),
        ColorBand.BLUE: ColorSpec(6, 1_000_000.0, 0.25),
        ColorBand.VIOLET: ColorSpec(7, 10_000_000.0, 0.1),
        ColorBand.GRAY: ColorSpec(8, 100_000_000.0, 0.05),
        ColorBand.WHITE: ColorSpec(9, 1_000_000_000.0, None),
        ColorBand.GOLD: ColorSpec(None, 0.1, 5.0),
        ColorBand.SILVER: ColorSpec(None, 0.01, 10.0),
    }
)

# Power-of-ten exponent of each multiplier band, keyed back to its color.
MULTIPLIER_EXPONENTS: Mapping[int, ColorBand] = MappingProxyType(
    {
        0: ColorBand.BLACK,
        1: ColorBand.BROWN,
        2: ColorBand.RED,
        3: ColorBand.ORANGE,
        4: ColorBand.YELLOW,
        5: ColorBand.GREEN,
        6: ColorBand.BLUE,
        7: ColorBand.VIOLET,
        8: ColorBand.GRAY,
        9: ColorBand.WHITE,
        -1: ColorBand.GOLD,
        -2: ColorBand.SILVER,
    }
)


def to_color(color_name: str | ColorBand) -> ColorBand:
    """
    Resolve an exact color name ("red", not "Red") to its ColorBand.
    """
    if isinstance(color_name, ColorBand):
        return color_name
    try:
        return ColorBand(color_name)
    except ValueError as exc:
        raise UnknownColorError(f"Unknown color: {color_name!r}.") from exc


def lookup(color_name: str | ColorBand) -> ColorSpec:
    return COLOR_TABLE[to_color(color_name)]


def list_colors() -> list[str]:
    return [color.value for color in COLOR_TABLE]


def digit_colors() -> list[ColorBand]:
    return [color for color, spec in COLOR_TABLE.items() if spec.digit is not None]


def multiplier_colors() -> list[ColorBand]:
    return list(COLOR_TABLE)


def tolerance_colors() -> list[ColorBand]:
    return [color for color, spec in COLOR_TABLE.items() if spec.tolerance is not None]


def color_for_digit(digit: int) -> ColorBand:
    for color in digit_colors():
        if COLOR_TABLE[color].digit == digit:
            return color
    raise ValueError(f"No color band for digit {digit}.")


def color_for_exponent(exponent: int) -> ColorBand | None:
    return MULTIPLIER_EXPONENTS.get(exponent)


def color_for_tolerance(tolerance: float) -> ColorBand | None:
    for color in tolerance_colors():
        if COLOR_TABLE[color].tolerance == tolerance:
            return color
    return None
