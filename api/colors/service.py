"""
Color-table business logic: thin wrapper over the codec color table.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from codec import colors as color_table
from codec.errors import UnknownColorError

from . import schemas

logger = logging.getLogger(__name__)


_COLORS_BY_ROLE = {
    "digit": color_table.digit_colors,
    "multiplier": color_table.multiplier_colors,
    "tolerance": color_table.tolerance_colors,
}


def color_names(band: schemas.BandRole | None = None) -> list[str]:
    """
    All color names in table order, optionally only those valid for one band role.
    """
    if band is None:
        return color_table.list_colors()
    return [color.value for color in _COLORS_BY_ROLE[band]()]


def color_details(color: str) -> schemas.ColorDetails:
    try:
        spec = color_table.lookup(color)
    except UnknownColorError as exc:
        logger.info("color_lookup_failed color=%r", color)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    return schemas.ColorDetails(
        digit=spec.digit,
        multiplier=spec.multiplier,
        tolerance=spec.tolerance,
    )
