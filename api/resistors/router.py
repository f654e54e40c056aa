"""
Resistor conversion API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Query

from . import schemas, service

router = APIRouter()

_BAD_REQUEST = {400: {"description": "The request contains invalid data"}}


@router.post(
    "/resistors/value-from-bands",
    response_model=schemas.ValueFromBandsResponse,
    responses=_BAD_REQUEST,
)
def calculate_from_bands(request: schemas.ValueFromBandsRequest) -> schemas.ValueFromBandsResponse:
    """
    Calculate the resistor value based on given color bands.
    """
    return service.value_from_bands(request)


@router.get(
    "/resistors/value-from-bands",
    response_model=schemas.ValueFromBandsResponse,
    responses=_BAD_REQUEST,
)
def get_calculate_from_bands(
    first_band: str = Query(..., alias="firstBand", min_length=1, max_length=20, description="Color of the 1st band"),
    second_band: str = Query(..., alias="secondBand", min_length=1, max_length=20, description="Color of the 2nd band"),
    third_band: str | None = Query(
        default=None,
        alias="thirdBand",
        min_length=1,
        max_length=20,
        description="Color of the 3rd band. Left out for 4-band-coded resistors.",
    ),
    multiplier: str = Query(..., min_length=1, max_length=20, description="Color of the multiplier band"),
    tolerance: str = Query(..., min_length=1, max_length=20, description="Color of the tolerance band"),
) -> schemas.ValueFromBandsResponse:
    request = schemas.ValueFromBandsRequest(
        first_band=first_band,
        second_band=second_band,
        third_band=third_band,
        multiplier=multiplier,
        tolerance=tolerance,
    )
    return service.value_from_bands(request)


@router.post(
    "/resistors/bands-from-value",
    response_model=schemas.BandsFromValueResponse,
    responses=_BAD_REQUEST,
)
def calculate_bands_from_value(request: schemas.BandsFromValueRequest) -> schemas.BandsFromValueResponse:
    """
    Calculate the bands for a resistor based on its value.
    """
    return service.bands_from_value(request)
