"""
Resistor conversion business logic.

Calls the pure codec and turns its errors into HTTP 400 responses.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from codec import encoding
from codec.errors import ResistorCodecError

from . import schemas

logger = logging.getLogger(__name__)


def _bad_request(operation: str, exc: ResistorCodecError) -> HTTPException:
    logger.info("%s_rejected error=%s detail=%s", operation, type(exc).__name__, exc)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


def value_from_bands(payload: schemas.ValueFromBandsRequest) -> schemas.ValueFromBandsResponse:
    try:
        result = encoding.value_from_bands(
            payload.first_band,
            payload.second_band,
            payload.third_band,
            payload.multiplier,
            payload.tolerance,
        )
    except ResistorCodecError as exc:
        raise _bad_request("value_from_bands", exc) from exc

    return schemas.ValueFromBandsResponse(
        resistor_value=result.resistance,
        tolerance=result.tolerance,
    )


def bands_from_value(payload: schemas.BandsFromValueRequest) -> schemas.BandsFromValueResponse:
    try:
        bands = encoding.bands_from_value(
            payload.resistor_value,
            payload.tolerance,
            payload.number_of_bands,
        )
    except ResistorCodecError as exc:
        raise _bad_request("bands_from_value", exc) from exc

    return schemas.BandsFromValueResponse(
        first_band=bands.first_band.value,
        second_band=bands.second_band.value,
        third_band=bands.third_band.value if bands.third_band is not None else None,
        multiplier=bands.multiplier.value,
        tolerance=bands.tolerance.value,
    )
