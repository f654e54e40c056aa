"""
Color-table API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Path, Query

from . import schemas, service

router = APIRouter()


@router.get("/colors", response_model=schemas.ColorListResponse)
def get_colors(
    band: schemas.BandRole | None = Query(default=None),
) -> schemas.ColorListResponse:
    """
    Return all colors for bands on resistors.

    `band` narrows the list to the colors valid for that band role.
    """
    names = service.color_names(band)
    return schemas.ColorListResponse(colors=names, count=len(names))


@router.get(
    "/colors/{color}",
    response_model=schemas.ColorDetails,
    responses={404: {"description": "Unknown color"}},
)
def get_color_details(
    color: str = Path(..., description="Color for which to get details"),
) -> schemas.ColorDetails:
    return service.color_details(color)
