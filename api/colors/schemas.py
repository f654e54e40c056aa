"""
Pydantic schemas for color-table endpoints.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

BandRole = Literal["digit", "multiplier", "tolerance"]


class ColorDetails(BaseModel):
    # digit is null for gold/silver, tolerance is null for black/orange/yellow/white.
    digit: int | None
    multiplier: float
    tolerance: float | None


class ColorListResponse(BaseModel):
    colors: list[str]
    count: int
