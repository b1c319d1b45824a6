"""Pydantic schemas for CalcHub API.

Request/response models for:
- Converter pages (units, defaults, shortcuts)
- Conversions (direct result + results grid + share query)
- Favorites and history
"""

import math
from typing import Optional

from pydantic import BaseModel, Field

from .services.number_format import FormatMode
from .services.share_state import MAX_VALUE_LENGTH


def finite_or_none(v: float) -> Optional[float]:
    """JSON has no NaN/Infinity; non-finite results travel as null."""
    return v if v is not None and math.isfinite(v) else None


# --- Units / Pages ---

class UnitOut(BaseModel):
    key: str
    name: str
    factor: float


class PageSummary(BaseModel):
    slug: str
    title: str
    quantity: str
    base: str
    unit_count: int


class PageListResponse(BaseModel):
    pages: list[PageSummary]


class FavoritesResponse(BaseModel):
    favorites: list[str]
    favored: list[UnitOut] = []  # "★ Favorites" picker group
    others: list[UnitOut] = []  # "All units" picker group


class PageDetail(PageSummary):
    units: list[UnitOut]
    default_from: str
    default_to: str
    default_value: str
    default_format: FormatMode
    default_precision: int
    csv_filename: str
    shortcuts: dict[str, str]
    favorites: FavoritesResponse


# --- Conversion ---

class ConvertRequest(BaseModel):
    """Mirrors the share query (v/from/to/fmt/p) as a JSON body.

    Unit keys are not validated here: unknown keys render as "no value".
    Omitted fields fall back to the page defaults.
    """
    value: Optional[str] = Field(None, max_length=MAX_VALUE_LENGTH)
    from_unit: Optional[str] = Field(None, max_length=32)
    to_unit: Optional[str] = Field(None, max_length=32)
    format: Optional[FormatMode] = None
    precision: Optional[int] = Field(None, ge=0, le=12)


class ConvertedValue(BaseModel):
    value: Optional[float]  # null when not a number (unknown unit)
    display: str


class GridCellOut(BaseModel):
    key: str
    name: str
    value: Optional[float]
    display: str


class ShareOut(BaseModel):
    query: str
    url: str
    history_action: str = "replace"


class ConvertResponse(BaseModel):
    slug: str
    value_text: str
    value: float
    from_unit: str
    to_unit: str
    format: FormatMode
    precision: int
    result: ConvertedValue
    grid: list[GridCellOut]
    hints: list[str] = []
    share: ShareOut


# --- Favorites / History ---

class FavoriteToggleRequest(BaseModel):
    key: str = Field(..., min_length=1, max_length=32)


class HistoryEntryOut(BaseModel):
    value_text: str
    from_unit: str
    to_unit: str
    timestamp: int


class HistoryResponse(BaseModel):
    history: list[HistoryEntryOut]
