"""
Router for unit converter pages.

Each page (flow-rate, density, time, ...) shares the same endpoints; the
slug selects the ConverterPage configuration.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse, Response
from slowapi import Limiter
from slowapi.util import get_remote_address

from ..deps import get_converter_page, get_state_storage
from ..schemas import (
    ConvertRequest,
    ConvertResponse,
    ConvertedValue,
    FavoriteToggleRequest,
    FavoritesResponse,
    GridCellOut,
    HistoryEntryOut,
    HistoryResponse,
    PageDetail,
    PageListResponse,
    PageSummary,
    ShareOut,
    UnitOut,
    finite_or_none,
)
from ..services.converter_page import SHORTCUTS, ConverterPage, Rendering
from ..services.export import copy_all_text, export_csv
from ..services.share_state import HISTORY_ACTION, ShareState
from ..services.state_store import StateStore
from ..settings import settings
from ..units import PAGES

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _rate_limit() -> str:
    return settings.rate_limit


# --- Helpers ---

def _summary(page: ConverterPage) -> PageSummary:
    return PageSummary(
        slug=page.slug,
        title=page.title,
        quantity=page.registry.quantity,
        base=page.registry.base,
        unit_count=len(page.registry),
    )


def _unit_out(unit) -> UnitOut:
    return UnitOut(key=unit.key, name=unit.name, factor=unit.factor)


def _favorites_out(page: ConverterPage, store: StateStore) -> FavoritesResponse:
    favored, others = store.favorite_groups(page.registry)
    return FavoritesResponse(
        favorites=store.get_favorites(),
        favored=[_unit_out(u) for u in favored],
        others=[_unit_out(u) for u in others],
    )


def _state_from_body(page: ConverterPage, req: ConvertRequest) -> ShareState:
    """Page defaults, overridden by whatever the body sets."""
    updates = {}
    if req.value is not None:
        updates["value_text"] = req.value
    if req.from_unit is not None:
        updates["from_key"] = req.from_unit
    if req.to_unit is not None:
        updates["to_key"] = req.to_unit
    if req.format is not None:
        updates["fmt"] = req.format
    if req.precision is not None:
        updates["precision"] = req.precision
    return page.default_state().merged(updates)


def _convert_out(page: ConverterPage, r: Rendering) -> ConvertResponse:
    s = r.state
    return ConvertResponse(
        slug=page.slug,
        value_text=s.value_text,
        value=r.value,
        from_unit=s.from_key,
        to_unit=s.to_key,
        format=s.fmt,
        precision=s.precision,
        result=ConvertedValue(value=finite_or_none(r.result), display=r.display),
        grid=[
            GridCellOut(key=c.key, name=c.name, value=finite_or_none(c.value), display=c.display)
            for c in r.cells
        ],
        hints=r.hints,
        share=ShareOut(
            query=r.share_query,
            url=f"/api/units/{page.slug}/convert?{r.share_query}",
            history_action=HISTORY_ACTION,
        ),
    )


# --- Pages ---

@router.get("", response_model=PageListResponse)
def list_pages():
    """List available converter pages."""
    return PageListResponse(pages=[_summary(p) for p in PAGES.values()])


@router.get("/{slug}", response_model=PageDetail)
def get_page_detail(
    page: ConverterPage = Depends(get_converter_page),
    storage=Depends(get_state_storage),
):
    """Units, defaults, shortcuts and favorites for one page."""
    store = page.make_store(storage)
    defaults = page.default_state()
    return PageDetail(
        **_summary(page).model_dump(),
        units=[_unit_out(u) for u in page.registry],
        default_from=defaults.from_key,
        default_to=defaults.to_key,
        default_value=defaults.value_text,
        default_format=defaults.fmt,
        default_precision=defaults.precision,
        csv_filename=page.csv_filename,
        shortcuts=SHORTCUTS,
        favorites=_favorites_out(page, store),
    )


# --- Conversion ---

@router.get("/{slug}/convert", response_model=ConvertResponse)
@limiter.limit(_rate_limit)
def convert_from_query(
    request: Request,
    page: ConverterPage = Depends(get_converter_page),
    storage=Depends(get_state_storage),
):
    """
    Render the state encoded in the query string (?v=&from=&to=&fmt=&p=).

    Invalid parameters are ignored individually and fall back to defaults.
    """
    state = page.initial_state(request.url.query)
    rendering = page.render(state, page.make_store(storage))
    return _convert_out(page, rendering)


@router.post("/{slug}/convert", response_model=ConvertResponse)
@limiter.limit(_rate_limit)
def convert_from_body(
    request: Request,  # Required for rate limiter
    req: ConvertRequest,
    page: ConverterPage = Depends(get_converter_page),
    storage=Depends(get_state_storage),
):
    """Render an explicit state; unknown units render as no value."""
    rendering = page.render(_state_from_body(page, req), page.make_store(storage))
    return _convert_out(page, rendering)


@router.post("/{slug}/swap", response_model=ConvertResponse)
@limiter.limit(_rate_limit)
def swap_units(
    request: Request,  # Required for rate limiter
    req: ConvertRequest,
    page: ConverterPage = Depends(get_converter_page),
    storage=Depends(get_state_storage),
):
    """Exchange from/to and render."""
    state = page.swap(_state_from_body(page, req))
    rendering = page.render(state, page.make_store(storage))
    return _convert_out(page, rendering)


# --- Favorites / History ---

@router.get("/{slug}/favorites", response_model=FavoritesResponse)
def get_favorites(
    page: ConverterPage = Depends(get_converter_page),
    storage=Depends(get_state_storage),
):
    return _favorites_out(page, page.make_store(storage))


@router.post("/{slug}/favorites/toggle", response_model=FavoritesResponse)
@limiter.limit(_rate_limit)
def toggle_favorite(
    request: Request,  # Required for rate limiter
    req: FavoriteToggleRequest,
    page: ConverterPage = Depends(get_converter_page),
    storage=Depends(get_state_storage),
):
    """Add or remove a unit from favorites."""
    if req.key not in page.registry:
        raise HTTPException(status_code=404, detail=f"Unknown unit '{req.key}' for {page.slug}")
    store = page.make_store(storage)
    store.toggle_favorite(req.key)
    return _favorites_out(page, store)


@router.get("/{slug}/history", response_model=HistoryResponse)
def get_history(
    page: ConverterPage = Depends(get_converter_page),
    storage=Depends(get_state_storage),
):
    """Recent conversions, newest first."""
    store = page.make_store(storage)
    return HistoryResponse(history=[
        HistoryEntryOut(
            value_text=e.value_text,
            from_unit=e.from_key,
            to_unit=e.to_key,
            timestamp=e.timestamp,
        )
        for e in store.get_history()
    ])


# --- Exports ---

def _render_query(page: ConverterPage, query: Optional[str]) -> Rendering:
    # Exports don't touch history
    return page.render(page.initial_state(query))


@router.get("/{slug}/export.csv")
@limiter.limit(_rate_limit)
def export_grid_csv(
    request: Request,
    page: ConverterPage = Depends(get_converter_page),
):
    """Results grid as CSV (Unit, Value)."""
    rendering = _render_query(page, request.url.query)
    return Response(
        content=export_csv(rendering.grid, page.registry),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{page.csv_filename}"'},
    )


@router.get("/{slug}/export.txt", response_class=PlainTextResponse)
@limiter.limit(_rate_limit)
def export_grid_text(
    request: Request,
    page: ConverterPage = Depends(get_converter_page),
):
    """Copy All listing: one `<unit name>: <raw value>` line per unit."""
    rendering = _render_query(page, request.url.query)
    return PlainTextResponse(copy_all_text(rendering.grid, page.registry))
