"""
Converter pages: one generic engine, configured per quantity.

A ConverterPage binds a Registry to its defaults (units, value, favorites),
a storage namespace and a few display hints. `render` runs the whole
pipeline for one state change:

    parse -> convert (direct + grid) -> format -> record history -> encode share query
"""

from dataclasses import dataclass, field
from typing import Optional

from ..settings import settings
from .conversion import convert, convert_all
from .number_format import FormatMode, clamp_precision, format_number
from .share_state import ShareState, decode_state, encode_state
from .state_store import HistoryEntry, StateStore
from .unit_registry import Registry, RegistryError
from .value_parser import parse_value


# Keyboard shortcuts published to clients (key -> action)
SHORTCUTS = {
    "/": "focus_value",
    "s": "focus_from",
    "t": "focus_to",
    "x": "swap",
}


@dataclass(frozen=True)
class GridCell:
    key: str
    name: str
    value: float
    display: str


@dataclass(frozen=True)
class Rendering:
    state: ShareState
    value: float
    result: float
    display: str
    grid: dict[str, float]
    cells: list[GridCell]
    share_query: str
    hints: list[str] = field(default_factory=list)
    history_recorded: bool = False


@dataclass(frozen=True)
class ConverterPage:
    slug: str
    title: str
    registry: Registry
    default_from: str
    default_to: str
    default_favorites: tuple = ()
    default_value: str = ""
    namespace: str = ""
    csv_filename: str = ""
    # (substring, note): shown when either selected unit key contains substring
    hints: tuple = ()

    def __post_init__(self):
        for key in (self.default_from, self.default_to, *self.default_favorites):
            if key not in self.registry:
                raise RegistryError(f"Page '{self.slug}': unknown default unit '{key}'")
        if not self.namespace:
            object.__setattr__(self, "namespace", self.slug)
        if not self.csv_filename:
            object.__setattr__(self, "csv_filename", f"{self.slug}-conversion.csv")

    # --- State ---

    def default_state(self) -> ShareState:
        return ShareState(
            value_text=self.default_value,
            from_key=self.default_from,
            to_key=self.default_to,
            fmt=FormatMode.NORMAL,
            precision=clamp_precision(settings.default_precision),
        )

    def initial_state(self, query: Optional[str] = None) -> ShareState:
        """Defaults overlaid with whatever a share query decodes to."""
        return self.default_state().merged(decode_state(query, self.registry))

    def swap(self, state: ShareState) -> ShareState:
        return state.merged({"from_key": state.to_key, "to_key": state.from_key})

    def make_store(self, storage) -> StateStore:
        return StateStore(
            storage,
            namespace=self.namespace,
            default_favorites=self.default_favorites,
            max_favorites=settings.favorites_max,
            max_history=settings.history_max,
        )

    def hints_for(self, from_key: str, to_key: str) -> list[str]:
        return [note for needle, note in self.hints if needle in from_key or needle in to_key]

    # --- Pipeline ---

    def render(self, state: ShareState, store: Optional[StateStore] = None) -> Rendering:
        value = parse_value(state.value_text)
        result = convert(value, state.from_key, state.to_key, self.registry)
        grid = convert_all(value, state.from_key, self.registry)

        cells = []
        for key, v in grid.items():
            cells.append(GridCell(
                key=key,
                name=self.registry.get(key).name,
                value=v,
                display=format_number(v, state.fmt, state.precision),
            ))

        recorded = False
        known = state.from_key in self.registry and state.to_key in self.registry
        if store is not None and known:
            recorded = store.record_history(HistoryEntry(
                value_text=state.value_text or "0",
                from_key=state.from_key,
                to_key=state.to_key,
            ))

        return Rendering(
            state=state,
            value=value,
            result=result,
            display=format_number(result, state.fmt, state.precision),
            grid=grid,
            cells=cells,
            share_query=encode_state(state),
            hints=self.hints_for(state.from_key, state.to_key),
            history_recorded=recorded,
        )
