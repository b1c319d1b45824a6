"""
Shareable converter state <-> URL query string.

    ?v=10&from=L%2Fmin&to=m3%2Fs&fmt=scientific&p=4

`v` is omitted when the input is empty. Decoding is per-field best effort:
a missing or invalid parameter leaves that field at its default and never
fails the whole decode.

Clients apply an encoded query by replacing the current history entry
(HISTORY_ACTION), not by pushing a new one.
"""

from dataclasses import dataclass, replace
from typing import Any, Optional
from urllib.parse import parse_qsl, urlencode

from .number_format import FormatMode, MAX_PRECISION, MIN_PRECISION
from .unit_registry import Registry

HISTORY_ACTION = "replace"

# Longest accepted `v`; anything longer is dropped like any other bad field
MAX_VALUE_LENGTH = 100


@dataclass(frozen=True)
class ShareState:
    value_text: str
    from_key: str
    to_key: str
    fmt: FormatMode = FormatMode.NORMAL
    precision: int = 6

    def merged(self, partial: dict[str, Any]) -> "ShareState":
        return replace(self, **partial)


def encode_state(state: ShareState) -> str:
    params = []
    if state.value_text != "":
        params.append(("v", state.value_text))
    params.append(("from", state.from_key))
    params.append(("to", state.to_key))
    fmt = FormatMode.parse(state.fmt) or FormatMode.NORMAL
    params.append(("fmt", fmt.value))
    params.append(("p", str(state.precision)))
    return urlencode(params)


def _parse_precision(raw: str) -> Optional[int]:
    try:
        p = int(raw.strip())
    except ValueError:
        return None
    if MIN_PRECISION <= p <= MAX_PRECISION:
        return p
    return None


def decode_state(query: Optional[str], registry: Registry) -> dict[str, Any]:
    """Fields that decoded cleanly, keyed like ShareState's attributes."""
    out: dict[str, Any] = {}
    if not query:
        return out

    params: dict[str, str] = {}
    for k, v in parse_qsl(query.lstrip("?"), keep_blank_values=True):
        # First occurrence wins, like URLSearchParams.get
        params.setdefault(k, v)

    v = params.get("v")
    if v is not None and len(v) <= MAX_VALUE_LENGTH:
        out["value_text"] = v

    f = params.get("from")
    if f and f in registry:
        out["from_key"] = f

    t = params.get("to")
    if t and t in registry:
        out["to_key"] = t

    fmt = FormatMode.parse(params.get("fmt"))
    if fmt is not None:
        out["fmt"] = fmt

    p = params.get("p")
    if p is not None:
        precision = _parse_precision(p)
        if precision is not None:
            out["precision"] = precision

    return out
