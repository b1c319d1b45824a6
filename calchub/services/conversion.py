"""
Linear conversion through a registry's base unit.

    base   = value * factor(from)
    result = base / factor(to)

Unit-to-unit factors are never stored; every pair bridges through the base.
Unknown keys yield NaN, which the formatter renders as a "no value" marker.
"""

from .unit_registry import Registry, lookup

NAN = float("nan")


def convert(value: float, from_key: str, to_key: str, registry: Registry) -> float:
    """Convert a value between two units of the same registry."""
    f = lookup(registry, from_key)
    t = lookup(registry, to_key)
    if f is None or t is None:
        return NAN

    # Exact identity, independent of factor rounding
    if f is t:
        return value

    base = value * f.factor
    return base / t.factor


def convert_all(value: float, from_key: str, registry: Registry) -> dict[str, float]:
    """Results grid: every unit except the source, in registry order."""
    f = lookup(registry, from_key)
    out: dict[str, float] = {}

    if f is None:
        for u in registry:
            if u.key != from_key:
                out[u.key] = NAN
        return out

    base = value * f.factor
    for u in registry:
        if u.key == from_key:
            continue
        out[u.key] = base / u.factor
    return out
