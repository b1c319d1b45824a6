"""
Grid exports: "Copy All" text listing and CSV download.

Both carry raw full-precision values, not the formatted display strings.
"""

import csv
import io
import math

from .unit_registry import Registry


def raw_number(v: float) -> str:
    """Full-precision text for a float (integral values without '.0')."""
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "Infinity" if v > 0 else "-Infinity"
    if v.is_integer() and abs(v) < 1e21:
        return str(int(v))
    return repr(v)


def _rows(grid: dict[str, float], registry: Registry) -> list[tuple[str, str]]:
    rows = []
    for key, value in grid.items():
        unit = registry.get(key)
        name = unit.name if unit else key
        rows.append((name, raw_number(value)))
    return rows


def copy_all_text(grid: dict[str, float], registry: Registry) -> str:
    return "\n".join(f"{name}: {value}" for name, value in _rows(grid, registry))


def export_csv(grid: dict[str, float], registry: Registry) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(["Unit", "Value"])
    writer.writerows(_rows(grid, registry))
    return buf.getvalue().rstrip("\n")
