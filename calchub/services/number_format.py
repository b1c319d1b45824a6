"""
Display formatting for conversion results.

Three modes:
- normal:     fixed point, comma grouping, trailing zeros stripped.
              Escapes to scientific when the value, rounded to the
              precision, is >= 1e12 or below 1e-6 (and non-zero).
- compact:    K / M / B / T magnitude suffixes.
- scientific: exponential with JS-style exponent ("1.5e+3", "1.6667e-4").

Non-finite values (NaN from an unknown unit, +/-inf) render as NO_VALUE.
"""

import math
from enum import Enum
from typing import Optional, Union

NO_VALUE = "—"

MIN_PRECISION = 0
MAX_PRECISION = 12
MAX_COMPACT_DIGITS = 6

# Overflow / underflow escape for normal mode
SCI_UPPER = 1e12
SCI_LOWER = 1e-6

COMPACT_SUFFIXES = (
    (1e3, "K"),
    (1e6, "M"),
    (1e9, "B"),
    (1e12, "T"),
)


class FormatMode(str, Enum):
    NORMAL = "normal"
    COMPACT = "compact"
    SCIENTIFIC = "scientific"

    @classmethod
    def parse(cls, raw) -> Optional["FormatMode"]:
        """Enum member for raw text, or None when it isn't one."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls(raw)
        except ValueError:
            return None


def clamp_precision(precision: int) -> int:
    return max(MIN_PRECISION, min(MAX_PRECISION, int(precision)))


def _strip_fraction_zeros(text: str) -> str:
    # "2.500" -> "2.5", "2.000" -> "2"; integers are left alone
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_scientific(n: float, precision: int) -> str:
    p = clamp_precision(precision)
    mantissa, exp = f"{n:.{p}e}".split("e")
    mantissa = _strip_fraction_zeros(mantissa)
    e = int(exp)
    return f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"


def format_fixed(n: float, precision: int) -> str:
    p = clamp_precision(precision)
    text = _strip_fraction_zeros(f"{n:,.{p}f}")
    if text == "-0":
        return "0"
    return text


def format_compact(n: float, precision: int) -> str:
    digits = min(clamp_precision(precision), MAX_COMPACT_DIGITS)
    a = abs(n)

    tier = 0
    for i, (threshold, _) in enumerate(COMPACT_SUFFIXES, start=1):
        if a >= threshold:
            tier = i

    # Rounding may carry into the next magnitude (999.96K -> 1M)
    while True:
        divisor = COMPACT_SUFFIXES[tier - 1][0] if tier else 1.0
        rounded = float(f"{a / divisor:.{digits}f}")
        if rounded >= 1000 and tier < len(COMPACT_SUFFIXES):
            tier += 1
            continue
        break

    if rounded >= 10000:
        text = f"{rounded:,.{digits}f}"
    else:
        text = f"{rounded:.{digits}f}"
    text = _strip_fraction_zeros(text)

    suffix = COMPACT_SUFFIXES[tier - 1][1] if tier else ""
    sign = "-" if n < 0 and rounded != 0 else ""
    return f"{sign}{text}{suffix}"


def _needs_scientific(n: float, precision: int) -> bool:
    """Normal-mode escape, decided on the value as it will be displayed."""
    if n == 0:
        return False
    p = clamp_precision(precision)
    # Rounded text must re-parse to the same side of each threshold
    if abs(float(f"{n:.{p}f}")) >= SCI_UPPER:
        return True
    return abs(float(f"{n:.{p}e}")) < SCI_LOWER


def format_number(
    n: float,
    mode: Union[FormatMode, str] = FormatMode.NORMAL,
    precision: int = 6,
) -> str:
    """Render a conversion result for display."""
    if n is None or not math.isfinite(n):
        return NO_VALUE

    fmt = FormatMode.parse(mode) or FormatMode.NORMAL

    if fmt == FormatMode.SCIENTIFIC or (
        fmt == FormatMode.NORMAL and _needs_scientific(n, precision)
    ):
        return format_scientific(n, precision)

    if fmt == FormatMode.COMPACT:
        return format_compact(n, precision)

    return format_fixed(n, precision)
