"""
Value parsing for converter inputs.

Free-form text in, finite float out. Never raises: a calculator should
always have something to show.
"""

import math
from typing import Optional


def parse_value(text: Optional[str]) -> float:
    """
    Parse user input into a finite number.

    - Thousands separators (commas) and surrounding whitespace are stripped.
    - Empty input -> 0.
    - Malformed or non-finite input ("abc", "1e999", "nan") -> 0.
    """
    if text is None:
        return 0.0

    clean = str(text).replace(",", "").strip()
    if clean == "":
        return 0.0

    # float() accepts "1_000"; a typed value does not
    if "_" in clean:
        return 0.0

    try:
        n = float(clean)
    except ValueError:
        return 0.0

    return n if math.isfinite(n) else 0.0
