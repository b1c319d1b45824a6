"""Time (duration). Base: seconds.

Month and year are calendar averages, not calendar-exact: a year is
`days_per_year` days (civil average 365.2425 by default) and a month is a
twelfth of that. Both come from settings so another convention (365 / 30)
can be configured without touching the table.
"""

from ..services.converter_page import ConverterPage
from ..services.unit_registry import Registry, Unit
from ..settings import settings

SECONDS_PER_DAY = 86400
CIVIL_DAYS_PER_YEAR = 365.2425
MONTHS_PER_YEAR = 12


def build_time_registry(days_per_year: float = CIVIL_DAYS_PER_YEAR) -> Registry:
    return Registry("time", base="s", units=[
        Unit("ns", "Nanosecond (ns)", 1e-9),
        Unit("µs", "Microsecond (µs)", 1e-6),
        Unit("ms", "Millisecond (ms)", 1e-3),
        Unit("s", "Second (s)", 1),
        Unit("min", "Minute (min)", 60),
        Unit("h", "Hour (h)", 3600),
        Unit("d", "Day (d)", SECONDS_PER_DAY),
        Unit("wk", "Week (wk)", 7 * SECONDS_PER_DAY),
        Unit("mo", "Month (avg)", days_per_year / MONTHS_PER_YEAR * SECONDS_PER_DAY),
        Unit("yr", "Year (avg)", days_per_year * SECONDS_PER_DAY),
    ])


TIME = build_time_registry(settings.days_per_year)

PAGE = ConverterPage(
    slug="time",
    title="Time Converter",
    registry=TIME,
    default_from="min",
    default_to="s",
    default_favorites=("ms", "s", "min", "h", "d", "wk", "yr"),
    namespace="time",
    hints=(
        ("mo", f"Month = year / 12, year = {settings.days_per_year:.10g} days (average)."),
        ("yr", f"Year = {settings.days_per_year:.10g} days (average)."),
    ),
)
