"""Frequency. Base: Hz.

Only the linear units are listed. Periods (s, ms, ...) are reciprocal to
frequency and don't fit a factor table.
"""

from ..services.converter_page import ConverterPage
from ..services.unit_registry import Registry, Unit

PER_MINUTE = 1 / 60

FREQUENCY = Registry("frequency", base="Hz", units=[
    Unit("Hz", "Hertz (Hz)", 1),
    Unit("kHz", "Kilohertz (kHz)", 1e3),
    Unit("MHz", "Megahertz (MHz)", 1e6),
    Unit("GHz", "Gigahertz (GHz)", 1e9),
    Unit("THz", "Terahertz (THz)", 1e12),
    Unit("mHz", "Millihertz (mHz)", 1e-3),
    Unit("uHz", "Microhertz (μHz)", 1e-6),
    # Rotational / rhythmic
    Unit("RPS", "Revolutions per second (rps)", 1),
    Unit("RPM", "Revolutions per minute (rpm)", PER_MINUTE),
    Unit("CPM", "Cycles per minute (cpm)", PER_MINUTE),
    Unit("BPM", "Beats per minute (bpm)", PER_MINUTE),
])

PAGE = ConverterPage(
    slug="frequency",
    title="Frequency Converter",
    registry=FREQUENCY,
    default_from="Hz",
    default_to="RPM",
    default_value="60",
    default_favorites=("Hz", "kHz", "MHz", "RPM", "BPM"),
    namespace="freq",
    hints=(
        ("PM", "1 RPM/CPM/BPM = 1/60 Hz."),
        ("RPS", "1 RPS = 1 Hz."),
    ),
)
