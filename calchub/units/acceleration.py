"""Acceleration. Base: m/s²."""

from ..services.converter_page import ConverterPage
from ..services.unit_registry import Registry, Unit

G0 = 9.80665  # standard gravity, m/s²

ACCELERATION = Registry("acceleration", base="m/s2", units=[
    # SI / metric
    Unit("m/s2", "Meter per second² (m/s²)", 1),
    Unit("cm/s2", "Centimeter per second² (cm/s², Gal)", 0.01),
    Unit("mm/s2", "Millimeter per second² (mm/s²)", 0.001),
    Unit("g", "Standard gravity (g₀)", G0),
    # Imperial
    Unit("ft/s2", "Foot per second² (ft/s²)", 0.3048),
    Unit("in/s2", "Inch per second² (in/s²)", 0.0254),
    # Speed-per-time forms
    Unit("km/h/s", "Kilometer per hour per second (km/h/s)", 1000 / 3600),
    Unit("km/h2", "Kilometer per hour² (km/h²)", 1000 / (3600 * 3600)),
    Unit("mph/s", "Mile per hour per second (mph/s)", 0.44704),
    Unit("knot/s", "Knot per second (kn/s)", 0.5144444444444444),
])

PAGE = ConverterPage(
    slug="acceleration",
    title="Acceleration Converter",
    registry=ACCELERATION,
    default_from="m/s2",
    default_to="g",
    default_favorites=("m/s2", "g", "cm/s2", "ft/s2", "mph/s"),
    namespace="accel",
    hints=(
        ("g", "Standard gravity g₀ = 9.80665 m/s²."),
    ),
)
