"""Speed. Base: m/s."""

from ..services.converter_page import ConverterPage
from ..services.unit_registry import Registry, Unit

SPEED_OF_LIGHT = 299_792_458  # m/s, exact

SPEED = Registry("speed", base="mps", units=[
    Unit("mmps", "Millimeter per second (mm/s)", 0.001),
    Unit("cmps", "Centimeter per second (cm/s)", 0.01),
    Unit("mps", "Meter per second (m/s)", 1),
    Unit("kph", "Kilometer per hour (km/h)", 1000 / 3600),
    Unit("kmps", "Kilometer per second (km/s)", 1000),
    Unit("fps", "Foot per second (ft/s)", 0.3048),
    Unit("ips", "Inch per second (in/s)", 0.0254),
    Unit("mph", "Mile per hour (mph)", 1609.344 / 3600),
    Unit("knot", "Knot (kn)", 1852 / 3600),
    Unit("c", "Speed of light (c)", SPEED_OF_LIGHT),
])

PAGE = ConverterPage(
    slug="speed",
    title="Speed Converter",
    registry=SPEED,
    default_from="mps",
    default_to="kph",
    default_favorites=("mps", "kph", "mph", "knot"),
    namespace="speed",
    hints=(
        ("knot", "1 knot = 1 nautical mile (1,852 m) per hour."),
    ),
)
