"""Area. Base: m²."""

from ..services.converter_page import ConverterPage
from ..services.unit_registry import Registry, Unit

AREA = Registry("area", base="m2", units=[
    # SI / metric
    Unit("nm2", "Square Nanometer (nm²)", 1e-18),
    Unit("um2", "Square Micrometer (µm²)", 1e-12),
    Unit("mm2", "Square Millimeter (mm²)", 1e-6),
    Unit("cm2", "Square Centimeter (cm²)", 1e-4),
    Unit("dm2", "Square Decimeter (dm²)", 1e-2),
    Unit("m2", "Square Meter (m²)", 1),
    Unit("a", "Are (a)", 100),
    Unit("ha", "Hectare (ha)", 10_000),
    Unit("km2", "Square Kilometer (km²)", 1e6),
    # Imperial / US
    Unit("in2", "Square Inch (in²)", 0.00064516),
    Unit("ft2", "Square Foot (ft²)", 0.09290304),
    Unit("yd2", "Square Yard (yd²)", 0.83612736),
    Unit("ac", "Acre (ac)", 4046.8564224),
    Unit("mi2", "Square Mile (mi²)", 2589988.110336),
])

PAGE = ConverterPage(
    slug="area",
    title="Area Converter",
    registry=AREA,
    default_from="m2",
    default_to="ft2",
    default_favorites=("m2", "cm2", "ft2", "ac"),
    namespace="area",
    hints=(
        ("ac", "1 acre = 4,046.8564224 m²."),
        ("ha", "1 hectare = 10,000 m²."),
    ),
)
