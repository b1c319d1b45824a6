"""Volume. Base: m³.

Teaspoon and tablespoon use the US definitions.
"""

from ..services.converter_page import ConverterPage
from ..services.unit_registry import Registry, Unit

VOLUME = Registry("volume", base="m3", units=[
    # SI / metric
    Unit("mm3", "Cubic Millimeter (mm³)", 1e-9),
    Unit("cm3", "Cubic Centimeter (cm³)", 1e-6),
    Unit("mL", "Milliliter (mL)", 1e-6),
    Unit("cL", "Centiliter (cL)", 1e-5),
    Unit("dL", "Deciliter (dL)", 1e-4),
    Unit("L", "Liter (L)", 1e-3),
    Unit("m3", "Cubic Meter (m³)", 1),
    # Cubic imperial
    Unit("in3", "Cubic Inch (in³)", 0.000016387064),
    Unit("ft3", "Cubic Foot (ft³)", 0.028316846592),
    Unit("yd3", "Cubic Yard (yd³)", 0.764554857984),
    # US customary
    Unit("flozUS", "Fluid Ounce (US fl oz)", 2.95735295625e-5),
    Unit("cupUS", "Cup (US)", 0.0002365882365),
    Unit("ptUS", "Pint (US pt)", 0.000473176473),
    Unit("qtUS", "Quart (US qt)", 0.000946352946),
    Unit("galUS", "Gallon (US gal)", 0.003785411784),
    Unit("tspUS", "Teaspoon (US tsp)", 4.92892159375e-6),
    Unit("tbspUS", "Tablespoon (US tbsp)", 1.478676478125e-5),
    # Imperial
    Unit("flozUK", "Fluid Ounce (Imp fl oz)", 2.84130625e-5),
    Unit("ptUK", "Pint (Imp pt)", 0.00056826125),
    Unit("qtUK", "Quart (Imp qt)", 0.0011365225),
    Unit("galUK", "Gallon (Imp gal)", 0.00454609),
])

PAGE = ConverterPage(
    slug="volume",
    title="Volume Converter",
    registry=VOLUME,
    default_from="L",
    default_to="galUS",
    default_favorites=("mL", "L", "galUS", "ptUS", "cm3", "ft3"),
    namespace="volume",
    hints=(
        ("UK", "Imperial (UK) measures are larger than US ones: 1 Imp gal = 4.54609 L."),
        ("tsp", "Teaspoon and tablespoon use US sizes."),
    ),
)
