"""Force. Base: newton."""

from ..services.converter_page import ConverterPage
from ..services.unit_registry import Registry, Unit

N_PER_LBF = 4.4482216152605

FORCE = Registry("force", base="N", units=[
    # SI / multiples
    Unit("mN", "Millinewton (mN)", 1e-3),
    Unit("N", "Newton (N)", 1),
    Unit("kN", "Kilonewton (kN)", 1e3),
    Unit("MN", "Meganewton (MN)", 1e6),
    Unit("sn", "Stène (sn)", 1e3),
    # CGS / gravitational
    Unit("dyn", "Dyne (dyn)", 1e-5),
    Unit("gf", "Gram-force (gf/p)", 9.80665e-3),
    Unit("kgf", "Kilogram-force (kgf)", 9.80665),
    Unit("tf", "Tonne-force (metric tf)", 9806.65),
    # Avoirdupois
    Unit("ozf", "Ounce-force (ozf)", N_PER_LBF / 16),
    Unit("lbf", "Pound-force (lbf)", N_PER_LBF),
    Unit("kip", "Kip (1000 lbf)", 4448.2216152605),
    Unit("ustf", "US ton-force (short)", 8896.443230521),
    Unit("lttf", "UK ton-force (long)", 9964.016418183),
])

PAGE = ConverterPage(
    slug="force",
    title="Force Converter",
    registry=FORCE,
    default_from="N",
    default_to="lbf",
    default_favorites=("N", "kN", "lbf", "kgf", "ozf", "tf"),
    namespace="force",
    hints=(
        ("gf", "kgf/gf use standard gravity g₀ = 9.80665 m/s²."),
    ),
)
