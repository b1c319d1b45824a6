"""Energy. Base: joule."""

from ..services.converter_page import ConverterPage
from ..services.unit_registry import Registry, Unit

J_PER_EV = 1.602176634e-19  # exact (SI 2019)

ENERGY = Registry("energy", base="J", units=[
    # SI / metric
    Unit("J", "Joule (J)", 1),
    Unit("kJ", "Kilojoule (kJ)", 1e3),
    Unit("MJ", "Megajoule (MJ)", 1e6),
    Unit("GJ", "Gigajoule (GJ)", 1e9),
    # Electrical
    Unit("Wh", "Watt-hour (Wh)", 3600),
    Unit("kWh", "Kilowatt-hour (kWh)", 3.6e6),
    Unit("MWh", "Megawatt-hour (MWh)", 3.6e9),
    Unit("GWh", "Gigawatt-hour (GWh)", 3.6e12),
    # Particle / atomic
    Unit("eV", "Electronvolt (eV)", J_PER_EV),
    Unit("keV", "Kiloelectronvolt (keV)", 1.602176634e-16),
    Unit("MeV", "Megaelectronvolt (MeV)", 1.602176634e-13),
    Unit("GeV", "Gigaelectronvolt (GeV)", 1.602176634e-10),
    # Thermal / food
    Unit("cal", "Calorie (cal, thermochemical)", 4.184),
    Unit("kcal", "Kilocalorie (kcal)", 4184),
    # Imperial / US customary
    Unit("BTU", "British thermal unit (BTU, IT)", 1055.05585262),
    Unit("ftlb", "Foot-pound (ft·lb)", 1.3558179483314004),
    # Others
    Unit("thermUS", "Therm (US)", 105480400),
    Unit("thermUK", "Therm (UK)", 105505585.257348),
    Unit("TNT", "Ton of TNT (t TNT)", 4.184e9),
])

PAGE = ConverterPage(
    slug="energy",
    title="Energy Converter",
    registry=ENERGY,
    default_from="kWh",
    default_to="MJ",
    default_favorites=("J", "kJ", "kWh", "MJ", "cal", "kcal", "BTU"),
    namespace="energy",
    hints=(
        ("cal", "cal is the thermochemical calorie (4.184 J); kcal is the food Calorie."),
    ),
)
