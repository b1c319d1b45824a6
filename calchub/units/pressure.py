"""Pressure. Base: pascal."""

from ..services.converter_page import ConverterPage
from ..services.unit_registry import Registry, Unit

PA_PER_ATM = 101_325

PRESSURE = Registry("pressure", base="Pa", units=[
    # SI / metric
    Unit("Pa", "Pascal (Pa)", 1),
    Unit("kPa", "Kilopascal (kPa)", 1_000),
    Unit("MPa", "Megapascal (MPa)", 1_000_000),
    Unit("GPa", "Gigapascal (GPa)", 1_000_000_000),
    Unit("bar", "Bar (bar)", 100_000),
    Unit("mbar", "Millibar (mbar)", 100),
    Unit("hPa", "Hectopascal (hPa)", 100),
    # Atmospheres / torr / mmHg
    Unit("atm", "Standard atmosphere (atm)", PA_PER_ATM),
    Unit("torr", "Torr (Torr)", PA_PER_ATM / 760),
    Unit("mmHg", "Millimeter of mercury (mmHg)", 133.322387415),
    # US customary / imperial
    Unit("psi", "Pound per square inch (psi)", 6_894.757293168),
    Unit("psf", "Pound per square foot (psf)", 47.88025898033584),
    Unit("inHg", "Inch of mercury (inHg)", 3_386.389),
    # Technical
    Unit("kgfcm2", "kgf per cm² (kgf/cm²)", 98_066.5),
])

PAGE = ConverterPage(
    slug="pressure",
    title="Pressure Converter",
    registry=PRESSURE,
    default_from="kPa",
    default_to="psi",
    default_favorites=("kPa", "bar", "psi", "atm", "mbar"),
    namespace="pressure",
    hints=(
        ("Hg", "mmHg/inHg are conventional mercury columns at 0 °C and standard gravity."),
    ),
)
