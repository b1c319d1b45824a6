"""Volumetric flow rate. Base: m³/s."""

from ..services.converter_page import ConverterPage
from ..services.unit_registry import Registry, Unit

M3_PER_FT3 = 0.028316846592
M3_PER_IN3 = 1.6387064e-5
M3_PER_GAL_US = 0.003785411784
M3_PER_GAL_IMP = 0.00454609
M3_PER_BBL = 0.158987294928  # 42 US gal

FLOW = Registry("flow rate", base="m3/s", units=[
    # SI / metric
    Unit("m3/s", "Cubic meter per second (m³/s)", 1),
    Unit("m3/min", "Cubic meter per minute (m³/min)", 1 / 60),
    Unit("m3/h", "Cubic meter per hour (m³/h)", 1 / 3600),
    Unit("L/s", "Liter per second (L/s)", 0.001),
    Unit("L/min", "Liter per minute (L/min)", 0.001 / 60),
    Unit("L/h", "Liter per hour (L/h)", 0.001 / 3600),
    Unit("mL/s", "Milliliter per second (mL/s)", 1e-6),
    Unit("mL/min", "Milliliter per minute (mL/min)", 1e-6 / 60),
    # US customary
    Unit("ft3/s", "Cubic foot per second (ft³/s)", M3_PER_FT3),
    Unit("ft3/min", "Cubic foot per minute (ft³/min, CFM)", M3_PER_FT3 / 60),
    Unit("ft3/h", "Cubic foot per hour (ft³/h)", M3_PER_FT3 / 3600),
    Unit("in3/s", "Cubic inch per second (in³/s)", M3_PER_IN3),
    Unit("in3/min", "Cubic inch per minute (in³/min)", M3_PER_IN3 / 60),
    Unit("galUS/s", "US gallon per second (gal/s)", M3_PER_GAL_US),
    Unit("galUS/min", "US gallon per minute (GPM US)", M3_PER_GAL_US / 60),
    Unit("galUS/h", "US gallon per hour (gal/h)", M3_PER_GAL_US / 3600),
    # Imperial
    Unit("galImp/s", "Imperial gallon per second (gal (Imp)/s)", M3_PER_GAL_IMP),
    Unit("galImp/min", "Imperial gallon per minute (GPM Imp)", M3_PER_GAL_IMP / 60),
    Unit("galImp/h", "Imperial gallon per hour (gal (Imp)/h)", M3_PER_GAL_IMP / 3600),
    # Oil & process
    Unit("bbl/s", "Barrel per second (bbl/s)", M3_PER_BBL),
    Unit("bbl/min", "Barrel per minute (bbl/min)", M3_PER_BBL / 60),
    Unit("bbl/d", "Barrel per day (bbl/d)", M3_PER_BBL / 86400),
])

PAGE = ConverterPage(
    slug="flow-rate",
    title="Flow Rate Converter",
    registry=FLOW,
    default_from="L/min",
    default_to="galUS/min",
    default_favorites=("L/min", "m3/h", "galUS/min", "ft3/min", "m3/s", "bbl/d", "galImp/min"),
    namespace="flow",
    csv_filename="flowrate-conversion.csv",
    hints=(
        ("gal", "US gallon = 3.785411784 L, Imperial gallon = 4.54609 L."),
        ("ft3", "1 ft³ = 0.028316846592 m³."),
    ),
)
