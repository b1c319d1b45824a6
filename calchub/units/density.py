"""Density. Base: kg/m³ (g/L, mg/mL and mg/cm³ are exact aliases)."""

from ..services.converter_page import ConverterPage
from ..services.unit_registry import Registry, Unit

DENSITY = Registry("density", base="kg/m3", units=[
    # SI / metric
    Unit("kg/m3", "Kilogram per cubic meter (kg/m³)", 1),
    Unit("g/cm3", "Gram per cubic centimeter (g/cm³)", 1000),
    Unit("g/m3", "Gram per cubic meter (g/m³)", 1e-3),
    Unit("g/L", "Gram per liter (g/L)", 1),
    Unit("kg/L", "Kilogram per liter (kg/L)", 1000),
    Unit("g/mL", "Gram per milliliter (g/mL)", 1000),
    Unit("mg/mL", "Milligram per milliliter (mg/mL)", 1),
    Unit("mg/cm3", "Milligram per cubic centimeter (mg/cm³)", 1),
    # US / Imperial
    Unit("lb/ft3", "Pound per cubic foot (lb/ft³)", 16.01846337),
    Unit("lb/in3", "Pound per cubic inch (lb/in³)", 27679.90471),
    Unit("oz/in3", "Ounce per cubic inch (oz/in³)", 1729.99404),
    Unit("slug/ft3", "Slug per cubic foot (slug/ft³)", 515.378818),
    Unit("lb/galUS", "Pound per US gallon (lb/gal US)", 119.8264273),
    Unit("lb/galImp", "Pound per Imp gallon (lb/gal Imp)", 99.77637266),
])

PAGE = ConverterPage(
    slug="density",
    title="Density Converter",
    registry=DENSITY,
    default_from="g/cm3",
    default_to="kg/m3",
    default_favorites=("kg/m3", "g/cm3", "g/mL", "lb/ft3", "lb/galUS"),
    namespace="density",
    hints=(
        ("gal", "US gallon = 3.785411784 L, Imperial gallon = 4.54609 L."),
    ),
)
