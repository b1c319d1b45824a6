"""Mass. Base: kilogram."""

from ..services.converter_page import ConverterPage
from ..services.unit_registry import Registry, Unit

KG_PER_LB = 0.45359237  # exact

MASS = Registry("mass", base="kg", units=[
    # SI / metric
    Unit("µg", "Microgram (µg)", 1e-9),
    Unit("mg", "Milligram (mg)", 1e-6),
    Unit("g", "Gram (g)", 1e-3),
    Unit("kg", "Kilogram (kg)", 1),
    Unit("t", "Metric ton / Tonne (t)", 1e3),
    # Jewelry / small masses
    Unit("ct", "Carat (ct)", 0.0002),
    Unit("gr", "Grain (gr)", 0.00006479891),
    # Avoirdupois
    Unit("oz", "Ounce (oz)", 0.028349523125),
    Unit("lb", "Pound (lb)", KG_PER_LB),
    Unit("st", "Stone (st)", 6.35029318),
    Unit("USTon", "US short ton (ton)", 907.18474),
    Unit("LTTon", "UK long ton (ton)", 1016.0469088),
    # Engineering
    Unit("slug", "Slug (slug)", 14.59390294),
])

PAGE = ConverterPage(
    slug="mass",
    title="Mass & Weight Converter",
    registry=MASS,
    default_from="kg",
    default_to="lb",
    default_favorites=("g", "kg", "t", "oz", "lb", "st"),
    namespace="mass",
    csv_filename="mass-weight-conversion.csv",
)
