"""Plane angle. Base: radian."""

import math

from ..services.converter_page import ConverterPage
from ..services.unit_registry import Registry, Unit

PI = math.pi
TWO_PI = 2 * math.pi

ANGLE = Registry("angle", base="rad", units=[
    Unit("rad", "Radian (rad)", 1),
    Unit("deg", "Degree (°)", PI / 180),
    Unit("turn", "Turn (rev)", TWO_PI),
    Unit("grad", "Gradian (gon)", PI / 200),
    Unit("arcmin", "Arcminute (′)", (PI / 180) / 60),
    Unit("arcsec", "Arcsecond (″)", (PI / 180) / 3600),
    Unit("mrad", "Milliradian (mrad)", 1e-3),
    Unit("mil", "Mil (NATO, 1/6400 turn)", TWO_PI / 6400),
])

PAGE = ConverterPage(
    slug="angle",
    title="Angle Converter",
    registry=ANGLE,
    default_from="deg",
    default_to="rad",
    default_value="180",
    default_favorites=("deg", "rad", "turn", "grad", "arcmin", "mil"),
    namespace="angle",
)
