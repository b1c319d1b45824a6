"""Converter page catalogue: slug -> ConverterPage."""

from typing import Optional

from ..services.converter_page import ConverterPage
from . import (
    acceleration,
    angle,
    area,
    data_storage,
    data_transfer,
    density,
    duration,
    energy,
    flow,
    force,
    frequency,
    mass,
    pressure,
    speed,
    volume,
)

PAGES: dict[str, ConverterPage] = {
    p.slug: p
    for p in (
        flow.PAGE,
        density.PAGE,
        duration.PAGE,
        energy.PAGE,
        force.PAGE,
        pressure.PAGE,
        acceleration.PAGE,
        mass.PAGE,
        data_storage.PAGE,
        angle.PAGE,
        area.PAGE,
        volume.PAGE,
        speed.PAGE,
        frequency.PAGE,
        data_transfer.PAGE,
    )
}


def get_page(slug: str) -> Optional[ConverterPage]:
    return PAGES.get(slug)


__all__ = ["PAGES", "get_page"]
