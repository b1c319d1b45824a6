"""
Tests for base-unit conversion.
"""

import math

import pytest

from calchub.services.conversion import convert, convert_all
from calchub.units import PAGES
from calchub.units.angle import ANGLE
from calchub.units.data_storage import DATA_STORAGE
from calchub.units.duration import TIME, build_time_registry
from calchub.units.flow import FLOW
from calchub.units.pressure import PRESSURE


def test_convert_minutes_to_seconds():
    assert convert(10, "min", "s", TIME) == pytest.approx(600)


def test_convert_gallons_to_liters():
    # 1 US gal = 3.785411784 L
    assert convert(1, "galUS/min", "L/min", FLOW) == pytest.approx(3.785411784)


def test_convert_psi_to_kpa():
    assert convert(1, "psi", "kPa", PRESSURE) == pytest.approx(6.894757293168)


def test_convert_degrees_to_radians():
    assert convert(180, "deg", "rad", ANGLE) == pytest.approx(math.pi)


def test_convert_decimal_vs_binary_bytes():
    assert convert(1, "GiB", "MB", DATA_STORAGE) == pytest.approx(1073.741824)
    assert convert(8, "b", "B", DATA_STORAGE) == pytest.approx(1)


def test_identity_is_exact():
    assert convert(0.1, "L/min", "L/min", FLOW) == 0.1


def test_unknown_key_is_nan():
    assert math.isnan(convert(1, "nope", "s", TIME))
    assert math.isnan(convert(1, "s", "nope", TIME))


def test_round_trip_is_close():
    there = convert(123.456, "bbl/d", "mL/s", FLOW)
    back = convert(there, "mL/s", "bbl/d", FLOW)
    assert back == pytest.approx(123.456, rel=1e-12)


def test_convert_all_excludes_source_in_registry_order():
    grid = convert_all(1, "min", TIME)
    assert "min" not in grid
    assert list(grid) == [k for k in TIME.keys() if k != "min"]
    assert grid["s"] == pytest.approx(60)
    assert grid["h"] == pytest.approx(1 / 60)


def test_convert_all_unknown_source_is_all_nan():
    grid = convert_all(5, "nope", TIME)
    assert len(grid) == len(TIME)
    assert all(math.isnan(v) for v in grid.values())


def test_year_follows_days_per_year():
    assert convert(1, "yr", "d", TIME) == pytest.approx(365.2425)
    registry = build_time_registry(365)
    assert convert(1, "yr", "d", registry) == pytest.approx(365)
    assert convert(1, "mo", "d", registry) == pytest.approx(365 / 12)


# --- Properties over every shipped page ---

ALL_UNITS = [(page.slug, key) for page in PAGES.values() for key in page.registry.keys()]


@pytest.mark.parametrize("slug,key", ALL_UNITS)
def test_identity_for_every_unit(slug, key):
    registry = PAGES[slug].registry
    for x in (0.0, 1.0, 0.1, -123.456, 1e300):
        assert convert(x, key, key, registry) == x


@pytest.mark.parametrize("page", list(PAGES.values()), ids=lambda p: p.slug)
def test_bridge_round_trip_for_every_pair(page):
    registry = page.registry
    for a in registry.keys():
        for b in registry.keys():
            back = convert(convert(42.5, a, b, registry), b, a, registry)
            assert back == pytest.approx(42.5, rel=1e-9), (a, b)


@pytest.mark.parametrize("page", list(PAGES.values()), ids=lambda p: p.slug)
def test_zero_converts_to_zero_everywhere(page):
    for key in page.registry.keys():
        grid = convert_all(0, key, page.registry)
        assert all(v == 0 for v in grid.values()), key


# --- Supplementary pages ---

def test_supplementary_tables():
    assert convert(1, "ac", "m2", PAGES["area"].registry) == pytest.approx(4046.8564224)
    assert convert(1, "knot", "kph", PAGES["speed"].registry) == pytest.approx(1.852)
    assert convert(1, "galUS", "L", PAGES["volume"].registry) == pytest.approx(3.785411784)
    assert convert(60, "Hz", "RPM", PAGES["frequency"].registry) == pytest.approx(3600)
    assert convert(100, "MB/s", "Mbps", PAGES["data-transfer"].registry) == pytest.approx(800)
    assert convert(1, "MiB/s", "Kibps", PAGES["data-transfer"].registry) == pytest.approx(8192)
