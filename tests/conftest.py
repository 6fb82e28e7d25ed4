"""Shared fixtures: a small in-memory periodic table and parse helpers."""

import pytest
from loguru import logger

from hillform.elements import Element, PeriodicTable
from hillform.formula import parse

ELEMENTS = [
    Element(1, "H", "Hydrogen", 1.008),
    Element(6, "C", "Carbon", 12.011),
    Element(7, "N", "Nitrogen", 14.007),
    Element(8, "O", "Oxygen", 15.999),
    Element(11, "Na", "Sodium", 22.990),
    Element(15, "P", "Phosphorus", 30.974),
    Element(16, "S", "Sulfur", 32.06),
    Element(17, "Cl", "Chlorine", 35.45),
    Element(19, "K", "Potassium", 39.098),
    Element(20, "Ca", "Calcium", 40.078),
    Element(26, "Fe", "Iron", 55.845),
    Element(29, "Cu", "Copper", 63.546),
]

ISOTOPES = {
    "H": {1: (1.00782503, 0.999885), 2: (2.01410178, 0.000115), 3: (3.01604928, 0.0)},
    "C": {12: (12.0, 0.9893), 13: (13.00335484, 0.0107), 14: (14.00324199, 0.0)},
    "N": {14: (14.00307401, 0.99636), 15: (15.00010890, 0.00364)},
    "O": {16: (15.99491462, 0.99757), 17: (16.99913176, 0.00038), 18: (17.99915961, 0.00205)},
    "Na": {23: (22.98976928, 1.0)},
    "P": {31: (30.97376200, 1.0)},
    "S": {32: (31.97207117, 0.9499), 33: (32.97145891, 0.0075), 34: (33.96786701, 0.0425)},
    "Cl": {35: (34.96885268, 0.7576), 37: (36.96590260, 0.2424)},
    "K": {39: (38.96370649, 0.932581)},
    "Ca": {40: (39.96259086, 0.96941)},
    "Fe": {56: (55.93493633, 0.91754)},
    "Cu": {63: (62.92959772, 0.6915), 65: (64.92778970, 0.3085)},
}


@pytest.fixture(scope="session")
def table():
    """Periodic table covering the elements used in the tests."""
    return PeriodicTable(ELEMENTS, ISOTOPES)


@pytest.fixture
def p(table):
    """Parse formula text against the test table."""

    def _parse(text, **kwargs):
        return parse(text, table, **kwargs)

    return _parse


@pytest.fixture(autouse=True)
def quiet_library_logs():
    """Leave hillform logging disabled after each test, as it is on import."""
    yield
    logger.disable("hillform")
