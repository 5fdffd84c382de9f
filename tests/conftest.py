"""
Shared test fixtures for the UTM projection test suite.
Provides known reference points and settings isolation.
"""
import logging
from typing import NamedTuple

import pytest

from utm_projection.config import get_settings


class KnownPoint(NamedTuple):
    """Geodetic input with its UTM zone and truncated easting/northing"""
    name: str
    latitude: float
    longitude: float
    zone_number: int
    zone_letter: str
    easting: int
    northing: int


# Truncated metres from an exact (Karney) transverse Mercator implementation
KNOWN_POINTS = [
    KnownPoint("Rio de Janeiro", -23.0095839, -43.4361816, 23, "K", 660265, 7454564),
    KnownPoint("Berlin", 52.517153, 13.412389, 33, "U", 392273, 5819744),
    KnownPoint("Bergen (Norway exception)", 61.076521, 4.680180, 32, "V", 267038, 6779002),
    KnownPoint("Ny-Alesund (Svalbard 33X)", 78.891608, 10.457194, 33, "X", 402386, 8761675),
    KnownPoint("Svalbard 33X east edge", 78.122200, 20.349504, 33, "X", 622751, 8677619),
    KnownPoint("Svalbard 35X west edge", 78.102575, 21.013745, 35, "X", 362459, 8676854),
    KnownPoint("Svalbard 35X", 78.138264, 30.194746, 35, "X", 573272, 8675799),
    KnownPoint("Cape Town", -34.073088, 18.549757, 34, "H", 273893, 6227030),
]


@pytest.fixture(params=KNOWN_POINTS, ids=lambda p: p.name)
def known_point(request) -> KnownPoint:
    return request.param


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; isolate tests that touch the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_root_logger():
    """Put root logger handlers and level back after setup_logging runs."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
