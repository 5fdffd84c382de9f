"""
Transverse Mercator series for WGS84 / UTM

Forward and inverse projections follow Snyder, "Map Projections - A Working
Manual" (USGS Professional Paper 1395), equations 8-9 to 8-25. The series
are truncated at the terms listed there, which keeps the error well below a
millimetre inside the standard 6° zone width.
"""
import logging
import math

from .ellipsoid import (
    A,
    E_SQ,
    EP_SQ,
    FALSE_EASTING,
    FALSE_NORTHING_SOUTH,
    K0,
    M1,
    M2,
    M3,
    M4,
    P2,
    P4,
    P6,
    P8,
)
from .geomath import angle_diff, normalize_longitude
from .models import GeodeticCoordinate, UtmCoordinate
from .zones import central_meridian, locate

logger = logging.getLogger(__name__)


def meridian_arc(lat_rad: float) -> float:
    """Distance along the central meridian from the equator to ``lat_rad`` (metres)"""
    return A * (
        M1 * lat_rad
        - M2 * math.sin(2 * lat_rad)
        + M3 * math.sin(4 * lat_rad)
        - M4 * math.sin(6 * lat_rad)
    )


def footpoint_latitude(arc: float) -> float:
    """Latitude (radians) whose meridian arc length equals ``arc``"""
    mu = arc / (A * M1)
    return (
        mu
        + P2 * math.sin(2 * mu)
        + P4 * math.sin(4 * mu)
        + P6 * math.sin(6 * mu)
        + P8 * math.sin(8 * mu)
    )


def to_utm(coord: GeodeticCoordinate) -> UtmCoordinate:
    """Project a geodetic coordinate into its UTM zone

    Args:
        coord: Validated WGS84 coordinate

    Returns:
        UtmCoordinate whose zone/letter match ``zones.locate(coord)``

    Raises:
        ProjectionDomainError: If latitude is outside [-80, 84)
    """
    zone = locate(coord)

    lat_rad = math.radians(coord.latitude)
    dlon_rad = math.radians(angle_diff(central_meridian(zone.number), coord.longitude))

    sin_lat = math.sin(lat_rad)
    cos_lat = math.cos(lat_rad)
    tan_lat = math.tan(lat_rad)

    n = A / math.sqrt(1 - E_SQ * sin_lat ** 2)
    t = tan_lat ** 2
    c = EP_SQ * cos_lat ** 2
    a = dlon_rad * cos_lat
    m = meridian_arc(lat_rad)

    easting = K0 * n * (
        a
        + (1 - t + c) * a ** 3 / 6
        + (5 - 18 * t + t ** 2 + 72 * c - 58 * EP_SQ) * a ** 5 / 120
    ) + FALSE_EASTING

    northing = K0 * (
        m
        + n * tan_lat * (
            a ** 2 / 2
            + (5 - t + 9 * c + 4 * c ** 2) * a ** 4 / 24
            + (61 - 58 * t + t ** 2 + 600 * c - 330 * EP_SQ) * a ** 6 / 720
        )
    )
    if coord.latitude < 0:
        northing += FALSE_NORTHING_SOUTH

    logger.debug(
        f"Projected ({coord.latitude}, {coord.longitude}) → "
        f"{zone} ({easting:.3f}, {northing:.3f})"
    )
    return UtmCoordinate(zone.number, zone.letter, easting, northing)


def to_geodetic(utm: UtmCoordinate) -> GeodeticCoordinate:
    """Invert a UTM coordinate back to WGS84 latitude/longitude

    The hemisphere comes from the zone letter (N..X north, C..M south).
    Longitudes that fall past the antimeridian are wrapped into [-180, 180].

    Raises:
        OutOfRangeCoordinateError: If the recovered latitude is not a valid
            geodetic latitude (grid position far outside the zone)
    """
    x = utm.easting - FALSE_EASTING
    y = utm.northing
    if not utm.is_northern:
        y -= FALSE_NORTHING_SOUTH

    phi1 = footpoint_latitude(y / K0)

    sin_phi1 = math.sin(phi1)
    cos_phi1 = math.cos(phi1)
    tan_phi1 = math.tan(phi1)

    w = 1 - E_SQ * sin_phi1 ** 2
    n1 = A / math.sqrt(w)
    t1 = tan_phi1 ** 2
    c1 = EP_SQ * cos_phi1 ** 2
    r1 = A * (1 - E_SQ) / w ** 1.5
    d = x / (n1 * K0)

    lat_rad = phi1 - (n1 * tan_phi1 / r1) * (
        d ** 2 / 2
        - (5 + 3 * t1 + 10 * c1 - 4 * c1 ** 2 - 9 * EP_SQ) * d ** 4 / 24
        + (61 + 90 * t1 + 298 * c1 + 45 * t1 ** 2 - 252 * EP_SQ - 3 * c1 ** 2) * d ** 6 / 720
    )
    dlon_rad = (
        d
        - (1 + 2 * t1 + c1) * d ** 3 / 6
        + (5 - 2 * c1 + 28 * t1 - 3 * c1 ** 2 + 8 * EP_SQ + 24 * t1 ** 2) * d ** 5 / 120
    ) / cos_phi1

    latitude = math.degrees(lat_rad)
    longitude = normalize_longitude(utm.central_meridian + math.degrees(dlon_rad))

    logger.debug(f"Inverted {utm} → ({latitude}, {longitude})")
    return GeodeticCoordinate(latitude, longitude)
