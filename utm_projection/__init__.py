"""Conversion between WGS84 latitude/longitude and UTM coordinates"""
from .bounds import GeodeticBounds, tile_bounds
from .config import Settings, get_settings
from .crs_service import ReferenceComparison, ReferenceProjectionService
from .ellipsoid import WGS84, EllipsoidParameters
from .exceptions import (
    ConfigurationError,
    InvalidZoneError,
    OutOfRangeCoordinateError,
    ProjectionDomainError,
    UTMProjectionError,
)
from .logging_config import setup_logging
from .models import GeodeticCoordinate, UtmCoordinate
from .projection import to_geodetic, to_utm
from .zones import UtmZone, central_meridian, locate, zone_letter, zone_number

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "EllipsoidParameters",
    "GeodeticBounds",
    "GeodeticCoordinate",
    "InvalidZoneError",
    "OutOfRangeCoordinateError",
    "ProjectionDomainError",
    "ReferenceComparison",
    "ReferenceProjectionService",
    "Settings",
    "UTMProjectionError",
    "UtmCoordinate",
    "UtmZone",
    "WGS84",
    "central_meridian",
    "get_settings",
    "locate",
    "setup_logging",
    "tile_bounds",
    "to_geodetic",
    "to_utm",
    "zone_letter",
    "zone_number",
]
