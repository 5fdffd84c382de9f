"""Angle and range helpers shared by the zone locator, models and projection"""
import math

from .exceptions import OutOfRangeCoordinateError


def normalize_angle(degrees: float) -> float:
    """Reduce an angle in degrees to the interval (-180, 180]"""
    x = math.remainder(degrees, 360.0)
    return 180.0 if x == -180.0 else x


def angle_diff(start: float, end: float) -> float:
    """Signed difference end - start in degrees, reduced to (-180, 180]"""
    return normalize_angle(math.remainder(end, 360.0) - math.remainder(start, 360.0))


def normalize_longitude(longitude: float) -> float:
    """Wrap a longitude into [-180, 180], leaving the two edges untouched"""
    if -180.0 <= longitude <= 180.0:
        return longitude
    return normalize_angle(longitude)


def require_in_range(field: str, value: float, minimum: float, maximum: float) -> float:
    """Return ``value`` if finite and inside [minimum, maximum], else raise"""
    if not math.isfinite(value) or not minimum <= value <= maximum:
        raise OutOfRangeCoordinateError(field, value, minimum, maximum)
    return value
