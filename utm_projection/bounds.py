"""Geodetic bounds of square UTM tiles"""
import math
from typing import Dict

from pydantic import BaseModel, ConfigDict

from .exceptions import OutOfRangeCoordinateError
from .models import UtmCoordinate
from .projection import to_geodetic


class GeodeticBounds(BaseModel):
    """Latitude/longitude bounding box in decimal degrees"""
    model_config = ConfigDict(frozen=True)

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    def contains(self, latitude: float, longitude: float) -> bool:
        return (self.min_lat <= latitude <= self.max_lat and
                self.min_lon <= longitude <= self.max_lon)

    def as_dict(self) -> Dict[str, float]:
        return self.model_dump()


def tile_bounds(utm: UtmCoordinate, tile_size: float = 1000.0) -> GeodeticBounds:
    """
    Calculate lat/lon bounds for a UTM tile

    Args:
        utm: UTM coordinate of the tile centre
        tile_size: Tile edge length in metres (default 1000m = 1km)

    Returns:
        GeodeticBounds covering the four tile corners

    Raises:
        OutOfRangeCoordinateError: If tile_size is not a positive finite number,
            or a corner falls outside the valid easting/northing range
    """
    if not math.isfinite(tile_size) or tile_size <= 0:
        raise OutOfRangeCoordinateError("tile_size", tile_size, 0.0, math.inf)

    half_tile = tile_size / 2

    corners = [
        (utm.easting - half_tile, utm.northing - half_tile),  # SW
        (utm.easting + half_tile, utm.northing - half_tile),  # SE
        (utm.easting + half_tile, utm.northing + half_tile),  # NE
        (utm.easting - half_tile, utm.northing + half_tile),  # NW
    ]

    lat_lons = []
    for east, north in corners:
        corner = UtmCoordinate(utm.zone_number, utm.zone_letter, east, north)
        geodetic = to_geodetic(corner)
        lat_lons.append((geodetic.latitude, geodetic.longitude))

    lats = [ll[0] for ll in lat_lons]
    lons = [ll[1] for ll in lat_lons]

    return GeodeticBounds(
        min_lat=min(lats),
        max_lat=max(lats),
        min_lon=min(lons),
        max_lon=max(lons),
    )
