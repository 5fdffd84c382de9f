"""Coordinate value types for geodetic and UTM positions"""
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from .ellipsoid import FALSE_NORTHING_SOUTH
from .geomath import require_in_range
from .zones import (
    UtmZone,
    central_meridian,
    check_zone,
    check_zone_letter,
    check_zone_number,
    is_northern_letter,
)

MAX_EASTING = 1000000.0


class GeodeticCoordinate(BaseModel):
    """Point in WGS84 geographic coordinates (degrees)

    Validated once on construction and immutable afterwards. Accepts
    ``GeodeticCoordinate(lat, lon)`` as well as keyword arguments.

    Raises:
        OutOfRangeCoordinateError: If latitude is outside [-90, 90], longitude
            outside [-180, 180], or either value is not finite
    """
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float

    def __init__(self, latitude: float, longitude: float):
        super().__init__(latitude=latitude, longitude=longitude)

    @field_validator("latitude")
    @classmethod
    def _check_latitude(cls, v: float) -> float:
        return require_in_range("latitude", v, -90.0, 90.0)

    @field_validator("longitude")
    @classmethod
    def _check_longitude(cls, v: float) -> float:
        return require_in_range("longitude", v, -180.0, 180.0)

    def to_utm(self) -> "UtmCoordinate":
        from .projection import to_utm
        return to_utm(self)

    def __str__(self) -> str:
        return f"({self.latitude!r}, {self.longitude!r})"


class UtmCoordinate(BaseModel):
    """Point in a UTM zone (metres)

    ``zone_number``/``zone_letter`` identify the zone the easting and northing
    belong to. Southern-hemisphere northings carry the 10 000 km false
    northing, so northing is always non-negative.

    Raises:
        InvalidZoneError: If the zone number is not an int in [1, 60], the
            letter is not one of C..X (excluding I and O), or the pair is one
            of the unused zones 32X, 34X, 36X
        OutOfRangeCoordinateError: If easting is outside [0, 1 000 000] or
            northing outside [0, 10 000 000]
    """
    model_config = ConfigDict(frozen=True)

    zone_number: int
    zone_letter: str
    easting: float
    northing: float

    def __init__(self, zone_number: int, zone_letter: str, easting: float, northing: float):
        super().__init__(
            zone_number=zone_number,
            zone_letter=zone_letter,
            easting=easting,
            northing=northing,
        )

    # Zone fields are checked before pydantic's coercion so that bools,
    # fractional numbers and non-strings fail as InvalidZoneError
    @field_validator("zone_number", mode="before")
    @classmethod
    def _check_zone_number(cls, v: int) -> int:
        return check_zone_number(v)

    @field_validator("zone_letter", mode="before")
    @classmethod
    def _check_zone_letter(cls, v: str) -> str:
        return check_zone_letter(v)

    @model_validator(mode="after")
    def _check_zone(self) -> "UtmCoordinate":
        check_zone(self.zone_number, self.zone_letter)
        return self

    @field_validator("easting")
    @classmethod
    def _check_easting(cls, v: float) -> float:
        return require_in_range("easting", v, 0.0, MAX_EASTING)

    @field_validator("northing")
    @classmethod
    def _check_northing(cls, v: float) -> float:
        return require_in_range("northing", v, 0.0, FALSE_NORTHING_SOUTH)

    @property
    def zone(self) -> UtmZone:
        return UtmZone(self.zone_number, self.zone_letter)

    @property
    def is_northern(self) -> bool:
        return is_northern_letter(self.zone_letter)

    @property
    def hemisphere(self) -> str:
        """'N' or 'S'"""
        return "N" if self.is_northern else "S"

    @property
    def central_meridian(self) -> float:
        return central_meridian(self.zone_number)

    @property
    def epsg_code(self) -> str:
        """EPSG code of the WGS84 / UTM zone CRS, e.g. "32723" for 23S"""
        base = 32600 if self.is_northern else 32700
        return str(base + self.zone_number)

    def to_geodetic(self) -> GeodeticCoordinate:
        from .projection import to_geodetic
        return to_geodetic(self)

    def __str__(self) -> str:
        return f"{self.zone_number}{self.zone_letter} {round(self.easting)} {round(self.northing)}"
