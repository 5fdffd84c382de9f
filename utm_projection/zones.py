"""
UTM zone and latitude band lookup

Zone numbers are 6° longitude strips numbered eastward from 180°W. Latitude
bands are 8° strips lettered C..X (no I or O) from 80°S, with band X
stretched to 12° so that it ends at 84°N. Two regions use non-standard
zones: south-west Norway (32V widened west) and Svalbard (31X, 33X, 35X,
37X widened, 32X/34X/36X unused).
"""
import math
from typing import NamedTuple, TYPE_CHECKING

from .exceptions import InvalidZoneError, ProjectionDomainError
from .geomath import require_in_range

if TYPE_CHECKING:
    from .models import GeodeticCoordinate

ZONE_LETTERS = "CDEFGHJKLMNPQRSTUVWX"
NORTHERN_LETTERS = frozenset(ZONE_LETTERS[ZONE_LETTERS.index("N"):])

MIN_ZONE = 1
MAX_ZONE = 60
MIN_BAND_LATITUDE = -80.0
MAX_BAND_LATITUDE = 84.0

# Svalbard: (lower longitude bound, upper longitude bound, zone), half-open
_SVALBARD_ZONES = (
    (0.0, 9.0, 31),
    (9.0, 21.0, 33),
    (21.0, 33.0, 35),
    (33.0, 42.0, 37),
)
# Absorbed by the widened Svalbard zones in band X
_UNUSED_SVALBARD_ZONES = frozenset({32, 34, 36})


class UtmZone(NamedTuple):
    """Zone number and latitude band letter, e.g. ``UtmZone(23, "K")``"""
    number: int
    letter: str

    def __str__(self) -> str:
        return f"{self.number}{self.letter}"


def zone_number(latitude: float, longitude: float) -> int:
    """Return the UTM zone number (1-60) for a geodetic position

    Raises:
        OutOfRangeCoordinateError: If latitude/longitude are outside
            [-90, 90] / [-180, 180]
    """
    require_in_range("latitude", latitude, -90.0, 90.0)
    require_in_range("longitude", longitude, -180.0, 180.0)

    if 56.0 <= latitude < 64.0 and 3.0 <= longitude < 12.0:
        return 32

    if 72.0 <= latitude < 84.0:
        for lower, upper, zone in _SVALBARD_ZONES:
            if lower <= longitude < upper:
                return zone

    number = int(math.floor((longitude + 180.0) / 6.0)) + 1
    return min(max(number, MIN_ZONE), MAX_ZONE)


def zone_letter(latitude: float) -> str:
    """Return the latitude band letter for a geodetic latitude

    Raises:
        OutOfRangeCoordinateError: If latitude is outside [-90, 90]
        ProjectionDomainError: If latitude is outside [-80, 84)
    """
    require_in_range("latitude", latitude, -90.0, 90.0)
    if not MIN_BAND_LATITUDE <= latitude < MAX_BAND_LATITUDE:
        raise ProjectionDomainError(latitude)
    if latitude >= 72.0:
        return "X"
    return ZONE_LETTERS[int((latitude - MIN_BAND_LATITUDE) // 8)]


def locate(coord: "GeodeticCoordinate") -> UtmZone:
    """Zone number and band letter for a validated geodetic coordinate"""
    letter = zone_letter(coord.latitude)
    return UtmZone(zone_number(coord.latitude, coord.longitude), letter)


def check_zone_number(number: int) -> int:
    """Return ``number`` if it is a UTM zone number, else raise InvalidZoneError"""
    if isinstance(number, bool) or not isinstance(number, int) or not MIN_ZONE <= number <= MAX_ZONE:
        raise InvalidZoneError(
            number, reason=f"Zone number {number!r} outside [{MIN_ZONE}, {MAX_ZONE}]"
        )
    return number


def check_zone_letter(letter: str) -> str:
    """Return the upper-cased band letter, or raise InvalidZoneError"""
    if not isinstance(letter, str) or len(letter) != 1 or letter.upper() not in ZONE_LETTERS:
        raise InvalidZoneError(
            zone_letter=letter, reason=f"Zone letter {letter!r} is not a UTM latitude band"
        )
    return letter.upper()


def check_zone(number: int, letter: str) -> UtmZone:
    """Validate a zone number/letter pair; 32X, 34X and 36X do not exist"""
    zone = UtmZone(check_zone_number(number), check_zone_letter(letter))
    if zone.letter == "X" and zone.number in _UNUSED_SVALBARD_ZONES:
        raise InvalidZoneError(
            zone.number, zone.letter,
            reason=f"Zone {zone} does not exist, Svalbard uses 31X, 33X, 35X and 37X"
        )
    return zone


def central_meridian(number: int) -> float:
    """Longitude in degrees of the zone's central meridian"""
    return (check_zone_number(number) - 1) * 6.0 - 180.0 + 3.0


def is_northern_letter(letter: str) -> bool:
    """True for bands N..X, False for C..M"""
    return check_zone_letter(letter) in NORTHERN_LETTERS
