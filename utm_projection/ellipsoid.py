"""WGS84 ellipsoid parameters and UTM projection constants"""
from dataclasses import dataclass


@dataclass(frozen=True)
class EllipsoidParameters:
    """Reference ellipsoid defined by its semi-major axis and flattening"""
    semi_major_axis: float
    flattening: float

    @property
    def semi_minor_axis(self) -> float:
        return self.semi_major_axis * (1 - self.flattening)

    @property
    def eccentricity_sq(self) -> float:
        """First eccentricity squared, e² = f(2 - f)"""
        return self.flattening * (2 - self.flattening)

    @property
    def second_eccentricity_sq(self) -> float:
        """Second eccentricity squared, e'² = e² / (1 - e²)"""
        e_sq = self.eccentricity_sq
        return e_sq / (1 - e_sq)

    @property
    def third_flattening(self) -> float:
        return self.flattening / (2 - self.flattening)


WGS84 = EllipsoidParameters(semi_major_axis=6378137.0, flattening=1 / 298.257223563)

# Module constants used by the series; evaluated once at import
A = WGS84.semi_major_axis
E_SQ = WGS84.eccentricity_sq
E4 = E_SQ ** 2
E6 = E_SQ ** 3
EP_SQ = WGS84.second_eccentricity_sq

# Meridional arc coefficients (Snyder, USGS PP 1395, eq. 3-21)
M1 = 1 - E_SQ / 4 - 3 * E4 / 64 - 5 * E6 / 256
M2 = 3 * E_SQ / 8 + 3 * E4 / 32 + 45 * E6 / 1024
M3 = 15 * E4 / 256 + 45 * E6 / 1024
M4 = 35 * E6 / 3072

# Footpoint latitude coefficients (Snyder eq. 3-24, 3-26)
_SQRT_E = (1 - E_SQ) ** 0.5
E1 = (1 - _SQRT_E) / (1 + _SQRT_E)
P2 = 3 * E1 / 2 - 27 * E1 ** 3 / 32
P4 = 21 * E1 ** 2 / 16 - 55 * E1 ** 4 / 32
P6 = 151 * E1 ** 3 / 96
P8 = 1097 * E1 ** 4 / 512

# UTM
K0 = 0.9996
FALSE_EASTING = 500000.0
FALSE_NORTHING_SOUTH = 10000000.0
