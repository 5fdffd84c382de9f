"""Reference UTM transformations through PROJ, for cross-checking the series"""
from dataclasses import dataclass
import logging
import math
from typing import Dict, Optional, Tuple

from pyproj import Transformer
from pyproj.exceptions import CRSError

from .models import GeodeticCoordinate, UtmCoordinate
from .projection import to_utm
from .zones import UtmZone, locate

logger = logging.getLogger(__name__)

WGS84_EPSG = "4326"


def utm_epsg_code(zone_number: int, northern: bool) -> str:
    """EPSG code of the WGS84 / UTM zone CRS"""
    return str((32600 if northern else 32700) + zone_number)


@dataclass(frozen=True)
class ReferenceComparison:
    """Series projection next to PROJ's result for the same point"""
    series: UtmCoordinate
    reference_easting: float
    reference_northing: float
    tolerance_m: float

    @property
    def deviation_m(self) -> float:
        return math.hypot(
            self.series.easting - self.reference_easting,
            self.series.northing - self.reference_northing,
        )

    @property
    def within_tolerance(self) -> bool:
        return self.deviation_m <= self.tolerance_m


class ReferenceProjectionService:
    """PROJ-backed UTM transformations with transformer caching

    Used to check the truncated series against PROJ's exact transverse
    Mercator implementation. Transformers are cached per (source, target)
    EPSG pair for the lifetime of the service instance.
    """

    def __init__(self, tolerance_m: Optional[float] = None):
        if tolerance_m is None:
            from .config import get_settings
            tolerance_m = get_settings().REFERENCE_TOLERANCE_M
        self.tolerance_m = tolerance_m
        self._transformer_cache: Dict[Tuple[str, str], Transformer] = {}
        logger.info(f"ReferenceProjectionService initialized (tolerance {tolerance_m} m)")

    def get_transformer(self, source_epsg: str, target_epsg: str) -> Transformer:
        """Get cached transformer for source → target CRS

        Raises:
            CRSError: If an EPSG code is invalid
        """
        key = (source_epsg, target_epsg)
        if key not in self._transformer_cache:
            try:
                self._transformer_cache[key] = Transformer.from_crs(
                    f"EPSG:{source_epsg}", f"EPSG:{target_epsg}", always_xy=True
                )
                logger.debug(f"Created transformer for EPSG:{source_epsg} → EPSG:{target_epsg}")
            except CRSError as e:
                logger.error(f"Failed to create transformer EPSG:{source_epsg} → EPSG:{target_epsg}: {e}")
                raise
        return self._transformer_cache[key]

    def forward(self, coord: GeodeticCoordinate, zone: Optional[UtmZone] = None) -> Tuple[float, float]:
        """Project with PROJ into ``zone`` (default: the zone the point lies in)

        Returns:
            Tuple of (easting, northing) in metres
        """
        if zone is None:
            zone = locate(coord)
        target_epsg = utm_epsg_code(zone.number, coord.latitude >= 0)
        transformer = self.get_transformer(WGS84_EPSG, target_epsg)
        # pyproj expects (lon, lat) order with always_xy
        easting, northing = transformer.transform(coord.longitude, coord.latitude)
        logger.debug(
            f"PROJ WGS84({coord.latitude}, {coord.longitude}) → "
            f"EPSG:{target_epsg}({easting:.3f}, {northing:.3f})"
        )
        return easting, northing

    def inverse(self, utm: UtmCoordinate) -> Tuple[float, float]:
        """Invert with PROJ

        Returns:
            Tuple of (latitude, longitude) in degrees
        """
        transformer = self.get_transformer(utm.epsg_code, WGS84_EPSG)
        lon, lat = transformer.transform(utm.easting, utm.northing)
        return lat, lon

    def compare(self, coord: GeodeticCoordinate) -> ReferenceComparison:
        """Project ``coord`` with the series and with PROJ and compare"""
        series = to_utm(coord)
        ref_easting, ref_northing = self.forward(coord, series.zone)
        comparison = ReferenceComparison(
            series=series,
            reference_easting=ref_easting,
            reference_northing=ref_northing,
            tolerance_m=self.tolerance_m,
        )
        if not comparison.within_tolerance:
            logger.warning(
                f"Series deviates {comparison.deviation_m:.4f} m from PROJ",
                extra={
                    "coordinates": {"lat": coord.latitude, "lon": coord.longitude},
                    "zone": series.zone,
                }
            )
        return comparison

    def get_cache_stats(self) -> Dict[str, object]:
        """Get transformer cache statistics for monitoring"""
        return {
            "cached_transformers": len(self._transformer_cache),
            "epsg_pairs": [f"{s}->{t}" for s, t in self._transformer_cache],
        }
