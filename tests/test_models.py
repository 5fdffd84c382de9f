"""
Test suite for the coordinate value types.
Covers validation at construction, immutability, derived properties and
text rendering.
"""
import math

import pytest
from pydantic import ValidationError

from utm_projection.exceptions import (
    InvalidZoneError,
    OutOfRangeCoordinateError,
    UTMProjectionError,
)
from utm_projection.models import GeodeticCoordinate, UtmCoordinate
from utm_projection.zones import UtmZone


class TestGeodeticCoordinate:
    """Test GeodeticCoordinate construction and rendering."""

    def test_instantiate(self):
        coord = GeodeticCoordinate(-23.0095839, -43.4361816)
        assert coord.latitude == -23.0095839
        assert coord.longitude == -43.4361816

    def test_keyword_construction(self):
        coord = GeodeticCoordinate(latitude=10.5, longitude=-20.25)
        assert (coord.latitude, coord.longitude) == (10.5, -20.25)

    def test_integer_input_coerced_to_float(self):
        coord = GeodeticCoordinate(10, 20)
        assert isinstance(coord.latitude, float)
        assert str(coord) == "(10.0, 20.0)"

    @pytest.mark.parametrize("latitude,longitude", [
        (90.0, 180.0), (-90.0, -180.0), (0.0, 0.0),
    ])
    def test_limits_are_inclusive(self, latitude, longitude):
        GeodeticCoordinate(latitude, longitude)

    @pytest.mark.parametrize("latitude,longitude,field", [
        (95.0, 0.0, "latitude"),
        (-91.0, 0.0, "latitude"),
        (91.0, 0.0, "latitude"),
        (0.0, -200.0, "longitude"),
        (0.0, 181.0, "longitude"),
        (0.0, -181.0, "longitude"),
        (float("nan"), 0.0, "latitude"),
        (0.0, float("inf"), "longitude"),
    ])
    def test_out_of_range(self, latitude, longitude, field):
        with pytest.raises(OutOfRangeCoordinateError) as exc_info:
            GeodeticCoordinate(latitude, longitude)
        assert exc_info.value.field == field
        assert field in str(exc_info.value)

    def test_out_of_range_is_not_wrapped_by_pydantic(self):
        with pytest.raises(UTMProjectionError) as exc_info:
            GeodeticCoordinate(95.0, 0.0)
        assert not isinstance(exc_info.value, ValidationError)
        assert exc_info.value.minimum == -90.0
        assert exc_info.value.maximum == 90.0

    def test_non_numeric_input_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            GeodeticCoordinate("north", 0.0)

    def test_immutable(self):
        coord = GeodeticCoordinate(1.0, 2.0)
        with pytest.raises(ValidationError):
            coord.latitude = 5.0

    def test_value_equality_and_hash(self):
        a = GeodeticCoordinate(1.0, 2.0)
        b = GeodeticCoordinate(1.0, 2.0)
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_str_keeps_full_precision(self):
        assert str(GeodeticCoordinate(-23.0095839, -43.4361816)) == "(-23.0095839, -43.4361816)"

    def test_to_utm_method(self):
        utm = GeodeticCoordinate(-23.0095839, -43.4361816).to_utm()
        assert utm.zone == UtmZone(23, "K")


class TestUtmCoordinate:
    """Test UtmCoordinate construction, properties and rendering."""

    def test_instantiate(self):
        utm = UtmCoordinate(48, "N", 298559.28045456996, 1774394.8286476505)
        assert utm.zone_number == 48
        assert utm.zone_letter == "N"
        assert utm.easting == 298559.28045456996
        assert utm.northing == 1774394.8286476505

    def test_lowercase_letter_normalised(self):
        assert UtmCoordinate(23, "k", 500000.0, 7000000.0).zone_letter == "K"

    @pytest.mark.parametrize("zone", [0, 61, -5])
    def test_invalid_zone_number(self, zone):
        with pytest.raises(InvalidZoneError) as exc_info:
            UtmCoordinate(zone, "K", 500000.0, 7000000.0)
        assert exc_info.value.zone_number == zone

    @pytest.mark.parametrize("letter", ["I", "O", "A", "B", "Y", "Z", "", "KK", "1"])
    def test_invalid_zone_letter(self, letter):
        with pytest.raises(InvalidZoneError) as exc_info:
            UtmCoordinate(23, letter, 500000.0, 7000000.0)
        assert exc_info.value.zone_letter == letter

    @pytest.mark.parametrize("zone", [32, 34, 36])
    def test_unused_svalbard_zones_rejected(self, zone):
        with pytest.raises(InvalidZoneError) as exc_info:
            UtmCoordinate(zone, "X", 500000.0, 8500000.0)
        assert exc_info.value.zone_number == zone
        assert exc_info.value.zone_letter == "X"

    @pytest.mark.parametrize("zone", [31, 33, 35, 37])
    def test_svalbard_zones_accepted(self, zone):
        assert UtmCoordinate(zone, "x", 500000.0, 8500000.0).zone == UtmZone(zone, "X")

    def test_zones_32_to_36_valid_outside_band_x(self):
        assert UtmCoordinate(32, "W", 500000.0, 7800000.0).zone_number == 32

    @pytest.mark.parametrize("zone", [True, False, 23.5, 23.0, "23", None])
    def test_zone_number_not_coerced(self, zone):
        with pytest.raises(InvalidZoneError):
            UtmCoordinate(zone, "K", 500000.0, 7000000.0)

    @pytest.mark.parametrize("letter", [5, None, b"K"])
    def test_zone_letter_not_coerced(self, letter):
        with pytest.raises(InvalidZoneError) as exc_info:
            UtmCoordinate(23, letter, 500000.0, 7000000.0)
        assert isinstance(exc_info.value, UTMProjectionError)

    @pytest.mark.parametrize("easting,northing,field", [
        (-1.0, 5000000.0, "easting"),
        (1000000.5, 5000000.0, "easting"),
        (float("nan"), 5000000.0, "easting"),
        (500000.0, -0.5, "northing"),
        (500000.0, 10000000.5, "northing"),
        (500000.0, float("inf"), "northing"),
    ])
    def test_grid_values_out_of_range(self, easting, northing, field):
        with pytest.raises(OutOfRangeCoordinateError) as exc_info:
            UtmCoordinate(23, "K", easting, northing)
        assert exc_info.value.field == field

    def test_immutable(self):
        utm = UtmCoordinate(23, "K", 660265.0, 7454564.0)
        with pytest.raises(ValidationError):
            utm.easting = 0.0

    @pytest.mark.parametrize("letter,hemisphere,epsg", [
        ("K", "S", "32723"),
        ("M", "S", "32723"),
        ("N", "N", "32623"),
        ("X", "N", "32623"),
    ])
    def test_hemisphere_and_epsg(self, letter, hemisphere, epsg):
        utm = UtmCoordinate(23, letter, 500000.0, 5000000.0)
        assert utm.hemisphere == hemisphere
        assert utm.is_northern is (hemisphere == "N")
        assert utm.epsg_code == epsg

    def test_central_meridian(self):
        assert UtmCoordinate(23, "K", 500000.0, 5000000.0).central_meridian == -45.0
        assert UtmCoordinate(1, "N", 500000.0, 0.0).central_meridian == -177.0

    def test_zone_property(self):
        assert UtmCoordinate(33, "U", 392273.0, 5819744.0).zone == UtmZone(33, "U")

    def test_str_rounds_to_metres(self):
        utm = UtmCoordinate(23, "K", 660265.4, 7454564.6)
        assert str(utm) == "23K 660265 7454565"

    def test_str_northern(self):
        assert str(UtmCoordinate(33, "U", 392273.0, 5819744.0)) == "33U 392273 5819744"

    def test_to_geodetic_method(self):
        coord = UtmCoordinate(23, "K", 500000.0, 10000000.0).to_geodetic()
        assert math.isclose(coord.latitude, 0.0, abs_tol=1e-9)
        assert math.isclose(coord.longitude, -45.0, abs_tol=1e-9)
