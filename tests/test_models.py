"""
Tests for input models: geometry modes and range validation
"""

import pytest

from coolload.domain.models import (
    GeometryMode,
    InfiltrationFixture,
    InternalLoadInputs,
    SpaceGeometry,
    validate_pressure_kpa,
)
from coolload.errors import UnknownLookupKeyError, ValidationError


class TestSpaceGeometry:

    def test_dimensions_mode(self):
        geometry = SpaceGeometry.from_dimensions(25, 20, 10).resolve()
        assert geometry.area == 500
        assert geometry.volume == 5000

    def test_area_mode(self):
        geometry = SpaceGeometry.from_area(500, 12).resolve()
        assert geometry.volume == 6000
        assert geometry.length == 0

    def test_volume_mode(self):
        assert SpaceGeometry.from_volume(6000, 12).resolve().area == 500

    def test_volume_mode_without_height(self):
        geometry = SpaceGeometry.from_volume(6000, 0).resolve()
        assert geometry.area == 0
        assert geometry.volume == 6000

    def test_mode_accepts_string(self):
        assert SpaceGeometry(mode="area", area=100, height=10).mode is GeometryMode.AREA

    def test_derived_field_in_same_snapshot_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            SpaceGeometry(GeometryMode.DIMENSIONS, length=10, width=10, height=10, area=100)
        assert exc_info.value.details['conflicting_fields'] == ['area']

    def test_negative_dimension_rejected(self):
        with pytest.raises(ValidationError):
            SpaceGeometry.from_dimensions(-1, 10, 10)


class TestRangeValidation:

    def test_negative_occupants_rejected(self):
        with pytest.raises(ValidationError):
            InternalLoadInputs(occupants=-1)

    def test_unknown_fixture_rejected(self):
        with pytest.raises(UnknownLookupKeyError):
            InfiltrationFixture("Revolving Door", 10)


class TestPressure:

    @pytest.mark.parametrize("pressure", [101.325, 84.0, 50, 120])
    def test_kpa_accepted(self, pressure):
        assert validate_pressure_kpa(pressure) == pressure

    @pytest.mark.parametrize("pressure", [1013.25, 14.696, 0, -5])
    def test_other_units_rejected(self, pressure):
        with pytest.raises(ValidationError):
            validate_pressure_kpa(pressure)
