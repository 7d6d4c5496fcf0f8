"""
Tests for lookup keys and reference tables
"""

import pytest

from coolload.data.climate import (
    INDIAN_CLIMATE_DATA,
    get_climate_data,
    get_standard_indoor_conditions,
)
from coolload.data.construction import (
    ROOF_U_FACTORS,
    WALL_U_FACTORS,
    get_roof_etd,
    get_wall_etd,
)
from coolload.data.infiltration_tables import CFM_PER_FOOT_OF_CRACK, get_cfm_per_foot
from coolload.data.solar_factors import (
    GLASS_TYPE_FACTORS,
    SHADING_FACTORS,
    get_glass_factor,
    get_shading_factor,
    get_solar_gain_factor,
)
from coolload.domain.models import (
    COMPASS_ORIENTATIONS,
    FixtureType,
    GlassType,
    Orientation,
    RoofType,
    ShadingType,
    SunExposure,
    WallType,
    WeightClass,
    WindSpeed,
)
from coolload.errors import UnknownLookupKeyError, ValidationError


class TestLookupKeyParsing:

    @pytest.mark.parametrize("value,expected", [
        ("N", Orientation.N),
        ("north east", Orientation.NE),
        ("NorthEast", Orientation.NE),
        ("horizontal", Orientation.HORIZONTAL),
        (Orientation.W, Orientation.W),
    ])
    def test_orientation_parse(self, value, expected):
        assert Orientation.parse(value) is expected

    @pytest.mark.parametrize("value", [60, 60.0, "60", "MEDIUM"])
    def test_weight_class_parse(self, value):
        assert WeightClass.parse(value) is WeightClass.MEDIUM

    def test_fixture_parses_saved_table_path(self):
        assert FixtureType.parse("doubleHung.woodSash.averageWindow") is FixtureType.DH_AVERAGE

    def test_fixture_parses_label(self):
        assert FixtureType.parse('Factory Door (18" crack)') is FixtureType.FACTORY_DOOR

    @pytest.mark.parametrize("enum_cls,value", [
        (Orientation, "Up"),
        (GlassType, "Stained Glass"),
        (WeightClass, 45),
        (WindSpeed, "gale"),
        (Orientation, None),
    ])
    def test_unknown_key_raises(self, enum_cls, value):
        with pytest.raises(UnknownLookupKeyError) as exc_info:
            enum_cls.parse(value)
        assert exc_info.value.table == enum_cls.__name__
        assert exc_info.value.key == value

    def test_unknown_key_error_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            ShadingType.parse("Curtain")

    def test_keys_are_labels(self):
        assert "North East" in Orientation.keys()
        assert WeightClass.keys() == ["30", "60", "100"]


class TestTableCompleteness:

    @pytest.mark.parametrize("orientation", list(Orientation))
    def test_every_orientation_has_solar_gain(self, orientation):
        assert get_solar_gain_factor(orientation) > 0

    @pytest.mark.parametrize("weight", list(WeightClass))
    @pytest.mark.parametrize("orientation", COMPASS_ORIENTATIONS)
    def test_every_wall_orientation_and_weight_has_etd(self, orientation, weight):
        assert get_wall_etd(orientation, weight) > 0

    @pytest.mark.parametrize("weight", list(WeightClass))
    @pytest.mark.parametrize("exposure", list(SunExposure))
    def test_every_roof_exposure_and_weight_has_etd(self, exposure, weight):
        assert get_roof_etd(exposure, weight) > 0

    def test_construction_tables_cover_every_type(self):
        assert set(WALL_U_FACTORS) == set(WallType)
        assert set(ROOF_U_FACTORS) == set(RoofType)
        assert set(GLASS_TYPE_FACTORS) == set(GlassType)
        assert set(SHADING_FACTORS) == set(ShadingType)
        assert set(CFM_PER_FOOT_OF_CRACK) == set(FixtureType)

    def test_horizontal_wall_etd_is_unknown(self):
        with pytest.raises(UnknownLookupKeyError):
            get_wall_etd(Orientation.HORIZONTAL)

    def test_reference_values(self):
        assert get_solar_gain_factor("E") == 75
        assert get_glass_factor(GlassType.DOUBLE_PANE_ORDINARY) == 0.90
        assert get_shading_factor("No Shade") == 1.0
        assert get_wall_etd("W", 60) == 30
        assert get_roof_etd("Exposed to Sun", 30) == 45
        assert get_roof_etd("Shaded", 100) == 10


class TestCrackInfiltration:

    def test_default_wind_speed_is_15_mph(self):
        assert get_cfm_per_foot(FixtureType.DH_AVERAGE) == 0.65

    @pytest.mark.parametrize("wind,expected", [(5, 0.12), (30, 1.73)])
    def test_wind_speed_column(self, wind, expected):
        assert get_cfm_per_foot(FixtureType.DH_AVERAGE, wind) == expected

    def test_doors_are_flagged(self):
        assert FixtureType.DOOR_POORLY_FITTED.is_door
        assert not FixtureType.CASEMENT_RESIDENTIAL.is_door


class TestClimateData:

    @pytest.mark.parametrize("city", list(INDIAN_CLIMATE_DATA))
    def test_summer_design_state(self, city):
        data = get_climate_data(city)
        assert data["city"] == city
        assert data["season"] == "summer"
        assert 0 < data["relative_humidity"] <= 100
        assert data["grains_per_lb"] > 0

    def test_lookup_is_case_insensitive(self):
        assert get_climate_data("mumbai", "Monsoon")["city"] == "Mumbai"

    def test_unknown_city(self):
        with pytest.raises(UnknownLookupKeyError):
            get_climate_data("Atlantis")

    def test_unknown_season(self):
        with pytest.raises(UnknownLookupKeyError):
            get_climate_data("Delhi", "autumn")

    def test_unknown_indoor_application(self):
        with pytest.raises(UnknownLookupKeyError):
            get_standard_indoor_conditions("spaceship")
