"""
Tests for the request schemas and the HTTP API
"""

import pytest
from fastapi.testclient import TestClient

from coolload import calculate_cooling_load, config
from coolload.api.main import app
from coolload.api.schemas import (
    ConditionsSchema,
    CoolingLoadRequest,
    GeometrySchema,
    InternalLoadSchema,
    ProcessSchema,
)
from coolload.domain.models import GlassType, InfiltrationMethod, ShadingType, WeightClass
from coolload.errors import UnknownLookupKeyError, ValidationError

BASE = "/api/v1/cooling-load"


@pytest.fixture
def client():
    return TestClient(app)


class TestFormCoercion:

    def test_blank_and_invalid_numbers_become_zero(self):
        internal = InternalLoadSchema(occupants="", lighting_w_per_sqft="abc", motor_hp=None,
                                      equipment_w_per_sqft=" 1.5 ")
        assert internal.occupants == 0
        assert internal.lighting_w_per_sqft == 0
        assert internal.motor_hp == 0
        assert internal.equipment_w_per_sqft == 1.5

    def test_blank_keys_use_form_defaults(self, office_form):
        inputs = CoolingLoadRequest(**office_form).to_inputs()
        glass = inputs.envelope.glass[0]
        assert glass.glass_type is GlassType.ORDINARY
        assert glass.shading is ShadingType.NO_SHADE
        assert inputs.envelope.roofs[0].weight is WeightClass.MEDIUM
        assert inputs.ventilation.infiltration_method is InfiltrationMethod.MANUAL
        assert inputs.conditions.pressure_kpa == pytest.approx(101.325)

    def test_form_matches_engine_snapshot(self, office_form, office_room):
        inputs = CoolingLoadRequest(**office_form).to_inputs()
        assert inputs == office_room
        assert calculate_cooling_load(inputs).to_json() == calculate_cooling_load(office_room).to_json()

    def test_geometry_takes_only_selected_mode(self):
        geometry = GeometrySchema(mode="Area", area="400", height="10", length="20", width="20").to_geometry()
        assert geometry.resolve().volume == 4000

    @pytest.mark.parametrize("fields,area,volume", [
        ({"area": "500", "height": "10"}, 500, 5000),
        ({"volume": "6000", "height": "12"}, 500, 6000),
        ({"length": "25", "width": "20", "height": "10"}, 500, 5000),
    ])
    def test_geometry_mode_inferred_from_filled_fields(self, fields, area, volume):
        geometry = GeometrySchema(**fields).to_geometry().resolve()
        assert geometry.area == area
        assert geometry.volume == volume

    def test_geometry_fields_for_two_modes_need_a_mode(self):
        with pytest.raises(ValidationError) as exc_info:
            GeometrySchema(length="25", width="20", area="500").to_geometry()
        assert exc_info.value.details["modes"] == ["dimensions", "area"]

    def test_blank_process_factors_are_zero(self):
        process = ProcessSchema(bypass_factor="", safety_factor_sensible="n/a", safety_factor_latent=" ")
        assert process.bypass_factor == 0
        assert process.safety_factor_sensible == 0
        assert process.safety_factor_latent == 0

    def test_omitted_process_factors_use_configured_defaults(self):
        assert ProcessSchema().bypass_factor == config.DEFAULT_BYPASS_FACTOR

    def test_blank_pressure_keeps_standard_atmosphere(self):
        assert ConditionsSchema(pressure_kpa="").pressure_kpa == config.DEFAULT_PRESSURE_KPA

    def test_unknown_geometry_mode(self):
        with pytest.raises(ValidationError):
            GeometrySchema(mode="perimeter").to_geometry()

    def test_crack_length_method_aliases(self, office_form):
        office_form["ventilation"]["infiltration_method"] = "Crack Length"
        inputs = CoolingLoadRequest(**office_form).to_inputs()
        assert inputs.ventilation.infiltration_method is InfiltrationMethod.CRACK_LENGTH

    def test_unknown_orientation(self, office_form):
        office_form["envelope"]["glass"][0]["orientation"] = "Up"
        with pytest.raises(UnknownLookupKeyError):
            CoolingLoadRequest(**office_form).to_inputs()


class TestCalculateEndpoint:

    def test_calculate(self, client, office_form, office_room):
        response = client.post(f"{BASE}/calculate", json=office_form)
        assert response.status_code == 200

        data = response.json()
        expected = calculate_cooling_load(office_room)
        assert data["totals"]["gth"] == pytest.approx(expected.coil.grand_total_heat)
        assert data["totals"]["tons"] == pytest.approx(expected.tons)
        assert data["warnings"] == [w.message for w in expected.warnings]
        assert data["equipment"]["area"] == 500

    def test_blank_bypass_factor_is_zero(self, client, office_form):
        office_form["process"]["bypass_factor"] = ""
        response = client.post(f"{BASE}/calculate", json=office_form)
        assert response.status_code == 200
        assert response.json()["derived"]["contact_factor"] == 1.0

    def test_area_only_geometry(self, client, office_form, office_room):
        office_form["geometry"] = {"area": "500", "height": "10"}
        response = client.post(f"{BASE}/calculate", json=office_form)
        assert response.status_code == 200
        data = response.json()
        assert data["geometry"]["area"] == 500
        assert data["geometry"]["volume"] == 5000
        assert data["totals"]["gth"] == pytest.approx(calculate_cooling_load(office_room).coil.grand_total_heat)

    def test_geometry_for_two_modes_is_422(self, client, office_form):
        office_form["geometry"] = {"length": "25", "width": "20", "volume": "5000"}
        response = client.post(f"{BASE}/calculate", json=office_form)
        assert response.status_code == 422

    def test_unknown_key_is_422(self, client, office_form):
        office_form["envelope"]["walls"][0]["wall_type"] = "Straw Bale"
        response = client.post(f"{BASE}/calculate", json=office_form)
        assert response.status_code == 422
        error = response.json()["error"]
        assert error["type"] == "UnknownLookupKeyError"
        assert error["details"]["table"] == "WallType"

    def test_hpa_pressure_is_422(self, client, office_form):
        office_form["conditions"]["pressure_kpa"] = "1013.25"
        response = client.post(f"{BASE}/calculate", json=office_form)
        assert response.status_code == 422
        assert response.json()["error"]["type"] == "ValidationError"

    def test_empty_form_calculates_zero(self, client):
        response = client.post(f"{BASE}/calculate", json={})
        assert response.status_code == 200
        assert response.json()["totals"]["gth"] == 0
        assert response.json()["warnings"] == []


class TestOtherEndpoints:

    def test_psychrometrics(self, client):
        response = client.post(f"{BASE}/psychrometrics", json={"dry_bulb": "104", "relative_humidity": "40"})
        assert response.status_code == 200
        assert response.json()["grains_per_lb"] == pytest.approx(144.3, abs=0.1)

    def test_psychrometrics_needs_humidity(self, client):
        response = client.post(f"{BASE}/psychrometrics", json={"dry_bulb": "104"})
        assert response.status_code == 422

    def test_summary(self, client):
        payload = {
            "floors": [
                {"name": "G", "floor_type": "office",
                 "rooms": [{"name": "A", "area": "100", "quantity": "2", "sensible_heat": "6000"}]},
            ]
        }
        response = client.post(f"{BASE}/summary", json=payload)
        assert response.status_code == 200
        data = response.json()
        assert data["total_heat"] == 10800
        assert data["adjusted_load"] == round(10800 * 0.85)

    def test_tables(self, client):
        data = client.get(f"{BASE}/tables").json()
        assert "North East" in data["orientations"]
        assert "6 inch Brick Wall" in data["wall_types"]
        assert data["weights"] == ["30", "60", "100"]
        assert "Delhi" in data["cities"]
        assert "Horizontal" not in data["wall_orientations"]
        assert len(data["wall_orientations"]) == 8
        assert "Ordinary - Poorly Fitted (No Strip)" in data["door_fixture_types"]
        assert set(data["door_fixture_types"]) < set(data["fixture_types"])

    def test_climate(self, client):
        response = client.get(f"{BASE}/climate/delhi", params={"season": "winter"})
        assert response.status_code == 200
        assert response.json()["city"] == "Delhi"

    def test_unknown_city_is_422(self, client):
        assert client.get(f"{BASE}/climate/atlantis").status_code == 422

    def test_indoor_conditions(self, client):
        response = client.get(f"{BASE}/indoor-conditions/data_center")
        assert response.status_code == 200
        assert response.json()["application"] == "DATA_CENTER"

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
