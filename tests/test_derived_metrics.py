"""
Tests for derived metrics and design warnings
"""

import pytest

from coolload.domain.calculations.coil_process import CoilProcess
from coolload.domain.calculations.derived_metrics import (
    WarningSeverity,
    calculate_derived_metrics,
    check_design_warnings,
)
from coolload.domain.calculations.summation import RoomLoads
from coolload.domain.models import ProcessFactors


def make_room(sensible=40000.0, latent=8000.0):
    return RoomLoads(
        sensible_subtotal=sensible,
        latent_subtotal=latent,
        effective_sensible=sensible,
        effective_latent=latent,
    )


def make_coil(room, cfm, rise, oa_sensible=0.0, oa_latent=0.0):
    gth = room.effective_room_total + oa_sensible + oa_latent
    return CoilProcess(
        outside_air_sensible=oa_sensible,
        outside_air_latent=oa_latent,
        grand_total_heat=gth,
        tons_required=gth / 12000,
        dehumidified_rise=rise,
        dehumidified_cfm=cfm,
    )


def codes(warnings):
    return {w.code for w in warnings}


class TestDerivedMetrics:

    def test_ratios(self):
        room = make_room(40000, 10000)
        coil = make_coil(room, cfm=2000, rise=18.52, oa_sensible=3000, oa_latent=2000)
        process = ProcessFactors(bypass_factor=0.1, apparatus_dew_point=52)
        metrics = calculate_derived_metrics(room, coil, process, ventilation_cfm=400,
                                            inside_db=75, outside_db=100)

        assert metrics.eshf == pytest.approx(0.8)
        assert metrics.room_shr == pytest.approx(0.8)
        assert metrics.grand_sensible == 43000
        assert metrics.grand_latent == 12000
        assert metrics.grand_shr == pytest.approx(43000 / 55000)
        assert metrics.coil_total_load == 55000
        assert metrics.supply_air_temp == pytest.approx(75 - 40000 / (1.08 * 2000))
        assert metrics.coil_leaving_air_temp == pytest.approx(52 + 0.1 * 23)
        assert metrics.contact_factor == pytest.approx(0.9)
        assert metrics.return_air_cfm == 1600
        assert metrics.return_air_percent == pytest.approx(80)
        assert metrics.outside_air_percent == pytest.approx(20)
        assert metrics.cfm_per_ton == pytest.approx(2000 / (55000 / 12000))
        assert metrics.btu_per_cfm == pytest.approx(27.5)
        assert metrics.mixed_air_temp == pytest.approx((1600 * 75 + 400 * 100) / 2000)

    def test_zero_airflow_gives_zero_sentinels(self):
        room = make_room()
        coil = make_coil(room, cfm=0, rise=0)
        metrics = calculate_derived_metrics(room, coil, ProcessFactors(apparatus_dew_point=75),
                                            ventilation_cfm=100, inside_db=75, outside_db=100)
        assert metrics.supply_air_temp == 0
        assert metrics.cfm_per_ton == 0
        assert metrics.btu_per_cfm == 0
        assert metrics.outside_air_percent == 0
        assert metrics.mixed_air_temp == 0
        assert metrics.return_air_cfm == 0

    def test_zero_loads_give_zero_ratios(self):
        room = make_room(0, 0)
        coil = make_coil(room, cfm=0, rise=0)
        metrics = calculate_derived_metrics(room, coil, ProcessFactors(), 0, 0, 0)
        assert metrics.eshf == 0
        assert metrics.room_shr == 0
        assert metrics.grand_shr == 0


class TestDesignWarnings:

    def check(self, room, coil, process, ventilation_cfm=400):
        metrics = calculate_derived_metrics(room, coil, process, ventilation_cfm,
                                            inside_db=75, outside_db=100)
        return check_design_warnings(metrics, coil, process)

    def test_no_warnings_for_zero_loads(self):
        room = make_room(0, 0)
        coil = make_coil(room, cfm=0, rise=0)
        assert self.check(room, coil, ProcessFactors(), ventilation_cfm=0) == []

    def test_well_sized_system_has_no_warnings(self):
        # ESHT 40000 at 20°F rise: 1852 CFM, 55°F supply, ~400 CFM/ton
        room = make_room(40000, 8000)
        cfm = 40000 / (1.08 * 20)
        coil = make_coil(room, cfm=cfm, rise=20, oa_sensible=5000, oa_latent=2500)
        process = ProcessFactors(bypass_factor=0.1, apparatus_dew_point=53)
        assert self.check(room, coil, process) == []

    def test_low_supply_air_and_high_cfm_per_ton(self):
        room = make_room(40000, 8000)
        cfm = 40000 / (1.08 * 30)
        coil = make_coil(room, cfm=cfm, rise=30)
        found = codes(self.check(room, coil, ProcessFactors()))
        assert "supply_air_low" in found
        assert "cfm_per_ton_low" in found

    def test_high_supply_air(self):
        room = make_room(40000, 8000)
        cfm = 40000 / (1.08 * 10)
        coil = make_coil(room, cfm=cfm, rise=10)
        found = codes(self.check(room, coil, ProcessFactors()))
        assert "supply_air_high" in found
        assert "cfm_per_ton_high" in found

    @pytest.mark.parametrize("latent,code", [(30000, "eshf_low"), (1000, "eshf_high")])
    def test_eshf_bounds(self, latent, code):
        room = make_room(40000, latent)
        coil = make_coil(room, cfm=0, rise=0)
        warnings = self.check(room, coil, ProcessFactors())
        assert code in codes(warnings)
        assert all(w.severity is WarningSeverity.INFO for w in warnings if w.code == code)

    def test_low_outside_air(self):
        room = make_room(40000, 8000)
        cfm = 40000 / (1.08 * 20)
        coil = make_coil(room, cfm=cfm, rise=20)
        assert "outside_air_low" in codes(self.check(room, coil, ProcessFactors(), ventilation_cfm=100))

    @pytest.mark.parametrize("bypass,code", [(0.01, "coil_lat_close_to_adp"), (0.5, "coil_lat_far_from_adp")])
    def test_coil_approach(self, bypass, code):
        room = make_room(40000, 8000)
        coil = make_coil(room, cfm=0, rise=0)
        process = ProcessFactors(bypass_factor=bypass, apparatus_dew_point=50)
        assert code in codes(self.check(room, coil, process))

    def test_coil_approach_skipped_without_adp(self):
        room = make_room(40000, 8000)
        coil = make_coil(room, cfm=0, rise=0)
        found = codes(self.check(room, coil, ProcessFactors(bypass_factor=0.5)))
        assert not found & {"coil_lat_close_to_adp", "coil_lat_far_from_adp"}

    def test_temperature_rise_mismatch(self):
        room = make_room(40000, 8000)
        coil = make_coil(room, cfm=40000 / (1.08 * 20), rise=15)
        assert "temperature_rise_mismatch" in codes(self.check(room, coil, ProcessFactors()))

    def test_warning_str_is_message(self):
        room = make_room(40000, 1000)
        coil = make_coil(room, cfm=0, rise=0)
        warning = self.check(room, coil, ProcessFactors())[0]
        assert str(warning) == warning.message
