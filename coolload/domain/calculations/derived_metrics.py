"""
Derived Metrics & Design Validation

Ratios and air-side figures derived from the room loads and coil process,
plus the design sanity checks an engineer reviews before selecting
equipment. Every ratio is guarded: a zero denominator yields 0, and a
check whose metric is 0 stays silent.
"""

import logging
from dataclasses import asdict, dataclass
from enum import Enum
from typing import List

from coolload.domain.calculations.coil_process import CoilProcess
from coolload.domain.calculations.summation import RoomLoads
from coolload.domain.calculations.ventilation import SENSIBLE_AIR_FACTOR
from coolload.domain.models import ProcessFactors

logger = logging.getLogger(__name__)

SUPPLY_AIR_MIN_F = 50.0
SUPPLY_AIR_MAX_F = 60.0
CFM_PER_TON_MIN = 350.0
CFM_PER_TON_MAX = 450.0
ESHF_MIN = 0.65
ESHF_MAX = 0.95
OUTSIDE_AIR_MIN_PERCENT = 15.0
COIL_LAT_MIN_APPROACH_F = 1.0
COIL_LAT_MAX_APPROACH_F = 6.0
RISE_TOLERANCE_F = 1.0


class WarningSeverity(Enum):
    """Design warning severity levels"""
    INFO = "info"
    WARNING = "warning"


@dataclass(frozen=True)
class DesignWarning:
    """A non-fatal design check that failed"""
    code: str
    severity: WarningSeverity
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class DerivedMetrics:
    eshf: float
    room_shr: float
    grand_sensible: float
    grand_latent: float
    grand_shr: float
    coil_sensible_load: float
    coil_latent_load: float
    coil_total_load: float
    supply_air_temp: float
    coil_leaving_air_temp: float
    contact_factor: float
    return_air_cfm: float
    return_air_percent: float
    outside_air_percent: float
    actual_temp_rise: float
    cfm_per_ton: float
    btu_per_cfm: float
    mixed_air_temp: float

    def to_json(self) -> dict:
        return asdict(self)


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator > 0 else 0.0


def calculate_derived_metrics(room: RoomLoads, coil: CoilProcess, process: ProcessFactors,
                              ventilation_cfm: float, inside_db: float,
                              outside_db: float) -> DerivedMetrics:
    """
    Derive ratios and air-side figures for one room

    Args:
        room: Room loads after safety factors
        coil: Coil process (GTH, tonnage, dehumidified CFM)
        process: Bypass factor and apparatus dew point
        ventilation_cfm: Governing ventilation airflow (CFM)
        inside_db: Inside dry bulb (°F)
        outside_db: Outside dry bulb (°F)
    """
    cfm = coil.dehumidified_cfm
    esht = room.effective_sensible
    gth = coil.grand_total_heat
    adp = process.apparatus_dew_point
    bf = process.bypass_factor

    grand_sensible = esht + coil.outside_air_sensible
    grand_latent = room.effective_latent + coil.outside_air_latent
    return_air_cfm = max(0.0, cfm - ventilation_cfm)
    actual_rise = _ratio(esht, SENSIBLE_AIR_FACTOR * cfm)

    return DerivedMetrics(
        eshf=_ratio(esht, room.effective_room_total),
        room_shr=_ratio(room.sensible_subtotal, room.sensible_subtotal + room.latent_subtotal),
        grand_sensible=grand_sensible,
        grand_latent=grand_latent,
        grand_shr=_ratio(grand_sensible, gth),
        coil_sensible_load=grand_sensible,
        coil_latent_load=grand_latent,
        coil_total_load=gth,
        supply_air_temp=inside_db - actual_rise if cfm > 0 else 0.0,
        coil_leaving_air_temp=adp + bf * (inside_db - adp),
        contact_factor=process.contact_factor,
        return_air_cfm=return_air_cfm,
        return_air_percent=_ratio(return_air_cfm, cfm) * 100,
        outside_air_percent=_ratio(ventilation_cfm, cfm) * 100,
        actual_temp_rise=actual_rise,
        cfm_per_ton=_ratio(cfm, coil.tons_required),
        btu_per_cfm=_ratio(gth, cfm),
        mixed_air_temp=_ratio(return_air_cfm * inside_db + ventilation_cfm * outside_db, cfm),
    )


def check_design_warnings(metrics: DerivedMetrics, coil: CoilProcess,
                          process: ProcessFactors) -> List[DesignWarning]:
    """
    Run the design checks. Each check is independent and none blocks the
    calculation.
    """
    warnings: List[DesignWarning] = []

    def warn(code: str, severity: WarningSeverity, message: str) -> None:
        warnings.append(DesignWarning(code=code, severity=severity, message=message))

    if 0 < metrics.supply_air_temp < SUPPLY_AIR_MIN_F:
        warn("supply_air_low", WarningSeverity.WARNING,
             "Supply air temp < 50°F - Risk of overcooling and humidity issues")
    if metrics.supply_air_temp > SUPPLY_AIR_MAX_F:
        warn("supply_air_high", WarningSeverity.WARNING,
             "Supply air temp > 60°F - May be insufficient cooling capacity")

    if 0 < metrics.cfm_per_ton < CFM_PER_TON_MIN:
        warn("cfm_per_ton_low", WarningSeverity.WARNING,
             "CFM/Ton < 350 - High latent load or undersized airflow")
    if metrics.cfm_per_ton > CFM_PER_TON_MAX:
        warn("cfm_per_ton_high", WarningSeverity.WARNING,
             "CFM/Ton > 450 - May have comfort and air distribution issues")

    if 0 < metrics.eshf < ESHF_MIN:
        warn("eshf_low", WarningSeverity.INFO,
             "Low ESHF (<0.65) - High latent load application")
    if metrics.eshf > ESHF_MAX:
        warn("eshf_high", WarningSeverity.INFO,
             "High ESHF (>0.95) - Very low latent load")

    if 0 < metrics.outside_air_percent < OUTSIDE_AIR_MIN_PERCENT:
        warn("outside_air_low", WarningSeverity.WARNING,
             "Outside Air < 15% - May not meet ASHRAE 62.1 ventilation requirements")

    # Coil approach is only meaningful once an ADP has been selected
    if process.apparatus_dew_point > 0:
        approach = metrics.coil_leaving_air_temp - process.apparatus_dew_point
        if approach < COIL_LAT_MIN_APPROACH_F:
            warn("coil_lat_close_to_adp", WarningSeverity.WARNING,
                 "Coil LAT too close to ADP - Verify bypass factor")
        if approach > COIL_LAT_MAX_APPROACH_F:
            warn("coil_lat_far_from_adp", WarningSeverity.WARNING,
                 "Coil LAT too far from ADP - Check bypass factor setting")

    if coil.dehumidified_rise > 0 and coil.dehumidified_cfm > 0 and \
            abs(metrics.actual_temp_rise - coil.dehumidified_rise) > RISE_TOLERANCE_F:
        warn("temperature_rise_mismatch", WarningSeverity.WARNING,
             "Temperature rise mismatch - Verify calculations")

    return warnings
