"""
Ventilation / Infiltration Load Calculator

Ventilation airflow is governed by the largest of three estimates
(per person, per ft², air changes) - the estimates are alternatives for the
same requirement, not additive demands.
"""

import logging
from dataclasses import dataclass

from coolload.data.infiltration_tables import get_cfm_per_foot
from coolload.domain.models import InfiltrationMethod, InternalLoadInputs, VentilationInputs

logger = logging.getLogger(__name__)

# Standard air: 60 min/hr × 0.075 lb/ft³ × 0.24 BTU/lb·°F
SENSIBLE_AIR_FACTOR = 1.08
# Standard air per grain of moisture difference
LATENT_AIR_FACTOR = 0.68


@dataclass(frozen=True)
class VentilationAirflow:
    cfm_by_people: float
    cfm_by_area: float
    cfm_by_volume: float

    @property
    def governing_cfm(self) -> float:
        return max(self.cfm_by_people, self.cfm_by_area, self.cfm_by_volume)


@dataclass(frozen=True)
class AirLoads:
    """Airflows and the sensible/latent loads they carry (BTU/hr)"""
    ventilation: VentilationAirflow
    infiltration_cfm: float
    sensible_infiltration: float
    sensible_ventilation: float
    latent_infiltration: float
    latent_ventilation: float
    latent_people: float

    @property
    def ventilation_cfm(self) -> float:
        return self.ventilation.governing_cfm


def ventilation_cfm(occupants: float, cfm_per_person: float, area: float,
                    cfm_per_sqft: float, volume: float, air_changes_per_hour: float) -> VentilationAirflow:
    return VentilationAirflow(
        cfm_by_people=occupants * cfm_per_person,
        cfm_by_area=area * cfm_per_sqft,
        cfm_by_volume=volume * air_changes_per_hour / 60.0,
    )


def infiltration_cfm(ventilation: VentilationInputs) -> float:
    """Manual infiltration CFM, or the crack-length table sum over fixtures"""
    if ventilation.infiltration_method is InfiltrationMethod.MANUAL:
        return ventilation.infiltration_cfm
    return sum(
        get_cfm_per_foot(f.fixture_type, ventilation.wind_speed) * f.crack_length_ft * f.quantity
        for f in ventilation.fixtures
    )


def sensible_air_load(cfm: float, delta_db: float) -> float:
    return SENSIBLE_AIR_FACTOR * cfm * delta_db


def latent_air_load(cfm: float, delta_grains: float) -> float:
    return LATENT_AIR_FACTOR * cfm * delta_grains


def calculate_air_loads(ventilation: VentilationInputs, internal: InternalLoadInputs,
                        area: float, volume: float, delta_db: float, delta_grains: float) -> AirLoads:
    """
    Calculate ventilation and infiltration airflow and loads

    Args:
        ventilation: Ventilation and infiltration inputs
        internal: Internal loads (occupancy drives per-person ventilation and people latent)
        area: Floor area (ft²)
        volume: Room volume (ft³)
        delta_db: Outside minus inside dry bulb (°F)
        delta_grains: Outside minus inside humidity ratio (gr/lb)
    """
    airflow = ventilation_cfm(
        internal.occupants, ventilation.cfm_per_person,
        area, ventilation.cfm_per_sqft,
        volume, ventilation.air_changes_per_hour,
    )
    infiltration = infiltration_cfm(ventilation)
    vent = airflow.governing_cfm

    loads = AirLoads(
        ventilation=airflow,
        infiltration_cfm=infiltration,
        sensible_infiltration=sensible_air_load(infiltration, delta_db),
        sensible_ventilation=sensible_air_load(vent, delta_db),
        latent_infiltration=latent_air_load(infiltration, delta_grains),
        latent_ventilation=latent_air_load(vent, delta_grains),
        latent_people=internal.occupants * internal.latent_per_person,
    )

    logger.debug(
        f"Airflow: ventilation={vent:.1f} CFM (people={airflow.cfm_by_people:.1f}, "
        f"area={airflow.cfm_by_area:.1f}, volume={airflow.cfm_by_volume:.1f}), "
        f"infiltration={infiltration:.1f} CFM ({ventilation.infiltration_method.value})"
    )
    return loads
