"""
Outside-Air / Coil Process Calculator

Ventilation load reaches the room only through the coil's contact fraction
(1 - bypass factor). Dehumidified airflow follows from the apparatus dew
point rise.
"""

from dataclasses import dataclass

from coolload.domain.calculations.summation import RoomLoads
from coolload.domain.calculations.ventilation import AirLoads, SENSIBLE_AIR_FACTOR
from coolload.domain.models import ProcessFactors

BTU_PER_TON = 12000.0


@dataclass(frozen=True)
class CoilProcess:
    outside_air_sensible: float
    outside_air_latent: float
    grand_total_heat: float
    tons_required: float
    dehumidified_rise: float
    dehumidified_cfm: float

    @property
    def outside_air_total(self) -> float:
        return self.outside_air_sensible + self.outside_air_latent


def dehumidified_rise(bypass_factor: float, inside_db: float, adp: float) -> float:
    return (1 - bypass_factor) * max(0.0, inside_db - adp)


def dehumidified_cfm(effective_sensible: float, rise: float) -> float:
    if rise <= 0:
        return 0.0
    return effective_sensible / (SENSIBLE_AIR_FACTOR * rise)


def calculate_coil_process(room: RoomLoads, air: AirLoads, process: ProcessFactors,
                           inside_db: float) -> CoilProcess:
    contact = 1 - process.bypass_factor
    oa_sensible = air.sensible_ventilation * contact
    oa_latent = air.latent_ventilation * contact
    gth = room.effective_room_total + oa_sensible + oa_latent

    rise = dehumidified_rise(process.bypass_factor, inside_db, process.apparatus_dew_point)

    return CoilProcess(
        outside_air_sensible=oa_sensible,
        outside_air_latent=oa_latent,
        grand_total_heat=gth,
        tons_required=gth / BTU_PER_TON,
        dehumidified_rise=rise,
        dehumidified_cfm=dehumidified_cfm(room.effective_sensible, rise),
    )
