"""
Internal Load Aggregator
Occupant, lighting, equipment and motor sensible gains (BTU/hr)
"""

from dataclasses import dataclass

from coolload.domain.models import InternalLoadInputs

BTU_PER_WATT = 3.41
BTU_PER_HP = 2545.0


@dataclass(frozen=True)
class InternalGains:
    people_sensible: float = 0.0
    lighting: float = 0.0
    equipment: float = 0.0
    motors: float = 0.0

    @property
    def total(self) -> float:
        """Internal sensible total"""
        return self.people_sensible + self.lighting + self.equipment + self.motors


def calculate_internal_gains(internal: InternalLoadInputs, area: float) -> InternalGains:
    """
    Sensible internal gains for a room of the given floor area (ft²).

    Occupant latent heat is not part of this total; it is applied with
    the other latent loads.
    """
    return InternalGains(
        people_sensible=internal.occupants * internal.sensible_per_person,
        lighting=internal.lighting_w_per_sqft * area * BTU_PER_WATT,
        equipment=internal.equipment_w_per_sqft * area * BTU_PER_WATT,
        motors=internal.motor_bhp * BTU_PER_HP + internal.motor_hp * BTU_PER_HP,
    )
