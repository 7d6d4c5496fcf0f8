"""
Load Summation & Safety-Factor Engine

Room loads exclude ventilation air; that enters at the coil through the
bypass factor (see coil_process).
"""

from dataclasses import dataclass

from coolload.domain.calculations.envelope import EnvelopeGains
from coolload.domain.calculations.internal_loads import InternalGains
from coolload.domain.calculations.ventilation import AirLoads
from coolload.domain.models import ProcessFactors


@dataclass(frozen=True)
class RoomLoads:
    sensible_subtotal: float
    latent_subtotal: float
    effective_sensible: float  # ESHT
    effective_latent: float    # ELHT

    @property
    def effective_room_total(self) -> float:
        return self.effective_sensible + self.effective_latent


def apply_safety_factor(subtotal: float, percent: float) -> float:
    return subtotal * (1 + percent / 100.0)


def calculate_room_loads(envelope: EnvelopeGains, internal: InternalGains,
                         air: AirLoads, process: ProcessFactors) -> RoomLoads:
    sensible_subtotal = envelope.total + internal.total + air.sensible_infiltration
    latent_subtotal = air.latent_infiltration + air.latent_people

    return RoomLoads(
        sensible_subtotal=sensible_subtotal,
        latent_subtotal=latent_subtotal,
        effective_sensible=apply_safety_factor(sensible_subtotal, process.safety_factor_sensible),
        effective_latent=apply_safety_factor(latent_subtotal, process.safety_factor_latent),
    )
