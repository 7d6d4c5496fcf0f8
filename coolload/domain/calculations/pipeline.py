"""
Cooling Load Pipeline

Single entry point that runs one room snapshot through every stage:

    conditions → envelope → internal → ventilation/infiltration
               → summation → coil process → derived metrics → warnings

The result is recomputed wholesale from the inputs on every call; nothing
is cached or shared between calls.
"""

import logging
from dataclasses import dataclass
from typing import List

from coolload.domain.calculations.coil_process import CoilProcess, calculate_coil_process
from coolload.domain.calculations.derived_metrics import (
    DerivedMetrics,
    DesignWarning,
    calculate_derived_metrics,
    check_design_warnings,
)
from coolload.domain.calculations.envelope import EnvelopeGains, calculate_envelope_gains
from coolload.domain.calculations.internal_loads import InternalGains, calculate_internal_gains
from coolload.domain.calculations.psychrometrics import ResolvedConditions, resolve_conditions
from coolload.domain.calculations.summation import RoomLoads, calculate_room_loads
from coolload.domain.calculations.ventilation import AirLoads, calculate_air_loads
from coolload.domain.models import CoolingLoadInputs, ResolvedGeometry
from coolload.utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CoolingLoadResult:
    """Everything computed for one room"""
    room_name: str
    conditions: ResolvedConditions
    geometry: ResolvedGeometry
    envelope: EnvelopeGains
    internal: InternalGains
    air: AirLoads
    room: RoomLoads
    coil: CoilProcess
    derived: DerivedMetrics
    warnings: List[DesignWarning]

    @property
    def tons(self) -> float:
        return self.coil.tons_required

    def breakdown(self) -> dict:
        return {
            "glass_solar": self.envelope.glass,
            "walls": self.envelope.walls,
            "roofs": self.envelope.roofs,
            "partitions": self.envelope.partitions,
            "envelope_total": self.envelope.total,
            "people_sensible": self.internal.people_sensible,
            "lighting": self.internal.lighting,
            "equipment": self.internal.equipment,
            "motors": self.internal.motors,
            "internal_total": self.internal.total,
            "sensible_infiltration": self.air.sensible_infiltration,
            "latent_infiltration": self.air.latent_infiltration,
            "latent_people": self.air.latent_people,
            "sensible_ventilation": self.air.sensible_ventilation,
            "latent_ventilation": self.air.latent_ventilation,
            "outside_air_sensible": self.coil.outside_air_sensible,
            "outside_air_latent": self.coil.outside_air_latent,
            "sensible_subtotal": self.room.sensible_subtotal,
            "latent_subtotal": self.room.latent_subtotal,
            "components": [c.to_json() for c in self.envelope.components],
        }

    def to_json(self) -> dict:
        return {
            "room_name": self.room_name,
            "breakdown": self.breakdown(),
            "totals": {
                "esht": self.room.effective_sensible,
                "elht": self.room.effective_latent,
                "erth": self.room.effective_room_total,
                "gth": self.coil.grand_total_heat,
                "tons": self.coil.tons_required,
                "dehumidified_rise": self.coil.dehumidified_rise,
                "dehumidified_cfm": self.coil.dehumidified_cfm,
                "ventilation_cfm": self.air.ventilation_cfm,
                "infiltration_cfm": self.air.infiltration_cfm,
            },
            "derived": self.derived.to_json(),
            "warnings": [w.message for w in self.warnings],
            "conditions": self.conditions.to_json(),
            "geometry": {
                "length": self.geometry.length,
                "width": self.geometry.width,
                "height": self.geometry.height,
                "area": self.geometry.area,
                "volume": self.geometry.volume,
            },
        }


def calculate_cooling_load(inputs: CoolingLoadInputs) -> CoolingLoadResult:
    """
    Calculate the cooling load for one room

    Args:
        inputs: Complete input snapshot

    Returns:
        CoolingLoadResult with breakdown, totals, derived metrics and warnings

    Raises:
        UnknownLookupKeyError: a component references a key missing from the tables
    """
    context = {'room': inputs.room_name or 'unnamed'}
    with log_operation("cooling_load_calculation", context, logger):
        conditions = resolve_conditions(inputs.conditions)
        geometry = inputs.geometry.resolve()
        inside_db = conditions.inside.dry_bulb
        outside_db = conditions.outside.dry_bulb

        envelope = calculate_envelope_gains(inputs.envelope, conditions.delta_db)
        internal = calculate_internal_gains(inputs.internal, geometry.area)
        air = calculate_air_loads(
            inputs.ventilation, inputs.internal,
            geometry.area, geometry.volume,
            conditions.delta_db, conditions.delta_grains,
        )
        room = calculate_room_loads(envelope, internal, air, inputs.process)
        coil = calculate_coil_process(room, air, inputs.process, inside_db)
        derived = calculate_derived_metrics(
            room, coil, inputs.process, air.ventilation_cfm, inside_db, outside_db
        )
        warnings = check_design_warnings(derived, coil, inputs.process)

    logger.info(
        f"Cooling load for {context['room']}: GTH={coil.grand_total_heat:,.0f} BTU/hr, "
        f"{coil.tons_required:.2f} TR, {coil.dehumidified_cfm:,.0f} CFM, ESHF={derived.eshf:.3f}"
    )
    for warning in warnings:
        logger.warning(f"{context['room']}: {warning.message}")

    return CoolingLoadResult(
        room_name=inputs.room_name,
        conditions=conditions,
        geometry=geometry,
        envelope=envelope,
        internal=internal,
        air=air,
        room=room,
        coil=coil,
        derived=derived,
        warnings=warnings,
    )
