"""
Equipment selection hand-off

The record an equipment-selection step reads to pick catalog units.
"""

from dataclasses import asdict, dataclass

from coolload.domain.calculations.pipeline import CoolingLoadResult


@dataclass(frozen=True)
class EquipmentSelectionRequest:
    area: float          # sq ft
    tonnage: float       # TR
    total_cfm: float
    sensible_heat: float  # BTU/hr at the coil
    latent_heat: float    # BTU/hr at the coil

    @classmethod
    def from_result(cls, result: CoolingLoadResult) -> "EquipmentSelectionRequest":
        return cls(
            area=result.geometry.area,
            tonnage=result.coil.tons_required,
            total_cfm=result.coil.dehumidified_cfm,
            sensible_heat=result.derived.coil_sensible_load,
            latent_heat=result.derived.coil_latent_load,
        )

    def to_json(self) -> dict:
        return asdict(self)
