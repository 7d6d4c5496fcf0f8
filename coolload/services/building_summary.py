"""
Floor and Building Load Summary

Aggregates per-room results into floor totals and building totals.
Not every room peaks at once, so floor and building sums are reduced by
diversity factors.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from coolload import config
from coolload.domain.calculations.coil_process import BTU_PER_TON
from coolload.domain.calculations.pipeline import CoolingLoadResult
from coolload.utils.logging_utils import timed_operation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoomLoadRecord:
    """One room line on a floor; loads are per room, multiplied by quantity"""
    name: str
    area: float
    quantity: int = 1
    sensible_heat: float = 0.0  # BTU/hr
    latent_heat: float = 0.0    # BTU/hr
    cfm: float = 0.0
    calculated: bool = True

    @classmethod
    def from_result(cls, result: CoolingLoadResult, quantity: int = 1) -> "RoomLoadRecord":
        return cls(
            name=result.room_name,
            area=result.geometry.area,
            quantity=quantity,
            sensible_heat=result.derived.grand_sensible,
            latent_heat=result.derived.grand_latent,
            cfm=result.coil.dehumidified_cfm,
        )


@dataclass(frozen=True)
class FloorProgress:
    total_rooms: int
    calculated_rooms: int

    @property
    def percentage(self) -> int:
        if not self.total_rooms:
            return 0
        return round(self.calculated_rooms / self.total_rooms * 100)


@dataclass(frozen=True)
class FloorTotals:
    floor_name: str
    floor_type: str
    sensible_heat: float
    latent_heat: float
    total_cfm: float
    total_area: float
    diversity_factor: float
    progress: FloorProgress

    @property
    def total_heat(self) -> float:
        return self.sensible_heat + self.latent_heat

    @property
    def tonnage(self) -> float:
        return self.total_heat / BTU_PER_TON

    def to_json(self) -> dict:
        return {
            "floor_name": self.floor_name,
            "floor_type": self.floor_type,
            "sensible_heat": round(self.sensible_heat),
            "latent_heat": round(self.latent_heat),
            "total_heat": round(self.total_heat),
            "total_cfm": round(self.total_cfm),
            "total_area": round(self.total_area),
            "diversity_factor": self.diversity_factor,
            "tonnage": round(self.tonnage, 2),
            "progress": {
                "total_rooms": self.progress.total_rooms,
                "calculated_rooms": self.progress.calculated_rooms,
                "percentage": self.progress.percentage,
            },
        }


@dataclass(frozen=True)
class BuildingTotals:
    sensible_heat: float
    latent_heat: float
    total_cfm: float
    total_area: float
    diversity_factor: float
    floors: List[FloorTotals] = field(default_factory=list)

    @property
    def total_heat(self) -> float:
        return self.sensible_heat + self.latent_heat

    @property
    def adjusted_load(self) -> float:
        return self.total_heat * self.diversity_factor

    @property
    def tonnage(self) -> float:
        return self.adjusted_load / BTU_PER_TON

    def to_json(self) -> dict:
        return {
            "sensible_heat": round(self.sensible_heat),
            "latent_heat": round(self.latent_heat),
            "total_heat": round(self.total_heat),
            "total_cfm": round(self.total_cfm),
            "total_area": round(self.total_area),
            "diversity_factor": self.diversity_factor,
            "adjusted_load": round(self.adjusted_load),
            "tonnage": round(self.tonnage, 2),
            "floors": [f.to_json() for f in self.floors],
        }


class FloorDiversityCalculator:
    """
    Floor diversity by occupancy type. Larger floors get a lower factor
    once the room count passes the type's threshold.
    """

    # floor type: (room count threshold, factor above threshold, factor at or below)
    FLOOR_DIVERSITY = {
        'office': (10, 0.85, 0.90),
        'retail': (15, 0.80, 0.85),
        'hospital': (20, 0.90, 0.95),
        'hotel': (25, 0.75, 0.80),
        'school': (15, 0.85, 0.90),
        'apartment': (20, 0.70, 0.75),
    }
    DEFAULT_FLOOR_TYPE = 'office'

    @classmethod
    def floor_type_key(cls, floor_type: Optional[str]) -> str:
        """Match free-text floor types ("Office Floor", "Retail - Ground") to a known type"""
        text = (floor_type or '').lower()
        for key in cls.FLOOR_DIVERSITY:
            if key in text:
                return key
        return cls.DEFAULT_FLOOR_TYPE

    @classmethod
    def get_factor(cls, floor_type: Optional[str], room_count: int) -> float:
        threshold, large, small = cls.FLOOR_DIVERSITY[cls.floor_type_key(floor_type)]
        return large if room_count > threshold else small


def get_floor_diversity_factor(floor_type: Optional[str], room_count: int) -> float:
    return FloorDiversityCalculator.get_factor(floor_type, room_count)


def calculate_floor_totals(floor_name: str, floor_type: str,
                           rooms: Iterable[RoomLoadRecord]) -> FloorTotals:
    """
    Sum a floor's rooms and apply the floor diversity factor

    Rooms not yet calculated count toward area and room count only.
    """
    rooms = list(rooms)
    sensible = latent = cfm = area = 0.0
    calculated = 0

    for room in rooms:
        if room.calculated:
            sensible += room.sensible_heat * room.quantity
            latent += room.latent_heat * room.quantity
            cfm += room.cfm * room.quantity
            calculated += 1
        area += room.area * room.quantity

    factor = get_floor_diversity_factor(floor_type, len(rooms))
    totals = FloorTotals(
        floor_name=floor_name,
        floor_type=FloorDiversityCalculator.floor_type_key(floor_type),
        sensible_heat=sensible * factor,
        latent_heat=latent * factor,
        total_cfm=cfm * factor,
        total_area=area,
        diversity_factor=factor,
        progress=FloorProgress(total_rooms=len(rooms), calculated_rooms=calculated),
    )

    logger.debug(
        f"Floor {floor_name}: {calculated}/{len(rooms)} rooms calculated, "
        f"diversity {factor:.2f}, {totals.tonnage:.2f} TR"
    )
    return totals


@timed_operation("building_summary")
def calculate_building_totals(floors: Iterable[FloorTotals],
                              diversity_factor: Optional[float] = None) -> BuildingTotals:
    """Sum floor totals and apply the building diversity factor"""
    floors = list(floors)
    if diversity_factor is None:
        diversity_factor = config.BUILDING_DIVERSITY_FACTOR

    totals = BuildingTotals(
        sensible_heat=sum(f.sensible_heat for f in floors),
        latent_heat=sum(f.latent_heat for f in floors),
        total_cfm=sum(f.total_cfm for f in floors),
        total_area=sum(f.total_area for f in floors),
        diversity_factor=diversity_factor,
        floors=floors,
    )

    logger.info(
        f"Building summary: {len(floors)} floors, {totals.total_area:,.0f} sq ft, "
        f"adjusted load {totals.adjusted_load:,.0f} BTU/hr ({totals.tonnage:.2f} TR)"
    )
    return totals
