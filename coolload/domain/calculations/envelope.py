"""
Envelope Heat Gain Calculator

Solar gain through glass, wall and roof conduction by the equivalent
temperature difference (ETD) method, and partition transmission.
All gains in BTU/hr.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from coolload.data.construction import (
    get_roof_etd,
    get_roof_u_factor,
    get_wall_etd,
    get_wall_u_factor,
)
from coolload.data.solar_factors import (
    get_glass_factor,
    get_shading_factor,
    get_solar_gain_factor,
)
from coolload.domain.models import (
    EnvelopeInputs,
    GlassComponent,
    PartitionComponent,
    RoofComponent,
    WallComponent,
)

logger = logging.getLogger(__name__)

# Partitions face an unconditioned space assumed this much cooler than outdoors
PARTITION_TEMPERATURE_ALLOWANCE = 5.0


@dataclass(frozen=True)
class ComponentGain:
    """Heat gain of one envelope component"""
    category: str
    area: float
    factor: float  # solar factor × glass × shading, or U-factor
    temperature_difference: float
    gain: float
    orientation: Optional[str] = None

    def to_json(self) -> dict:
        return {
            "category": self.category,
            "orientation": self.orientation,
            "area": self.area,
            "factor": self.factor,
            "temperature_difference": self.temperature_difference,
            "gain": self.gain,
        }


@dataclass(frozen=True)
class EnvelopeGains:
    """Envelope gains summed per category, with the per-component detail"""
    glass: float = 0.0
    walls: float = 0.0
    roofs: float = 0.0
    partitions: float = 0.0
    components: Tuple[ComponentGain, ...] = ()

    @property
    def total(self) -> float:
        return self.glass + self.walls + self.roofs + self.partitions


def glass_solar_gain(component: GlassComponent) -> ComponentGain:
    """Area × base solar gain × glass type factor × shading factor"""
    factor = (get_solar_gain_factor(component.orientation)
              * get_glass_factor(component.glass_type)
              * get_shading_factor(component.shading))
    return ComponentGain(
        category="glass",
        orientation=component.orientation.value,
        area=component.area,
        factor=factor,
        temperature_difference=0.0,
        gain=component.area * factor,
    )


def wall_gain(component: WallComponent, delta_db: float) -> ComponentGain:
    """Area × U × (ETD + ΔDB)"""
    u_factor = get_wall_u_factor(component.wall_type)
    td = get_wall_etd(component.orientation, component.weight) + delta_db
    return ComponentGain(
        category="wall",
        orientation=component.orientation.value,
        area=component.area,
        factor=u_factor,
        temperature_difference=td,
        gain=component.area * u_factor * td,
    )


def roof_gain(component: RoofComponent, delta_db: float) -> ComponentGain:
    """Area × U × (ETD + ΔDB)"""
    u_factor = get_roof_u_factor(component.roof_type)
    td = get_roof_etd(component.exposure, component.weight) + delta_db
    return ComponentGain(
        category="roof",
        orientation="Horizontal",
        area=component.area,
        factor=u_factor,
        temperature_difference=td,
        gain=component.area * u_factor * td,
    )


def partition_gain(component: PartitionComponent, delta_db: float) -> ComponentGain:
    """Area × U × max(0, ΔDB − 5)"""
    td = max(0.0, delta_db - PARTITION_TEMPERATURE_ALLOWANCE)
    return ComponentGain(
        category="partition",
        area=component.area,
        factor=component.u_factor,
        temperature_difference=td,
        gain=component.area * component.u_factor * td,
    )


def calculate_envelope_gains(envelope: EnvelopeInputs, delta_db: float) -> EnvelopeGains:
    """
    Calculate all envelope gains for a room

    Args:
        envelope: Configured glass, wall, roof and partition components
        delta_db: Outside minus inside dry bulb (°F)

    Returns:
        EnvelopeGains with category totals and component detail
    """
    glass = [glass_solar_gain(c) for c in envelope.glass]
    walls = [wall_gain(c, delta_db) for c in envelope.walls]
    roofs = [roof_gain(c, delta_db) for c in envelope.roofs]
    partitions = [partition_gain(c, delta_db) for c in envelope.partitions]

    gains = EnvelopeGains(
        glass=sum(g.gain for g in glass),
        walls=sum(g.gain for g in walls),
        roofs=sum(g.gain for g in roofs),
        partitions=sum(g.gain for g in partitions),
        components=tuple(glass + walls + roofs + partitions),
    )

    logger.debug(
        f"Envelope: glass={gains.glass:,.0f} walls={gains.walls:,.0f} "
        f"roofs={gains.roofs:,.0f} partitions={gains.partitions:,.0f} BTU/hr"
    )
    return gains
