"""
Wall and roof construction data for ETD conduction calculations
U-factors in BTU/hr·ft²·°F, equivalent temperature differences in °F
"""

from coolload.domain.models import Orientation, WallType, RoofType, WeightClass, SunExposure
from coolload.errors import UnknownLookupKeyError

WALL_U_FACTORS = {
    WallType.BRICK_4: 0.79,
    WallType.BRICK_6: 0.58,
    WallType.BRICK_8: 0.48,
    WallType.BLOCK_4: 0.71,
    WallType.BLOCK_6: 0.65,
    WallType.BLOCK_8: 0.58,
    WallType.FRAME_INSULATED: 0.25,
    WallType.FRAME_UNINSULATED: 0.45,
}

ROOF_U_FACTORS = {
    RoofType.CONCRETE_SLAB_4: 0.76,
    RoofType.CONCRETE_SLAB_6: 0.67,
    RoofType.METAL_INSULATED: 0.15,
    RoofType.METAL_UNINSULATED: 1.20,
    RoofType.TILE_INSULATED: 0.25,
    RoofType.TILE_UNINSULATED: 0.80,
    RoofType.RCC_INSULATED: 0.20,
    RoofType.RCC_UNINSULATED: 0.76,
}

# Wall ETD by weight class and exposure (walls are never horizontal)
WALL_ETD = {
    WeightClass.LIGHT: {
        Orientation.N: 10, Orientation.NE: 14, Orientation.E: 20, Orientation.SE: 22,
        Orientation.S: 16, Orientation.SW: 20, Orientation.W: 24, Orientation.NW: 18,
    },
    WeightClass.MEDIUM: {  # 4"/6" brick
        Orientation.N: 14, Orientation.NE: 18, Orientation.E: 25, Orientation.SE: 28,
        Orientation.S: 20, Orientation.SW: 25, Orientation.W: 30, Orientation.NW: 22,
    },
    WeightClass.HEAVY: {
        Orientation.N: 12, Orientation.NE: 15, Orientation.E: 22, Orientation.SE: 25,
        Orientation.S: 18, Orientation.SW: 22, Orientation.W: 27, Orientation.NW: 20,
    },
}

ROOF_ETD = {
    SunExposure.EXPOSED: {
        WeightClass.LIGHT: 45,
        WeightClass.MEDIUM: 35,
        WeightClass.HEAVY: 28,
    },
    SunExposure.SHADED: {
        WeightClass.LIGHT: 15,
        WeightClass.MEDIUM: 12,
        WeightClass.HEAVY: 10,
    },
}


def get_wall_u_factor(wall_type) -> float:
    wall_type = WallType.parse(wall_type)
    try:
        return WALL_U_FACTORS[wall_type]
    except KeyError:
        raise UnknownLookupKeyError('WALL_U_FACTORS', wall_type.value) from None


def get_roof_u_factor(roof_type) -> float:
    roof_type = RoofType.parse(roof_type)
    try:
        return ROOF_U_FACTORS[roof_type]
    except KeyError:
        raise UnknownLookupKeyError('ROOF_U_FACTORS', roof_type.value) from None


def get_wall_etd(orientation, weight=WeightClass.MEDIUM) -> float:
    """
    Get wall equivalent temperature difference

    Args:
        orientation: Compass orientation of the wall
        weight: Wall weight class (30, 60 or 100 lb/ft²)

    Returns:
        ETD in °F

    Raises:
        UnknownLookupKeyError: for keys the table does not define, including
            a horizontal orientation
    """
    orientation = Orientation.parse(orientation)
    weight = WeightClass.parse(weight)
    try:
        return WALL_ETD[weight][orientation]
    except KeyError:
        raise UnknownLookupKeyError(
            'WALL_ETD', f"{weight.value}/{orientation.value}"
        ) from None


def get_roof_etd(exposure, weight=WeightClass.MEDIUM) -> float:
    exposure = SunExposure.parse(exposure)
    weight = WeightClass.parse(weight)
    try:
        return ROOF_ETD[exposure][weight]
    except KeyError:
        raise UnknownLookupKeyError(
            'ROOF_ETD', f"{exposure.value}/{weight.value}"
        ) from None
