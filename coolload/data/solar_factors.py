"""
Solar Heat Gain Factors for glazing
20° N latitude, peak month May (BTU/hr·ft²), with glass and shading multipliers
"""

from coolload.domain.models import Orientation, GlassType, ShadingType
from coolload.errors import UnknownLookupKeyError

# Solar heat gain through ordinary glass, BTU/hr per ft²
SOLAR_GAIN_THROUGH_GLASS = {
    Orientation.N: 20,
    Orientation.NE: 71,
    Orientation.E: 75,
    Orientation.SE: 31,
    Orientation.S: 3,
    Orientation.SW: 3,
    Orientation.W: 3,
    Orientation.NW: 3,
    Orientation.HORIZONTAL: 8,
}

# Glass type multipliers relative to ordinary glass, no shade
GLASS_TYPE_FACTORS = {
    GlassType.ORDINARY: 1.00,
    GlassType.REGULAR_PLATE: 0.94,
    GlassType.HEAT_ABSORBING_40_48: 0.80,
    GlassType.HEAT_ABSORBING_48_56: 0.73,
    GlassType.HEAT_ABSORBING_56_70: 0.62,
    GlassType.DOUBLE_PANE_ORDINARY: 0.90,
    GlassType.DOUBLE_PANE_REGULAR_PLATE: 0.80,
    GlassType.DOUBLE_PANE_ABSORBING_OUTSIDE: 0.52,
    GlassType.DOUBLE_PANE_ABSORBING_OUTSIDE_REGULAR_INSIDE: 0.50,
    GlassType.TRIPLE_PANE_ORDINARY: 0.83,
    GlassType.TRIPLE_PANE_REGULAR_PLATE: 0.69,
}

SHADING_FACTORS = {
    ShadingType.NO_SHADE: 1.00,
    ShadingType.VENETIAN_LIGHT: 0.56,
    ShadingType.VENETIAN_MEDIUM: 0.65,
    ShadingType.VENETIAN_DARK: 0.75,
    ShadingType.VENETIAN_45_LIGHT: 0.15,
    ShadingType.VENETIAN_45_DARK: 0.13,
    ShadingType.SCREEN_17_MEDIUM: 0.22,
    ShadingType.SCREEN_17_DARK: 0.15,
    ShadingType.AWNING_LIGHT: 0.20,
    ShadingType.AWNING_MEDIUM_DARK: 0.25,
}


def get_solar_gain_factor(orientation) -> float:
    """
    Get base solar gain through glass for an orientation

    Args:
        orientation: Orientation member or any key Orientation.parse accepts

    Returns:
        Solar gain in BTU/hr/sqft
    """
    orientation = Orientation.parse(orientation)
    try:
        return SOLAR_GAIN_THROUGH_GLASS[orientation]
    except KeyError:
        raise UnknownLookupKeyError('SOLAR_GAIN_THROUGH_GLASS', orientation.value) from None


def get_glass_factor(glass_type) -> float:
    glass_type = GlassType.parse(glass_type)
    try:
        return GLASS_TYPE_FACTORS[glass_type]
    except KeyError:
        raise UnknownLookupKeyError('GLASS_TYPE_FACTORS', glass_type.value) from None


def get_shading_factor(shading) -> float:
    shading = ShadingType.parse(shading)
    try:
        return SHADING_FACTORS[shading]
    except KeyError:
        raise UnknownLookupKeyError('SHADING_FACTORS', shading.value) from None
