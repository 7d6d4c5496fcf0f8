"""
Crack-length infiltration table
CFM per foot of crack for windows and doors at wind velocities of 5-30 mph
"""

from coolload.domain.models import FixtureType, WindSpeed
from coolload.errors import UnknownLookupKeyError

WIND_VELOCITIES = (WindSpeed.MPH_5, WindSpeed.MPH_10, WindSpeed.MPH_15,
                   WindSpeed.MPH_20, WindSpeed.MPH_25, WindSpeed.MPH_30)

CFM_PER_FOOT_OF_CRACK = {
    # Double hung, wood sash
    FixtureType.DH_AVERAGE: (0.12, 0.35, 0.65, 0.98, 1.33, 1.73),
    FixtureType.DH_AVERAGE_STRIP: (0.07, 0.22, 0.40, 0.60, 0.82, 1.05),
    FixtureType.DH_POOR: (0.45, 1.16, 2.55, 2.60, 3.30, 4.20),
    FixtureType.DH_POOR_STRIP: (0.10, 0.32, 0.57, 0.85, 1.18, 1.53),
    FixtureType.DH_POOR_STORM: (0.23, 0.57, 0.93, 1.30, 1.60, 2.10),
    FixtureType.DH_POOR_STORM_STRIP: (0.05, 0.16, 0.29, 0.43, 0.59, 0.76),
    FixtureType.DH_METAL: (0.33, 0.78, 1.23, 1.73, 2.23, 2.80),
    FixtureType.DH_METAL_STRIP: (0.10, 0.32, 0.63, 0.77, 1.00, 1.27),
    # Casement, rolled section steel sash
    FixtureType.CASEMENT_INDUSTRIAL_PIVOTED: (1.07, 1.80, 2.9, 4.1, 5.1, 6.2),
    FixtureType.CASEMENT_ARCH_PROJECTED: (0.62, 1.03, 1.43, 1.86, 2.3, 2.7),
    FixtureType.CASEMENT_ARCH_PROJECTED_HEAVY: (0.84, 1.47, 1.93, 2.5, 3.0, 3.5),
    FixtureType.CASEMENT_RESIDENTIAL: (0.35, 0.50, 0.75, 0.90, 1.23, 1.40),
    FixtureType.CASEMENT_RESIDENTIAL_HEAVY: (0.67, 1.17, 1.71, 2.10, 2.67, 3.20),
    FixtureType.CASEMENT_HEAVY_PROJECTED: (0.48, 0.87, 1.21, 1.62, 1.96, 2.40),
    FixtureType.CASEMENT_HEAVY_WEATHER_STRIPPED: (0.14, 0.24, 0.31, 0.38, 0.48, 0.57),
    FixtureType.CASEMENT_HEAVY_METAL_PIVOTED: (0.46, 0.82, 1.12, 1.42, 1.78, 2.10),
    # Doors
    FixtureType.GLASS_DOOR_GOOD: (3.2, 6.4, 9.6, 13.0, 16.0, 19.0),
    FixtureType.GLASS_DOOR_AVERAGE: (4.8, 10.0, 14.0, 20.0, 24.0, 29.0),
    FixtureType.GLASS_DOOR_POOR: (6.4, 13.0, 19.0, 26.0, 32.0, 38.0),
    FixtureType.DOOR_WELL_FITTED_STRIP: (0.45, 0.90, 1.30, 1.70, 2.10, 2.50),
    FixtureType.DOOR_WELL_FITTED: (0.90, 1.80, 2.60, 3.30, 4.20, 5.00),
    FixtureType.DOOR_POORLY_FITTED: (1.90, 3.70, 5.20, 6.60, 8.40, 10.00),
    FixtureType.FACTORY_DOOR: (3.2, 6.4, 9.6, 13.0, 16.0, 19.0),
}


def get_cfm_per_foot(fixture_type, wind_speed=WindSpeed.MPH_15) -> float:
    """
    Get infiltration CFM per foot of crack

    Args:
        fixture_type: Window or door construction
        wind_speed: Wind velocity bucket

    Returns:
        CFM per linear foot of crack
    """
    fixture_type = FixtureType.parse(fixture_type)
    wind_speed = WindSpeed.parse(wind_speed)
    try:
        row = CFM_PER_FOOT_OF_CRACK[fixture_type]
    except KeyError:
        raise UnknownLookupKeyError('CFM_PER_FOOT_OF_CRACK', fixture_type.value) from None
    return row[WIND_VELOCITIES.index(wind_speed)]
