"""
Shared fixtures: a representative office room, both as an engine input
snapshot and as the form payload the API receives.
"""

import pytest

from coolload.domain.models import (
    AirState,
    CoolingLoadInputs,
    DesignConditions,
    EnvelopeInputs,
    GlassComponent,
    InternalLoadInputs,
    Orientation,
    PartitionComponent,
    ProcessFactors,
    RoofComponent,
    SpaceGeometry,
    VentilationInputs,
    WallComponent,
)


@pytest.fixture
def office_conditions():
    """100°F outside, 75°F inside, with grains fixed so ΔGrains = 55"""
    return DesignConditions(
        outside=AirState(dry_bulb=100, relative_humidity=40, grains_per_lb=120),
        inside=AirState(dry_bulb=75, relative_humidity=50, grains_per_lb=65),
    )


@pytest.fixture
def office_room(office_conditions):
    """
    25 × 20 × 10 ft office; expected figures:

    envelope  7500 glass + 4524 wall + 20100 roof + 1000 partition = 33124
    internal  2450 people + 2557.5 lighting + 1705 equipment = 6712.5
    ventilation max(100, 50, 75) = 100 CFM, infiltration 50 CFM manual
    """
    return CoolingLoadInputs(
        room_name="Office 101",
        conditions=office_conditions,
        geometry=SpaceGeometry.from_dimensions(25, 20, 10),
        envelope=EnvelopeInputs(
            glass=(GlassComponent(Orientation.E, 100),),
            walls=(WallComponent(Orientation.N, 200),),
            roofs=(RoofComponent(500),),
            partitions=(PartitionComponent(100, 0.5),),
        ),
        internal=InternalLoadInputs(
            occupants=10,
            sensible_per_person=245,
            latent_per_person=205,
            lighting_w_per_sqft=1.5,
            equipment_w_per_sqft=1.0,
        ),
        ventilation=VentilationInputs(
            cfm_per_person=10,
            cfm_per_sqft=0.1,
            air_changes_per_hour=0.9,
            infiltration_cfm=50,
        ),
        process=ProcessFactors(
            bypass_factor=0.1,
            safety_factor_sensible=10,
            safety_factor_latent=5,
            apparatus_dew_point=50,
        ),
    )


@pytest.fixture
def office_form():
    """The office room as a saved form sends it: strings, labels and blanks"""
    return {
        "room_name": "Office 101",
        "conditions": {
            "outside": {"dry_bulb": "100", "relative_humidity": "40", "grains_per_lb": "120"},
            "inside": {"dry_bulb": "75", "relative_humidity": "50", "grains_per_lb": "65"},
            "pressure_kpa": "",
        },
        "geometry": {"mode": "dimensions", "length": "25", "width": "20", "height": "10"},
        "envelope": {
            "glass": [{"orientation": "East", "area": "100", "glass_type": "", "shading": "No Shade"}],
            "walls": [{"orientation": "N", "area": "200", "wall_type": "6 inch Brick Wall", "weight": "60"}],
            "roofs": [{"area": "500", "roof_type": "", "exposure": "Exposed to Sun", "weight": 60}],
            "partitions": [{"area": "100", "u_factor": "0.5"}],
        },
        "internal": {
            "occupants": "10",
            "sensible_per_person": "245",
            "latent_per_person": "205",
            "lighting_w_per_sqft": "1.5",
            "equipment_w_per_sqft": "1",
            "motor_bhp": "",
            "motor_hp": "abc",
        },
        "ventilation": {
            "cfm_per_person": "10",
            "cfm_per_sqft": "0.1",
            "air_changes_per_hour": "0.9",
            "infiltration_method": "manual",
            "infiltration_cfm": "50",
        },
        "process": {
            "bypass_factor": "0.1",
            "safety_factor_sensible": "10",
            "safety_factor_latent": "5",
            "apparatus_dew_point": "50",
        },
    }
