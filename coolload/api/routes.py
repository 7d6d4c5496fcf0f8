import logging

from fastapi import APIRouter

from coolload.api.schemas import (
    CoolingLoadRequest,
    CoolingLoadResponse,
    PsychrometricsRequest,
    SummaryRequest,
    TablesResponse,
)
from coolload.data.climate import (
    INDIAN_CLIMATE_DATA,
    SEASONS,
    STANDARD_INDOOR_CONDITIONS,
    get_climate_data,
    get_standard_indoor_conditions,
)
from coolload.domain.calculations.pipeline import calculate_cooling_load
from coolload.domain.calculations.psychrometrics import calculate_psychrometrics
from coolload.domain.models import (
    COMPASS_ORIENTATIONS,
    FixtureType,
    GlassType,
    Orientation,
    RoofType,
    ShadingType,
    SunExposure,
    WallType,
    WeightClass,
    WindSpeed,
    validate_pressure_kpa,
)
from coolload.services.building_summary import (
    RoomLoadRecord,
    calculate_building_totals,
    calculate_floor_totals,
)
from coolload.services.equipment_handoff import EquipmentSelectionRequest

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/calculate", response_model=CoolingLoadResponse)
async def calculate(request: CoolingLoadRequest):
    """
    Calculate the cooling load for one room

    Lookup and range errors propagate to the app's exception handlers (422).
    """
    result = calculate_cooling_load(request.to_inputs())
    return {
        **result.to_json(),
        "equipment": EquipmentSelectionRequest.from_result(result).to_json(),
    }


@router.post("/psychrometrics")
async def psychrometrics(request: PsychrometricsRequest):
    state = calculate_psychrometrics(
        request.dry_bulb,
        rh=request.relative_humidity,
        wb_f=request.wet_bulb,
        pressure_kpa=validate_pressure_kpa(request.pressure_kpa),
    )
    return state.to_json()


@router.post("/summary")
async def summary(request: SummaryRequest):
    """Aggregate room loads into floor and building totals"""
    floors = []
    for floor in request.floors:
        rooms = [RoomLoadRecord(**room.model_dump()) for room in floor.rooms]
        floors.append(calculate_floor_totals(floor.name, floor.floor_type, rooms))

    building = calculate_building_totals(floors, request.building_diversity_factor)
    return building.to_json()


@router.get("/tables", response_model=TablesResponse)
async def tables():
    """Lookup keys accepted by the calculate endpoint"""
    return TablesResponse(
        orientations=Orientation.keys(),
        wall_orientations=[o.label for o in COMPASS_ORIENTATIONS],
        glass_types=GlassType.keys(),
        shading_types=ShadingType.keys(),
        wall_types=WallType.keys(),
        roof_types=RoofType.keys(),
        weights=WeightClass.keys(),
        exposures=SunExposure.keys(),
        fixture_types=FixtureType.keys(),
        door_fixture_types=[f.label for f in FixtureType if f.is_door],
        wind_speeds=WindSpeed.keys(),
        cities=list(INDIAN_CLIMATE_DATA),
        seasons=list(SEASONS),
        indoor_applications=list(STANDARD_INDOOR_CONDITIONS),
    )


@router.get("/climate/{city}")
async def climate(city: str, season: str = "summer"):
    return get_climate_data(city, season)


@router.get("/indoor-conditions/{application}")
async def indoor_conditions(application: str):
    return get_standard_indoor_conditions(application)
