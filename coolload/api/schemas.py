"""
Request/response models for the cooling load API

Saved forms send numbers as strings and leave fields blank; numeric fields
are coerced before validation (blank or invalid becomes the field default,
normally 0). Lookup keys stay strings here and are parsed into enums by
``to_inputs()``, where unknown keys raise UnknownLookupKeyError.
"""

from typing import Any, ClassVar, Dict, FrozenSet, List, Optional, Union

from pydantic import BaseModel, Field, model_validator

from coolload import config
from coolload.domain.models import (
    AirState,
    CoolingLoadInputs,
    DesignConditions,
    EnvelopeInputs,
    FixtureType,
    GeometryMode,
    GlassComponent,
    GlassType,
    InfiltrationFixture,
    InfiltrationMethod,
    InternalLoadInputs,
    Orientation,
    PartitionComponent,
    ProcessFactors,
    RoofComponent,
    RoofType,
    ShadingType,
    SpaceGeometry,
    SunExposure,
    VentilationInputs,
    WallComponent,
    WallType,
    WeightClass,
    WindSpeed,
)
from coolload.errors import ValidationError
from coolload.utils.safe_access import safe_float, safe_int, safe_optional_float

LookupValue = Optional[Union[str, float]]


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _lookup(enum_cls, value: LookupValue, default):
    """Parse a lookup key; blank falls back to the form default"""
    if _is_blank(value):
        return default
    return enum_cls.parse(value)


def _parse_mode(enum_cls, value: Optional[str], default):
    if _is_blank(value):
        return default
    key = str(value).strip().lower().replace('-', '_').replace(' ', '_')
    for member in enum_cls:
        if key in (member.value, member.value.replace('_', '')):
            return member
    raise ValidationError(
        f"Unknown {enum_cls.__name__} {value!r}",
        {'allowed': [m.value for m in enum_cls]}
    )


class FormModel(BaseModel):
    """
    Base for form sections: coerces numeric fields before validation

    A blank or unparseable number becomes 0. Fields named in
    `blank_uses_default` take the field default instead, for values where 0
    is not a usable input. An omitted field always takes the field default.
    """

    blank_uses_default: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode='before')
    @classmethod
    def coerce_numbers(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for name, info in cls.model_fields.items():
            if name not in data:
                continue
            fallback = info.default if name in cls.blank_uses_default else 0
            if info.annotation is float:
                data[name] = safe_float(data[name], fallback)
            elif info.annotation is int:
                data[name] = safe_int(data[name], fallback)
            elif info.annotation == Optional[float]:
                data[name] = safe_optional_float(data[name])
        return data


# --- Request sections ------------------------------------------------------

class AirStateSchema(FormModel):
    dry_bulb: float = 0.0
    relative_humidity: float = 0.0
    wet_bulb: Optional[float] = None
    dew_point: Optional[float] = None
    grains_per_lb: Optional[float] = None

    def to_state(self) -> AirState:
        return AirState(**self.model_dump())


class ConditionsSchema(FormModel):
    outside: AirStateSchema = Field(default_factory=AirStateSchema)
    inside: AirStateSchema = Field(default_factory=AirStateSchema)
    pressure_kpa: float = config.DEFAULT_PRESSURE_KPA

    blank_uses_default: ClassVar[FrozenSet[str]] = frozenset({"pressure_kpa"})

    def to_conditions(self) -> DesignConditions:
        return DesignConditions(
            outside=self.outside.to_state(),
            inside=self.inside.to_state(),
            pressure_kpa=self.pressure_kpa,
        )


_GEOMETRY_MODE_FIELDS = (
    (GeometryMode.DIMENSIONS, ("length", "width")),
    (GeometryMode.AREA, ("area",)),
    (GeometryMode.VOLUME, ("volume",)),
)


class GeometrySchema(FormModel):
    mode: Optional[str] = None
    length: float = 0.0
    width: float = 0.0
    height: float = 0.0
    area: float = 0.0
    volume: float = 0.0

    def to_geometry(self) -> SpaceGeometry:
        # Forms keep stale values in the inactive fields; only the
        # selected mode's inputs are taken. Without a mode, the filled
        # fields decide it
        if _is_blank(self.mode):
            mode = self._infer_mode()
        else:
            mode = _parse_mode(GeometryMode, self.mode, GeometryMode.DIMENSIONS)
        if mode is GeometryMode.AREA:
            return SpaceGeometry.from_area(self.area, self.height)
        if mode is GeometryMode.VOLUME:
            return SpaceGeometry.from_volume(self.volume, self.height)
        return SpaceGeometry.from_dimensions(self.length, self.width, self.height)

    def _infer_mode(self) -> GeometryMode:
        """Pick the mode whose own fields are filled; height is shared by all"""
        filled = [mode for mode, names in _GEOMETRY_MODE_FIELDS
                  if any(getattr(self, name) for name in names)]
        if len(filled) > 1:
            raise ValidationError(
                "Geometry fields given for more than one input mode; set mode",
                {'modes': [m.value for m in filled]}
            )
        return filled[0] if filled else GeometryMode.DIMENSIONS


class GlassSchema(FormModel):
    orientation: LookupValue = None
    area: float = 0.0
    glass_type: LookupValue = None
    shading: LookupValue = None

    def to_component(self) -> GlassComponent:
        return GlassComponent(
            orientation=Orientation.parse(self.orientation),
            area=self.area,
            glass_type=_lookup(GlassType, self.glass_type, GlassType.ORDINARY),
            shading=_lookup(ShadingType, self.shading, ShadingType.NO_SHADE),
        )


class WallSchema(FormModel):
    orientation: LookupValue = None
    area: float = 0.0
    wall_type: LookupValue = None
    weight: LookupValue = None

    def to_component(self) -> WallComponent:
        return WallComponent(
            orientation=Orientation.parse(self.orientation),
            area=self.area,
            wall_type=_lookup(WallType, self.wall_type, WallType.BRICK_6),
            weight=_lookup(WeightClass, self.weight, WeightClass.MEDIUM),
        )


class RoofSchema(FormModel):
    area: float = 0.0
    roof_type: LookupValue = None
    exposure: LookupValue = None
    weight: LookupValue = None

    def to_component(self) -> RoofComponent:
        return RoofComponent(
            area=self.area,
            roof_type=_lookup(RoofType, self.roof_type, RoofType.CONCRETE_SLAB_6),
            exposure=_lookup(SunExposure, self.exposure, SunExposure.EXPOSED),
            weight=_lookup(WeightClass, self.weight, WeightClass.MEDIUM),
        )


class PartitionSchema(FormModel):
    area: float = 0.0
    u_factor: float = 0.0

    def to_component(self) -> PartitionComponent:
        return PartitionComponent(area=self.area, u_factor=self.u_factor)


class EnvelopeSchema(BaseModel):
    glass: List[GlassSchema] = Field(default_factory=list)
    walls: List[WallSchema] = Field(default_factory=list)
    roofs: List[RoofSchema] = Field(default_factory=list)
    partitions: List[PartitionSchema] = Field(default_factory=list)

    def to_envelope(self) -> EnvelopeInputs:
        return EnvelopeInputs(
            glass=tuple(g.to_component() for g in self.glass),
            walls=tuple(w.to_component() for w in self.walls),
            roofs=tuple(r.to_component() for r in self.roofs),
            partitions=tuple(p.to_component() for p in self.partitions),
        )


class InternalLoadSchema(FormModel):
    occupants: float = 0.0
    sensible_per_person: float = 0.0
    latent_per_person: float = 0.0
    lighting_w_per_sqft: float = 0.0
    equipment_w_per_sqft: float = 0.0
    motor_bhp: float = 0.0
    motor_hp: float = 0.0

    def to_internal(self) -> InternalLoadInputs:
        return InternalLoadInputs(**self.model_dump())


class FixtureSchema(FormModel):
    fixture_type: LookupValue = None
    crack_length_ft: float = 0.0
    quantity: float = 1.0

    def to_fixture(self) -> InfiltrationFixture:
        return InfiltrationFixture(
            fixture_type=FixtureType.parse(self.fixture_type),
            crack_length_ft=self.crack_length_ft,
            quantity=self.quantity,
        )


class VentilationSchema(FormModel):
    cfm_per_person: float = 0.0
    cfm_per_sqft: float = 0.0
    air_changes_per_hour: float = 0.0
    infiltration_method: Optional[str] = None
    infiltration_cfm: float = 0.0
    fixtures: List[FixtureSchema] = Field(default_factory=list)
    wind_speed: LookupValue = None

    def to_ventilation(self) -> VentilationInputs:
        return VentilationInputs(
            cfm_per_person=self.cfm_per_person,
            cfm_per_sqft=self.cfm_per_sqft,
            air_changes_per_hour=self.air_changes_per_hour,
            infiltration_method=_parse_mode(
                InfiltrationMethod, self.infiltration_method, InfiltrationMethod.MANUAL
            ),
            infiltration_cfm=self.infiltration_cfm,
            fixtures=tuple(f.to_fixture() for f in self.fixtures),
            wind_speed=_lookup(WindSpeed, self.wind_speed, WindSpeed.MPH_15),
        )


class ProcessSchema(FormModel):
    bypass_factor: float = config.DEFAULT_BYPASS_FACTOR
    safety_factor_sensible: float = config.DEFAULT_SAFETY_FACTOR_SENSIBLE
    safety_factor_latent: float = config.DEFAULT_SAFETY_FACTOR_LATENT
    apparatus_dew_point: float = 0.0

    def to_process(self) -> ProcessFactors:
        return ProcessFactors(**self.model_dump())


class CoolingLoadRequest(BaseModel):
    """One room's calculation form"""
    room_name: str = ""
    conditions: ConditionsSchema = Field(default_factory=ConditionsSchema)
    geometry: GeometrySchema = Field(default_factory=GeometrySchema)
    envelope: EnvelopeSchema = Field(default_factory=EnvelopeSchema)
    internal: InternalLoadSchema = Field(default_factory=InternalLoadSchema)
    ventilation: VentilationSchema = Field(default_factory=VentilationSchema)
    process: ProcessSchema = Field(default_factory=ProcessSchema)

    def to_inputs(self) -> CoolingLoadInputs:
        """
        Build the engine's input snapshot

        Raises:
            UnknownLookupKeyError: unknown orientation, glass, wall, fixture, ... key
            ValidationError: negative quantities, bypass factor or pressure out of range
        """
        return CoolingLoadInputs(
            conditions=self.conditions.to_conditions(),
            geometry=self.geometry.to_geometry(),
            envelope=self.envelope.to_envelope(),
            internal=self.internal.to_internal(),
            ventilation=self.ventilation.to_ventilation(),
            process=self.process.to_process(),
            room_name=self.room_name,
        )


class PsychrometricsRequest(FormModel):
    dry_bulb: float = 0.0
    relative_humidity: Optional[float] = None
    wet_bulb: Optional[float] = None
    pressure_kpa: float = config.DEFAULT_PRESSURE_KPA

    blank_uses_default: ClassVar[FrozenSet[str]] = frozenset({"pressure_kpa"})


class RoomRecordSchema(FormModel):
    name: str = ""
    area: float = 0.0
    quantity: int = 1
    sensible_heat: float = 0.0
    latent_heat: float = 0.0
    cfm: float = 0.0
    calculated: bool = True


class FloorSchema(BaseModel):
    name: str
    floor_type: str = "office"
    rooms: List[RoomRecordSchema] = Field(default_factory=list)


class SummaryRequest(BaseModel):
    floors: List[FloorSchema] = Field(default_factory=list)
    building_diversity_factor: Optional[float] = Field(None, gt=0.0, le=1.0)


# --- Responses -------------------------------------------------------------

class LoadTotals(BaseModel):
    esht: float
    elht: float
    erth: float
    gth: float
    tons: float
    dehumidified_rise: float
    dehumidified_cfm: float
    ventilation_cfm: float
    infiltration_cfm: float


class EquipmentSelectionResponse(BaseModel):
    area: float
    tonnage: float
    total_cfm: float
    sensible_heat: float
    latent_heat: float


class CoolingLoadResponse(BaseModel):
    room_name: str
    breakdown: Dict[str, Any]
    totals: LoadTotals
    derived: Dict[str, float]
    warnings: List[str]
    conditions: Dict[str, Any]
    geometry: Dict[str, float]
    equipment: EquipmentSelectionResponse


class TablesResponse(BaseModel):
    orientations: List[str]
    wall_orientations: List[str]
    glass_types: List[str]
    shading_types: List[str]
    wall_types: List[str]
    roof_types: List[str]
    weights: List[str]
    exposures: List[str]
    fixture_types: List[str]
    door_fixture_types: List[str]
    wind_speeds: List[str]
    cities: List[str]
    seasons: List[str]
    indoor_applications: List[str]
