"""
Input data models for the cooling load engine

Every model is a frozen dataclass: one snapshot of the form is built at the
input boundary and handed to the pipeline, which never mutates it.
Lookup keys are enums; string keys from saved forms are parsed with
``parse()``, which raises on anything it does not recognize.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple

from coolload.errors import UnknownLookupKeyError, ValidationError

STANDARD_PRESSURE_KPA = 101.325


def _normalize_key(value: str) -> str:
    return "".join(ch for ch in value.lower() if ch not in " -_\t")


class LookupKey(Enum):
    """Enum base whose members can be parsed from codes, names, labels or aliases."""

    @property
    def label(self) -> str:
        return str(self.value)

    @property
    def aliases(self) -> Tuple[str, ...]:
        return ()

    def _match_keys(self) -> set:
        keys = {self.name, str(self.value), self.label, *self.aliases}
        return {_normalize_key(k) for k in keys}

    @classmethod
    def parse(cls, value: Any):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            wanted = _normalize_key(value)
            for member in cls:
                if wanted in member._match_keys():
                    return member
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            for member in cls:
                if member.value == value:
                    return member
        raise UnknownLookupKeyError(cls.__name__, value)

    @classmethod
    def keys(cls) -> list:
        return [member.label for member in cls]


class Orientation(LookupKey):
    N = "N"
    NE = "NE"
    E = "E"
    SE = "SE"
    S = "S"
    SW = "SW"
    W = "W"
    NW = "NW"
    HORIZONTAL = "Horizontal"

    @property
    def label(self) -> str:
        return _ORIENTATION_LABELS[self]

    @property
    def is_compass(self) -> bool:
        return self is not Orientation.HORIZONTAL


_ORIENTATION_LABELS = {
    Orientation.N: "North",
    Orientation.NE: "North East",
    Orientation.E: "East",
    Orientation.SE: "South East",
    Orientation.S: "South",
    Orientation.SW: "South West",
    Orientation.W: "West",
    Orientation.NW: "North West",
    Orientation.HORIZONTAL: "Horizontal",
}

COMPASS_ORIENTATIONS = tuple(o for o in Orientation if o.is_compass)


class GlassType(LookupKey):
    ORDINARY = "Ordinary Glass"
    REGULAR_PLATE = "Regular Plate (1/4 inch)"
    HEAT_ABSORBING_40_48 = "Heat Absorbing Glass 40-48%"
    HEAT_ABSORBING_48_56 = "Heat Absorbing Glass 48-56%"
    HEAT_ABSORBING_56_70 = "Heat Absorbing Glass 56-70%"
    DOUBLE_PANE_ORDINARY = "Double Pane Ordinary Glass"
    DOUBLE_PANE_REGULAR_PLATE = "Double Pane Regular Plate"
    DOUBLE_PANE_ABSORBING_OUTSIDE = "Double Pane 48-56% Absorbing Outside"
    DOUBLE_PANE_ABSORBING_OUTSIDE_REGULAR_INSIDE = "Double Pane 48-56% Absorbing Outside Regular Inside"
    TRIPLE_PANE_ORDINARY = "Triple Pane Ordinary Glass"
    TRIPLE_PANE_REGULAR_PLATE = "Triple Pane Regular Plate"


class ShadingType(LookupKey):
    NO_SHADE = "No Shade"
    VENETIAN_LIGHT = "Inside Venetian Blind Light Colour"
    VENETIAN_MEDIUM = "Inside Venetian Blind Medium Colour"
    VENETIAN_DARK = "Inside Venetian Blind Dark Colour"
    VENETIAN_45_LIGHT = "Inside Venetian Blind 450 Horz Slates Light"
    VENETIAN_45_DARK = "Inside Venetian Blind 450 Horz Slates Dark"
    SCREEN_17_MEDIUM = "Outside Shading Screen 170 Horz Slates Medium"
    SCREEN_17_DARK = "Outside Shading Screen 170 Horz Slates Dark"
    AWNING_LIGHT = "Outside Awning Vent Sides & Top Light"
    AWNING_MEDIUM_DARK = "Outside Awning Vent Sides & Top Medium/Dark"


class WallType(LookupKey):
    BRICK_4 = "4 inch Brick Wall"
    BRICK_6 = "6 inch Brick Wall"
    BRICK_8 = "8 inch Brick Wall"
    BLOCK_4 = "4 inch Concrete Block"
    BLOCK_6 = "6 inch Concrete Block"
    BLOCK_8 = "8 inch Concrete Block"
    FRAME_INSULATED = "Frame Wall with Insulation"
    FRAME_UNINSULATED = "Frame Wall without Insulation"


class RoofType(LookupKey):
    CONCRETE_SLAB_4 = "Concrete Slab 4 inch"
    CONCRETE_SLAB_6 = "Concrete Slab 6 inch"
    METAL_INSULATED = "Metal Roof with Insulation"
    METAL_UNINSULATED = "Metal Roof without Insulation"
    TILE_INSULATED = "Tile Roof with Insulation"
    TILE_UNINSULATED = "Tile Roof without Insulation"
    RCC_INSULATED = "RCC Slab with Insulation"
    RCC_UNINSULATED = "RCC Slab without Insulation"


class WeightClass(LookupKey):
    """Construction weight in lb/ft²"""
    LIGHT = 30
    MEDIUM = 60
    HEAVY = 100


class SunExposure(LookupKey):
    EXPOSED = "Exposed to Sun"
    SHADED = "Shaded"


class WindSpeed(LookupKey):
    """Wind velocity buckets (mph) of the crack-length infiltration table"""
    MPH_5 = 5
    MPH_10 = 10
    MPH_15 = 15
    MPH_20 = 20
    MPH_25 = 25
    MPH_30 = 30


class FixtureType(LookupKey):
    DH_AVERAGE = "Double Hung - Average Window"
    DH_AVERAGE_STRIP = "Double Hung - Avg w/ Strip"
    DH_POOR = "Double Hung - Poorly Fitted"
    DH_POOR_STRIP = "Double Hung - Poor + Strip"
    DH_POOR_STORM = "Double Hung - Poor + Storm"
    DH_POOR_STORM_STRIP = "Double Hung - Poor + Storm+Strip"
    DH_METAL = "Double Hung - Metal Sash"
    DH_METAL_STRIP = "Double Hung - Metal + Strip"
    CASEMENT_INDUSTRIAL_PIVOTED = "Casement - Industrial Pivoted"
    CASEMENT_ARCH_PROJECTED = "Casement - Arch Projected"
    CASEMENT_ARCH_PROJECTED_HEAVY = "Casement - Arch Projected Heavy"
    CASEMENT_RESIDENTIAL = "Casement - Residential"
    CASEMENT_RESIDENTIAL_HEAVY = "Casement - Residential Heavy"
    CASEMENT_HEAVY_PROJECTED = "Casement - Heavy Section Projected"
    CASEMENT_HEAVY_WEATHER_STRIPPED = "Casement - Heavy Section Weather Stripped"
    CASEMENT_HEAVY_METAL_PIVOTED = "Casement - Heavy Metal Ventilator Pivoted"
    GLASS_DOOR_GOOD = "Glass Hermetic - Good"
    GLASS_DOOR_AVERAGE = "Glass Hermetic - Average"
    GLASS_DOOR_POOR = "Glass Hermetic - Poor"
    DOOR_WELL_FITTED_STRIP = "Ordinary - Well Fitted + Strip"
    DOOR_WELL_FITTED = "Ordinary - Well Fitted (No Strip)"
    DOOR_POORLY_FITTED = "Ordinary - Poorly Fitted (No Strip)"
    FACTORY_DOOR = 'Factory Door (18" crack)'

    @property
    def is_door(self) -> bool:
        return self.name.startswith(("GLASS_DOOR", "DOOR_", "FACTORY"))

    @property
    def aliases(self) -> Tuple[str, ...]:
        path = _FIXTURE_TABLE_PATHS.get(self)
        return (path,) if path else ()


# Table paths used by saved form records
_FIXTURE_TABLE_PATHS = {
    FixtureType.DH_AVERAGE: "doubleHung.woodSash.averageWindow",
    FixtureType.DH_AVERAGE_STRIP: "doubleHung.woodSash.averageWindowWithStrip",
    FixtureType.DH_POOR: "doubleHung.woodSash.poorlyFittedWindow",
    FixtureType.DH_POOR_STRIP: "doubleHung.woodSash.poorlyFittedWindowWithStrip",
    FixtureType.DH_POOR_STORM: "doubleHung.woodSash.poorlyFittedWithStormSash",
    FixtureType.DH_POOR_STORM_STRIP: "doubleHung.woodSash.poorlyFittedWithStormSashWithStrip",
    FixtureType.DH_METAL: "doubleHung.woodSash.metalSash",
    FixtureType.DH_METAL_STRIP: "doubleHung.woodSash.metalSashWithStrip",
    FixtureType.CASEMENT_INDUSTRIAL_PIVOTED: "casement.rolledSectionSteelSash.industrialPivoted",
    FixtureType.CASEMENT_ARCH_PROJECTED: "casement.rolledSectionSteelSash.architecturalProjected",
    FixtureType.CASEMENT_ARCH_PROJECTED_HEAVY: "casement.rolledSectionSteelSash.architecturalProjectedHeavy",
    FixtureType.CASEMENT_RESIDENTIAL: "casement.rolledSectionSteelSash.residentialCasement",
    FixtureType.CASEMENT_RESIDENTIAL_HEAVY: "casement.rolledSectionSteelSash.residentialCasementHeavy",
    FixtureType.CASEMENT_HEAVY_PROJECTED: "casement.rolledSectionSteelSash.heavyCasementSectionProjected",
    FixtureType.CASEMENT_HEAVY_WEATHER_STRIPPED: "casement.rolledSectionSteelSash.heavyCasementSectionProjectedWeatherStripped",
    FixtureType.CASEMENT_HEAVY_METAL_PIVOTED: "casement.rolledSectionSteelSash.heavyMetalVentilatorPivoted",
    FixtureType.GLASS_DOOR_GOOD: "glassDoorsHermetic.goodInstallation",
    FixtureType.GLASS_DOOR_AVERAGE: "glassDoorsHermetic.averageInstallation",
    FixtureType.GLASS_DOOR_POOR: "glassDoorsHermetic.poorInstallation",
    FixtureType.DOOR_WELL_FITTED_STRIP: "ordinaryWoodOrMetal.wellFittedWithStrip",
    FixtureType.DOOR_WELL_FITTED: "ordinaryWoodOrMetal.wellFittedNoStrip",
    FixtureType.DOOR_POORLY_FITTED: "ordinaryWoodOrMetal.poorlyFittedNoStrip",
    FixtureType.FACTORY_DOOR: "factoryDoor",
}


class GeometryMode(Enum):
    """Which space dimensions the user entered; the others are derived"""
    DIMENSIONS = "dimensions"
    AREA = "area"
    VOLUME = "volume"


class InfiltrationMethod(Enum):
    MANUAL = "manual"
    CRACK_LENGTH = "crack_length"


def _require_non_negative(owner: str, **values: float):
    for name, value in values.items():
        if value < 0:
            raise ValidationError(f"{owner}.{name} cannot be negative", {name: value})


# --- Design conditions -----------------------------------------------------

def validate_pressure_kpa(pressure_kpa: float) -> float:
    # hPa or psia values fed into the kPa humidity-ratio formula give
    # silently wrong grains; reject anything that is not plausible kPa
    if not 50.0 <= pressure_kpa <= 120.0:
        raise ValidationError(
            "Atmospheric pressure must be given in kPa",
            {'pressure_kpa': pressure_kpa}
        )
    return pressure_kpa


@dataclass(frozen=True)
class AirState:
    """
    One psychrometric state point as entered on the form.

    Only dry bulb and RH are needed; dew point, wet bulb and grains are
    derived unless explicitly supplied.
    """
    dry_bulb: float = 0.0
    relative_humidity: float = 0.0
    wet_bulb: Optional[float] = None
    dew_point: Optional[float] = None
    grains_per_lb: Optional[float] = None


@dataclass(frozen=True)
class DesignConditions:
    outside: AirState = field(default_factory=AirState)
    inside: AirState = field(default_factory=AirState)
    pressure_kpa: float = STANDARD_PRESSURE_KPA

    def __post_init__(self):
        validate_pressure_kpa(self.pressure_kpa)


# --- Space geometry --------------------------------------------------------

@dataclass(frozen=True)
class ResolvedGeometry:
    length: float
    width: float
    height: float
    area: float
    volume: float


@dataclass(frozen=True)
class SpaceGeometry:
    """
    Room size entered in exactly one mode.

    DIMENSIONS: length, width, height
    AREA:       area, height
    VOLUME:     volume, height
    """
    mode: GeometryMode = GeometryMode.DIMENSIONS
    length: float = 0.0
    width: float = 0.0
    height: float = 0.0
    area: float = 0.0
    volume: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'mode', GeometryMode(self.mode))
        _require_non_negative(
            'SpaceGeometry', length=self.length, width=self.width,
            height=self.height, area=self.area, volume=self.volume
        )
        derived = {
            GeometryMode.DIMENSIONS: ('area', 'volume'),
            GeometryMode.AREA: ('length', 'width', 'volume'),
            GeometryMode.VOLUME: ('length', 'width', 'area'),
        }[self.mode]
        entered = [name for name in derived if getattr(self, name)]
        if entered:
            raise ValidationError(
                f"Geometry in {self.mode.value} mode cannot also set {', '.join(entered)}",
                {'mode': self.mode.value, 'conflicting_fields': entered}
            )

    @classmethod
    def from_dimensions(cls, length: float, width: float, height: float) -> "SpaceGeometry":
        return cls(GeometryMode.DIMENSIONS, length=length, width=width, height=height)

    @classmethod
    def from_area(cls, area: float, height: float) -> "SpaceGeometry":
        return cls(GeometryMode.AREA, area=area, height=height)

    @classmethod
    def from_volume(cls, volume: float, height: float) -> "SpaceGeometry":
        return cls(GeometryMode.VOLUME, volume=volume, height=height)

    def resolve(self) -> ResolvedGeometry:
        if self.mode is GeometryMode.DIMENSIONS:
            area = self.length * self.width
            volume = area * self.height
            return ResolvedGeometry(self.length, self.width, self.height, area, volume)
        if self.mode is GeometryMode.AREA:
            return ResolvedGeometry(0.0, 0.0, self.height, self.area, self.area * self.height)
        area = self.volume / self.height if self.height > 0 else 0.0
        return ResolvedGeometry(0.0, 0.0, self.height, area, self.volume)


# --- Envelope --------------------------------------------------------------

@dataclass(frozen=True)
class GlassComponent:
    orientation: Orientation
    area: float
    glass_type: GlassType = GlassType.ORDINARY
    shading: ShadingType = ShadingType.NO_SHADE

    def __post_init__(self):
        object.__setattr__(self, 'orientation', Orientation.parse(self.orientation))
        object.__setattr__(self, 'glass_type', GlassType.parse(self.glass_type))
        object.__setattr__(self, 'shading', ShadingType.parse(self.shading))
        _require_non_negative('GlassComponent', area=self.area)


@dataclass(frozen=True)
class WallComponent:
    orientation: Orientation
    area: float
    wall_type: WallType = WallType.BRICK_6
    weight: WeightClass = WeightClass.MEDIUM

    def __post_init__(self):
        orientation = Orientation.parse(self.orientation)
        if not orientation.is_compass:
            raise ValidationError(
                "Walls need a compass orientation",
                {'orientation': orientation.value}
            )
        object.__setattr__(self, 'orientation', orientation)
        object.__setattr__(self, 'wall_type', WallType.parse(self.wall_type))
        object.__setattr__(self, 'weight', WeightClass.parse(self.weight))
        _require_non_negative('WallComponent', area=self.area)


@dataclass(frozen=True)
class RoofComponent:
    area: float
    roof_type: RoofType = RoofType.CONCRETE_SLAB_6
    exposure: SunExposure = SunExposure.EXPOSED
    weight: WeightClass = WeightClass.MEDIUM

    def __post_init__(self):
        object.__setattr__(self, 'roof_type', RoofType.parse(self.roof_type))
        object.__setattr__(self, 'exposure', SunExposure.parse(self.exposure))
        object.__setattr__(self, 'weight', WeightClass.parse(self.weight))
        _require_non_negative('RoofComponent', area=self.area)


@dataclass(frozen=True)
class PartitionComponent:
    area: float
    u_factor: float

    def __post_init__(self):
        _require_non_negative('PartitionComponent', area=self.area, u_factor=self.u_factor)


@dataclass(frozen=True)
class EnvelopeInputs:
    glass: Tuple[GlassComponent, ...] = ()
    walls: Tuple[WallComponent, ...] = ()
    roofs: Tuple[RoofComponent, ...] = ()
    partitions: Tuple[PartitionComponent, ...] = ()

    def __post_init__(self):
        for name in ('glass', 'walls', 'roofs', 'partitions'):
            object.__setattr__(self, name, tuple(getattr(self, name)))


# --- Internal loads --------------------------------------------------------

@dataclass(frozen=True)
class InternalLoadInputs:
    occupants: float = 0.0
    sensible_per_person: float = 0.0     # BTU/hr
    latent_per_person: float = 0.0       # BTU/hr
    lighting_w_per_sqft: float = 0.0
    equipment_w_per_sqft: float = 0.0
    motor_bhp: float = 0.0
    motor_hp: float = 0.0

    def __post_init__(self):
        _require_non_negative(
            'InternalLoadInputs', occupants=self.occupants,
            lighting_w_per_sqft=self.lighting_w_per_sqft,
            equipment_w_per_sqft=self.equipment_w_per_sqft,
            motor_bhp=self.motor_bhp, motor_hp=self.motor_hp
        )


# --- Ventilation / infiltration -------------------------------------------

@dataclass(frozen=True)
class InfiltrationFixture:
    fixture_type: FixtureType
    crack_length_ft: float
    quantity: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, 'fixture_type', FixtureType.parse(self.fixture_type))
        _require_non_negative(
            'InfiltrationFixture', crack_length_ft=self.crack_length_ft, quantity=self.quantity
        )


@dataclass(frozen=True)
class VentilationInputs:
    cfm_per_person: float = 0.0
    cfm_per_sqft: float = 0.0
    air_changes_per_hour: float = 0.0
    infiltration_method: InfiltrationMethod = InfiltrationMethod.MANUAL
    infiltration_cfm: float = 0.0
    fixtures: Tuple[InfiltrationFixture, ...] = ()
    wind_speed: WindSpeed = WindSpeed.MPH_15

    def __post_init__(self):
        object.__setattr__(self, 'infiltration_method', InfiltrationMethod(self.infiltration_method))
        object.__setattr__(self, 'wind_speed', WindSpeed.parse(self.wind_speed))
        object.__setattr__(self, 'fixtures', tuple(self.fixtures))
        _require_non_negative(
            'VentilationInputs', cfm_per_person=self.cfm_per_person,
            cfm_per_sqft=self.cfm_per_sqft, air_changes_per_hour=self.air_changes_per_hour,
            infiltration_cfm=self.infiltration_cfm
        )


# --- Coil process ----------------------------------------------------------

@dataclass(frozen=True)
class ProcessFactors:
    bypass_factor: float = 0.2
    safety_factor_sensible: float = 0.0  # percent
    safety_factor_latent: float = 0.0    # percent
    apparatus_dew_point: float = 0.0     # °F

    def __post_init__(self):
        if not 0.0 <= self.bypass_factor <= 1.0:
            raise ValidationError(
                "Bypass factor must be between 0 and 1",
                {'bypass_factor': self.bypass_factor}
            )

    @property
    def contact_factor(self) -> float:
        return 1.0 - self.bypass_factor


# --- Snapshot --------------------------------------------------------------

@dataclass(frozen=True)
class CoolingLoadInputs:
    """Complete, immutable input snapshot for one room calculation"""
    conditions: DesignConditions = field(default_factory=DesignConditions)
    geometry: SpaceGeometry = field(default_factory=SpaceGeometry)
    envelope: EnvelopeInputs = field(default_factory=EnvelopeInputs)
    internal: InternalLoadInputs = field(default_factory=InternalLoadInputs)
    ventilation: VentilationInputs = field(default_factory=VentilationInputs)
    process: ProcessFactors = field(default_factory=ProcessFactors)
    room_name: str = ""
