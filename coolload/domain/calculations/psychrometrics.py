"""
Psychrometric Resolver
Dew point, humidity ratio and wet bulb from dry bulb + relative humidity

Temperatures are °F at the interface; the empirical formulas work in °C.
Pressure is absolute kPa throughout (101.325 at sea level). Functions return
None when a state is not computable instead of raising, so a half-filled form
never aborts a calculation.
"""

import logging
import math
from dataclasses import dataclass, replace
from typing import Optional

from coolload.domain.models import AirState, DesignConditions, STANDARD_PRESSURE_KPA
from coolload.errors import ValidationError

logger = logging.getLogger(__name__)

# Magnus coefficients
MAGNUS_A = 17.27
MAGNUS_B = 237.3

# Saturation vapor pressure scale at 0°C, kPa
SATURATION_PRESSURE_0C = 0.61078

# Empirical multiplier that brings the Magnus vapor pressure in line with
# chart values (104°F / 40% RH reads 144.3 gr/lb)
VAPOR_PRESSURE_CALIBRATION = 1.102

# Ratio of molecular weights of water vapor and dry air
MOLECULAR_WEIGHT_RATIO = 0.62198

GRAINS_PER_LB = 7000.0

KPA_TO_PSIA = 0.145037738
KPA_TO_INHG = 0.2952998
MMHG_TO_PA = 133.322
PA_PER_PSI = 6895.0


def f_to_c(temp_f: float) -> float:
    return (temp_f - 32.0) * 5.0 / 9.0


def c_to_f(temp_c: float) -> float:
    return temp_c * 9.0 / 5.0 + 32.0


def is_computable(db_f: Optional[float], rh: Optional[float]) -> bool:
    """True when dry bulb is present and RH is within (0, 100]"""
    if db_f is None or rh is None:
        return False
    return 0.0 < rh <= 100.0


def dew_point(db_f: Optional[float], rh: Optional[float]) -> Optional[float]:
    """
    Dew point temperature by the Magnus formula

    Args:
        db_f: Dry bulb temperature (°F)
        rh: Relative humidity (%)

    Returns:
        Dew point (°F), or None when the state is not computable
    """
    if not is_computable(db_f, rh):
        return None
    db_c = f_to_c(db_f)
    alpha = (MAGNUS_A * db_c) / (MAGNUS_B + db_c) + math.log(rh / 100.0)
    dew_point_c = (MAGNUS_B * alpha) / (MAGNUS_A - alpha)
    # The °F/°C round trip can overshoot the dry bulb at saturation
    return min(c_to_f(dew_point_c), db_f)


def grains_per_lb(db_f: Optional[float], rh: Optional[float],
                  pressure_kpa: float = STANDARD_PRESSURE_KPA) -> Optional[float]:
    """
    Humidity ratio in grains of moisture per lb of dry air

    Args:
        db_f: Dry bulb temperature (°F)
        rh: Relative humidity (%)
        pressure_kpa: Atmospheric pressure (kPa)

    Returns:
        Humidity ratio (gr/lb), or None when the state is not computable
    """
    dew_point_f = dew_point(db_f, rh)
    if dew_point_f is None:
        return None
    dew_point_c = f_to_c(dew_point_f)
    e = SATURATION_PRESSURE_0C * math.exp((MAGNUS_A * dew_point_c) / (dew_point_c + MAGNUS_B))
    e_calibrated = e * VAPOR_PRESSURE_CALIBRATION
    if e_calibrated >= pressure_kpa:
        logger.debug(f"Vapor pressure {e_calibrated:.3f} kPa exceeds total pressure {pressure_kpa} kPa")
        return None
    w = MOLECULAR_WEIGHT_RATIO * e_calibrated / (pressure_kpa - e_calibrated)
    return w * GRAINS_PER_LB


def wet_bulb(db_f: Optional[float], rh: Optional[float]) -> Optional[float]:
    """
    Wet bulb temperature by the Stull (2011) empirical approximation

    Args:
        db_f: Dry bulb temperature (°F)
        rh: Relative humidity (%)

    Returns:
        Wet bulb (°F), or None when the state is not computable
    """
    if not is_computable(db_f, rh):
        return None
    db_c = f_to_c(db_f)
    wb_c = (db_c * math.atan(0.151977 * math.sqrt(rh + 8.313659))
            + math.atan(db_c + rh) - math.atan(rh - 1.676331)
            + 0.00391838 * rh ** 1.5 * math.atan(0.023101 * rh)
            - 4.686035)
    return c_to_f(wb_c)


def saturation_pressure_psia(temp_f: float) -> float:
    """Saturation pressure of water by the Antoine equation (valid 1-100°C)"""
    temp_c = f_to_c(temp_f)
    log_psat = 8.07131 - (1730.63 / (temp_c + 233.426))
    psat_mmhg = 10 ** log_psat
    return psat_mmhg * MMHG_TO_PA / PA_PER_PSI


def relative_humidity(db_f: float, humidity_gr: float,
                      pressure_kpa: float = STANDARD_PRESSURE_KPA) -> float:
    """Relative humidity (%) from dry bulb and humidity ratio, clamped to 0-100"""
    w = humidity_gr / GRAINS_PER_LB
    pressure_psia = pressure_kpa * KPA_TO_PSIA
    pw = (w * pressure_psia) / (MOLECULAR_WEIGHT_RATIO + w)
    rh = (pw / saturation_pressure_psia(db_f)) * 100.0
    return min(100.0, max(0.0, rh))


def relative_humidity_from_wet_bulb(db_f: float, wb_f: float) -> float:
    """
    Relative humidity (%) that reproduces the given wet bulb

    Bisects on the Stull approximation to within 0.01°F.

    Raises:
        ValidationError: wet bulb above dry bulb
    """
    if wb_f > db_f:
        raise ValidationError(
            "Wet bulb temperature cannot exceed dry bulb temperature",
            {'dry_bulb': db_f, 'wet_bulb': wb_f}
        )

    rh_low, rh_high, rh = 0.0, 100.0, 50.0
    for _ in range(50):
        error = wet_bulb(db_f, rh) - wb_f
        if abs(error) < 0.01:
            break
        if error > 0:
            rh_high = rh
            rh = (rh_low + rh) / 2
        else:
            rh_low = rh
            rh = (rh + rh_high) / 2

    return max(0.0, min(100.0, rh))


def enthalpy(db_f: float, humidity_gr: float) -> float:
    """Enthalpy of moist air, BTU/lb dry air"""
    w = humidity_gr / GRAINS_PER_LB
    return 0.240 * db_f + w * (1061 + 0.444 * db_f)


def specific_volume(db_f: float, humidity_gr: float,
                    pressure_kpa: float = STANDARD_PRESSURE_KPA) -> float:
    """Specific volume of moist air, ft³/lb dry air"""
    db_r = db_f + 459.67
    w = humidity_gr / GRAINS_PER_LB
    return 0.754 * db_r * (1 + 1.608 * w) / (pressure_kpa * KPA_TO_INHG)


@dataclass(frozen=True)
class PsychrometricState:
    """Complete state point"""
    dry_bulb: float
    wet_bulb: float
    relative_humidity: float
    dew_point: float
    grains_per_lb: float
    enthalpy: float
    specific_volume: float
    pressure_kpa: float

    def to_json(self) -> dict:
        return {
            "dry_bulb": round(self.dry_bulb, 1),
            "wet_bulb": round(self.wet_bulb, 3),
            "relative_humidity": round(self.relative_humidity, 1),
            "dew_point": round(self.dew_point, 2),
            "grains_per_lb": round(self.grains_per_lb, 1),
            "enthalpy": round(self.enthalpy, 2),
            "specific_volume": round(self.specific_volume, 3),
            "pressure_kpa": self.pressure_kpa,
        }


def calculate_psychrometrics(db_f: float, rh: Optional[float] = None, wb_f: Optional[float] = None,
                             pressure_kpa: float = STANDARD_PRESSURE_KPA) -> PsychrometricState:
    """
    Full psychrometric state from dry bulb plus RH or wet bulb

    Raises:
        ValidationError: neither RH nor wet bulb given, or the resulting
            state is outside the valid RH range
    """
    if rh is None:
        if wb_f is None:
            raise ValidationError("Need dry bulb plus relative humidity or wet bulb")
        rh = relative_humidity_from_wet_bulb(db_f, wb_f)
    else:
        wb_f = wet_bulb(db_f, rh)

    dp = dew_point(db_f, rh)
    gr = grains_per_lb(db_f, rh, pressure_kpa)
    if dp is None or gr is None or wb_f is None:
        raise ValidationError(
            "Psychrometric state is not computable",
            {'dry_bulb': db_f, 'relative_humidity': rh}
        )

    return PsychrometricState(
        dry_bulb=db_f,
        wet_bulb=wb_f,
        relative_humidity=rh,
        dew_point=dp,
        grains_per_lb=gr,
        enthalpy=enthalpy(db_f, gr),
        specific_volume=specific_volume(db_f, gr, pressure_kpa),
        pressure_kpa=pressure_kpa,
    )


@dataclass(frozen=True)
class ResolvedConditions:
    """Design conditions with every derivable property filled in"""
    outside: AirState
    inside: AirState
    pressure_kpa: float
    delta_db: float
    delta_grains: float

    def to_json(self) -> dict:
        def state(s: AirState) -> dict:
            return {
                "dry_bulb": s.dry_bulb,
                "relative_humidity": s.relative_humidity,
                "wet_bulb": s.wet_bulb,
                "dew_point": s.dew_point,
                "grains_per_lb": s.grains_per_lb,
            }
        return {
            "outside": state(self.outside),
            "inside": state(self.inside),
            "pressure_kpa": self.pressure_kpa,
            "delta_db": self.delta_db,
            "delta_grains": self.delta_grains,
        }


def resolve_air_state(state: AirState, pressure_kpa: float) -> AirState:
    """
    Fill dew point, wet bulb and grains from DB + RH unless supplied

    When grains are entered without a usable RH, RH is backed out from the
    grains so dew point and wet bulb still resolve.
    """
    db, rh = state.dry_bulb, state.relative_humidity
    if db and state.grains_per_lb and not is_computable(db, rh):
        rh = relative_humidity(db, state.grains_per_lb, pressure_kpa)
    return AirState(
        dry_bulb=db,
        relative_humidity=rh,
        wet_bulb=state.wet_bulb if state.wet_bulb is not None else wet_bulb(db, rh),
        dew_point=state.dew_point if state.dew_point is not None else dew_point(db, rh),
        grains_per_lb=(state.grains_per_lb if state.grains_per_lb is not None
                       else grains_per_lb(db, rh, pressure_kpa)),
    )


def _warn_not_computable(label: str, state: AirState) -> None:
    if state.dry_bulb:
        logger.warning(
            f"{label} humidity not computable (DB={state.dry_bulb}, RH={state.relative_humidity}); "
            f"latent loads use 0 gr/lb difference"
        )


def resolve_conditions(conditions: DesignConditions) -> ResolvedConditions:
    """
    Resolve outside and inside states and the differences the load formulas use

    A difference is only formed when both sides are entered; an empty side
    leaves the difference at 0 rather than producing a full-scale ΔT against 0°F.
    """
    outside = resolve_air_state(conditions.outside, conditions.pressure_kpa)
    inside = resolve_air_state(conditions.inside, conditions.pressure_kpa)

    if outside.grains_per_lb is None:
        _warn_not_computable("outside", outside)
        outside = replace(outside, grains_per_lb=0.0)
    if inside.grains_per_lb is None:
        _warn_not_computable("inside", inside)
        inside = replace(inside, grains_per_lb=0.0)

    delta_db = 0.0
    if outside.dry_bulb and inside.dry_bulb:
        delta_db = outside.dry_bulb - inside.dry_bulb

    delta_grains = 0.0
    if outside.grains_per_lb and inside.grains_per_lb:
        delta_grains = outside.grains_per_lb - inside.grains_per_lb

    return ResolvedConditions(
        outside=outside,
        inside=inside,
        pressure_kpa=conditions.pressure_kpa,
        delta_db=delta_db,
        delta_grains=delta_grains,
    )
