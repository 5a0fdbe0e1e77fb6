import logging
import math
from typing import List, Optional, Tuple
from core.models import (Phase, ConductorMaterial, InsulationRating, DistanceUnit, DropStatus,
                         MotorProtectionResult, VoltageDropResult, OverloadSetting)
from core.converters import Numeric, Trim, parse_number, format_quantity, convert_length_unit
from standards.nec_tables import (WIRE_AMPACITY_75C, AMPACITY_TABLES, BREAKER_RATINGS, FUSE_RATINGS,
                                  CIRCULAR_MILS, CONDUCTOR_RESISTIVITY, MOTOR_FLA_430_250, NEMA_STARTER_MAX_HP)

logger = logging.getLogger(__name__)

def _parse_voltage(voltage: Numeric) -> Optional[float]:
    # Accept "460V" as well as "460"
    if isinstance(voltage, str) and voltage.strip().upper().endswith("V"):
        voltage = voltage.strip()[:-1]
    return parse_number(voltage)

def select_standard_size(amps: float, ratings: List[int]) -> int:
    """Smallest standard rating >= amps. Saturates at the largest rating."""
    target = round(amps, 6)
    for rating in ratings:
        if rating >= target:
            return rating
    return ratings[-1]

class MotorProtectionSizer:
    # Fixed NEC margins on motor FLA
    CONDUCTOR_FACTOR = 1.25     # NEC 430.22
    OVERLOAD_MIN_FACTOR = 1.15  # NEC 430.32(A)(1), SF < 1.15
    OVERLOAD_MAX_FACTOR = 1.25  # NEC 430.32(A)(1), SF >= 1.15
    BREAKER_FACTOR = 2.50       # NEC 430.52, inverse time breaker
    FUSE_FACTOR = 1.75          # NEC 430.52, dual element fuse

    @staticmethod
    def lookup_fla(hp: Numeric, voltage: Numeric) -> Optional[float]:
        """NEC Table 430.250. Combinations outside the table are not available."""
        h, v = parse_number(hp), _parse_voltage(voltage)
        if h is None or v is None or not v.is_integer():
            return None
        fla = MOTOR_FLA_430_250.get(int(v), {}).get(h)
        if fla is None:
            logger.debug("No NEC 430.250 entry for %s HP @ %s V", hp, voltage)
        return fla

    @staticmethod
    def select_conductor(min_ampacity: float) -> str:
        target = round(min_ampacity, 6)
        for size, ampacity in WIRE_AMPACITY_75C.items():
            if ampacity >= target:
                return size
        return "N/A"

    @staticmethod
    def nema_starter(hp: float, voltage: int) -> str:
        for size, max_hp in NEMA_STARTER_MAX_HP.get(voltage, []):
            if hp <= max_hp:
                return f"NEMA {size}"
        return "N/A"

    @staticmethod
    def size(hp: Numeric, voltage: Numeric) -> Optional[MotorProtectionResult]:
        fla = MotorProtectionSizer.lookup_fla(hp, voltage)
        if fla is None:
            return None
        h, v = parse_number(hp), int(_parse_voltage(voltage))

        min_ampacity = fla * MotorProtectionSizer.CONDUCTOR_FACTOR
        return MotorProtectionResult(
            voltage=v,
            horsepower=format_quantity(h, 2),
            fla=fla,
            min_conductor_ampacity=min_ampacity,
            conductor_awg=MotorProtectionSizer.select_conductor(min_ampacity),
            overload_range=(fla * MotorProtectionSizer.OVERLOAD_MIN_FACTOR,
                            fla * MotorProtectionSizer.OVERLOAD_MAX_FACTOR),
            breaker_rating=select_standard_size(fla * MotorProtectionSizer.BREAKER_FACTOR, BREAKER_RATINGS),
            fuse_rating=select_standard_size(fla * MotorProtectionSizer.FUSE_FACTOR, FUSE_RATINGS),
            nema_starter=MotorProtectionSizer.nema_starter(h, v),
        )

    @staticmethod
    def overload_setting(nameplate_amps: Numeric, service_factor: Numeric) -> Optional[OverloadSetting]:
        i_n, sf = parse_number(nameplate_amps), parse_number(service_factor)
        if i_n is None or sf is None or i_n <= 0 or sf <= 0:
            logger.debug("Invalid nameplate data: amps=%r sf=%r", nameplate_amps, service_factor)
            return None
        factor = MotorProtectionSizer.OVERLOAD_MAX_FACTOR if sf >= 1.15 else MotorProtectionSizer.OVERLOAD_MIN_FACTOR
        return OverloadSetting(
            nameplate_amps=i_n,
            service_factor=sf,
            service_factor_amps=i_n * sf,
            max_setting_amps=i_n * factor,
            reference_notes=f"NEC 430.32(A)(1) ({factor * 100:.0f}% FLA)",
        )

class VoltageDropAnalyzer:
    ACCEPTABLE_PERCENT = 3.0
    CAUTION_PERCENT = 5.0

    @staticmethod
    def drop_volts(phase: Phase, material: ConductorMaterial, current: float, gauge: str,
                   distance_ft: float) -> Optional[float]:
        cm = CIRCULAR_MILS.get(gauge)
        if cm is None:
            logger.debug("Unknown wire gauge %r", gauge)
            return None
        k = CONDUCTOR_RESISTIVITY[material]
        factor = math.sqrt(3) if phase is Phase.THREE else 2.0
        return (factor * k * current * distance_ft) / cm

    @staticmethod
    def classify(drop_percent: float) -> DropStatus:
        if drop_percent < VoltageDropAnalyzer.ACCEPTABLE_PERCENT:
            return DropStatus.ACCEPTABLE
        if drop_percent <= VoltageDropAnalyzer.CAUTION_PERCENT:
            return DropStatus.CAUTION
        return DropStatus.UNACCEPTABLE

    @staticmethod
    def suggest_gauge(voltage: float, phase: Phase, current: float, material: ConductorMaterial,
                      gauge: str, distance_ft: float) -> Optional[str]:
        """First larger gauge bringing the drop under 3 %, None when the table runs out."""
        sizes = list(CIRCULAR_MILS.keys())
        if gauge not in sizes:
            return None
        for size in sizes[sizes.index(gauge) + 1:]:
            drop = VoltageDropAnalyzer.drop_volts(phase, material, current, size, distance_ft)
            if drop / voltage * 100 < VoltageDropAnalyzer.ACCEPTABLE_PERCENT:
                return size
        return None

    @staticmethod
    def analyze(voltage: Numeric, phase: Phase, current: Numeric, material: ConductorMaterial, gauge: str,
                distance: Numeric, distance_unit: DistanceUnit = DistanceUnit.FEET) -> Optional[VoltageDropResult]:
        v, i, d = _parse_voltage(voltage), parse_number(current), parse_number(distance)
        if any(x is None or x <= 0 for x in (v, i, d)):
            logger.debug("Voltage drop inputs rejected: V=%r I=%r D=%r", voltage, current, distance)
            return None

        distance_ft = convert_length_unit(d, distance_unit)
        if distance_ft is None:
            return None
        drop = VoltageDropAnalyzer.drop_volts(phase, material, i, gauge, distance_ft)
        if drop is None or not math.isfinite(drop / v):
            return None

        drop_percent = drop / v * 100
        status = VoltageDropAnalyzer.classify(drop_percent)
        suggestion = None
        if status is DropStatus.UNACCEPTABLE:
            suggestion = VoltageDropAnalyzer.suggest_gauge(v, phase, i, material, gauge, distance_ft)

        k_label = "√3" if phase is Phase.THREE else "2"
        formula = (f"({k_label} × {CONDUCTOR_RESISTIVITY[material]} × {i:.1f}A × {distance_ft:.0f}ft)"
                   f" / {CIRCULAR_MILS[gauge]}CM")

        return VoltageDropResult(
            drop_volts=drop,
            drop_percent=drop_percent,
            load_voltage=v - drop,
            status=status,
            suggestion=suggestion,
            formula=formula,
        )

class MotorFlaEstimator:
    WATTS_PER_HP = 746.0

    @staticmethod
    def estimate(hp: Numeric, voltage: Numeric, phase: Phase, efficiency_pct: Numeric,
                 power_factor: Numeric) -> Optional[float]:
        h, v = parse_number(hp), _parse_voltage(voltage)
        eff, pf = parse_number(efficiency_pct), parse_number(power_factor)
        if h is None or v is None or eff is None or pf is None or v == 0 or eff == 0 or pf == 0:
            logger.debug("FLA estimate rejected: hp=%r V=%r eff=%r pf=%r", hp, voltage, efficiency_pct, power_factor)
            return None

        eta = eff / 100.0
        if phase is Phase.THREE:
            fla = (h * MotorFlaEstimator.WATTS_PER_HP) / (v * math.sqrt(3) * eta * pf)
        else:
            fla = (h * MotorFlaEstimator.WATTS_PER_HP) / (v * eta * pf)
        return fla if math.isfinite(fla) else None

    @staticmethod
    def estimate_display(hp: Numeric, voltage: Numeric, phase: Phase, efficiency_pct: Numeric,
                         power_factor: Numeric, precision: int = 2) -> str:
        fla = MotorFlaEstimator.estimate(hp, voltage, phase, efficiency_pct, power_factor)
        return format_quantity(fla, precision, Trim.NONE)

class WireSizer:
    @staticmethod
    def select_wire(amps: Numeric, material: ConductorMaterial = ConductorMaterial.COPPER,
                    rating: InsulationRating = InsulationRating.TEMP_75) -> Optional[Tuple[str, int]]:
        """Smallest NEC 310.16 conductor carrying the load. Returns (Size, Ampacity)."""
        a = parse_number(amps)
        if a is None or a <= 0:
            return None
        for size, column in AMPACITY_TABLES[material].items():
            if column[rating.value] >= a:
                return size, column[rating.value]
        logger.debug("%s A exceeds NEC 310.16 %s %sC column", a, material.value, rating.value)
        return None
