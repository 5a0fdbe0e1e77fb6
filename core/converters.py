import logging
import math
from enum import Enum
from typing import Dict, List, Optional, Union
from core.models import QuantityFamily, UnitDefinition, DistanceUnit
from core.settings import CONVERSION_PRECISION
from standards.instrument_tables import CONVERSION_TABLES

logger = logging.getLogger(__name__)

Numeric = Union[str, int, float, None]

class Trim(Enum):
    NONE = "none"          # fixed decimals: "20.00"
    INTEGRAL = "integral"  # only a zero fraction is dropped: "75.0000" -> "75"
    ZEROS = "zeros"        # every trailing zero: "1.2500" -> "1.25"

def parse_number(text: Numeric) -> Optional[float]:
    """
    Locale-agnostic decimal parser for user-entered values.
    Returns None for empty, non-numeric or non-finite input.
    """
    if text is None or isinstance(text, bool):
        return None
    if isinstance(text, (int, float)):
        value = float(text)
    else:
        s = str(text).strip()
        if not s:
            return None
        try:
            value = float(s)
        except ValueError:
            return None
    return value if math.isfinite(value) else None

def format_quantity(value: Optional[float], precision: int = 4, trim: Trim = Trim.ZEROS) -> str:
    """Formats a result for display. None or non-finite values render as an empty string."""
    if value is None or not math.isfinite(value):
        return ""
    text = f"{value:.{precision}f}"
    if precision > 0:
        if trim is Trim.INTEGRAL:
            zero_fraction = "." + "0" * precision
            if text.endswith(zero_fraction):
                text = text[:-len(zero_fraction)]
        elif trim is Trim.ZEROS:
            text = text.rstrip("0").rstrip(".")
    # "-0.0000" and friends
    if text.startswith("-") and float(text) == 0:
        text = text[1:]
    return text

def convert_length_unit(val: float, unit: Union[str, DistanceUnit]) -> Optional[float]:
    """Returns length in feet, None for an unknown unit."""
    if isinstance(unit, DistanceUnit):
        unit = unit.value
    unit = unit.strip().lower()
    if unit in ["ft", "feet", "pies", "pie"]: return val
    if unit in ["m", "meters", "mts", "metros", "metro"]: return val * 3.28084
    if unit in ["yd", "yarda", "yardas"]: return val * 3.0
    logger.debug("Unknown length unit %r", unit)
    return None

class UnitConverter:
    """Converts through the canonical unit of each family (bar, C, L/min, mm, N·m)."""

    @staticmethod
    def units(family: QuantityFamily) -> List[str]:
        return list(CONVERSION_TABLES[family].keys())

    @staticmethod
    def canonical_unit(family: QuantityFamily) -> str:
        return UnitConverter.units(family)[0]

    @staticmethod
    def has_unit(family: QuantityFamily, unit: str) -> bool:
        return unit in CONVERSION_TABLES[family]

    @staticmethod
    def _definition(family: QuantityFamily, unit: str) -> UnitDefinition:
        try:
            return CONVERSION_TABLES[family][unit]
        except KeyError:
            raise ValueError(f"Unit {unit!r} is not part of {family.value}") from None

    @staticmethod
    def to_canonical(family: QuantityFamily, unit: str, value: float) -> float:
        d = UnitConverter._definition(family, unit)
        return (value - d.offset) / d.scale

    @staticmethod
    def from_canonical(family: QuantityFamily, unit: str, value: float) -> float:
        d = UnitConverter._definition(family, unit)
        return value * d.scale + d.offset

    @staticmethod
    def convert(family: QuantityFamily, value: Numeric, from_unit: str, to_unit: str) -> Optional[float]:
        v = parse_number(value)
        if v is None or not (UnitConverter.has_unit(family, from_unit) and UnitConverter.has_unit(family, to_unit)):
            logger.debug("Conversion skipped: %r %s -> %s", value, from_unit, to_unit)
            return None
        canonical = UnitConverter.to_canonical(family, from_unit, v)
        result = UnitConverter.from_canonical(family, to_unit, canonical)
        return result if math.isfinite(result) else None

    @staticmethod
    def convert_all(family: QuantityFamily, unit: str, value: Numeric,
                    precision: int = CONVERSION_PRECISION) -> Dict[str, str]:
        """
        Returns {unit: display string} for every unit of the family.
        An invalid source value or unit clears all outputs.
        """
        v = parse_number(value)
        if v is None or not UnitConverter.has_unit(family, unit):
            logger.debug("Conversion cleared, invalid value %r for %s", value, unit)
            return {u: "" for u in UnitConverter.units(family)}

        canonical = UnitConverter.to_canonical(family, unit, v)
        converted = {}
        for u in UnitConverter.units(family):
            # Echo the source unit untouched
            converted[u] = v if u == unit else UnitConverter.from_canonical(family, u, canonical)

        if not all(math.isfinite(x) for x in converted.values()):
            logger.debug("Conversion cleared, overflow converting %r %s", value, unit)
            return {u: "" for u in converted}
        return {u: format_quantity(x, precision, Trim.ZEROS) for u, x in converted.items()}
