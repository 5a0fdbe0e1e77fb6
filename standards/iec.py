import logging
import math
from typing import Optional
from core.models import (RtdStatus, RtdResult, MountingType, EnclosureMaterial, EnclosureGeometry,
                         ThermalResult)
from core.converters import Numeric, Trim, parse_number, format_quantity
from core.settings import RTD_PRECISION
from standards.iec_tables import (PT100_R0, CVD_A, CVD_B, SURFACE_FACTORS, ENCLOSURE_HEAT_TRANSFER,
                                  WATTS_TO_BTU_HR, CFM_FACTOR)

logger = logging.getLogger(__name__)

class RtdLinearizer:
    """PT100 linearization, IEC 60751 quadratic for T >= 0 C."""

    BELOW_RANGE_MESSAGE = "R < R0: below 0 °C the quadratic Callendar-Van Dusen model does not apply"

    @staticmethod
    def resistance_to_temperature(resistance: Numeric) -> RtdResult:
        r = parse_number(resistance)
        if r is None or r < 0:
            logger.debug("Invalid RTD resistance %r", resistance)
            return RtdResult(status=RtdStatus.INVALID)
        if r < PT100_R0:
            return RtdResult(status=RtdStatus.BELOW_RANGE, message=RtdLinearizer.BELOW_RANGE_MESSAGE)

        r0a = PT100_R0 * CVD_A
        discriminant = r0a ** 2 - 4 * PT100_R0 * CVD_B * (PT100_R0 - r)
        if discriminant < 0:
            # Beyond the vertex of the quadratic, roughly 3380 C
            logger.debug("No real solution for R=%s ohm", r)
            return RtdResult(status=RtdStatus.INVALID)

        t = (-r0a + math.sqrt(discriminant)) / (2 * PT100_R0 * CVD_B)
        if not math.isfinite(t):
            return RtdResult(status=RtdStatus.INVALID)
        return RtdResult(status=RtdStatus.OK, temperature_c=t)

    @staticmethod
    def temperature_to_resistance(temp_c: Numeric) -> Optional[float]:
        t = parse_number(temp_c)
        if t is None or t < 0:
            return None
        r = PT100_R0 * (1 + CVD_A * t + CVD_B * t * t)
        return r if math.isfinite(r) else None

    @staticmethod
    def display(result: RtdResult) -> str:
        if result.status is RtdStatus.OK:
            return format_quantity(result.temperature_c, RTD_PRECISION, Trim.NONE)
        if result.status is RtdStatus.BELOW_RANGE:
            return result.message
        return ""

class EnclosureThermalModel:
    @staticmethod
    def effective_area(geometry: EnclosureGeometry, mounting: MountingType) -> float:
        """Radiating surface in m2 for the given mounting."""
        h = geometry.height_mm / 1000.0
        w = geometry.width_mm / 1000.0
        d = geometry.depth_mm / 1000.0
        f_front, f_side, f_top = SURFACE_FACTORS[mounting]
        return f_front * h * w + f_side * h * d + f_top * w * d

    @staticmethod
    def calculate(height_mm: Numeric, width_mm: Numeric, depth_mm: Numeric,
                  internal_temp_c: Numeric, external_temp_c: Numeric, internal_heat_w: Numeric,
                  mounting: MountingType = MountingType.FREE_STANDING,
                  material: EnclosureMaterial = EnclosureMaterial.PAINTED_STEEL) -> Optional[ThermalResult]:
        values = [parse_number(x) for x in (height_mm, width_mm, depth_mm, internal_temp_c, external_temp_c, internal_heat_w)]
        if any(x is None for x in values):
            logger.debug("Thermal inputs rejected: %r", values)
            return None
        h, w, d, t_int, t_ext, heat = values

        if h <= 0 or w <= 0 or d <= 0 or heat < 0:
            logger.debug("Thermal inputs out of range: H=%s W=%s D=%s heat=%s", h, w, d, heat)
            return None
        # Passive loss only flows outwards
        if t_ext >= t_int:
            logger.debug("External temperature %s C is not below internal %s C", t_ext, t_int)
            return None

        delta_t = t_int - t_ext
        area = EnclosureThermalModel.effective_area(EnclosureGeometry(h, w, d), mounting)
        passive_loss = ENCLOSURE_HEAT_TRANSFER[material] * area * delta_t
        if not math.isfinite(passive_loss):
            logger.debug("Enclosure area overflows: H=%s W=%s D=%s", h, w, d)
            return None
        required = heat - passive_loss

        result = ThermalResult(
            surface_area_m2=area,
            delta_t=delta_t,
            internal_heat_w=heat,
            passive_loss_w=passive_loss,
            required_cooling_w=required,
        )
        if required <= 0:
            return result

        # dT in C is close enough for this ratio
        airflow = CFM_FACTOR * required / delta_t
        btu_hr = required * WATTS_TO_BTU_HR
        if not (math.isfinite(airflow) and math.isfinite(btu_hr)):
            logger.debug("Cooling load overflows: %s W over dT=%s", required, delta_t)
            return None

        result.cooling_required = True
        result.airflow_cfm = airflow
        result.cooling_btu_hr = btu_hr
        result.recommended_btu_hr = int(math.ceil(round(result.cooling_btu_hr, 6) / 100.0) * 100)
        return result
