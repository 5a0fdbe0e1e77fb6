import logging
import math
from typing import Iterable, Optional
from core.models import (EncoderMode, Mechanism, LinearUnit, SpeedUnit, FrequencyStatus, DcSupplyResult,
                         EncoderResult, OhmsResult)
from core.components import DcLoad
from core.converters import Numeric, parse_number
from standards.nec_logic import select_standard_size
from standards.control_tables import (DC_SUPPLY_SIZES, DEFAULT_SAFETY_PERCENT, DEFAULT_GROWTH_PERCENT,
                                      STANDARD_INPUT_MAX_HZ, FILTERED_INPUT_MAX_HZ, MM_PER_INCH,
                                      DEGREES_PER_REV)

logger = logging.getLogger(__name__)

class DcPowerSupplySizer:
    @staticmethod
    def size(loads: Iterable[DcLoad], safety_percent: Numeric = DEFAULT_SAFETY_PERCENT,
             growth_percent: Numeric = DEFAULT_GROWTH_PERCENT) -> Optional[DcSupplyResult]:
        """
        Sizes a 24 VDC supply for a list of loads.
        Peak inrush assumes only the worst inrush device starts at once.
        The recommendation saturates at the largest standard supply.
        """
        safety, growth = parse_number(safety_percent), parse_number(growth_percent)
        if safety is None or growth is None or safety < 0 or growth < 0:
            logger.debug("Invalid margins: safety=%r growth=%r", safety_percent, growth_percent)
            return None

        valid = [load for load in loads if load.counts]
        if not valid:
            logger.debug("No DC load with quantity and nominal current")
            return None

        total_ma = sum(load.total_ma for load in valid)
        worst = max(valid, key=lambda load: load.inrush_ma)
        peak_ma = total_ma
        if worst.inrush_ma > 0:
            peak_ma = total_ma - worst.nominal_ma + max(worst.inrush_ma, worst.nominal_ma)

        required_a = total_ma * (1 + safety / 100) * (1 + growth / 100) / 1000
        if not (math.isfinite(required_a) and math.isfinite(peak_ma)):
            return None

        return DcSupplyResult(
            total_nominal_a=total_ma / 1000,
            peak_inrush_a=peak_ma / 1000,
            required_a=required_a,
            recommended_a=select_standard_size(required_a, DC_SUPPLY_SIZES),
        )

class EncoderResolution:
    @staticmethod
    def classify(frequency_hz: float) -> FrequencyStatus:
        if frequency_hz > FILTERED_INPUT_MAX_HZ:
            return FrequencyStatus.CRITICAL
        if frequency_hz > STANDARD_INPUT_MAX_HZ:
            return FrequencyStatus.CAUTION
        return FrequencyStatus.OK

    @staticmethod
    def calculate(ppr: Numeric, mode: EncoderMode = EncoderMode.X4, mechanism: Mechanism = Mechanism.DIRECT,
                  gear_in: Numeric = 1, gear_out: Numeric = 1, pitch: Numeric = None, diameter: Numeric = None,
                  unit: LinearUnit = LinearUnit.MM, speed: Numeric = None,
                  speed_unit: SpeedUnit = SpeedUnit.RPM) -> Optional[EncoderResult]:
        """
        Counts per output revolution, resolution and scale factor of an encoder axis.
        Pitch and diameter are in `unit`; linear results come back in the same unit.
        A positive speed adds the pulse frequency the counter input must handle.
        """
        pulses = parse_number(ppr)
        if pulses is None or pulses <= 0:
            logger.debug("Invalid PPR %r", ppr)
            return None

        ratio = 1.0
        if mechanism is Mechanism.GEARBOX:
            g_in, g_out = parse_number(gear_in), parse_number(gear_out)
            if g_in is None or g_out is None or g_in <= 0 or g_out <= 0:
                logger.debug("Invalid gear ratio %r:%r", gear_in, gear_out)
                return None
            ratio = g_in / g_out
        counts_per_rev = pulses * mode.value * ratio

        angular = mechanism in (Mechanism.DIRECT, Mechanism.GEARBOX)
        if angular:
            distance_per_rev, unit_label = DEGREES_PER_REV, "deg"
        else:
            size = parse_number(pitch if mechanism is Mechanism.LEADSCREW else diameter)
            if size is None or size <= 0:
                logger.debug("Invalid %s dimension: pitch=%r diameter=%r", mechanism.value, pitch, diameter)
                return None
            distance_per_rev = size if mechanism is Mechanism.LEADSCREW else math.pi * size
            unit_label = unit.value

        resolution = distance_per_rev / counts_per_rev
        if not (math.isfinite(counts_per_rev) and math.isfinite(resolution)) or resolution == 0:
            return None
        result = EncoderResult(
            counts_per_rev=counts_per_rev,
            resolution=resolution,
            scale_factor=1 / resolution,
            unit=unit_label,
            angular=angular,
        )

        v = parse_number(speed)
        if v is None or v <= 0:
            return result
        if speed_unit is SpeedUnit.RPM:
            frequency = v / 60 * counts_per_rev
        elif angular:
            # Linear speed means nothing on a rotary axis
            return result
        else:
            speed_mm_s = v * 1000 if speed_unit is SpeedUnit.M_S else v
            speed_in_unit = speed_mm_s / MM_PER_INCH if unit is LinearUnit.INCH else speed_mm_s
            frequency = speed_in_unit * result.scale_factor

        if math.isfinite(frequency):
            result.required_frequency_hz = frequency
            result.frequency_status = EncoderResolution.classify(frequency)
        return result

    @staticmethod
    def counts_for_distance(distance: Numeric, result: EncoderResult) -> Optional[int]:
        d = parse_number(distance)
        if d is None:
            return None
        counts = d * result.scale_factor
        return int(round(counts)) if math.isfinite(counts) else None

    @staticmethod
    def distance_for_counts(counts: Numeric, result: EncoderResult) -> Optional[float]:
        c = parse_number(counts)
        if c is None:
            return None
        distance = c * result.resolution
        return distance if math.isfinite(distance) else None

class OhmsLaw:
    @staticmethod
    def solve(voltage: Numeric = None, current: Numeric = None, resistance: Numeric = None,
              power: Numeric = None) -> Optional[OhmsResult]:
        """Any two positive quantities give the other two."""
        given = {k: parse_number(x) for k, x in
                 (("V", voltage), ("I", current), ("R", resistance), ("P", power))}
        known = {k: x for k, x in given.items() if x is not None}
        if len(known) != 2 or any(x <= 0 for x in known.values()):
            logger.debug("Ohm's law needs exactly two positive values, got %r", given)
            return None

        pair = "".join(sorted(known))
        if pair == "IV":
            v, i = known["V"], known["I"]
            r, p, formula = v / i, v * i, "R = V/I, P = V×I"
        elif pair == "RV":
            v, r = known["V"], known["R"]
            i, p, formula = v / r, v * v / r, "I = V/R, P = V²/R"
        elif pair == "PV":
            v, p = known["V"], known["P"]
            i, r, formula = p / v, v * v / p, "I = P/V, R = V²/P"
        elif pair == "IR":
            i, r = known["I"], known["R"]
            v, p, formula = i * r, i * i * r, "V = I×R, P = I²×R"
        elif pair == "IP":
            i, p = known["I"], known["P"]
            v, r, formula = p / i, p / (i * i), "V = P/I, R = P/I²"
        else:
            r, p = known["R"], known["P"]
            v, i, formula = math.sqrt(p * r), math.sqrt(p / r), "V = √(P×R), I = √(P/R)"

        if not all(math.isfinite(x) and x > 0 for x in (v, i, r, p)):
            return None
        return OhmsResult(voltage=v, current=i, resistance=r, power=p, formula=formula)
