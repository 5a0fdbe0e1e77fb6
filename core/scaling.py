import logging
import math
from dataclasses import dataclass, replace
from typing import Dict, List, Optional
from core.models import ScaleRange, RawPreset, EngPreset
from core.converters import Numeric, Trim, parse_number, format_quantity
from core.settings import SCALING_PRECISION
from standards.instrument_tables import RAW_PRESETS, ENG_PRESETS, SNIPPET_TEMPLATES

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class ScalingSetup:
    """
    Raw and engineering ranges of one analog signal.
    A raw preset other than CUSTOM pins the raw range to the card's constants
    and locks it against editing; selecting CUSTOM unlocks it again.
    Engineering presets only fill in the range.
    """
    raw: ScaleRange
    eng: ScaleRange
    raw_preset: RawPreset = RawPreset.CUSTOM
    eng_preset: EngPreset = EngPreset.CUSTOM

    @property
    def raw_editable(self) -> bool:
        return self.raw_preset is RawPreset.CUSTOM

    @property
    def raw_unit(self) -> str:
        return RAW_PRESETS[self.raw_preset][2] if self.raw_preset in RAW_PRESETS else "counts"

    @property
    def eng_unit(self) -> str:
        return ENG_PRESETS[self.eng_preset][2] if self.eng_preset in ENG_PRESETS else "EU"

    def with_raw_preset(self, preset: RawPreset) -> "ScalingSetup":
        if preset is RawPreset.CUSTOM:
            return replace(self, raw_preset=preset)
        lo, hi, _ = RAW_PRESETS[preset]
        return replace(self, raw_preset=preset, raw=ScaleRange(lo, hi))

    def with_eng_preset(self, preset: EngPreset) -> "ScalingSetup":
        if preset is EngPreset.CUSTOM:
            return replace(self, eng_preset=preset)
        lo, hi, _ = ENG_PRESETS[preset]
        return replace(self, eng_preset=preset, eng=ScaleRange(lo, hi))

    def with_raw_range(self, raw_min: float, raw_max: float) -> "ScalingSetup":
        if not self.raw_editable:
            raise ValueError(f"Raw range is locked by preset {self.raw_preset.value}")
        return replace(self, raw=ScaleRange(raw_min, raw_max))

    def with_eng_range(self, eng_min: float, eng_max: float) -> "ScalingSetup":
        return replace(self, eng=ScaleRange(eng_min, eng_max))

def format_literal(x: float) -> str:
    return str(int(x)) if float(x).is_integer() else repr(float(x))

class LinearScaler:
    @staticmethod
    def parse_range(min_text: Numeric, max_text: Numeric) -> Optional[ScaleRange]:
        lo, hi = parse_number(min_text), parse_number(max_text)
        if lo is None or hi is None:
            return None
        return ScaleRange(lo, hi)

    @staticmethod
    def linear_scale(value: float, in_range: ScaleRange, out_range: ScaleRange) -> Optional[float]:
        """Two-point linear equation. Zero spans and non-finite results give None."""
        in_span, out_span = in_range.span, out_range.span
        if in_span == 0 or out_span == 0 or not (math.isfinite(in_span) and math.isfinite(out_span)):
            logger.debug("No scaling for spans in=%r out=%r", in_span, out_span)
            return None
        result = (value - in_range.min) * out_span / in_span + out_range.min
        return result if math.isfinite(result) else None

    @staticmethod
    def raw_to_eng(raw: Numeric, setup: ScalingSetup) -> Optional[float]:
        v = parse_number(raw)
        if v is None:
            return None
        return LinearScaler.linear_scale(v, setup.raw, setup.eng)

    @staticmethod
    def eng_to_raw(eng: Numeric, setup: ScalingSetup) -> Optional[float]:
        v = parse_number(eng)
        if v is None:
            return None
        return LinearScaler.linear_scale(v, setup.eng, setup.raw)

    @staticmethod
    def raw_to_eng_display(raw: Numeric, setup: ScalingSetup) -> str:
        return format_quantity(LinearScaler.raw_to_eng(raw, setup), SCALING_PRECISION, Trim.INTEGRAL)

    @staticmethod
    def eng_to_raw_display(eng: Numeric, setup: ScalingSetup) -> str:
        return format_quantity(LinearScaler.eng_to_raw(eng, setup), SCALING_PRECISION, Trim.INTEGRAL)

    @staticmethod
    def code_snippet(template: str, setup: ScalingSetup) -> Optional[str]:
        """
        Fills a code template (or the name of a built-in one) with the resolved constants.
        Available fields: raw_min, raw_max, eng_min, eng_max, raw_span, eng_span.
        """
        if setup.raw.span == 0 or setup.eng.span == 0:
            return None
        text = SNIPPET_TEMPLATES.get(template, template)
        fields = {
            "raw_min": format_literal(setup.raw.min),
            "raw_max": format_literal(setup.raw.max),
            "eng_min": format_literal(setup.eng.min),
            "eng_max": format_literal(setup.eng.max),
            "raw_span": format_literal(setup.raw.span),
            "eng_span": format_literal(setup.eng.span),
        }
        try:
            return text.format(**fields)
        except (KeyError, IndexError) as e:
            raise ValueError(f"Unknown template field: {e}") from e

    @staticmethod
    def scaling_table(setup: ScalingSetup, steps: int = 4) -> List[Dict[str, float]]:
        """Breakpoints at evenly spaced percentages of the raw span (0, 25, ... 100 %)."""
        if steps < 1 or setup.raw.span == 0 or setup.eng.span == 0:
            return []
        rows = []
        for i in range(steps + 1):
            percent = 100.0 * i / steps
            raw = setup.raw.min + setup.raw.span * i / steps
            rows.append({"percent": percent, "raw": raw, "eng": LinearScaler.linear_scale(raw, setup.raw, setup.eng)})
        return rows
