from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

class Phase(Enum):
    SINGLE = 1
    THREE = 3

class ConductorMaterial(Enum):
    COPPER = "Copper"
    ALUMINUM = "Aluminum"

class InsulationRating(Enum):
    TEMP_60 = 60
    TEMP_75 = 75
    TEMP_90 = 90

class DistanceUnit(Enum):
    FEET = "ft"
    METERS = "m"

class DropStatus(Enum):
    ACCEPTABLE = "acceptable"      # < 3 %
    CAUTION = "caution"            # 3 - 5 %
    UNACCEPTABLE = "unacceptable"  # > 5 %

class RtdStatus(Enum):
    OK = "ok"
    BELOW_RANGE = "below_range"  # R < R0, sub-zero domain
    INVALID = "invalid"

class QuantityFamily(Enum):
    PRESSURE = "pressure"
    TEMPERATURE = "temperature"
    FLOW = "flow"
    DISTANCE = "distance"
    TORQUE = "torque"

class MountingType(Enum):
    FREE_STANDING = "free_standing"
    WALL_MOUNTED = "wall_mounted"
    GROUND_MOUNTED = "ground_mounted"
    GROUND_AND_WALL = "ground_and_wall"

class EnclosureMaterial(Enum):
    PAINTED_STEEL = "Painted steel"
    STAINLESS_STEEL = "Stainless steel"
    ALUMINUM = "Aluminum"
    POLYCARBONATE = "Polycarbonate"

class RawPreset(Enum):
    CUSTOM = "custom"
    CURRENT_4_20MA = "raw_4_20ma"
    VOLTAGE_0_10V = "raw_0_10v"
    ROCKWELL_4_20MA = "raw_rockwell_4_20ma"
    SIEMENS_4_20MA = "raw_siemens_4_20ma"
    UNSIGNED_12 = "raw_unsigned_12"
    UNSIGNED_14 = "raw_unsigned_14"
    UNSIGNED_16 = "raw_unsigned_16"
    SIGNED_15 = "raw_signed_15"
    ROCKWELL_10V = "raw_rockwell_10v"
    SIEMENS_10V = "raw_siemens_10v"

class EngPreset(Enum):
    CUSTOM = "custom"
    PERCENT = "eng_percent"
    FREQ_60HZ = "eng_freq_60hz"
    SPEED_1800RPM = "eng_speed_1800rpm"
    TORQUE_300 = "eng_torque_300"
    PSI_150 = "eng_psi_150"
    CELSIUS_100 = "eng_celsius_100"
    FAHRENHEIT_212 = "eng_fahrenheit_212"
    GPM_500 = "eng_gpm_500"
    LITERS_1000 = "eng_liters_1000"

@dataclass(frozen=True)
class ScaleRange:
    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min

@dataclass(frozen=True)
class UnitDefinition:
    """display = canonical * scale + offset"""
    scale: float
    offset: float = 0.0

@dataclass(frozen=True)
class EnclosureGeometry:
    height_mm: float
    width_mm: float
    depth_mm: float

@dataclass
class RtdResult:
    status: RtdStatus
    temperature_c: Optional[float] = None
    message: str = ""

@dataclass
class MotorProtectionResult:
    voltage: int
    horsepower: str
    fla: float
    min_conductor_ampacity: float
    conductor_awg: str  # "N/A" when no table entry is large enough
    overload_range: Tuple[float, float]
    breaker_rating: int
    fuse_rating: int
    nema_starter: str = "N/A"

@dataclass
class VoltageDropResult:
    drop_volts: float
    drop_percent: float
    load_voltage: float
    status: DropStatus
    suggestion: Optional[str] = None
    formula: str = ""

@dataclass
class ThermalResult:
    surface_area_m2: float
    delta_t: float
    internal_heat_w: float
    passive_loss_w: float
    required_cooling_w: float
    cooling_required: bool = False
    airflow_cfm: Optional[float] = None
    cooling_btu_hr: Optional[float] = None
    recommended_btu_hr: Optional[int] = None

@dataclass
class OverloadSetting:
    nameplate_amps: float
    service_factor: float
    service_factor_amps: float
    max_setting_amps: float
    reference_notes: str = field(default="NEC 430.32(A)(1)")

class EncoderMode(Enum):
    X1 = 1
    X4 = 4  # quadrature, both edges of A and B

class Mechanism(Enum):
    DIRECT = "direct"
    GEARBOX = "gearbox"
    LEADSCREW = "leadscrew"
    PULLEY = "pulley"
    RACK = "rack"

class LinearUnit(Enum):
    MM = "mm"
    INCH = "in"

class SpeedUnit(Enum):
    M_S = "m/s"
    MM_S = "mm/s"
    RPM = "rpm"

class FrequencyStatus(Enum):
    OK = "ok"              # <= 1 kHz, any input card
    CAUTION = "caution"    # <= 10 kHz, check the card's input filter
    CRITICAL = "critical"  # high-speed counter required

@dataclass
class DcSupplyResult:
    total_nominal_a: float
    peak_inrush_a: float
    required_a: float
    recommended_a: float

@dataclass
class EncoderResult:
    counts_per_rev: float     # at the output shaft
    resolution: float         # unit per count
    scale_factor: float       # counts per unit
    unit: str                 # "deg", "mm" or "in"
    angular: bool
    required_frequency_hz: Optional[float] = None
    frequency_status: Optional[FrequencyStatus] = None

@dataclass
class OhmsResult:
    voltage: float
    current: float
    resistance: float
    power: float
    formula: str
