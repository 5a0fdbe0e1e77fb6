from core.models import QuantityFamily, UnitDefinition, RawPreset, EngPreset

TABLES_VERSION = "2024.1"

# Unit conversion factors relative to one canonical unit per family
# Format: {Family: {Unit: UnitDefinition(scale, offset)}}, first unit is canonical
CONVERSION_TABLES = {
    QuantityFamily.PRESSURE: {
        "bar": UnitDefinition(1.0),
        "psi": UnitDefinition(14.5038),
        "kPa": UnitDefinition(100.0),
    },
    QuantityFamily.TEMPERATURE: {
        "C": UnitDefinition(1.0),
        "F": UnitDefinition(9 / 5, 32.0),
        "K": UnitDefinition(1.0, 273.15),
    },
    QuantityFamily.FLOW: {
        "L/min": UnitDefinition(1.0),
        "GPM": UnitDefinition(1 / 3.78541),
        "m3/h": UnitDefinition(1 / 16.6667),
    },
    QuantityFamily.DISTANCE: {
        "mm": UnitDefinition(1.0),
        "in": UnitDefinition(1 / 25.4),
        "ft": UnitDefinition(1 / 304.8),
    },
    QuantityFamily.TORQUE: {
        "N·m": UnitDefinition(1.0),
        "ft·lb": UnitDefinition(1 / 1.35582),
    },
}

# Analog input card raw ranges
# Format: {Preset: (min, max, unit)}
RAW_PRESETS = {
    RawPreset.CURRENT_4_20MA: (4.0, 20.0, "mA"),
    RawPreset.VOLTAGE_0_10V: (0.0, 10.0, "V"),
    RawPreset.ROCKWELL_4_20MA: (4000.0, 20000.0, "counts"),
    RawPreset.SIEMENS_4_20MA: (0.0, 27648.0, "counts"),
    RawPreset.UNSIGNED_12: (0.0, 4095.0, "counts"),
    RawPreset.UNSIGNED_14: (0.0, 16383.0, "counts"),
    RawPreset.UNSIGNED_16: (0.0, 65535.0, "counts"),
    RawPreset.SIGNED_15: (-32768.0, 32767.0, "counts"),
    RawPreset.ROCKWELL_10V: (-10000.0, 10000.0, "counts"),
    RawPreset.SIEMENS_10V: (-27648.0, 27648.0, "counts"),
}

ENG_PRESETS = {
    EngPreset.PERCENT: (0.0, 100.0, "%"),
    EngPreset.FREQ_60HZ: (0.0, 60.0, "Hz"),
    EngPreset.SPEED_1800RPM: (0.0, 1800.0, "RPM"),
    EngPreset.TORQUE_300: (0.0, 300.0, "%"),
    EngPreset.PSI_150: (0.0, 150.0, "PSI"),
    EngPreset.CELSIUS_100: (0.0, 100.0, "°C"),
    EngPreset.FAHRENHEIT_212: (32.0, 212.0, "°F"),
    EngPreset.GPM_500: (0.0, 500.0, "GPM"),
    EngPreset.LITERS_1000: (0.0, 1000.0, "L"),
}

# Scaling code templates, str.format fields:
# raw_min, raw_max, eng_min, eng_max, raw_span, eng_span
SNIPPET_TEMPLATES = {
    "Structured Text": (
        "// Structured Text (ST) Scaling Logic\n"
        "// Assumes inputs are REAL numbers\n"
        "Output_EU := (((Input_Raw - {raw_min}) * {eng_span}) / {raw_span}) + {eng_min};"
    ),
    "Rockwell SCP": (
        "SCP Input_Raw {raw_min} {raw_max} {eng_min} {eng_max} Output_EU"
    ),
    "Siemens NORM_X/SCALE_X": (
        "#norm := NORM_X(MIN := {raw_min}, VALUE := #Input_Raw, MAX := {raw_max});\n"
        "#Output_EU := SCALE_X(MIN := {eng_min}, VALUE := #norm, MAX := {eng_max});"
    ),
    "Python": (
        "def scale(raw):\n"
        "    return (raw - {raw_min}) * {eng_span} / {raw_span} + {eng_min}"
    ),
}
