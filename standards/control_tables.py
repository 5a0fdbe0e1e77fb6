TABLES_VERSION = "2024.1"

# Typical 24 VDC panel loads
# Format: {Name: (Nominal mA, Inrush mA)}
DC_LOAD_CATALOG = {
    # PLCs
    "PLC CPU (CompactLogix)": (400, 0),
    "PLC CPU (S7-1200)": (350, 0),
    "PLC CPU (S7-1500)": (700, 0),
    "PLC CPU (Micro820)": (150, 0),
    # I/O
    "Digital I/O Module (16 pt)": (120, 0),
    "Analog I/O Module (8 ch)": (180, 0),
    "IO-Link Master Block": (200, 0),
    # HMIs
    'HMI Basic (7")': (500, 1500),
    'HMI Comfort Panel (12")': (1200, 3000),
    # Field devices
    "Interface Relay (24VDC)": (25, 50),
    "Safety Relay": (50, 100),
    "Managed Network Switch": (250, 0),
    "Proximity Sensor": (15, 0),
    "Photoelectric Sensor": (20, 0),
    "Solenoid Valve": (100, 250),
    "Valve Manifold (4-station)": (400, 1000),
}

# Standard DIN-rail 24 VDC supply ratings (A), ascending
DC_SUPPLY_SIZES = [1, 2.5, 5, 10, 20, 40]

DEFAULT_SAFETY_PERCENT = 25.0
DEFAULT_GROWTH_PERCENT = 20.0

# Encoder pulse frequency limits (Hz)
STANDARD_INPUT_MAX_HZ = 1000
FILTERED_INPUT_MAX_HZ = 10000

MM_PER_INCH = 25.4
DEGREES_PER_REV = 360.0
