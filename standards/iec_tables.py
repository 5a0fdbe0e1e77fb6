from core.models import MountingType, EnclosureMaterial

TABLES_VERSION = "IEC 60751:2022 / IEC TR 60890:2022"

# IEC 60751 - Callendar-Van Dusen coefficients, platinum RTD (alpha = 0.00385)
PT100_R0 = 100.0
CVD_A = 3.9083e-3
CVD_B = -5.775e-7

# Effective surface factors per mounting (IEC TR 60890 / VDE 0660-507)
# Format: {Mounting: (FrontBack H*W, Sides H*D, Top W*D)}
# Each factor multiplies a single face area and already accounts for both faces of the pair.
SURFACE_FACTORS = {
    MountingType.FREE_STANDING: (1.8, 1.8, 1.4),
    MountingType.WALL_MOUNTED: (1.4, 1.8, 1.4),
    MountingType.GROUND_MOUNTED: (1.8, 1.8, 0.7),
    MountingType.GROUND_AND_WALL: (1.4, 1.8, 0.7),
}

# Heat transfer coefficient k in W/(m2*K)
ENCLOSURE_HEAT_TRANSFER = {
    EnclosureMaterial.PAINTED_STEEL: 5.5,
    EnclosureMaterial.STAINLESS_STEEL: 4.5,
    EnclosureMaterial.ALUMINUM: 12.0,
    EnclosureMaterial.POLYCARBONATE: 3.5,
}

WATTS_TO_BTU_HR = 3.41
CFM_FACTOR = 3.16  # CFM = 3.16 * W / dT(C)

# Typical dissipation of panel components (W)
HEAT_SOURCE_CATALOG = {
    # VFDs - Generic
    "VFD (1 HP, 0.75 kW)": 50,
    "VFD (3 HP, 2.2 kW)": 110,
    "VFD (5 HP, 3.7 kW)": 150,
    "VFD (10 HP, 7.5 kW)": 250,
    "VFD (20 HP, 15 kW)": 480,
    "VFD (50 HP, 37 kW)": 1100,
    # VFDs - Specific
    "PowerFlex 525 (Frame A)": 50,
    "PowerFlex 525 (Frame B)": 90,
    "PowerFlex 525 (Frame C)": 145,
    "Sinamics G120 (FSA)": 75,
    "Sinamics G120 (FSB)": 125,
    # Power Supplies
    "Power Supply (5A, 120W)": 15,
    "Power Supply (10A, 240W)": 30,
    "Power Supply (20A, 480W)": 55,
    # PLCs
    "PLC CPU (CompactLogix)": 12,
    "PLC CPU (MicroLogix)": 8,
    "PLC I/O Module (Digital, 16pt)": 5,
    "PLC I/O Module (Analog, 8ch)": 7,
    "PLC I/O Module (Relay Output, 8pt)": 8,
    # Others
    "Industrial PC": 80,
    "Network Switch (8-port, unmanaged)": 10,
    "Safety Relay": 5,
    "Contactor (NEMA Size 0/1)": 10,
    "Contactor (NEMA Size 2/3)": 25,
    "Line Reactor (10A)": 20,
    "Line Reactor (25A)": 45,
}
