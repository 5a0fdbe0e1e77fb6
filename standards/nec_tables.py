from core.models import ConductorMaterial

TABLES_VERSION = "NEC 2023"

# NEC Table 310.16 - Allowable Ampacities of Insulated Conductors
# Format: {SizeAWG: {TempRating: Amps}}
NEC_310_16_COPPER = {
    "14": {60: 15, 75: 20, 90: 25},
    "12": {60: 20, 75: 25, 90: 30},
    "10": {60: 30, 75: 35, 90: 40},
    "8":  {60: 40, 75: 50, 90: 55},
    "6":  {60: 55, 75: 65, 90: 75},
    "4":  {60: 70, 75: 85, 90: 95},
    "3":  {60: 85, 75: 100, 90: 115},
    "2":  {60: 95, 75: 115, 90: 130},
    "1":  {60: 110, 75: 130, 90: 145},
    "1/0": {60: 125, 75: 150, 90: 170},
    "2/0": {60: 145, 75: 175, 90: 195},
    "3/0": {60: 165, 75: 200, 90: 225},
    "4/0": {60: 195, 75: 230, 90: 260},
    "250": {60: 215, 75: 255, 90: 290},
    "300": {60: 240, 75: 285, 90: 320},
    "350": {60: 260, 75: 310, 90: 350},
    "400": {60: 280, 75: 335, 90: 380},
    "500": {60: 320, 75: 380, 90: 430},
    "600": {60: 350, 75: 420, 90: 475},
}

NEC_310_16_ALUMINUM = {
    "12": {60: 15, 75: 20, 90: 25},
    "10": {60: 25, 75: 30, 90: 35},
    "8":  {60: 35, 75: 40, 90: 45},
    "6":  {60: 40, 75: 50, 90: 55},
    "4":  {60: 55, 75: 65, 90: 75},
    "3":  {60: 65, 75: 75, 90: 85},
    "2":  {60: 75, 75: 90, 90: 100},
    "1":  {60: 85, 75: 100, 90: 115},
    "1/0": {60: 100, 75: 120, 90: 135},
    "2/0": {60: 115, 75: 135, 90: 150},
    "3/0": {60: 130, 75: 155, 90: 175},
    "4/0": {60: 150, 75: 180, 90: 205},
    "250": {60: 170, 75: 205, 90: 230},
    "300": {60: 195, 75: 230, 90: 260},
    "350": {60: 210, 75: 250, 90: 280},
    "400": {60: 225, 75: 270, 90: 305},
    "500": {60: 260, 75: 310, 90: 350},
    "600": {60: 285, 75: 340, 90: 385},
}

AMPACITY_TABLES = {
    ConductorMaterial.COPPER: NEC_310_16_COPPER,
    ConductorMaterial.ALUMINUM: NEC_310_16_ALUMINUM,
}

# Motor branch conductors: copper, 75C terminals. Ascending by ampacity.
WIRE_AMPACITY_75C = {size: amps[75] for size, amps in NEC_310_16_COPPER.items()}

# NEC 240.6(A) - Standard Ampere Ratings for Fuses and Inverse Time Circuit Breakers
BREAKER_RATINGS = [15, 20, 25, 30, 35, 40, 45, 50, 60, 70, 80, 90, 100, 110, 125, 150, 175, 200, 225, 250,
                   300, 350, 400, 450, 500, 600, 700, 800, 1000, 1200, 1600, 2000, 2500, 3000, 4000, 5000, 6000]

# Fuses add 1, 3, 6, 10 and 601 A
FUSE_RATINGS = sorted([1, 3, 6, 10, 601] + BREAKER_RATINGS)

# NEC Chapter 9, Table 8 - Conductor area in circular mils. Strictly increasing.
CIRCULAR_MILS = {
    "18": 1620,
    "16": 2580,
    "14": 4110,
    "12": 6530,
    "10": 10380,
    "8": 16510,
    "6": 26240,
    "4": 41740,
    "3": 52620,
    "2": 66360,
    "1": 83690,
    "1/0": 105600,
    "2/0": 133100,
    "3/0": 167800,
    "4/0": 211600,
    "250": 250000,
    "300": 300000,
    "350": 350000,
    "400": 400000,
    "500": 500000,
}

# Resistivity K in ohm-cmil/ft at 75C
CONDUCTOR_RESISTIVITY = {
    ConductorMaterial.COPPER: 12.9,
    ConductorMaterial.ALUMINUM: 21.2,
}

# NEC Table 430.250 - Full-Load Current, Three-Phase Alternating-Current Motors
# Format: {Voltage: {HP: Amps}}
MOTOR_FLA_430_250 = {
    200: {0.5: 2.5, 0.75: 3.7, 1: 4.8, 1.5: 6.9, 2: 7.8, 3: 11.0, 5: 17.5, 7.5: 25.3, 10: 32.2,
          15: 48.3, 20: 62.1, 25: 78.2, 30: 92, 40: 120, 50: 150, 60: 177, 75: 221, 100: 285},
    208: {0.5: 2.4, 0.75: 3.5, 1: 4.6, 1.5: 6.6, 2: 7.5, 3: 10.6, 5: 16.7, 7.5: 24.2, 10: 30.8,
          15: 46.2, 20: 59.4, 25: 74.8, 30: 88, 40: 114, 50: 143, 60: 169, 75: 211, 100: 273},
    230: {0.5: 2.2, 0.75: 3.2, 1: 4.2, 1.5: 6.0, 2: 6.8, 3: 9.6, 5: 15.2, 7.5: 22, 10: 28,
          15: 42, 20: 54, 25: 68, 30: 80, 40: 104, 50: 130, 60: 154, 75: 192, 100: 248},
    460: {0.5: 1.1, 0.75: 1.6, 1: 2.1, 1.5: 3.0, 2: 3.4, 3: 4.8, 5: 7.6, 7.5: 11, 10: 14,
          15: 21, 20: 27, 25: 34, 30: 40, 40: 52, 50: 65, 60: 77, 75: 96, 100: 124},
    575: {0.5: 0.9, 0.75: 1.3, 1: 1.7, 1.5: 2.4, 2: 2.7, 3: 3.9, 5: 6.1, 7.5: 9, 10: 11,
          15: 17, 20: 22, 25: 27, 30: 32, 40: 41, 50: 52, 60: 62, 75: 77, 100: 99},
}

# NEMA ICS 2 - Maximum HP per starter size, three-phase
# Format: {Voltage: [(Size, MaxHP), ...]} ascending
_NEMA_200V = [("00", 1.5), ("0", 3), ("1", 7.5), ("2", 10), ("3", 25), ("4", 40), ("5", 75)]
_NEMA_230V = [("00", 1.5), ("0", 3), ("1", 7.5), ("2", 15), ("3", 30), ("4", 50), ("5", 100)]
_NEMA_460V = [("00", 2), ("0", 5), ("1", 10), ("2", 25), ("3", 50), ("4", 100), ("5", 200)]

NEMA_STARTER_MAX_HP = {
    200: _NEMA_200V,
    208: _NEMA_200V,
    230: _NEMA_230V,
    460: _NEMA_460V,
    575: _NEMA_460V,
}
