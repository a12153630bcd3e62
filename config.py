"""
Global configuration and constants for the Chemical Exposure Index calculator.
"""

from types import MappingProxyType

# --- Physical Constants ---
DEFAULT_ATMOSPHERIC_PRESSURE = 101.325  # kPa
KELVIN_OFFSET = 273                     # °C -> K (coarse, as used by the Dow CEI guide)
MM_PER_INCH = 25.4
GRAVITY = 9.81                          # m/s^2

# --- Gas Release ---
GAS_RELEASE_COEFFICIENT = 4.571e-6

# --- Liquid Release ---
LIQUID_RELEASE_COEFFICIENT = 9.44e-7
DEFAULT_HEAT_CAPACITY_TO_LATENT_HEAT_RATIO = 0.0044  # Cp/Hv, 1/°C
FLASH_FRACTION_LIMIT = 0.2     # F_v at or above this: all liquid is airborne (no pool)
FLASH_AEROSOL_FACTOR = 5       # Airborne multiple of flashed fraction (vapour + entrained spray)
MAX_RELEASE_TIME = 900         # seconds
POOL_DEPTH = 100               # 1/m. Example: 1 cm deep pool = 100 (1/m)
POOL_EVAPORATION_COEFFICIENT = 9.0e-4
POOL_AREA_EXPONENT = 0.95

# --- Exposure Scoring ---
# Emergency Response Planning Guideline concentrations (mg/m^3) by level.
# Level 1 is the most sensitive threshold, level 3 the least.
EPRG = MappingProxyType({
    1: 22,
    2: 111,
    3: 11060,
})
CEI_COEFFICIENT = 655.1
HAZARD_DISTANCE_COEFFICIENT = 6551
MAX_CEI = 1000
MAX_HAZARD_DISTANCE = 1e4      # meters

# --- Fire & Explosion Index ---
MAX_UNIT_HAZARD = 8
EXPOSURE_RADIUS_FACTOR = 0.84  # Radius of exposure (ft) per unit of F&EI
SMALL_EQUIPMENT_DIAMETER = 4   # inches; below this a fixed rupture size applies
SMALL_RUPTURE_DIAMETER = 2     # inches
RUPTURE_AREA_FRACTION = 0.2    # Fraction of cross-section opened by a large rupture
