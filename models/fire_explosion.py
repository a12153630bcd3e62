"""
Fire & Explosion Index (F&EI) helpers.

Small formulas from the same hazard-ranking family as the CEI.  They are
independent of the airborne quantity pipeline.
"""

import numpy as np

from config import (
    EXPOSURE_RADIUS_FACTOR,
    MAX_UNIT_HAZARD,
    RUPTURE_AREA_FRACTION,
    SMALL_EQUIPMENT_DIAMETER,
    SMALL_RUPTURE_DIAMETER,
)
from models.process_variables import EquipmentType


def process_unit_hazard(f1: float, f2: float) -> float:
    """Process unit hazard factor F3 = F1 * F2, capped at 8."""
    return np.minimum(MAX_UNIT_HAZARD, f1 * f2)


def fire_explosion_index(f3: float, mf: float) -> float:
    """F&EI = F3 * MF (material factor)."""
    return f3 * mf


def exposure_radius(fei: float) -> float:
    return fei * EXPOSURE_RADIUS_FACTOR


def exposure_area(fei: float) -> float:
    """Area of the circle of exposure around the process unit."""
    return np.pi * exposure_radius(fei) ** 2


def rupture_diameter(
    diameter: float,
    equipment_type: EquipmentType = EquipmentType.VESSEL,
) -> float:
    """
    Credible rupture size for equipment of the given diameter (inches).

    Below 4 inches a fixed 2 inch rupture is assumed.  Otherwise the
    opening is 20% of the cross-section, pi * (d / 2)^2 * 0.2.

    ``equipment_type`` is accepted for call-site compatibility; all
    equipment types currently share the same rule.
    """
    if diameter < SMALL_EQUIPMENT_DIAMETER:
        return SMALL_RUPTURE_DIAMETER
    return (diameter / 2) ** 2 * np.pi * RUPTURE_AREA_FRACTION
