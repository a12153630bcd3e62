"""
Process data model for release calculations.

Describes the contained material and the equipment it is released from.
Temperatures are in °C, pressures in kPa, lengths in meters except the
release diameter, which is given in inches as in the Dow CEI guide.
"""

import dataclasses
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class ReleaseType(IntEnum):
    """Phase of the released material; selects the airborne quantity model."""

    LIQUID = 1
    GAS = 2


class EquipmentType(IntEnum):
    VESSEL = 1
    PIPE = 2
    PRESSURE_RELIEF_DEVICE = 3


@dataclass(frozen=True)
class ProcessVariables:
    """Physical and process properties of a potential release.

    Args:
        P_g: Gauge pressure of the contained material (kPa).
        P_v: Vapor pressure at operating/ambient conditions (kPa).
        T: Operating temperature (°C).
        T_b: Normal boiling point (°C).
        T_a: Ambient temperature (°C).
        mw: Molecular weight (g/mol).
        height: Liquid head above the release point (m).
        density: Liquid density (kg/m^3).
        diameter: Release-point diameter (inches).
        inventory: Total mass available for release (kg).
        P_a: Ambient pressure (kPa). ``None`` uses the standard atmosphere.
        diked_area: Containment dike area (m^2). ``None`` lets the pool
            spread to a depth set by ``POOL_DEPTH``.
        heat_capacity_to_latent_heat_ratio: Cp/Hv (1/°C) driving the flash
            fraction. ``None`` uses the empirical default.

    No physical validation is done here; out-of-range values surface as
    NaN or arithmetic errors from the formulas that consume them.
    """

    P_g: float
    P_v: float
    T: float
    T_b: float
    T_a: float
    mw: float
    height: float
    density: float
    diameter: float
    inventory: float
    P_a: Optional[float] = None
    diked_area: Optional[float] = None
    heat_capacity_to_latent_heat_ratio: Optional[float] = None

    def replace(self, **changes) -> "ProcessVariables":
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)
