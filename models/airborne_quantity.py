"""
Airborne Quantity (AQ) model.

Estimates the rate (kg/s) at which material becomes airborne after a loss
of containment, following the Dow Chemical Exposure Index guide:

  - Gas releases use a choked-flow style expression driven by absolute
    pressure, molecular weight and temperature.
  - Liquid releases combine the immediately flashing fraction (vapour plus
    entrained aerosol) with evaporation from the resulting pool.  If enough
    of the liquid flashes, the whole release rate is taken as airborne.

Convention:
  - Temperatures in °C (converted with the coarse ``KELVIN_OFFSET``).
  - Pressures in kPa, release diameter in inches, lengths in meters.
  - No input validation: NaN or arithmetic errors propagate to the caller.
"""

import logging
from typing import Optional, Protocol

import numpy as np

from config import (
    DEFAULT_ATMOSPHERIC_PRESSURE,
    DEFAULT_HEAT_CAPACITY_TO_LATENT_HEAT_RATIO,
    FLASH_AEROSOL_FACTOR,
    FLASH_FRACTION_LIMIT,
    GAS_RELEASE_COEFFICIENT,
    GRAVITY,
    KELVIN_OFFSET,
    LIQUID_RELEASE_COEFFICIENT,
    MAX_RELEASE_TIME,
    MM_PER_INCH,
    POOL_AREA_EXPONENT,
    POOL_DEPTH,
    POOL_EVAPORATION_COEFFICIENT,
)
from models.process_variables import ProcessVariables, ReleaseType

logger = logging.getLogger(__name__)


class DiagnosticSink(Protocol):
    """Receiver for non-fatal diagnostics.  A ``logging.Logger`` qualifies."""

    def warning(self, msg: str, *args) -> None: ...


def absolute_pressure(P_g: float, P_a: Optional[float] = None) -> float:
    """Gauge plus ambient pressure; ambient defaults to one standard atmosphere."""
    return P_g + (DEFAULT_ATMOSPHERIC_PRESSURE if P_a is None else P_a)


def gas_airborne_quantity(pv: ProcessVariables) -> float:
    """
    Airborne quantity for a gas release.

        AQ = 4.571e-6 * P_abs * sqrt(mw / (T + 273))

    Args:
        pv: Process variables; uses ``P_g``, ``P_a``, ``mw`` and ``T``.

    Returns:
        AQ in kg/s.  NaN when ``mw / (T + 273)`` is negative.
    """
    return (
        GAS_RELEASE_COEFFICIENT
        * absolute_pressure(pv.P_g, pv.P_a)
        * np.sqrt(pv.mw / (pv.T + KELVIN_OFFSET))
    )


def liquid_release_rate(
    diameter: float,
    density: float,
    pressure: float,
    height: float,
) -> float:
    """
    Liquid mass release rate through a hole (kg/s).

        L = 9.44e-7 * (d * 25.4)^2 * rho * sqrt(1000 * P_g / rho + 9.81 * h)

    Args:
        diameter: Hole diameter in inches.
        density: Liquid density in kg/m^3.
        pressure: Gauge pressure in kPa.
        height: Liquid head above the hole in meters.
    """
    diameter_mm = diameter * MM_PER_INCH
    head = 1000 * pressure / density + GRAVITY * height
    return LIQUID_RELEASE_COEFFICIENT * diameter_mm ** 2 * density * np.sqrt(head)


def flash_fraction(
    heat_capacity_to_latent_heat_ratio: Optional[float],
    operating_temperature: float,
    boiling_point: float,
) -> float:
    """Fraction of liquid flashing to vapour: F_v = (Cp/Hv) * (T - T_b)."""
    ratio = (
        DEFAULT_HEAT_CAPACITY_TO_LATENT_HEAT_RATIO
        if heat_capacity_to_latent_heat_ratio is None
        else heat_capacity_to_latent_heat_ratio
    )
    return ratio * (operating_temperature - boiling_point)


def pool_quantity(F_v: float, total_released: float) -> float:
    """Mass left in the pool after the flash and aerosol losses."""
    return total_released * (1 - FLASH_AEROSOL_FACTOR * F_v)


def flash_airborne_quantity(F_v: float, release_rate: float) -> float:
    return FLASH_AEROSOL_FACTOR * F_v * release_rate


def pool_area(pool_mass: float, density: float, pool_depth: float = POOL_DEPTH) -> float:
    """Unconfined pool area (m^2) for a pool spread to ``1 / pool_depth`` meters."""
    return pool_depth * (pool_mass / density)


def pool_evaporation_rate(
    area: float,
    mw: float,
    vapor_pressure: float,
    temperature: float,
) -> float:
    """
    Evaporation rate from a liquid pool (kg/s).

        AQ_p = 9.0e-4 * A_p^0.95 * mw * P_v / (T + 273)

    Args:
        area: Pool area in m^2.
        mw: Molecular weight.
        vapor_pressure: Vapor pressure in kPa.
        temperature: Pool temperature in °C.
    """
    return (
        POOL_EVAPORATION_COEFFICIENT
        * np.power(area, POOL_AREA_EXPONENT)
        * (mw * vapor_pressure)
        / (temperature + KELVIN_OFFSET)
    )


def liquid_airborne_quantity(pv: ProcessVariables) -> float:
    """
    Airborne quantity for a liquid release.

    Steps:
        1. Release rate L through the hole.
        2. Flash fraction F_v.  If F_v >= 0.2 the release is treated as
           fully flashing and L is returned.
        3. Total release over at most 900 s, bounded by the inventory.
        4. Flash contribution 5 * F_v * L plus evaporation from the pool
           that forms from the remainder.  The pool sits at the hotter of
           operating and ambient temperature, but never above boiling.

    Returns:
        AQ in kg/s, never more than L.
    """
    L = liquid_release_rate(pv.diameter, pv.density, pv.P_g, pv.height)
    F_v = flash_fraction(pv.heat_capacity_to_latent_heat_ratio, pv.T, pv.T_b)
    logger.debug("Liquid release rate L=%.6g kg/s, flash fraction F_v=%.4f", L, F_v)

    if F_v >= FLASH_FRACTION_LIMIT:
        logger.debug("F_v >= %.2f, release fully airborne", FLASH_FRACTION_LIMIT)
        return L

    total_released = np.minimum(L * MAX_RELEASE_TIME, pv.inventory)
    pool_mass = pool_quantity(F_v, total_released)
    aq_flash = flash_airborne_quantity(F_v, L)

    if pv.diked_area is None:
        area = pool_area(pool_mass, pv.density)
    else:
        area = pv.diked_area

    T_char = np.minimum(pv.T_b, np.maximum(pv.T, pv.T_a))
    aq_pool = pool_evaporation_rate(area, pv.mw, pv.P_v, T_char)
    logger.debug(
        "Pool mass=%.6g kg, area=%.6g m^2, T_char=%.2f C, AQ_f=%.6g, AQ_p=%.6g",
        pool_mass, area, T_char, aq_flash, aq_pool,
    )

    return np.minimum(aq_pool + aq_flash, L)


def compute_airborne_quantity(
    release_type: ReleaseType,
    process_variables: ProcessVariables,
    fallback: Optional[float] = None,
    sink: Optional[DiagnosticSink] = None,
) -> float:
    """
    Dispatch to the gas or liquid airborne quantity model.

    Args:
        release_type: ``ReleaseType.GAS`` or ``ReleaseType.LIQUID``.
        process_variables: Properties of the material and release point.
        fallback: Value returned for an unrecognized release type.
        sink: Receives the warning for an unrecognized release type.
              Defaults to this module's logger.

    Returns:
        AQ in kg/s, or ``fallback`` (``0.0`` if not given) when the
        release type is not recognized.
    """
    if release_type == ReleaseType.GAS:
        return gas_airborne_quantity(process_variables)
    if release_type == ReleaseType.LIQUID:
        return liquid_airborne_quantity(process_variables)

    (sink if sink is not None else logger).warning("Invalid release type: %r", release_type)
    return 0.0 if fallback is None else fallback
