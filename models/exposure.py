"""
Exposure scoring.

Maps an airborne quantity onto the Chemical Exposure Index and onto the
distances at which each Emergency Response Planning Guideline (EPRG)
concentration is reached.  Both scores grow with the square root of AQ
and are clamped at fixed caps.

Functions accept scalars or numpy arrays.
"""

from typing import Dict, Mapping

import numpy as np

from config import (
    CEI_COEFFICIENT,
    EPRG,
    HAZARD_DISTANCE_COEFFICIENT,
    MAX_CEI,
    MAX_HAZARD_DISTANCE,
)


def _get_eprg(level: int, eprg: Mapping[int, float]) -> float:
    """Return the EPRG concentration for a hazard level."""
    if level not in eprg:
        raise ValueError(
            f"Unknown hazard level {level!r}. Use one of {sorted(eprg)}."
        )
    return eprg[level]


def compute_cei(aq, eprg: Mapping[int, float] = EPRG):
    """
    Chemical Exposure Index.

        CEI = min(1000, 655.1 * sqrt(AQ / EPRG-2))

    Args:
        aq: Airborne quantity in kg/s (scalar or array).
        eprg: EPRG concentrations by level; only level 2 is used.

    Returns:
        CEI, same shape as ``aq``.
    """
    return np.minimum(MAX_CEI, CEI_COEFFICIENT * np.sqrt(aq / _get_eprg(2, eprg)))


def compute_hazard_distance(aq, level: int, eprg: Mapping[int, float] = EPRG):
    """
    Distance (m) downwind at which the EPRG level concentration is reached.

        HD = min(10000, 6551 * sqrt(AQ / EPRG[level]))

    Args:
        aq: Airborne quantity in kg/s (scalar or array).
        level: EPRG level 1, 2 or 3.  Any other level is a caller error
               and raises ``ValueError``.
        eprg: EPRG concentrations by level.

    Returns:
        Hazard distance in meters, same shape as ``aq``.
    """
    return np.minimum(
        MAX_HAZARD_DISTANCE,
        HAZARD_DISTANCE_COEFFICIENT * np.sqrt(aq / _get_eprg(level, eprg)),
    )


def compute_hazard_distances(aq, eprg: Mapping[int, float] = EPRG) -> Dict[int, float]:
    """Hazard distances for every level in ``eprg``, keyed by level."""
    return {level: compute_hazard_distance(aq, level, eprg) for level in sorted(eprg)}
