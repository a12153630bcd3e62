"""
Release assessment.

Runs the full CEI pipeline for one release scenario:
ProcessVariables + ReleaseType -> AQ -> CEI and hazard distances.
"""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from config import EPRG
from models.airborne_quantity import DiagnosticSink, compute_airborne_quantity
from models.exposure import compute_cei, compute_hazard_distances
from models.process_variables import ProcessVariables, ReleaseType


@dataclass(frozen=True)
class ExposureAssessment:
    """Result of a single release assessment.

    Args:
        release_type: Release type the assessment was run with.
        airborne_quantity: AQ in kg/s.
        cei: Chemical Exposure Index (0-1000).
        hazard_distances: Distance in meters keyed by EPRG level (1, 2, 3).
        eprg: EPRG concentrations (mg/m^3) the scores were computed with.
    """

    release_type: ReleaseType
    airborne_quantity: float
    cei: float
    hazard_distances: Dict[int, float]
    eprg: Mapping[int, float] = field(default_factory=lambda: EPRG)

    def summary_record(self) -> dict:
        return {"AQ": float(self.airborne_quantity), "CEI": float(self.cei)}

    def distance_record(self) -> dict:
        return {
            f"HD{level}": float(distance)
            for level, distance in sorted(self.hazard_distances.items())
        }


def assess_release(
    release_type: ReleaseType,
    process_variables: ProcessVariables,
    fallback: Optional[float] = None,
    sink: Optional[DiagnosticSink] = None,
    eprg: Mapping[int, float] = EPRG,
) -> ExposureAssessment:
    """
    Compute AQ, CEI and the three hazard distances for a release.

    Args:
        release_type: ``ReleaseType.GAS`` or ``ReleaseType.LIQUID``.
        process_variables: Properties of the material and release point.
        fallback: AQ used when ``release_type`` is not recognized.
        sink: Diagnostic sink for the unrecognized release type warning.
        eprg: EPRG concentrations by level.

    Returns:
        ExposureAssessment with all scores.
    """
    aq = compute_airborne_quantity(release_type, process_variables, fallback, sink)
    return ExposureAssessment(
        release_type=release_type,
        airborne_quantity=aq,
        cei=compute_cei(aq, eprg),
        hazard_distances=compute_hazard_distances(aq, eprg),
        eprg=eprg,
    )
