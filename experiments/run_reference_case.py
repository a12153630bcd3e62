#!/usr/bin/env python3
"""
Reference CEI calculation.

Runs one preset release scenario through the CEI pipeline and prints the
airborne quantity and CEI, followed by the three hazard distances.

Usage:
    uv run python experiments/run_reference_case.py
    uv run python experiments/run_reference_case.py --scenario "Butadiene gas"
    uv run python experiments/run_reference_case.py --release-type gas --verbose
"""

import sys
import os
import argparse
import logging

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from data.scenarios import get_scenario, get_scenarios
from models.assessment import ExposureAssessment, assess_release
from models.process_variables import ReleaseType

DEFAULT_SCENARIO = "Butadiene liquid (diked)"


def run_reference_case(scenario_name: str = DEFAULT_SCENARIO, release_type=None) -> ExposureAssessment:
    """Assess a named scenario, optionally overriding its release type."""
    scenario = get_scenario(scenario_name)
    if release_type is None:
        release_type = scenario["release_type"]
    return assess_release(release_type, scenario["process_variables"])


def main(argv=None):
    parser = argparse.ArgumentParser(description="Chemical Exposure Index reference case")
    parser.add_argument(
        "--scenario",
        default=DEFAULT_SCENARIO,
        choices=[s["name"] for s in get_scenarios()],
        help="Preset release scenario",
    )
    parser.add_argument(
        "--release-type",
        choices=[t.name.lower() for t in ReleaseType],
        help="Override the scenario's release type",
    )
    parser.add_argument("--verbose", action="store_true", help="Log intermediate quantities")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    release_type = ReleaseType[args.release_type.upper()] if args.release_type else None
    assessment = run_reference_case(args.scenario, release_type)

    print(assessment.summary_record())
    print(assessment.distance_record())
    return assessment


if __name__ == "__main__":
    main()
