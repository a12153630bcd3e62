"""Tests for the reference case command-line run."""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "experiments"))

from run_reference_case import main, run_reference_case
from data.scenarios import butadiene_liquid_release
from models.airborne_quantity import gas_airborne_quantity, liquid_airborne_quantity
from models.process_variables import ReleaseType


class TestRunReferenceCase:

    def test_default_is_diked_liquid(self):
        result = run_reference_case()
        assert result.airborne_quantity == liquid_airborne_quantity(butadiene_liquid_release())

    def test_release_type_override(self):
        result = run_reference_case(release_type=ReleaseType.GAS)
        assert result.airborne_quantity == gas_airborne_quantity(butadiene_liquid_release())

    def test_unknown_scenario_raises(self):
        with pytest.raises(ValueError):
            run_reference_case("Chlorine")


class TestMain:

    def test_prints_summary_then_distances(self, capsys):
        result = main([])
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 2
        assert lines[0].startswith("{'AQ':") and "'CEI'" in lines[0]
        assert lines[1].startswith("{'HD1':") and "'HD3'" in lines[1]
        assert str(result.summary_record()) == lines[0]

    def test_scenario_option(self, capsys):
        result = main(["--scenario", "Butadiene gas"])
        assert result.release_type == ReleaseType.GAS

    def test_release_type_option(self, capsys):
        result = main(["--release-type", "gas"])
        assert result.release_type == ReleaseType.GAS

    def test_invalid_scenario_exits(self, capsys):
        with pytest.raises(SystemExit):
            main(["--scenario", "Chlorine"])
