"""Shared fixtures for the Chemical Exposure Index test suite."""

import sys
import os
import pytest

# Ensure project root is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.process_variables import ProcessVariables


class RecordingSink:
    """Diagnostic sink that keeps every warning it receives."""

    def __init__(self):
        self.messages = []

    def warning(self, msg, *args):
        self.messages.append(msg % args if args else msg)


@pytest.fixture
def recording_sink():
    return RecordingSink()


@pytest.fixture
def gas_variables():
    """Butadiene vapour at 2300 kPa gauge and 25 C, no optional fields."""
    return ProcessVariables(
        P_g=2300.0,
        P_v=101.325,
        T=25.0,
        T_b=-4.4,
        T_a=25.0,
        mw=54.09,
        height=1.9,
        density=614.9,
        diameter=2.0,
        inventory=200.0,
    )


@pytest.fixture
def liquid_variables(gas_variables):
    """Butadiene liquid with Cp/Hv = 0.00545 into a 200 m^2 dike (F_v ~ 0.160)."""
    return gas_variables.replace(
        heat_capacity_to_latent_heat_ratio=5.45e-3,
        diked_area=200.0,
    )


@pytest.fixture
def flashing_variables(gas_variables):
    """Butadiene liquid at 60 C with the default Cp/Hv (F_v ~ 0.283)."""
    return gas_variables.replace(T=60.0)
