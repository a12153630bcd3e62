"""
Pre-defined release scenarios.

All scenarios describe 1,3-butadiene held as a pressurized liquid
(MW 54.09, normal boiling point -4.4 °C) released through a 2 inch
connection.  Each scenario dict has:
    - name: short label used by the CLI and the Streamlit sidebar
    - release_type: ReleaseType selecting the airborne quantity model
    - process_variables: ProcessVariables for the release
    - description: human-readable summary
"""

from typing import List

from models.process_variables import ProcessVariables, ReleaseType


def _butadiene(**overrides) -> ProcessVariables:
    """Base butadiene storage conditions at 25 °C, 2300 kPa gauge."""
    base = ProcessVariables(
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
    return base.replace(**overrides) if overrides else base


def butadiene_liquid_release() -> ProcessVariables:
    """Reference liquid case: diked, with a measured Cp/Hv of 5.45e-3 1/°C.

    F_v = 0.00545 * 29.4 = 0.160, so a pool forms inside the 200 m^2 dike.
    """
    return _butadiene(heat_capacity_to_latent_heat_ratio=5.45e-3, diked_area=200.0)


def butadiene_unconfined_release() -> ProcessVariables:
    """Same as the reference case but with no dike; the pool spreads to 1 cm."""
    return _butadiene(heat_capacity_to_latent_heat_ratio=5.45e-3)


def butadiene_hot_release() -> ProcessVariables:
    """Butadiene at 60 °C.  F_v = 0.0044 * 64.4 = 0.283, fully flashing."""
    return _butadiene(T=60.0)


def butadiene_gas_release() -> ProcessVariables:
    """Vapour-space release from the same vessel."""
    return _butadiene()


def get_scenarios() -> List[dict]:
    """Return all named scenarios."""
    return [
        {
            "name": "Butadiene liquid (diked)",
            "release_type": ReleaseType.LIQUID,
            "process_variables": butadiene_liquid_release(),
            "description": "Liquid release into a 200 m^2 dike, pool evaporation plus flash",
        },
        {
            "name": "Butadiene liquid (unconfined)",
            "release_type": ReleaseType.LIQUID,
            "process_variables": butadiene_unconfined_release(),
            "description": "Liquid release with no dike, pool spreads to 1 cm depth",
        },
        {
            "name": "Butadiene liquid (hot)",
            "release_type": ReleaseType.LIQUID,
            "process_variables": butadiene_hot_release(),
            "description": "Liquid at 60 C, flash fraction above 0.2, no pool",
        },
        {
            "name": "Butadiene gas",
            "release_type": ReleaseType.GAS,
            "process_variables": butadiene_gas_release(),
            "description": "Vapour release at 2300 kPa gauge and 25 C",
        },
    ]


def get_scenario(name: str) -> dict:
    """Look up a scenario by name."""
    scenarios = {s["name"]: s for s in get_scenarios()}
    if name not in scenarios:
        raise ValueError(
            f"Unknown scenario '{name}'. Choose from: {', '.join(scenarios)}"
        )
    return scenarios[name]
