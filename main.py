"""
Chemical Exposure Index Calculator — Streamlit Interface.

Run with:  streamlit run main.py
"""

import sys
import os

# Ensure the project root is on the Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import streamlit as st

from data.scenarios import get_scenarios
from models.airborne_quantity import flash_fraction, liquid_release_rate
from models.assessment import assess_release
from models.fire_explosion import (
    exposure_area,
    exposure_radius,
    fire_explosion_index,
    process_unit_hazard,
    rupture_diameter,
)
from models.process_variables import EquipmentType, ProcessVariables, ReleaseType
from visualization.plots import create_hazard_distance_bar, create_hazard_zone_figure
from config import (
    DEFAULT_ATMOSPHERIC_PRESSURE,
    DEFAULT_HEAT_CAPACITY_TO_LATENT_HEAT_RATIO,
    EPRG,
    FLASH_FRACTION_LIMIT,
    MAX_CEI,
    MAX_HAZARD_DISTANCE,
)


class StreamlitSink:
    """Diagnostic sink that shows engine warnings in the page."""

    def warning(self, msg: str, *args) -> None:
        st.warning(msg % args if args else msg)


# ── Page Config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Chemical Exposure Index",
    page_icon="☣️",
    layout="wide",
)

st.title("Chemical Exposure Index Calculator")
st.markdown(
    "Estimates the airborne quantity from an accidental release, the Dow "
    "Chemical Exposure Index, and the distances to each EPRG concentration."
)

# ── Sidebar Controls ─────────────────────────────────────────────────────────

st.sidebar.header("Release Scenario")

scenarios = get_scenarios()
scenario_names = [s["name"] for s in scenarios]
selected_scenario = st.sidebar.selectbox("Preset Scenario", scenario_names)
scenario = next(s for s in scenarios if s["name"] == selected_scenario)
preset = scenario["process_variables"]
st.sidebar.caption(scenario["description"])

release_type = st.sidebar.radio(
    "Release Type",
    list(ReleaseType),
    index=list(ReleaseType).index(scenario["release_type"]),
    format_func=lambda t: t.name.title(),
    horizontal=True,
)

st.sidebar.header("Process Conditions")

P_g = st.sidebar.number_input("Gauge Pressure (kPa)", value=preset.P_g, step=50.0)
P_a = st.sidebar.number_input(
    "Ambient Pressure (kPa)",
    value=preset.P_a if preset.P_a is not None else DEFAULT_ATMOSPHERIC_PRESSURE,
    step=0.5,
)
T = st.sidebar.number_input("Operating Temperature (°C)", value=preset.T, step=1.0)
T_a = st.sidebar.number_input("Ambient Temperature (°C)", value=preset.T_a, step=1.0)
height = st.sidebar.number_input("Liquid Head (m)", value=preset.height, step=0.1)
diameter = st.sidebar.number_input("Release Diameter (in)", value=preset.diameter, step=0.25)
inventory = st.sidebar.number_input("Inventory (kg)", value=preset.inventory, step=10.0)

st.sidebar.header("Material Properties")

mw = st.sidebar.number_input("Molecular Weight", value=preset.mw, step=0.1)
density = st.sidebar.number_input("Liquid Density (kg/m³)", value=preset.density, step=1.0)
P_v = st.sidebar.number_input("Vapor Pressure (kPa)", value=preset.P_v, step=1.0)
T_b = st.sidebar.number_input("Normal Boiling Point (°C)", value=preset.T_b, step=0.5)

use_ratio = st.sidebar.checkbox(
    "Specify Cp/Hv ratio",
    value=preset.heat_capacity_to_latent_heat_ratio is not None,
    help="Ratio of liquid heat capacity to latent heat of vaporization. "
         f"When unchecked the default {DEFAULT_HEAT_CAPACITY_TO_LATENT_HEAT_RATIO} 1/°C is used.",
)
ratio = None
if use_ratio:
    ratio = st.sidebar.number_input(
        "Cp/Hv (1/°C)",
        value=preset.heat_capacity_to_latent_heat_ratio or DEFAULT_HEAT_CAPACITY_TO_LATENT_HEAT_RATIO,
        step=0.0001,
        format="%.5f",
    )

use_dike = st.sidebar.checkbox(
    "Diked containment",
    value=preset.diked_area is not None,
    help="When unchecked the pool spreads to a depth of 1 cm.",
)
diked_area = None
if use_dike:
    diked_area = st.sidebar.number_input(
        "Diked Area (m²)",
        value=preset.diked_area or 100.0,
        step=10.0,
    )

process_variables = ProcessVariables(
    P_g=P_g,
    P_v=P_v,
    T=T,
    T_b=T_b,
    T_a=T_a,
    mw=mw,
    height=height,
    density=density,
    diameter=diameter,
    inventory=inventory,
    P_a=P_a,
    diked_area=diked_area,
    heat_capacity_to_latent_heat_ratio=ratio,
)

# ── Assessment ───────────────────────────────────────────────────────────────

assessment = assess_release(release_type, process_variables, sink=StreamlitSink())
distances = assessment.hazard_distances

# ── Summary Metrics Banner ───────────────────────────────────────────────────

m1, m2, m3, m4, m5 = st.columns(5)
m1.metric("Airborne Quantity", f"{assessment.airborne_quantity:.4g} kg/s")
m2.metric("CEI", f"{assessment.cei:.0f}", delta="capped" if assessment.cei >= MAX_CEI else None,
          delta_color="off")
m3.metric("HD1", f"{distances[1]:,.0f} m")
m4.metric("HD2", f"{distances[2]:,.0f} m")
m5.metric("HD3", f"{distances[3]:,.0f} m")

if release_type == ReleaseType.LIQUID:
    L = liquid_release_rate(diameter, density, P_g, height)
    F_v = flash_fraction(ratio, T, T_b)
    if F_v >= FLASH_FRACTION_LIMIT:
        st.info(
            f"Flash fraction {F_v:.3f} ≥ {FLASH_FRACTION_LIMIT}: the release is fully "
            f"airborne, AQ equals the liquid release rate ({L:.4g} kg/s)."
        )
    else:
        st.info(
            f"Flash fraction {F_v:.3f}: a pool forms. Liquid release rate "
            f"{L:.4g} kg/s caps the airborne quantity."
        )

if any(d >= MAX_HAZARD_DISTANCE for d in distances.values()):
    st.caption(f"Distances are capped at {MAX_HAZARD_DISTANCE:,.0f} m.")

# ── Visualization ──────────────────────────────────────────────────────────

col_zone, col_bar = st.columns([3, 2])
with col_zone:
    st.plotly_chart(create_hazard_zone_figure(assessment), use_container_width=True)
with col_bar:
    st.plotly_chart(create_hazard_distance_bar(assessment), use_container_width=True)

# ── Fire & Explosion Index ──────────────────────────────────────────────────

with st.expander("Fire & Explosion Index"):
    c1, c2, c3 = st.columns(3)
    f1 = c1.number_input("General Process Hazards (F1)", value=1.0, step=0.05)
    f2 = c2.number_input("Special Process Hazards (F2)", value=1.0, step=0.05)
    mf = c3.number_input("Material Factor (MF)", value=24.0, step=1.0)
    equipment_type = st.selectbox(
        "Equipment Type",
        list(EquipmentType),
        format_func=lambda t: t.name.replace("_", " ").title(),
    )
    equipment_diameter = st.number_input("Equipment Diameter (in)", value=6.0, step=0.5)

    f3 = process_unit_hazard(f1, f2)
    fei = fire_explosion_index(f3, mf)

    e1, e2, e3, e4 = st.columns(4)
    e1.metric("Unit Hazard (F3)", f"{f3:.2f}")
    e2.metric("F&EI", f"{fei:.1f}")
    e3.metric("Exposure Radius", f"{exposure_radius(fei):.1f} ft")
    e4.metric("Exposure Area", f"{exposure_area(fei):,.0f} ft²")
    st.caption(
        f"Credible rupture size: {rupture_diameter(equipment_diameter, equipment_type):.2f} in"
    )

# ── Info Panel ───────────────────────────────────────────────────────────────

with st.expander("About the Model"):
    st.markdown(
        f"""
        **Gas release** — `AQ = 4.571e-6 * P_abs * sqrt(MW / (T + 273))`.

        **Liquid release** — Release rate through the hole
        `L = 9.44e-7 * D^2 * rho * sqrt(1000 * P_g / rho + 9.81 * h)` (D in mm).
        Flash fraction `F_v = (Cp/Hv) * (T - T_b)`. When `F_v >= {FLASH_FRACTION_LIMIT}`
        the whole release is airborne. Otherwise the release over at most
        15 minutes forms a pool (diked, or 1 cm deep) and
        `AQ = min(5 * F_v * L + AQ_pool, L)`.

        **CEI** — `min({MAX_CEI}, 655.1 * sqrt(AQ / EPRG-2))`.

        **Hazard distance** — `min({MAX_HAZARD_DISTANCE:,.0f}, 6551 * sqrt(AQ / EPRG-n))`
        with EPRG-1 = {EPRG[1]}, EPRG-2 = {EPRG[2]}, EPRG-3 = {EPRG[3]} mg/m³.
        """
    )
