"""
Visualization module for the Chemical Exposure Index calculator.

Provides Plotly-based interactive plots for the Streamlit interface.
"""

import numpy as np
import plotly.graph_objects as go
from typing import Tuple

from config import MAX_HAZARD_DISTANCE
from models.assessment import ExposureAssessment

# Level 1 (most sensitive, largest zone) is drawn first so the smaller
# zones stay visible on top.
LEVEL_COLORS = {
    1: "rgba(255, 215, 0, {alpha})",
    2: "rgba(255, 140, 0, {alpha})",
    3: "rgba(220, 20, 60, {alpha})",
}


def _circle_coords(radius: float, n_points: int = 121) -> Tuple[np.ndarray, np.ndarray]:
    """Return (xs, ys) of a closed circle around the origin."""
    theta = np.linspace(0.0, 2.0 * np.pi, n_points)
    return radius * np.cos(theta), radius * np.sin(theta)


def create_hazard_zone_figure(assessment: ExposureAssessment) -> go.Figure:
    """Concentric EPRG hazard zones (HD1, HD2, HD3) around the release point."""
    fig = go.Figure()

    for level in sorted(assessment.hazard_distances):
        radius = float(assessment.hazard_distances[level])
        xs, ys = _circle_coords(radius)
        fig.add_trace(
            go.Scatter(
                x=xs,
                y=ys,
                mode="lines",
                fill="toself",
                fillcolor=LEVEL_COLORS[level].format(alpha=0.25),
                line=dict(color=LEVEL_COLORS[level].format(alpha=0.9), width=2),
                name=f"EPRG-{level} ({assessment.eprg[level]} mg/m³): {radius:,.0f} m",
                hoverinfo="name",
            )
        )

    fig.add_trace(
        go.Scatter(
            x=[0.0],
            y=[0.0],
            mode="markers",
            marker=dict(symbol="x", size=12, color="white"),
            name="Release point",
        )
    )

    extent = max([float(d) for d in assessment.hazard_distances.values()] + [1.0]) * 1.1
    fig.update_layout(
        title=f"Hazard Zones (CEI = {float(assessment.cei):.0f})",
        xaxis=dict(title="East (m)", range=[-extent, extent]),
        yaxis=dict(title="North (m)", range=[-extent, extent], scaleanchor="x", scaleratio=1),
        template="plotly_dark",
        height=550,
    )

    return fig


def create_hazard_distance_bar(assessment: ExposureAssessment) -> go.Figure:
    """Bar chart of the hazard distance at each EPRG level."""
    levels = sorted(assessment.hazard_distances)
    labels = [f"HD{level}" for level in levels]
    distances = [float(assessment.hazard_distances[level]) for level in levels]
    capped = [d >= MAX_HAZARD_DISTANCE for d in distances]

    fig = go.Figure()

    fig.add_trace(
        go.Bar(
            x=labels,
            y=distances,
            name="Hazard Distance",
            marker_color=[LEVEL_COLORS[level].format(alpha=0.9) for level in levels],
            hovertemplate=(
                "%{x}: %{y:,.0f} m<br>"
                "EPRG: %{customdata[0]} mg/m³<br>"
                "Capped: %{customdata[1]}<extra></extra>"
            ),
            customdata=[[assessment.eprg[level], c] for level, c in zip(levels, capped)],
        )
    )

    fig.add_hline(
        y=MAX_HAZARD_DISTANCE,
        line_dash="dash",
        line_color="gray",
        annotation_text="Distance cap",
    )

    fig.update_layout(
        title="Hazard Distance by EPRG Level",
        xaxis_title="Level",
        yaxis_title="Distance (m)",
        template="plotly_dark",
        height=300,
    )

    return fig
