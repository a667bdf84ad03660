"""
Plotly figure for the wave pattern and probability distribution.
"""
from __future__ import annotations

from typing import List

import plotly.graph_objects as go

from particlebox.axes import AxisBounds
from particlebox.config import CHART_HEIGHT, DENSITY_COLOR, DENSITY_FILL, WAVE_COLOR
from particlebox.sampler import BoxSample

WAVE_NAME = "Wave Pattern"
DENSITY_NAME = "Probability Distribution"


def _state_suffix(sample: BoxSample) -> str:
    scaled = ", Scaled" if sample.normalized else ""
    return f"(n={sample.n}, L={sample.length:.2f}{scaled})"


def trace_label(name: str, sample: BoxSample) -> str:
    """Legend entry, e.g. ``Wave Pattern (n=2, L=1.00, Scaled)``."""
    return f"{name} {_state_suffix(sample)}"


def axis_title(name: str, normalized: bool) -> str:
    return f"{name} (Scaled)" if normalized else name


def chart_title(sample: BoxSample) -> str:
    return f"Particle in a Box (Length={sample.length:.2f}) - Energy Level {sample.n}"


def hover_template(name: str) -> str:
    # x and value to 4 decimals; trace name box suppressed
    return f"x = %{{x:.4f}}<br><b>{name}</b>: %{{y:.4f}}<extra></extra>"


def formula_captions(normalized: bool) -> List[str]:
    """The two formula lines printed under the chart."""
    wave_factor = "√(2/L) × " if normalized else ""
    density_factor = "(2/L) × " if normalized else ""
    return [
        f"{WAVE_NAME} = {wave_factor}sin(n×π×x/L) when x is between 0 and L",
        f"{DENSITY_NAME} = {density_factor}sin²(n×π×x/L) when x is between 0 and L",
    ]


def build_figure(sample: BoxSample, bounds: AxisBounds) -> go.Figure:
    """Dual-axis line chart: psi on the left axis, |psi|^2 filled on the right."""
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=sample.x,
            y=sample.psi,
            name=trace_label(WAVE_NAME, sample),
            mode="lines",
            line=dict(color=WAVE_COLOR, width=2),
            yaxis="y",
            hovertemplate=hover_template(WAVE_NAME),
        )
    )
    fig.add_trace(
        go.Scatter(
            x=sample.x,
            y=sample.density,
            name=trace_label(DENSITY_NAME, sample),
            mode="lines",
            line=dict(color=DENSITY_COLOR, width=2),
            fill="tozeroy",
            fillcolor=DENSITY_FILL,
            yaxis="y2",
            hovertemplate=hover_template(DENSITY_NAME),
        )
    )

    fig.update_layout(
        height=CHART_HEIGHT,
        title=dict(text=chart_title(sample), font=dict(size=16)),
        hovermode="x",
        transition=dict(duration=0),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, x=0),
        xaxis=dict(
            title="Position (x)",
            range=list(bounds.x),
            tick0=0.0,
            dtick=bounds.x_tick,
            tickformat=".2f",
            hoverformat=".4f",
        ),
        yaxis=dict(
            title=axis_title(WAVE_NAME, sample.normalized),
            range=list(bounds.wave),
            side="left",
            showgrid=False,
        ),
        yaxis2=dict(
            title=axis_title(DENSITY_NAME, sample.normalized),
            range=list(bounds.density),
            overlaying="y",
            side="right",
            showgrid=True,
        ),
    )
    return fig
