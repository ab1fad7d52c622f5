"""
Debuff Curve Chart Component

Creates the interactive Plotly chart of debuff chance against
Accuracy - Resistance, with the player's current difference marked on the
curve.

Reference markers:
    - 50/50 threshold (vertical, where the curve crosses 50%)
    - Attacker bias (vertical, at zero difference)
    - Tiny chance zone (shaded band up to 5%)
"""

import plotly.graph_objects as go
from typing import Iterable

from raid_debuff.core import (
    ATTACKER_BIAS_DIFFERENCE,
    CURVE_DOMAIN,
    TINY_CHANCE_THRESHOLD,
    DebuffModel,
    format_chance,
    format_difference,
    sample_curve,
)

CURVE_COLOR = "#63b3ed"
INPUT_COLOR = "#fc8181"
THRESHOLD_COLOR = "#a0aec0"
ATTACKER_BIAS_COLOR = "#68d391"
TINY_ZONE_FILL = "rgba(247, 88, 88, 0.1)"


def create_debuff_curve_chart(
    model: DebuffModel,
    difference: float,
    chance: float,
    domain: Iterable[float] = CURVE_DOMAIN,
    height: int = 600,
    show_reference_markers: bool = True,
) -> go.Figure:
    """
    Create the debuff chance chart.

    Args:
        model: Curve to plot
        difference: Current Accuracy - Resistance
        chance: Current chance (%), model.evaluate(difference)
        domain: Differences to sample for the line
        height: Chart height in pixels
        show_reference_markers: Draw the threshold / bias lines and tiny chance zone

    Returns:
        Plotly Figure object ready for display with st.plotly_chart()
    """
    points = sample_curve(model, domain)
    x_values = [d for d, _ in points]
    y_values = [c for _, c in points]

    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=x_values,
        y=y_values,
        mode='lines',
        line=dict(color=CURVE_COLOR, width=2),
        hovertemplate='Diff %{x}<br>Chance %{y:.2f}%<extra></extra>',
        name='Debuff Chance (%)',
    ))

    # Only mark the input when it falls on the plotted range
    if x_values and min(x_values) <= difference <= max(x_values):
        fig.add_trace(go.Scatter(
            x=[difference],
            y=[chance],
            mode='markers',
            marker=dict(color=INPUT_COLOR, size=12),
            hovertemplate=(
                f"<b>Your Input</b><br>Diff {format_difference(difference)}"
                f"<br>Chance {format_chance(chance)}<extra></extra>"
            ),
            name='Your Input',
        ))

    if show_reference_markers:
        threshold = model.threshold_difference
        if threshold is not None:
            fig.add_vline(
                x=threshold,
                line_dash="dash",
                line_color=THRESHOLD_COLOR,
                line_width=1,
                annotation_text="50/50 Threshold",
                annotation_position="top left",
                annotation_font_color=THRESHOLD_COLOR,
            )

        fig.add_vline(
            x=ATTACKER_BIAS_DIFFERENCE,
            line_dash="dot",
            line_color=ATTACKER_BIAS_COLOR,
            line_width=1,
            annotation_text="Attacker Bias",
            annotation_position="top right",
            annotation_font_color=ATTACKER_BIAS_COLOR,
        )

        fig.add_hrect(
            y0=0,
            y1=TINY_CHANCE_THRESHOLD,
            fillcolor=TINY_ZONE_FILL,
            line_width=0,
            annotation_text=f"Tiny chance zone (≤{TINY_CHANCE_THRESHOLD:g}%)",
            annotation_position="top left",
            annotation_font_color=INPUT_COLOR,
        )

    fig.update_layout(
        title=dict(
            text="Debuff Application Chance vs Accuracy - Resistance",
            font=dict(size=16),
        ),
        xaxis=dict(
            title="Accuracy - Resistance",
            gridcolor='rgba(128, 128, 128, 0.2)',
        ),
        yaxis=dict(
            title="Chance to Apply Debuff (%)",
            range=[0, 100],
            gridcolor='rgba(128, 128, 128, 0.2)',
        ),
        height=height,
        margin=dict(l=50, r=30, t=50, b=40),
        plot_bgcolor='rgba(0,0,0,0)',
        paper_bgcolor='rgba(0,0,0,0)',
        hovermode='closest',
        legend=dict(orientation='h', yanchor='bottom', y=1.02, xanchor='right', x=1),
    )

    return fig
