"""
Expected Gain Curve Chart

Plots the expected gain of every difficulty the search scanned, with the
target gain rate and the winning difficulty marked. The figure is returned,
not shown; the caller decides where it goes.
"""

import plotly.graph_objects as go
from typing import Dict

from .core import (
    TARGET_GAIN,
    scan_difficulty_candidates,
    best_candidate,
)


def build_gain_curve(
    skill: float,
    tool_quality: float,
    tool_skill: float,
    parent_skill: float,
) -> Dict:
    """
    Chart data for one difficulty search.

    The sentinel candidate is left out of the series; best_difficulty is
    None when the window is empty.

    Returns:
        Dict with:
            - difficulties: List[int]
            - gains: List[float] (expected gain at each difficulty)
            - effective_skills: List[float]
            - bonuses: List[float]
            - best_difficulty: Optional[int]
            - best_gain: Optional[float]
    """
    candidates = scan_difficulty_candidates(skill, tool_quality, tool_skill, parent_skill)
    scanned = candidates[1:]

    best_difficulty = None
    best_gain = None
    if scanned:
        best = best_candidate(candidates)
        best_difficulty = best.difficulty
        best_gain = best.mean

    return {
        "difficulties": [c.difficulty for c in scanned],
        "gains": [c.mean for c in scanned],
        "effective_skills": [c.eff for c in scanned],
        "bonuses": [c.bonus for c in scanned],
        "best_difficulty": best_difficulty,
        "best_gain": best_gain,
    }


def create_gain_curve_chart(curve_data: Dict, height: int = 300) -> go.Figure:
    """
    Create a Plotly line chart of expected gain against difficulty.

    Args:
        curve_data: Dict from build_gain_curve()
        height: Figure height in pixels

    Returns:
        Plotly Figure object
    """
    difficulties = curve_data["difficulties"]
    gains = curve_data["gains"]

    hover_texts = []
    for diff, gain, eff, bonus in zip(
        difficulties, gains, curve_data["effective_skills"], curve_data["bonuses"]
    ):
        hover_texts.append(
            f"<b>Difficulty {diff}</b><br>"
            f"Expected gain: <b>{gain:.2f}</b><br>"
            f"Effective skill: {eff:.2f}<br>"
            f"Bonus: {bonus:.2f}"
        )

    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=difficulties,
        y=gains,
        mode='lines+markers',
        line=dict(color='rgba(76, 175, 80, 0.9)', width=2),
        marker=dict(size=5),
        hovertemplate='%{customdata}<extra></extra>',
        customdata=hover_texts,
        name='Expected Gain',
        showlegend=False,
    ))

    fig.add_hline(
        y=TARGET_GAIN,
        line_dash="dash",
        line_color="#ff6b6b",
        line_width=2,
        annotation_text=f"Target: {TARGET_GAIN:g}",
        annotation_position="left",
        annotation_font_color="#ff6b6b",
        annotation_font_size=11,
    )

    best_difficulty = curve_data["best_difficulty"]
    if best_difficulty is not None:
        fig.add_annotation(
            x=best_difficulty,
            y=curve_data["best_gain"],
            text=f"Best: {best_difficulty}",
            showarrow=True,
            arrowhead=2,
            arrowsize=0.8,
            arrowcolor="#ffd700",
            font=dict(size=10, color="#ffd700"),
            ax=30,
            ay=-30,
        )

    fig.update_layout(
        title=dict(text="Expected Gain by Difficulty", font=dict(size=14)),
        xaxis=dict(
            title="Difficulty",
            gridcolor='rgba(128, 128, 128, 0.2)',
        ),
        yaxis=dict(
            title="Expected Gain",
            gridcolor='rgba(128, 128, 128, 0.2)',
        ),
        height=height,
        margin=dict(l=50, r=30, t=40, b=40),
        plot_bgcolor='rgba(0,0,0,0)',
        paper_bgcolor='rgba(0,0,0,0)',
        hovermode='x unified',
        showlegend=False,
    )

    return fig
