from __future__ import annotations

import plotly.graph_objects as go

from boostme.theme import get_active_theme


def _active_theme():
    return get_active_theme()[1]


def apply_common_plot_style(fig, title, show_xgrid=True, show_ygrid=True):
    theme = _active_theme()
    fig.update_layout(
        title=title,
        title_font=dict(color=theme["text_main"], size=16),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        font=dict(color=theme["text_main"]),
        margin=dict(l=40, r=20, t=40, b=30),
        xaxis=dict(
            showgrid=show_xgrid,
            gridcolor=theme["plot_grid"],
            tickfont=dict(color=theme["text_soft"]),
            zeroline=False,
            showline=True,
            linecolor=theme["border"],
            mirror=True,
        ),
        yaxis=dict(
            showgrid=show_ygrid,
            gridcolor=theme["plot_grid"],
            zeroline=False,
            tickfont=dict(color=theme["text_soft"]),
            showline=True,
            linecolor=theme["border"],
            mirror=True,
        ),
    )
    return fig


def confidence_chart(frame, title="Confidence over time", height=280):
    theme = _active_theme()
    fig = go.Figure(
        data=go.Scatter(
            x=frame["date"],
            y=frame["score"],
            mode="lines+markers",
            text=frame["mood"],
            hovertemplate="%{x|%b %d}: %{y}/10 • %{text}<extra></extra>",
            line=dict(color=theme["primary"], width=2),
            marker=dict(size=8, color=theme["primary"], line=dict(width=1, color=theme["plot_marker_line"])),
        )
    )
    apply_common_plot_style(fig, title, show_xgrid=False, show_ygrid=True)
    fig.update_layout(height=height)
    fig.update_yaxes(range=[0, 10.5], dtick=2)
    return fig
