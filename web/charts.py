"""Plotly charts for the policy space and coalition ranking."""

import plotly.graph_objects as go
from plotly.colors import qualitative

PALETTE = qualitative.Plotly
PIVOT_COLOR = "#111827"


def party_colors(ids: list[str]) -> dict[str, str]:
    return {pid: PALETTE[i % len(PALETTE)] for i, pid in enumerate(ids)}


def positions_chart(parties: list[dict], pivot: tuple[float, float], title: str = "") -> go.Figure:
    """Party positions with their indifference circles and the pivot point."""
    colors = party_colors([p["id"] for p in parties])
    fig = go.Figure()

    for p in parties:
        r = p["radius"]
        fig.add_shape(
            type="circle",
            xref="x",
            yref="y",
            x0=p["lr"] - r,
            y0=p["conlib"] - r,
            x1=p["lr"] + r,
            y1=p["conlib"] + r,
            line=dict(color=colors[p["id"]], width=2),
            fillcolor=colors[p["id"]],
            opacity=0.12,
        )

    fig.add_trace(
        go.Scatter(
            x=[p["lr"] for p in parties],
            y=[p["conlib"] for p in parties],
            mode="markers+text",
            text=[p["id"] for p in parties],
            textposition="top center",
            marker=dict(
                size=[8 + p["seats"] / 2 for p in parties],
                color=[colors[p["id"]] for p in parties],
                line=dict(color="white", width=1),
            ),
            hovertext=[f"{p['id']}: {p['seats']} seats, radius {p['radius']:.2f}" for p in parties],
            hoverinfo="text",
            name="Parties",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=[pivot[0]],
            y=[pivot[1]],
            mode="markers",
            marker=dict(symbol="x", size=14, color=PIVOT_COLOR),
            name="Pivot",
        )
    )

    lo = min(min(p["lr"] - p["radius"], p["conlib"] - p["radius"]) for p in parties)
    hi = max(max(p["lr"] + p["radius"], p["conlib"] + p["radius"]) for p in parties)
    return fig.update_layout(
        title=title,
        xaxis=dict(title="Economic (left - right)", range=[lo, hi], zeroline=True),
        yaxis=dict(title="Moral (conservative - liberal)", range=[lo, hi], scaleanchor="x", scaleratio=1),
        margin=dict(t=40, b=40, l=40, r=20),
        height=550,
    )


def majority_chart(grid: dict, title: str = "") -> go.Figure:
    """Seats of the covering set at every grid point held by a majority."""
    z = [s if m else None for s, m in zip(grid["seats"], grid["majority"])]

    return go.Figure(
        go.Heatmap(
            x=grid["x"],
            y=grid["y"],
            z=z,
            colorscale="Blues",
            colorbar=dict(title="Seats"),
            hovertemplate="(%{x}, %{y}): %{z} seats<extra></extra>",
        )
    ).update_layout(
        title=title,
        xaxis_title="Economic (left - right)",
        yaxis=dict(title="Moral (conservative - liberal)", scaleanchor="x", scaleratio=1),
        margin=dict(t=40, b=40, l=40, r=20),
        height=550,
    )


def coalition_chart(items: list[dict], top: int = 10, title: str = "") -> go.Figure:
    """Horizontal bars of area share for the leading coalitions."""
    shown = items[:top][::-1]

    return go.Figure(
        go.Bar(
            x=[c["percent"] for c in shown],
            y=[c["label"] for c in shown],
            orientation="h",
            text=[f"{c['percent']:.1f}%" for c in shown],
            textposition="outside",
        )
    ).update_layout(
        title=title,
        xaxis_title="Share of policy space (%)",
        margin=dict(t=40, b=40, l=160, r=20),
        height=max(250, 40 * len(shown) + 100),
    )
