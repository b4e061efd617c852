"""
Fleet map visualization.

Renders couriers and pending order destinations as a scatter plot:
- Couriers as teal points labeled with their names
- Pending orders as pink points labeled with their IDs
- Orders matching the search query in solid red

Usage:
    from src.dispatch import AssignmentEngine, DispatchConfig
    from src.analysis.visualizations import plot_fleet

    engine = AssignmentEngine.from_config(DispatchConfig())
    fig = plot_fleet(engine.couriers, engine.pending, query="O1")
    fig.savefig("fleet.png", dpi=150, bbox_inches="tight")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import matplotlib.pyplot as plt
import numpy as np

from src.analysis.queries import chart_data

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

    from src.dispatch.models import Courier, Order


# ── Styling constants ────────────────────────────────────────────

COURIER_COLOR = (75 / 255, 192 / 255, 192 / 255, 1.0)
ORDER_COLOR = (1.0, 99 / 255, 132 / 255, 0.5)
HIGHLIGHT_COLOR = (1.0, 0.0, 0.0, 1.0)
POINT_SIZE = 60


def plot_fleet(
    couriers: Sequence[Courier],
    pending: Sequence[Order],
    query: str = "",
    title: str = "Delivery Map",
    figsize: tuple[float, float] = (8, 6),
    show_labels: bool = True,
) -> Figure:
    """Render courier positions and pending order destinations.

    Args:
        couriers: Fleet to draw.
        pending: Pending orders to draw at their destinations.
        query: Search text; orders whose ID contains it are highlighted.
        title: Plot title.
        figsize: Figure size in inches.
        show_labels: Annotate points with courier names / order IDs.

    Returns:
        matplotlib Figure object.
    """
    data = chart_data(couriers, pending, query)

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.set_facecolor("#fdfdfd")
    fig.patch.set_facecolor("white")

    _draw_points(ax, data["couriers"], [COURIER_COLOR] * len(data["couriers"]), "Couriers", "o")
    order_colors = [HIGHLIGHT_COLOR if p["highlighted"] else ORDER_COLOR for p in data["orders"]]
    _draw_points(ax, data["orders"], order_colors, "Orders", "s")

    if show_labels:
        for point in data["couriers"] + data["orders"]:
            ax.annotate(
                point["label"],
                (point["x"], point["y"]),
                textcoords="offset points",
                xytext=(4, 4),
                fontsize=8,
                alpha=0.8,
            )

    # ── Axis formatting ──────────────────────────────────────────
    ax.set_title(title, fontsize=14, fontweight="bold", pad=12)
    ax.set_xlabel("x", fontsize=10)
    ax.set_ylabel("y", fontsize=10)
    ax.grid(True, alpha=0.2, linestyle="--")
    ax.legend(loc="upper left", fontsize=9, framealpha=0.9)

    all_points = data["couriers"] + data["orders"]
    if all_points:
        xs = np.array([p["x"] for p in all_points])
        ys = np.array([p["y"] for p in all_points])
        pad = 5
        ax.set_xlim(xs.min() - pad, xs.max() + pad)
        ax.set_ylim(ys.min() - pad, ys.max() + pad)

    fig.tight_layout()
    return fig


def _draw_points(ax: Axes, points: list[dict], colors: list, label: str, marker: str) -> None:
    """Scatter one dataset. Empty datasets still get a legend entry."""
    xs = [p["x"] for p in points]
    ys = [p["y"] for p in points]
    ax.scatter(
        xs,
        ys,
        c=colors if colors else None,
        s=POINT_SIZE,
        marker=marker,
        label=label,
        edgecolors="white",
        linewidths=0.8,
        zorder=3,
    )
