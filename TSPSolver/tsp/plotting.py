"""
Render a tour to an image file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from .instance import TSPInstance  # noqa: E402
from .tour import TourCandidate  # noqa: E402


def save_tour_plot(
    instance: TSPInstance,
    tour: TourCandidate,
    save_path: str | Path,
    *,
    title: Optional[str] = None,
    annotate: Optional[bool] = None,
) -> Path:
    """
    Draw the cities and the closed route through them.

    Args:
        instance: Problem instance providing the coordinates.
        tour: Tour to draw; indices refer to ``instance.points``.
        save_path: Output image path. Parent directories are created.
        title: Plot title. Defaults to the instance name and tour length.
        annotate: Label cities with their ids. Defaults to on for small instances.

    Returns:
        The path written.
    """
    out = Path(save_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    coords = instance.city_coords
    if annotate is None:
        annotate = len(coords) <= 50

    fig, ax = plt.subplots(figsize=(10, 10))
    try:
        if coords:
            xs = [coords[i][0] for i in tour.order] + [coords[tour.order[0]][0]]
            ys = [coords[i][1] for i in tour.order] + [coords[tour.order[0]][1]]
            ax.plot(xs, ys, "b-", alpha=0.6, linewidth=1.5)
            ax.plot([c[0] for c in coords], [c[1] for c in coords], "ro", markersize=5)
            sx, sy = coords[tour.order[0]]
            ax.plot(sx, sy, "go", markersize=12, alpha=0.5, label="Start")
            if annotate:
                for point in instance.points:
                    ax.annotate(str(point.id), (point.x, point.y), xytext=(5, 5), textcoords="offset points")
            ax.legend()
        label = instance.name or "TSP"
        ax.set_title(title or f"{label} - Tour length: {tour.length:.2f}")
        ax.set_xlabel("X")
        ax.set_ylabel("Y")
        ax.axis("equal")
        ax.grid(True)
        fig.savefig(out)
    finally:
        plt.close(fig)
    return out
