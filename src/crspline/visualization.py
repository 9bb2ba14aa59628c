"""Matplotlib plotting of sampled splines."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

import numpy as np

if TYPE_CHECKING:
    from .config import PlotConfig
    from .spline import CatmullRomSpline

logger = logging.getLogger(__name__)

try:
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    _HAS_MATPLOTLIB = True
except ImportError:
    _HAS_MATPLOTLIB = False


def _control_values(spline: "CatmullRomSpline") -> np.ndarray:
    return np.asarray([spline.access.deref(handle) for handle in spline.points], dtype=float)


def plot_spline(
    spline: "CatmullRomSpline",
    num_samples: int = 100,
    title: Optional[str] = None,
    plot_config: Optional["PlotConfig"] = None,
    output_path: Optional[Path] = None,
    ax: Any = None,
) -> Any:
    """Plot a sampled spline together with its control points.

    Scalar splines are drawn against the curve parameter. Vector splines use
    their first two coordinates.

    Args:
        spline: Spline to draw. Points must convert to float arrays.
        num_samples: Number of sampling intervals.
        title: Plot title.
        plot_config: Visual style overrides.
        output_path: Save PNG to this path when set.
        ax: Existing matplotlib Axes to draw on. A new figure is created if None.

    Returns:
        The matplotlib Axes object used for drawing.
    """
    if not _HAS_MATPLOTLIB:
        raise ImportError(
            "matplotlib is required for spline visualization. "
            "Install it with: pip install matplotlib"
        )

    from .config import PlotConfig
    cfg = plot_config or PlotConfig()

    if len(spline) == 0:
        logger.warning("No control points to plot.")
        return ax

    curve = np.asarray(spline.sample(num_samples), dtype=float)
    controls = _control_values(spline)

    if curve.ndim == 1:
        curve_xy = np.column_stack([np.linspace(0.0, 1.0, len(curve)), curve])
        knots = np.linspace(0.0, 1.0, len(controls)) if len(controls) > 1 else np.zeros(1)
        controls_xy = np.column_stack([knots, controls])
    elif curve.shape[1] >= 2:
        curve_xy = curve[:, :2]
        controls_xy = controls[:, :2]
    else:
        raise ValueError(f"Cannot plot points of dimension {curve.shape[1]}; need scalars or >= 2D vectors.")

    created_fig = False
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 8))
        created_fig = True

    if cfg.show_control_polygon and len(controls_xy) > 1:
        ax.plot(
            controls_xy[:, 0], controls_xy[:, 1],
            color=cfg.polygon_color, linewidth=0.8, linestyle="--", zorder=5,
        )

    ax.plot(
        curve_xy[:, 0], curve_xy[:, 1],
        color=cfg.curve_color,
        linewidth=cfg.curve_linewidth,
        label="Spline",
        zorder=10,
    )
    ax.scatter(
        controls_xy[:, 0], controls_xy[:, 1],
        color=cfg.point_color, s=cfg.marker_size,
        edgecolors="white", zorder=20, label="Control points",
    )

    ax.set_xlabel("t" if curve.ndim == 1 else "X")
    ax.set_ylabel("value" if curve.ndim == 1 else "Y")
    if title:
        ax.set_title(title)
    ax.legend(loc="upper right", fontsize=8)

    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        ax.get_figure().savefig(str(output_path), dpi=150, bbox_inches="tight")
        logger.info("Saved spline plot to %s", output_path)

    if created_fig:
        plt.close(fig)

    return ax
