"""
Plotting
========
Renders an intensity function as a step plot with matplotlib.
"""
from __future__ import annotations

from typing import Any, Iterable, Optional, TYPE_CHECKING

import matplotlib.pyplot as plt
import numpy as np

from intensitylist import config

if TYPE_CHECKING:
    from matplotlib.axes import Axes


def step_coordinates(
    breakpoints: Iterable[Iterable[Any]],
    margin: float = config.PLOT_MARGIN_FRACTION,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Coordinates for `ax.step(..., where="post")`.

    The implicit zero level is drawn on both sides, extended by `margin`
    times the covered span (1.0 for a single position).
    """
    points = [tuple(bp) for bp in breakpoints]
    if not points:
        return np.array([0.0, 1.0]), np.array([0.0, 0.0])

    positions = np.array([p for p, _ in points], dtype=float)
    intensities = np.array([v for _, v in points], dtype=float)

    span = positions[-1] - positions[0]
    pad = margin * span if span > 0 else 1.0

    x = np.concatenate(([positions[0] - pad], positions, [positions[-1] + pad]))
    y = np.concatenate(([0.0], intensities, [0.0]))
    return x, y


def plot_intensity(
    intensities: Iterable[Iterable[Any]],
    ax: Optional[Axes] = None,
    title: Optional[str] = None,
    margin: float = config.PLOT_MARGIN_FRACTION,
    show: bool = False,
) -> Axes:
    """
    Plot a breakpoint sequence (or an IntensityList) as a step function.

    Positions must convert to float; datetime or Decimal positions are
    supported by the model but not drawn here.

    Args:
        intensities: IntensityList or any iterable of (position, intensity).
        ax: Axes to draw into. A new figure is created when omitted.
        title: Optional plot title.
        margin: Fraction of the span drawn at zero on each side.
        show: Call plt.show() when a new figure was created.

    Returns:
        The Axes that was drawn into.
    """
    own_figure = ax is None
    if own_figure:
        plt.rcParams["figure.constrained_layout.use"] = True
        _, ax = plt.subplots(figsize=config.PLOT_FIGSIZE)

    x, y = step_coordinates(intensities, margin=margin)
    ax.step(x, y, where="post", color="r", lw=2)
    ax.axhline(0.0, color="k", lw=0.8)

    ax.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
    ax.minorticks_on()
    ax.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

    if title:
        ax.set_title(title)
    ax.set_xlabel("Position")
    ax.set_ylabel("Intensity")

    if own_figure and show:
        plt.show()
    return ax
