"""Render simulated titration curves with equivalence markers."""

from __future__ import annotations

import os
import re
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.ticker import MaxNLocator

from ..chemistry.equivalence import EquivalencePoint
from ..schema import COLUMNS
from .style import (
    GUIDE_COLORS,
    LINE_WIDTHS,
    STYLE,
    draw_equivalence_guides,
    label_ph,
    label_volume,
    save_figure_bundle,
    set_global_style,
)


def setup_plot_style():
    """Apply the project plotting style.

    Returns:
        None: Update global matplotlib ``rcParams`` in-place.
    """
    set_global_style()


def _slug(text: str) -> str:
    return re.sub(r"[^A-Za-z0-9]+", "_", text).strip("_").lower() or "titration"


def plot_titration_curve(
    curve_df: pd.DataFrame,
    markers: Sequence[EquivalencePoint] = (),
    output_dir: str = "output",
    title: str | None = None,
    vhalf: float = np.nan,
) -> str:
    """Plot pH against titrant volume and save a PNG/PDF/SVG bundle.

    Args:
        curve_df (pandas.DataFrame): Curve from
            :func:`burette.simulation.simulate_curve`.
        markers (sequence of EquivalencePoint, optional): Equivalence
            markers drawn as vertical guides.
        output_dir (str, optional): Directory for the figure bundle.
            Defaults to ``"output"``.
        title (str, optional): Axes title, also used for the file name.
        vhalf (float, optional): Half-equivalence volume in mL drawn as a
            dashed guide. Skipped when NaN.

    Returns:
        str: PNG output path.

    Raises:
        KeyError: If ``curve_df`` lacks the volume or pH column.
        ValueError: If ``curve_df`` is empty.
    """
    missing = {COLUMNS.volume, COLUMNS.ph} - set(curve_df.columns)
    if missing:
        raise KeyError(f"Curve data missing required columns: {missing}")
    if curve_df.empty:
        raise ValueError("Curve data is empty; nothing to plot")

    setup_plot_style()
    os.makedirs(output_dir, exist_ok=True)

    fig, ax = plt.subplots(figsize=STYLE.FIGSIZE_SINGLE)
    ax.plot(
        curve_df[COLUMNS.volume],
        curve_df[COLUMNS.ph],
        color=GUIDE_COLORS["curve"],
        linewidth=LINE_WIDTHS["curve"],
        label="Simulated pH",
    )
    ax.set_xlim(0.0, float(curve_df[COLUMNS.volume].max()))
    ax.set_ylim(0.0, 14.0)
    ax.yaxis.set_major_locator(MaxNLocator(integer=True, nbins=8))
    ax.set_xlabel(label_volume())
    ax.set_ylabel(label_ph())
    ax.grid(True)

    draw_equivalence_guides(
        ax,
        [m.volume for m in markers],
        [m.label for m in markers],
        vhalf=vhalf,
    )
    if title:
        ax.set_title(title)
    ax.legend(loc="upper left")

    png_path = os.path.join(output_dir, f"{_slug(title or 'titration_curve')}.png")
    out = save_figure_bundle(fig, png_path)
    plt.close(fig)
    return out
