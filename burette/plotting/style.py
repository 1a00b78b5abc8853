"""Centralized plotting style, labels, guides and save helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure

OUTPUT_FORMATS: tuple[str, ...] = ("png", "pdf", "svg")
FIGURE_DPI = 300
_STYLE_STATE = {"initialized": False}


@dataclass(frozen=True)
class StyleConfig:
    BASE_FONTSIZE: float = 12.0
    TITLE_FONTSIZE: float = 14.0
    LABEL_FONTSIZE: float = 12.0
    TICK_FONTSIZE: float = 11.0
    LEGEND_FONTSIZE: float = 11.0
    ANNOTATION_FONTSIZE: float = 10.0
    LINEWIDTH: float = 2.0
    LINEWIDTH_THIN: float = 1.2
    MARKERSIZE: float = 6.0
    GRID_ALPHA: float = 0.20
    FIGSIZE_SINGLE: tuple[float, float] = (7.0, 4.2)


STYLE = StyleConfig()

LINE_WIDTHS = {
    "curve": STYLE.LINEWIDTH,
    "guide": STYLE.LINEWIDTH_THIN,
}

GUIDE_COLORS = {
    "curve": "#1f77b4",
    "equivalence": "#444444",
    "half_equivalence": "#888888",
}

MATH_LABELS = {
    "vhalf": r"$V_{1/2}$",
}


def label_volume() -> str:
    return "Titrant added (mL)"


def label_ph() -> str:
    return "pH"


def apply_global_style(font_scale: float = 1.0) -> None:
    """Apply the global Matplotlib style, scaled by ``font_scale``."""
    scale = float(font_scale)
    plt.rcParams.update(
        {
            "font.family": "STIXGeneral",
            "font.size": STYLE.BASE_FONTSIZE * scale,
            "axes.titlesize": STYLE.TITLE_FONTSIZE * scale,
            "axes.labelsize": STYLE.LABEL_FONTSIZE * scale,
            "xtick.labelsize": STYLE.TICK_FONTSIZE * scale,
            "ytick.labelsize": STYLE.TICK_FONTSIZE * scale,
            "legend.fontsize": STYLE.LEGEND_FONTSIZE * scale,
            "mathtext.fontset": "stix",
            "mathtext.default": "regular",
            "axes.linewidth": STYLE.LINEWIDTH_THIN,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "grid.alpha": STYLE.GRID_ALPHA,
            "grid.linestyle": ":",
            "legend.frameon": False,
            "lines.linewidth": STYLE.LINEWIDTH,
            "lines.markersize": STYLE.MARKERSIZE,
            "figure.dpi": 120,
            "savefig.dpi": FIGURE_DPI,
            "savefig.bbox": "tight",
            "savefig.pad_inches": 0.12,
        }
    )


def set_global_style() -> None:
    """Apply global plotting style once per process."""
    if not _STYLE_STATE["initialized"]:
        apply_global_style(font_scale=1.0)
        _STYLE_STATE["initialized"] = True


def draw_equivalence_guides(
    ax: Axes,
    volumes: Sequence[float],
    labels: Sequence[str],
    vhalf: float = np.nan,
) -> None:
    """Draw a solid guide at each equivalence volume and a dashed V_{1/2} guide."""
    y_top = ax.get_ylim()[1]
    for volume, label in zip(volumes, labels):
        if not np.isfinite(volume):
            continue
        ax.axvline(
            volume,
            color=GUIDE_COLORS["equivalence"],
            linewidth=LINE_WIDTHS["guide"],
            linestyle="-",
        )
        ax.annotate(
            label,
            xy=(volume, y_top),
            xytext=(3, -12),
            textcoords="offset points",
            fontsize=STYLE.ANNOTATION_FONTSIZE,
            color=GUIDE_COLORS["equivalence"],
        )

    if np.isfinite(vhalf):
        ax.axvline(
            vhalf,
            color=GUIDE_COLORS["half_equivalence"],
            linewidth=LINE_WIDTHS["guide"],
            linestyle="--",
            label=MATH_LABELS["vhalf"],
        )


def save_figure(
    fig: Figure,
    savepath_base: str | Path,
    formats: Sequence[str] = OUTPUT_FORMATS,
    dpi: int = FIGURE_DPI,
) -> Path:
    """Save a figure to multiple formats using one extensionless base path."""
    base = Path(savepath_base)
    base.parent.mkdir(parents=True, exist_ok=True)
    for ext in formats:
        target = base.with_suffix(f".{ext}")
        fig.savefig(str(target), dpi=dpi if ext == "png" else None, bbox_inches="tight")
    return base.with_suffix(".png")


def save_figure_bundle(fig: Figure, png_path: str) -> str:
    """Save synchronized PNG, PDF, and SVG files for a figure."""
    base = Path(os.path.splitext(png_path)[0])
    save_figure(fig, base)
    return str(base.with_suffix(".png"))
