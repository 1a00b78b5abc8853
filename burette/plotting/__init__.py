"""
Publication-quality plotting utilities for simulated titrations.

Modules:
    curve_plots:
        pH vs. titrant volume with equivalence and half-equivalence guides.

    style:
        Shared rcParams, guide drawing and multi-format save helpers.

Design Principles:
    1. No chemistry calculations in plotting code. Functions receive a
       precomputed curve and markers and simply render them.

    2. Input validation with explicit KeyError for missing required columns.
"""

from .curve_plots import plot_titration_curve, setup_plot_style

__all__ = ["plot_titration_curve", "setup_plot_style"]
