"""Smoke tests for curve figures."""

import os

import matplotlib.pyplot as plt
import pandas as pd
import pytest

from burette.chemistry import equivalence_points, half_equivalence_volume
from burette.plotting import plot_titration_curve
from burette.plotting.style import MATH_LABELS, draw_equivalence_guides
from burette.simulation import simulate_curve


def test_plot_writes_bundle(tmp_path, make_state):
    state = make_state("strong_base_diprotic_acid")
    curve = simulate_curve(state, step=0.5)
    png = plot_titration_curve(
        curve,
        equivalence_points(state),
        output_dir=str(tmp_path),
        title="strong base diprotic acid",
        vhalf=half_equivalence_volume(state),
    )
    assert png.endswith("strong_base_diprotic_acid.png")
    for ext in ("png", "pdf", "svg"):
        assert os.path.exists(os.path.splitext(png)[0] + f".{ext}")


def test_plot_without_markers(tmp_path, make_state):
    curve = simulate_curve(make_state("strong_base_strong_acid", titrant_conc=0.0), step=1.0)
    png = plot_titration_curve(curve, output_dir=str(tmp_path))
    assert os.path.basename(png) == "titration_curve.png"


def test_missing_columns(tmp_path):
    with pytest.raises(KeyError, match="missing required columns"):
        plot_titration_curve(pd.DataFrame({"pH": [7.0]}), output_dir=str(tmp_path))


def test_empty_curve(tmp_path):
    empty = pd.DataFrame({"Volume (mL)": [], "pH": []})
    with pytest.raises(ValueError, match="empty"):
        plot_titration_curve(empty, output_dir=str(tmp_path))


def test_guides_draw_one_line_per_marker_plus_half_equivalence():
    fig, ax = plt.subplots()
    ax.set_ylim(0.0, 14.0)
    draw_equivalence_guides(ax, [25.0, 50.0], ["1st Eq", "2nd Eq"], vhalf=12.5)
    lines = ax.get_lines()
    assert len(lines) == 3
    assert [line.get_label() for line in lines][-1] == MATH_LABELS["vhalf"]
    assert [t.get_text() for t in ax.texts] == ["1st Eq", "2nd Eq"]
    plt.close(fig)
