"""
Titrant delivery, curve sampling and equivalence detection on simulated curves.

These are the operations the hosting application performs on its titration
state: every function returns a new :class:`~burette.schema.TitrationState`
(or a table derived from one) and leaves its input untouched.
"""

# Algorithm summary: a curve is the solver evaluated on a uniform volume grid
# from 0 to the burette capacity. The equivalence inflection is the sample
# with the largest absolute central-difference slope d(pH)/dV.

from __future__ import annotations

import math
from dataclasses import replace
from typing import Dict

import numpy as np
import pandas as pd

from .chemistry.equivalence import equivalence_volume, half_equivalence_volume
from .chemistry.solver import solve_ph
from .schema import COLUMNS, TitrationState

DEFAULT_DROP_VOLUME = 0.050
DEFAULT_CURVE_STEP = 0.05
MIN_DETECTION_POINTS = 10


def add_volume(state: TitrationState, volume_ml: float) -> TitrationState:
    """Deliver titrant without exceeding the burette capacity.

    Args:
        state (TitrationState): Current titration snapshot.
        volume_ml (float): Requested volume in mL. Negative requests are
            treated as zero.

    Returns:
        TitrationState: New state with ``titrant_vol`` increased by
        ``min(titrant_max - titrant_vol, max(0, volume_ml))``. The input
        state is returned unchanged when nothing can be added.
    """
    space = max(0.0, state.titrant_max - state.titrant_vol)
    add = min(space, max(0.0, float(volume_ml)))
    if add <= 0:
        return state
    return replace(state, titrant_vol=state.titrant_vol + add)


def add_drops(
    state: TitrationState, count: int = 1, drop_volume: float = DEFAULT_DROP_VOLUME
) -> TitrationState:
    """Deliver ``count`` drops of ``drop_volume`` mL one at a time."""
    for _ in range(int(count)):
        state = add_volume(state, drop_volume)
    return state


def reset_titration(state: TitrationState) -> TitrationState:
    """Empty the delivered volume, keeping flask and burette settings."""
    return replace(state, titrant_vol=0.0)


def go_to_half_equivalence(state: TitrationState) -> TitrationState:
    """Jump the delivered volume to the half-equivalence point."""
    return replace(state, titrant_vol=half_equivalence_volume(state))


def percent_neutralization(state: TitrationState) -> float:
    """Share of the analyte's titratable protons (or base) consumed, in percent.

    Capped at 100; zero when the flask holds no analyte.
    """
    capacity = state.protons * state.analyte_moles
    if capacity <= 0:
        return 0.0
    return min(100.0, state.titrant_moles / capacity * 100.0)


def curve_x_max(state: TitrationState) -> float:
    """Volume-axis extent (mL) that shows the burette range and the first equivalence.

    The extent covers ``titrant_max``, 130 % of the first equivalence volume
    and 5 mL past the current volume, rounded up to a multiple of 5 mL and
    never below 20 mL. A 25 mL equivalence is assumed when the titrant
    concentration is zero.
    """
    veq = equivalence_volume(state)
    if not math.isfinite(veq):
        veq = 25.0
    target = max(state.titrant_max, veq * 1.3, state.titrant_vol + 5.0)
    return max(20.0, math.ceil(target / 5.0) * 5.0)


def simulate_curve(
    state: TitrationState,
    step: float = DEFAULT_CURVE_STEP,
    stop: float | None = None,
) -> pd.DataFrame:
    """Sample the titration curve on a uniform volume grid.

    Args:
        state (TitrationState): Titration settings; ``titrant_vol`` is
            ignored and replaced by each grid volume.
        step (float, optional): Grid spacing in mL. Defaults to ``0.05``.
        stop (float, optional): Last volume in mL. Defaults to
            ``state.titrant_max``.

    Returns:
        pandas.DataFrame: Columns ``Volume (mL)`` and ``pH``, one row per grid
        volume from 0 to ``stop`` inclusive.

    Raises:
        ValueError: If ``step`` is not positive and finite, or ``stop`` is
            negative or non-finite.
    """
    if not np.isfinite(step) or step <= 0:
        raise ValueError(f"Curve step must be positive and finite, got {step!r}")
    stop = state.titrant_max if stop is None else float(stop)
    if not np.isfinite(stop) or stop < 0:
        raise ValueError(f"Curve stop volume must be finite and >= 0, got {stop!r}")

    n_steps = int(math.floor(stop / step + 1e-9))
    volumes = np.linspace(0.0, n_steps * step, n_steps + 1)
    if stop - volumes[-1] > 1e-9:
        volumes = np.append(volumes, stop)

    ph = [solve_ph(replace(state, titrant_vol=float(v))) for v in volumes]
    return pd.DataFrame({COLUMNS.volume: volumes, COLUMNS.ph: np.asarray(ph, dtype=float)})


def detect_equivalence_point(curve_df: pd.DataFrame) -> Dict[str, float | int]:
    """Locate the steepest point of a titration curve.

    Args:
        curve_df (pandas.DataFrame): Curve with ``Volume (mL)`` and ``pH``
            columns, ordered by volume (as produced by :func:`simulate_curve`).

    Returns:
        dict: ``eq_x`` (mL), ``eq_pH``, ``index`` (row position) and
        ``max_derivative`` (absolute ``d(pH)/dV`` in pH/mL).

    Raises:
        KeyError: If a required column is missing.
        ValueError: If fewer than ten samples are available.

    Note:
        Only interior samples are scored, with the central difference
        ``(pH[i+1] - pH[i-1]) / (V[i+1] - V[i-1])``. For polyprotic acids
        this picks whichever inflection is steepest, usually the first.
    """
    missing = {COLUMNS.volume, COLUMNS.ph} - set(curve_df.columns)
    if missing:
        raise KeyError(f"Curve data missing required columns: {missing}")
    if len(curve_df) < MIN_DETECTION_POINTS:
        raise ValueError(
            f"Not enough data points for equivalence detection. "
            f"Found {len(curve_df)} points, minimum {MIN_DETECTION_POINTS} required."
        )

    v = pd.to_numeric(curve_df[COLUMNS.volume], errors="coerce").to_numpy(dtype=float)
    p = pd.to_numeric(curve_df[COLUMNS.ph], errors="coerce").to_numpy(dtype=float)

    dx = v[2:] - v[:-2]
    dy = p[2:] - p[:-2]
    with np.errstate(divide="ignore", invalid="ignore"):
        slope = np.where(dx > 0, np.abs(dy / dx), 0.0)
    slope = np.nan_to_num(slope, nan=0.0, posinf=0.0)

    idx = int(np.argmax(slope)) + 1
    return {
        "eq_x": float(v[idx]),
        "eq_pH": float(p[idx]),
        "index": idx,
        "max_derivative": float(slope[idx - 1]),
    }
