"""Whole-curve properties: monotonic sweeps, continuity, clamping and purity."""

import copy
import math

import numpy as np
import pytest

from burette.chemistry import equivalence_points, solve_ph
from burette.schema import TitrationState, TitrationType
from burette.simulation import simulate_curve

ALL_TYPES = list(TitrationType)


def _sweep_max(kind):
    return 100.0 if kind is TitrationType.STRONG_BASE_TRIPROTIC_ACID else 60.0


@pytest.mark.parametrize("kind", ALL_TYPES)
def test_monotonic_over_full_sweep(make_state, kind):
    state = make_state(kind, titrant_max=_sweep_max(kind))
    ph = simulate_curve(state, step=0.05)["pH"].to_numpy()
    steps = np.diff(ph)
    if kind.base_into_acid:
        assert np.all(steps >= -1e-9), f"pH decreased by {steps.min():.3g}"
    else:
        assert np.all(steps <= 1e-9), f"pH increased by {steps.max():.3g}"
    assert ph.max() - ph.min() > 2.0


@pytest.mark.parametrize("kind", ALL_TYPES)
def test_no_jumps_away_from_equivalence(make_state, kind):
    state = make_state(kind, titrant_max=_sweep_max(kind))
    curve = simulate_curve(state, step=0.01)
    volumes = curve["Volume (mL)"].to_numpy()
    jumps = np.abs(np.diff(curve["pH"].to_numpy()))

    near_eq = np.zeros_like(jumps, dtype=bool)
    for point in equivalence_points(state):
        near_eq |= np.abs(volumes[1:] - point.volume) < 0.015

    assert np.all(jumps[~near_eq] < 0.5)


@pytest.mark.parametrize("kind", ALL_TYPES)
@pytest.mark.parametrize(
    "overrides",
    [
        dict(analyte_vol=0.0, titrant_vol=0.0),
        dict(analyte_vol=0.0, titrant_vol=10.0),
        dict(titrant_conc=0.0, titrant_vol=30.0),
        dict(analyte_conc=0.0, titrant_vol=10.0),
        dict(analyte_conc=12.0, titrant_vol=1.0),
        dict(analyte_conc=1e-12, titrant_conc=1e-12, titrant_vol=20.0),
        dict(titrant_conc=15.0, titrant_vol=50.0),
        dict(analyte_vol=math.nan),
    ],
)
def test_clamp_law(make_state, kind, overrides):
    ph = solve_ph(make_state(kind, **overrides))
    assert 0.0 <= ph <= 14.0


@pytest.mark.parametrize("kind", ALL_TYPES)
def test_zero_total_volume_is_neutral(make_state, kind):
    assert solve_ph(make_state(kind, analyte_vol=0.0, titrant_vol=0.0)) == 7.00


def test_unknown_type_is_neutral_with_warning():
    state = TitrationState(type="strong_base_quadprotic_acid", titrant_vol=10.0)
    with pytest.warns(UserWarning, match="Unknown titration type"):
        assert solve_ph(state) == 7.00


@pytest.mark.parametrize("kind", ALL_TYPES)
def test_repeated_calls_are_identical_and_pure(make_state, kind):
    state = make_state(kind, titrant_vol=17.3)
    snapshot = copy.deepcopy(state)
    first = solve_ph(state)
    second = solve_ph(state)
    assert first == second
    assert state == snapshot
