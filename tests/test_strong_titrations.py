"""Strong acid/strong base titrations: exact closed-form pH."""

import math

import pytest

from burette.chemistry import solve_ph


def test_initial_strong_acid(make_state):
    assert math.isclose(solve_ph(make_state("strong_base_strong_acid")), 1.0, abs_tol=1e-9)


def test_equivalence_is_exactly_neutral(make_state):
    state = make_state("strong_base_strong_acid", titrant_vol=25.00)
    assert abs(solve_ph(state) - 7.00) < 1e-9


def test_before_equivalence(make_state):
    state = make_state("strong_base_strong_acid", titrant_vol=10.0)
    expected = -math.log10(0.0015 / 0.035)
    assert math.isclose(solve_ph(state), expected, abs_tol=1e-9)


def test_excess_base(make_state):
    state = make_state("strong_base_strong_acid", titrant_vol=35.0)
    expected = 14.0 + math.log10(0.001 / 0.060)
    assert math.isclose(solve_ph(state), expected, abs_tol=1e-9)


def test_strong_acid_into_strong_base_equivalence(make_state):
    state = make_state("strong_acid_strong_base", titrant_vol=25.00)
    assert abs(solve_ph(state) - 7.00) < 1e-9


@pytest.mark.parametrize("volume", [0.0, 5.0, 12.5, 24.0, 24.99, 25.01, 30.0, 50.0])
def test_directions_are_mirror_images(make_state, volume):
    acid_in_flask = solve_ph(make_state("strong_base_strong_acid", titrant_vol=volume))
    base_in_flask = solve_ph(make_state("strong_acid_strong_base", titrant_vol=volume))
    assert math.isclose(acid_in_flask, 14.0 - base_in_flask, abs_tol=1e-9)


def test_concentrated_acid_clamps_to_zero(make_state):
    state = make_state("strong_base_strong_acid", analyte_conc=5.0)
    assert solve_ph(state) == 0.0
