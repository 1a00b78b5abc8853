"""Unit tests for stoichiometric equivalence and half-equivalence volumes."""

import math

import pytest

from burette.chemistry import (
    equivalence_points,
    equivalence_volume,
    half_equivalence_volume,
)
from burette.schema import TitrationType

MONOPROTIC = [
    "strong_base_strong_acid",
    "strong_acid_strong_base",
    "strong_base_weak_acid",
    "strong_acid_weak_base",
    "weak_acid_weak_base",
]


@pytest.mark.parametrize("kind", MONOPROTIC)
def test_single_point_for_monoprotic(make_state, kind):
    points = equivalence_points(make_state(kind))
    assert len(points) == 1
    assert points[0].label == "Eq"
    assert math.isclose(points[0].volume, 25.0)


@pytest.mark.parametrize("kind", list(TitrationType))
def test_point_count_matches_proton_count(make_state, kind):
    points = equivalence_points(make_state(kind, analyte_conc=0.05, titrant_conc=0.2))
    assert len(points) == kind.protons
    for i, point in enumerate(points, start=1):
        assert math.isclose(point.volume, i * 6.25)


def test_points_are_increasing(make_state):
    volumes = [p.volume for p in equivalence_points(make_state("strong_base_triprotic_acid"))]
    assert volumes == sorted(volumes)


def test_zero_titrant_concentration_gives_no_points(make_state):
    state = make_state("strong_base_diprotic_acid", titrant_conc=0.0)
    assert equivalence_points(state) == []
    assert math.isnan(equivalence_volume(state))


def test_does_not_depend_on_delivered_volume(make_state):
    assert equivalence_points(make_state("strong_base_weak_acid", titrant_vol=0.0)) == (
        equivalence_points(make_state("strong_base_weak_acid", titrant_vol=40.0))
    )


def test_half_equivalence_volume(make_state):
    assert math.isclose(half_equivalence_volume(make_state("strong_base_weak_acid")), 12.5)


def test_half_equivalence_clamped_to_burette(make_state):
    state = make_state("strong_base_weak_acid", titrant_conc=0.01, titrant_max=50.0)
    assert half_equivalence_volume(state) == 50.0


def test_half_equivalence_with_empty_burette(make_state):
    state = make_state("strong_base_weak_acid", titrant_conc=0.0)
    assert half_equivalence_volume(state) == state.titrant_max
