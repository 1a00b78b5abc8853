"""Stoichiometric equivalence volumes for curve markers.

Pure stoichiometry: the ``i``-th equivalence of an n-protic analyte is
reached when ``i * nA`` moles of titrant have been delivered. No equilibrium
math and no iteration.
"""

from __future__ import annotations

import math
from typing import List, NamedTuple

from ..schema import TitrationState
from ..units import moles_to_ml

_ORDINALS = ("1st", "2nd", "3rd")

# Stand-in titrant concentration (mol/L) for the half-equivalence jump when
# the burette is empty.
_MIN_TITRANT_CONC: float = 1e-9


class EquivalencePoint(NamedTuple):
    volume: float
    label: str


def equivalence_points(state: TitrationState) -> List[EquivalencePoint]:
    """Return the equivalence markers of a titration, in increasing volume.

    Args:
        state (TitrationState): Titration snapshot; only concentrations,
            analyte volume and type are used.

    Returns:
        list[EquivalencePoint]: One point labelled ``"Eq"`` for monoprotic
        types, otherwise ``n`` points labelled ``"1st Eq"``, ``"2nd Eq"``,
        ``"3rd Eq"``. Empty when ``titrant_conc <= 0``.
    """
    if state.titrant_conc <= 0:
        return []

    n_analyte = state.analyte_moles
    protons = state.protons
    if protons == 1:
        return [EquivalencePoint(moles_to_ml(n_analyte, state.titrant_conc), "Eq")]
    return [
        EquivalencePoint(
            moles_to_ml(i * n_analyte, state.titrant_conc), f"{_ORDINALS[i - 1]} Eq"
        )
        for i in range(1, protons + 1)
    ]


def equivalence_volume(state: TitrationState) -> float:
    """First equivalence volume in mL, or NaN when it is undefined."""
    points = equivalence_points(state)
    return points[0].volume if points else math.nan


def half_equivalence_volume(state: TitrationState) -> float:
    """Volume (mL) halfway to the first equivalence, within the burette range.

    At this volume ``[HA] = [A-]`` for a weak acid, so ``pH ≈ pKa``.
    """
    conc = state.titrant_conc or _MIN_TITRANT_CONC
    v_half = moles_to_ml(state.analyte_moles, conc) / 2.0
    return min(max(v_half, 0.0), state.titrant_max)
