"""Equilibrium pH solver: dispatch a titration state to its regime algorithm."""

from __future__ import annotations

import warnings
from typing import Callable, Dict

from ..schema import TitrationState, TitrationType
from .monoprotic import (
    strong_acid_strong_base,
    strong_acid_weak_base,
    strong_base_strong_acid,
    strong_base_weak_acid,
    weak_acid_weak_base,
)
from .numerics import NEUTRAL_PH, clamp_ph
from .polyprotic import strong_base_diprotic, strong_base_triprotic

_Regime = Callable[[TitrationState, float, float, float], float]

_REGIMES: Dict[TitrationType, _Regime] = {
    TitrationType.STRONG_BASE_STRONG_ACID: lambda s, na, nt, vt: strong_base_strong_acid(
        na, nt, vt
    ),
    TitrationType.STRONG_ACID_STRONG_BASE: lambda s, na, nt, vt: strong_acid_strong_base(
        na, nt, vt
    ),
    TitrationType.STRONG_BASE_WEAK_ACID: lambda s, na, nt, vt: strong_base_weak_acid(
        na, nt, vt, s.pka
    ),
    TitrationType.STRONG_ACID_WEAK_BASE: lambda s, na, nt, vt: strong_acid_weak_base(
        na, nt, vt, s.pkb
    ),
    TitrationType.WEAK_ACID_WEAK_BASE: lambda s, na, nt, vt: weak_acid_weak_base(
        na, nt, vt, s.pka, s.pkb
    ),
    TitrationType.STRONG_BASE_DIPROTIC_ACID: lambda s, na, nt, vt: strong_base_diprotic(
        na, nt, vt, s.pka, s.pka2
    ),
    TitrationType.STRONG_BASE_TRIPROTIC_ACID: lambda s, na, nt, vt: strong_base_triprotic(
        na, nt, vt, s.pka, s.pka2, s.pka3
    ),
}


def solve_ph(state: TitrationState) -> float:
    """Return the equilibrium pH of a titration snapshot.

    The state is only read. Identical states always give identical results.

    Args:
        state (TitrationState): Flask, burette and equilibrium constants.

    Returns:
        float: pH in ``[0, 14]``. A non-positive total volume gives ``7.00``.
        An unknown titration type also gives ``7.00`` and emits a
        ``UserWarning``; run :func:`burette.schema.validate_state` upstream
        to reject such states instead.
    """
    vt_l = state.total_volume_l
    if vt_l <= 0:
        return NEUTRAL_PH

    regime = _REGIMES.get(state.type) if isinstance(state.type, TitrationType) else None
    if regime is None:
        warnings.warn(
            f"Unknown titration type {state.type!r}; returning neutral pH.",
            UserWarning,
            stacklevel=2,
        )
        return NEUTRAL_PH

    return clamp_ph(regime(state, state.analyte_moles, state.titrant_moles, vt_l))
