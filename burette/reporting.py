"""Format solver output into human-readable chemistry readouts.

This module sits after the solver: it derives pOH, ion concentrations and
progress figures from one state and formats them for console tables.
"""

from __future__ import annotations

import math
from typing import Dict

import numpy as np
import pandas as pd

from .chemistry.equivalence import equivalence_points, equivalence_volume
from .chemistry.numerics import k_from_pk
from .chemistry.solver import solve_ph
from .schema import TitrationState, TitrationType
from .simulation import percent_neutralization

_SUPERSCRIPTS = str.maketrans("0123456789", "⁰¹²³⁴⁵⁶⁷⁸⁹")

_KA_TYPES = {
    TitrationType.STRONG_BASE_WEAK_ACID,
    TitrationType.WEAK_ACID_WEAK_BASE,
    TitrationType.STRONG_BASE_DIPROTIC_ACID,
    TitrationType.STRONG_BASE_TRIPROTIC_ACID,
}
_KB_TYPES = {
    TitrationType.STRONG_ACID_WEAK_BASE,
    TitrationType.WEAK_ACID_WEAK_BASE,
}


def format_sci(value: float) -> str:
    """Format a positive number as ``m.mm×10ⁿ`` with a superscript exponent.

    Args:
        value (float): Quantity to format (e.g. a concentration in mol/L).

    Returns:
        str: ``"0"`` for zero, ``"nan"`` for non-finite input, otherwise a
        mantissa with two decimals and a signed superscript exponent, e.g.
        ``"1.82×10⁻⁵"`` or ``"1.00×10⁺⁰"``.
    """
    v = float(value)
    if v == 0:
        return "0"
    if not math.isfinite(v):
        return "nan"
    exponent = int(math.floor(math.log10(abs(v))))
    mantissa = v / 10**exponent
    sign = "⁻" if exponent < 0 else "⁺"
    return f"{mantissa:.2f}×10{sign}{str(abs(exponent)).translate(_SUPERSCRIPTS)}"


def chemistry_readout(state: TitrationState) -> Dict[str, object]:
    """Collect the quantities shown next to the pH meter.

    Args:
        state (TitrationState): Current titration snapshot.

    Returns:
        dict: ``pH``, ``pOH``, ``[H+]`` and ``[OH-]`` (mol/L), ``Ka`` and
        ``Kb`` (NaN when the type has no such constant), ``percent_neutralized``,
        ``total_volume_ml``, ``veq_ml`` (first equivalence, NaN if undefined)
        and ``equivalence_points``.

    Note:
        ``Ka`` is the first ionisation constant for polyprotic acids and the
        titrant acid's constant for weak acid/weak base titrations.
    """
    ph = solve_ph(state)
    poh = 14.0 - ph
    return {
        "pH": ph,
        "pOH": poh,
        "[H+]": 10.0**-ph,
        "[OH-]": 10.0**-poh,
        "Ka": k_from_pk(state.pka) if state.type in _KA_TYPES else np.nan,
        "Kb": k_from_pk(state.pkb) if state.type in _KB_TYPES else np.nan,
        "percent_neutralized": percent_neutralization(state),
        "total_volume_ml": state.analyte_vol + state.titrant_vol,
        "veq_ml": equivalence_volume(state),
        "equivalence_points": equivalence_points(state),
    }


def readout_table(state: TitrationState) -> pd.DataFrame:
    """Render :func:`chemistry_readout` as a two-column table of strings."""
    r = chemistry_readout(state)
    markers = ", ".join(f"{p.label}: {p.volume:.2f} mL" for p in r["equivalence_points"])
    rows = [
        ("Titrant added (mL)", f"{state.titrant_vol:.2f}"),
        ("Total volume (mL)", f"{r['total_volume_ml']:.2f}"),
        ("pH", f"{r['pH']:.2f}"),
        ("pOH", f"{r['pOH']:.2f}"),
        ("[H+] (M)", format_sci(r["[H+]"])),
        ("[OH-] (M)", format_sci(r["[OH-]"])),
        ("Ka", format_sci(r["Ka"]) if np.isfinite(r["Ka"]) else "—"),
        ("Kb", format_sci(r["Kb"]) if np.isfinite(r["Kb"]) else "—"),
        ("Neutralized (%)", f"{r['percent_neutralized']:.1f}"),
        ("Equivalence points", markers or "—"),
    ]
    return pd.DataFrame(rows, columns=["Quantity", "Value"])
