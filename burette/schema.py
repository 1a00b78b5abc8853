"""Define the titration state record and standardized column names."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from enum import Enum
from typing import Mapping

from .units import moles, ml_to_l


class TitrationType(str, Enum):
    """The seven supported titration archetypes.

    Names read ``<titrant>_<analyte>``: the first species is in the burette and
    the second in the flask, except ``weak_acid_weak_base`` where the weak acid
    is delivered from the burette into the weak base.
    """

    STRONG_BASE_STRONG_ACID = "strong_base_strong_acid"
    STRONG_ACID_STRONG_BASE = "strong_acid_strong_base"
    STRONG_BASE_WEAK_ACID = "strong_base_weak_acid"
    STRONG_ACID_WEAK_BASE = "strong_acid_weak_base"
    WEAK_ACID_WEAK_BASE = "weak_acid_weak_base"
    STRONG_BASE_DIPROTIC_ACID = "strong_base_diprotic_acid"
    STRONG_BASE_TRIPROTIC_ACID = "strong_base_triprotic_acid"

    @property
    def protons(self) -> int:
        """Number of titratable protons (equivalence points) on the analyte."""
        if self is TitrationType.STRONG_BASE_DIPROTIC_ACID:
            return 2
        if self is TitrationType.STRONG_BASE_TRIPROTIC_ACID:
            return 3
        return 1

    @property
    def base_into_acid(self) -> bool:
        """True when pH rises during the titration."""
        return self.value.startswith("strong_base")


# External record keys (camelCase) mapped onto dataclass fields.
_FIELD_ALIASES = {
    "analyteConc": "analyte_conc",
    "analyteVol": "analyte_vol",
    "titrantConc": "titrant_conc",
    "titrantVol": "titrant_vol",
    "titrantMax": "titrant_max",
    "pKa": "pka",
    "pKb": "pkb",
    "pKa2": "pka2",
    "pKa3": "pka3",
}


@dataclass(frozen=True)
class TitrationState:
    """Snapshot of one titration: flask, burette and equilibrium constants.

    The hosting application owns the state and replaces it on every titrant
    addition (see ``burette.simulation``); the solver and the equivalence
    calculator only read it.

    Attributes:
        type: Titration archetype. Known strings are coerced to
            :class:`TitrationType`; unknown strings are kept as-is and make the
            solver fall back to neutral pH.
        analyte_conc: Analyte concentration in the flask (mol/L).
        analyte_vol: Analyte volume in the flask (mL).
        titrant_conc: Titrant concentration in the burette (mol/L).
        titrant_vol: Cumulative titrant delivered (mL).
        titrant_max: Burette capacity (mL).
        pka: pKa of the weak acid, or pKa1 of a polyprotic acid.
        pkb: pKb of the weak base.
        pka2: Second ionisation exponent of a polyprotic acid.
        pka3: Third ionisation exponent of a triprotic acid.
    """

    type: TitrationType | str = TitrationType.STRONG_BASE_STRONG_ACID
    analyte_conc: float = 0.100
    analyte_vol: float = 25.00
    titrant_conc: float = 0.100
    titrant_vol: float = 0.00
    titrant_max: float = 50.00
    pka: float = 4.74
    pkb: float = 4.74
    pka2: float = 7.20
    pka3: float = 12.35

    def __post_init__(self):
        if not isinstance(self.type, TitrationType):
            try:
                object.__setattr__(self, "type", TitrationType(self.type))
            except ValueError:
                pass

    @classmethod
    def from_mapping(cls, record: Mapping[str, object]) -> "TitrationState":
        """Build a state from a record with camelCase or snake_case keys.

        Unrecognised keys (indicator selection, drip rate and other UI fields)
        are ignored; missing keys take the dataclass defaults.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in record.items():
            name = _FIELD_ALIASES.get(key, key)
            if name not in known:
                continue
            kwargs[name] = value if name == "type" else float(value)
        return cls(**kwargs)

    @property
    def total_volume_l(self) -> float:
        return ml_to_l(self.analyte_vol + self.titrant_vol)

    @property
    def analyte_moles(self) -> float:
        return moles(self.analyte_conc, self.analyte_vol)

    @property
    def titrant_moles(self) -> float:
        return moles(self.titrant_conc, self.titrant_vol)

    @property
    def protons(self) -> int:
        if isinstance(self.type, TitrationType):
            return self.type.protons
        return 1


def validate_state(state: TitrationState) -> TitrationState:
    """Reject states the solver would only answer with a fallback value.

    The solver never raises; callers that want stricter behaviour run this
    check first.

    Args:
        state (TitrationState): State to check.

    Returns:
        TitrationState: The same state, for chaining.

    Raises:
        ValueError: If the type is unknown, any concentration or volume is
            negative or non-finite, or any pK is non-finite.
    """
    if not isinstance(state.type, TitrationType):
        valid = ", ".join(t.value for t in TitrationType)
        raise ValueError(f"Unknown titration type {state.type!r}; expected one of: {valid}")

    for name in ("analyte_conc", "analyte_vol", "titrant_conc", "titrant_vol", "titrant_max"):
        value = float(getattr(state, name))
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value!r}")
        if value < 0:
            raise ValueError(f"{name} cannot be negative, got {value!r}")

    for name in ("pka", "pkb", "pka2", "pka3"):
        value = float(getattr(state, name))
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value!r}")

    if state.titrant_vol > state.titrant_max:
        raise ValueError(
            f"titrant_vol ({state.titrant_vol}) exceeds burette capacity "
            f"titrant_max ({state.titrant_max})"
        )
    return state


@dataclass(frozen=True)
class CurveColumns:
    """Standardized column labels for simulated titration curves.

    Attributes:
        volume: Cumulative titrant volume in mL.
        ph: Solver pH at that volume, clamped to [0, 14].
    """

    volume: str = "Volume (mL)"
    ph: str = "pH"


COLUMNS = CurveColumns()
