"""
A Python package for simulating acid-base titrations.

Computes the equilibrium pH of a flask at any delivered titrant volume for
seven titration archetypes, and the stoichiometric equivalence volumes used
to mark the curve.

Modules:
    - schema: Titration state record, titration types and column names.
    - chemistry: Equilibrium pH solver and equivalence-point calculator.
    - simulation: Titrant delivery, curve sampling and inflection detection.
    - reporting: pOH, ion concentrations and formatted readouts.
    - plotting: Static figures of simulated curves.
"""

__version__ = "1.0.0"

from .chemistry import (
    EquivalencePoint,
    equivalence_points,
    equivalence_volume,
    half_equivalence_volume,
    solve_ph,
)
from .reporting import chemistry_readout, format_sci, readout_table
from .schema import TitrationState, TitrationType, validate_state
from .simulation import (
    add_drops,
    add_volume,
    curve_x_max,
    detect_equivalence_point,
    go_to_half_equivalence,
    percent_neutralization,
    reset_titration,
    simulate_curve,
)

__all__ = [
    # State
    "TitrationState",
    "TitrationType",
    "validate_state",
    # Chemistry
    "solve_ph",
    "EquivalencePoint",
    "equivalence_points",
    "equivalence_volume",
    "half_equivalence_volume",
    # Simulation
    "add_volume",
    "add_drops",
    "reset_titration",
    "go_to_half_equivalence",
    "percent_neutralization",
    "curve_x_max",
    "simulate_curve",
    "detect_equivalence_point",
    # Reporting
    "chemistry_readout",
    "format_sci",
    "readout_table",
]
