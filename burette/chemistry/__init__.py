"""
Equilibrium chemistry for simulated acid-base titrations.

This subpackage turns a titration snapshot into a pH value and into the
stoichiometric equivalence volumes used as curve markers.

Modules:
    numerics:
        Constants, pH clamping, the non-negative quadratic root and the
        shared log-space [H+] bisection.

    monoprotic:
        Strong/strong, strong/weak and weak/weak regimes: initial solution,
        charge-balance buffer, equivalence hydrolysis and excess titrant.

    polyprotic:
        Diprotic and triprotic acids with strong base via stoichiometric
        speciation and a single charge-balanced alpha-target search.

    solver:
        ``solve_ph`` dispatch over the seven titration types.

    equivalence:
        Equivalence and half-equivalence volumes.

Design Principle:
    This subpackage has no dependencies on plotting/ or matplotlib. Every
    function is pure: no hidden state, no I/O, no randomness.
"""

from .equivalence import (
    EquivalencePoint,
    equivalence_points,
    equivalence_volume,
    half_equivalence_volume,
)
from .solver import solve_ph

__all__ = [
    "EquivalencePoint",
    "equivalence_points",
    "equivalence_volume",
    "half_equivalence_volume",
    "solve_ph",
]
