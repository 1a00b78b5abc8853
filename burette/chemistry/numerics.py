"""Numerical building blocks shared by every titration regime.

All [H+] searches run in log space: the physical root can sit anywhere in
the ~14 decades between 1e-14 and 1 mol/L, so each bisection step takes the
geometric mean ``H = sqrt(lo * hi)`` of the bracket. 150 steps shrink the
log-width of any bracket used here far below double-precision resolution,
which makes every search terminate after a fixed, bounded amount of work and
return bit-for-bit reproducible results.
"""

from __future__ import annotations

import math
from typing import Callable

KW: float = 1e-14
EPS: float = 1e-15
NEUTRAL_PH: float = 7.0
PH_MIN: float = 0.0
PH_MAX: float = 14.0

H_MIN: float = 1e-14
H_MAX: float = 1.0
BISECTION_ITERATIONS: int = 150

# Concentration floor for the log conversions; anything below maps past the
# clamp limits.
_CONC_FLOOR: float = 1e-300


def k_from_pk(pk: float) -> float:
    """Return the equilibrium constant ``K = 10^-pK``."""
    return 10.0 ** (-float(pk))


def clamp_ph(value: float, lo: float = PH_MIN, hi: float = PH_MAX) -> float:
    """Clamp a pH into ``[lo, hi]``; NaN maps to neutral."""
    value = float(value)
    if math.isnan(value):
        return NEUTRAL_PH
    return min(max(value, lo), hi)


def ph_from_h(h: float) -> float:
    """Clamped pH from a hydronium concentration (mol/L)."""
    return clamp_ph(-math.log10(max(float(h), _CONC_FLOOR)))


def ph_from_oh(oh: float) -> float:
    """Clamped pH from a hydroxide concentration (mol/L)."""
    return clamp_ph(PH_MAX + math.log10(max(float(oh), _CONC_FLOOR)))


def pos_quad_root(a: float, b: float, c: float) -> float:
    """Return the physically meaningful root of ``a*x**2 + b*x + c = 0``.

    Every quadratic solved here has ``a > 0`` and ``c <= 0``, so the
    ``+sqrt`` root is the non-negative one. A negative discriminant cannot
    arise for physical inputs and yields 0 instead of NaN.
    """
    disc = b * b - 4.0 * a * c
    if disc < 0:
        return 0.0
    root = (-b + math.sqrt(disc)) / (2.0 * a)
    return max(root, 0.0)


def weak_equilibrium(k: float, conc: float, excess: float = 0.0) -> float:
    """Ion concentration produced by a weak species, optionally with a common ion.

    Solves ``x (x + excess) / (conc - x) = k`` for ``x`` and returns
    ``excess + x``. With ``excess = 0`` this is the textbook weak acid
    (``[H+]``) or weak base (``[OH-]``) quadratic; with a strong excess of the
    same ion the weak contribution is suppressed and the result tends to
    ``excess``.

    Args:
        k (float): Dissociation (Ka) or hydrolysis (Kb) constant.
        conc (float): Formal concentration of the weak species (mol/L).
        excess (float, optional): Concentration of the same ion already
            supplied by a strong acid or base (mol/L). Defaults to ``0``.

    Returns:
        float: Total ``[H+]`` or ``[OH-]`` in mol/L.
    """
    excess = max(float(excess), 0.0)
    return excess + pos_quad_root(1.0, k + excess, -k * max(float(conc), 0.0))


def find_h(
    score: Callable[[float], float],
    target: float = 0.0,
    *,
    increasing: bool = True,
    lo: float = H_MIN,
    hi: float = H_MAX,
    iterations: int = BISECTION_ITERATIONS,
) -> float:
    """Find ``[H+]`` where a monotonic score crosses ``target``.

    Args:
        score (callable): Function of ``[H+]`` (mol/L) that is monotonic over
            ``[lo, hi]``, e.g. a charge-balance residual or a deprotonation
            fraction.
        target (float, optional): Value the score must reach. Defaults to
            ``0`` (charge balance).
        increasing (bool, optional): Whether ``score`` increases with
            ``[H+]``. Defaults to ``True``.
        lo (float, optional): Lower bracket bound (mol/L).
        hi (float, optional): Upper bracket bound (mol/L).
        iterations (int, optional): Fixed number of bisection steps.

    Returns:
        float: Geometric midpoint of the final bracket. When the root lies
        outside the bracket the search converges onto the nearer bound.
    """
    for _ in range(iterations):
        h = math.sqrt(lo * hi)
        too_high = score(h) > target if increasing else score(h) < target
        if too_high:
            hi = h
        else:
            lo = h
    return math.sqrt(lo * hi)
