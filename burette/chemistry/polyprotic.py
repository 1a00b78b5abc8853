"""pH of a polyprotic acid (H_nA) titrated with strong base.

Instead of one closed-form buffer equation per region, the interior of the
titration is handled by a single search:

1. Distribute the delivered OH- over the n+1 protonation states in order
   (H_nA -> H_(n-1)A- first, then the next step), so at most one adjacent
   pair is in transition at any volume.
2. Compute the stoichiometric average degree of deprotonation
   ``alpha_target = sum(i * n_i) / sum(n_i)``.
3. Bisect in log space for the ``[H+]`` where the equilibrium average
   ``alpha(H) = sum(i * beta_i(H))`` matches ``alpha_target`` once the free
   protons are accounted for. With ``C`` the formal acid concentration, the
   charge balance ``[H+] + [Na+] = C * alpha(H) + [OH-]`` is exactly
   ``alpha(H) - ([H+] - [OH-]) / C = alpha_target``.

Only the pure acid (``nOH <= 0``) and the point at or past the last
equivalence (``nOH >= n * nA``) are handled in closed form.
"""

from __future__ import annotations

from typing import List, Sequence

from .numerics import (
    EPS,
    KW,
    find_h,
    k_from_pk,
    ph_from_h,
    ph_from_oh,
    weak_equilibrium,
)

# A polyprotic acid with a strong first step can hold [H+] above 1 M at the
# very start of the titration.
ALPHA_H_MAX: float = 10.0


def stoichiometric_speciation(
    n_acid: float, n_base: float, protons: int
) -> List[float]:
    """Split ``n_acid`` moles of H_nA over its protonation states after ``n_base`` OH-.

    Args:
        n_acid (float): Moles of fully protonated acid initially present.
        n_base (float): Moles of strong base delivered.
        protons (int): Number of acidic protons ``n``.

    Returns:
        list[float]: Moles of each state, index ``i`` = protons removed
        (``0`` is H_nA, ``n`` is A^n-). Base beyond ``n * n_acid`` is left
        out; the list always sums to ``n_acid``.
    """
    species = [0.0] * (protons + 1)
    species[0] = max(float(n_acid), 0.0)
    remaining = max(float(n_base), 0.0)
    for i in range(protons):
        if remaining <= 0:
            break
        step = min(remaining, species[i])
        species[i] -= step
        species[i + 1] += step
        remaining -= step
    return species


def speciation_fractions(h: float, kas: Sequence[float]) -> List[float]:
    """Equilibrium mole fractions ``beta_i`` of each protonation state at ``[H+] = h``.

    ``beta_i`` is proportional to ``Ka1 * ... * Ka_i / h**i``.
    """
    terms = [1.0]
    for ka in kas:
        terms.append(terms[-1] * ka / h)
    total = sum(terms)
    return [t / total for t in terms]


def deprotonation_fraction(h: float, kas: Sequence[float]) -> float:
    """Equilibrium average number of protons removed per acid molecule."""
    return sum(i * beta for i, beta in enumerate(speciation_fractions(h, kas)))


def polyprotic_with_strong_base(
    n_acid: float, n_oh: float, vt_l: float, kas: Sequence[float]
) -> float:
    """pH after ``n_oh`` moles of strong base have been added to ``n_acid`` of H_nA.

    Args:
        n_acid (float): Moles of polyprotic acid in the flask.
        n_oh (float): Moles of strong base delivered.
        vt_l (float): Total solution volume (L).
        kas (sequence of float): ``Ka1 .. Ka_n``, strongest first.

    Returns:
        float: pH clamped to [0, 14].
    """
    protons = len(kas)
    kb_last = KW / kas[-1]

    if n_oh <= 0:
        return ph_from_h(weak_equilibrium(kas[0], n_acid / vt_l))

    if n_oh >= protons * n_acid:
        c_excess = (n_oh - protons * n_acid) / vt_l
        return ph_from_oh(weak_equilibrium(kb_last, n_acid / vt_l, c_excess))

    species = stoichiometric_speciation(n_acid, n_oh, protons)
    total = sum(species)
    if total < EPS:
        return ph_from_oh(weak_equilibrium(kb_last, n_acid / vt_l))

    alpha_target = sum(i * n for i, n in enumerate(species)) / total
    c_total = total / vt_l

    def score(h):
        return deprotonation_fraction(h, kas) - (h - KW / h) / c_total

    h = find_h(score, alpha_target, increasing=False, hi=ALPHA_H_MAX)
    return ph_from_h(h)


def strong_base_diprotic(
    n_h2a: float, n_oh: float, vt_l: float, pka1: float, pka2: float
) -> float:
    """Strong base into a diprotic acid H2A."""
    return polyprotic_with_strong_base(
        n_h2a, n_oh, vt_l, [k_from_pk(pka1), k_from_pk(pka2)]
    )


def strong_base_triprotic(
    n_h3a: float, n_oh: float, vt_l: float, pka1: float, pka2: float, pka3: float
) -> float:
    """Strong base into a triprotic acid H3A."""
    return polyprotic_with_strong_base(
        n_h3a, n_oh, vt_l, [k_from_pk(pka1), k_from_pk(pka2), k_from_pk(pka3)]
    )
