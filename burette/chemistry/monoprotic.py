"""pH of monoprotic titrations: strong/strong, strong/weak and weak/weak.

Every function takes amounts in moles and the total solution volume in
litres, and returns a pH already clamped to [0, 14]. Arguments are ordered
``(analyte moles, titrant moles, total volume, constants...)``.

Weak systems are split into regions as the titrant sweeps past the analyte:

    before titrant      quadratic on the weak species alone
    buffer              exact charge balance, solved by log-space bisection
    equivalence         hydrolysis of the conjugate species
    excess              excess strong titrant plus suppressed hydrolysis

For strong/weak pairs the charge balance runs right up to ``nT = nA``, where
it reduces to the conjugate hydrolysis, and the excess form starts from that
same value, so the curve has no step on either side of equivalence. The weak
acid/weak base pair uses a fixed band (``|nT - nA| <= EQ_ZONE * nA``) in which
the two hydrolyses cancel.
"""

from __future__ import annotations

from .numerics import (
    KW,
    NEUTRAL_PH,
    clamp_ph,
    find_h,
    k_from_pk,
    ph_from_h,
    ph_from_oh,
    weak_equilibrium,
)

STRONG_TOLERANCE: float = 1e-10
EQ_ZONE: float = 0.005


def strong_base_strong_acid(n_acid: float, n_base: float, vt_l: float) -> float:
    """Strong base from the burette into a strong acid."""
    diff = n_acid - n_base
    if abs(diff) < STRONG_TOLERANCE:
        return NEUTRAL_PH
    if diff > 0:
        return ph_from_h(diff / vt_l)
    return ph_from_oh(-diff / vt_l)


def strong_acid_strong_base(n_base: float, n_acid: float, vt_l: float) -> float:
    """Strong acid from the burette into a strong base."""
    diff = n_base - n_acid
    if abs(diff) < STRONG_TOLERANCE:
        return NEUTRAL_PH
    if diff > 0:
        return ph_from_oh(diff / vt_l)
    return ph_from_h(-diff / vt_l)


def strong_base_weak_acid(n_ha: float, n_oh: float, vt_l: float, pka: float) -> float:
    """Strong base from the burette into a weak acid HA.

    Buffer charge balance: ``[H+] + [Na+] = [A-] + [OH-]`` with
    ``[A-] = C_HA * Ka / ([H+] + Ka)``.
    """
    ka = k_from_pk(pka)

    if n_oh <= 0:
        return ph_from_h(weak_equilibrium(ka, n_ha / vt_l))

    if n_oh < n_ha:
        c_total = n_ha / vt_l
        na = n_oh / vt_l

        def residual(h):
            return h + na - c_total * ka / (h + ka) - KW / h

        return ph_from_h(find_h(residual))

    # Equivalence and excess: A- hydrolyses against any excess OH-.
    kb = KW / ka
    c_conj = n_ha / vt_l
    c_excess = max(n_oh - n_ha, 0.0) / vt_l
    return ph_from_oh(weak_equilibrium(kb, c_conj, c_excess))


def strong_acid_weak_base(n_b: float, n_h: float, vt_l: float, pkb: float) -> float:
    """Strong acid from the burette into a weak base B.

    Buffer charge balance: ``[H+] + [BH+] = [OH-] + [Cl-]`` with
    ``[BH+] = C_B * [H+] / ([H+] + Ka)`` and ``Ka = Kw / Kb``.
    """
    kb = k_from_pk(pkb)
    ka = KW / kb

    if n_h <= 0:
        return ph_from_oh(weak_equilibrium(kb, n_b / vt_l))

    if n_h < n_b:
        c_total = n_b / vt_l
        cl = n_h / vt_l

        def residual(h):
            return h + c_total * h / (h + ka) - KW / h - cl

        return ph_from_h(find_h(residual))

    c_conj = n_b / vt_l
    c_excess = max(n_h - n_b, 0.0) / vt_l
    return ph_from_h(weak_equilibrium(ka, c_conj, c_excess))


def weak_acid_weak_base(
    n_b: float, n_ha: float, vt_l: float, pka: float, pkb: float
) -> float:
    """Weak acid HA from the burette into a weak base B.

    Outside the equivalence band both conjugate pairs are kept in the charge
    balance ``[H+] + [BH+] = [OH-] + [A-]``; ``Ka`` is the titrant acid's and
    ``Ka(BH+) = Kw / Kb``. Past equivalence this describes the excess HA
    buffered by the A- already formed. Inside the band the two hydrolyses
    cancel to ``pH = 7 + (pKa - pKb) / 2``, independent of concentration.
    """
    ka = k_from_pk(pka)
    kb = k_from_pk(pkb)

    if n_ha <= 0:
        return ph_from_oh(weak_equilibrium(kb, n_b / vt_l))

    if abs(n_ha - n_b) <= EQ_ZONE * n_b:
        return clamp_ph(7.0 + 0.5 * (pka - pkb))

    ka_conj = KW / kb
    c_base = n_b / vt_l
    c_acid = n_ha / vt_l

    def residual(h):
        bh = c_base * h / (h + ka_conj)
        a = c_acid * ka / (h + ka)
        return h + bh - KW / h - a

    return ph_from_h(find_h(residual))
