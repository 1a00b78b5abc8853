"""Centralized unit conversion utilities."""

from __future__ import annotations

ML_PER_L: float = 1000.0


def ml_to_l(volume_ml: float) -> float:
    """Convert a volume from mL to L.

    Args:
        volume_ml (float): Volume in millilitres (numerically equal to cm^3).

    Returns:
        float: Volume in litres (numerically equal to dm^3).

    Note:
        All amounts in the solver are moles and all concentrations mol/L, so
        every burette or flask volume passes through this conversion once.
    """
    return float(volume_ml) / ML_PER_L


def moles(conc_mol_l: float, volume_ml: float) -> float:
    """Return the amount (mol) held in ``volume_ml`` of a ``conc_mol_l`` solution."""
    return float(conc_mol_l) * ml_to_l(volume_ml)


def moles_to_ml(amount_mol: float, conc_mol_l: float) -> float:
    """Return the volume (mL) of a ``conc_mol_l`` solution holding ``amount_mol``."""
    return float(amount_mol) / float(conc_mol_l) * ML_PER_L
