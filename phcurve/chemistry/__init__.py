"""
Chemistry models for simulated acid-base titration curves.

This subpackage turns titration set-up parameters into equilibrium pH values
for the four supported reaction classes: weak acid/strong base, weak
base/strong acid, strong acid/strong base and strong base/strong acid.

Modules:
    parameters:
        TitrationParameters (user-facing set-up, with input clamping) and
        ReactionState (diluted composition at one titrant volume).

    equilibrium:
        Charge-balance residuals for weak acids and weak bases, solved for
        log10[H⁺] with the bracketing root finder.

    strong_strong:
        Closed-form quadratic pH for fully dissociated pairs.

Model Assumptions:
    Dilute aqueous solution at fixed Kw = 1e-14, single-equilibrium (monoprotic)
    acids and bases, concentrations used in place of activities.

Design Principle:
    This subpackage has no dependencies on plotting/ or matplotlib.
"""

from .equilibrium import (
    WeakAcidResidual,
    WeakBaseResidual,
    residual_for,
    solve_weak,
    weak_acid_ph,
    weak_base_ph,
)
from .parameters import ReactionState, TitrationParameters
from .strong_strong import (
    excess_ph,
    strong_acid_strong_base_ph,
    strong_base_strong_acid_ph,
    strong_ph,
)

__all__ = [
    "ReactionState",
    "TitrationParameters",
    "WeakAcidResidual",
    "WeakBaseResidual",
    "residual_for",
    "solve_weak",
    "weak_acid_ph",
    "weak_base_ph",
    "excess_ph",
    "strong_acid_strong_base_ph",
    "strong_base_strong_acid_ph",
    "strong_ph",
]
