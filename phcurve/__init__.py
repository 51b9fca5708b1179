"""
A Python package for simulating acid-base titration curves.

Computes pH as a function of titrant volume for weak acid/strong base, weak
base/strong acid, strong acid/strong base and strong base/strong acid
titrations from an exact charge balance.

Modules:
    - numerics: Bracketing root search for log10[H+].
    - chemistry: Titration parameters, weak-analyte charge balances and the
      closed-form strong/strong solver.
    - curve: Sweeps titrant volume and chains warm-started solves.
    - output: Exports curves to CSV.
    - plotting: Renders curves with an equivalence-point guide.
"""

__version__ = "1.0.0"

from .chemistry import ReactionState, TitrationParameters
from .curve import (
    TitrationCurve,
    TitrationPoint,
    equivalence_volume_ml,
    generate_curve,
    initial_ph,
)
from .numerics import RootResult, SolverConfig, find_log_h_root, solve_log_h
from .output import save_curve_to_csv

__all__ = [
    # Parameters
    "TitrationParameters",
    "ReactionState",
    # Solvers
    "SolverConfig",
    "RootResult",
    "find_log_h_root",
    "solve_log_h",
    # Curves
    "TitrationCurve",
    "TitrationPoint",
    "generate_curve",
    "initial_ph",
    "equivalence_volume_ml",
    # Output
    "save_curve_to_csv",
]
