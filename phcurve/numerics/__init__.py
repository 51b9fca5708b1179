"""
Numerical routines for the equilibrium solvers.

This subpackage contains the bracketing root search used by the weak
acid/base models. Functions operate on plain callables and floats; no
chemistry-specific logic is included.

Modules:
    root_finder:
        Bracket scan plus bisection over the exponent y of [H+] = 10**y on
        [-14, 0], with warm-start node ordering and a best-of-three fallback
        when the residual has no sign change in the domain.

Design Principle:
    This subpackage has no dependencies on chemistry/ or plotting/ modules.
    It can be tested in isolation against any residual function.
"""

from .root_finder import (
    DEFAULT_CONFIG,
    RootResult,
    SolverConfig,
    evaluate_at_log_h,
    find_log_h_root,
    scan_pairs,
    solve_log_h,
)

__all__ = [
    "DEFAULT_CONFIG",
    "RootResult",
    "SolverConfig",
    "evaluate_at_log_h",
    "find_log_h_root",
    "scan_pairs",
    "solve_log_h",
]
