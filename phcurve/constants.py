"""Physical constants and numerical bounds shared by the equilibrium solvers.

All concentrations are in mol dm^-3 and all volumes handed to the public API
are in cm^3 (mL). The water ion product is fixed at its 25 °C value; no
temperature or activity correction is applied anywhere in the package.
"""

from __future__ import annotations

KW: float = 1.0e-14

# Solver domain for the hydrogen-ion exponent y, with [H+] = 10**y.
LOG_H_MIN: float = -14.0
LOG_H_MAX: float = 0.0

PH_MIN: float = 0.0
PH_MAX: float = 14.0
NEUTRAL_PH: float = 7.0

# Lower bound on titrant concentration when it appears as a divisor.
TITRANT_FLOOR: float = 1.0e-12

DEFAULT_POINT_COUNT: int = 401

# Lower bound on the equivalence volume when converting to equivalents.
EQUIVALENCE_FLOOR: float = 1.0e-12
