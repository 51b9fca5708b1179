"""
Titration curve generation.

This module sweeps the delivered titrant volume from zero to twice the
equivalence volume and solves the equilibrium pH at every grid point:
- weak analytes use the charge-balance root search, warm-started from the
  previous point's exponent so each bracket scan starts next to the answer;
- strong/strong pairs use the closed-form quadratic.

The reported pH is clamped to [0, 14]. The initial pH (no titrant) is
reported separately and is not clamped.

The generator is a pure function of its arguments. The only carried state
is the warm-start exponent, which lives inside one call.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

import numpy as np
import pandas as pd

from .chemistry.equilibrium import solve_weak
from .chemistry.parameters import TitrationParameters
from .chemistry.strong_strong import strong_ph
from .constants import (
    DEFAULT_POINT_COUNT,
    EQUIVALENCE_FLOOR,
    NEUTRAL_PH,
    PH_MAX,
    PH_MIN,
    TITRANT_FLOOR,
)
from .numerics.root_finder import DEFAULT_CONFIG, SolverConfig
from .schema import COLUMNS

logger = logging.getLogger(__name__)

X_UNITS = ("equivalents", "ml")


class TitrationPoint(NamedTuple):
    x: float
    ph: float


@dataclass(frozen=True, eq=False)
class TitrationCurve:
    """One simulated titration curve.

    Attributes:
        x: Titrant axis, in equivalents or cm^3 depending on ``x_unit``.
            Strictly increasing whenever the equivalence volume is positive.
        ph: Display pH at each ``x``, clamped to [0, 14].
        converged: ``False`` where the root search found no sign change and
            returned its best-of-three estimate. Always ``True`` for
            strong/strong systems.
        initial_ph: pH before any titrant is added.
        equivalence_volume_ml: Titrant volume (cm^3) delivering one
            equivalent.
        x_unit: ``"equivalents"`` or ``"ml"``.
        equivalence_index: Grid index of the equivalence point.

    The arrays are read-only.
    """

    x: np.ndarray
    ph: np.ndarray
    converged: np.ndarray
    initial_ph: float
    equivalence_volume_ml: float
    x_unit: str
    equivalence_index: int

    def __post_init__(self):
        for name in ("x", "ph", "converged"):
            arr = np.array(getattr(self, name))
            arr.setflags(write=False)
            object.__setattr__(self, name, arr)

    def __len__(self) -> int:
        return int(self.x.shape[0])

    @property
    def points(self) -> Tuple[TitrationPoint, ...]:
        return tuple(
            TitrationPoint(float(x), float(p)) for x, p in zip(self.x, self.ph)
        )

    @property
    def all_converged(self) -> bool:
        return bool(np.all(self.converged))

    def to_dataframe(self) -> pd.DataFrame:
        """Return the curve as a DataFrame with standardized column labels."""
        return pd.DataFrame(
            {
                COLUMNS.x_label(self.x_unit): self.x,
                COLUMNS.ph: self.ph,
                COLUMNS.converged: self.converged,
            }
        )


def equivalence_volume_ml(params: TitrationParameters) -> float:
    """Titrant volume (cm^3) at which titrant moles equal initial analyte moles.

    A zero titrant concentration is floored at 1e-12 mol dm^-3, giving a very
    large but finite volume.
    """
    return (params.analyte_concentration * params.analyte_volume_ml) / max(
        params.titrant_concentration, TITRANT_FLOOR
    )


def initial_log_h_guess(params: TitrationParameters) -> float:
    """Warm-start exponent for the titrant-free solution of a weak analyte.

    Offsets the guess from neutral by the distance of pKa (acid) or pKb
    (base) from 7, which lands near the acidic or basic end where the
    undiluted analyte sits.
    """
    if params.is_acid:
        return -max(0.0, NEUTRAL_PH - params.pk)
    return -max(0.0, params.pk - NEUTRAL_PH)


def initial_ph(
    params: TitrationParameters, config: SolverConfig = DEFAULT_CONFIG
) -> float:
    """pH of the analyte before any titrant is delivered (unclamped)."""
    if params.is_weak:
        return -solve_weak(params, 0.0, initial_log_h_guess(params), config).log_h
    return strong_ph(params, 0.0)


def clamp_ph(value: float) -> float:
    return min(max(value, PH_MIN), PH_MAX)


def _equivalence_index(point_count: int) -> int:
    # Half-up rounding of the grid midpoint; the grid ends at 2·V_eq.
    return int(math.floor(0.5 * (point_count - 1) + 0.5))


def generate_curve(
    params: TitrationParameters,
    point_count: int = DEFAULT_POINT_COUNT,
    x_unit: str = "equivalents",
    warm_start: bool = True,
    config: SolverConfig = DEFAULT_CONFIG,
) -> TitrationCurve:
    """Simulate pH over titrant volumes from 0 to twice the equivalence volume.

    Args:
        params (TitrationParameters): Titration set-up. Inputs are used as
            given; clamp user values with
            ``TitrationParameters.from_user_input`` first.
        point_count (int, optional): Number of grid points including both
            ends. Defaults to ``401``.
        x_unit (str, optional): ``"equivalents"`` (delivered volume divided by
            the equivalence volume) or ``"ml"`` (delivered volume in cm^3).
        warm_start (bool, optional): Seed each weak-analyte solve with the
            previous point's exponent. Disabling it makes every solve start
            from a full left-to-right scan; the solved curve is the same to
            within the bisection tolerance.
        config (SolverConfig, optional): Root-search settings.

    Returns:
        TitrationCurve: Ordered curve plus initial pH and equivalence volume.

    Raises:
        ValueError: If ``point_count < 2`` or ``x_unit`` is unknown.

    Note:
        Points where the root search found no bracket are kept with the
        fallback estimate and flagged in ``TitrationCurve.converged``; no
        exception is raised for any non-negative set of inputs.
    """
    if int(point_count) < 2:
        raise ValueError(f"point_count must be at least 2, got {point_count}")
    if x_unit not in X_UNITS:
        raise ValueError(f"x_unit must be one of {X_UNITS}, got {x_unit!r}")
    point_count = int(point_count)

    veq = equivalence_volume_ml(params)
    volumes = np.linspace(0.0, 2.0 * veq, point_count)
    ph_initial = initial_ph(params, config)

    ph_values = np.empty(point_count, dtype=float)
    converged = np.ones(point_count, dtype=bool)
    last_log_h: Optional[float] = None

    for i, added_ml in enumerate(volumes):
        added_ml = float(added_ml)
        if params.is_weak:
            guess = last_log_h if warm_start else None
            result = solve_weak(params, added_ml, guess, config)
            raw_ph = -result.log_h
            if not result.converged:
                converged[i] = False
                logger.debug(
                    "No pH bracket at %.4f mL; using fallback estimate pH %.4f",
                    added_ml,
                    raw_ph,
                )
        else:
            raw_ph = strong_ph(params, added_ml)

        ph = clamp_ph(raw_ph)
        ph_values[i] = ph
        last_log_h = -ph

    if params.is_weak and not converged.all():
        logger.warning(
            "%d of %d points had no sign change in the charge balance; "
            "fallback estimates were used",
            int((~converged).sum()),
            point_count,
        )

    if x_unit == "ml":
        x = volumes
    else:
        x = volumes / max(veq, EQUIVALENCE_FLOOR)

    logger.debug(
        "Generated %d-point %s %s curve: initial pH %.4f, V_eq %.4f mL",
        point_count,
        params.analyte_strength,
        params.analyte_kind,
        ph_initial,
        veq,
    )

    return TitrationCurve(
        x=x,
        ph=ph_values,
        converged=converged,
        initial_ph=float(ph_initial),
        equivalence_volume_ml=float(veq),
        x_unit=x_unit,
        equivalence_index=_equivalence_index(point_count),
    )
