"""Charge-balance models for weak analytes titrated with a strong reagent.

Weak acid HA titrated with NaOH:
    [H⁺] + [Na⁺] = [OH⁻] + [A⁻]
    F(H) = H + C_Na - Kw/H - C_T·Ka/(Ka + H)

Weak base B titrated with HCl:
    [H⁺] + [BH⁺] = [OH⁻] + [Cl⁻]
    G(H) = H + C_T·H/(H + Ka') - Kw/H - C_Cl,   Ka' = Kw/Kb

Both residuals increase monotonically with H, so each has at most one root
in the solver domain. They are solved for log10[H⁺] with
:func:`phcurve.numerics.solve_log_h`; pH is the negated exponent.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..constants import KW
from ..numerics.root_finder import DEFAULT_CONFIG, RootResult, SolverConfig, solve_log_h
from .parameters import ReactionState, TitrationParameters


@dataclass(frozen=True)
class WeakAcidResidual:
    """Charge balance of a partly neutralized weak acid, evaluated at ``[H⁺]``."""

    ka: float
    acid_total: float
    cation: float

    @classmethod
    def from_state(cls, state: ReactionState, pka: float) -> "WeakAcidResidual":
        return cls(
            ka=10.0 ** (-pka),
            acid_total=state.analyte_total,
            cation=state.counter_ion,
        )

    def __call__(self, h: float) -> float:
        oh = KW / h
        conjugate_base = self.acid_total * self.ka / (self.ka + h)
        return h + self.cation - oh - conjugate_base


@dataclass(frozen=True)
class WeakBaseResidual:
    """Charge balance of a partly neutralized weak base, evaluated at ``[H⁺]``."""

    ka_conjugate: float
    base_total: float
    anion: float

    @classmethod
    def from_state(cls, state: ReactionState, pkb: float) -> "WeakBaseResidual":
        kb = 10.0 ** (-pkb)
        return cls(
            ka_conjugate=KW / kb,
            base_total=state.analyte_total,
            anion=state.counter_ion,
        )

    def __call__(self, h: float) -> float:
        oh = KW / h
        protonated = self.base_total * h / (h + self.ka_conjugate)
        return h + protonated - oh - self.anion


def residual_for(params: TitrationParameters, added_ml: float):
    """Return the charge-balance residual for a weak analyte after ``added_ml``.

    Raises:
        ValueError: If ``params`` describes a strong analyte; strong/strong
            systems are solved in closed form by
            :mod:`phcurve.chemistry.strong_strong`.
    """
    if not params.is_weak:
        raise ValueError("Charge-balance residuals are defined for weak analytes only.")
    state = ReactionState.at(params, added_ml)
    if params.is_acid:
        return WeakAcidResidual.from_state(state, params.pk)
    return WeakBaseResidual.from_state(state, params.pk)


def solve_weak(
    params: TitrationParameters,
    added_ml: float,
    log_h_guess: Optional[float] = None,
    config: SolverConfig = DEFAULT_CONFIG,
) -> RootResult:
    """Solve the weak-analyte charge balance after ``added_ml`` of titrant.

    Args:
        params (TitrationParameters): Weak acid or weak base set-up.
        added_ml (float): Delivered titrant volume in cm^3.
        log_h_guess (float, optional): Warm-start exponent for the bracket
            scan. It affects search order only, never the converged root.
        config (SolverConfig): Root-search settings.

    Returns:
        RootResult: Solved exponent; pH is ``-result.log_h``.
    """
    return solve_log_h(residual_for(params, added_ml), log_h_guess, config)


def weak_acid_ph(
    params: TitrationParameters,
    added_ml: float,
    log_h_guess: Optional[float] = None,
    config: SolverConfig = DEFAULT_CONFIG,
) -> float:
    """pH of a weak acid after ``added_ml`` cm^3 of strong base.

    Raises:
        ValueError: If ``params`` is not a weak acid.
    """
    if not (params.is_weak and params.is_acid):
        raise ValueError(
            f"weak_acid_ph needs a weak acid, got a {params.analyte_strength} "
            f"{params.analyte_kind}"
        )
    return -solve_weak(params, added_ml, log_h_guess, config).log_h


def weak_base_ph(
    params: TitrationParameters,
    added_ml: float,
    log_h_guess: Optional[float] = None,
    config: SolverConfig = DEFAULT_CONFIG,
) -> float:
    """pH of a weak base after ``added_ml`` cm^3 of strong acid.

    Raises:
        ValueError: If ``params`` is not a weak base.
    """
    if not params.is_weak or params.is_acid:
        raise ValueError(
            f"weak_base_ph needs a weak base, got a {params.analyte_strength} "
            f"{params.analyte_kind}"
        )
    return -solve_weak(params, added_ml, log_h_guess, config).log_h
