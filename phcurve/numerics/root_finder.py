"""Bracketing root search for charge-balance residuals in log[H+] space.

The unknown is the exponent ``y`` with ``[H+] = 10**y``. Working in the
exponent keeps the search uniform across fourteen decades of concentration,
so a fixed 0.25-unit scan grid resolves every chemically reachable pH.

Algorithm:
    1. Test the domain endpoints ``y = -14`` and ``y = 0``.
    2. If they do not bracket a sign change, scan 56 sub-intervals. With a
       warm-start guess the 57 scan nodes are visited in order of distance
       from the guess, so neighbouring points on a titration curve find their
       bracket within the first one or two pairs.
    3. Refine by bisection, always comparing the midpoint against the stored
       low-endpoint residual.
    4. If no bracket exists anywhere, return the best of the two endpoints
       and the domain midpoint. This result is flagged as not converged.

This module has no chemistry imports. Residuals are any callable mapping a
hydrogen-ion concentration in mol dm^-3 to a float.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from ..constants import LOG_H_MAX, LOG_H_MIN

Residual = Callable[[float], float]


@dataclass(frozen=True)
class SolverConfig:
    """Numerical settings for one log[H+] root search.

    Attributes:
        tolerance: Bracket width in log units at which bisection stops.
        max_iterations: Upper bound on bisection steps.
        scan_intervals: Number of equal sub-intervals used by the bracket scan.
        log_h_min: Lower end of the exponent domain.
        log_h_max: Upper end of the exponent domain.
    """

    tolerance: float = 1.0e-8
    max_iterations: int = 100
    scan_intervals: int = 56
    log_h_min: float = LOG_H_MIN
    log_h_max: float = LOG_H_MAX


DEFAULT_CONFIG = SolverConfig()


@dataclass(frozen=True)
class RootResult:
    """Outcome of one root search.

    Attributes:
        log_h: Returned exponent ``y``; ``[H+] = 10**log_h``.
        method: ``"exact"`` when a residual evaluated to exactly zero,
            ``"bisection"`` when a bracket was refined, ``"fallback"`` when
            no sign change exists in the domain.
        iterations: Number of bisection steps performed.
        converged: ``False`` only for the fallback estimate.
    """

    log_h: float
    method: str
    iterations: int = 0
    converged: bool = True


def evaluate_at_log_h(
    residual: Residual, log_h: float, config: SolverConfig = DEFAULT_CONFIG
) -> float:
    """Evaluate ``residual`` at ``[H+] = 10**log_h`` with ``log_h`` clipped to the domain."""
    y = min(max(float(log_h), config.log_h_min), config.log_h_max)
    return float(residual(10.0**y))


def scan_pairs(
    log_h_guess: Optional[float] = None, config: SolverConfig = DEFAULT_CONFIG
) -> List[Tuple[float, float]]:
    """Return the ordered ``(low, high)`` pairs visited by the bracket scan.

    Args:
        log_h_guess (float, optional): Warm-start exponent. Ignored when
            ``None`` or non-finite.
        config (SolverConfig): Domain and grid settings.

    Returns:
        list[tuple[float, float]]: ``scan_intervals`` pairs. Without a guess
        these are adjacent sub-intervals from left to right. With a guess the
        nodes are first sorted by distance to the guess (stable for ties) and
        each pair joins consecutive entries of that ordering, so the first
        pairs straddle the guess.
    """
    n = int(config.scan_intervals)
    step = (config.log_h_max - config.log_h_min) / n
    nodes = [config.log_h_min + i * step for i in range(n + 1)]

    if log_h_guess is None or not math.isfinite(log_h_guess):
        return [(nodes[i], nodes[i + 1]) for i in range(n)]

    ordered = sorted(nodes, key=lambda y: abs(y - log_h_guess))
    return [
        (min(ordered[k], ordered[k + 1]), max(ordered[k], ordered[k + 1]))
        for k in range(len(ordered) - 1)
    ]


def _best_of_three(
    residual: Residual, f_lo: float, f_hi: float, config: SolverConfig
) -> RootResult:
    y_lo = config.log_h_min
    y_hi = config.log_h_max
    y_mid = 0.5 * (y_lo + y_hi)
    f_mid = evaluate_at_log_h(residual, y_mid, config)
    candidates = [(y_lo, abs(f_lo)), (y_hi, abs(f_hi)), (y_mid, abs(f_mid))]
    best = min(candidates, key=lambda c: c[1])
    return RootResult(log_h=best[0], method="fallback", converged=False)


def solve_log_h(
    residual: Residual,
    log_h_guess: Optional[float] = None,
    config: SolverConfig = DEFAULT_CONFIG,
) -> RootResult:
    """Find the exponent at which ``residual`` changes sign.

    Args:
        residual (Callable[[float], float]): Charge-balance residual as a
            function of ``[H+]`` in mol dm^-3. Must be finite on
            ``[10**log_h_min, 10**log_h_max]``.
        log_h_guess (float, optional): Warm-start exponent, typically the
            previous grid point's solution.
        config (SolverConfig): Numerical settings.

    Returns:
        RootResult: Exponent estimate plus how it was obtained. The result is
        always finite; see ``RootResult.converged`` for the degraded case.

    Note:
        The bisection update compares the midpoint only against the stored
        low-endpoint residual: a sign change moves the high end, anything
        else (including a stale or equal sign at the high end) moves the low
        end.
    """
    y_lo = config.log_h_min
    y_hi = config.log_h_max
    f_lo = evaluate_at_log_h(residual, y_lo, config)
    f_hi = evaluate_at_log_h(residual, y_hi, config)

    if f_lo == 0:
        return RootResult(log_h=y_lo, method="exact")
    if f_hi == 0:
        return RootResult(log_h=y_hi, method="exact")

    end_lo, end_hi = f_lo, f_hi
    found = f_lo * f_hi < 0
    if not found:
        for a, b in scan_pairs(log_h_guess, config):
            f_a = evaluate_at_log_h(residual, a, config)
            f_b = evaluate_at_log_h(residual, b, config)
            if f_a == 0:
                return RootResult(log_h=a, method="exact")
            if f_b == 0:
                return RootResult(log_h=b, method="exact")
            if f_a * f_b < 0:
                y_lo, f_lo = a, f_a
                y_hi, f_hi = b, f_b
                found = True
                break

    if not found:
        return _best_of_three(residual, end_lo, end_hi, config)

    iterations = 0
    while (y_hi - y_lo) > config.tolerance and iterations < config.max_iterations:
        y_mid = 0.5 * (y_lo + y_hi)
        f_mid = evaluate_at_log_h(residual, y_mid, config)
        if f_mid == 0:
            return RootResult(log_h=y_mid, method="exact", iterations=iterations)
        if f_lo * f_mid < 0:
            y_hi, f_hi = y_mid, f_mid
        else:
            y_lo, f_lo = y_mid, f_mid
        iterations += 1

    return RootResult(
        log_h=0.5 * (y_lo + y_hi), method="bisection", iterations=iterations
    )


def find_log_h_root(
    residual: Residual,
    log_h_guess: Optional[float] = None,
    config: SolverConfig = DEFAULT_CONFIG,
) -> float:
    """Return only the exponent from :func:`solve_log_h`."""
    return solve_log_h(residual, log_h_guess, config).log_h
