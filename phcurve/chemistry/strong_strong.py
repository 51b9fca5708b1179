"""Exact pH for fully dissociated acid/base pairs.

With both partners fully dissociated the charge balance reduces to a
quadratic in whichever ion is in excess. Writing
``delta = C_base - C_acid`` (both diluted into the total volume):

    delta > 0:  OH² - delta·OH - Kw = 0  ->  OH = (delta + √(delta² + 4Kw)) / 2
    delta < 0:  H² - e·H - Kw = 0, e = -delta  ->  H = (e + √(e² + 4Kw)) / 2
    delta = 0:  pH = 7 (neutral salt, no hydrolysis)

No iteration and no warm start are involved.
"""

from __future__ import annotations

import math

from ..constants import KW, NEUTRAL_PH, PH_MAX
from .parameters import ReactionState, TitrationParameters


def excess_ph(delta: float) -> float:
    """Return the exact pH for a strong base excess ``delta`` (mol dm^-3).

    Args:
        delta (float): ``[strong base] - [strong acid]`` in the mixed
            solution. Positive for base excess, negative for acid excess.

    Returns:
        float: pH from the positive root of the charge-balance quadratic.
        Exactly ``7.0`` when ``delta == 0``. Not clamped; very concentrated
        excess can give values outside [0, 14].
    """
    if delta > 0:
        oh = (delta + math.sqrt(delta * delta + 4.0 * KW)) / 2.0
        return PH_MAX - (-math.log10(oh))
    if delta < 0:
        excess = -delta
        h = (excess + math.sqrt(excess * excess + 4.0 * KW)) / 2.0
        return -math.log10(h)
    return NEUTRAL_PH


def strong_acid_strong_base_ph(params: TitrationParameters, added_ml: float) -> float:
    """pH of a strong acid after ``added_ml`` cm^3 of strong base."""
    state = ReactionState.at(params, added_ml)
    c_acid = state.analyte_total
    c_base = state.counter_ion
    return excess_ph(c_base - c_acid)


def strong_base_strong_acid_ph(params: TitrationParameters, added_ml: float) -> float:
    """pH of a strong base after ``added_ml`` cm^3 of strong acid."""
    state = ReactionState.at(params, added_ml)
    c_base = state.analyte_total
    c_acid = state.counter_ion
    return excess_ph(c_base - c_acid)


def strong_ph(params: TitrationParameters, added_ml: float) -> float:
    """Dispatch to the strong/strong solver matching ``params.analyte_kind``."""
    if params.is_acid:
        return strong_acid_strong_base_ph(params, added_ml)
    return strong_base_strong_acid_ph(params, added_ml)
