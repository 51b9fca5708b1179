"""Titration set-up parameters and the per-point reaction state.

``TitrationParameters`` describes one experiment: which analyte sits in the
flask, how much of it, and the titrant in the burette. ``ReactionState`` is
the diluted composition after a given titrant volume has been delivered; it
is rebuilt for every grid point and never cached.

Two conventions hold throughout:
    - volumes enter in cm^3 (mL) and are converted to dm^3 (L) before any
      concentration arithmetic;
    - the solver layer does no validation. Clamping of negative user inputs
      happens once, in :meth:`TitrationParameters.from_user_input`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..units import ml_to_l

ANALYTE_KINDS = ("acid", "base")
ANALYTE_STRENGTHS = ("weak", "strong")


def _as_number(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be numeric, got {type(value)}")
    return float(value)


def _clamp_non_negative(name: str, value) -> float:
    v = _as_number(name, value)
    if not math.isfinite(v):
        raise ValueError(f"{name} must be finite, got {v}")
    return max(v, 0.0)


@dataclass(frozen=True)
class TitrationParameters:
    """Inputs for one simulated titration.

    Attributes:
        analyte_kind: ``"acid"`` or ``"base"``; the titrant is always the
            opposite strong reagent.
        analyte_strength: ``"weak"`` or ``"strong"``.
        analyte_concentration: Initial analyte concentration in mol dm^-3.
        analyte_volume_ml: Initial analyte volume in cm^3.
        titrant_concentration: Titrant concentration in mol dm^-3.
        pk: pKa of a weak acid or pKb of a weak base. Unused for strong
            analytes.
    """

    analyte_kind: str = "acid"
    analyte_strength: str = "weak"
    analyte_concentration: float = 0.10
    analyte_volume_ml: float = 25.00
    titrant_concentration: float = 0.10
    pk: float = 4.76

    @property
    def is_weak(self) -> bool:
        return self.analyte_strength == "weak"

    @property
    def is_acid(self) -> bool:
        return self.analyte_kind == "acid"

    @classmethod
    def from_user_input(
        cls,
        analyte_kind: str,
        analyte_strength: str,
        analyte_concentration: float,
        analyte_volume_ml: float,
        titrant_concentration: float,
        pk: float = math.nan,
    ) -> "TitrationParameters":
        """Build parameters from raw form values, clamping negatives to zero.

        Args:
            analyte_kind (str): ``"acid"`` or ``"base"`` (case-insensitive).
            analyte_strength (str): ``"weak"`` or ``"strong"``
                (case-insensitive).
            analyte_concentration (float): mol dm^-3; negatives become 0.
            analyte_volume_ml (float): cm^3; negatives become 0.
            titrant_concentration (float): mol dm^-3; negatives become 0.
            pk (float, optional): pKa/pKb. Required and finite for weak
                analytes; ignored for strong ones.

        Returns:
            TitrationParameters: Parameters safe to pass to the solvers.

        Raises:
            TypeError: If a numeric field is not a number.
            ValueError: If a selector is unknown, a numeric field is NaN, or
                a weak analyte has a non-finite ``pk``.
        """
        kind = str(analyte_kind).strip().lower()
        strength = str(analyte_strength).strip().lower()
        if kind not in ANALYTE_KINDS:
            raise ValueError(
                f"analyte_kind must be one of {ANALYTE_KINDS}, got {analyte_kind!r}"
            )
        if strength not in ANALYTE_STRENGTHS:
            raise ValueError(
                f"analyte_strength must be one of {ANALYTE_STRENGTHS}, "
                f"got {analyte_strength!r}"
            )

        pk_value = _as_number("pk", pk)
        if strength == "weak" and not math.isfinite(pk_value):
            raise ValueError(f"pk must be finite for a weak {kind}, got {pk_value}")

        return cls(
            analyte_kind=kind,
            analyte_strength=strength,
            analyte_concentration=_clamp_non_negative(
                "analyte_concentration", analyte_concentration
            ),
            analyte_volume_ml=_clamp_non_negative(
                "analyte_volume_ml", analyte_volume_ml
            ),
            titrant_concentration=_clamp_non_negative(
                "titrant_concentration", titrant_concentration
            ),
            pk=pk_value,
        )


@dataclass(frozen=True)
class ReactionState:
    """Diluted composition after ``added_ml`` of titrant.

    Attributes:
        total_volume_l: Analyte plus delivered titrant volume in dm^3.
        analyte_total: Analytical analyte concentration (all forms) in the
            total volume, mol dm^-3.
        counter_ion: Spectator ion concentration delivered by the titrant
            (Na⁺ from NaOH or Cl⁻ from HCl), mol dm^-3.
    """

    total_volume_l: float
    analyte_total: float
    counter_ion: float

    @classmethod
    def at(cls, params: TitrationParameters, added_ml: float) -> "ReactionState":
        """Return the state after ``added_ml`` cm^3 of titrant.

        An empty flask (zero total volume) is treated as pure water rather
        than dividing by zero.
        """
        v_analyte = ml_to_l(params.analyte_volume_ml)
        v_added = ml_to_l(added_ml)
        v_total = v_analyte + v_added
        if v_total <= 0:
            return cls(total_volume_l=0.0, analyte_total=0.0, counter_ion=0.0)
        return cls(
            total_volume_l=v_total,
            analyte_total=(params.analyte_concentration * v_analyte) / v_total,
            counter_ion=(params.titrant_concentration * v_added) / v_total,
        )
