"""Define standardized column names for curve DataFrames and CSV exports."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CurveColumns:
    """Container for standardized column labels.

    These labels are shared by ``TitrationCurve.to_dataframe`` and the CSV
    writer so that tabular exports and plots agree on naming.

    Attributes:
        volume: x column when the curve is expressed as added titrant volume
            in cm^3 (mL).
        equivalents: x column when the curve is expressed as the fraction of
            the equivalence volume delivered (1.0 at equivalence).
        ph: Column name for the solved, display-clamped pH.
        converged: Column flagging whether the root search found a true
            sign-changing bracket for the point.
    """

    volume: str = "Titrant added (mL)"
    equivalents: str = "Equivalents"
    ph: str = "pH"
    converged: str = "Converged"

    def x_label(self, x_unit: str) -> str:
        """Return the x column label for ``x_unit`` (``"ml"`` or ``"equivalents"``)."""
        return self.volume if x_unit == "ml" else self.equivalents


COLUMNS = CurveColumns()
