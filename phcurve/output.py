"""Write simulated titration curves to CSV files.

This module is the export boundary between an in-memory ``TitrationCurve``
and tabular artifacts for spreadsheets or external plotting tools.
"""

from __future__ import annotations

import logging
import os

import pandas as pd

from .curve import TitrationCurve
from .schema import COLUMNS

logger = logging.getLogger(__name__)

X_DECIMALS = {"ml": 2, "equivalents": 4}


def curve_table(curve: TitrationCurve) -> pd.DataFrame:
    """Build the two-column export table for ``curve``.

    Args:
        curve (TitrationCurve): Output of ``generate_curve``.

    Returns:
        pandas.DataFrame: Columns ``Titrant added (mL)`` or ``Equivalents``
        (following ``curve.x_unit``) and ``pH``, one row per grid point in
        increasing titrant order. Volumes are rounded to 2 decimals and
        equivalents to 4; pH keeps full precision.
    """
    x_label = COLUMNS.x_label(curve.x_unit)
    table = curve.to_dataframe()[[x_label, COLUMNS.ph]]
    return table.round({x_label: X_DECIMALS[curve.x_unit]})


def save_curve_to_csv(
    curve: TitrationCurve,
    output_dir: str = "output",
    filename: str = "titration_curve.csv",
) -> str:
    """Save a titration curve as CSV.

    Args:
        curve (TitrationCurve): Output of ``generate_curve``.
        output_dir (str): Directory where the CSV is written; created if
            missing.
        filename (str): File name inside ``output_dir``.

    Returns:
        str: Path to the written CSV.

    Raises:
        ValueError: If ``curve`` has no points.
    """
    if len(curve) == 0:
        raise ValueError("curve has no points; nothing to export")

    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, filename)
    curve_table(curve).to_csv(path, index=False)

    logger.info("Saved titration curve (%d points) to %s", len(curve), path)
    return path
