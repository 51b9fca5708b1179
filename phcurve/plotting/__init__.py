"""
Plotting utilities for simulated titration curves.

All plotting functions accept a precomputed ``TitrationCurve`` and do not
perform chemistry calculations.

Modules:
    titration_plots:
        pH against titrant added (cm^3 or equivalents) on a fixed 0-14 pH
        axis, with a dashed vertical guide at the equivalence point.

    style:
        rcParams, axis labels, the equivalence overlay and multi-format
        figure export.

Styling:
    Uses STIX serif fonts, 300 DPI PNG output alongside PDF/SVG vectors,
    and suppressed top/right spines.
"""

from .titration_plots import plot_titration_curve, setup_plot_style

__all__ = ["plot_titration_curve", "setup_plot_style"]
