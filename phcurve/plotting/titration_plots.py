"""Render simulated titration curves with an equivalence-point guide."""

from __future__ import annotations

import os

import matplotlib.pyplot as plt

from ..curve import TitrationCurve
from .style import (
    CURVE_COLOR,
    LABEL_PH,
    STYLE,
    apply_rcparams,
    clean_axis,
    draw_equivalence_line,
    save_figure_bundle,
    x_axis_label,
)


def setup_plot_style():
    """Apply the project plotting style.

    Returns:
        None: Update global matplotlib ``rcParams`` in-place.
    """
    apply_rcparams()


def plot_titration_curve(
    curve: TitrationCurve,
    output_dir: str = "output",
    filename: str = "titration_curve.png",
    title: str | None = None,
) -> str:
    """Plot pH against titrant added and save the figure bundle.

    Args:
        curve (TitrationCurve): Output of ``generate_curve``.
        output_dir (str, optional): Directory for the PNG/PDF/SVG bundle.
            Defaults to ``"output"``.
        filename (str, optional): PNG file name; PDF and SVG share its stem.
        title (str, optional): Axes title. Omitted when ``None``.

    Returns:
        str: PNG output path.

    Raises:
        ValueError: If ``curve`` has no points.

    Note:
        The y axis is fixed to the display range pH 0-14. The dashed guide
        sits on the grid point at ``curve.equivalence_index``, so it lines up
        with the plotted data rather than the analytic ``V_eq``.
    """
    if len(curve) == 0:
        raise ValueError("curve has no points; nothing to plot")

    setup_plot_style()
    os.makedirs(output_dir, exist_ok=True)

    fig, ax = plt.subplots(figsize=STYLE.FIGSIZE_SINGLE, constrained_layout=True)
    try:
        ax.plot(
            curve.x,
            curve.ph,
            color=CURVE_COLOR,
            linewidth=STYLE.LINEWIDTH,
            label="Titration curve",
        )
        draw_equivalence_line(ax, float(curve.x[curve.equivalence_index]))

        ax.set_ylim(0.0, 14.0)
        ax.set_xlim(float(curve.x[0]), float(curve.x[-1]) or 1.0)
        ax.set_xlabel(x_axis_label(curve.x_unit))
        ax.set_ylabel(LABEL_PH)
        if title:
            ax.set_title(title)
        clean_axis(ax)
        ax.legend(loc="upper left" if curve.ph[0] < 7.0 else "lower left")

        out_path = save_figure_bundle(fig, os.path.join(output_dir, filename))
    finally:
        plt.close(fig)

    return out_path
