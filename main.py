#!/usr/bin/env python3
"""
Main script for simulating a titration curve.
"""

# Pipeline overview:
# 1) Read titration set-up from the command line and clamp negative inputs.
# 2) Compute the equivalence volume and the initial (titrant-free) pH.
# 3) Sweep titrant volume to twice V_eq, solving the charge balance at each
#    point (warm-started bisection for weak analytes, closed form otherwise).
# 4) Export the curve to CSV and render it with an equivalence guide.

import argparse
import logging
import os
import sys
import time

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler("phcurve.log", mode="w"),
    ],
)

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from phcurve.chemistry import TitrationParameters
from phcurve.constants import DEFAULT_POINT_COUNT
from phcurve.curve import generate_curve
from phcurve.output import save_curve_to_csv


def build_parser():
    parser = argparse.ArgumentParser(
        description="Simulate an acid-base titration curve from the charge balance."
    )
    parser.add_argument("--analyte", choices=("acid", "base"), default="acid")
    parser.add_argument("--strength", choices=("weak", "strong"), default="weak")
    parser.add_argument(
        "--concentration", type=float, default=0.10, help="Analyte (mol dm^-3)"
    )
    parser.add_argument("--volume", type=float, default=25.00, help="Analyte (cm^3)")
    parser.add_argument(
        "--titrant-concentration", type=float, default=0.10, help="Titrant (mol dm^-3)"
    )
    parser.add_argument(
        "--pk", type=float, default=4.76, help="pKa (weak acid) or pKb (weak base)"
    )
    parser.add_argument("--points", type=int, default=DEFAULT_POINT_COUNT)
    parser.add_argument(
        "--x-unit", choices=("equivalents", "ml"), default="equivalents"
    )
    parser.add_argument("--output-dir", default="output")
    parser.add_argument(
        "--no-plot", action="store_true", help="Skip rendering the figure"
    )
    return parser


def main(argv=None):
    """Run one simulation and write its outputs."""
    args = build_parser().parse_args(argv)

    start_time = time.time()
    logging.info("Initializing titration curve simulation")

    try:
        params = TitrationParameters.from_user_input(
            args.analyte,
            args.strength,
            args.concentration,
            args.volume,
            args.titrant_concentration,
            args.pk,
        )
    except (TypeError, ValueError) as exc:
        logging.error("Invalid titration parameters: %s", exc)
        return 1

    logging.info(
        "Analyte: %s %s, %.4f M, %.2f cm^3; titrant %.4f M",
        params.analyte_strength,
        params.analyte_kind,
        params.analyte_concentration,
        params.analyte_volume_ml,
        params.titrant_concentration,
    )

    try:
        step_start = time.time()
        curve = generate_curve(params, point_count=args.points, x_unit=args.x_unit)
    except ValueError as exc:
        logging.error("Curve generation failed: %s", exc)
        return 1
    logging.info(
        "Curve generation (%d points) completed in %.3f seconds",
        len(curve),
        time.time() - step_start,
    )
    logging.info("Initial pH: %.4f", curve.initial_ph)
    logging.info("Equivalence volume: %.2f cm^3", curve.equivalence_volume_ml)
    if not curve.all_converged:
        logging.warning("Some points used the fallback pH estimate")

    csv_path = save_curve_to_csv(curve, args.output_dir)

    plot_path = None
    if not args.no_plot:
        from phcurve.plotting import plot_titration_curve

        step_start = time.time()
        plot_path = plot_titration_curve(curve, args.output_dir)
        logging.info("Figure rendered in %.2f seconds", time.time() - step_start)

    logging.info("Total execution time: %.2f seconds", time.time() - start_time)
    logging.info("Generated output files:")
    logging.info("  - Titration curve CSV: %s", csv_path)
    if plot_path:
        logging.info("  - Titration curve figure: %s", plot_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
