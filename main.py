#!/usr/bin/env python3
"""
Main script for simulating a titration curve.
"""

# Pipeline overview:
# 1) Build a titration state from the command line and validate it.
# 2) Sample pH on a uniform volume grid up to the burette capacity.
# 3) Report stoichiometric equivalence markers and the steepest inflection
#    found on the simulated curve.
# 4) Print the chemistry readout at the first equivalence and save a figure.

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from dataclasses import replace

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from burette.chemistry import equivalence_points, half_equivalence_volume
from burette.reporting import readout_table
from burette.schema import TitrationState, TitrationType, validate_state
from burette.simulation import detect_equivalence_point, simulate_curve


def _build_arg_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the simulation CLI."""
    defaults = TitrationState()
    parser = argparse.ArgumentParser(
        description="Simulate an acid-base titration curve."
    )
    parser.add_argument(
        "--type",
        default=defaults.type.value,
        choices=[t.value for t in TitrationType],
        help="Titration archetype.",
    )
    parser.add_argument("--analyte-conc", type=float, default=defaults.analyte_conc,
                        help="Analyte concentration in the flask (M).")
    parser.add_argument("--analyte-vol", type=float, default=defaults.analyte_vol,
                        help="Analyte volume in the flask (mL).")
    parser.add_argument("--titrant-conc", type=float, default=defaults.titrant_conc,
                        help="Titrant concentration in the burette (M).")
    parser.add_argument("--titrant-max", type=float, default=defaults.titrant_max,
                        help="Burette capacity (mL).")
    parser.add_argument("--pka", type=float, default=defaults.pka,
                        help="pKa (or pKa1 for polyprotic acids).")
    parser.add_argument("--pkb", type=float, default=defaults.pkb, help="pKb of the weak base.")
    parser.add_argument("--pka2", type=float, default=defaults.pka2, help="Second pKa.")
    parser.add_argument("--pka3", type=float, default=defaults.pka3, help="Third pKa.")
    parser.add_argument("--step", type=float, default=0.05, help="Curve spacing (mL).")
    parser.add_argument("--outdir", default="output", help="Directory for figures.")
    parser.add_argument("--no-plot", action="store_true", help="Skip figure generation.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint with step-by-step technical logging."""
    args = _build_arg_parser().parse_args(argv)
    start_time = time.time()
    logging.info("Initializing titration simulation")

    state = TitrationState(
        type=args.type,
        analyte_conc=args.analyte_conc,
        analyte_vol=args.analyte_vol,
        titrant_conc=args.titrant_conc,
        titrant_max=args.titrant_max,
        pka=args.pka,
        pkb=args.pkb,
        pka2=args.pka2,
        pka3=args.pka3,
    )
    try:
        validate_state(state)
    except ValueError as exc:
        logging.error("Invalid titration settings: %s", exc)
        return 2
    logging.info("Titration type: %s", state.type.value)

    step_start = time.time()
    curve_df = simulate_curve(state, step=args.step)
    logging.info(
        "Simulated %d curve points in %.2f seconds",
        len(curve_df),
        time.time() - step_start,
    )

    markers = equivalence_points(state)
    if not markers:
        logging.warning("Titrant concentration is zero; no equivalence points defined")
    for point in markers:
        logging.info("  - %s: %.2f mL", point.label, point.volume)

    try:
        eq = detect_equivalence_point(curve_df)
        logging.info(
            "Steepest inflection at %.2f mL (pH %.2f, slope %.2f pH/mL)",
            eq["eq_x"],
            eq["eq_pH"],
            eq["max_derivative"],
        )
    except ValueError as exc:
        logging.warning("Inflection detection skipped: %s", exc)

    readout_vol = min(markers[0].volume, state.titrant_max) if markers else 0.0
    print(readout_table(replace(state, titrant_vol=readout_vol)).to_string(index=False))

    if not args.no_plot:
        from burette.plotting import plot_titration_curve

        png_path = plot_titration_curve(
            curve_df,
            markers,
            output_dir=args.outdir,
            title=state.type.value.replace("_", " "),
            vhalf=half_equivalence_volume(state) if markers else float("nan"),
        )
        logging.info("  - Titration curve: %s", png_path)

    logging.info("Total execution time: %.2f seconds", time.time() - start_time)
    logging.info("Simulation completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
