"""
Headless projection runner.

  impact-planner --preset Agressivo --months 36 --output out/projecao.csv
  impact-planner --params cenario.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from core.config import DEFAULT_PRESET, PARAMETER_PRESETS
from core.logging_config import setup_logging
from core.utils import format_currency
from data_prep.loader import load_parameters
from data_prep.validators import coerce_parameters
from engine.projection import project
from analysis.insights import generate_strategic_report
from analysis.metrics import summarize_projection
from export.csv_export import write_csv

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="impact-planner",
        description="Project monthly revenue, cost and profit and export the result as CSV",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--params", type=Path, help="JSON parameter file")
    source.add_argument(
        "--preset", choices=sorted(PARAMETER_PRESETS), default=DEFAULT_PRESET,
        help="Named parameter preset (default: %(default)s)",
    )
    parser.add_argument("--months", help="Override the projection period (months)")
    parser.add_argument("--output", type=Path, help="Write the projection CSV here")
    parser.add_argument(
        "--log-level", type=str.upper, default="WARNING", choices=LOG_LEVELS,
        help="Logging level (default: %(default)s)",
    )
    parser.add_argument("--log-file", type=Path, help="Also log to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    if args.params is not None:
        try:
            params = load_parameters(args.params)
        except (OSError, json.JSONDecodeError, ValidationError, ValueError) as e:
            logger.error("Could not load parameters from %s: %s", args.params, e)
            return 1
    else:
        params = PARAMETER_PRESETS[args.preset]

    if args.months is not None:
        coerced = coerce_parameters({"projection_months": args.months}, base=params)
        for message in coerced.defaults_applied + coerced.warnings:
            print(f"warning: {message}", file=sys.stderr)
        params = coerced.params

    records = project(params)
    summary = summarize_projection(records)
    report = generate_strategic_report(records, summary=summary)

    print(f"Meses projetados: {summary.months}")
    print(f"Receita no último mês: {format_currency(summary.last.total_revenue)}")
    print(f"Lucro no último mês: {format_currency(summary.last.profit)}")
    print(report.break_even_message)
    print(report.growth_message)
    print(report.profit_message)
    for flag in report.flags:
        print(f"! {flag}")

    if args.output is not None:
        path = write_csv(records, args.output)
        print(f"CSV: {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
