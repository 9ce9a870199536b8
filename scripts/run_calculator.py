#!/usr/bin/env python3
"""
Run the SaaS ROI calculator for one scenario.

Usage:
    python scripts/run_calculator.py
    python scripts/run_calculator.py --license-cost 600 --pricing-model annual --users 25
    python scripts/run_calculator.py --hours-saved 3 --json --csv --pdf --chart
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from roicalc.core.config import CalculatorConfig, LOG_LEVELS
from roicalc.core.session import CalculatorSession
from roicalc.core.types import PricingModel
from roicalc.export.chart import ProjectionChart, CHART_FILENAME
from roicalc.export.exporters import (
    ResultExporter, JSON_FILENAME, CSV_FILENAME, PDF_FILENAME,
)
from roicalc.metrics.reporter import Reporter

logger = logging.getLogger(__name__)


# CLI option dest -> input field
INPUT_OPTIONS = {
    "license_cost": "license_cost_per_user",
    "users": "num_users",
    "hours_saved": "hours_saved_per_user_per_week",
    "hourly_rate": "hourly_rate",
    "implementation_cost": "implementation_cost",
    "time_to_value": "time_to_value_months",
}


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Estimate ROI, payback and savings of a SaaS purchase"
    )
    parser.add_argument(
        "--license-cost",
        type=float,
        help="License cost per user per billing period"
    )
    parser.add_argument(
        "--users",
        type=int,
        help="Number of users"
    )
    parser.add_argument(
        "--hours-saved",
        type=float,
        help="Average hours saved per user per week"
    )
    parser.add_argument(
        "--hourly-rate",
        type=float,
        help="Average employee hourly rate"
    )
    parser.add_argument(
        "--implementation-cost",
        type=float,
        help="One-time implementation cost"
    )
    parser.add_argument(
        "--time-to-value",
        type=float,
        help="Months before savings begin"
    )
    parser.add_argument(
        "--pricing-model",
        choices=[m.value for m in PricingModel],
        help="Billing period of the license cost"
    )
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Start from cleared (zero) inputs instead of the defaults"
    )

    # Outputs
    parser.add_argument("--json", action="store_true", help="Export results as JSON")
    parser.add_argument("--csv", action="store_true", help="Export results as CSV")
    parser.add_argument("--pdf", action="store_true", help="Export a PDF report")
    parser.add_argument("--chart", action="store_true", help="Save the projection chart")
    parser.add_argument(
        "--output-dir",
        type=str,
        help="Directory for exported files"
    )
    parser.add_argument(
        "--show-projection",
        action="store_true",
        help="Print the 3-year projection table"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level"
    )

    return parser.parse_args(argv)


def export_results(session: CalculatorSession, args, output_dir: Path) -> None:
    """Write the requested export files."""
    exporter = ResultExporter(session.inputs, session.metrics)

    if args.json:
        exporter.write_json(output_dir / JSON_FILENAME)
    if args.csv:
        exporter.write_csv(output_dir / CSV_FILENAME)
    if args.pdf:
        exporter.write_pdf(output_dir / PDF_FILENAME)
    if args.chart:
        ProjectionChart(session.metrics).save(output_dir / CHART_FILENAME)


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        config = CalculatorConfig.from_env()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=args.log_level or config.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )

    session = CalculatorSession(config=config)
    if args.clear:
        session.clear()

    changes = {
        field: getattr(args, option)
        for option, field in INPUT_OPTIONS.items()
        if getattr(args, option) is not None
    }
    if args.pricing_model:
        changes["pricing_model"] = PricingModel(args.pricing_model)
    if changes:
        session.update(**changes)

    reporter = Reporter()
    reporter.print_summary(session.result)

    if args.show_projection:
        reporter.print_projection(session.metrics)

    output_dir = Path(args.output_dir or config.output_dir)
    try:
        export_results(session, args, output_dir)
    except OSError as e:
        print(f"Export failed: {e}", file=sys.stderr)
        return 2

    if not session.is_valid:
        print("Invalid inputs:", file=sys.stderr)
        for field, message in session.errors.items():
            print(f"  {field}: {message}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
