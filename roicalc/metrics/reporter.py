"""
Reporting utilities for ROI results.
Display formatting, output cards and console summaries.
"""

import logging
import math
from typing import Dict, List, Tuple

from roicalc.core.types import (
    ROIInputs, ROIMetrics, CalculationResult, input_labels, OUTPUT_LABELS,
)
from .projection import build_projection

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"


def format_currency(value: float) -> str:
    """
    Format as US dollars with no decimals, e.g. -$1,234.

    NaN (and any other non-finite value) renders as N/A.
    """
    if not math.isfinite(value):
        return NOT_AVAILABLE
    sign = "-" if round(value) < 0 else ""
    return f"{sign}${abs(value):,.0f}"


def format_roi(value: float) -> str:
    """Format ROI percent; +inf renders 'Infinite %'."""
    if math.isnan(value):
        return NOT_AVAILABLE
    if math.isinf(value):
        return "Infinite %"
    return f"{value:.1f}%"


def format_payback(value: float) -> str:
    """Format payback months; +inf renders 'Never'."""
    if math.isnan(value):
        return NOT_AVAILABLE
    if math.isinf(value):
        return "Never"
    return f"{value:.1f}"


def format_axis_tick(value: float) -> str:
    """Compact currency label for chart axis ticks ($1.2M, $5K, $300)."""
    if value >= 1_000_000:
        return f"${value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"${value / 1_000:.0f}K"
    return f"${value:g}"


# Output field -> display formatter
OUTPUT_FORMATTERS = {
    "annual_savings": format_currency,
    "annual_license_cost": format_currency,
    "first_year_total_cost": format_currency,
    "annual_net_value": format_currency,
    "annual_roi": format_roi,
    "payback_period_months": format_payback,
    "total_savings_over_3_years": format_currency,
}


class Reporter:
    """
    Generates formatted views of a calculation result.

    Supports:
    - Output cards (headline figures)
    - Full labelled metric listing
    - Console summary with the yearly projection
    """

    def output_cards(self, metrics: ROIMetrics) -> List[Tuple[str, str]]:
        """
        Headline cards as (title, display value).

        Every card shows N/A when the metrics are invalid.
        """
        return [
            ("Annual Recurring Savings", format_currency(metrics.annual_savings)),
            ("Payback Period (Months)", format_payback(metrics.payback_period_months)),
            ("First Year ROI", format_roi(metrics.annual_roi)),
        ]

    def formatted_metrics(self, metrics: ROIMetrics) -> Dict[str, str]:
        """Output label to display string for the seven reported metrics."""
        values = metrics.as_dict()
        return {
            label: OUTPUT_FORMATTERS[name](values[name])
            for name, label in OUTPUT_LABELS.items()
        }

    def generate_report_dict(self, inputs: ROIInputs, metrics: ROIMetrics) -> Dict:
        """
        Raw values grouped by label, the shape used by the exports.

        Args:
            inputs: Scenario inputs
            metrics: Metrics calculated for those inputs

        Returns:
            Dict with "Input Metrics" and "Calculated Metrics" groups
        """
        raw_inputs = inputs.numeric_fields()
        raw_metrics = metrics.as_dict()

        return {
            "Input Metrics": {
                label: raw_inputs[name]
                for name, label in input_labels(inputs.pricing_model).items()
            },
            "Calculated Metrics": {
                label: raw_metrics[name]
                for name, label in OUTPUT_LABELS.items()
            },
        }

    def print_summary(self, result: CalculationResult) -> None:
        """
        Print a formatted summary of a calculation.

        Args:
            result: CalculationResult to summarize
        """
        inputs = result.inputs
        metrics = result.metrics

        print("\n" + "=" * 60)
        print("SAAS ROI CALCULATOR")
        print("=" * 60)

        # Inputs
        print(f"\n--- INPUTS ({inputs.pricing_model.value} pricing) ---")
        raw_inputs = inputs.numeric_fields()
        for name, label in input_labels(inputs.pricing_model).items():
            error = result.errors.get(name)
            line = f"{label}: {raw_inputs[name]}"
            if error:
                line += f"  <-- {error}"
            print(line)

        # Headline cards
        print("\n--- SUMMARY ---")
        for title, value in self.output_cards(metrics):
            print(f"{title}: {value}")

        # All metrics
        print("\n--- METRICS ---")
        for label, value in self.formatted_metrics(metrics).items():
            print(f"{label}: {value}")

        print("\n" + "=" * 60 + "\n")

    def print_projection(self, metrics: ROIMetrics) -> None:
        """Print the three-year projection table."""
        print("\n" + "-" * 60)
        print("3-YEAR FINANCIAL PROJECTION")
        print("-" * 60)

        header = f"{'Year':<10} {'Cost':>15} {'Savings':>15} {'Net Value':>15}"
        print(header)
        print("-" * 60)

        for point in build_projection(metrics):
            row = (
                f"{point.label:<10} {format_currency(point.cost):>15} "
                f"{format_currency(point.savings):>15} "
                f"{format_currency(point.net_value):>15}"
            )
            print(row)

        print("-" * 60 + "\n")
