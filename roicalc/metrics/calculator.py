"""
ROI metrics calculator.
Validates scenario inputs and derives savings, cost, ROI and payback figures.
"""

import logging
import math
from numbers import Real
from typing import Dict, Optional

from roicalc.core.types import (
    ROIInputs, ROIMetrics, CalculationResult, ValidationError, INPUT_LABELS,
    WEEKS_PER_YEAR, MONTHS_PER_YEAR, PROJECTION_YEARS,
)

logger = logging.getLogger(__name__)


# Field name -> (minimum allowed value, message when below it)
FIELD_MINIMUMS = {
    "license_cost_per_user": (0, "License cost per user cannot be negative"),
    "num_users": (1, "Number of users must be at least 1"),
    "hours_saved_per_user_per_week": (0, "Hours saved per user per week cannot be negative"),
    "hourly_rate": (0, "Hourly rate cannot be negative"),
    "implementation_cost": (0, "Implementation cost cannot be negative"),
    "time_to_value_months": (0, "Time-to-value cannot be negative"),
}

# Keeps every derived total finite (largest product is users x hours x rate x 52)
MAX_INPUT_VALUE = 1e12


class MetricsCalculator:
    """
    Calculates the financial metrics of one ROI scenario.

    Calculation is all-or-nothing: any invalid field suppresses every
    metric. The last input and its outcome are cached so repeated
    recomputation with unchanged inputs is free.
    """

    def __init__(self):
        """Initialize calculator with an empty cache."""
        self._last_inputs: Optional[ROIInputs] = None
        self._last_result: Optional[CalculationResult] = None

    def validate(self, inputs: ROIInputs) -> Dict[str, str]:
        """
        Check every input constraint.

        Args:
            inputs: Scenario inputs

        Returns:
            Dict of field name to error message (empty when valid)
        """
        errors = {}

        for name, value in inputs.numeric_fields().items():
            minimum, message = FIELD_MINIMUMS[name]

            if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
                errors[name] = f"{INPUT_LABELS[name]} must be a number"
            elif value < minimum:
                errors[name] = message
            elif value > MAX_INPUT_VALUE:
                errors[name] = f"{INPUT_LABELS[name]} cannot exceed {MAX_INPUT_VALUE:,.0f}"
            elif name == "num_users" and value != int(value):
                errors[name] = "Number of users must be a whole number"

        return errors

    def calculate(self, inputs: ROIInputs) -> ROIMetrics:
        """
        Calculate all metrics.

        Args:
            inputs: Scenario inputs

        Returns:
            ROIMetrics for the scenario

        Raises:
            ValidationError: If any input is out of range
        """
        result = self.evaluate(inputs)
        if not result.is_valid:
            raise ValidationError(result.errors)
        return result.metrics

    def evaluate(self, inputs: ROIInputs) -> CalculationResult:
        """
        Calculate metrics without raising.

        Invalid inputs yield ROIMetrics.invalid() together with the
        field errors.
        """
        if self._last_result is not None and inputs == self._last_inputs:
            return self._last_result

        errors = self.validate(inputs)
        if errors:
            logger.warning(f"Invalid inputs: {', '.join(sorted(errors))}")
            metrics = ROIMetrics.invalid()
        else:
            metrics = self._derive(inputs)
            logger.debug(f"Calculated metrics: {metrics}")

        result = CalculationResult(inputs=inputs, metrics=metrics, errors=errors)
        self._last_inputs = inputs
        self._last_result = result
        return result

    def _derive(self, inputs: ROIInputs) -> ROIMetrics:
        """Derive metrics from validated inputs."""
        # License cost
        if inputs.is_annual:
            license_per_user = inputs.license_cost_per_user
        else:
            license_per_user = inputs.license_cost_per_user * MONTHS_PER_YEAR
        annual_license_cost = license_per_user * inputs.num_users

        # Savings at full rate
        annual_savings = (
            inputs.hours_saved_per_user_per_week
            * inputs.hourly_rate
            * inputs.num_users
            * WEEKS_PER_YEAR
        )

        first_year_total_cost = annual_license_cost + inputs.implementation_cost
        annual_net_value = annual_savings - annual_license_cost

        annual_roi = self.calculate_roi(annual_net_value, first_year_total_cost)

        monthly_net_savings = (annual_savings - annual_license_cost) / MONTHS_PER_YEAR
        payback_period_months = self.calculate_payback(
            inputs.implementation_cost,
            monthly_net_savings,
            inputs.time_to_value_months,
        )

        # Savings only accrue after time-to-value in year one
        effective_months = max(0.0, MONTHS_PER_YEAR - inputs.time_to_value_months)
        first_year_adjusted_savings = annual_savings * (effective_months / MONTHS_PER_YEAR)

        total_savings_over_3_years = (
            first_year_adjusted_savings + annual_savings * (PROJECTION_YEARS - 1)
        )

        return ROIMetrics(
            annual_license_cost=annual_license_cost,
            annual_savings=annual_savings,
            first_year_adjusted_savings=first_year_adjusted_savings,
            first_year_total_cost=first_year_total_cost,
            annual_net_value=annual_net_value,
            annual_roi=annual_roi,
            monthly_net_savings=monthly_net_savings,
            payback_period_months=payback_period_months,
            total_savings_over_3_years=total_savings_over_3_years,
        )

    @staticmethod
    def calculate_roi(net_value: float, total_cost: float) -> float:
        """
        First-year ROI percentage.

        Args:
            net_value: Annual savings minus annual license cost
            total_cost: First-year cost including implementation

        Returns:
            ROI in percent, +inf for zero cost with positive net value
        """
        if total_cost > 0:
            return (net_value / total_cost) * 100
        return float("inf") if net_value > 0 else 0.0

    @staticmethod
    def calculate_payback(
        implementation_cost: float,
        monthly_net_savings: float,
        time_to_value_months: float,
    ) -> float:
        """
        Months until net savings repay the implementation cost.

        Includes the time-to-value delay. Returns +inf when monthly net
        savings are not positive.
        """
        if monthly_net_savings > 0:
            return time_to_value_months + implementation_cost / monthly_net_savings
        return float("inf")
