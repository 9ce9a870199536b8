"""
Core data types for the ROI calculator.
Inputs, derived metrics, chart points and validation errors.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Dict, List


WEEKS_PER_YEAR = 52
MONTHS_PER_YEAR = 12
PROJECTION_YEARS = 3


class PricingModel(Enum):
    """Billing period of the quoted per-user license cost."""
    MONTHLY = "monthly"
    ANNUAL = "annual"


@dataclass(frozen=True)
class ROIInputs:
    """
    Business inputs for a single ROI scenario.

    Passed by value: edits produce a new instance rather than mutating
    the current one.
    """

    license_cost_per_user: float = 50.0   # Per user per billing period
    num_users: int = 10
    hours_saved_per_user_per_week: float = 5.0
    hourly_rate: float = 75.0
    implementation_cost: float = 5000.0   # One-time
    time_to_value_months: float = 3.0     # Months before savings start
    pricing_model: PricingModel = PricingModel.MONTHLY

    @classmethod
    def example(cls) -> "ROIInputs":
        """The example scenario shipped with the calculator."""
        return cls()

    @classmethod
    def cleared(cls) -> "ROIInputs":
        """All numeric inputs zeroed (invalid until users are entered)."""
        return cls(
            license_cost_per_user=0.0,
            num_users=0,
            hours_saved_per_user_per_week=0.0,
            hourly_rate=0.0,
            implementation_cost=0.0,
            time_to_value_months=0.0,
        )

    @property
    def is_annual(self) -> bool:
        return self.pricing_model == PricingModel.ANNUAL

    def numeric_fields(self) -> Dict[str, float]:
        """Field name to value for the six numeric inputs."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "pricing_model"
        }


@dataclass(frozen=True)
class ROIMetrics:
    """
    Metrics derived from ROIInputs.

    Non-finite values are meaningful: +inf ROI means zero cost with
    positive net value, +inf payback means the cost is never recovered,
    and NaN everywhere marks an invalid input set.
    """

    annual_license_cost: float
    annual_savings: float
    first_year_adjusted_savings: float
    first_year_total_cost: float
    annual_net_value: float
    annual_roi: float                   # Percent
    monthly_net_savings: float
    payback_period_months: float
    total_savings_over_3_years: float

    @classmethod
    def invalid(cls) -> "ROIMetrics":
        """Sentinel returned when validation fails."""
        nan = float("nan")
        return cls(**{f.name: nan for f in fields(cls)})

    @property
    def is_valid(self) -> bool:
        # NaN is the only value not equal to itself
        return self.annual_savings == self.annual_savings

    def as_dict(self) -> Dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class ProjectionPoint:
    """One yearly data point of the projection chart."""

    year: int
    cost: float
    savings: float
    net_value: float

    @property
    def label(self) -> str:
        return f"Year {self.year}"


@dataclass(frozen=True)
class CalculationResult:
    """Non-raising calculation outcome: metrics plus any field errors."""

    inputs: ROIInputs
    metrics: ROIMetrics
    errors: Dict[str, str]

    @property
    def is_valid(self) -> bool:
        return not self.errors


class ValidationError(Exception):
    """
    Raised when one or more inputs are out of range.

    Attributes:
        errors: Field name to message, one entry per violated constraint
    """

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__("; ".join(self.errors.values()))

    @property
    def fields(self) -> List[str]:
        return list(self.errors)


# Human-readable labels used by the reports and exports
INPUT_LABELS = {
    "license_cost_per_user": "License Cost per User/Month",
    "num_users": "Number of Users",
    "hours_saved_per_user_per_week": "Avg. Hours Saved per User/Week",
    "hourly_rate": "Avg. Employee Hourly Rate",
    "implementation_cost": "One-Time Implementation Cost",
    "time_to_value_months": "Time-to-Value (Months)",
}

ANNUAL_LICENSE_LABEL = "License Cost per User/Year"

OUTPUT_LABELS = {
    "annual_savings": "Annual Recurring Savings",
    "annual_license_cost": "Annual License Cost",
    "first_year_total_cost": "First Year Total Cost",
    "annual_net_value": "Net Value (Annual)",
    "annual_roi": "First Year ROI (%)",
    "payback_period_months": "Payback Period (Months)",
    "total_savings_over_3_years": "Total Savings Over 3 Years",
}


def input_labels(pricing_model: PricingModel) -> Dict[str, str]:
    """Input labels with the license label matching the billing period."""
    labels = dict(INPUT_LABELS)
    if pricing_model == PricingModel.ANNUAL:
        labels["license_cost_per_user"] = ANNUAL_LICENSE_LABEL
    return labels
