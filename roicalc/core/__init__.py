"""Core components: types and configuration."""

from .types import (
    PricingModel,
    ROIInputs,
    ROIMetrics,
    ProjectionPoint,
    CalculationResult,
    ValidationError,
)
from .config import CalculatorConfig

__all__ = [
    "PricingModel",
    "ROIInputs",
    "ROIMetrics",
    "ProjectionPoint",
    "CalculationResult",
    "ValidationError",
    "CalculatorConfig",
]
