"""Metrics components: calculation, projection and reporting."""

from .calculator import MetricsCalculator
from .projection import build_projection, projection_frame
from .reporter import Reporter

__all__ = ["MetricsCalculator", "build_projection", "projection_frame", "Reporter"]
