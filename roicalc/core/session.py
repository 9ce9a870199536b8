"""
Interactive calculator session.
Owns the current inputs and recomputes metrics after every edit.
"""

import dataclasses
import logging
import math
from typing import Callable, Dict, List, Optional, Union

from roicalc.metrics.calculator import MetricsCalculator
from roicalc.metrics.projection import build_projection

from .config import CalculatorConfig, parse_pricing_model
from .types import (
    ROIInputs, ROIMetrics, CalculationResult, ProjectionPoint, PricingModel,
    INPUT_LABELS,
)

logger = logging.getLogger(__name__)


def parse_number(raw: Union[str, float, int, None]) -> float:
    """
    Parse user-entered text; blank or unparsable text counts as 0.

    Args:
        raw: Text (or an already numeric value) from an input field

    Returns:
        Parsed float
    """
    if raw is None or isinstance(raw, bool):
        return 0.0
    if not isinstance(raw, (int, float)):
        raw = str(raw).strip().replace(",", "")
    try:
        value = float(raw)
    except (ValueError, OverflowError):
        return 0.0
    # "nan", "inf" and overflowing text such as "1e400" count as junk
    return value if math.isfinite(value) else 0.0


class CalculatorSession:
    """
    Holds one scenario for the lifetime of an interactive session.

    Inputs are replaced wholesale on each change and the result is
    recomputed synchronously before the change call returns.
    """

    def __init__(
        self,
        calculator: Optional[MetricsCalculator] = None,
        config: Optional[CalculatorConfig] = None,
        on_change: Optional[Callable[["CalculatorSession"], None]] = None,
    ):
        """
        Initialize session.

        Args:
            calculator: MetricsCalculator (creates new one if not provided)
            config: Calculator configuration (defaults if not provided)
            on_change: Callback invoked with the session after each recompute
        """
        self.calculator = calculator or MetricsCalculator()
        self.config = config or CalculatorConfig()
        self.on_change = on_change

        self._inputs = self.config.default_inputs
        self._result: CalculationResult = self.calculator.evaluate(self._inputs)
        logger.debug(f"Session started with inputs: {self._inputs}")

    @property
    def inputs(self) -> ROIInputs:
        return self._inputs

    @property
    def result(self) -> CalculationResult:
        return self._result

    @property
    def metrics(self) -> ROIMetrics:
        return self._result.metrics

    @property
    def errors(self) -> Dict[str, str]:
        return dict(self._result.errors)

    @property
    def is_valid(self) -> bool:
        return self._result.is_valid

    @property
    def projection(self) -> List[ProjectionPoint]:
        return build_projection(self.metrics)

    def update(self, **changes) -> CalculationResult:
        """
        Replace one or more input fields and recompute.

        Raises:
            KeyError: If a field name is not an input field
        """
        known = {f.name for f in dataclasses.fields(ROIInputs)}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise KeyError(f"Unknown input field(s): {', '.join(unknown)}")

        return self._apply(dataclasses.replace(self._inputs, **changes))

    def set_field(self, name: str, raw: Union[str, float, int, None]) -> CalculationResult:
        """
        Set a numeric field from user-entered text.

        Args:
            name: Input field name
            raw: Entered value; blank or unparsable text becomes 0
        """
        if name not in INPUT_LABELS:
            raise KeyError(f"Unknown numeric input field: {name}")

        value = parse_number(raw)
        if name == "num_users" and value.is_integer():
            value = int(value)
        return self.update(**{name: value})

    def set_pricing_model(self, model: Union[PricingModel, str]) -> CalculationResult:
        if not isinstance(model, PricingModel):
            model = parse_pricing_model(model)
        return self.update(pricing_model=model)

    def load_example(self) -> CalculationResult:
        """Restore the example scenario, keeping the pricing model."""
        example = dataclasses.replace(
            ROIInputs.example(), pricing_model=self._inputs.pricing_model
        )
        return self._apply(example)

    def clear(self) -> CalculationResult:
        """Zero every numeric input, keeping the pricing model."""
        cleared = dataclasses.replace(
            ROIInputs.cleared(), pricing_model=self._inputs.pricing_model
        )
        return self._apply(cleared)

    def _apply(self, inputs: ROIInputs) -> CalculationResult:
        self._inputs = inputs
        self._result = self.calculator.evaluate(inputs)

        if self.on_change is not None:
            self.on_change(self)

        return self._result
