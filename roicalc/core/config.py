"""
Runtime configuration loaded from the environment (and an optional .env file).
"""

import os
import logging
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from .types import ROIInputs, PricingModel

logger = logging.getLogger(__name__)


# Environment variable -> (ROIInputs field, parser)
DEFAULT_INPUT_VARS = {
    "ROICALC_DEFAULT_LICENSE_COST": ("license_cost_per_user", float),
    "ROICALC_DEFAULT_NUM_USERS": ("num_users", int),
    "ROICALC_DEFAULT_HOURS_SAVED": ("hours_saved_per_user_per_week", float),
    "ROICALC_DEFAULT_HOURLY_RATE": ("hourly_rate", float),
    "ROICALC_DEFAULT_IMPLEMENTATION_COST": ("implementation_cost", float),
    "ROICALC_DEFAULT_TIME_TO_VALUE": ("time_to_value_months", float),
}

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_pricing_model(value: str) -> PricingModel:
    """Parse 'monthly' / 'annual' (case-insensitive) into a PricingModel."""
    try:
        return PricingModel(value.strip().lower())
    except ValueError:
        valid = ", ".join(m.value for m in PricingModel)
        raise ValueError(f"Unknown pricing model '{value}' (expected one of: {valid})")


@dataclass
class CalculatorConfig:
    """
    Calculator settings.

    Attributes:
        output_dir: Directory export files are written to
        log_level: Logging level name for the CLI
        default_inputs: Inputs a new session starts from
    """

    output_dir: str = "data/exports"
    log_level: str = "INFO"
    default_inputs: ROIInputs = field(default_factory=ROIInputs.example)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "CalculatorConfig":
        """
        Build config from ROICALC_* environment variables.

        Args:
            env_file: Optional .env path (defaults to python-dotenv's search)

        Returns:
            CalculatorConfig with overrides applied
        """
        load_dotenv(env_file)

        overrides = {}
        for var, (name, parser) in DEFAULT_INPUT_VARS.items():
            raw = os.getenv(var)
            if raw is None or raw.strip() == "":
                continue
            try:
                overrides[name] = parser(raw)
            except ValueError:
                raise ValueError(f"Invalid value for {var}: '{raw}'")

        pricing = os.getenv("ROICALC_PRICING_MODEL")
        if pricing:
            overrides["pricing_model"] = parse_pricing_model(pricing)

        if overrides:
            logger.debug(f"Default input overrides from environment: {overrides}")

        log_level = os.getenv("ROICALC_LOG_LEVEL", "INFO").strip().upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid value for ROICALC_LOG_LEVEL: '{log_level}' "
                f"(expected one of: {', '.join(LOG_LEVELS)})"
            )

        return cls(
            output_dir=os.getenv("ROICALC_OUTPUT_DIR", "data/exports"),
            log_level=log_level,
            default_inputs=ROIInputs(**overrides),
        )
