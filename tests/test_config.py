"""Tests for environment configuration."""

import os

import pytest

from roicalc.core.config import CalculatorConfig, DEFAULT_INPUT_VARS, parse_pricing_model
from roicalc.core.types import ROIInputs, PricingModel


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove ROICALC_* variables and return a path to a missing .env."""
    for var in list(DEFAULT_INPUT_VARS) + [
        "ROICALC_OUTPUT_DIR", "ROICALC_LOG_LEVEL", "ROICALC_PRICING_MODEL",
    ]:
        monkeypatch.delenv(var, raising=False)
    return str(tmp_path / "missing.env")


class TestCalculatorConfig:
    """Tests for CalculatorConfig.from_env."""

    def test_defaults(self, clean_env):
        """Test defaults without any variables set."""
        config = CalculatorConfig.from_env(clean_env)

        assert config.output_dir == "data/exports"
        assert config.log_level == "INFO"
        assert config.default_inputs == ROIInputs.example()

    def test_overrides(self, clean_env, monkeypatch):
        """Test variables override default inputs."""
        monkeypatch.setenv("ROICALC_DEFAULT_NUM_USERS", "25")
        monkeypatch.setenv("ROICALC_DEFAULT_HOURLY_RATE", "90.5")
        monkeypatch.setenv("ROICALC_PRICING_MODEL", "Annual")
        monkeypatch.setenv("ROICALC_OUTPUT_DIR", "/tmp/roi")
        monkeypatch.setenv("ROICALC_LOG_LEVEL", "debug")

        config = CalculatorConfig.from_env(clean_env)

        assert config.default_inputs.num_users == 25
        assert config.default_inputs.hourly_rate == 90.5
        assert config.default_inputs.pricing_model == PricingModel.ANNUAL
        assert config.default_inputs.implementation_cost == 5000.0
        assert config.output_dir == "/tmp/roi"
        assert config.log_level == "DEBUG"

    def test_env_file(self, clean_env, tmp_path):
        """Test values are read from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("ROICALC_DEFAULT_TIME_TO_VALUE=6\n")

        try:
            config = CalculatorConfig.from_env(str(env_file))
        finally:
            # load_dotenv writes straight to os.environ
            os.environ.pop("ROICALC_DEFAULT_TIME_TO_VALUE", None)

        assert config.default_inputs.time_to_value_months == 6.0

    def test_invalid_number(self, clean_env, monkeypatch):
        """Test unparsable values name the variable."""
        monkeypatch.setenv("ROICALC_DEFAULT_NUM_USERS", "many")

        with pytest.raises(ValueError, match="ROICALC_DEFAULT_NUM_USERS"):
            CalculatorConfig.from_env(clean_env)

    def test_invalid_log_level(self, clean_env, monkeypatch):
        """Test unknown log levels name the variable."""
        monkeypatch.setenv("ROICALC_LOG_LEVEL", "verbose")

        with pytest.raises(ValueError, match="ROICALC_LOG_LEVEL"):
            CalculatorConfig.from_env(clean_env)

    def test_invalid_pricing_model(self):
        """Test unknown pricing models are rejected."""
        with pytest.raises(ValueError, match="quarterly"):
            parse_pricing_model("quarterly")
        assert parse_pricing_model(" MONTHLY ") == PricingModel.MONTHLY
