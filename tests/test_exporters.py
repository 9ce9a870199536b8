"""Tests for JSON, CSV and PDF exports."""

import json

import pytest

from roicalc.core.types import ROIInputs, ROIMetrics
from roicalc.metrics.calculator import MetricsCalculator
from roicalc.export.exporters import ResultExporter, JSON_FILENAME, CSV_FILENAME, PDF_FILENAME


def example_exporter() -> ResultExporter:
    inputs = ROIInputs.example()
    return ResultExporter(inputs, MetricsCalculator().calculate(inputs))


class TestJSONExport:
    """Tests for JSON export."""

    def test_structure(self):
        """Test groups, labels and values."""
        data = json.loads(example_exporter().to_json())

        assert data["Input Metrics"] == {
            "License Cost per User/Month": 50,
            "Number of Users": 10,
            "Avg. Hours Saved per User/Week": 5,
            "Avg. Employee Hourly Rate": 75,
            "One-Time Implementation Cost": 5000,
            "Time-to-Value (Months)": 3,
        }
        calculated = data["Calculated Metrics"]
        assert len(calculated) == 7
        assert calculated["Annual Recurring Savings"] == 195000
        assert calculated["First Year ROI (%)"] == pytest.approx(1718.18, rel=1e-4)

    def test_two_space_indent(self):
        """Test 2-space indentation and integral values without decimals."""
        text = example_exporter().to_json()

        assert '\n  "Input Metrics": {\n    "License Cost per User/Month": 50,' in text

    def test_non_finite_values_are_null(self):
        """Test infinity and NaN serialize as null."""
        inputs = ROIInputs(num_users=0)
        exporter = ResultExporter(inputs, ROIMetrics.invalid())

        data = json.loads(exporter.to_json())

        assert all(v is None for v in data["Calculated Metrics"].values())
        assert data["Input Metrics"]["Number of Users"] == 0

    def test_infinite_roi_is_null(self):
        """Test +inf ROI serializes as null."""
        inputs = ROIInputs(license_cost_per_user=0.0, implementation_cost=0.0)
        exporter = ResultExporter(inputs, MetricsCalculator().calculate(inputs))

        data = json.loads(exporter.to_json())

        assert data["Calculated Metrics"]["First Year ROI (%)"] is None


class TestCSVExport:
    """Tests for CSV export."""

    def test_rows(self):
        """Test header plus 13 data rows."""
        lines = example_exporter().to_csv().split("\n")

        assert len(lines) == 14
        assert lines[0] == "Metric,Value"
        assert lines[1] == "License Cost per User/Month,50"
        assert lines[2] == "Number of Users,10"
        assert lines[7] == "Annual Recurring Savings,195000"
        assert lines[13] == "Total Savings Over 3 Years,536250"

        label, value = lines[11].split(",")
        assert label == "First Year ROI (%)"
        assert float(value) == pytest.approx(1718.18, rel=1e-4)

    def test_non_finite_values(self):
        """Test infinite and NaN values are written literally."""
        inputs = ROIInputs(num_users=1, license_cost_per_user=0.0, hours_saved_per_user_per_week=0.0)
        exporter = ResultExporter(inputs, MetricsCalculator().calculate(inputs))

        rows = dict(line.split(",") for line in exporter.to_csv().split("\n")[1:])

        assert rows["Payback Period (Months)"] == "Infinity"

        invalid = ResultExporter(ROIInputs(num_users=0), ROIMetrics.invalid())
        rows = dict(line.split(",") for line in invalid.to_csv().split("\n")[1:])

        assert rows["Annual Recurring Savings"] == "NaN"


class TestPDFExport:
    """Tests for the PDF report."""

    def test_report_lines_layout(self):
        """Test fixed offsets and formatted text."""
        lines = example_exporter().report_lines()

        assert [offset for offset, _ in lines] == [40, 50, 60, 70, 80, 90, 100]
        assert lines[0][1] == "Annual Recurring Savings: $195,000"
        assert lines[4][1] == "First Year ROI: 1718.2%"
        assert lines[5][1] == "Payback Period (Months): 3.3"

    def test_report_lines_sentinels(self):
        """Test N/A and Never in the report."""
        invalid = ResultExporter(ROIInputs(num_users=0), ROIMetrics.invalid())
        assert all(text.endswith("N/A") for _, text in invalid.report_lines())

        inputs = ROIInputs(license_cost_per_user=5000.0)
        never = ResultExporter(inputs, MetricsCalculator().calculate(inputs))
        assert never.report_lines()[5][1] == "Payback Period (Months): Never"

    def test_pdf_bytes(self):
        """Test a PDF document is produced."""
        pdf = example_exporter().to_pdf()

        assert pdf.startswith(b"%PDF")


class TestFileOutput:
    """Tests for writing export files."""

    def test_write_all(self, tmp_path):
        """Test all three files are written with default names."""
        paths = example_exporter().write_all(tmp_path / "exports")

        assert paths["json"].name == JSON_FILENAME
        assert paths["csv"].name == CSV_FILENAME
        assert paths["pdf"].name == PDF_FILENAME
        for path in paths.values():
            assert path.exists()
            assert path.stat().st_size > 0

        data = json.loads(paths["json"].read_text(encoding="utf-8"))
        assert "Calculated Metrics" in data

    def test_write_error_propagates(self, tmp_path):
        """Test an unwritable target raises OSError."""
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("x")

        with pytest.raises(OSError):
            example_exporter().write_json(blocker / JSON_FILENAME)
