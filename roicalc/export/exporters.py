"""
File exports of ROI results: JSON, CSV and a one-page PDF report.
"""

import csv
import io
import json
import logging
import math
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from roicalc.core.types import ROIInputs, ROIMetrics
from roicalc.metrics.reporter import Reporter

logger = logging.getLogger(__name__)


JSON_FILENAME = "saas-roi-calculation.json"
CSV_FILENAME = "saas-roi-results.csv"
PDF_FILENAME = "saas-roi-report.pdf"

PDF_TITLE = "SaaS ROI Calculator Results"
PDF_LEFT_MM = 10
PDF_TITLE_OFFSET_MM = 20
PDF_FIRST_LINE_MM = 40
PDF_LINE_SPACING_MM = 10


def _plain_number(value: float) -> Union[int, float]:
    """Integral floats as int so 50.0 is written as 50."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _json_value(value: float):
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return _plain_number(value)


def _csv_value(value: float) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
    return str(_plain_number(value))


class ResultExporter:
    """
    Serializes one scenario (inputs plus calculated metrics).

    Exports:
    - JSON: labelled input and output groups
    - CSV: Metric,Value rows
    - PDF: fixed layout text report
    """

    def __init__(
        self,
        inputs: ROIInputs,
        metrics: ROIMetrics,
        reporter: Optional[Reporter] = None,
    ):
        """
        Initialize exporter.

        Args:
            inputs: Scenario inputs
            metrics: Metrics for those inputs (may be the invalid sentinel)
            reporter: Reporter used for labels and display formatting
        """
        self.inputs = inputs
        self.metrics = metrics
        self.reporter = reporter or Reporter()

    def _report(self) -> Dict[str, Dict[str, float]]:
        return self.reporter.generate_report_dict(self.inputs, self.metrics)

    def to_json(self) -> str:
        """JSON document with 2-space indentation; non-finite values become null."""
        report = {
            group: {label: _json_value(value) for label, value in values.items()}
            for group, values in self._report().items()
        }
        return json.dumps(report, indent=2)

    def to_csv(self) -> str:
        """Header row plus one row per input and per output metric."""
        buf = io.StringIO()
        writer = csv.writer(buf, lineterminator="\n")
        writer.writerow(["Metric", "Value"])

        for values in self._report().values():
            for label, value in values.items():
                writer.writerow([label, _csv_value(value)])

        return buf.getvalue().rstrip("\n")

    def report_lines(self) -> List[Tuple[int, str]]:
        """
        PDF body as (offset from top in mm, text) pairs.

        The title is not included.
        """
        lines = []
        offset = PDF_FIRST_LINE_MM
        for label, value in self.reporter.formatted_metrics(self.metrics).items():
            # ROI label carries its own unit in the value
            label = label.replace(" (%)", "")
            lines.append((offset, f"{label}: {value}"))
            offset += PDF_LINE_SPACING_MM
        return lines

    def to_pdf(self) -> bytes:
        """Render the PDF report in memory."""
        buf = io.BytesIO()
        c = canvas.Canvas(buf, pagesize=A4)
        _, height = A4

        c.setTitle(PDF_TITLE)
        c.setFont("Helvetica", 16)
        c.drawString(PDF_LEFT_MM * mm, height - PDF_TITLE_OFFSET_MM * mm, PDF_TITLE)

        c.setFont("Helvetica", 12)
        for offset, text in self.report_lines():
            c.drawString(PDF_LEFT_MM * mm, height - offset * mm, text)

        c.showPage()
        c.save()
        return buf.getvalue()

    def write_json(self, path: Union[str, Path]) -> Path:
        return self._write(path, self.to_json())

    def write_csv(self, path: Union[str, Path]) -> Path:
        return self._write(path, self.to_csv())

    def write_pdf(self, path: Union[str, Path]) -> Path:
        return self._write(path, self.to_pdf())

    def write_all(self, output_dir: Union[str, Path]) -> Dict[str, Path]:
        """
        Write JSON, CSV and PDF exports with their default file names.

        Args:
            output_dir: Target directory (created if missing)

        Returns:
            Dict of format name to written path
        """
        output_dir = Path(output_dir)
        return {
            "json": self.write_json(output_dir / JSON_FILENAME),
            "csv": self.write_csv(output_dir / CSV_FILENAME),
            "pdf": self.write_pdf(output_dir / PDF_FILENAME),
        }

    def _write(self, path: Union[str, Path], content: Union[str, bytes]) -> Path:
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.error(f"Error writing {path}: {e}")
            raise

        logger.info(f"Exported results to {path}")
        return path
