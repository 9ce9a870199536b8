"""Export components: file encoders and chart rendering."""

from .exporters import ResultExporter
from .chart import ProjectionChart

__all__ = ["ResultExporter", "ProjectionChart"]
