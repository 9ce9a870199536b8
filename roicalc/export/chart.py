"""
Projection chart rendering with matplotlib.
Grouped cost/savings bars per year with a net value line.
"""

import logging
from pathlib import Path
from typing import Union

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.ticker import FuncFormatter

from roicalc.core.types import ROIMetrics
from roicalc.metrics.projection import projection_frame
from roicalc.metrics.reporter import format_axis_tick

logger = logging.getLogger(__name__)


CHART_FILENAME = "saas-roi-projection.png"

COST_BAR_COLOR = "#4299E1"
SAVINGS_BAR_COLOR = "#48BB78"
NET_VALUE_LINE_COLOR = "#C792EA"


class ProjectionChart:
    """Renders the three-year projection of one scenario."""

    def __init__(
        self,
        metrics: ROIMetrics,
        title: str = "3-Year Financial Projection",
        figsize: tuple = (10, 5),
    ):
        self.metrics = metrics
        self.title = title
        self.figsize = figsize

    def figure(self) -> plt.Figure:
        """Build the matplotlib figure (caller closes it)."""
        df = projection_frame(self.metrics)
        x = np.arange(len(df))
        width = 0.35

        fig, ax = plt.subplots(figsize=self.figsize)

        ax.bar(x - width / 2, df["Cost"], width, label="Total Cost", color=COST_BAR_COLOR)
        ax.bar(x + width / 2, df["Savings"], width, label="Total Savings", color=SAVINGS_BAR_COLOR)
        ax.plot(
            x, df["Net Value"],
            color=NET_VALUE_LINE_COLOR, linewidth=3, marker="o", label="Net Value",
        )

        ax.set_xticks(x)
        ax.set_xticklabels(df.index)
        ax.yaxis.set_major_formatter(FuncFormatter(lambda value, _: format_axis_tick(value)))
        ax.grid(True, linestyle="--", alpha=0.5)
        ax.set_title(self.title, fontweight="bold")
        ax.legend()

        fig.tight_layout()
        return fig

    def save(self, path: Union[str, Path], dpi: int = 150) -> Path:
        """
        Render the chart to an image file.

        Args:
            path: Output file (format from extension, e.g. .png)
            dpi: Resolution

        Returns:
            Written path
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        fig = self.figure()
        try:
            fig.savefig(path, dpi=dpi, bbox_inches="tight")
        except OSError as e:
            logger.error(f"Error saving chart {path}: {e}")
            raise
        finally:
            plt.close(fig)

        logger.info(f"Saved projection chart to {path}")
        return path
