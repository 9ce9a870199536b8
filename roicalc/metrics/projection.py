"""
Three-year cost/savings projection feeding the chart.
"""

from typing import List

import pandas as pd

from roicalc.core.types import ROIMetrics, ProjectionPoint, PROJECTION_YEARS


def build_projection(metrics: ROIMetrics) -> List[ProjectionPoint]:
    """
    Build the yearly chart series.

    Year 1 carries the implementation cost and the ramp-up adjusted
    savings; later years are at steady state. Invalid metrics collapse
    to zero-valued points so no NaN reaches the chart.

    Args:
        metrics: Calculated metrics (possibly the invalid sentinel)

    Returns:
        One ProjectionPoint per projected year
    """
    if not metrics.is_valid:
        return [ProjectionPoint(year, 0.0, 0.0, 0.0) for year in range(1, PROJECTION_YEARS + 1)]

    points = [
        ProjectionPoint(
            year=1,
            cost=metrics.first_year_total_cost,
            savings=metrics.first_year_adjusted_savings,
            net_value=metrics.first_year_adjusted_savings - metrics.first_year_total_cost,
        )
    ]
    for year in range(2, PROJECTION_YEARS + 1):
        points.append(ProjectionPoint(
            year=year,
            cost=metrics.annual_license_cost,
            savings=metrics.annual_savings,
            net_value=metrics.annual_net_value,
        ))

    return points


def projection_frame(metrics: ROIMetrics) -> pd.DataFrame:
    """
    Projection as a DataFrame indexed by year label.

    Columns: Cost, Savings, Net Value, Cumulative Net Value.
    """
    points = build_projection(metrics)

    df = pd.DataFrame(
        {
            "Cost": [p.cost for p in points],
            "Savings": [p.savings for p in points],
            "Net Value": [p.net_value for p in points],
        },
        index=pd.Index([p.label for p in points], name="Year"),
    )
    df["Cumulative Net Value"] = df["Net Value"].cumsum()

    return df
