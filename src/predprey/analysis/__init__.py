"""
Analysis module for plotting and exporting benchmark results.
"""

from .plotting import plot_fear_and_cohesion, plot_cumulative_kills
from .export import (
    export_results_to_csv,
    export_timeseries_to_csv,
    export_benchmark_report,
    calculate_aggregate_stats,
)

__all__ = [
    'plot_fear_and_cohesion',
    'plot_cumulative_kills',
    'export_results_to_csv',
    'export_timeseries_to_csv',
    'export_benchmark_report',
    'calculate_aggregate_stats',
]
