"""Plotting utilities for exploratory data analysis."""

from .correlation_plots import plot_correlation, plot_correlation_plotly
from .time_series_plots import plot_variable_over_time, plot_variable_over_time_plotly


__all__ = [
    "plot_correlation",
    "plot_correlation_plotly",
    "plot_variable_over_time",
    "plot_variable_over_time_plotly",
]
