"""Convenience helpers for exploratory data analysis with pandas."""

from .data import DEFAULT_NAMESPACE, DatasetNamespace, add_binary_column, add_binary_column_in
from .plotting import (
    plot_correlation,
    plot_correlation_plotly,
    plot_variable_over_time,
    plot_variable_over_time_plotly,
)
from .utils import PlottingConfig


__all__ = [
    "DEFAULT_NAMESPACE",
    "DatasetNamespace",
    "PlottingConfig",
    "add_binary_column",
    "add_binary_column_in",
    "plot_correlation",
    "plot_correlation_plotly",
    "plot_variable_over_time",
    "plot_variable_over_time_plotly",
]
