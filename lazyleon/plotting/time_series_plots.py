"""Line plots of a single variable over time."""

import matplotlib.pyplot as plt
import pandas as pd
import plotly.graph_objects as go
import seaborn as sns
from matplotlib.figure import Figure

from lazyleon.utils.plotting_config import MINIMAL_PLOT_CFG, PlottingConfig


DEFAULT_TITLE = "Variable over Time"
X_LABEL = "Date"
Y_LABEL = "Value"


def plot_variable_over_time(
    data: pd.DataFrame,
    date_column: str,
    variable_column: str,
    title: str = DEFAULT_TITLE,
    *,
    figsize: tuple[int, int] = (10, 5),
    config: PlottingConfig | None = None,
) -> Figure:
    """Plot the temporal evolution of a variable as a line chart.

    The axes are always labelled ``"Date"`` and ``"Value"``, whatever the
    column names are. Rows are connected in date order without aggregation.

    Args:
        data: DataFrame containing both columns.
        date_column: Date/time-like column mapped to the horizontal axis.
        variable_column: Numeric column mapped to the vertical axis.
        title: Plot title.
        figsize: Figure size (width, height).
        config: Plotting style, defaults to the minimal theme ``MINIMAL_PLOT_CFG``.

    Returns:
        matplotlib Figure with a single Axes.
    """
    cfg = config or MINIMAL_PLOT_CFG
    with cfg.apply():
        fig, ax = plt.subplots(figsize=figsize)
        sns.lineplot(data=data, x=date_column, y=variable_column, estimator=None, ax=ax)
        ax.set_title(title)
        ax.set_xlabel(X_LABEL)
        ax.set_ylabel(Y_LABEL)
        fig.autofmt_xdate()
        fig.tight_layout()

    return fig


def plot_variable_over_time_plotly(
    data: pd.DataFrame,
    date_column: str,
    variable_column: str,
    title: str = DEFAULT_TITLE,
    *,
    height: int = 450,
    width: int = 900,
) -> go.Figure:
    """Interactive counterpart of :func:`plot_variable_over_time`."""
    ordered = data.sort_values(date_column)
    fig = go.Figure(
        go.Scatter(
            x=ordered[date_column],
            y=ordered[variable_column],
            mode="lines",
            name=variable_column,
        ),
    )
    fig.update_xaxes(title=X_LABEL)
    fig.update_yaxes(title=Y_LABEL)
    fig.update_layout(
        title=title,
        width=width,
        height=height,
        template=MINIMAL_PLOT_CFG.plotly_template,
    )
    return fig
