"""Scatter plots with a linear trend line for two variables."""

import matplotlib.pyplot as plt
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import seaborn as sns
from matplotlib.figure import Figure

from lazyleon.utils.plotting_config import DEFAULT_PLOT_CFG, PlottingConfig


def correlation_title(x_var: str, y_var: str) -> str:
    """Title used by the correlation plots."""
    return f"Correlation between {x_var} and {y_var}"


def plot_correlation(
    data: pd.DataFrame,
    x_var: str,
    y_var: str,
    *,
    figsize: tuple[int, int] = (8, 6),
    config: PlottingConfig | None = None,
) -> Figure:
    """Scatter plot of two columns with an overlaid least-squares line.

    Wraps [:func:`seaborn.regplot`](https://seaborn.pydata.org/generated/seaborn.regplot.html)
    with ``ci=None`` so that no confidence band is drawn.

    Args:
        data: DataFrame holding both columns.
        x_var: Column mapped to the horizontal axis.
        y_var: Column mapped to the vertical axis.
        figsize: Figure size (width, height).
        config: Plotting style, defaults to ``DEFAULT_PLOT_CFG``.

    Returns:
        matplotlib Figure with a single Axes.

    Missing or non-numeric columns are not checked here; the error raised by
    pandas/seaborn propagates unchanged.

    Example:
        >>> df = pd.DataFrame({"x": [1.0, 2.0, 3.0], "y": [2.0, 4.1, 5.9]})
        >>> fig = plot_correlation(df, "x", "y")
    """
    cfg = config or DEFAULT_PLOT_CFG
    with cfg.apply():
        fig, ax = plt.subplots(figsize=figsize)
        sns.regplot(
            data=data,
            x=x_var,
            y=y_var,
            ci=None,
            ax=ax,
            line_kws={"linewidth": 2},
        )
        ax.set_xlabel(x_var)
        ax.set_ylabel(y_var)
        ax.set_title(correlation_title(x_var, y_var))
        fig.tight_layout()

    return fig


def plot_correlation_plotly(
    data: pd.DataFrame,
    x_var: str,
    y_var: str,
    *,
    height: int = 500,
    width: int = 700,
) -> go.Figure:
    """Interactive scatter plot with an OLS trend line.

    Implemented with [:func:`plotly.express.scatter`](https://plotly.com/python/linear-fits/)
    using ``trendline="ols"`` (fitted by statsmodels).
    """
    fig = px.scatter(data, x=x_var, y=y_var, trendline="ols")
    fig.update_xaxes(title=x_var)
    fig.update_yaxes(title=y_var)
    fig.update_layout(
        title=correlation_title(x_var, y_var),
        width=width,
        height=height,
        template="plotly_white",
    )
    return fig
